from __future__ import annotations
import logging
import typer
from pathlib import Path
import json

from littlesearch.config import settings
from littlesearch.io import SourceUnavailableError, load_queries, load_qrels
from littlesearch.pipeline import make_index
from littlesearch.sparse.query import KeywordSearcher
from littlesearch.eval.metrics import evaluate_run
from littlesearch.utils import timer, latency_summary

app = typer.Typer(add_completion=False, help="littlesearch: two-keyword search over a small corpus")

DATA = Path(settings.data_dir)


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, help="DEBUG|INFO|WARNING")):
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load(docs_file: str, noise_file: str):
    try:
        return make_index(docs_file, noise_file, settings.punctuation)
    except SourceUnavailableError as e:
        typer.echo(f"[error] {e}", err=True)
        raise typer.Exit(code=1)


@app.command("search")
def search(
    kw1: str = typer.Argument(..., help="First keyword"),
    kw2: str = typer.Argument(..., help="Second keyword"),
    k: int = typer.Option(settings.top_k, help="Max documents to return"),
    docs_file: str = typer.Option(str(DATA / "docs.txt"), help="File listing document names"),
    noise_file: str = typer.Option(str(DATA / "noisewords.txt"), help="File listing noise words"),
    as_json: bool = typer.Option(False, "--json", help="Print the response as JSON"),
):
    index = _load(docs_file, noise_file)
    resp = KeywordSearcher(index).respond(kw1, kw2, k=k)
    if as_json:
        typer.echo(resp.model_dump_json(indent=2))
    elif not resp.matched:
        typer.echo("no matches")
    else:
        for i, doc in enumerate(resp.results, 1):
            typer.echo(f"{i}. {doc}")


@app.command("stats")
def stats(
    docs_file: str = typer.Option(str(DATA / "docs.txt")),
    noise_file: str = typer.Option(str(DATA / "noisewords.txt")),
    show: str = typer.Option("", help="Comma-separated keywords whose occurrences to print"),
):
    index = _load(docs_file, noise_file)
    typer.echo(json.dumps(index.stats(), indent=2))
    for kw in [w.strip() for w in show.split(",") if w.strip()]:
        typer.echo(f"{kw}: {list(index.get(kw, ()))}")


@app.command("evaluate")
def evaluate(
    queries_file: str = typer.Option(str(DATA / "queries.jsonl")),
    qrels_file: str = typer.Option(str(DATA / "qrels.jsonl")),
    docs_file: str = typer.Option(str(DATA / "docs.txt")),
    noise_file: str = typer.Option(str(DATA / "noisewords.txt")),
    k: int = typer.Option(settings.top_k),
    out_dir: str = typer.Option("results", help="Where to write outputs"),
):
    out = Path(out_dir); out.mkdir(parents=True, exist_ok=True)
    index = _load(docs_file, noise_file)
    queries = load_queries(queries_file)
    qrels = load_qrels(qrels_file)

    searcher = KeywordSearcher(index)
    times: dict = {}
    run = {}
    for q in queries:
        with timer(times, "query"):
            run.update(searcher.search([q], k=k))
    metrics = evaluate_run(run, qrels, k=k)
    latency = latency_summary(times.get("query", []))

    (out / "run.json").write_text(json.dumps(run, indent=2), encoding="utf-8")
    (out / "metrics.json").write_text(json.dumps({**metrics, "latency": latency}, indent=2), encoding="utf-8")
    typer.echo(f"[evaluate] {metrics} latency={latency}")


if __name__ == "__main__":
    app()
