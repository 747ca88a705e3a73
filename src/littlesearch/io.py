from __future__ import annotations
from typing import Dict, Iterator, List, Set, Tuple
import json
from pathlib import Path


class SourceUnavailableError(RuntimeError):
    """A document list, noise-word list or document could not be read."""


def read_lines(path: str | Path) -> Iterator[str]:
    path = Path(path)
    try:
        f = path.open("r", encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(f"cannot read {path}") from e
    with f:
        yield from f


def read_jsonl(path: str | Path):
    for line in read_lines(path):
        if line.strip():
            yield json.loads(line)


def iter_tokens(path: str | Path) -> Iterator[str]:
    """Whitespace-separated tokens of one document, read lazily."""
    for line in read_lines(path):
        yield from line.split()


def load_noise_words(path: str | Path) -> Set[str]:
    return {w.lower() for w in iter_tokens(path)}


def load_doc_list(path: str | Path) -> List[str]:
    return list(iter_tokens(path))


def file_documents(docs_file: str | Path) -> Iterator[Tuple[str, Iterator[str]]]:
    """
    Yield (name, tokens) for every document named in docs_file.
    Names are resolved against the directory holding docs_file.
    """
    docs_file = Path(docs_file)
    for name in load_doc_list(docs_file):
        yield name, iter_tokens(docs_file.parent / name)


def load_jsonl_documents(path: str | Path) -> Iterator[Tuple[str, List[str]]]:
    """[{"id": "...", "text": "..."}] rows as (id, tokens)."""
    for row in read_jsonl(path):
        yield row["id"], row["text"].split()


def load_queries(path: str | Path) -> List[Dict[str, str]]:
    return list(read_jsonl(path))


def load_qrels(path: str | Path) -> Dict[str, Dict[str, int]]:
    """Return {qid: {did: rel}}."""
    qrels: Dict[str, Dict[str, int]] = {}
    for row in read_jsonl(path):
        qid = row["qid"]
        did = row["did"]
        rel = int(row.get("rel", 0))
        qrels.setdefault(qid, {})[did] = rel
    return qrels
