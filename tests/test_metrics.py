from littlesearch.eval.metrics import dcg_at_k, ndcg_at_k, mrr_at_k, evaluate_run

def test_metrics_basic():
    rels = [1, 0, 0]
    assert dcg_at_k(rels, 3) > 0
    assert 0 <= ndcg_at_k(rels, 3) <= 1
    assert mrr_at_k(rels, 3) == 1.0
    assert mrr_at_k([0, 0, 2], 3) == 1.0 / 3

def test_ndcg_uses_all_judgements():
    assert ndcg_at_k([1], 5) == 1.0
    assert ndcg_at_k([1], 5, [1, 1]) < 1.0

def test_evaluate_run():
    run = {"q1": ["a", "b"], "q2": []}
    qrels = {"q1": {"a": 1}, "q2": {"c": 1}}
    metrics = evaluate_run(run, qrels, k=5)
    assert metrics["MRR@5"] == 0.5
    assert metrics["nDCG@5"] == 0.5

def test_evaluate_empty_run():
    assert evaluate_run({}, {}, k=5) == {"nDCG@5": 0.0, "MRR@5": 0.0}
