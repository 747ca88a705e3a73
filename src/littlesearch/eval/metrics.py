from typing import List, Dict
import numpy as np

def dcg_at_k(relevances: List[int], k: int) -> float:
    """Compute Discounted Cumulative Gain (DCG) at rank k."""
    relevances = np.array(relevances, dtype=float)[:k]
    if relevances.size == 0:
        return 0.0
    discounts = np.log2(np.arange(2, relevances.size + 2))
    return float(np.sum((2**relevances - 1) / discounts))

def ndcg_at_k(relevances: List[int], k: int, n_relevant: List[int] | None = None) -> float:
    """
    Normalized DCG at rank k. The ideal ranking is built from n_relevant
    (all judged relevances for the query) when given, else from relevances.
    """
    dcg = dcg_at_k(relevances, k)
    ideal = dcg_at_k(sorted(n_relevant if n_relevant is not None else relevances, reverse=True), k)
    return dcg / ideal if ideal > 0 else 0.0

def mrr_at_k(relevances: List[int], k: int) -> float:
    """Reciprocal rank of the first relevant document within k."""
    for i, rel in enumerate(relevances[:k], start=1):
        if rel > 0:
            return 1.0 / i
    return 0.0

def evaluate_run(run: Dict[str, List[str]], qrels: Dict[str, Dict[str, int]], k: int = 5) -> Dict[str, float]:
    """
    run: {query_id: [doc_id1, doc_id2, ...]}
    qrels: {query_id: {doc_id: relevance}}
    """
    ndcgs, mrrs = [], []
    for qid, docs in run.items():
        judged = qrels.get(qid, {})
        rels = [judged.get(doc, 0) for doc in docs]
        ndcgs.append(ndcg_at_k(rels, k, list(judged.values())))
        mrrs.append(mrr_at_k(rels, k))
    if not run:
        return {f"nDCG@{k}": 0.0, f"MRR@{k}": 0.0}
    return {
        f"nDCG@{k}": float(np.mean(ndcgs)),
        f"MRR@{k}": float(np.mean(mrrs)),
    }
