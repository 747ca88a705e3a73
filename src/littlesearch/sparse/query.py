from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from littlesearch.config import TOP_K_DEFAULT
from littlesearch.sparse.index import Occurrence
from littlesearch.sparse.normalize import Normalizer

logger = logging.getLogger(__name__)


def _drain(occs: Sequence[Occurrence], start: int, docs: List[str], k: int) -> None:
    i = start
    while i < len(occs) and len(docs) < k:
        if occs[i].document not in docs:
            docs.append(occs[i].document)
        i += 1


def top_k(
    index: Mapping[str, Sequence[Occurrence]],
    kw1: str,
    kw2: str,
    k: int = TOP_K_DEFAULT,
) -> Optional[List[str]]:
    """
    Documents containing kw1 or kw2, highest frequency first, at most k of them.
    Equal frequencies go to kw1. Returns None when neither keyword is indexed.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    first = index.get(kw1)
    second = index.get(kw2)
    if first is None and second is None:
        return None

    docs: List[str] = []
    if first is None or second is None:
        _drain(first if first is not None else second, 0, docs, k)
        return docs

    it1 = it2 = 0
    while it1 < len(first) and it2 < len(second) and len(docs) < k:
        if first[it1].frequency >= second[it2].frequency:
            doc = first[it1].document
            it1 += 1
        else:
            doc = second[it2].document
            it2 += 1
        if doc not in docs:
            docs.append(doc)

    _drain(first, it1, docs, k)
    _drain(second, it2, docs, k)
    return docs


class SearchResponse(BaseModel):
    kw1: str
    kw2: str
    k: int
    matched: bool
    results: List[str]


class KeywordSearcher:
    def __init__(self, index: Mapping[str, Sequence[Occurrence]], normalizer: Normalizer | None = None):
        self.index = index
        # query keywords are folded like document tokens, but noise words are not dropped here
        self.normalizer = normalizer or Normalizer()

    def _keyword(self, raw: str) -> str:
        kw = self.normalizer(raw)
        if kw is None or kw not in self.index:
            logger.debug("query keyword %r not indexed", raw)
        return kw or ""

    def top_k(self, kw1: str, kw2: str, k: int = TOP_K_DEFAULT) -> Optional[List[str]]:
        return top_k(self.index, self._keyword(kw1), self._keyword(kw2), k=k)

    def respond(self, kw1: str, kw2: str, k: int = TOP_K_DEFAULT) -> SearchResponse:
        docs = self.top_k(kw1, kw2, k=k)
        return SearchResponse(kw1=kw1, kw2=kw2, k=k, matched=docs is not None, results=docs or [])

    def search(self, queries: List[Dict[str, str]], k: int = TOP_K_DEFAULT) -> Dict[str, List[str]]:
        """
        queries: [{"id": "...", "kw1": "...", "kw2": "..."}]
        returns: {qid: [doc_id1, doc_id2, ...]}
        """
        run: Dict[str, List[str]] = {}
        for q in queries:
            run[q["id"]] = self.top_k(q["kw1"], q["kw2"], k=k) or []
        return run
