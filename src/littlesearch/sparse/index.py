from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class Occurrence:
    document: str
    frequency: int

    def __repr__(self) -> str:
        return f"({self.document},{self.frequency})"


def insert_last_occurrence(occs: List[Occurrence]) -> Optional[List[int]]:
    """
    Move the last element of occs into place; occs[0..n-2] must already be in
    descending frequency order. The spot is found by binary search and the new
    occurrence goes in front of an entry with the same frequency.

    returns: midpoints probed by the search, in order; None if occs has one element.
    """
    if len(occs) == 1:
        return None

    last = occs.pop()
    freq = last.frequency
    probes: List[int] = []

    # hi bounds the search from the head of the list, low from the tail
    hi, low, mid = 0, len(occs) - 1, 0
    while hi <= low:
        mid = (low + hi) // 2
        probes.append(mid)
        end = occs[mid].frequency
        if end == freq:
            break
        if end < freq:
            low = mid - 1
        else:
            hi = mid + 1
            mid += 1

    occs.insert(mid, last)
    return probes


class KeywordIndex(Mapping):
    """Read-only view over keyword -> occurrences in descending frequency."""

    def __init__(self, entries: Dict[str, List[Occurrence]]):
        self._entries = entries

    def __getitem__(self, keyword: str) -> Tuple[Occurrence, ...]:
        return tuple(self._entries[keyword])

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> Dict[str, float]:
        n_occ = sum(len(v) for v in self._entries.values())
        docs = {o.document for v in self._entries.values() for o in v}
        return {
            "keywords": len(self._entries),
            "occurrences": n_occ,
            "documents": len(docs),
            "avg_postings": n_occ / len(self._entries) if self._entries else 0.0,
        }


class IndexBuilder:
    def __init__(self):
        self._entries: Dict[str, List[Occurrence]] = {}
        self._frozen = False

    def merge(self, counts: Dict[str, Occurrence]) -> Dict[str, List[int]]:
        """
        Merge one document's keyword counts into the index.
        returns: {keyword: probe trace} for every keyword that was already indexed
        """
        if self._frozen:
            raise RuntimeError("index already built; merge is not allowed after build()")
        traces: Dict[str, List[int]] = {}
        for keyword, occ in counts.items():
            occs = self._entries.get(keyword)
            if occs is None:
                self._entries[keyword] = [occ]
                continue
            occs.append(occ)
            probes = insert_last_occurrence(occs)
            traces[keyword] = probes
            logger.debug("insert %r %r -> probes %s", keyword, occ, probes)
        return traces

    def build(self) -> KeywordIndex:
        self._frozen = True
        logger.info("index built with %d keywords", len(self._entries))
        return KeywordIndex(self._entries)
