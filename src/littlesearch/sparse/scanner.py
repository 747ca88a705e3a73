from __future__ import annotations
from typing import Callable, Dict, Iterable, Optional

from littlesearch.sparse.index import Occurrence


def scan(
    document_id: str,
    tokens: Iterable[str],
    normalizer: Callable[[str], Optional[str]],
) -> Dict[str, Occurrence]:
    """
    Count keywords of one document.
    returns: {keyword: Occurrence(document_id, frequency)}
    """
    counts: Dict[str, Occurrence] = {}
    for token in tokens:
        keyword = normalizer(token)
        if keyword is None:
            continue
        occ = counts.get(keyword)
        if occ is None:
            counts[keyword] = Occurrence(document_id, 1)
        else:
            occ.frequency += 1
    return counts
