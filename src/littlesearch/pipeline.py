from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Tuple

from littlesearch.config import PUNCTUATION
from littlesearch.io import file_documents, load_noise_words
from littlesearch.sparse.index import IndexBuilder, KeywordIndex
from littlesearch.sparse.normalize import Normalizer
from littlesearch.sparse.scanner import scan

logger = logging.getLogger(__name__)


def build_index(
    documents: Iterable[Tuple[str, Iterable[str]]],
    noise_words: Iterable[str],
    punctuation: str = PUNCTUATION,
) -> KeywordIndex:
    """
    documents: [(doc_id, tokens), ...]; tokens may be a lazy iterator
    Nothing is returned until every document has been merged, so a source
    error leaves no index behind.
    """
    normalizer = Normalizer(noise_words, punctuation)
    builder = IndexBuilder()
    n_docs = 0
    for doc_id, tokens in documents:
        builder.merge(scan(doc_id, tokens, normalizer))
        n_docs += 1
    logger.info("indexed %d documents", n_docs)
    return builder.build()


def make_index(
    docs_file: str | Path,
    noise_words_file: str | Path,
    punctuation: str = PUNCTUATION,
) -> KeywordIndex:
    """Index every document listed in docs_file, skipping the words in noise_words_file."""
    noise = load_noise_words(noise_words_file)
    return build_index(file_documents(docs_file), noise, punctuation)
