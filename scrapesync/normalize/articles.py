"""Article normalization and batch assembly.

``normalize_article`` composes the link and heading normalizers into one
canonical :class:`ArticleRecord`.  ``build_batch`` applies it to a whole
scrape result and refuses to produce a partial batch.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from scrapesync.normalize._fields import (
    as_mapping,
    as_sequence,
    optional_bool,
    optional_str,
    require_str,
)
from scrapesync.normalize.errors import NormalizationError
from scrapesync.normalize.headings import normalize_headings
from scrapesync.normalize.links import normalize_link
from scrapesync.normalize.models import ArticleRecord, LinkRecord, SubmissionBatch


def _normalize_links(
    article: Mapping[str, Any], key: str, locator: str
) -> tuple[LinkRecord, ...]:
    items = as_sequence(article.get(key), locator, key)
    return tuple(
        normalize_link(item, locator=f"{locator}.{key}[{i}]")
        for i, item in enumerate(items)
    )


def normalize_article(raw: Mapping[str, Any], *, locator: str = "article") -> ArticleRecord:
    """Convert one raw scrape result into an :class:`ArticleRecord`.

    The producer's client-side ``id`` is dropped.  ``metaTitle`` and
    ``metaDescription`` pass through untouched (``None`` stays ``None``).
    ``jsonLd`` blocks are deep-copied and otherwise left as-is.

    Raises:
        NormalizationError: ``articleUrl`` is missing, or any nested link or
            heading is malformed.
    """
    article = as_mapping(raw, locator)
    json_ld = as_sequence(article.get("jsonLd"), locator, "jsonLd")

    return ArticleRecord(
        article_url=require_str(article, "articleUrl", locator),
        meta_title=optional_str(article, "metaTitle", locator),
        meta_description=optional_str(article, "metaDescription", locator),
        is_indexable=optional_bool(article, "isIndexable", locator),
        internal_links=_normalize_links(article, "internalLinks", locator),
        outer_links=_normalize_links(article, "outerLinks", locator),
        headings=normalize_headings(
            as_sequence(article.get("headings"), locator, "headings"),
            locator=f"{locator}.headings",
        ),
        json_ld=tuple(copy.deepcopy(block) for block in json_ld),
    )


def build_batch(project_id: int, raw_articles: Sequence[Mapping[str, Any]]) -> SubmissionBatch:
    """Normalize every article in *raw_articles* into one :class:`SubmissionBatch`.

    *raw_articles* is only read.  The first malformed article aborts the
    whole batch so nothing partial is ever submitted.

    Raises:
        NormalizationError: Any article fails to normalize, or *project_id*
            is not an integer.
    """
    if isinstance(project_id, bool) or not isinstance(project_id, int):
        raise NormalizationError(
            f"expected an integer, got {type(project_id).__name__}", "batch", "projectId"
        )
    items = as_sequence(raw_articles, "batch", "articles")
    articles = tuple(
        normalize_article(item, locator=f"articles[{i}]") for i, item in enumerate(items)
    )
    return SubmissionBatch(project_id=project_id, articles=articles)
