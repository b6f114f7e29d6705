"""Normalization package: raw scrape results to canonical records."""

from scrapesync.normalize.articles import build_batch, normalize_article
from scrapesync.normalize.errors import HeadingDepthError, NormalizationError
from scrapesync.normalize.headings import normalize_headings
from scrapesync.normalize.links import normalize_link
from scrapesync.normalize.models import (
    ArticleRecord,
    HeadingNode,
    LinkRecord,
    LinkStatus,
    SubmissionBatch,
)

__all__ = [
    "normalize_headings",
    "normalize_link",
    "normalize_article",
    "build_batch",
    "NormalizationError",
    "HeadingDepthError",
    "HeadingNode",
    "LinkStatus",
    "LinkRecord",
    "ArticleRecord",
    "SubmissionBatch",
]
