"""Canonical records produced by the normalizers.

These are plain frozen dataclasses.  Ordered collections are tuples so a
record cannot be mutated after normalization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class HeadingNode:
    tag: str
    text: str
    children: tuple[HeadingNode, ...] = ()


@dataclass(frozen=True)
class LinkStatus:
    """HTTP status observed for a link.

    ``code == 0`` and ``redirect_url == ""`` mean *unknown*, not a real
    response.
    """

    code: int = 0
    redirect_url: str = ""


@dataclass(frozen=True)
class LinkRecord:
    url: str
    anchor_text: str | None = None
    is_follow: bool = False
    status: LinkStatus = field(default_factory=LinkStatus)


@dataclass(frozen=True)
class ArticleRecord:
    article_url: str
    meta_title: str | None = None
    meta_description: str | None = None
    is_indexable: bool = False
    internal_links: tuple[LinkRecord, ...] = ()
    outer_links: tuple[LinkRecord, ...] = ()
    headings: tuple[HeadingNode, ...] = ()
    json_ld: tuple[Any, ...] = ()


@dataclass(frozen=True)
class SubmissionBatch:
    project_id: int
    articles: tuple[ArticleRecord, ...] = ()
