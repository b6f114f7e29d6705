"""Wire schemas for the persistence endpoint.

The backend speaks camelCase JSON; these pydantic models map the canonical
dataclasses onto that shape and parse the structured error body.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from scrapesync.normalize.models import (
    ArticleRecord,
    HeadingNode,
    LinkRecord,
    SubmissionBatch,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LinkStatusPayload(_CamelModel):
    code: int
    redirect_url: str


class LinkPayload(_CamelModel):
    link_url: str
    anchor_text: str | None
    is_follow: bool
    status: LinkStatusPayload

    @classmethod
    def from_record(cls, link: LinkRecord) -> LinkPayload:
        return cls(
            link_url=link.url,
            anchor_text=link.anchor_text,
            is_follow=link.is_follow,
            status=LinkStatusPayload(
                code=link.status.code, redirect_url=link.status.redirect_url
            ),
        )


class HeadingPayload(_CamelModel):
    tag: str
    text: str
    children: list[HeadingPayload]

    @classmethod
    def from_node(cls, node: HeadingNode) -> HeadingPayload:
        # Iterative post-order build; the outline was already depth-checked
        # during normalization but is converted without Python recursion too.
        built: dict[int, HeadingPayload] = {}
        stack: list[tuple[HeadingNode, bool]] = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded or not current.children:
                built[id(current)] = cls(
                    tag=current.tag,
                    text=current.text,
                    children=[built[id(child)] for child in current.children],
                )
                continue
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(current.children))
        return built[id(node)]


class ArticlePayload(_CamelModel):
    article_url: str
    meta_title: str | None
    meta_description: str | None
    is_indexable: bool
    internal_links: list[LinkPayload]
    outer_links: list[LinkPayload]
    headings: list[HeadingPayload]
    json_ld: list[Any]

    @classmethod
    def from_record(cls, article: ArticleRecord) -> ArticlePayload:
        return cls(
            article_url=article.article_url,
            meta_title=article.meta_title,
            meta_description=article.meta_description,
            is_indexable=article.is_indexable,
            internal_links=[LinkPayload.from_record(link) for link in article.internal_links],
            outer_links=[LinkPayload.from_record(link) for link in article.outer_links],
            headings=[HeadingPayload.from_node(h) for h in article.headings],
            json_ld=list(article.json_ld),
        )


class SubmissionRequest(_CamelModel):
    project_id: int
    articles: list[ArticlePayload]

    @classmethod
    def from_batch(cls, batch: SubmissionBatch) -> SubmissionRequest:
        return cls(
            project_id=batch.project_id,
            articles=[ArticlePayload.from_record(a) for a in batch.articles],
        )

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready request body (camelCase keys, nulls kept)."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorBody(BaseModel):
    """Structured error returned by the backend on a rejected request.

    ``message`` may be a list of validation messages; FastAPI-style
    backends use ``detail`` instead.
    """

    message: str | list[str] | None = None
    detail: Any = None

    @property
    def text(self) -> str | None:
        message = self.message
        if isinstance(message, list):
            message = "; ".join(m.strip() for m in message if m.strip())
        for value in (message, self.detail):
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None
