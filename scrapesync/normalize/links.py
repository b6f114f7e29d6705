"""Link record normalization."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scrapesync.normalize._fields import (
    as_mapping,
    optional_bool,
    optional_int,
    optional_str,
    require_str,
)
from scrapesync.normalize.models import LinkRecord, LinkStatus


def _normalize_status(raw: Any, locator: str) -> LinkStatus:
    if raw is None:
        return LinkStatus()
    status = as_mapping(raw, f"{locator}.status")
    return LinkStatus(
        code=optional_int(status, "code", f"{locator}.status"),
        redirect_url=optional_str(status, "redirectUrl", f"{locator}.status") or "",
    )


def normalize_link(raw: Mapping[str, Any], *, locator: str = "link") -> LinkRecord:
    """Convert a raw ``{linkUrl, anchorText?, isFollow?, status?}`` object.

    ``anchorText`` keeps the difference between absent (``None``) and empty
    (``""``).  A missing ``isFollow`` is ``False`` and a missing status is
    ``LinkStatus(code=0, redirect_url="")``.

    Raises:
        NormalizationError: ``linkUrl`` is missing or a field has the wrong type.
    """
    link = as_mapping(raw, locator)
    return LinkRecord(
        url=require_str(link, "linkUrl", locator),
        anchor_text=optional_str(link, "anchorText", locator),
        is_follow=optional_bool(link, "isFollow", locator),
        status=_normalize_status(link.get("status"), locator),
    )
