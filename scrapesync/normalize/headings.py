"""Heading outline normalization.

Raw headings arrive as nested ``{tag, text, children?}`` objects.  The tree
is walked with an explicit stack instead of Python recursion, and nesting is
bounded by the configured depth, itself capped at ``DEPTH_CEILING`` so the
outline always fits through JSON serialization.  A node that appears among
its own ancestors (a cyclic producer bug) is rejected immediately.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from scrapesync.config import settings
from scrapesync.normalize._fields import as_mapping, as_sequence, optional_str, require_str
from scrapesync.normalize.errors import HeadingDepthError
from scrapesync.normalize.models import HeadingNode

# Deepest outline the wire encoders (pydantic-core, json) handle safely.
DEPTH_CEILING = 200


@dataclass
class _Level:
    """One sibling list being normalized."""

    items: Sequence[Any]
    locator: str
    depth: int
    ancestors: frozenset[int]
    # (tag, text) of the heading these items belong to; None for the roots
    owner: tuple[str, str] | None = None
    done: list[HeadingNode] = field(default_factory=list)
    index: int = 0


def normalize_headings(
    raw: Sequence[Any] | None,
    *,
    max_depth: int | None = None,
    locator: str = "headings",
) -> tuple[HeadingNode, ...]:
    """Convert a raw heading sequence into a tuple of :class:`HeadingNode`.

    Args:
        raw: Sequence of raw heading objects, or ``None`` for no headings.
        max_depth: Deepest nesting level allowed (top-level nodes are level
            1).  Defaults to ``settings.max_heading_depth``; values above
            ``DEPTH_CEILING`` are lowered to it.
        locator: Prefix used to identify failing nodes in error messages.

    Raises:
        NormalizationError: A node is not an object or lacks a ``tag``.
        HeadingDepthError: The tree is nested too deep or contains a cycle.
    """
    requested = settings.max_heading_depth if max_depth is None else max_depth
    limit = min(requested, DEPTH_CEILING)
    items = as_sequence(raw, locator)

    stack = [_Level(items=items, locator=locator, depth=1, ancestors=frozenset())]
    while True:
        level = stack[-1]

        if level.index >= len(level.items):
            stack.pop()
            children = tuple(level.done)
            if level.owner is None:
                return children
            tag, text = level.owner
            parent = stack[-1]
            parent.done.append(HeadingNode(tag=tag, text=text, children=children))
            parent.index += 1
            continue

        raw_node = level.items[level.index]
        node_locator = f"{level.locator}[{level.index}]"
        if id(raw_node) in level.ancestors:
            raise HeadingDepthError(
                "heading contains itself (cyclic outline)", node_locator, "children"
            )

        node = as_mapping(raw_node, node_locator)
        tag = require_str(node, "tag", node_locator)
        text = optional_str(node, "text", node_locator) or ""
        child_items = as_sequence(node.get("children"), node_locator, "children")

        if not child_items:
            level.done.append(HeadingNode(tag=tag, text=text, children=()))
            level.index += 1
            continue

        if level.depth + 1 > limit:
            raise HeadingDepthError(
                f"heading outline is nested deeper than {limit} levels",
                node_locator,
                "children",
            )

        stack.append(
            _Level(
                items=child_items,
                locator=f"{node_locator}.children",
                depth=level.depth + 1,
                ancestors=level.ancestors | {id(raw_node)},
                owner=(tag, text),
            )
        )
