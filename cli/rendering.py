"""Text rendering of scrape results for the CLI."""

from __future__ import annotations

from typing import List, Tuple

from scrapesync.normalize.models import ArticleRecord, HeadingNode

NO_TITLE = "(no title)"
NO_CONTENT = "(no content)"


def render_summary(index: int, article: ArticleRecord) -> str:
    """Render one result card: title, URL, description and a footer line."""
    badge = "INDEX" if article.is_indexable else "NOINDEX"
    lines = [
        f"[{index}] {article.meta_title or NO_TITLE}",
        f"    {article.article_url}",
        f"    {article.meta_description or NO_CONTENT}",
        f"    {badge} · {len(article.internal_links)} link(s)",
    ]
    return "\n".join(lines)


def render_outline(headings: tuple[HeadingNode, ...]) -> str:
    """Render a heading outline as an ASCII tree.

    Returns an empty string when there are no headings.
    """
    lines: List[str] = []
    # (node, prefix, is_last, is_root); children pushed in reverse for pre-order
    stack: List[Tuple[HeadingNode, str, bool, bool]] = [
        (root, "", True, True) for root in reversed(headings)
    ]
    while stack:
        node, prefix, is_last, is_root = stack.pop()
        label = f"{node.tag.upper()} {node.text}".rstrip()
        if is_root:
            lines.append(label)
            child_prefix = ""
        else:
            connector = "└── " if is_last else "├── "
            lines.append(f"{prefix}{connector}{label}")
            child_prefix = prefix + ("    " if is_last else "│   ")

        count = len(node.children)
        for i in range(count - 1, -1, -1):
            stack.append((node.children[i], child_prefix, i == count - 1, False))

    return "\n".join(lines)
