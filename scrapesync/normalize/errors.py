"""Exceptions raised while normalizing raw scrape results."""

from __future__ import annotations


class NormalizationError(ValueError):
    """A raw record is missing a required field or has the wrong shape.

    Attributes:
        record: Locator of the offending record, e.g.
            ``"articles[2].internalLinks[0]"``.
        field: Name of the raw field that failed, or ``None`` when the
            record as a whole is malformed.
    """

    def __init__(self, message: str, record: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.record = record
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.record}.{self.field}: {self.message}"
        return f"{self.record}: {self.message}"


class HeadingDepthError(NormalizationError):
    """The heading tree is deeper than allowed or refers back to itself."""
