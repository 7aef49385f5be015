from __future__ import annotations

"""
Transcript Error Taxonomy.

Parsing is all-or-nothing: any of these errors aborts the whole parse and
no partial tree is ever returned.
"""

from typing import Optional


class TranscriptError(Exception):
    """
    Base class for structural failures while reading a transcript.

    Attributes:
        line_no: 1-based transcript line that triggered the failure, if known.
        line: Raw text of the offending line, if known.
    """

    def __init__(self, message: str, line_no: Optional[int] = None, line: Optional[str] = None) -> None:
        self.message = message
        self.line_no = line_no
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line_no is None:
            return self.message
        if self.line is None:
            return f"line {self.line_no}: {self.message}"
        return f"line {self.line_no}: {self.message} ({self.line!r})"


class MalformedLine(TranscriptError):
    """A line matches no grammar form, carries a bad size, or is misplaced."""


class UnbalancedTraversal(TranscriptError):
    """Directory descent/ascent that cannot be reconciled with a single root."""


class TraversalTooDeep(UnbalancedTraversal):
    """Nesting exceeds the configured recursion guard."""


class TranscriptSourceError(Exception):
    """The transcript could not be loaded from its source."""
