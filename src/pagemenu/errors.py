from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    MISSING_DOCUMENT = "MISSING_DOCUMENT"
    MISSING_TARGETS = "MISSING_TARGETS"
    INPUT_UNREADABLE = "INPUT_UNREADABLE"
    INVALID_INPUT = "INVALID_INPUT"
    UNEXPECTED_TOKEN = "UNEXPECTED_TOKEN"


class PageMenuError(Exception):
    """Raised for every expected failure while building a page menu.

    Usage errors (missing document, empty target set, unreadable input) are
    raised before any parsing starts. UNEXPECTED_TOKEN means the tokenizer
    produced something outside the known token kinds; it aborts the pass and
    no partial output is returned.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }
