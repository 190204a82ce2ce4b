from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ExtractionError(Exception):
    """Hard failure raised while turning a sample document into a record.

    The failing sample is skipped; siblings in the same input still run.

    Parameters
    ----------
    code:
        Error code, also used as the ``code`` field of error log lines.
    message:
        Human readable detail, e.g. which XML node was missing.
    """

    code: str
    message: str

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class MissingIdentifier(ExtractionError):
    """The document carries no usable primary identifier."""

    def __init__(self, message: str = "Missing PRIMARY_ID") -> None:
        super().__init__("MissingIdentifier", message)


class MissingAttributes(ExtractionError):
    """The document has no attribute collection at all."""

    def __init__(self, message: str = "Missing SAMPLE_ATTRIBUTES") -> None:
        super().__init__("MissingAttributes", message)


class InvalidDocument(ExtractionError):
    """The input is not a parseable sample document."""

    def __init__(self, message: str) -> None:
        super().__init__("InvalidDocument", message)


class NoInputFiles(ExtractionError):
    def __init__(self, message: str = "No input files") -> None:
        super().__init__("NoInputFiles", message)


__all__ = [
    "ExtractionError",
    "MissingIdentifier",
    "MissingAttributes",
    "InvalidDocument",
    "NoInputFiles",
]
