"""
Configuration Management

Runtime settings from environment variables with sensible defaults.
Tag pattern tables are not configured here; they ship as rule files in
``sample_metadata/rules``.
"""

import os
import re
from typing import List


class Config:
    """Application configuration."""

    # Attribute tags dropped by the XML extractor (ENA bookkeeping fields)
    SKIP_TAG_PATTERN = os.environ.get("MEXTRACT_SKIP_TAG_PATTERN", r"^ENA-")

    # Suffixes picked up when a directory is given as input
    INPUT_EXTENSIONS: List[str] = [
        ext.strip()
        for ext in os.environ.get("MEXTRACT_INPUT_EXTENSIONS", ".xml").split(",")
        if ext.strip()
    ]

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "text").lower()

    @classmethod
    def validate(cls):
        """Validate configuration and raise errors for unusable values."""
        try:
            re.compile(cls.SKIP_TAG_PATTERN)
        except re.error as e:
            raise ValueError(
                f"MEXTRACT_SKIP_TAG_PATTERN is not a valid regular expression: {e}"
            ) from e
        if cls.LOG_FORMAT not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        if not cls.INPUT_EXTENSIONS:
            raise ValueError("MEXTRACT_INPUT_EXTENSIONS must list at least one suffix")

    @classmethod
    def skip_pattern(cls) -> re.Pattern:
        """Return the compiled skip-tag pattern."""
        return re.compile(cls.SKIP_TAG_PATTERN)


def get_config() -> Config:
    """Get validated configuration."""
    Config.validate()
    return Config
