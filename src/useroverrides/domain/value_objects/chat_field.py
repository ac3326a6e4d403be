"""Chat display attributes a user can override."""

from enum import StrEnum


class ChatField(StrEnum):
    """Overridable chat attributes."""

    PREFIX = "prefix"
    SUFFIX = "suffix"
    COLOR = "color"
