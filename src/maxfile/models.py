# src/maxfile/models.py
from dataclasses import dataclass

@dataclass(frozen=True)
class LoadedFile:
    """Immutable pair of a file path and the text loaded from it."""
    path: str
    content: str
