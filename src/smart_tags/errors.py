from __future__ import annotations

from pathlib import Path
from typing import Union

class SmartTagsError(Exception):
    """Base class for errors that abort a tagging session."""

class PathError(SmartTagsError):
    kind = "file"

    def __init__(self, action: str, path: Union[str, Path], cause: BaseException | None = None) -> None:
        self.action = action
        self.path = Path(path)
        self.cause = cause
        message = f"Failed to {action} {self.kind}: {self.path}"
        if cause is not None:
            message += f" ({cause})"
        super().__init__(message)

class DocumentIOError(PathError):
    """The note being tagged could not be read or written."""

    kind = "document"

class StoreIOError(PathError):
    """The tag vocabulary file could not be read or written."""

    kind = "tag database"

class StructuralError(SmartTagsError, ValueError):
    """
    Front matter has a shape the merge refuses to coerce:
    - the block is not a mapping
    - the 'tags' field is neither a string nor a list
    """
