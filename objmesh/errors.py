# objmesh/errors.py
from __future__ import annotations

from typing import Optional


class MeshImportError(ValueError):
    """Base class for OBJ import failures. The import produces no mesh."""

    def __init__(self, message: str, *, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line_number is None:
            return self.message
        if self.line is None:
            return f"{self.message} (line {self.line_number})"
        return f"{self.message} (line {self.line_number}: {self.line!r})"


class InvalidFormat(MeshImportError):
    """A vertex directive without three coordinates."""

    def __init__(self, *, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        super().__init__("Invalid Format", line_number=line_number, line=line)


class UnsupportedFeature(MeshImportError):
    """A directive rejected by strict imports."""

    def __init__(self, feature: str, *, line_number: Optional[int] = None) -> None:
        self.feature = feature
        super().__init__(f"Unsupported format feature: {feature}", line_number=line_number)
