"""Result and configuration types shared by the scanner and the command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Config:
    """Controls how a file scan behaves."""

    fix: bool = False
    """Rewrite fixable issues in place."""
    allow_utf8_bom: bool = False
    """Do not flag a UTF-8 byte order mark."""


@dataclass(frozen=True)
class Finding:
    """A single normalization issue found in a file."""

    file: str
    line: int = 0
    col: int = 0
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; zero line and column are omitted."""
        data: dict[str, Any] = {"file": self.file}
        if self.line:
            data["line"] = self.line
        if self.col:
            data["col"] = self.col
        data["message"] = self.message
        return data