"""
Tool check model — the outcome of probing one host executable.
"""

from __future__ import annotations

from pydantic import BaseModel


class ToolCheck(BaseModel):
    """Whether a required host tool can be invoked."""

    id: str
    label: str
    available: bool = False
    path: str | None = None       # resolved binary, or None for plugins/missing

    @property
    def install_hint(self) -> str:
        return f"{self.label} is not installed. Please install {self.label} first."
