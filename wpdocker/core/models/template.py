"""
Generated file model — used by all generators.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by one of the generators.

    Every scaffold file replaces whatever sits at its path.

    Attributes:
        path:      Relative path from the project directory.
        content:   Full file content.
        reason:    What the file is for; shown in the CLI progress.
    """

    path: str
    content: str
    reason: str = ""
