"""
Project materializer — create the project directory and write the scaffold.

Writes are sequential and not transactional: the first failure aborts
the rest and whatever was already written stays on disk.  Existing files
are overwritten; nothing is merged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wpdocker.core.models.setup import Credentials, SetupConfig
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.services.generators import render_all

logger = logging.getLogger(__name__)


class MaterializeError(Exception):
    """Raised when the project directory or a scaffold file cannot be written."""


@dataclass
class MaterializeResult:
    """Where the scaffold went and which files were written, in order."""

    project_root: Path
    files: list[GeneratedFile] = field(default_factory=list)

    @property
    def written(self) -> list[str]:
        return [f.path for f in self.files]


def write_generated_file(project_root: Path, file_data: GeneratedFile) -> Path:
    """Write a GeneratedFile below *project_root*, replacing any existing file.

    Returns:
        The absolute path written.

    Raises:
        MaterializeError: If the target cannot be inspected or written.
    """
    target = project_root / file_data.path

    try:
        replaced = target.exists()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file_data.content, encoding="utf-8")
    except OSError as e:
        raise MaterializeError(f"Cannot write {target}: {e}") from e

    logger.info("%s %s", "Replaced" if replaced else "Wrote", target)
    return target


def materialize_project(
    config: SetupConfig,
    credentials: Credentials,
    base_dir: Path | None = None,
) -> MaterializeResult:
    """Create ``<base_dir>/<project_dir>`` and write every scaffold file.

    Args:
        config: Setup configuration.
        credentials: Passwords to embed in ``.env``.
        base_dir: Parent directory (default: cwd).

    Raises:
        MaterializeError: On the first directory or file write failure.
    """
    base_dir = base_dir or Path.cwd()
    project_root = base_dir / config.project_dir

    try:
        project_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MaterializeError(f"Cannot create project directory {project_root}: {e}") from e
    logger.info("Project directory: %s", project_root)

    result = MaterializeResult(project_root=project_root)
    for file_data in render_all(config, credentials, base_dir):
        write_generated_file(project_root, file_data)
        result.files.append(file_data)

    logger.debug("Wrote %d file(s) to %s", len(result.files), project_root)
    return result
