"""
Setup use case — preflight, generate credentials, materialize the project.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from wpdocker.core.models.setup import Credentials, SetupConfig
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.models.tool import ToolCheck
from wpdocker.core.observability.logging_config import register_secrets
from wpdocker.core.services.credentials import generate_credentials
from wpdocker.core.services.materialize import MaterializeError, materialize_project
from wpdocker.core.services.preflight import check_tools

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Outcome of one scaffold run."""

    config: SetupConfig | None = None
    tools: list[ToolCheck] = field(default_factory=list)
    credentials: Credentials | None = None
    project_root: Path | None = None
    files: list[GeneratedFile] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def missing_tools(self) -> list[ToolCheck]:
        return [t for t in self.tools if not t.available]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        result: dict = {
            "ok": self.ok,
            "tools": [t.model_dump() for t in self.tools],
        }
        if self.error:
            result["error"] = self.error
            result["missing_tools"] = [t.id for t in self.missing_tools]
        if self.project_root is not None:
            result["project_root"] = str(self.project_root)
        result["files"] = [{"path": f.path, "reason": f.reason} for f in self.files]
        if self.credentials is not None:
            result["credentials"] = self.credentials.as_env()
        return result


def run_setup(config: SetupConfig, base_dir: Path | None = None) -> SetupResult:
    """Run the full scaffold.

    Preflight failures return before anything touches the filesystem.
    A write failure keeps the files written so far and reports the error.
    """
    result = SetupResult(config=config)

    result.tools = check_tools()
    missing = result.missing_tools
    if missing:
        result.error = " ".join(t.install_hint for t in missing)
        logger.info("Preflight failed, missing: %s", ", ".join(t.id for t in missing))
        return result

    result.credentials = generate_credentials(config.credentials)
    register_secrets(*result.credentials.as_env().values())
    logger.info("Generated database credentials")

    try:
        materialized = materialize_project(config, result.credentials, base_dir)
    except MaterializeError as e:
        result.error = str(e)
        logger.info("Setup aborted: %s", e)
        return result

    result.project_root = materialized.project_root
    result.files = materialized.files
    return result
