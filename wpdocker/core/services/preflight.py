"""
Preflight — verify Docker and Docker Compose are on the host.

Both are hard preconditions: the generated files are useless without
them, so any missing tool stops the run before a single file is written.

Compose counts as present when either the standalone ``docker-compose``
binary is on PATH or the ``docker compose`` plugin answers ``version``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from wpdocker.core.models.tool import ToolCheck

logger = logging.getLogger(__name__)

# ── Tools to check (checked in this order) ──────────────────────

_TOOLS: list[dict[str, str]] = [
    {"id": "docker", "cli": "docker", "label": "Docker"},
    {"id": "docker-compose", "cli": "docker-compose", "label": "Docker Compose"},
]

_PLUGIN_TIMEOUT = 10


def _compose_plugin_available() -> bool:
    """Whether ``docker compose version`` succeeds."""
    if not shutil.which("docker"):
        return False
    try:
        r = subprocess.run(
            ["docker", "compose", "version"],
            capture_output=True,
            text=True,
            timeout=_PLUGIN_TIMEOUT,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Compose plugin check failed: %s", e)
        return False
    return r.returncode == 0


def check_tool(tool: dict[str, str]) -> ToolCheck:
    """Probe a single tool from ``_TOOLS``."""
    path = shutil.which(tool["cli"])
    if path:
        logger.debug("Found %s at %s", tool["id"], path)
        return ToolCheck(id=tool["id"], label=tool["label"], available=True, path=path)

    if tool["id"] == "docker-compose" and _compose_plugin_available():
        logger.debug("docker-compose binary absent, using 'docker compose' plugin")
        return ToolCheck(id=tool["id"], label=tool["label"], available=True)

    logger.debug("%s not found", tool["id"])
    return ToolCheck(id=tool["id"], label=tool["label"], available=False)


def check_tools() -> list[ToolCheck]:
    """Probe every required tool.

    Returns:
        One ToolCheck per entry in ``_TOOLS``, in declaration order.
    """
    return [check_tool(t) for t in _TOOLS]


def missing_tools(checks: list[ToolCheck] | None = None) -> list[ToolCheck]:
    """The subset of *checks* (or a fresh check) that is unavailable."""
    if checks is None:
        checks = check_tools()
    return [c for c in checks if not c.available]
