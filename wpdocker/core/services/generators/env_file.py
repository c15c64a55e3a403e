"""
.env generator — the generated database passwords.

Compose reads this file automatically and substitutes the values into
the ``${...}`` references in docker-compose.yml.
"""

from __future__ import annotations

from wpdocker.core.models.setup import Credentials
from wpdocker.core.models.template import GeneratedFile

ENV_FILE = ".env"


def generate_env_file(credentials: Credentials) -> GeneratedFile:
    content = "".join(f"{key}={value}\n" for key, value in credentials.as_env().items())
    return GeneratedFile(
        path=ENV_FILE,
        content=content,
        reason="Database credentials (keep out of version control)",
    )


def parse_env_file(content: str) -> dict[str, str]:
    """Read ``KEY=value`` lines back, skipping blanks and comments."""
    values: dict[str, str] = {}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, _, value = stripped.partition("=")
        values[key.strip()] = value.strip()
    return values
