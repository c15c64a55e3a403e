""".gitignore generator — keeps the credentials file out of git."""

from __future__ import annotations

from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.services.generators.env_file import ENV_FILE

GITIGNORE_FILE = ".gitignore"


def generate_gitignore() -> GeneratedFile:
    return GeneratedFile(
        path=GITIGNORE_FILE,
        content=f"{ENV_FILE}\n",
        reason=f"Exclude {ENV_FILE} from version control",
    )
