"""
Generators — render the scaffold files from a SetupConfig.

Each generator module exposes a ``generate_*()`` function returning a
single ``GeneratedFile``.  ``render_all()`` produces the full set in
write order.
"""

from __future__ import annotations

from pathlib import Path

from wpdocker.core.models.setup import Credentials, SetupConfig
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.services.generators.compose import COMPOSE_FILE, generate_compose
from wpdocker.core.services.generators.env_file import ENV_FILE, generate_env_file
from wpdocker.core.services.generators.gitignore import GITIGNORE_FILE, generate_gitignore
from wpdocker.core.services.generators.nginx import NGINX_FILE, generate_nginx_conf
from wpdocker.core.services.generators.php_ini import PHP_INI_FILE, generate_php_ini
from wpdocker.core.services.generators.readme import README_FILE, generate_readme

ARTIFACT_FILES: tuple[str, ...] = (
    COMPOSE_FILE,
    ENV_FILE,
    NGINX_FILE,
    PHP_INI_FILE,
    GITIGNORE_FILE,
    README_FILE,
)


def render_all(
    config: SetupConfig,
    credentials: Credentials,
    base_dir: Path | None = None,
) -> list[GeneratedFile]:
    """All scaffold files, ordered as ``ARTIFACT_FILES``.

    *base_dir* is where ``project_dir`` will be created; the README needs
    it to name the Compose volumes.
    """
    return [
        generate_compose(config),
        generate_env_file(credentials),
        generate_nginx_conf(config),
        generate_php_ini(config),
        generate_gitignore(),
        generate_readme(config, base_dir),
    ]
