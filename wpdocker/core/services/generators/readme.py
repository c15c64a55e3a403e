"""
README generator — operator notes shipped next to the compose file.

Container, volume and command names follow the config so the copy-paste
commands keep working when the defaults are overridden.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from wpdocker.core.models.setup import SetupConfig
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.services.generators.compose import (
    COMPOSE_FILE,
    DB_SERVICE,
    NGINX_SERVICE,
    WP_SERVICE,
    WP_VOLUME,
)
from wpdocker.core.services.generators.env_file import ENV_FILE
from wpdocker.core.services.generators.nginx import NGINX_FILE
from wpdocker.core.services.generators.php_ini import PHP_INI_FILE

README_FILE = "README.md"

_FENCE = "```"


def compose_project_name(project_dir: str, base_dir: Path | None = None) -> str:
    """Compose's default project name for a directory (volume prefix).

    Compose names the project after the basename of the directory holding
    the compose file, lowercased, with anything outside ``[a-z0-9_-]``
    dropped and leading ``_``/``-`` trimmed.  Relative *project_dir*
    values are taken from *base_dir* (default: cwd).
    """
    path = Path(project_dir)
    if not path.is_absolute():
        path = (base_dir or Path.cwd()) / path
    name = Path(os.path.abspath(path)).name
    return re.sub(r"[^a-z0-9_-]", "", name.lower()).lstrip("_-")


def _shell(*commands: str) -> str:
    return "\n".join([f"{_FENCE}bash", *commands, _FENCE])


def generate_readme(config: SetupConfig, base_dir: Path | None = None) -> GeneratedFile:
    compose = config.compose_command
    db, wp = config.database, config.wordpress
    volume = f"{compose_project_name(config.project_dir, base_dir)}_{WP_VOLUME}"

    sections = [
        "# WordPress Docker Setup",
        "## Description\n"
        "This setup runs WordPress with:\n"
        "- **Nginx** as the web server\n"
        "- **PHP-FPM** for PHP processing\n"
        f"- **MySQL** (`{db.image}`) as the database",
        "## Security Features\n"
        f"- PHP-FPM runs as user {wp.run_as} (www-data), eliminating permission issues\n"
        f"- Database credentials are randomly generated and stored in {ENV_FILE}\n"
        "- WordPress files are read-only for Nginx\n"
        "- No 777 permissions needed",
        "## Quick Start\n\n"
        "1. Start the containers:\n"
        f"{_shell(f'{compose} up -d')}\n\n"
        "2. Wait for containers to be ready (about 30 seconds)\n\n"
        f"3. Visit {config.site_url} and complete WordPress installation",
        "## Management Commands\n\n"
        f"**View logs:**\n{_shell(f'{compose} logs -f')}\n\n"
        f"**Stop containers:**\n{_shell(f'{compose} down')}\n\n"
        "**Stop and remove volumes (WARNING: deletes all data):**\n"
        f"{_shell(f'{compose} down -v')}\n\n"
        f"**Restart containers:**\n{_shell(f'{compose} restart')}\n\n"
        "**Access WordPress container:**\n"
        f"{_shell(f'docker exec -it {wp.container_name} sh')}\n\n"
        "**Access database:**\n"
        f"{_shell(f'docker exec -it {db.container_name} mysql -u {db.user} -p')}",
        "## File Structure\n"
        f"- `{COMPOSE_FILE}` - Container orchestration\n"
        f"- `{NGINX_FILE}` - Nginx configuration\n"
        f"- `{PHP_INI_FILE}` - PHP settings\n"
        f"- `{ENV_FILE}` - Database credentials (keep secret!)",
        "## Backup\n\n"
        "**Backup WordPress files:**\n"
        + _shell(
            f"docker run --rm -v {volume}:/data -v $(pwd):/backup alpine "
            "tar czf /backup/wordpress-backup.tar.gz -C /data ."
        )
        + "\n\n**Backup database:**\n"
        + _shell(
            f"docker exec {db.container_name} mysqladmin -u root -p${{DB_ROOT_PASSWORD}} ping",
            f"docker exec {db.container_name} mysqldump -u {db.user} -p${{DB_PASSWORD}} "
            f"{db.name} > wordpress-db-backup.sql",
        ),
        "## Troubleshooting\n\n"
        f"**Check container status:**\n{_shell(f'{compose} ps')}\n\n"
        "**View specific container logs:**\n"
        + _shell(*(f"{compose} logs {svc}" for svc in (NGINX_SERVICE, WP_SERVICE, DB_SERVICE)))
        + "\n\n**Restart a specific service:**\n"
        + _shell(f"{compose} restart {WP_SERVICE}"),
    ]

    return GeneratedFile(
        path=README_FILE,
        content="\n\n".join(sections) + "\n",
        reason="Operator documentation",
    )
