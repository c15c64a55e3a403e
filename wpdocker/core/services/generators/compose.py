"""
Compose generator — docker-compose.yml for the db / wordpress / nginx trio.

Passwords are never inlined: the services reference ``${DB_ROOT_PASSWORD}``
and ``${DB_PASSWORD}``, which Compose resolves from the sibling ``.env``.
"""

from __future__ import annotations

from typing import Any

import yaml

from wpdocker.core.models.setup import SetupConfig
from wpdocker.core.models.template import GeneratedFile

COMPOSE_FILE = "docker-compose.yml"

# Volume names; the README backup commands depend on these
DB_VOLUME = "db_data"
WP_VOLUME = "wordpress_data"

# Service names; nginx.conf reaches PHP-FPM through the wordpress name
DB_SERVICE = "db"
WP_SERVICE = "wordpress"
NGINX_SERVICE = "nginx"


def _env_ref(key: str) -> str:
    return "${" + key + "}"


def _db_service(config: SetupConfig) -> dict[str, Any]:
    db = config.database
    return {
        "image": db.image,
        "container_name": db.container_name,
        "restart": "unless-stopped",
        "environment": {
            "MYSQL_ROOT_PASSWORD": _env_ref("DB_ROOT_PASSWORD"),
            "MYSQL_DATABASE": db.name,
            "MYSQL_USER": db.user,
            "MYSQL_PASSWORD": _env_ref("DB_PASSWORD"),
        },
        "volumes": [f"{DB_VOLUME}:/var/lib/mysql"],
        "networks": [config.network],
        "command": "--default-authentication-plugin=mysql_native_password",
        "healthcheck": {
            "test": ["CMD", "mysqladmin", "ping", "-h", "localhost"],
            "interval": "10s",
            "timeout": "5s",
            "retries": 5,
        },
    }


def _wordpress_service(config: SetupConfig) -> dict[str, Any]:
    db, wp = config.database, config.wordpress
    return {
        "image": wp.image,
        "container_name": wp.container_name,
        "restart": "unless-stopped",
        "user": wp.run_as,
        "environment": {
            "WORDPRESS_DB_HOST": f"{DB_SERVICE}:{db.port}",
            "WORDPRESS_DB_USER": db.user,
            "WORDPRESS_DB_PASSWORD": _env_ref("DB_PASSWORD"),
            "WORDPRESS_DB_NAME": db.name,
            "WORDPRESS_CONFIG_EXTRA": "define('FS_METHOD', 'direct');\n",
        },
        "volumes": [
            f"{WP_VOLUME}:/var/www/html",
            "./php.ini:/usr/local/etc/php/conf.d/custom.ini:ro",
        ],
        "networks": [config.network],
        "depends_on": {
            DB_SERVICE: {"condition": "service_healthy"},
        },
    }


def _nginx_service(config: SetupConfig) -> dict[str, Any]:
    nginx = config.nginx
    return {
        "image": nginx.image,
        "container_name": nginx.container_name,
        "restart": "unless-stopped",
        "ports": [
            f"{nginx.http_port}:80",
            f"{nginx.https_port}:443",
        ],
        "volumes": [
            f"{WP_VOLUME}:/var/www/html:ro",
            "./nginx.conf:/etc/nginx/conf.d/default.conf:ro",
        ],
        "networks": [config.network],
        "depends_on": [WP_SERVICE],
    }


def build_compose(config: SetupConfig) -> dict[str, Any]:
    """The compose document as a plain mapping (service order preserved)."""
    return {
        "services": {
            DB_SERVICE: _db_service(config),
            WP_SERVICE: _wordpress_service(config),
            NGINX_SERVICE: _nginx_service(config),
        },
        "volumes": {
            DB_VOLUME: {"driver": "local"},
            WP_VOLUME: {"driver": "local"},
        },
        "networks": {
            config.network: {"driver": "bridge"},
        },
    }


def generate_compose(config: SetupConfig) -> GeneratedFile:
    """Render docker-compose.yml."""
    content = "# WordPress + Nginx + MySQL — generated by wordpress-docker-setup\n"
    content += yaml.dump(
        build_compose(config),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    return GeneratedFile(
        path=COMPOSE_FILE,
        content=content,
        reason="Container orchestration: db, wordpress, nginx",
    )
