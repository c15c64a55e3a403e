"""
Setup model — every knob of a WordPress scaffold run.

Defaults reproduce the stock layout: ``wordpress-docker/`` with MySQL 8,
WordPress on PHP-FPM (Alpine) and Nginx in front, 24-character
alphanumeric database passwords.  A run with no config file uses these
values unchanged.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, Field, field_validator

ALPHANUMERIC = string.ascii_letters + string.digits

# Characters a password may use: nothing that .env parsing, Compose
# interpolation ($) or an unquoted shell word would treat specially.
SAFE_CREDENTIAL_CHARS = frozenset(ALPHANUMERIC + "-_.+@%,:")


class CredentialSettings(BaseModel):
    """How database passwords are generated."""

    length: int = Field(default=24, ge=1)
    alphabet: str = ALPHANUMERIC

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if not value:
            raise ValueError("alphabet must not be empty")
        if len(set(value)) != len(value):
            raise ValueError("alphabet must not contain duplicate characters")
        unsafe = sorted(set(value) - SAFE_CREDENTIAL_CHARS)
        if unsafe:
            raise ValueError(
                f"alphabet contains characters unsafe in .env values: {unsafe!r}; "
                "allowed are letters, digits and -_.+@%,:"
            )
        return value


class DatabaseSettings(BaseModel):
    """MySQL service."""

    image: str = "mysql:8.0"
    container_name: str = "wordpress_db"
    name: str = "wordpress"
    user: str = "wordpress"
    port: int = Field(default=3306, ge=1, le=65535)


class WordPressSettings(BaseModel):
    """WordPress PHP-FPM service."""

    image: str = "wordpress:fpm-alpine"
    container_name: str = "wordpress_php"
    run_as: str = "82:82"          # www-data on Alpine
    fastcgi_port: int = Field(default=9000, ge=1, le=65535)


class NginxSettings(BaseModel):
    """Nginx reverse proxy service."""

    image: str = "nginx:alpine"
    container_name: str = "wordpress_nginx"
    server_name: str = "localhost"
    http_port: int = Field(default=80, ge=1, le=65535)
    https_port: int = Field(default=443, ge=1, le=65535)


class PhpSettings(BaseModel):
    """Limits written to php.ini (and mirrored in nginx.conf)."""

    upload_max_filesize: str = "100M"
    post_max_size: str = "100M"
    max_execution_time: int = Field(default=300, ge=0)
    max_input_time: int = Field(default=300, ge=0)
    memory_limit: str = "256M"


class SetupConfig(BaseModel):
    """Root configuration passed to the materializer."""

    project_dir: str = Field(default="wordpress-docker", min_length=1)
    network: str = "wordpress_network"
    compose_command: str = "docker compose"    # shown in README and next steps

    credentials: CredentialSettings = Field(default_factory=CredentialSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    wordpress: WordPressSettings = Field(default_factory=WordPressSettings)
    nginx: NginxSettings = Field(default_factory=NginxSettings)
    php: PhpSettings = Field(default_factory=PhpSettings)

    @field_validator("project_dir")
    @classmethod
    def _check_project_dir(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project_dir must not be blank")
        return value

    @property
    def site_url(self) -> str:
        """URL the operator visits once the stack is up."""
        if self.nginx.http_port == 80:
            return f"http://{self.nginx.server_name}"
        return f"http://{self.nginx.server_name}:{self.nginx.http_port}"


class Credentials(BaseModel):
    """The two database passwords generated for one run."""

    db_root_password: str
    db_password: str

    def as_env(self) -> dict[str, str]:
        """Ordered ``KEY -> value`` pairs as written to ``.env``."""
        return {
            "DB_ROOT_PASSWORD": self.db_root_password,
            "DB_PASSWORD": self.db_password,
        }
