"""php.ini generator — resource limits mounted into the PHP-FPM container."""

from __future__ import annotations

from wpdocker.core.models.setup import SetupConfig
from wpdocker.core.models.template import GeneratedFile

PHP_INI_FILE = "php.ini"


def generate_php_ini(config: SetupConfig) -> GeneratedFile:
    php = config.php
    lines = [
        f"upload_max_filesize = {php.upload_max_filesize}",
        f"post_max_size = {php.post_max_size}",
        f"max_execution_time = {php.max_execution_time}",
        f"max_input_time = {php.max_input_time}",
        f"memory_limit = {php.memory_limit}",
    ]
    return GeneratedFile(
        path=PHP_INI_FILE,
        content="\n".join(lines) + "\n",
        reason="PHP runtime limits",
    )
