"""
Nginx generator — server block fronting WordPress on PHP-FPM.

Static assets are served straight from the shared ``wordpress_data``
volume; ``.php`` requests go to the FastCGI listener of the wordpress
service; Apache auth files are denied.
"""

from __future__ import annotations

from wpdocker.core.models.setup import SetupConfig
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.services.generators.compose import WP_SERVICE

NGINX_FILE = "nginx.conf"

# Braces are doubled for str.format; nginx variables keep their $.
_SERVER_BLOCK = """\
server {{
    listen 80;
    server_name {server_name};

    root /var/www/html;
    index index.php index.html index.htm;

    client_max_body_size {client_max_body_size};

    location / {{
        try_files $uri $uri/ /index.php?$args;
    }}

    location ~ \\.php$ {{
        try_files $uri =404;
        fastcgi_split_path_info ^(.+\\.php)(/.+)$;
        fastcgi_pass {fastcgi_upstream};
        fastcgi_index index.php;
        include fastcgi_params;
        fastcgi_param SCRIPT_FILENAME $document_root$fastcgi_script_name;
        fastcgi_param PATH_INFO $fastcgi_path_info;
        fastcgi_buffering off;
        fastcgi_read_timeout {fastcgi_read_timeout};
    }}

    location ~* \\.(js|css|png|jpg|jpeg|gif|ico|svg)$ {{
        expires max;
        log_not_found off;
        access_log off;
    }}

    location = /favicon.ico {{
        log_not_found off;
        access_log off;
    }}

    location = /robots.txt {{
        log_not_found off;
        access_log off;
        allow all;
    }}

    location ~* \\.(htaccess|htpasswd)$ {{
        deny all;
    }}
}}
"""


def generate_nginx_conf(config: SetupConfig) -> GeneratedFile:
    """Render nginx.conf.

    The body-size and read-timeout limits track the PHP limits so an
    upload PHP accepts is never cut off by the proxy first.
    """
    content = _SERVER_BLOCK.format(
        server_name=config.nginx.server_name,
        client_max_body_size=config.php.upload_max_filesize,
        fastcgi_upstream=f"{WP_SERVICE}:{config.wordpress.fastcgi_port}",
        fastcgi_read_timeout=config.php.max_execution_time,
    )
    return GeneratedFile(
        path=NGINX_FILE,
        content=content,
        reason="Reverse proxy: static files + FastCGI to PHP-FPM",
    )
