"""
Tests for the scaffold generators.

Pure unit tests: SetupConfig / Credentials in → GeneratedFile out.
"""

import yaml

from wpdocker.core.models.setup import Credentials, SetupConfig
from wpdocker.core.services.generators import ARTIFACT_FILES, render_all
from wpdocker.core.services.generators.compose import build_compose, generate_compose
from wpdocker.core.services.generators.env_file import generate_env_file, parse_env_file
from wpdocker.core.services.generators.gitignore import generate_gitignore
from wpdocker.core.services.generators.nginx import generate_nginx_conf
from wpdocker.core.services.generators.php_ini import generate_php_ini
from wpdocker.core.services.generators.readme import compose_project_name, generate_readme

CREDS = Credentials(db_root_password="R" * 24, db_password="a1" * 12)


# ═══════════════════════════════════════════════════════════════════
#  docker-compose.yml
# ═══════════════════════════════════════════════════════════════════


class TestCompose:
    def _load(self, config: SetupConfig | None = None) -> dict:
        generated = generate_compose(config or SetupConfig())
        assert generated.path == "docker-compose.yml"
        return yaml.safe_load(generated.content)

    def test_three_services_in_order(self):
        doc = self._load()
        assert list(doc["services"]) == ["db", "wordpress", "nginx"]

    def test_images(self):
        services = self._load()["services"]
        assert services["db"]["image"] == "mysql:8.0"
        assert services["wordpress"]["image"] == "wordpress:fpm-alpine"
        assert services["nginx"]["image"] == "nginx:alpine"

    def test_wordpress_waits_for_healthy_db(self):
        services = self._load()["services"]
        assert services["wordpress"]["depends_on"] == {
            "db": {"condition": "service_healthy"}
        }
        health = services["db"]["healthcheck"]
        assert health["test"] == ["CMD", "mysqladmin", "ping", "-h", "localhost"]
        assert health["retries"] == 5

    def test_nginx_depends_on_wordpress(self):
        services = self._load()["services"]
        assert services["nginx"]["depends_on"] == ["wordpress"]
        assert services["nginx"]["ports"] == ["80:80", "443:443"]

    def test_secrets_are_env_references(self):
        content = generate_compose(SetupConfig()).content
        services = yaml.safe_load(content)["services"]
        assert services["db"]["environment"]["MYSQL_ROOT_PASSWORD"] == "${DB_ROOT_PASSWORD}"
        assert services["db"]["environment"]["MYSQL_PASSWORD"] == "${DB_PASSWORD}"
        assert services["wordpress"]["environment"]["WORDPRESS_DB_PASSWORD"] == "${DB_PASSWORD}"

    def test_wordpress_runtime(self):
        wp = self._load()["services"]["wordpress"]
        assert wp["user"] == "82:82"
        assert wp["environment"]["WORDPRESS_DB_HOST"] == "db:3306"
        assert "define('FS_METHOD', 'direct');" in wp["environment"]["WORDPRESS_CONFIG_EXTRA"]
        assert "./php.ini:/usr/local/etc/php/conf.d/custom.ini:ro" in wp["volumes"]

    def test_volumes_and_network(self):
        doc = self._load()
        assert doc["volumes"] == {
            "db_data": {"driver": "local"},
            "wordpress_data": {"driver": "local"},
        }
        assert doc["networks"] == {"wordpress_network": {"driver": "bridge"}}
        for svc in doc["services"].values():
            assert svc["networks"] == ["wordpress_network"]

    def test_custom_ports(self):
        config = SetupConfig.model_validate({"nginx": {"http_port": 8080, "https_port": 8443}})
        nginx = build_compose(config)["services"]["nginx"]
        assert nginx["ports"] == ["8080:80", "8443:443"]


# ═══════════════════════════════════════════════════════════════════
#  nginx.conf / php.ini
# ═══════════════════════════════════════════════════════════════════


class TestNginxConf:
    def test_fastcgi_upstream(self):
        content = generate_nginx_conf(SetupConfig()).content
        assert "fastcgi_pass wordpress:9000;" in content
        assert "fastcgi_read_timeout 300;" in content

    def test_routes(self):
        content = generate_nginx_conf(SetupConfig()).content
        assert "try_files $uri $uri/ /index.php?$args;" in content
        assert r"location ~ \.php$ {" in content
        assert r"location ~* \.(htaccess|htpasswd)$ {" in content
        assert "deny all;" in content
        assert "client_max_body_size 100M;" in content

    def test_braces_balanced(self):
        content = generate_nginx_conf(SetupConfig()).content
        assert content.count("{") == content.count("}")
        assert "{{" not in content

    def test_server_name_override(self):
        config = SetupConfig.model_validate({"nginx": {"server_name": "blog.test"}})
        assert "server_name blog.test;" in generate_nginx_conf(config).content


class TestPhpIni:
    def test_defaults(self):
        generated = generate_php_ini(SetupConfig())
        assert generated.path == "php.ini"
        assert generated.content == (
            "upload_max_filesize = 100M\n"
            "post_max_size = 100M\n"
            "max_execution_time = 300\n"
            "max_input_time = 300\n"
            "memory_limit = 256M\n"
        )

    def test_override(self):
        config = SetupConfig.model_validate({"php": {"memory_limit": "512M"}})
        assert "memory_limit = 512M" in generate_php_ini(config).content


# ═══════════════════════════════════════════════════════════════════
#  .env / .gitignore / README.md
# ═══════════════════════════════════════════════════════════════════


class TestEnvFile:
    def test_content(self):
        generated = generate_env_file(CREDS)
        assert generated.path == ".env"
        assert generated.content == (
            f"DB_ROOT_PASSWORD={CREDS.db_root_password}\n"
            f"DB_PASSWORD={CREDS.db_password}\n"
        )

    def test_parse_back(self):
        parsed = parse_env_file(generate_env_file(CREDS).content)
        assert parsed == CREDS.as_env()

    def test_parse_skips_comments(self):
        assert parse_env_file("# note\n\nA=1\nnot a pair\n") == {"A": "1"}


class TestGitignore:
    def test_ignores_env(self):
        generated = generate_gitignore()
        assert generated.path == ".gitignore"
        assert generated.content == ".env\n"


class TestReadme:
    def test_commands_follow_config(self):
        content = generate_readme(SetupConfig()).content
        assert content.startswith("# WordPress Docker Setup")
        assert "docker compose up -d" in content
        assert "docker exec -it wordpress_php sh" in content
        assert "docker exec -it wordpress_db mysql -u wordpress -p" in content
        assert "wordpress-docker_wordpress_data:/data" in content
        assert "-p${DB_ROOT_PASSWORD}" in content

    def test_no_credentials_in_readme(self):
        """README is safe to commit: it never holds the generated values."""
        content = generate_readme(SetupConfig()).content
        assert CREDS.db_root_password not in content

    def test_compose_project_name(self):
        assert compose_project_name("wordpress-docker") == "wordpress-docker"
        assert compose_project_name("My Blog.Stack") == "myblogstack"

    def test_project_name_is_directory_basename(self, tmp_path):
        assert compose_project_name("sites/blog") == "blog"
        assert compose_project_name("/srv/wp") == "wp"
        assert compose_project_name("sites/blog/") == "blog"
        assert compose_project_name(".", base_dir=tmp_path / "My-Site") == "my-site"
        assert compose_project_name("_x", base_dir=tmp_path) == "x"

    def test_nested_project_dir_volume(self):
        content = generate_readme(SetupConfig(project_dir="sites/blog")).content
        assert "blog_wordpress_data:/data" in content
        assert "sitesblog" not in content

    def test_custom_compose_command(self):
        config = SetupConfig(compose_command="docker-compose")
        assert "docker-compose logs -f" in generate_readme(config).content


class TestRenderAll:
    def test_six_files_in_order(self):
        files = render_all(SetupConfig(), CREDS)
        assert [f.path for f in files] == list(ARTIFACT_FILES)
        assert len(files) == 6
        assert all(f.reason for f in files)
        assert files[0].reason.startswith("Container orchestration")

    def test_compose_references_match_env_keys(self):
        files = {f.path: f for f in render_all(SetupConfig(), CREDS)}
        env = parse_env_file(files[".env"].content)
        compose = files["docker-compose.yml"].content
        for key in env:
            assert "${" + key + "}" in compose
        assert CREDS.db_root_password not in compose
