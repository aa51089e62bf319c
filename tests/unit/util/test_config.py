"""Unit tests for settings."""

from agora.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_local_defaults(self):
        settings = Settings(environment="development", frontend_host="localhost")

        assert settings.api.frontend_url == "http://localhost:3000"
        assert settings.comments.max_depth == 3
        assert settings.comments.content_processors == ["link"]

    def test_production_uses_https_without_port(self):
        settings = Settings(environment="production", frontend_host="agora.example")

        assert settings.api.protocol == "https"
        assert settings.api.frontend_url == "https://agora.example"

    def test_nested_comment_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("COMMENTS__MAX_DEPTH", "5")

        settings = Settings()

        assert settings.comments.max_depth == 5

    def test_git_sha_unknown_without_version_file(self, tmp_path):
        settings = Settings(version_file=tmp_path / "missing.txt")

        assert settings.git_sha == "unknown"

    def test_git_sha_read_from_version_file(self, tmp_path):
        version_file = tmp_path / "version.txt"
        version_file.write_text("abc123\n")

        settings = Settings(version_file=version_file)

        assert settings.git_sha == "abc123"
