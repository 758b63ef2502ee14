"""Tests for settings loading."""

from bucket_browser.core.config import Settings


class TestSettings:
    """Test Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Test the built-in defaults."""
        for name in ("PAGE_SIZE", "MAX_PAGES", "SHOW_HIDDEN_FILES", "ROOT_LABEL"):
            monkeypatch.delenv(f"BUCKET_BROWSER_{name}", raising=False)

        config = Settings()
        assert config.page_size == 1000
        assert config.max_pages == 10_000
        assert config.root_label == "Root"
        assert config.show_hidden_files is True
        assert config.sort_by == "name"
        assert config.sort_direction == "asc"

    def test_environment_overrides(self, monkeypatch):
        """Test prefixed environment variables override defaults."""
        monkeypatch.setenv("BUCKET_BROWSER_PAGE_SIZE", "250")
        monkeypatch.setenv("bucket_browser_show_hidden_files", "false")
        monkeypatch.setenv("BUCKET_BROWSER_LOG_FORMAT", "console")

        config = Settings()
        assert config.page_size == 250
        assert config.show_hidden_files is False
        assert config.log_format == "console"
