"""
Unit tests for stylesheet publishing, settings and the command line.
"""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from post_card.assets import publish_stylesheet, stylesheet_path
from post_card.cli import main
from post_card.config import setup_logging
from post_card.config.settings import Settings
from post_card.core.exceptions import AssetError


class TestAssets:
    """Test cases for publish_stylesheet."""

    def test_packaged_stylesheet_exists(self):
        path = stylesheet_path()

        assert path.is_file()
        assert ".post-card-link" in path.read_text(encoding="utf-8")

    def test_publish_stylesheet(self, tmp_path, test_settings):
        target = publish_stylesheet(tmp_path, settings=test_settings)

        assert target == tmp_path / "assets" / "css" / "post-card.css"
        assert target.read_text(encoding="utf-8") == stylesheet_path().read_text(encoding="utf-8")

    def test_publish_into_custom_asset_dir(self, tmp_path):
        target = publish_stylesheet(tmp_path, settings=Settings(asset_dir="static/styles"))

        assert target == tmp_path / "static" / "styles" / "post-card.css"
        assert target.is_file()

    def test_missing_source_raises(self, tmp_path, test_settings):
        with pytest.raises(AssetError):
            publish_stylesheet(tmp_path, settings=test_settings, source=tmp_path / "nope.css")

        assert not (tmp_path / "assets").exists()


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.connect_timeout == 10.0
        assert settings.read_timeout == 10.0
        assert settings.max_redirects == 5
        assert settings.excerpt_length == 160
        assert settings.asset_dir == "assets/css"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("POST_CARD_MAX_REDIRECTS", "2")
        monkeypatch.setenv("POST_CARD_LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.max_redirects == 2
        assert settings.log_level == "DEBUG"

    def test_negative_redirect_cap_rejected(self):
        with pytest.raises(ValidationError):
            Settings(max_redirects=-1)


class TestCli:
    """Test cases for the post-card command."""

    @pytest.fixture(autouse=True)
    def no_logging_setup(self, monkeypatch):
        monkeypatch.setattr("post_card.cli.setup_logging", lambda **kwargs: None)

    @pytest.fixture
    def documents_file(self, tmp_path):
        path = tmp_path / "posts.json"
        path.write_text(
            json.dumps([{"url": "/hello", "title": "Hello CLI", "excerpt": "From the command line"}]),
            encoding="utf-8",
        )
        return path

    def test_renders_internal_card(self, documents_file, capsys):
        exit_code = main(["/hello variant:compact", "--documents", str(documents_file)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert 'class="post-card compact no-image"' in out
        assert "Hello CLI" in out

    def test_unknown_reference_renders_error_card(self, documents_file, capsys):
        exit_code = main(["/missing", "--documents", str(documents_file)])

        assert exit_code == 0
        assert "Post not found: /missing" in capsys.readouterr().out

    def test_renders_document_with_front_matter_date(self, tmp_path, capsys):
        path = tmp_path / "posts.json"
        path.write_text(
            json.dumps(
                [
                    {
                        "url": "/2024/01/01/hello",
                        "title": "Hello",
                        "date": "2024-01-01 10:00:00 +0100",
                    }
                ]
            ),
            encoding="utf-8",
        )

        exit_code = main(["/2024/01/01/hello", "--documents", str(path)])

        assert exit_code == 0
        assert "January 01, 2024" in capsys.readouterr().out

    def test_copy_assets(self, tmp_path, capsys):
        exit_code = main(["--copy-assets", str(tmp_path)])

        assert exit_code == 0
        assert (tmp_path / "assets" / "css" / "post-card.css").is_file()

    def test_bad_documents_file(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")

        exit_code = main(["/hello", "--documents", str(bad)])

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_nothing_to_do(self, capsys):
        assert main([]) == 2


class TestLogging:
    """Test cases for setup_logging."""

    def test_setup_logging_with_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        log_file = tmp_path / "logs" / "post-card.log"
        try:
            setup_logging(log_level="warning", log_file=str(log_file), log_format="json")

            assert root.level == logging.WARNING
            assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
            assert log_file.parent.is_dir()
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            for handler in root.handlers:
                if handler not in saved_handlers:
                    handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
