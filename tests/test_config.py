"""
Roster — Settings Tests
========================

What:  Validation rules of roster.config.Settings and the logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from roster.config import Settings
from roster.main import setup_logging
from roster.middleware.logging import level_for_status


class TestSettings:

    def test_api_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("ROSTER_API_URL", "https://example.test/api/staff/")
        assert Settings().roster_api_url == "https://example.test/api/staff"

    def test_api_url_must_be_http(self):
        with pytest.raises(ValidationError):
            Settings(roster_api_url="ftp://example.test/staff")

    def test_timeout_defaults_to_none(self, monkeypatch):
        monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
        assert Settings().request_timeout is None

    def test_log_level_is_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_collection_path_trailing_slash(self):
        assert Settings(store_collection_path="/staff/").store_collection_path == "/staff"

    @pytest.mark.parametrize("path", ["staff", "/"])
    def test_invalid_collection_path(self, path):
        with pytest.raises(ValidationError):
            Settings(store_collection_path=path)


class TestLogging:

    def test_setup_logging_sets_root_level(self):
        setup_logging("debug")
        try:
            assert logging.getLogger().level == logging.DEBUG
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            setup_logging("WARNING")

    def test_level_for_status(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(404) == logging.WARNING
        assert level_for_status(503) == logging.ERROR
