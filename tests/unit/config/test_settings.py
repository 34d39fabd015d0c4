"""Tests for dispatcher settings and the YAML loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from webhook_service.config.loader import load_settings
from webhook_service.config.settings import DispatcherSettings
from webhook_service.exceptions import SettingsLoadError


class TestDispatcherSettings:
    def test_defaults(self) -> None:
        settings = DispatcherSettings()

        assert settings.poll_interval == 1.0
        assert settings.request_timeout == 10.0
        assert settings.max_retries is None
        assert settings.per_url_rate_limit is False
        assert settings.retry_after_header == "x-ratelimit-retry-after"

    def test_header_is_normalized(self) -> None:
        assert DispatcherSettings(retry_after_header="  Retry-After ").retry_after_header == "retry-after"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"poll_interval": 0},
            {"request_timeout": -1},
            {"max_retries": -1},
            {"retry_after_header": ""},
            {"unknown_option": True},
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            _ = DispatcherSettings.model_validate(overrides)

    def test_assignment_is_validated(self) -> None:
        settings = DispatcherSettings()

        with pytest.raises(ValidationError):
            settings.poll_interval = -5.0


class TestLoadSettings:
    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "webhook.yaml"
        _ = path.write_text(
            "poll_interval: 0.5\nmax_retries: 3\nper_url_rate_limit: true\n", encoding="utf-8"
        )

        settings = load_settings(path)

        assert settings.poll_interval == 0.5
        assert settings.max_retries == 3
        assert settings.per_url_rate_limit is True

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        _ = path.write_text("", encoding="utf-8")

        assert load_settings(str(path)) == DispatcherSettings()

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.yaml"

        with pytest.raises(SettingsLoadError, match="Failed to load") as excinfo:
            _ = load_settings(missing)

        assert excinfo.value.file_path == str(missing)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        _ = path.write_text("poll_interval: [1, 2\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="Failed to load"):
            _ = load_settings(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        _ = path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="must contain a mapping"):
            _ = load_settings(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.yaml"
        _ = path.write_text("request_timeout: 0\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError, match="Invalid settings"):
            _ = load_settings(path)
