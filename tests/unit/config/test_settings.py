"""Unit tests for PipelineSettings and the settings loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from adoptflow.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    PipelineSettings,
)

_REQUIRED = {
    "ADOPTFLOW_WEBHOOK_URL": "https://hooks.example.com/adoptions",
    "ADOPTFLOW_WEBHOOK_SECRET": "s3cret",
}


# ---------------------------------------------------------------------------
# PipelineSettings
# ---------------------------------------------------------------------------


class TestPipelineSettings:
    def test_defaults(self) -> None:
        settings = PipelineSettings(webhook_url="http://hook", webhook_secret="s")
        assert settings.webhook_max_attempts == 6
        assert settings.webhook_timeout_seconds == 5.0
        assert settings.dead_letter_queue == "webhook.dead_letter"
        assert settings.queue_names == (
            "adoption.request",
            "adoption.created",
            "webhook.publish",
            "webhook.dead_letter",
        )

    def test_rejects_non_http_url(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PipelineSettings(webhook_url="ftp://hook", webhook_secret="s")

    def test_rejects_empty_secret(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PipelineSettings(webhook_url="http://hook", webhook_secret="")

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PipelineSettings(webhook_url="http://hook", webhook_secret="s", webhook_max_attempts=0)

    def test_rejects_cap_below_base(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PipelineSettings(
                webhook_url="http://hook",
                webhook_secret="s",
                webhook_backoff_base_seconds=2.0,
                webhook_backoff_cap_seconds=1.0,
            )

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PipelineSettings(webhook_url="http://hook", webhook_secret="s", webhook_timeout_seconds=0)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_required_and_coerces(self) -> None:
        environ = dict(_REQUIRED, ADOPTFLOW_WEBHOOK_MAX_ATTEMPTS="3", ADOPTFLOW_WEBHOOK_TIMEOUT_SECONDS="2.5")
        settings = EnvSettingsLoader(environ).load(PipelineSettings)
        assert settings.webhook_url == "https://hooks.example.com/adoptions"
        assert settings.webhook_max_attempts == 3
        assert settings.webhook_timeout_seconds == 2.5

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({"ADOPTFLOW_WEBHOOK_URL": "http://hook"}).load(PipelineSettings)
        assert exc_info.value.setting_name == "ADOPTFLOW_WEBHOOK_SECRET"

    def test_bad_int(self) -> None:
        environ = dict(_REQUIRED, ADOPTFLOW_WEBHOOK_MAX_ATTEMPTS="many")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ).load(PipelineSettings)

    def test_validation_error_is_config_error(self) -> None:
        environ = dict(_REQUIRED, ADOPTFLOW_PREFETCH_COUNT="0")
        with pytest.raises(ConfigError):
            EnvSettingsLoader(environ).load(PipelineSettings)

    def test_uses_process_environment_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key, value in _REQUIRED.items():
            monkeypatch.setenv(key, value)
        monkeypatch.setenv("ADOPTFLOW_DEAD_LETTER_QUEUE", "dlq")
        assert EnvSettingsLoader().load(PipelineSettings).dead_letter_queue == "dlq"


class TestDotenvSettingsLoader:
    def test_loads_from_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in _REQUIRED:
            # record the key so load_dotenv's write is undone after the test
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)
        env_file = tmp_path / ".env"
        env_file.write_text(
            "ADOPTFLOW_WEBHOOK_URL=http://hook.local\nADOPTFLOW_WEBHOOK_SECRET=from-file\n"
        )
        settings = DotenvSettingsLoader(str(env_file)).load(PipelineSettings)
        assert settings.webhook_secret == "from-file"