"""Unit tests for WorkflowConfig and DisplayConfig."""

import pytest

from signboard.config import (
    DEFAULT_DISPLAY_CONFIG,
    DEFAULT_WORKFLOW_CONFIG,
    TEST_WORKFLOW_CONFIG,
    DisplayConfig,
    WorkflowConfig,
)
from signboard.domain.models.display_settings import DisplaySettings


class TestWorkflowConfig:
    """Tests for WorkflowConfig."""

    def test_defaults(self) -> None:
        assert DEFAULT_WORKFLOW_CONFIG.simulated_latency_seconds == 1.0
        assert DEFAULT_WORKFLOW_CONFIG.store_path is None
        assert DEFAULT_WORKFLOW_CONFIG.seed_demo_data is True
        assert DEFAULT_WORKFLOW_CONFIG.environment == "development"
        assert DEFAULT_WORKFLOW_CONFIG.configure_logging is True

    def test_test_config_has_no_latency(self) -> None:
        assert TEST_WORKFLOW_CONFIG.simulated_latency_seconds == 0
        assert TEST_WORKFLOW_CONFIG.seed_demo_data is False
        assert TEST_WORKFLOW_CONFIG.configure_logging is False

    def test_out_of_range_latency_rejected(self) -> None:
        with pytest.raises(ValueError):
            WorkflowConfig(simulated_latency_seconds=-1)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SIGNBOARD_SIMULATED_LATENCY_SECONDS", "0.25")
        monkeypatch.setenv("SIGNBOARD_STORE_PATH", "/tmp/signboard.json")
        monkeypatch.setenv("SIGNBOARD_SEED_DEMO_DATA", "false")
        monkeypatch.setenv("ENVIRONMENT", "production")

        config = WorkflowConfig.from_environment()

        assert config.simulated_latency_seconds == 0.25
        assert config.store_path == "/tmp/signboard.json"
        assert config.seed_demo_data is False
        assert config.environment == "production"

    def test_from_environment_clamps_latency(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIGNBOARD_SIMULATED_LATENCY_SECONDS", "99")
        assert WorkflowConfig.from_environment().simulated_latency_seconds == 10.0

    def test_from_environment_ignores_garbage(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SIGNBOARD_SIMULATED_LATENCY_SECONDS", "fast")
        monkeypatch.delenv("SIGNBOARD_STORE_PATH", raising=False)
        config = WorkflowConfig.from_environment()
        assert config.simulated_latency_seconds == 1.0
        assert config.store_path is None


class TestDisplayConfig:
    """Tests for DisplayConfig."""

    def test_defaults_match_settings_defaults(self) -> None:
        assert DEFAULT_DISPLAY_CONFIG.to_settings() == DisplaySettings()

    def test_bounds_enforced(self) -> None:
        with pytest.raises(ValueError):
            DisplayConfig(carousel_speed=11)
        with pytest.raises(ValueError):
            DisplayConfig(default_duration=0)

    def test_from_environment_clamps(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISPLAY_CAROUSEL_SPEED", "3")
        monkeypatch.setenv("DISPLAY_DEFAULT_DURATION", "1000")
        monkeypatch.setenv("DISPLAY_REFRESH_RATE_SECONDS", "0")

        config = DisplayConfig.from_environment()

        assert config.carousel_speed == 3
        assert config.default_duration == 300
        assert config.refresh_rate_seconds == 1
