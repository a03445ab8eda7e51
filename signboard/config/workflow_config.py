"""Announcement workflow configuration.

Environment Variables:
- SIGNBOARD_SIMULATED_LATENCY_SECONDS: Delay applied before every
  repository mutation and login resolves (default: 1.0, min: 0, max: 10)
- SIGNBOARD_STORE_PATH: JSON file backing the persistent store. When
  unset the store lives in memory for the life of the process.
- SIGNBOARD_SEED_DEMO_DATA: Install the demo announcements on first
  start (default: true)
- ENVIRONMENT: "production" for JSON logs, anything else for console
  logs (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from signboard.config._env import get_float_env

# Default simulated latency (one second, as the hosted front end did)
DEFAULT_SIMULATED_LATENCY_SECONDS = 1.0

# No latency at all (tests)
MIN_SIMULATED_LATENCY_SECONDS = 0.0

# Anything slower than this is a misconfiguration
MAX_SIMULATED_LATENCY_SECONDS = 10.0

ENVIRONMENT_VAR = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "development"


@dataclass(frozen=True)
class WorkflowConfig:
    """Configuration for the announcement workflow.

    Attributes:
        simulated_latency_seconds: Delay awaited before each mutation
            resolves. Default: 1.0. Range: 0 to 10.
        store_path: Optional JSON file for the persistent store.
        seed_demo_data: Install the demo announcements when the store
            holds no collection yet.
        environment: Selects the log renderer.
        configure_logging: Configure structlog when the application is
            built.
    """

    simulated_latency_seconds: float = DEFAULT_SIMULATED_LATENCY_SECONDS
    store_path: str | None = None
    seed_demo_data: bool = True
    environment: str = DEFAULT_ENVIRONMENT
    configure_logging: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not (
            MIN_SIMULATED_LATENCY_SECONDS
            <= self.simulated_latency_seconds
            <= MAX_SIMULATED_LATENCY_SECONDS
        ):
            raise ValueError(
                "simulated_latency_seconds must be between "
                f"{MIN_SIMULATED_LATENCY_SECONDS} and {MAX_SIMULATED_LATENCY_SECONDS}, "
                f"got {self.simulated_latency_seconds}"
            )

    @classmethod
    def from_environment(cls) -> WorkflowConfig:
        """Create config from environment variables with defaults.

        Out-of-range latency values are clamped rather than rejected.

        Returns:
            WorkflowConfig with values from environment or defaults.
        """
        latency = get_float_env(
            "SIGNBOARD_SIMULATED_LATENCY_SECONDS",
            DEFAULT_SIMULATED_LATENCY_SECONDS,
        )
        # Clamp to valid range
        latency = max(
            MIN_SIMULATED_LATENCY_SECONDS,
            min(latency, MAX_SIMULATED_LATENCY_SECONDS),
        )
        store_path = os.environ.get("SIGNBOARD_STORE_PATH") or None
        seed = os.environ.get("SIGNBOARD_SEED_DEMO_DATA", "true").lower() not in (
            "0",
            "false",
            "no",
        )
        return cls(
            simulated_latency_seconds=latency,
            store_path=store_path,
            seed_demo_data=seed,
            environment=os.environ.get(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT,
        )


# Default production config
DEFAULT_WORKFLOW_CONFIG = WorkflowConfig()

# Testing config: no latency, no demo data, logging left to the test
TEST_WORKFLOW_CONFIG = WorkflowConfig(
    simulated_latency_seconds=MIN_SIMULATED_LATENCY_SECONDS,
    seed_demo_data=False,
    environment="test",
    configure_logging=False,
)
