"""Configuration module for Signboard.

Available Configurations:
- WorkflowConfig: Simulated latency and store location
- DisplayConfig: Defaults for the display settings record
"""

from signboard.config.display_config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from signboard.config.workflow_config import (
    DEFAULT_WORKFLOW_CONFIG,
    TEST_WORKFLOW_CONFIG,
    WorkflowConfig,
)

__all__ = [
    "DEFAULT_DISPLAY_CONFIG",
    "DEFAULT_WORKFLOW_CONFIG",
    "DisplayConfig",
    "TEST_WORKFLOW_CONFIG",
    "WorkflowConfig",
]
