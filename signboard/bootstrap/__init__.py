"""Composition root for wiring dependencies.

Application code depends on ports; this package is where the concrete
adapters and stubs are chosen.
"""

from signboard.bootstrap.logging import configure_structlog
from signboard.bootstrap.signage import SignageContainer, build_signage

__all__ = ["SignageContainer", "build_signage", "configure_structlog"]
