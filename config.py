"""
Load Test — Configuration.

Defines environment-specific configuration classes for the pull-request
review load test.  Each class captures where the review-assignment
service lives and the operational knobs of the scenario (timeouts, think
time, setup strictness).  The ``get_config`` factory selects the right
class based on the ``LOAD_TEST_ENV`` environment variable (or an explicit
key).

Locust's own ``--host`` option still wins over ``BASE_URL`` when given.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Base (shared) configuration for the load test.

    All environment-specific classes inherit from ``Config`` so that
    common defaults only need to be stated once.
    """

    # Root URL of the review-assignment service under test.
    BASE_URL: str = os.environ.get("PR_SERVICE_BASE_URL", "http://localhost:8080")

    # Seconds to wait for the one-off setup call.
    REQUEST_TIMEOUT: float = float(os.environ.get("REQUEST_TIMEOUT", "10"))

    # Seconds to poll ``/health`` before seeding; 0 skips the wait.
    HEALTH_TIMEOUT: float = float(os.environ.get("HEALTH_TIMEOUT", "10"))

    # Pause between iterations of one virtual user.
    THINK_TIME_SECONDS: float = float(os.environ.get("THINK_TIME_SECONDS", "1"))

    # Stop every virtual user at start when team seeding failed.
    STRICT_SETUP: bool = _env_flag("STRICT_SETUP")

    THRESHOLDS_FILE: Path = Path(
        os.environ.get(
            "THRESHOLDS_FILE",
            str(BASE_DIR / "tests" / "performance" / "thresholds.yml"),
        )
    )


class DevelopmentConfig(Config):
    """Local runs against a service started on the developer's machine."""


class TestingConfig(Config):
    """
    Test-suite overrides.

    Points the base URL at a non-routable host so unit tests never hit a
    real service, and shrinks timeouts so failure paths finish quickly.
    """

    BASE_URL: str = os.environ.get("TEST_PR_SERVICE_BASE_URL", "http://pr-service.test")
    REQUEST_TIMEOUT: float = float(os.environ.get("TEST_REQUEST_TIMEOUT", "2"))
    HEALTH_TIMEOUT: float = float(os.environ.get("TEST_HEALTH_TIMEOUT", "0"))
    THINK_TIME_SECONDS: float = 0.0


class ProductionConfig(Config):
    """
    Runs against a shared deployment.

    Seeding failures are fatal here: a missing team would only show up
    later as a wall of failed reviewer checks.
    """

    STRICT_SETUP: bool = _env_flag("STRICT_SETUP", "true")


# Lookup table mapping environment name strings to their config classes.
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Return the configuration class for the given environment.

    Args:
        env: One of ``"development"``, ``"testing"``, or
            ``"production"``.  When *None*, the ``LOAD_TEST_ENV``
            environment variable is consulted, falling back to
            ``"development"`` if unset.

    Returns:
        The ``Config`` subclass matching the requested environment,
        or ``DevelopmentConfig`` if the key is unrecognised.
    """
    if env is None:
        env = os.environ.get("LOAD_TEST_ENV", "development")
    return config.get(env, config["default"])
