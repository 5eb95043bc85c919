"""Environment-driven settings and the judge subprocess env builder.

Settings are plain env vars with inline defaults; CLI options override them.
"""

from __future__ import annotations

import os
from typing import Optional

from refactorkata.models import Engine

ENGINE_VAR = "REFACTORKATA_ENGINE"
DAYS_VAR = "REFACTORKATA_DAYS"

DEFAULT_DAYS = 10

# Vars from an outer pytest session that would leak into the judge run.
_PYTEST_LEAK_VARS = ("PYTEST_CURRENT_TEST", "PYTEST_ADDOPTS", "PYTEST_XDIST_WORKER")


def default_days() -> int:
    """Day count for simulate/compare: REFACTORKATA_DAYS or 10."""
    raw = os.environ.get(DAYS_VAR, "")
    try:
        days = int(raw)
    except ValueError:
        return DEFAULT_DAYS
    return days if days >= 0 else DEFAULT_DAYS


def selected_engine(env: Optional[dict[str, str]] = None) -> Engine:
    """Engine named by REFACTORKATA_ENGINE, falling back to refactored.

    Raises:
        ValueError: If the variable names an unknown engine.
    """
    env = os.environ if env is None else env
    return Engine(env.get(ENGINE_VAR) or Engine.REFACTORED.value)


def build_judge_env(engine: Engine) -> dict[str, str]:
    """Build the env for a judge pytest run against ``engine``."""
    env = os.environ.copy()
    for key in _PYTEST_LEAK_VARS:
        env.pop(key, None)
    env[ENGINE_VAR] = engine.value
    return env
