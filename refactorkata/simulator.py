"""refactorkata simulator: drives engines over days and judges katas.

Data flow per simulation:
1. Deep-copy the inventory so the caller's items are never touched
2. Snapshot day 0
3. For each day: run the engine on every item, then age sell_in by one
4. Snapshot after each day, assemble a SimulationResult

compare() runs both engines through the same flow and diffs the snapshots.
run_judge() runs a kata's pytest suite in a subprocess against one engine.
"""

from __future__ import annotations

import copy
import re
import subprocess
import sys
from typing import Callable

from refactorkata import legacy, quality
from refactorkata.environment import build_judge_env
from refactorkata.katas import KataInfo
from refactorkata.models import (
    Comparison,
    DaySnapshot,
    Divergence,
    Engine,
    Item,
    SimulationResult,
    TestResult,
)

JUDGE_INSTALL_HINT = "Install it with: pip install 'refactorkata[judge]'"

UpdateFn = Callable[[Item], None]

_ENGINES: dict[Engine, UpdateFn] = {
    Engine.REFACTORED: quality.update_quality,
    Engine.LEGACY: legacy.update_quality,
}


def resolve_engine(engine: Engine) -> UpdateFn:
    """Return the update_quality routine for ``engine``."""
    return _ENGINES[Engine(engine)]


def advance_day(items: list[Item], update: UpdateFn) -> None:
    """Run one day: update every item's quality, then count sell_in down.

    Legendary items are never sold, so their sell_in stays put.
    """
    for item in items:
        update(item)
    for item in items:
        if not quality.is_legendary(item):
            item.sell_in -= 1


def _snapshot(day: int, items: list[Item]) -> DaySnapshot:
    return DaySnapshot(day=day, items=copy.deepcopy(items))


def simulate(items: list[Item], days: int, engine: Engine = Engine.REFACTORED) -> SimulationResult:
    """Run ``engine`` over a copy of ``items`` for ``days`` days.

    Args:
        items: Starting inventory. Not mutated.
        days: Number of days to advance (0 gives just the starting snapshot).
        engine: Which update routine to drive.

    Returns:
        SimulationResult with days + 1 snapshots (day 0 through day N).
    """
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")

    update = resolve_engine(engine)
    working = copy.deepcopy(items)
    result = SimulationResult(engine=Engine(engine).value, days=days)
    result.snapshots.append(_snapshot(0, working))

    for day in range(1, days + 1):
        advance_day(working, update)
        result.snapshots.append(_snapshot(day, working))

    return result


def compare(items: list[Item], days: int) -> Comparison:
    """Run legacy and refactored engines side by side and collect divergences."""
    old = simulate(items, days, Engine.LEGACY)
    new = simulate(items, days, Engine.REFACTORED)
    comparison = Comparison(days=days, legacy=old, refactored=new)

    for old_snap, new_snap in zip(old.snapshots, new.snapshots):
        for i, (a, b) in enumerate(zip(old_snap.items, new_snap.items)):
            if a.quality != b.quality:
                comparison.divergences.append(Divergence(
                    day=new_snap.day,
                    index=i,
                    name=b.name,
                    sell_in=b.sell_in,
                    legacy_quality=a.quality,
                    refactored_quality=b.quality,
                ))

    return comparison


def parse_pytest_summary(output: str) -> TestResult:
    """Parse pass/fail/error counts from pytest output.

    Matches the summary line, e.g. "3 failed, 11 passed in 0.05s".
    """
    passed = failed = errors = 0
    for m in re.finditer(r"(\d+) passed", output):
        passed = int(m.group(1))
    for m in re.finditer(r"(\d+) failed", output):
        failed = int(m.group(1))
    for m in re.finditer(r"(\d+) errors?\b", output):
        errors = int(m.group(1))

    return TestResult(
        passed=passed,
        failed=failed,
        errors=errors,
        total=passed + failed + errors,
        output=output,
    )


def run_judge(kata: KataInfo, engine: Engine = Engine.REFACTORED) -> TestResult:
    """Run a kata's judge suite against ``engine`` in a pytest subprocess."""
    try:
        proc = subprocess.run(
            [
                sys.executable, "-m", "pytest", str(kata.tests_dir),
                "-v", "--tb=short", "--no-header", "-p", "no:cacheprovider",
            ],
            cwd=kata.path,
            env=build_judge_env(Engine(engine)),
            capture_output=True,
            text=True,
            timeout=kata.timeout_s,
        )
    except subprocess.TimeoutExpired:
        return TestResult(output=f"pytest timed out after {kata.timeout_s}s")
    except FileNotFoundError:
        return TestResult(output="pytest not found")

    output = proc.stdout + "\n" + proc.stderr
    if "No module named pytest" in output:
        return TestResult(output=f"pytest is not installed. {JUDGE_INSTALL_HINT}")
    return parse_pytest_summary(output)
