"""Data models for the refactorkata corpus.

Category and Engine enums, Item, Rule, TestResult, DaySnapshot,
SimulationResult, Divergence, Comparison: the typed structures that
flow through quality → simulator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MIN_QUALITY = 0
MAX_QUALITY = 50

AGED_BRIE = "Aged Brie"
BACKSTAGE_PASS = "Backstage passes to a TAFKAL80ETC concert"
SULFURAS = "Sulfuras, Hand of Ragnaros"


class Category(str, Enum):
    """Closed classification of an item, derived once from its name."""

    GENERIC = "generic"
    AGED_BRIE = "aged-brie"
    BACKSTAGE_PASS = "backstage-pass"
    LEGENDARY = "legendary"


_CATEGORY_BY_NAME = {
    AGED_BRIE: Category.AGED_BRIE,
    BACKSTAGE_PASS: Category.BACKSTAGE_PASS,
    SULFURAS: Category.LEGENDARY,
}


def classify(name: str) -> Category:
    """Classify an item name by exact match. Unknown names are generic."""
    return _CATEGORY_BY_NAME.get(name, Category.GENERIC)


class Engine(str, Enum):
    """Which version of the kata's update routine to run."""

    REFACTORED = "refactored"
    LEGACY = "legacy"


class Rule(str, Enum):
    """The four quality rules, in evaluation order."""

    DECREASE = "decrease"
    INCREASE = "increase"
    ACCELERATED_INCREASE = "accelerated-increase"
    POST_EVENT_COLLAPSE = "post-event-collapse"


@dataclass
class Item:
    """A single inventory record.

    The rule engine only ever touches ``quality``; ``sell_in`` is advanced by
    whoever drives the days.
    """

    name: str
    sell_in: int
    quality: int

    @property
    def category(self) -> Category:
        return classify(self.name)

    @classmethod
    def from_dict(cls, d: dict) -> Item:
        return cls(name=d["name"], sell_in=d["sell_in"], quality=d["quality"])


@dataclass
class TestResult:
    """Pytest judge results for a single kata run."""

    __test__ = False  # not a pytest test class

    passed: int = 0
    failed: int = 0
    errors: int = 0
    total: int = 0
    output: str = ""

    @property
    def verdict(self) -> str:
        if self.total == 0:
            return "no-tests"
        if self.passed == self.total:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"


@dataclass
class DaySnapshot:
    """Qualities of every item at the end of a given day (day 0 = start)."""

    day: int
    items: list[Item] = field(default_factory=list)


@dataclass
class SimulationResult:
    """Day-by-day history of one engine run over an inventory."""

    engine: str
    days: int
    snapshots: list[DaySnapshot] = field(default_factory=list)

    @property
    def final(self) -> list[Item]:
        return self.snapshots[-1].items if self.snapshots else []


@dataclass
class Divergence:
    """A (day, item) where the legacy and refactored engines disagree."""

    day: int
    index: int
    name: str
    sell_in: int
    legacy_quality: int
    refactored_quality: int

    @property
    def delta(self) -> int:
        return self.refactored_quality - self.legacy_quality


@dataclass
class Comparison:
    """Side-by-side run of both engines over the same inventory."""

    days: int
    legacy: SimulationResult
    refactored: SimulationResult
    divergences: list[Divergence] = field(default_factory=list)

    @property
    def diverged_items(self) -> list[str]:
        """Names of items that diverged at least once, in first-seen order."""
        seen: list[str] = []
        for d in self.divergences:
            if d.name not in seen:
                seen.append(d.name)
        return seen
