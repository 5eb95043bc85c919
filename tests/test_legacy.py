"""Characterization tests for the legacy "before" routine.

These pin down the legacy behavior, quirks included, so the compare
command has a stable baseline to diff against.
"""

from refactorkata import legacy
from refactorkata.models import AGED_BRIE, BACKSTAGE_PASS, SULFURAS, Item


def run(name, sell_in, quality) -> int:
    item = Item(name, sell_in, quality)
    legacy.update_quality(item)
    return item.quality


# --- Agrees with the refactored engine ---

def test_normal_item_degrades_once():
    assert run("Normal Item", 5, 10) == 9
    assert run("Normal Item", -1, 10) == 9


def test_normal_item_floor():
    assert run("Normal Item", 5, 0) == 0


def test_brie_before_sell_by():
    assert run(AGED_BRIE, 2, 0) == 1


def test_pass_collapses_after_event():
    assert run(BACKSTAGE_PASS, -1, 30) == 0


def test_sulfuras_stable_before_sell_by():
    assert run(SULFURAS, 0, 80) == 80


# --- Quirks the refactor removed ---

def test_brie_stops_ageing_on_sell_by():
    assert run(AGED_BRIE, 0, 10) == 10
    assert run(AGED_BRIE, -3, 10) == 10


def test_pass_has_no_acceleration():
    assert run(BACKSTAGE_PASS, 5, 20) == 21


def test_expired_sulfuras_degrades():
    assert run(SULFURAS, -1, 80) == 79


def test_sell_in_untouched():
    item = Item(AGED_BRIE, 2, 0)
    legacy.update_quality(item)
    assert item.sell_in == 2
