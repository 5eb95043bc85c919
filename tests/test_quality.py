"""Tests for the refactored rule engine's predicates, ordering and trace."""

from refactorkata import quality
from refactorkata.models import AGED_BRIE, BACKSTAGE_PASS, SULFURAS, Category, Item, Rule, classify


# --- Classification ---

def test_classify_known_names():
    assert classify(AGED_BRIE) is Category.AGED_BRIE
    assert classify(BACKSTAGE_PASS) is Category.BACKSTAGE_PASS
    assert classify(SULFURAS) is Category.LEGENDARY


def test_classify_unknown_is_generic():
    assert classify("Elixir of the Mongoose") is Category.GENERIC
    assert classify("") is Category.GENERIC


def test_item_category_follows_name():
    item = Item("Normal Item", 1, 1)
    assert item.category is Category.GENERIC
    item.name = AGED_BRIE
    assert item.category is Category.AGED_BRIE


# --- Predicates ---

def test_special_set():
    assert not quality.is_special(Item("Normal Item", 1, 1))
    for name in (AGED_BRIE, BACKSTAGE_PASS, SULFURAS):
        assert quality.is_special(Item(name, 1, 1)), name


def test_expired_only_below_zero():
    assert not quality.has_expired(Item("x", 1, 1))
    assert not quality.has_expired(Item("x", 0, 1))
    assert quality.has_expired(Item("x", -1, 1))


def test_quality_bounds_predicates():
    assert not quality.has_quality_to_decrease(Item("x", 1, 0))
    assert quality.has_quality_to_decrease(Item("x", 1, 1))
    assert quality.has_quality_to_increase(Item("x", 1, 49))
    assert not quality.has_quality_to_increase(Item("x", 1, 50))


def test_legendary_matches_no_rule():
    for sell_in in (5, 0, -5):
        item = Item(SULFURAS, sell_in, 80)
        assert not quality.should_decrease_quality(item)
        assert not quality.should_increase_quality(item)
        assert not quality.should_increase_quality_more_rapidly(item)
        assert not quality.should_lose_all_quality_after_event(item)


def test_acceleration_and_collapse_are_exclusive():
    """At any countdown, a pass is either accelerating or collapsing, never both."""
    for sell_in in range(-3, 4):
        item = Item(BACKSTAGE_PASS, sell_in, 20)
        assert not (
            quality.should_increase_quality_more_rapidly(item)
            and quality.should_lose_all_quality_after_event(item)
        )


# --- update_quality ---

def test_update_returns_none_and_mutates_in_place():
    item = Item(AGED_BRIE, 2, 0)
    assert quality.update_quality(item) is None
    assert item.quality == 1
    assert item.sell_in == 2


def test_pass_at_49_stops_at_50():
    item = Item(BACKSTAGE_PASS, 3, 49)
    quality.update_quality(item)
    assert item.quality == 50


def test_collapse_is_last_rule():
    assert quality.RULES[-1][0] is Rule.POST_EVENT_COLLAPSE
    assert [r for r, _, _ in quality.RULES] == list(Rule)


# --- fired_rules ---

def test_trace_pending_pass():
    item = Item(BACKSTAGE_PASS, 0, 10)
    trace = quality.fired_rules(item)
    assert trace == [
        (Rule.DECREASE, False, 10),
        (Rule.INCREASE, True, 11),
        (Rule.ACCELERATED_INCREASE, True, 12),
        (Rule.POST_EVENT_COLLAPSE, False, 12),
    ]
    assert item.quality == 10  # caller's item untouched


def test_trace_sees_earlier_rules():
    """Acceleration is evaluated after the first increase has been applied."""
    trace = quality.fired_rules(Item(BACKSTAGE_PASS, 4, 49))
    assert trace[1] == (Rule.INCREASE, True, 50)
    assert trace[2] == (Rule.ACCELERATED_INCREASE, False, 50)


def test_trace_expired_pass():
    trace = quality.fired_rules(Item(BACKSTAGE_PASS, -1, 30))
    fired = [rule for rule, hit, _ in trace if hit]
    assert fired == [Rule.INCREASE, Rule.POST_EVENT_COLLAPSE]
    assert trace[-1][2] == 0


def test_trace_matches_update():
    for name in ("Normal Item", AGED_BRIE, BACKSTAGE_PASS, SULFURAS):
        for sell_in in (3, 0, -1):
            for q in (0, 1, 49, 50):
                item = Item(name, sell_in, q)
                expected = quality.fired_rules(item)[-1][2]
                quality.update_quality(item)
                assert item.quality == expected, (name, sell_in, q)
