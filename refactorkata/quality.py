"""Quality update rule engine: the refactored "after" side of the kata.

Every business rule is a named predicate over a single Item. The category
is derived once from the name (see models.classify) so no rule re-tests raw
strings. update_quality() evaluates all four rules in order on every call:

    1. decrease              generic items lose 1, floored at MIN_QUALITY
    2. increase              Brie and passes gain 1, capped at MAX_QUALITY
    3. accelerated increase  unexpired passes gain 1 more
    4. post-event collapse   expired passes drop to 0

Legendary items match none of the predicates and are never changed.
"""

from __future__ import annotations

from refactorkata.models import MAX_QUALITY, MIN_QUALITY, Category, Item, Rule


# ---------------------------------------------------------------------------
# Category predicates
# ---------------------------------------------------------------------------

def is_aged_brie(item: Item) -> bool:
    return item.category is Category.AGED_BRIE


def is_backstage_pass(item: Item) -> bool:
    return item.category is Category.BACKSTAGE_PASS


def is_legendary(item: Item) -> bool:
    return item.category is Category.LEGENDARY


def is_special(item: Item) -> bool:
    return item.category is not Category.GENERIC


# ---------------------------------------------------------------------------
# State predicates
# ---------------------------------------------------------------------------

def has_quality_to_decrease(item: Item) -> bool:
    return item.quality > MIN_QUALITY


def has_quality_to_increase(item: Item) -> bool:
    return item.quality < MAX_QUALITY


def has_expired(item: Item) -> bool:
    """sell_in of exactly 0 is the last day, not expired."""
    return item.sell_in < 0


# ---------------------------------------------------------------------------
# Business rule predicates
# ---------------------------------------------------------------------------

def should_decrease_quality(item: Item) -> bool:
    return not is_special(item) and has_quality_to_decrease(item)


def should_increase_quality(item: Item) -> bool:
    return (is_aged_brie(item) or is_backstage_pass(item)) and has_quality_to_increase(item)


def should_increase_quality_more_rapidly(item: Item) -> bool:
    # Flat +1 while the event is pending; no 10/5-day tiers.
    return is_backstage_pass(item) and not has_expired(item) and has_quality_to_increase(item)


def should_lose_all_quality_after_event(item: Item) -> bool:
    return is_backstage_pass(item) and has_expired(item) and has_quality_to_decrease(item)


def _decrease(item: Item) -> None:
    item.quality -= 1


def _increase(item: Item) -> None:
    item.quality += 1


def _collapse(item: Item) -> None:
    item.quality = MIN_QUALITY


# Evaluation order matters: collapse must stay last so it wins.
RULES = (
    (Rule.DECREASE, should_decrease_quality, _decrease),
    (Rule.INCREASE, should_increase_quality, _increase),
    (Rule.ACCELERATED_INCREASE, should_increase_quality_more_rapidly, _increase),
    (Rule.POST_EVENT_COLLAPSE, should_lose_all_quality_after_event, _collapse),
)


def update_quality(item: Item) -> None:
    """Apply one day's quality rules to ``item`` in place.

    Only ``item.quality`` is touched. Nothing is validated and nothing is
    raised; quality is assumed to start within [0, 50] (legendary items
    excepted, since no rule applies to them).
    """
    for _rule, applies, apply in RULES:
        if applies(item):
            apply(item)


def fired_rules(item: Item) -> list[tuple[Rule, bool, int]]:
    """Trace which rules update_quality() would fire for ``item``.

    Works on a copy so the caller's item is left alone. Returns one
    ``(rule, fired, quality_after)`` tuple per rule, in evaluation order.
    """
    scratch = Item(name=item.name, sell_in=item.sell_in, quality=item.quality)
    trace: list[tuple[Rule, bool, int]] = []
    for rule, applies, apply in RULES:
        fired = applies(scratch)
        if fired:
            apply(scratch)
        trace.append((rule, fired, scratch.quality))
    return trace
