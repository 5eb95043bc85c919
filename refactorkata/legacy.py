"""Item quality updater: the unrefactored "before" side of the kata.

Works, mostly, but is poorly structured:
- Intent hidden behind compound AND/OR conditions
- Item names re-tested by raw string in every branch
- Magic numbers (0, 50) instead of named bounds

Kept as-is so the compare command can show where the refactored engine
changed behavior. Do not tidy this file; it is the exercise.
"""

from refactorkata.models import Item


def update_quality(item: Item) -> None:
    # Update quality based on complex conditions
    if (
        (item.name != "Aged Brie" and item.name != "Backstage passes to a TAFKAL80ETC concert" and item.quality > 0 and (item.name != "Sulfuras, Hand of Ragnaros"))
        or (item.sell_in < 0 and item.name != "Aged Brie" and item.name != "Backstage passes to a TAFKAL80ETC concert" and item.quality > 0)
    ):
        item.quality = item.quality - 1

    # Increase quality for special items
    if (
        (item.name == "Aged Brie" or item.name == "Backstage passes to a TAFKAL80ETC concert")
        and item.quality < 50
        and (item.sell_in > 0 or item.name == "Backstage passes to a TAFKAL80ETC concert")
    ):
        item.quality = item.quality + 1

    # Handle expired backstage passes
    if (
        item.name == "Backstage passes to a TAFKAL80ETC concert"
        and item.sell_in < 0
        and (item.quality > 0)
    ):
        item.quality = 0
