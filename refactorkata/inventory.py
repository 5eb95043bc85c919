"""Inventory loading for simulations.

Inventories are JSON arrays of {"name", "sell_in", "quality"} objects. When
no file is given the classic kata inventory is used.
"""

from __future__ import annotations

import json
from pathlib import Path

from refactorkata.models import AGED_BRIE, BACKSTAGE_PASS, SULFURAS, Item

_REQUIRED_FIELDS = ("name", "sell_in", "quality")


class InventoryError(ValueError):
    """Raised when an inventory file can't be read or is malformed."""


def default_inventory() -> list[Item]:
    """The standard Gilded Rose starting inventory."""
    return [
        Item("+5 Dexterity Vest", 10, 20),
        Item(AGED_BRIE, 2, 0),
        Item("Elixir of the Mongoose", 5, 7),
        Item(SULFURAS, 0, 80),
        Item(SULFURAS, -1, 80),
        Item(BACKSTAGE_PASS, 15, 20),
        Item(BACKSTAGE_PASS, 10, 49),
        Item(BACKSTAGE_PASS, 5, 49),
    ]


def _parse_entry(i: int, entry: object) -> Item:
    if not isinstance(entry, dict):
        raise InventoryError(f"entry {i}: expected an object, got {type(entry).__name__}")
    missing = [k for k in _REQUIRED_FIELDS if k not in entry]
    if missing:
        raise InventoryError(f"entry {i}: missing field(s) {', '.join(missing)}")
    if not isinstance(entry["name"], str):
        raise InventoryError(f"entry {i}: name must be a string")
    for key in ("sell_in", "quality"):
        # bool is an int subclass; reject it explicitly
        if not isinstance(entry[key], int) or isinstance(entry[key], bool):
            raise InventoryError(f"entry {i}: {key} must be an integer")
    return Item.from_dict(entry)


def load_inventory(path: Path) -> list[Item]:
    """Load an inventory from a JSON file.

    Raises:
        InventoryError: If the file is unreadable, not valid JSON, not a
            list, or has malformed entries.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise InventoryError(f"inventory file not found: {path}")
    except json.JSONDecodeError as e:
        raise InventoryError(f"invalid JSON in {path}: {e}")
    except UnicodeDecodeError as e:
        raise InventoryError(f"cannot decode {path} as UTF-8: {e}")
    except OSError as e:
        raise InventoryError(f"cannot read {path}: {e}")

    if not isinstance(data, list):
        raise InventoryError(f"{path}: expected a JSON array of items")
    return [_parse_entry(i, entry) for i, entry in enumerate(data)]
