"""Gilded Rose kata: untangle a quality updater's compound predicates.

Starting point is refactorkata.legacy: one function of nested AND/OR
conditions over raw item names. Target is refactorkata.quality: named
predicates plus one orchestrating routine. The judge suite scores either
side via REFACTORKATA_ENGINE.
"""

NAME = "gilded_rose"
DESCRIPTION = "Extract named predicates from a tangled item-quality updater"
SMELLS = ["complex predicates", "magic numbers", "duplicated name checks", "double negation"]
TIMEOUT_S = 60
TOTAL_TESTS = 14
