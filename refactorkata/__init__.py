"""refactorkata: before/after refactoring katas you can run.

Keeps the tangled "before" version of a routine next to its refactored
"after" version, and lets you drive, compare and judge both. The core kata
is a Gilded-Rose-style item-quality updater.

Usage:
    python -m refactorkata list                          # Show katas
    python -m refactorkata simulate --days 5             # Quality day by day
    python -m refactorkata compare                       # Where the refactor changed behavior
    python -m refactorkata judge gilded_rose             # Score the refactored engine
"""
