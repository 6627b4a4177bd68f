"""
app/parsers/material_text.py

Tokenizing and quantity extraction for free-form material lists such as
"93 Cobbled Deepslate; 59 Scaffolding" or "Chest x4, 16x Hopper".
"""

from __future__ import annotations

import re

from app.domain.farm_import import RawEntry

_LINE_SPLIT_PATTERN = re.compile(r"\r?\n")
_ENTRY_SPLIT_PATTERN = re.compile(r"[;,]")

# Tried in order; the first pattern that matches decides the split.
# Each tuple is (pattern, quantity group, name group).
_ENTRY_PATTERNS: tuple[tuple[re.Pattern[str], int, int], ...] = (
    (re.compile(r"^(\d+)\s+(.+)$"), 1, 2),
    (re.compile(r"^(.+?)\s*x\s*(\d+)$", re.IGNORECASE), 2, 1),
    (re.compile(r"^(\d+)x\s+(.+)$", re.IGNORECASE), 1, 2),
    (re.compile(r"^(.+?)\s*:\s*(\d+)$"), 2, 1),
)


def tokenize_entries(text: str | None) -> list[str]:
    """
    Split raw text into trimmed, non-empty candidate entries.

    Newlines split first, then each line is split on commas and semicolons.
    Original order is preserved.
    """

    if not text or not text.strip():
        return []

    entries: list[str] = []
    for line in _LINE_SPLIT_PATTERN.split(text):
        for chunk in _ENTRY_SPLIT_PATTERN.split(line):
            candidate = chunk.strip()
            if candidate:
                entries.append(candidate)
    return entries


def extract_entry(candidate: str) -> RawEntry | None:
    """
    Parse one candidate into a quantity/name pair.

    Returns None when no syntax matches or the quantity is not positive.
    """

    text = candidate.strip()
    for pattern, quantity_group, name_group in _ENTRY_PATTERNS:
        match = pattern.match(text)
        if match is None:
            continue

        quantity = int(match.group(quantity_group))
        raw_name = match.group(name_group).strip()
        if quantity < 1 or not raw_name:
            return None
        return RawEntry(quantity=quantity, raw_name=raw_name)

    return None
