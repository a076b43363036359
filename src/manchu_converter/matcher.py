"""
Greedy longest-match segmentation of one romanized Manchu word.

A word is split into extended grapheme clusters (so ``u`` + combining
macron stays one character), then scanned left to right.  At each
position the multi-grapheme rules are tried in priority order before
falling back to a single-grapheme lookup.  Matching is greedy: a unit
chosen at one position is never revisited.

Usage:
    from manchu_converter.matcher import convert_word, segment

    convert_word("takūrafi")    # [0x1868, 0x1820, ...]
    segment("wesimburengge")    # ['w', 'e', ..., 'ng', 'g', 'e']
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import regex

from manchu_converter.phonemes import PHONEME_TABLE, lookup

logger = logging.getLogger(__name__)

_GRAPHEME_RE = regex.compile(r"\X")


# ── Multi-grapheme rules ────────────────────────────────────────────
# Each rule: (grapheme pattern, unit key), tried in this order.
# Longer units come before shorter ones sharing a prefix.

MULTI_UNIT_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("c", "'", "y"), "c'y"),
    (("t", "s", "'"), "ts'"),
    (("n", "g"),      "ng"),
    (("d", "z"),      "dz"),
    (("k", "'"),      "k'"),
    (("g", "'"),      "g'"),
    (("h", "'"),      "h'"),
)


class UnmappableWordError(ValueError):
    """Raised when a word has no segmentation into known phoneme units."""

    def __init__(self, word: str, position: int, grapheme: str):
        self.word = word
        self.position = position
        self.grapheme = grapheme
        super().__init__(
            f"Valid syllable not found in {word!r} "
            f"(at grapheme {position}: {grapheme!r})"
        )


def graphemes(word: str) -> list[str]:
    """Split a word into extended grapheme clusters."""
    return _GRAPHEME_RE.findall(word)


def _match_rule(clusters: list[str], i: int) -> tuple[str, int] | None:
    """Return (unit key, length) of the first rule matching at ``i``."""
    remaining = len(clusters) - i
    for pattern, key in MULTI_UNIT_RULES:
        if remaining < len(pattern):
            continue
        if tuple(clusters[i:i + len(pattern)]) == pattern:
            return key, len(pattern)
    return None


def segment(word: str, table: Mapping[str, int] = PHONEME_TABLE) -> list[str]:
    """Segment a word into phoneme unit spellings.

    Raises UnmappableWordError at the first position where neither a
    multi-grapheme rule nor a single-grapheme lookup succeeds, or where a
    rule fires for a unit missing from ``table``.
    """
    clusters = graphemes(word)
    units: list[str] = []
    i = 0
    while i < len(clusters):
        matched = _match_rule(clusters, i)
        if matched is not None:
            key, length = matched
            if lookup(key, table) is None:
                # The rule fired, so the single letters are not tried.
                raise UnmappableWordError(word, i, key)
            units.append(key)
            i += length
            continue

        if lookup(clusters[i], table) is None:
            raise UnmappableWordError(word, i, clusters[i])
        units.append(clusters[i])
        i += 1
    return units


def convert_word(
    word: str,
    error_tolerant: bool = False,
    table: Mapping[str, int] = PHONEME_TABLE,
) -> list[int] | None:
    """Convert one romanized word to a list of Manchu code points.

    A word that cannot be fully segmented fails as a whole, in either
    mode; partial matches are never returned.  By default the failure
    raises UnmappableWordError.  With ``error_tolerant=True`` the failure
    is reported by returning None instead, leaving the caller to decide
    what to emit.
    """
    try:
        units = segment(word, table)
    except UnmappableWordError as e:
        logger.debug("Unmappable word %r at grapheme %d (%r)",
                     word, e.position, e.grapheme)
        if error_tolerant:
            return None
        raise
    return [lookup(unit, table) for unit in units]


def to_text(codepoints: list[int]) -> str:
    """Render a code point list as a string."""
    return "".join(chr(cp) for cp in codepoints)
