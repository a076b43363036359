"""
Romanized Manchu to Manchu script phoneme table.

Principles:
- Keys are romanized spellings of one to three grapheme clusters
- Each key maps to exactly one code point in the Mongolian block
- Multi-grapheme units (ng, ts', dz, k', g', h', c'y) are whole units,
  not the concatenation of their letters; the matcher tries them first
- Keys are lowercase only; uppercase input is not folded

Usage:
    from manchu_converter.phonemes import PHONEME_TABLE, lookup
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from types import MappingProxyType


# ── Core mapping table ──────────────────────────────────────────────
# Each entry: (latin_input, codepoint, notes)

PHONEMES = [
    # ── Vowels ──────────────────────────────────────────────────────
    ("a",   0x1820, "MONGOLIAN LETTER A"),
    ("e",   0x185D, "SIBE E"),
    ("i",   0x1873, "MANCHU I"),
    ("o",   0x1823, "MONGOLIAN LETTER O"),
    ("u",   0x1860, "SIBE UE"),
    ("ū",   0x1861, "SIBE U"),
    ("v",   0x1861, "SIBE U (alias of ū for plain keyboards)"),

    # ── Consonants ──────────────────────────────────────────────────
    ("n",   0x1828, "MONGOLIAN LETTER NA"),
    ("ng",  0x1829, "MONGOLIAN LETTER ANG"),
    ("b",   0x182A, "MONGOLIAN LETTER BA"),
    ("p",   0x1866, "SIBE PA"),
    ("s",   0x1830, "MONGOLIAN LETTER SA"),
    ("š",   0x1867, "SIBE SHA"),
    ("x",   0x1867, "SIBE SHA (alias of š)"),
    ("k",   0x1874, "MANCHU KA"),
    ("g",   0x1864, "SIBE GA"),
    ("h",   0x1865, "SIBE HA"),
    ("l",   0x182F, "MONGOLIAN LETTER LA"),
    ("m",   0x182E, "MONGOLIAN LETTER MA"),
    ("t",   0x1868, "SIBE TA"),
    ("d",   0x1869, "SIBE DA"),
    ("r",   0x1875, "MANCHU RA"),
    ("j",   0x1835, "MONGOLIAN LETTER JA"),
    ("y",   0x1836, "MONGOLIAN LETTER YA"),
    ("c",   0x1834, "MONGOLIAN LETTER CHA"),
    ("f",   0x1876, "MANCHU FA"),
    ("w",   0x1838, "MONGOLIAN LETTER WA"),

    # ── Units used for Chinese loanwords ────────────────────────────
    ("ts'", 0x186E, "SIBE TSA"),
    ("dz",  0x186F, "SIBE ZA"),
    ("k'",  0x183B, "MONGOLIAN LETTER KHA"),
    ("g'",  0x186C, "SIBE GAA"),
    ("h'",  0x186D, "SIBE HAA"),
    ("c'y", 0x1871, "SIBE CHA"),
]


PHONEME_TABLE: MappingProxyType[str, int] = MappingProxyType(
    {lat: cp for lat, cp, _ in PHONEMES}
)


def lookup(
    spelling: str, table: Mapping[str, int] = PHONEME_TABLE,
) -> int | None:
    """Return the code point for a romanized spelling, or None.

    The spelling is NFC-normalized first, so ``u`` + combining macron
    finds the same entry as precomposed ``ū``.
    """
    return table.get(unicodedata.normalize("NFC", spelling))


# ── Convenience accessors ───────────────────────────────────────────

def get_multi_unit_keys(table: Mapping[str, int] = PHONEME_TABLE) -> set[str]:
    """Return the keys spanning more than one character."""
    return {lat for lat in table if len(lat) > 1}


def get_aliases(table: Mapping[str, int] = PHONEME_TABLE) -> dict[str, list[str]]:
    """Return codepoint-sharing keys, grouped by the first key listed."""
    by_cp: dict[int, list[str]] = {}
    for lat, cp in table.items():
        by_cp.setdefault(cp, []).append(lat)
    return {keys[0]: keys[1:] for keys in by_cp.values() if len(keys) > 1}


if __name__ == "__main__":
    print("=== Romanized Manchu Phoneme Table ===\n")

    for lat, cp, note in sorted(PHONEMES, key=lambda x: (-len(x[0]), x[0])):
        print(f"  {lat:>4s} → {chr(cp)}  U+{cp:04X}  ({note})")

    print(f"\nTotal entries: {len(PHONEMES)}")
    print(f"Multi-grapheme units: {sorted(get_multi_unit_keys())}")
