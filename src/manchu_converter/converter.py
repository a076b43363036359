"""
Romanized Manchu text to Manchu script conversion.

Splits text into lines and whitespace-separated words, converts each word
with the greedy matcher, and reassembles the result with single spaces
between words and newlines between lines.  Words that cannot be converted
are collected and reported together once the whole text has been seen.

Usage:
    from manchu_converter import convert_to_manchu

    convert_to_manchu("manju")                       # "ᠮᠠᠨᠵᡠ"
    convert_to_manchu("manju 1644", ignore_error=True)  # "ᠮᠠᠨᠵᡠ 1644"

    conv = ManchuConverter.from_config("manchu_converter.toml")
    report = conv.convert_with_report("cooha be acaha")
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from manchu_converter.config import ConverterConfig
from manchu_converter.matcher import convert_word, to_text
from manchu_converter.phonemes import PHONEME_TABLE, get_aliases, get_multi_unit_keys

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """Raised when one or more words in a text could not be converted.

    ``words`` lists every failed word verbatim, in the order encountered,
    duplicates included.
    """

    def __init__(self, words: list[str]):
        self.words = list(words)
        super().__init__(
            "Error: Valid syllable not found in "
            + json.dumps(self.words, ensure_ascii=False)
        )


@dataclass(slots=True)
class ConversionReport:
    """Outcome of a text conversion that never raises.

    ``text`` holds the converted text with failed words passed through
    verbatim; ``failed_words`` lists them in encounter order.
    """

    text: str
    failed_words: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed_words


def _split_lines(text: str) -> list[list[str]]:
    """Split text into the words of each line.

    Empty lines between words are kept; trailing blank lines are dropped,
    so a final line break never reaches the output.
    """
    lines = [line.split() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    return lines


# ── Main converter class ───────────────────────────────────────────────────

class ManchuConverter:
    """
    Converts romanized Manchu text to Manchu script.

    Holds the phoneme table and the default tolerance setting.  The
    default instance uses the built-in table and fails on any
    unconvertible word:

        conv = ManchuConverter()
        conv.convert_text("cooha be acaha")
    """

    def __init__(
        self,
        table: Mapping[str, int] = PHONEME_TABLE,
        ignore_error: bool = False,
    ):
        self.table = table
        self.ignore_error = ignore_error

    @classmethod
    def from_config(cls, config_path: str | Path) -> ManchuConverter:
        """Build a converter from a TOML config file."""
        cfg = ConverterConfig.from_file(config_path)
        return cls(ignore_error=cfg.ignore_error)

    def convert_word(self, word: str) -> str | None:
        """Convert a single word, returning None if it cannot be converted."""
        codepoints = convert_word(word, error_tolerant=True, table=self.table)
        if codepoints is None:
            return None
        return to_text(codepoints)

    def convert_with_report(self, text: str) -> ConversionReport:
        """Convert text, collecting failed words instead of raising.

        Failed words are kept verbatim in their position in the output.
        """
        out_lines = []
        failed: list[str] = []
        for words in _split_lines(text):
            out_words = []
            for word in words:
                converted = self.convert_word(word)
                if converted is None:
                    failed.append(word)
                    out_words.append(word)
                else:
                    out_words.append(converted)
            out_lines.append(" ".join(out_words))

        if failed:
            logger.debug("%d unconvertible word(s): %r", len(failed), failed)
        return ConversionReport(text="\n".join(out_lines), failed_words=failed)

    def convert_text(self, text: str, ignore_error: bool | None = None) -> str:
        """Convert romanized Manchu text to Manchu script.

        With ``ignore_error`` (defaulting to the converter's setting)
        unconvertible words are passed through unchanged.  Otherwise a
        ConversionError naming every failed word is raised, and the
        partially converted text is discarded.
        """
        if ignore_error is None:
            ignore_error = self.ignore_error

        report = self.convert_with_report(text)
        if report.failed_words and not ignore_error:
            raise ConversionError(report.failed_words)
        return report.text

    def convert_codepoints(
        self, text: str, ignore_error: bool | None = None,
    ) -> list[list[tuple[str, list[int] | None]]]:
        """Convert text to per-line lists of (word, code points) pairs.

        Lines and words are split as in convert_text.  An unconvertible
        word carries None; unless ``ignore_error`` is in effect, any such
        word raises ConversionError instead.
        """
        if ignore_error is None:
            ignore_error = self.ignore_error

        lines = []
        failed: list[str] = []
        for words in _split_lines(text):
            pairs = []
            for word in words:
                cps = convert_word(word, error_tolerant=True, table=self.table)
                if cps is None:
                    failed.append(word)
                pairs.append((word, cps))
            lines.append(pairs)

        if failed and not ignore_error:
            raise ConversionError(failed)
        return lines

    def find_unmappable(self, text: str) -> list[str]:
        """Return the unconvertible words of a text, each reported once."""
        return list(dict.fromkeys(self.convert_with_report(text).failed_words))

    def summary(self) -> str:
        multi = sorted(get_multi_unit_keys(self.table))
        aliases = get_aliases(self.table)
        lines = ["Manchu Converter (romanized -> Manchu script)"]
        lines.append(f"  Phoneme table: {len(self.table)} entries")
        lines.append(f"  Multi units:   {', '.join(multi)}")
        lines.append(
            "  Aliases:       "
            + (", ".join(f"{a}={key}" for key, alts in aliases.items() for a in alts) or "none")
        )
        lines.append(f"  Ignore errors: {self.ignore_error}")
        return "\n".join(lines)


_DEFAULT_CONVERTER = ManchuConverter()


def convert_to_manchu(text: str, ignore_error: bool = False) -> str:
    """Convert romanized Manchu text to Manchu script.

    Raises ConversionError listing every unconvertible word unless
    ``ignore_error`` is set, in which case those words are passed
    through as they were written.
    """
    return _DEFAULT_CONVERTER.convert_text(text, ignore_error=ignore_error)
