"""manchu-converter: romanized Manchu to Manchu script transliteration."""

from manchu_converter.phonemes import PHONEME_TABLE, lookup
from manchu_converter.matcher import UnmappableWordError, convert_word, graphemes, segment
from manchu_converter.converter import (
    ConversionError, ConversionReport, ManchuConverter, convert_to_manchu,
)
from manchu_converter.config import ConverterConfig

__all__ = [
    "PHONEME_TABLE", "lookup",
    "UnmappableWordError", "convert_word", "graphemes", "segment",
    "ConversionError", "ConversionReport", "ManchuConverter", "convert_to_manchu",
    "ConverterConfig",
]
