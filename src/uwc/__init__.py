"""uwc: count lines, words, bytes, grapheme clusters and code points in UTF-8 text."""

__version__ = "0.1.0"
