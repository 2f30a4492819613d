"""Vectors, Bézier curves, fractions, random generators, timing, MD5, Base64, URL and UTF-8 coding, byte buffers, CSV and localization tables, file and logging helpers."""

__version__ = "0.1.0"