"""Parsers turning XML elements into :mod:`pykanjidic.models` objects."""
