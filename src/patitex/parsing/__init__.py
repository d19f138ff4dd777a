"""Parsing internals: block engine, block parsers, inline parser, fence scanning."""
