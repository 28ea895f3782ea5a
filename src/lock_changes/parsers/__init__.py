"""Lockfile format parsers; each exposes ``parse(text) -> {name: version}``."""
