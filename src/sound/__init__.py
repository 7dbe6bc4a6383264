"""Procedural sound effects."""
