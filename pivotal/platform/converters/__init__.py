"""Converters between entities and wire documents."""
