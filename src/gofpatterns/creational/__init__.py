"""Creational patterns: factories, builder, prototype, singleton."""
