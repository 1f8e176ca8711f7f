"""Behavioral patterns: chain of responsibility, command, interpreter."""
