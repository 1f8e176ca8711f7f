"""Structural patterns: adapter, bridge, composite, decorator, facade, flyweight, proxy."""
