"""Model adapter package for the bowling scorekeeper.

This package provides thin adapters over `bowling.engine` so that other
front-ends can consume roll-by-roll frame scores without re-implementing
the scoring rules.
"""

__all__ = ["adapter"]
