"""Transposition cipher engines."""

from app.services.engines.transposition.scytale import ScytaleEngine

__all__ = [
    "ScytaleEngine",
]
