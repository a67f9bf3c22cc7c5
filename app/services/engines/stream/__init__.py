"""Stream-style cipher engines."""

from app.services.engines.stream.xor import XorEngine

__all__ = [
    "XorEngine",
]
