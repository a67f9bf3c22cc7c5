"""Interactive playground running every cipher over one source text."""

from app.services.playground.runner import PlaygroundKeys, PlaygroundResult, PlaygroundRunner

__all__ = [
    "PlaygroundKeys",
    "PlaygroundResult",
    "PlaygroundRunner",
]
