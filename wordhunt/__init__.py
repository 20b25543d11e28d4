"""Word hunt puzzle engine.

This package exposes the public API surface via:

- ``wordhunt.engine.session.GameSession``: holds the current puzzle and routes clicks.
- ``wordhunt.engine.generator.GridGenerator``: builds a board from a word list.
- ``wordhunt.data.word_bank.WordBank``: the candidate word catalog.

Rendering and dialogs live outside the package; a UI reads
``GameSession.snapshot()`` and subscribes with ``GameSession.on_solved``.
"""

from .data.word_bank import WordBank
from .engine.generator import GeneratorConfig, GridGenerator
from .engine.session import GameSession, SessionConfig

__all__ = [
    "GameSession",
    "SessionConfig",
    "GridGenerator",
    "GeneratorConfig",
    "WordBank",
]

__version__ = "0.1.0"
