"""Custom exception hierarchy for the word hunt engine."""


class WordHuntError(Exception):
    """Base exception for engine failures."""


class WordBankError(WordHuntError):
    """Raised when the word catalog cannot satisfy a request."""


class PlacementError(WordHuntError):
    """Raised when a word would overlap content or leave the grid."""


class CoordinateError(WordHuntError):
    """Raised for a row/column outside the grid."""


class GenerationError(WordHuntError):
    """Raised when a generated puzzle cannot be played."""
