"""Custom exception hierarchy for word-search generation."""


class WordSearchError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(WordSearchError):
    """Raised when generator settings cannot describe a playable board."""


class BoardIntegrityError(WordSearchError):
    """Raised when a generated board breaks its placement invariants."""
