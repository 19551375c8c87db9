"""standup_text error types."""


class StandupTextError(Exception):
    """Base error for all standup_text failures."""


class InvalidModeError(StandupTextError, ValueError):
    """Stop-word filter mode is not one of english, thai, any."""


class LexiconError(StandupTextError):
    """Lexicon extension data could not be loaded."""


class LexiconVersionError(LexiconError):
    """Manifest version mismatch."""


class LexiconChecksumError(LexiconError):
    """File checksum verification failed."""
