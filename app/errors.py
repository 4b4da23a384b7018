# app/errors.py


class KeyraceError(Exception):
    pass


class ConfigError(KeyraceError, ValueError):
    """Invalid settings.json / themes.json content."""


class PhraseSourceError(KeyraceError):
    """The word list could not be used to build phrases."""
