"""Error taxonomy for the alert bot."""


class AlertBotError(Exception):
    """Base class for all alert bot errors."""


class ConfigurationMissingError(AlertBotError):
    """A required setting is absent or malformed. Fatal at startup."""


class PairListUnreadableError(AlertBotError):
    """The pair list file is missing or cannot be decoded."""


class DataFetchError(AlertBotError):
    """The market data source failed or returned an unusable payload."""


class InvalidInputError(AlertBotError, ValueError):
    """A pure computation received input it cannot work with."""
