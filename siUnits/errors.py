# Exceptions raised by siUnits lookups and metadata loading


class UnitsError(Exception):
    """Base class for all siUnits errors."""


class NotFound(UnitsError, KeyError):
    """No abbreviation is registered for the unit type or unit value."""

    def __str__(self):
        # KeyError quotes its message, keep it readable
        return str(self.args[0]) if self.args else ''


class UnsupportedUnitType(UnitsError, NotImplementedError):
    """The unit type was never registered in this UnitSystem."""


class InvalidArgument(UnitsError, ValueError):
    """An abbreviation list passed to registration is empty."""


class ConfigurationError(UnitsError, RuntimeError):
    """A metadata source is malformed."""
