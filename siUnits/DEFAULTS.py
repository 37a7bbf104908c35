from dataclasses import dataclass


@dataclass
class UnitSettings:
    """Default settings for siUnits abbreviation lookups."""
    # Culture used when no culture is passed to the registry or helpers
    culture: str = 'en-US'
    # Localization used when a unit has no entry for the requested culture
    fallback_culture: str = 'en-US'
    log_level: str = 'warning'

# Create the default instance
DEFAULTS = UnitSettings()
