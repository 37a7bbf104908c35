import threading
from siUnits.DEFAULTS import DEFAULTS, UnitSettings
from siUnits.logger import logger
from siUnits.culture import Culture
from siUnits.metadata import builtin_source
from siUnits.units import UnitSystem


def _distinct(sources):
    """Remove repeated sources (by identity), keeping the first occurrence."""
    unique = []
    for source in sources:
        if not any(source is seen for seen in unique):
            unique.append(source)
    return unique


class Registry:
    """
    Cache of UnitSystem instances keyed by culture.

    Building a UnitSystem walks every metadata source, so instances are built
    once per culture and reused. Sources must be added before the first
    get_or_create call for a culture, as the instance is cached.

    One lock guards both the source list and the cache.
    """

    def __init__(self, sources=None):
        """
        Args:
            sources (list of UnitSource, optional): Initial metadata sources.
                Defaults to the built-in source.
        """
        self._lock = threading.Lock()
        self._cache = {}
        self._sources = []

        if sources is None:
            sources = [builtin_source()]
        for source in sources:
            self.add_source(source)

    @property
    def sources(self):
        """Snapshot of the registered metadata sources."""
        with self._lock:
            return tuple(self._sources)

    @property
    def cultures(self):
        """Snapshot of the cultures with a cached UnitSystem."""
        with self._lock:
            return tuple(self._cache)

    def add_source(self, source):
        """
        Register a metadata source.

        Adding the same object again is a no-op.
        """
        with self._lock:
            if not any(source is existing for existing in self._sources):
                self._sources.append(source)
                logger.debug(f"Added unit source {source!r}")

    def remove_source(self, source):
        """
        Remove a metadata source.

        Returns:
            bool: True if the source was registered and has been removed.
        """
        with self._lock:
            for i, existing in enumerate(self._sources):
                if existing is source:
                    del self._sources[i]
                    logger.debug(f"Removed unit source {source!r}")
                    return True
        return False

    def get_or_create(self, culture=None, *extra_sources):
        """
        Get or create the unit system for a culture.

        Args:
            culture (Culture or str, optional): Defaults to DEFAULTS.culture.
            *extra_sources (UnitSource): Sources used in addition to the
                registered ones when the culture is not cached yet.

        Returns:
            UnitSystem: The cached instance for the culture.
        """
        culture = Culture.of(culture)
        if culture is None:
            culture = Culture(DEFAULTS.culture)

        with self._lock:
            cached = self._cache.get(culture)
            sources = list(self._sources)

        if cached is not None:
            return cached

        # Built outside the lock, the first finished build is kept
        system = UnitSystem(culture, *_distinct(sources + list(extra_sources)))
        with self._lock:
            cached = self._cache.setdefault(culture, system)

        if cached is system:
            logger.debug(f"Cached UnitSystem for culture [{culture}]")
        return cached

    def clear(self):
        """Remove all cached unit systems. Sources are kept."""
        with self._lock:
            self._cache.clear()

    def __len__(self):
        with self._lock:
            return len(self._cache)

    def __contains__(self, culture):
        culture = Culture.of(culture)
        with self._lock:
            return culture in self._cache


# Process-wide registry used by the helper functions below
default_registry = Registry()


def set_culture(culture=None):
    """
    Set the culture used when no culture is specified.

    Args:
        culture (Culture or str, optional): New culture. None restores the
            default culture (en-US).
    """
    culture = Culture.of(culture)
    if culture is None:
        culture = Culture(UnitSettings().culture)
    DEFAULTS.culture = culture.name


def get_cached(culture=None, *extra_sources):
    """Get or create the unit system of a culture from the default registry."""
    return default_registry.get_or_create(culture, *extra_sources)


def parse(unit_type, abbreviation, culture=None):
    """Parse an abbreviation, returning 'Undefined' if it is not mapped."""
    return get_cached(culture).parse(unit_type, abbreviation)


def try_parse(unit_type, abbreviation, culture=None):
    """Parse an abbreviation, returning a (success, unit) tuple."""
    return get_cached(culture).try_parse(unit_type, abbreviation)


def get_default_abbreviation(unit, culture=None):
    """Default abbreviation of a unit in a culture."""
    return get_cached(culture).get_default_abbreviation(unit)


def get_all_abbreviations(unit, culture=None):
    """All abbreviations of a unit in a culture, default first."""
    return get_cached(culture).get_all_abbreviations(unit)
