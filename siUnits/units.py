from rich.console import Console
from rich.table import Table
from siUnits.DEFAULTS import DEFAULTS
from siUnits.logger import logger
from siUnits.culture import Culture
from siUnits.errors import (UnsupportedUnitType, InvalidArgument,
                            ConfigurationError)
from siUnits.abbreviations import AbbreviationTable, type_name
from siUnits.metadata import builtin_source
from siUnits.utils import yaml_writer


def _member(unit_type, unit_value):
    """Convert an integral value to the unit type's member where possible."""
    try:
        return unit_type(unit_value)
    except (ValueError, TypeError):
        return unit_value


def undefined(unit_type):
    """The zero-valued 'Undefined' sentinel of a unit type."""
    return _member(unit_type, 0)


class UnitSystem:
    """
    Culture-scoped parsing and formatting of unit abbreviations.

    The abbreviation table is built once from the metadata sources when the
    UnitSystem is created and is not modified afterwards, so an instance can
    be shared between threads.
    """
    __slots__ = ['_culture', '_table', '_sources']

    def __init__(self, culture=None, *sources):
        """
        Create a unit system for the specified culture.

        Args:
            culture (Culture or str, optional): Culture to build for. Defaults
                to the fallback culture (en-US).
            *sources (UnitSource): Metadata sources. Defaults to the built-in
                source.

        Raises:
            ConfigurationError: If a source is malformed.
        """
        culture = Culture.of(culture)
        if culture is None:
            culture = Culture(DEFAULTS.fallback_culture)

        if not sources:
            sources = (builtin_source(),)

        self._culture = culture
        self._sources = tuple(sources)
        self._table = AbbreviationTable(culture)

        for source in self._sources:
            self._load_source(source)

        logger.debug(f"Built UnitSystem for culture [{culture}] with "
                     f"{len(self._table.unit_types())} unit types from "
                     f"{len(self._sources)} source(s)")

    def _load_source(self, source):
        try:
            for unit_type in source.unit_types:
                for unit_value, i18n in source.localizations(unit_type):
                    self._register(unit_type, unit_value, i18n)
        except (AttributeError, TypeError, ValueError, InvalidArgument) as e:
            msg = f"Invalid unit source {source!r}: {e}"
            logger.error(msg)
            raise ConfigurationError(msg) from e

    def _register(self, unit_type, unit_value, i18n):
        abbreviations = self._select_localization(i18n)
        if abbreviations is None:
            logger.debug(f"No [{self._culture}] or "
                         f"[{DEFAULTS.fallback_culture}] abbreviations for "
                         f"{type_name(unit_type)} [{unit_value}], skipping")
            return

        self._table.register(unit_type, unit_value, abbreviations)

    def _select_localization(self, i18n):
        """
        Pick the abbreviations for this culture, falling back to the
        fallback culture (matched case-insensitively).
        """
        fallback_culture = Culture(DEFAULTS.fallback_culture)
        fallback = None
        for locale, abbreviations in i18n:
            if self._culture.matches(locale):
                return abbreviations
            if fallback is None and fallback_culture.matches(locale):
                fallback = abbreviations
        return fallback

    @property
    def culture(self):
        """The culture this unit system is based on."""
        return self._culture

    @property
    def sources(self):
        """The metadata sources this unit system was built from."""
        return self._sources

    @property
    def unit_types(self):
        """Unit types with at least one abbreviation in this culture."""
        return self._table.unit_types()

    def _check_unit_type(self, unit_type):
        if not self._table.has_unit_type(unit_type):
            raise UnsupportedUnitType(
                f"No abbreviations defined for unit type "
                f"[{type_name(unit_type)}] for culture [{self._culture}].")

    def parse(self, unit_type, abbreviation):
        """
        Parse a unit abbreviation.

        Warning: an unknown abbreviation does NOT raise. It returns the
        zero-valued 'Undefined' member of the unit type. Use try_parse to
        detect unknown abbreviations.

        Args:
            unit_type (type): Unit enumeration class, e.g. AngleUnit.
            abbreviation (str): Abbreviation, matched exactly.

        Returns:
            The parsed unit, or the 'Undefined' member.

        Raises:
            UnsupportedUnitType: If the unit type is unknown to this culture.
        """
        self._check_unit_type(unit_type)
        unit_value = self._table.reverse_lookup(unit_type, abbreviation)
        if unit_value is None:
            return undefined(unit_type)
        return _member(unit_type, unit_value)

    def try_parse(self, unit_type, abbreviation):
        """
        Parse a unit abbreviation, reporting unknown abbreviations.

        Returns:
            tuple: (True, unit) on success, (False, 'Undefined' member) if the
            abbreviation is not mapped.

        Raises:
            UnsupportedUnitType: If the unit type is unknown to this culture.
        """
        self._check_unit_type(unit_type)
        unit_value = self._table.reverse_lookup(unit_type, abbreviation)
        if unit_value is None:
            return False, undefined(unit_type)
        return True, _member(unit_type, unit_value)

    def get_default_abbreviation(self, unit, unit_type=None):
        """
        Get the default abbreviation of a unit.

        Args:
            unit (IntEnum member or int): The unit.
            unit_type (type, optional): Unit type, needed when unit is a plain
                int. Defaults to type(unit).

        Raises:
            NotFound: If no abbreviation is registered for the unit.
        """
        return self._table.default_abbreviation(unit_type or type(unit), unit)

    def get_all_abbreviations(self, unit, unit_type=None):
        """
        Get all abbreviations of a unit, default first.

        Raises:
            NotFound: If no abbreviation is registered for the unit.
        """
        return self._table.forward_lookup(unit_type or type(unit), unit)

    def as_dict(self):
        """Unit type name -> unit name -> abbreviations."""
        output = {}
        for unit_type in self.unit_types:
            output[type_name(unit_type)] = {
                getattr(_member(unit_type, value), 'name', str(value)): abbrevs
                for value, abbrevs in self._table.items(unit_type)
            }
        return output

    def save(self, yaml_path='units.yaml'):
        """
        Save the abbreviations of this culture to a YAML file that can be
        loaded back with UnitSource.from_yaml.
        """
        config = {}
        for unit_type in self.unit_types:
            config[type_name(unit_type)] = {
                getattr(_member(unit_type, value), 'name', f"Value{value}"): {
                    'value': value,
                    'i18n': {self._culture.name: abbrevs}
                }
                for value, abbrevs in self._table.items(unit_type)
            }
        yaml_writer(yaml_path, config)

    def __repr__(self):
        return f"UnitSystem(culture={self._culture.name!r})"

    def __str__(self):
        """Return a formatted table of the abbreviations."""
        return self._make_table()

    def _make_table(self):
        """
        Create a formatted table representation of the UnitSystem using rich.

        Returns:
            str: The formatted string representation of the UnitSystem.
        """
        table = Table(title=f"Culture: {self._culture}")
        table.add_column("Unit Type", style="bold")
        table.add_column("Unit")
        table.add_column("Abbreviations")

        for unit_type, units in self.as_dict().items():
            for unit, abbrevs in units.items():
                table.add_row(unit_type, unit, ', '.join(abbrevs))

        # Capture the table output using the rich console
        console = Console()
        with console.capture() as capture:
            console.print(table)
        return capture.get()
