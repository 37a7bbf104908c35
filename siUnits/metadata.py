import inspect
from collections.abc import Mapping
from enum import IntEnum
from siUnits import unitSystems
from siUnits.logger import logger
from siUnits.errors import ConfigurationError
from siUnits.utils import yaml_loader


def _fail(msg):
    logger.error(msg)
    raise ConfigurationError(msg)


def get_unit_enums_from_module(module):
    """
    Collect all IntEnum unit types defined in a module.

    Args:
        module (module): Module to search.

    Returns:
        dict: Class name -> IntEnum class, for classes defined in the module.
    """
    return {
        name: cls for name, cls in inspect.getmembers(module, inspect.isclass)
        if issubclass(cls, IntEnum) and cls is not IntEnum
        and cls.__module__ == module.__name__
    }


class UnitSource:
    """
    Read-only table of unit types and their localized abbreviations.

    The table maps each unit type (an IntEnum class) to its unit values, and
    each unit value to a mapping of locale name -> abbreviation list:

        {AngleUnit: {AngleUnit.Radian: {'en-US': ['rad'],
                                       'ru-RU': ['рад']}}}

    Sources are compared by identity, so registering the same object twice in
    a Registry has no effect.
    """

    def __init__(self, table, name=None):
        self.name = name if name is not None else 'custom'
        self._table = self._normalize(table)

    def _normalize(self, table):
        if not isinstance(table, Mapping):
            _fail(f"Unit source '{self.name}' must be a mapping of unit "
                  f"types, got: {type(table).__name__}")

        normalized = {}
        for unit_type, values in table.items():
            if not (isinstance(unit_type, type)
                    and issubclass(unit_type, IntEnum)):
                _fail(f"Unit source '{self.name}': unit type must be an "
                      f"IntEnum class, got: {unit_type!r}")
            if not isinstance(values, Mapping):
                _fail(f"Unit source '{self.name}': localizations for "
                      f"'{unit_type.__name__}' must be a mapping")

            entries = {}
            for unit_value, i18n in values.items():
                try:
                    member = unit_type(unit_value)
                except (ValueError, TypeError):
                    _fail(f"Unit source '{self.name}': {unit_value!r} is not "
                          f"a value of '{unit_type.__name__}'")
                entries[int(member)] = self._normalize_i18n(
                    f"{unit_type.__name__}.{member.name}", i18n)

            normalized[unit_type] = entries

        return normalized

    def _normalize_i18n(self, label, i18n):
        if not isinstance(i18n, Mapping):
            _fail(f"Unit source '{self.name}': localizations for '{label}' "
                  f"must map locale names to abbreviation lists")

        pairs = []
        for locale, abbreviations in i18n.items():
            if not isinstance(locale, str) or not locale.strip():
                _fail(f"Unit source '{self.name}': invalid locale name "
                      f"{locale!r} for '{label}'")
            if (not isinstance(abbreviations, (list, tuple))
                    or not abbreviations
                    or not all(isinstance(a, str) for a in abbreviations)):
                _fail(f"Unit source '{self.name}': abbreviations for "
                      f"'{label}' [{locale}] must be a non-empty list of "
                      f"strings, got: {abbreviations!r}")
            pairs.append((locale, tuple(abbreviations)))

        return tuple(pairs)

    @property
    def unit_types(self):
        """Unit types provided by this source, in declaration order."""
        return tuple(self._table)

    def __getitem__(self, type_name):
        """Look up a unit type by its class name."""
        for unit_type in self._table:
            if unit_type.__name__ == type_name:
                return unit_type
        raise KeyError(type_name)

    def __contains__(self, unit_type):
        return unit_type in self._table

    def localizations(self, unit_type):
        """
        Iterate over the localizations of a unit type.

        Yields:
            tuple: (unit value, ((locale name, abbreviations), ...))
        """
        yield from self._table.get(unit_type, {}).items()

    def __repr__(self):
        return (f"UnitSource(name={self.name!r}, "
                f"unit_types={[t.__name__ for t in self._table]})")

    @classmethod
    def from_module(cls, module):
        """
        Build a source from the IntEnum classes of a module.

        Localizations are read from the module-level ``I18N`` table. Unit
        types without localizations are still listed, with no entries.
        """
        i18n = dict(getattr(module, 'I18N', {}))
        for unit_type in get_unit_enums_from_module(module).values():
            i18n.setdefault(unit_type, {})
        return cls(i18n, name=module.__name__)

    @classmethod
    def from_yaml(cls, yaml_path):
        """
        Build a source from a YAML file.

        The file maps unit type names to members, each with an integral
        value and its localizations:

            AngleUnit:
              Radian:
                value: 1
                i18n:
                  en-US: [rad]

        The IntEnum classes are created from the file.
        """
        config = yaml_loader(yaml_path)
        name = str(yaml_path)
        if not isinstance(config, Mapping):
            _fail(f"Unit source '{name}' must contain a mapping of unit types")

        table = {}
        for type_name, members in config.items():
            if not isinstance(type_name, str) or not type_name.isidentifier():
                _fail(f"Unit source '{name}': invalid unit type name "
                      f"{type_name!r}")
            if not isinstance(members, Mapping) or not members:
                _fail(f"Unit source '{name}': unit type '{type_name}' must "
                      f"define at least one member")

            values = {}
            i18n = {}
            for member, entry in members.items():
                if not isinstance(member, str) or not member.isidentifier():
                    _fail(f"Unit source '{name}': invalid member name "
                          f"{member!r} in '{type_name}'")
                if not isinstance(entry, Mapping) or 'value' not in entry:
                    _fail(f"Unit source '{name}': member "
                          f"'{type_name}.{member}' needs a 'value'")
                value = entry['value']
                if isinstance(value, bool) or not isinstance(value, int):
                    _fail(f"Unit source '{name}': value of "
                          f"'{type_name}.{member}' must be an integer")
                if value in values.values():
                    _fail(f"Unit source '{name}': duplicate value {value} in "
                          f"'{type_name}'")
                values[member] = value
                i18n[member] = entry.get('i18n') or {}

            try:
                unit_type = IntEnum(type_name, list(values.items()))
            except (ValueError, TypeError) as e:
                _fail(f"Unit source '{name}': invalid unit type "
                      f"'{type_name}': {e}")
            table[unit_type] = {unit_type[member]: localized
                                for member, localized in i18n.items()
                                if localized}

        return cls(table, name=name)


# Shared built-in source, one object so registries deduplicate it
BUILTIN = UnitSource.from_module(unitSystems)


def builtin_source():
    """Return the built-in unit source."""
    return BUILTIN
