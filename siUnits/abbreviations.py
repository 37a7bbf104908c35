from siUnits.logger import logger
from siUnits.errors import NotFound, InvalidArgument


def type_name(unit_type):
    return getattr(unit_type, '__name__', str(unit_type))


class AbbreviationTable:
    """
    Bidirectional per-unit-type map between unit values and abbreviations.

    Two inverse maps are kept for each unit type:

        value_to_abbrevs: unit value -> ordered abbreviation list
        abbrev_to_value: abbreviation -> unit value

    Later registrations take priority for the default abbreviation (they are
    prepended), while the first registration of an abbreviation keeps it for
    parsing.
    """

    def __init__(self, culture=None):
        # Only used in error messages
        self.culture = culture
        self._value_to_abbrevs = {}
        self._abbrev_to_value = {}

    def register(self, unit_type, unit_value, abbreviations):
        """
        Map a unit value to one or more abbreviations.

        Args:
            unit_type (type): Unit enumeration class.
            unit_value (int): Integral unit value.
            abbreviations (list of str or str): Abbreviations, the first one
                becomes the default abbreviation. Empty strings are accepted.

        Raises:
            InvalidArgument: If no abbreviations are given.
        """
        if isinstance(abbreviations, str):
            abbreviations = [abbreviations]
        abbreviations = list(abbreviations or [])

        if not abbreviations:
            raise InvalidArgument(
                f"No abbreviations given for unit type "
                f"[{type_name(unit_type)}] value [{unit_value}].")

        unit_value = int(unit_value)

        value_to_abbrevs = self._value_to_abbrevs.setdefault(unit_type, {})
        existing = value_to_abbrevs.get(unit_value, [])
        # New abbreviations first, duplicates removed keeping first occurrence
        value_to_abbrevs[unit_value] = list(
            dict.fromkeys(abbreviations + existing))

        abbrev_to_value = self._abbrev_to_value.setdefault(unit_type, {})
        for abbreviation in abbreviations:
            mapped = abbrev_to_value.setdefault(abbreviation, unit_value)
            if mapped != unit_value:
                logger.debug(
                    f"Abbreviation '{abbreviation}' of "
                    f"{type_name(unit_type)} [{unit_value}] already parses to "
                    f"[{mapped}] for culture [{self.culture}], "
                    f"keeping [{mapped}]")

    def has_unit_type(self, unit_type):
        return unit_type in self._value_to_abbrevs

    def unit_types(self):
        """Registered unit types, in registration order."""
        return tuple(self._value_to_abbrevs)

    def items(self, unit_type):
        """(value, abbreviations) pairs of a unit type, sorted by value."""
        value_to_abbrevs = self._value_to_abbrevs.get(unit_type, {})
        return [(value, list(abbrevs))
                for value, abbrevs in sorted(value_to_abbrevs.items())]

    def reverse_lookup(self, unit_type, abbreviation):
        """
        Find the unit value of an abbreviation.

        Matching is exact: case-sensitive and without trimming.

        Returns:
            int or None: The unit value, or None if the abbreviation (or the
            unit type) is not registered.
        """
        return self._abbrev_to_value.get(unit_type, {}).get(abbreviation)

    def forward_lookup(self, unit_type, unit_value):
        """
        Get all abbreviations of a unit value, default first.

        Raises:
            NotFound: If the unit type or the unit value is not registered.
        """
        value_to_abbrevs = self._value_to_abbrevs.get(unit_type)
        if value_to_abbrevs is None:
            raise NotFound(
                f"No abbreviations defined for unit type "
                f"[{type_name(unit_type)}] for culture [{self.culture}].")

        abbreviations = value_to_abbrevs.get(int(unit_value))
        if abbreviations is None:
            raise NotFound(
                f"No abbreviations defined for unit type "
                f"[{type_name(unit_type)}.{unit_value}] for culture "
                f"[{self.culture}].")

        return list(abbreviations)

    def default_abbreviation(self, unit_type, unit_value):
        """First abbreviation of a unit value, see forward_lookup."""
        return self.forward_lookup(unit_type, unit_value)[0]
