from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Culture:
    """
    Locale identifier driving which abbreviation text is selected.

    Equality and hashing ignore the case of the locale name, so 'en-US' and
    'en-us' select the same cached UnitSystem.
    """
    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Culture name must be a non-empty string, "
                             f"got: {self.name!r}")

    @property
    def key(self):
        """Normalized locale name used for comparisons."""
        return self.name.strip().lower()

    def __eq__(self, other):
        if isinstance(other, Culture):
            return self.key == other.key
        return NotImplemented

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return self.name

    def matches(self, locale_name):
        """Case-insensitive comparison against a locale name string."""
        return self.key == str(locale_name).strip().lower()

    @classmethod
    def of(cls, value):
        """
        Convert a culture-like value to a Culture.

        Args:
            value (Culture, str or None): Culture or locale name.

        Returns:
            Culture or None: None is passed through unchanged.
        """
        if value is None or isinstance(value, Culture):
            return value
        return cls(value)
