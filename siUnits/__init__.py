# __init__.py

from siUnits.DEFAULTS import DEFAULTS
from siUnits.logger import logger
from siUnits.errors import (UnitsError, NotFound, UnsupportedUnitType,
                            InvalidArgument, ConfigurationError)
from siUnits.culture import Culture
from siUnits.unitSystems import (AngleUnit, RotationalSpeedUnit, LengthUnit,
                                 MassUnit, PressureUnit, TemperatureUnit)
from siUnits.metadata import UnitSource, builtin_source
from siUnits.abbreviations import AbbreviationTable
from siUnits.units import UnitSystem
from siUnits.registry import (Registry, default_registry, set_culture,
                              get_cached, parse, try_parse,
                              get_default_abbreviation, get_all_abbreviations)
from siUnits.utilities.display import (abbreviation_table,
                                       print_abbreviation_tables)
