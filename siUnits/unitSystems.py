from enum import IntEnum

# Built-in unit enumerations and their localized abbreviations.
# For units with multiple abbreviations, the first one is used as the
# default abbreviation.


class AngleUnit(IntEnum):
    Undefined = 0
    Radian = 1
    Degree = 2                         # Base unit
    Gradian = 3


class RotationalSpeedUnit(IntEnum):
    Undefined = 0
    RevolutionPerSecond = 1
    RevolutionPerMinute = 2


class LengthUnit(IntEnum):
    Undefined = 0
    Kilometer = 1
    Meter = 2                          # Base unit
    Centimeter = 3
    Millimeter = 4
    Mile = 5
    Yard = 6
    Foot = 7
    Inch = 8


class MassUnit(IntEnum):
    Undefined = 0
    Tonne = 1
    Kilogram = 2                       # Base unit
    Gram = 3
    Milligram = 4
    Pound = 5


class PressureUnit(IntEnum):
    Undefined = 0
    Pascal = 1                         # Base unit
    Kilopascal = 2
    Bar = 3
    Psi = 4
    Atmosphere = 5


class TemperatureUnit(IntEnum):
    Undefined = 0
    Kelvin = 1                         # Base unit
    DegreeCelsius = 2
    DegreeFahrenheit = 3
    DegreeRankine = 4


# Unit type -> unit value -> locale -> abbreviations
I18N = {
    AngleUnit: {
        AngleUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
            'nb-NO': ['(ingen)'],
        },
        AngleUnit.Radian: {
            'en-US': ['rad'],
            'ru-RU': ['рад'],
        },
        AngleUnit.Degree: {
            'en-US': ['°'],
            'ru-RU': ['°'],
        },
        AngleUnit.Gradian: {
            'en-US': ['g'],
            'ru-RU': ['g'],
        },
    },

    RotationalSpeedUnit: {
        RotationalSpeedUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
            'nb-NO': ['(ingen)'],
        },
        RotationalSpeedUnit.RevolutionPerSecond: {
            'en-US': ['r/s'],
            'ru-RU': ['об/с'],
        },
        RotationalSpeedUnit.RevolutionPerMinute: {
            'en-US': ['rpm', 'r/min'],
            'ru-RU': ['об/мин'],
        },
    },

    LengthUnit: {
        LengthUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
        },
        LengthUnit.Kilometer: {'en-US': ['km'], 'ru-RU': ['км']},
        LengthUnit.Meter: {'en-US': ['m'], 'ru-RU': ['м']},
        LengthUnit.Centimeter: {'en-US': ['cm'], 'ru-RU': ['см']},
        LengthUnit.Millimeter: {'en-US': ['mm'], 'ru-RU': ['мм']},
        LengthUnit.Mile: {'en-US': ['mi'], 'ru-RU': ['миля']},
        LengthUnit.Yard: {'en-US': ['yd'], 'ru-RU': ['ярд']},
        LengthUnit.Foot: {'en-US': ['ft', "'"], 'ru-RU': ['фут']},
        LengthUnit.Inch: {'en-US': ['in', '"'], 'ru-RU': ['дюйм', '"']},
    },

    MassUnit: {
        MassUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
        },
        MassUnit.Tonne: {'en-US': ['t'], 'ru-RU': ['т']},
        MassUnit.Kilogram: {'en-US': ['kg'], 'ru-RU': ['кг']},
        MassUnit.Gram: {'en-US': ['g'], 'ru-RU': ['г']},
        MassUnit.Milligram: {'en-US': ['mg'], 'ru-RU': ['мг']},
        # No Russian entry, falls back to en-US
        MassUnit.Pound: {'en-US': ['lb', 'lbs']},
    },

    PressureUnit: {
        PressureUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
        },
        PressureUnit.Pascal: {'en-US': ['Pa'], 'ru-RU': ['Па']},
        PressureUnit.Kilopascal: {'en-US': ['kPa'], 'ru-RU': ['кПа']},
        PressureUnit.Bar: {'en-US': ['bar'], 'ru-RU': ['бар']},
        PressureUnit.Psi: {'en-US': ['psi'], 'ru-RU': ['psi']},
        PressureUnit.Atmosphere: {'en-US': ['atm'], 'ru-RU': ['атм']},
    },

    TemperatureUnit: {
        TemperatureUnit.Undefined: {
            'en-US': ['(undefined)'],
            'ru-RU': ['(нет ед.изм.)'],
        },
        TemperatureUnit.Kelvin: {'en-US': ['K'], 'ru-RU': ['K']},
        TemperatureUnit.DegreeCelsius: {'en-US': ['°C'], 'ru-RU': ['°C']},
        TemperatureUnit.DegreeFahrenheit: {'en-US': ['°F'], 'ru-RU': ['°F']},
        TemperatureUnit.DegreeRankine: {'en-US': ['°R'], 'ru-RU': ['°R']},
    },
}
