import pytest
from enum import IntEnum
import siUnits as su
from siUnits import unitSystems
from siUnits.metadata import get_unit_enums_from_module


ANGLE_YAML = """\
AngleUnit:
  Undefined:
    value: 0
    i18n:
      en-US: ['(undefined)']
  Radian:
    value: 1
    i18n:
      en-US: [rad]
      ru-RU: [рад]
  Turn:
    value: 4
    i18n:
      en-US: [tr, rev]
FlowUnit:
  Undefined:
    value: 0
  LitrePerSecond:
    value: 1
    i18n:
      en-US: [L/s, l/s]
"""


class FooUnit(IntEnum):
    Undefined = 0
    Bar = 1


@pytest.fixture
def yaml_path(tmp_path):
    path = tmp_path / 'units.yaml'
    path.write_text(ANGLE_YAML, encoding='utf-8')
    return path


def test_unit_enums_from_module():
    enums = get_unit_enums_from_module(unitSystems)

    assert enums['AngleUnit'] is su.AngleUnit
    assert 'IntEnum' not in enums
    assert len(enums) == 6


def test_builtin_source():
    source = su.builtin_source()

    assert source is su.builtin_source()
    assert source.unit_types[0] is su.AngleUnit
    assert su.TemperatureUnit in source
    assert source['MassUnit'] is su.MassUnit

    localizations = dict(source.localizations(su.AngleUnit))
    assert localizations[1] == (('en-US', ('rad',)), ('ru-RU', ('рад',)))


def test_source_from_dict():
    source = su.UnitSource({FooUnit: {1: {'en-US': ('bar', 'b')}}},
                           name='foo')

    assert source.unit_types == (FooUnit,)
    assert list(source.localizations(FooUnit)) == \
        [(1, (('en-US', ('bar', 'b')),))]
    assert list(source.localizations(su.AngleUnit)) == []
    assert 'foo' in repr(source)
    with pytest.raises(KeyError):
        source['AngleUnit']


@pytest.mark.parametrize('table', [
    ['not', 'a', 'mapping'],
    {'FooUnit': {1: {'en-US': ['bar']}}},
    {FooUnit: [1, 2]},
    {FooUnit: {7: {'en-US': ['bar']}}},
    {FooUnit: {1: ['en-US', 'bar']}},
    {FooUnit: {1: {'': ['bar']}}},
    {FooUnit: {1: {'en-US': []}}},
    {FooUnit: {1: {'en-US': 'bar'}}},
    {FooUnit: {1: {'en-US': ['bar', 3]}}},
])
def test_malformed_source_raises(table):
    with pytest.raises(su.ConfigurationError):
        su.UnitSource(table)


def test_source_from_yaml(yaml_path):
    source = su.UnitSource.from_yaml(yaml_path)
    angle = source['AngleUnit']
    flow = source['FlowUnit']

    assert issubclass(angle, IntEnum)
    assert angle.Turn == 4
    # Dynamically created types are distinct from the built-in ones
    assert angle is not su.AngleUnit

    system = su.UnitSystem('ru-RU', source)
    assert system.parse(angle, 'рад') is angle.Radian
    assert system.get_all_abbreviations(angle.Turn) == ['tr', 'rev']
    assert system.parse(flow, 'l/s') is flow.LitrePerSecond
    # Members without i18n are not registered
    with pytest.raises(su.NotFound):
        system.get_default_abbreviation(flow.Undefined)


@pytest.mark.parametrize('content', [
    "AngleUnit: [1, 2\n",
    "- just\n- a list\n",
    "AngleUnit: {}\n",
    "'bad name': {Radian: {value: 1}}\n",
    "AngleUnit: {Radian: {i18n: {en-US: [rad]}}}\n",
    "AngleUnit: {Radian: {value: one}}\n",
    "AngleUnit: {Radian: {value: 1}, Degree: {value: 1}}\n",
    "AngleUnit: {Radian: {value: 1, i18n: {en-US: []}}}\n",
])
def test_malformed_yaml_raises(tmp_path, content):
    path = tmp_path / 'bad.yaml'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(su.ConfigurationError):
        su.UnitSource.from_yaml(path)


def test_missing_yaml_raises(tmp_path):
    with pytest.raises(su.ConfigurationError):
        su.UnitSource.from_yaml(tmp_path / 'missing.yaml')


def test_save_and_reload(tmp_path):
    system = su.UnitSystem('ru-RU')
    path = tmp_path / 'ru.yaml'
    system.save(path)

    reloaded = su.UnitSystem('ru-RU', su.UnitSource.from_yaml(path))

    assert reloaded.as_dict() == system.as_dict()
    angle = reloaded.unit_types[0]
    assert angle.__name__ == 'AngleUnit'
    assert reloaded.get_default_abbreviation(angle.Radian) == 'рад'
