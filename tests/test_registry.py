import pytest
from concurrent.futures import ThreadPoolExecutor
from enum import IntEnum
import siUnits as su
from siUnits import AngleUnit


class FooUnit(IntEnum):
    Undefined = 0
    Bar = 1


@pytest.fixture
def foo_source():
    return su.UnitSource({FooUnit: {FooUnit.Bar: {'en-US': ['bar']}}},
                         name='foo')


def test_cache_identity(registry):
    first = registry.get_or_create('en-US')
    second = registry.get_or_create('en-US')

    assert first is second
    # Culture names are matched case-insensitively
    assert registry.get_or_create('EN-us') is first
    assert registry.get_or_create(su.Culture('en-US')) is first
    assert len(registry) == 1
    assert 'en-us' in registry


def test_cultures_are_cached_separately(registry):
    english = registry.get_or_create('en-US')
    russian = registry.get_or_create('ru-RU')

    assert english is not russian
    assert russian.culture == su.Culture('ru-RU')
    assert set(registry.cultures) == {su.Culture('en-US'), su.Culture('ru-RU')}


def test_default_culture(registry):
    su.DEFAULTS.culture = 'ru-RU'

    system = registry.get_or_create()
    assert system.culture == su.Culture('ru-RU')


def test_clear(registry, foo_source):
    registry.add_source(foo_source)
    first = registry.get_or_create('en-US')
    registry.clear()

    assert len(registry) == 0
    assert registry.get_or_create('en-US') is not first
    assert foo_source in registry.sources


def test_sources(registry, foo_source):
    assert registry.sources == (su.builtin_source(),)

    registry.add_source(foo_source)
    registry.add_source(foo_source)
    assert registry.sources == (su.builtin_source(), foo_source)

    assert registry.remove_source(foo_source) is True
    assert registry.remove_source(foo_source) is False
    assert registry.sources == (su.builtin_source(),)


def test_empty_registry():
    assert su.Registry(sources=[]).sources == ()


def test_added_source_used_for_new_cultures(registry, foo_source):
    registry.add_source(foo_source)
    system = registry.get_or_create('en-US')

    assert system.parse(FooUnit, 'bar') == FooUnit.Bar
    assert system.parse(AngleUnit, 'rad') == AngleUnit.Radian


def test_source_added_after_caching_is_ignored(registry, foo_source):
    system = registry.get_or_create('en-US')
    registry.add_source(foo_source)

    assert registry.get_or_create('en-US') is system
    with pytest.raises(su.UnsupportedUnitType):
        system.parse(FooUnit, 'bar')


def test_extra_sources(registry, foo_source):
    system = registry.get_or_create('en-US', foo_source, su.builtin_source())

    assert system.sources == (su.builtin_source(), foo_source)
    assert system.get_default_abbreviation(FooUnit.Bar) == 'bar'
    # Extra sources are not registered
    assert foo_source not in registry.sources


def test_concurrent_get_or_create(registry):
    with ThreadPoolExecutor(max_workers=8) as executor:
        systems = list(executor.map(lambda _: registry.get_or_create('ru-RU'),
                                    range(32)))

    assert len(registry) == 1
    cached = registry.get_or_create('ru-RU')
    assert all(system is cached for system in systems)


def test_concurrent_source_changes(registry):
    sources = [su.UnitSource({}, name=str(i)) for i in range(20)]

    with ThreadPoolExecutor(max_workers=4) as executor:
        list(executor.map(registry.add_source, sources + sources))

    assert len(registry.sources) == 21


def test_module_level_helpers():
    assert su.parse(AngleUnit, '°') == AngleUnit.Degree
    assert su.parse(AngleUnit, 'nonsense') == AngleUnit.Undefined
    assert su.try_parse(AngleUnit, 'nonsense') == (False, AngleUnit.Undefined)
    assert su.get_default_abbreviation(AngleUnit.Radian, 'ru-RU') == 'рад'
    assert su.get_all_abbreviations(
        su.RotationalSpeedUnit.RevolutionPerMinute) == ['rpm', 'r/min']
    assert su.get_cached() is su.get_cached('en-US')


def test_set_culture():
    su.set_culture('ru-RU')

    assert su.DEFAULTS.culture == 'ru-RU'
    assert su.get_default_abbreviation(AngleUnit.Radian) == 'рад'
    assert su.parse(AngleUnit, 'рад') == AngleUnit.Radian


def test_set_culture_none_restores_default():
    su.set_culture('nb-NO')
    su.set_culture(None)

    assert su.DEFAULTS.culture == 'en-US'
    assert su.get_cached().culture == su.Culture('en-US')
