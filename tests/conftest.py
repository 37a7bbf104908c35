import pytest
import siUnits as su


# Keep test output readable
su.logger.set_level('silent')


@pytest.fixture
def registry():
    """Independent registry with only the built-in source."""
    return su.Registry()


@pytest.fixture(autouse=True)
def restore_defaults():
    """Reset the process-wide culture settings and cache after each test."""
    culture = su.DEFAULTS.culture
    fallback = su.DEFAULTS.fallback_culture
    yield
    su.DEFAULTS.culture = culture
    su.DEFAULTS.fallback_culture = fallback
    su.default_registry.clear()
