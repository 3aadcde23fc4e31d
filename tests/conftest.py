"""Shared test fixtures."""
import pytest
import structlog

from numscan.config import get_settings
from numscan.models.locale import get_locale
from numscan.models.symbols import SymbolSpec


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def us_locale():
    return get_locale("US")


@pytest.fixture
def us_signs(us_locale):
    """Leading minus first, then the accounting parenthesis pair."""
    return us_locale.build_sign_collection()


@pytest.fixture
def us_decimal(us_locale):
    return us_locale.build_decimal_separator()


@pytest.fixture
def us_integer_separators(us_locale):
    return us_locale.build_integer_separators()


@pytest.fixture
def leading_minus():
    return SymbolSpec.new_leading("-")


@pytest.fixture
def trailing_minus():
    return SymbolSpec.new_trailing("-")


@pytest.fixture
def parentheses():
    return SymbolSpec.new_leading_and_trailing("(", ")")
