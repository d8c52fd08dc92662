"""
Shared fixtures for who_bmi tests.
"""

import logging
from typing import Iterator

import pytest
import structlog

from who_bmi.config import CONSOLE_HANDLER_NAME, PACKAGE_LOGGER
from who_bmi.domain.localization.catalog import get_locale
from who_bmi.domain.localization.models import LocaleBundle
from who_bmi.domain.shared.value_objects import Locale


# ═══════════════════════════════════════════════════════════
# LOCALE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def en_bundle() -> LocaleBundle:
    """English locale bundle."""
    return get_locale(Locale.EN)


@pytest.fixture
def id_bundle() -> LocaleBundle:
    """Indonesian locale bundle."""
    return get_locale(Locale.ID)


@pytest.fixture(params=[Locale.EN, Locale.ID], ids=["en", "id"])
def any_bundle(request: pytest.FixtureRequest) -> LocaleBundle:
    """Parametrized fixture over every shipped bundle."""
    return get_locale(request.param)


# ═══════════════════════════════════════════════════════════
# LOGGING
# ═══════════════════════════════════════════════════════════


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo any logging configuration a test applied."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


# ═══════════════════════════════════════════════════════════
# PARAMETRIZE HELPERS
# ═══════════════════════════════════════════════════════════


@pytest.fixture(params=[0, -1, -70.5, float("nan"), float("inf"), "abc", None, True])
def invalid_positive_number(request: pytest.FixtureRequest) -> object:
    """Values every positivity check must reject."""
    return request.param
