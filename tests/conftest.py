"""Global test configuration and fixtures."""

import logging

import pytest
import structlog

from rudas import Series


@pytest.fixture
def labeled_series():
    """A small Series with non-default integer labels."""
    return Series.from_values_and_labels([1, 2, 3], [10, 20, 30])


@pytest.fixture
def nested_series():
    """A Series whose values are mutable lists."""
    return Series.from_values_and_labels([[1, 2], [3]], ["a", "b"])


@pytest.fixture(autouse=True)
def quiet_structlog():
    # Unconfigured structlog prints every level to stdout, which capsys would see.
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
