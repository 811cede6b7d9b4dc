"""Hypothesis profiles and keypad fixtures shared by the unit and property suites."""

import os

import pytest
from hypothesis import Verbosity, settings

# HYPOTHESIS_PROFILE picks how many key sequences each property tries
settings.register_profile("ci", max_examples=200, stateful_step_count=80, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def calculator():
    """A calculator showing the initial "0"."""
    from pocket_calc import Calculator

    return Calculator()


@pytest.fixture
def pending_add_state():
    """State after pressing 3 and +."""
    from pocket_calc import INITIAL_STATE, Operation, input_digit, perform_binary_operation

    return perform_binary_operation(input_digit(INITIAL_STATE, "3"), Operation.ADD)


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting test numbers."""
    return [
        0.0,
        1.0,
        -1.0,
        0.5,
        -0.5,
        100.0,
        -100.0,
        1e10,
        -1e10,
        1e-10,
        0.1 + 0.2,  # Floating point edge case
    ]
