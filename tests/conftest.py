"""Shared pytest fixtures for Kickabout tests."""

import random

import pytest

from kickabout.simulation import Orchestrator
from kickabout.simulation.core.events import EventBus
from kickabout.simulation.core.state import SimulationState, init_roster, reset_play


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def state() -> SimulationState:
    """Started 800x600 session: full roster, player holding the ball at kick-off."""
    s = SimulationState.create(800, 600)
    init_roster(s)
    reset_play(s)
    s.running = True
    return s


@pytest.fixture
def empty_state() -> SimulationState:
    """Started session with no opponents or teammates."""
    s = SimulationState.create(800, 600)
    reset_play(s)
    s.running = True
    return s


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Orchestrator Fixtures
# =============================================================================


@pytest.fixture
def orchestrator() -> Orchestrator:
    """Seeded orchestrator with a started session."""
    orch = Orchestrator(width=800, height=600, seed=7)
    orch.start_session()
    return orch
