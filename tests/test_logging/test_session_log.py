"""Tests for the in-memory session log."""

from kickabout.logging import SessionLog
from kickabout.simulation import InputIntent, Orchestrator
from kickabout.simulation.core.events import EventBus, EventType


def emit(bus: EventBus, event_type: EventType, tick: int = 1, **data):
    return bus.emit_simple(event_type, tick, tick / 60, description=event_type.value, **data)


class TestSessionLog:
    """Accumulating events into entries, stats and scoring plays."""

    def test_counts_actions(self):
        bus = EventBus()
        log = SessionLog(bus)

        emit(bus, EventType.SHOT, level=0.4)
        emit(bus, EventType.PASS)
        emit(bus, EventType.PASS)
        emit(bus, EventType.DODGE)
        emit(bus, EventType.PICKUP)
        emit(bus, EventType.OUT_OF_BOUNDS)

        assert log.stats.shots == 1
        assert log.stats.passes == 2
        assert log.stats.dodges == 1
        assert log.stats.pickups == 1
        assert log.stats.out_of_bounds == 1
        assert len(log.entries) == 6

    def test_goal_records_scoring_play(self):
        bus = EventBus()
        log = SessionLog(bus)

        emit(bus, EventType.SHOT, tick=10, level=0.8)
        emit(bus, EventType.GOAL, tick=60, home=1, away=0)

        assert log.score.home == 1
        assert len(log.scoring_plays) == 1
        play = log.scoring_plays[0]
        assert play.frame == 60
        assert play.shot_power == 0.8
        assert play.home_score_after == 1
        assert log.entries[-1].is_scoring_play
        assert log.entries[-1].format().endswith("[GOAL] goal")

    def test_quiet_events_not_listed(self):
        bus = EventBus()
        log = SessionLog(bus)

        emit(bus, EventType.CHARGE_START)
        emit(bus, EventType.RESIZE)

        assert log.entries == []

    def test_session_start_resets_score(self):
        bus = EventBus()
        log = SessionLog(bus)
        emit(bus, EventType.GOAL, home=1, away=0)

        emit(bus, EventType.SESSION_START)

        assert log.score.home == 0

    def test_session_start_clears_previous_session(self):
        bus = EventBus()
        log = SessionLog(bus)
        emit(bus, EventType.SHOT, level=1.0)
        emit(bus, EventType.GOAL, home=1, away=0)

        emit(bus, EventType.SESSION_START)

        assert log.stats.shots == 0
        assert log.stats.goals == 0
        assert log.scoring_plays == []
        assert [e.event_type for e in log.entries] == ["session_start"]
        assert log.format_summary().splitlines()[1].startswith("Shots: 0  Goals: 0")

    def test_conversion_rate(self):
        log = SessionLog()
        assert log.stats.conversion_rate == 0.0

        log.stats.shots = 4
        log.stats.goals = 1
        assert log.stats.conversion_rate == 0.25

    def test_recent(self):
        bus = EventBus()
        log = SessionLog(bus)
        for tick in range(15):
            emit(bus, EventType.PASS, tick=tick)

        recent = log.recent(5)

        assert len(recent) == 5
        assert recent[-1].frame == 14

    def test_summary_from_live_session(self):
        orch = Orchestrator(seed=1)
        log = SessionLog(orch.event_bus)
        orch.start_session()

        for _ in range(50):
            orch.advance(InputIntent(shoot_held=True))
        orch.advance(InputIntent())
        orch.run(100)

        summary = log.format_summary()
        assert summary.splitlines()[0] == "HOME 1 - 0 AWAY"
        assert "Shots: 1  Goals: 1" in summary
        assert "GOAL" in summary
