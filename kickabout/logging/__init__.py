"""Session logging and output."""

from kickabout.logging.session_log import LogEntry, ScoringPlay, SessionLog, SessionStats

__all__ = ["LogEntry", "ScoringPlay", "SessionLog", "SessionStats"]
