"""Navigation between the main menu and the activities."""

import logging

from .activities import Activity, ACTIVITY_TYPES
from .models import ActivityKind, Scoreboard

logger = logging.getLogger(__name__)


class Navigator:
    """Tracks the active activity kind and owns the single live activity instance.

    The scoreboard belongs to the caller; activities only get its increment.
    """

    def __init__(self, scoreboard: Scoreboard | None = None):
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()
        self.active_kind = ActivityKind.MENU
        self.activity: Activity | None = None

    def select(self, kind: ActivityKind) -> Activity | None:
        """Switch to kind, discarding whatever was active. MENU leaves no activity."""
        kind = ActivityKind(kind)
        if self.activity is not None:
            logger.debug(f"Discarding {self.activity.kind.value} activity")
            self.activity.discard()
            self.activity = None
        self.active_kind = kind
        if kind is not ActivityKind.MENU:
            self.activity = ACTIVITY_TYPES[kind](self.scoreboard.increment)
        return self.activity

    def go_to_menu(self) -> None:
        self.select(ActivityKind.MENU)

    def to_dict(self) -> dict:
        return {
            'active_kind': self.active_kind.value,
            'score': self.scoreboard.value,
            'activity': self.activity.to_dict() if self.activity else None
        }
