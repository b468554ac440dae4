"""Application listing models."""

from dataclasses import dataclass, field
from enum import Enum

STATE_STARTED = "STARTED"
STATE_STOPPED = "STOPPED"


@dataclass(frozen=True)
class AppRecord:
    """A single application as reported by the Cloud Controller."""

    name: str
    state: str = ""

    @property
    def is_started(self) -> bool:
        return self.state == STATE_STARTED

    @property
    def is_stopped(self) -> bool:
        return self.state == STATE_STOPPED


@dataclass(frozen=True)
class Page:
    """One page of the apps listing."""

    records: tuple[AppRecord, ...] = field(default_factory=tuple)
    next_path: str | None = None

    def __post_init__(self):
        """Normalize an empty continuation to None."""
        if not self.next_path:
            object.__setattr__(self, "next_path", None)

    @property
    def has_next(self) -> bool:
        return self.next_path is not None


class FilterMode(Enum):
    """Which apps to keep, by running state."""

    ALL = "all"
    STARTED_ONLY = "started"
    STOPPED_ONLY = "stopped"

    @classmethod
    def from_flags(cls, started: bool = False, stopped: bool = False) -> "FilterMode":
        """Pick the mode selected by the --started/--stopped flags."""
        if started and stopped:
            raise ValueError("--started and --stopped cannot be used together")
        if started:
            return cls.STARTED_ONLY
        if stopped:
            return cls.STOPPED_ONLY
        return cls.ALL

    def matches(self, app: AppRecord) -> bool:
        if self is FilterMode.STARTED_ONLY:
            return app.is_started
        if self is FilterMode.STOPPED_ONLY:
            return app.is_stopped
        return True
