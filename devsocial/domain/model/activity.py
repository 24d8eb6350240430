"""Activity aggregates.

Activity reports from the editor are never stored as-is: they are merged
into per-day and per-hour rolling totals. Both aggregates only grow.
"""

from datetime import date, datetime

from pydantic import Field

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import UserId


class ActivityDelta(DomainModel):
    """A validated, normalized activity report ready to be merged."""

    seconds: int = Field(ge=0)
    projects: dict[str, int] = Field(default_factory=dict)
    languages: dict[str, int] = Field(default_factory=dict)


class DailyActivity(DomainModel):
    """Per-user per-day (UTC) activity totals.

    `total_seconds` is not required to equal the sum of the project or
    language breakdowns: a report may omit breakdowns.
    """

    user_id: UserId
    day: date
    total_seconds: int = Field(default=0, ge=0)
    projects: dict[str, int] = Field(default_factory=dict)
    languages: dict[str, int] = Field(default_factory=dict)
    last_update: datetime

    @property
    def date_key(self) -> str:
        """Calendar date as YYYY-MM-DD."""
        return self.day.isoformat()


class HourlyActivity(DomainModel):
    """Per-user per-hour (UTC, wall-clock at merge time) activity totals."""

    user_id: UserId
    day: date
    hour: int = Field(ge=0, le=23)
    total_seconds: int = Field(default=0, ge=0)
    projects: dict[str, int] = Field(default_factory=dict)
    languages: dict[str, int] = Field(default_factory=dict)
    last_update: datetime


class DailyTotal(DomainModel):
    """One day of the daily history rollup."""

    day: date
    total_seconds: int = Field(ge=0)


class HourlyBucket(DomainModel):
    """Seconds recorded in one hour-of-day across a window."""

    hour: int = Field(ge=0, le=23)
    total_seconds: int = Field(ge=0)


class LanguageShare(DomainModel):
    """A language's share of the coding time in a window."""

    language: str
    total_seconds: int = Field(ge=0)
    share: float = Field(ge=0.0, le=1.0)
