"""Achievement catalog entries and unlock records."""

from datetime import datetime

from pydantic import Field

from devsocial.domain.model.common import DomainModel
from devsocial.domain.value import AchievementId, ThresholdType, UserId


class Achievement(DomainModel):
    """Static achievement definition.

    Presence-type thresholds (night, early, weekend) only need the
    behaviour to have happened once; their threshold_value is 1.
    """

    id: AchievementId
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=300)
    icon: str = Field(min_length=1, max_length=16)
    threshold_type: ThresholdType
    threshold_value: int = Field(ge=1)


class AchievementUnlock(DomainModel):
    """A user unlocked an achievement. Created at most once per pair."""

    user_id: UserId
    achievement_id: AchievementId
    unlocked_at: datetime
