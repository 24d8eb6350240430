"""Static achievement catalog.

Ids are stable: they are stored in unlock records.
"""

from typing import Optional

from devsocial.domain.model import Achievement
from devsocial.domain.value import AchievementId, ThresholdType


def _achievement(
    id: str,
    name: str,
    description: str,
    icon: str,
    threshold_type: ThresholdType,
    threshold_value: int = 1,
) -> Achievement:
    return Achievement(
        id=AchievementId(id),
        name=name,
        description=description,
        icon=icon,
        threshold_type=threshold_type,
        threshold_value=threshold_value,
    )


ACHIEVEMENTS: tuple[Achievement, ...] = (
    # Time
    _achievement(
        "first_hour", "First Hour", "Code for 1 hour in total", "clock",
        ThresholdType.TOTAL_HOURS, 1,
    ),
    _achievement(
        "ten_hours", "Getting Serious", "Code for 10 hours in total", "hourglass",
        ThresholdType.TOTAL_HOURS, 10,
    ),
    _achievement(
        "hundred_hours", "Centurion", "Code for 100 hours in total", "trophy",
        ThresholdType.TOTAL_HOURS, 100,
    ),
    # Streaks
    _achievement(
        "streak_3", "On a Roll", "Code 3 days in a row", "flame",
        ThresholdType.STREAK_DAYS, 3,
    ),
    _achievement(
        "streak_7", "Week Warrior", "Code 7 days in a row", "fire",
        ThresholdType.STREAK_DAYS, 7,
    ),
    _achievement(
        "streak_30", "Unstoppable", "Code 30 days in a row", "rocket",
        ThresholdType.STREAK_DAYS, 30,
    ),
    # Languages
    _achievement(
        "polyglot_3", "Polyglot", "Code in 3 different languages", "globe",
        ThresholdType.DISTINCT_LANGUAGE_COUNT, 3,
    ),
    _achievement(
        "polyglot_5", "Babel Fish", "Code in 5 different languages", "books",
        ThresholdType.DISTINCT_LANGUAGE_COUNT, 5,
    ),
    # Social
    _achievement(
        "first_friend", "First Friend", "Add your first friend", "handshake",
        ThresholdType.FRIEND_COUNT, 1,
    ),
    _achievement(
        "social_circle", "Social Circle", "Have 5 friends", "people",
        ThresholdType.FRIEND_COUNT, 5,
    ),
    # Habits
    _achievement(
        "night_owl", "Night Owl", "Code between midnight and 5am", "owl",
        ThresholdType.NIGHT_CODING_PRESENCE,
    ),
    _achievement(
        "early_bird", "Early Bird", "Code between 5am and 7am", "sunrise",
        ThresholdType.EARLY_CODING_PRESENCE,
    ),
    _achievement(
        "marathon", "Marathon", "Code for 8 hours in a single day", "runner",
        ThresholdType.SINGLE_DAY_HOURS, 8,
    ),
    _achievement(
        "weekend_warrior", "Weekend Warrior", "Code on a Saturday and a Sunday",
        "calendar", ThresholdType.WEEKEND_CODING_PRESENCE,
    ),
)

_BY_ID = {achievement.id: achievement for achievement in ACHIEVEMENTS}


def get_achievement(achievement_id: str) -> Optional[Achievement]:
    """Catalog entry by id, None for unknown ids."""
    return _BY_ID.get(AchievementId(achievement_id))
