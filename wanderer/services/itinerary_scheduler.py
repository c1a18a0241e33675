"""Itinerary scheduler — lays selected spots out over days and fixed time slots."""

from dataclasses import dataclass
from typing import Any

MIN_SPOTS = 3
MAX_SPOTS = 5
SPOTS_PER_DAY = 2

# (start, end); slot index resets at the start of every day
TIME_SLOTS: list[tuple[str, str]] = [
    ("09:00 AM", "11:30 AM"),
    ("02:00 PM", "04:30 PM"),
    ("09:30 AM", "12:00 PM"),
    ("01:30 PM", "04:00 PM"),
]


class ScheduleError(ValueError):
    pass


@dataclass
class ScheduledActivity:
    spot: Any
    day: int
    start_time: str
    end_time: str


def _field(item: Any, name: str):
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def validate_selection(count: int) -> None:
    if count < MIN_SPOTS:
        raise ScheduleError(f"Please select at least {MIN_SPOTS} spots")
    if count > MAX_SPOTS:
        raise ScheduleError(f"You can select a maximum of {MAX_SPOTS} spots")


def schedule_spots(spots: list) -> list[ScheduledActivity]:
    """Assign spots to days, two per day, in the order given."""
    validate_selection(len(spots))

    schedule: list[ScheduledActivity] = []
    day = 1
    slot_index = 0
    for index, spot in enumerate(spots):
        if index > 0 and index % SPOTS_PER_DAY == 0:
            day += 1
            slot_index = 0
        start, end = TIME_SLOTS[slot_index]
        schedule.append(ScheduledActivity(spot=spot, day=day, start_time=start, end_time=end))
        slot_index += 1
    return schedule


def total_days(schedule: list[ScheduledActivity]) -> int:
    return max((a.day for a in schedule), default=0)


def activity_to_dict(activity: ScheduledActivity) -> dict:
    spot = activity.spot
    spot_id = _field(spot, "id")
    return {
        "spotId": str(spot_id) if spot_id is not None else None,
        "spotName": _field(spot, "name"),
        "description": _field(spot, "description"),
        "location": _field(spot, "location"),
        "day": activity.day,
        "startTime": activity.start_time,
        "endTime": activity.end_time,
    }


def schedule_to_route(schedule: list[ScheduledActivity]) -> dict:
    """JSON shape persisted in itineraries.route."""
    return {
        "schedule": [activity_to_dict(a) for a in schedule],
        "total_days": total_days(schedule),
    }
