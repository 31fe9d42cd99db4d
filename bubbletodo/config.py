"""Environment-driven settings for BubbleTodo.

Values come from the process environment, optionally seeded from a `.env`
file in the working directory.
"""

import os
from datetime import time
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from bubbletodo.models.recurrence import Weekday

load_dotenv()

DEFAULT_REMINDER_TIMES = "08:00,18:00"
DEFAULT_REMINDER_COUNT = 2


class EngineSettings(BaseModel):
    """Settings shared by the task board and reminder selection."""

    time_zone: Optional[str] = Field(None, description="IANA zone for day boundaries (None = naive wall clock)")
    first_weekday: Weekday = Field(Weekday.MONDAY, description="First day of the week (1=Sunday..7=Saturday)")
    reminder_times: List[time] = Field(default_factory=lambda: [time(8, 0), time(18, 0)])
    reminder_count: int = Field(DEFAULT_REMINDER_COUNT, ge=0, description="How many reminder times are active")


def parse_reminder_times(raw: str) -> List[time]:
    """Parse comma-separated HH:MM values."""
    out: List[time] = []
    for part in (raw or "").split(","):
        part = part.strip()
        if not part:
            continue
        hour, sep, minute = part.partition(":")
        if not sep:
            raise ValueError(f"BUBBLETODO_REMINDER_TIMES entry '{part}' is not HH:MM")
        try:
            out.append(time(int(hour), int(minute)))
        except ValueError as e:
            raise ValueError(f"BUBBLETODO_REMINDER_TIMES entry '{part}' is not a valid time: {e}") from e
    return out


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from e


def _time_zone_from_env() -> Optional[str]:
    name = os.getenv("BUBBLETODO_TIME_ZONE", "").strip()
    if not name:
        return None
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"BUBBLETODO_TIME_ZONE '{name}' is not a known time zone") from e
    return name


def get_settings() -> EngineSettings:
    """Read settings from the environment.

    Raises:
        ValueError: if a variable holds an invalid value
    """
    first_weekday = _int_from_env("BUBBLETODO_FIRST_WEEKDAY", int(Weekday.MONDAY))
    if not 1 <= first_weekday <= 7:
        raise ValueError(f"BUBBLETODO_FIRST_WEEKDAY must be 1-7, got {first_weekday}")

    reminder_count = _int_from_env("BUBBLETODO_REMINDER_COUNT", DEFAULT_REMINDER_COUNT)
    if reminder_count < 0:
        raise ValueError(f"BUBBLETODO_REMINDER_COUNT must be >= 0, got {reminder_count}")

    return EngineSettings(
        time_zone=_time_zone_from_env(),
        first_weekday=Weekday(first_weekday),
        reminder_times=parse_reminder_times(os.getenv("BUBBLETODO_REMINDER_TIMES", DEFAULT_REMINDER_TIMES)),
        reminder_count=reminder_count,
    )
