# betterrest/core/models/data_models.py

import re
from datetime import datetime, time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from betterrest.utils.constants import input_ranges
from betterrest.utils.time_utils import seconds_since_midnight

_HH_MM = re.compile(r'([0-9]{2}):([0-9]{2})')


class WakeTime(BaseModel):
    """Time of day the user wants to wake up. Date is irrelevant."""
    model_config = ConfigDict(frozen=True)

    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)

    @classmethod
    def from_string(cls, value: str) -> "WakeTime":
        """Parse 'HH:MM' (24-hour), e.g. '07:00' or '22:30'."""
        match = _HH_MM.fullmatch(value)
        if match is None:
            raise ValueError(f"Wake time '{value}' must be in HH:MM format")
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    @classmethod
    def coerce(cls, value) -> "WakeTime":
        """Build a WakeTime from a string, time, datetime, dict or WakeTime."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, (datetime, time)):
            return cls(hour=value.hour, minute=value.minute)
        if isinstance(value, dict):
            return cls(**value)
        raise TypeError(f"Cannot interpret {value!r} as a wake time")

    def to_seconds(self) -> int:
        return seconds_since_midnight(self.hour, self.minute)

    def to_time(self) -> time:
        return time(self.hour, self.minute)

    def __str__(self):
        return f"{self.hour:02d}:{self.minute:02d}"


class BedtimeRequest(BaseModel):
    """Validated bedtime form input"""
    wake_time: WakeTime
    sleep_amount: float = Field(..., ge=input_ranges['sleep_amount_min'], le=input_ranges['sleep_amount_max'])
    # strict: JSON booleans must not count as cups
    coffee_amount: int = Field(
        ..., ge=input_ranges['coffee_amount_min'], le=input_ranges['coffee_amount_max'], strict=True
    )

    @field_validator('wake_time', mode='before')
    @classmethod
    def parse_wake_time(cls, v):
        if isinstance(v, (str, datetime, time)):
            return WakeTime.coerce(v)
        return v

    @field_validator('sleep_amount')
    @classmethod
    def validate_sleep_step(cls, v):
        steps = v / input_ranges['sleep_amount_step']
        if abs(steps - round(steps)) > 1e-9:
            raise ValueError(f"Sleep amount must be a multiple of {input_ranges['sleep_amount_step']} hours")
        return v


class BedtimeResult(BaseModel):
    """Outcome of one bedtime estimation: a formatted bedtime or an error message"""
    bedtime: Optional[str] = None
    predicted_sleep_hours: Optional[float] = None
    error: Optional[str] = None

    @computed_field
    @property
    def success(self) -> bool:
        return self.error is None and self.bedtime is not None

    @property
    def display_text(self) -> str:
        """Text to show the user: the bedtime, or the fallback message"""
        return self.bedtime if self.success else (self.error or "")


class FormOptions(BaseModel):
    """Defaults and allowed choices for a bedtime form"""
    default_wake_time: str
    default_sleep_amount: float
    default_coffee_amount: int
    sleep_amounts: List[float]
    sleep_amount_labels: List[str]
    coffee_amounts: List[int]
