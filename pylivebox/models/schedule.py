"""
 Weekly schedules

 A schedule slot is one hour of the week, numbered 1 (Monday 00:00-01:00)
 to 168 (Sunday 23:00-24:00): id = (day - 1) * 24 + hour + 1. The router
 exchanges slot ids as decimal strings ({"Id": "25"}).
"""
import functools
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import ConfigDict, Field, PlainSerializer, PlainValidator

from pylivebox.codecs import INT_REGEX, LiveboxModel, enum_field
from pylivebox.exceptions import InvalidValueError

HOURS_PER_DAY = 24
MIN_SCHEDULE_ID = 1
MAX_SCHEDULE_ID = 7 * HOURS_PER_DAY


class Weekday(Enum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self):
        return self.name.capitalize()


@functools.total_ordering
class ScheduleID:
    __slots__ = ('_value',)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Invalid schedule ID: {value!r}. Must be an integer.")
        if not MIN_SCHEDULE_ID <= value <= MAX_SCHEDULE_ID:
            raise ValueError(f"Invalid schedule ID: {value}. Must be between {MIN_SCHEDULE_ID} "
                             f"and {MAX_SCHEDULE_ID}.")
        self._value = value

    @classmethod
    def from_value(cls, value: int) -> Optional["ScheduleID"]:
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def from_day_hour(cls, day: Weekday, hour: int) -> Optional["ScheduleID"]:
        if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour < HOURS_PER_DAY:
            return None
        return cls.from_value((day.value - 1) * HOURS_PER_DAY + hour + 1)

    @classmethod
    def all_hours(cls, day: Weekday) -> List["ScheduleID"]:
        return [cls.from_day_hour(day, hour) for hour in range(HOURS_PER_DAY)]

    @classmethod
    def decode(cls, raw) -> "ScheduleID":
        """Wire value ("25" or 25) to ScheduleID, InvalidValueError when out of range."""
        value = None
        if isinstance(raw, str) and INT_REGEX.match(raw):
            value = int(raw)
        elif isinstance(raw, int) and not isinstance(raw, bool):
            value = raw
        schedule_id = cls.from_value(value) if value is not None else None
        if schedule_id is None:
            raise InvalidValueError(raw, f"schedule ID between {MIN_SCHEDULE_ID} and {MAX_SCHEDULE_ID}")
        return schedule_id

    @classmethod
    def parse(cls, raw) -> "ScheduleID":
        return raw if isinstance(raw, cls) else cls.decode(raw)

    def encode(self) -> str:
        return str(self._value)

    @property
    def value(self) -> int:
        return self._value

    @property
    def day(self) -> Weekday:
        return Weekday((self._value - 1) // HOURS_PER_DAY + 1)

    @property
    def hour(self) -> int:
        return (self._value - 1) % HOURS_PER_DAY

    def to_day_hour(self):
        return self.day, self.hour

    def __int__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, ScheduleID):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, ScheduleID):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)

    def __repr__(self):
        return f"ScheduleID({self._value})"

    def __str__(self):
        return "%s %02d:00-%02d:00" % (self.day, self.hour, self.hour + 1)


ScheduleID.MONDAY_MIDNIGHT = ScheduleID(MIN_SCHEDULE_ID)
ScheduleID.SUNDAY_LAST_HOUR = ScheduleID(MAX_SCHEDULE_ID)


ScheduleIDField = Annotated[
    ScheduleID,
    PlainValidator(ScheduleID.parse),
    PlainSerializer(ScheduleID.encode, return_type=str),
]


class Schedule(LiveboxModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    schedule_id: ScheduleIDField = Field(alias="Id")

    @property
    def id(self) -> str:
        return self.schedule_id.encode()

    @classmethod
    def at(cls, day: Weekday, hour: int) -> Optional["Schedule"]:
        schedule_id = ScheduleID.from_day_hour(day, hour)
        return cls(schedule_id=schedule_id) if schedule_id is not None else None


class ScheduleState(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class ScheduleStatus(LiveboxModel):
    mac: str = Field(alias="MAC")
    status: enum_field(ScheduleState) = Field(alias="Status")


class WlanScheduleStatus(LiveboxModel):
    enabled: bool = Field(alias="Enabled")
