# daily_roster/schedule/models.py
from dataclasses import dataclass
from datetime import date
from enum import Enum

from ..sheets.models import WHITE, Cell, Color


class Slot(Enum):
    """Half-day positions of a roster cell pair"""

    AM = "am"
    PM = "pm"


@dataclass(frozen=True)
class ScheduleQuery:
    """Who and which day to look up"""

    person_name: str
    date: date


@dataclass(frozen=True)
class Assignment:
    """What a person is doing for one slot"""

    label: str
    appearance: Cell

    @classmethod
    def weekend(cls) -> "Assignment":
        return cls(label="Weekend", appearance=Cell(text="🥳", background=WHITE))

    @classmethod
    def holiday(cls, cell: Cell) -> "Assignment":
        return cls(label="Holiday", appearance=Cell(text=cell.text, background=Color()))

    @classmethod
    def key_not_found(cls, cell: Cell) -> "Assignment":
        return cls(label="Key not found", appearance=cell)


@dataclass(frozen=True)
class DaySchedule:
    am: Assignment
    pm: Assignment

    def __getitem__(self, slot: Slot) -> Assignment:
        return self.am if slot is Slot.AM else self.pm
