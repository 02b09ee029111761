# daily_roster/sheets/models.py
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Color:
    """Background color of a cell, channels in [0, 1]

    The Sheets API omits channels that are 0, so an absent channel stays
    None here and two colors are equal only if the same channels are set.
    """

    red: float | None = None
    green: float | None = None
    blue: float | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> "Color":
        if not data:
            return cls()
        return cls(red=data.get("red"), green=data.get("green"), blue=data.get("blue"))

    @property
    def is_unset(self) -> bool:
        """True for the "no fill" color, i.e. no channel defined at all"""
        return self.red is None and self.green is None and self.blue is None

    def to_rgb255(self) -> tuple[float, float, float]:
        return (
            (self.red or 0) * 255,
            (self.green or 0) * 255,
            (self.blue or 0) * 255,
        )


WHITE = Color(red=1, green=1, blue=1)


@dataclass(frozen=True)
class Cell:
    """Literal text and background color of a single sheet cell"""

    text: str = ""
    background: Color = field(default_factory=Color)

    @property
    def is_holiday(self) -> bool:
        return self.background.is_unset


@dataclass(frozen=True)
class LegendEntry:
    """A row of the KEY tab: a project name and the cell look that encodes it"""

    label: str
    appearance: Cell
