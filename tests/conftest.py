from datetime import date

import pytest

from daily_roster.schedule.resolver import RosterResolver
from daily_roster.sheets.models import Cell, Color


PROJECT_X = Cell(text="PRJ-X", background=Color(red=0.2, green=0.6, blue=0.9))
PROJECT_Y = Cell(text="PRJ-Y", background=Color(red=1, green=0.8))
TRAINING = Cell(text="T", background=Color(green=1))


class FakeReader:
    """Stands in for SheetReader, serving a small June roster from memory"""

    def __init__(self) -> None:
        self.names = [None, "Name", "alice", "Bob", "Carol"]
        # column 10 (J) holds the 15th
        self.days = [None, None, 12.0, None, 13.0, None, 14.0, None, None, 15.0, None, 16.0]
        self.legend_blocks = [
            [
                [Cell(text="Project X"), PROJECT_X],
                [Cell(text="Project Y"), PROJECT_Y],
            ],
            [
                [Cell(text="Training"), TRAINING],
                [Cell()],
            ],
            [
                [Cell(text="Leave"), Cell(text="L", background=Color(red=0.5))],
            ],
        ]
        self.slot_cells = [PROJECT_X, PROJECT_Y]
        self.calls: list[tuple[str, object]] = []

    def get_column_values(self, range_name):
        self.calls.append(("column", range_name))
        return list(self.names)

    def get_number_row(self, range_name):
        self.calls.append(("numbers", range_name))
        return list(self.days)

    def get_cells(self, ranges, fields=None):
        self.calls.append(("cells", list(ranges)))
        if all(r.startswith("KEY!") for r in ranges):
            return self.legend_blocks
        return [[list(self.slot_cells)]]


@pytest.fixture
def reader() -> FakeReader:
    return FakeReader()


@pytest.fixture
def resolver(reader) -> RosterResolver:
    return RosterResolver(reader, epoch=date(2023, 1, 1))
