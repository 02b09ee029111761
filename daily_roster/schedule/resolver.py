import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from ..sheets.client import SheetReader
from ..sheets.columns import a1_range, column_label_to_number
from ..sheets.models import WHITE, Cell, LegendEntry
from .errors import DateColumnNotFound, InvalidDate, PersonNotFound
from .models import Assignment, DaySchedule, ScheduleQuery


logger = logging.getLogger(__name__)

DEFAULT_EPOCH = date(2023, 1, 1)
MONTH_SHEETS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
NOT_ASSIGNED = LegendEntry(label="Not assigned", appearance=Cell(text="", background=WHITE))
TOTAL_STEPS = 3

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class RosterLayout:
    """Where things live in the roster spreadsheet"""

    name_column: str = "B"
    header_row: int = 2
    legend_sheet: str = "KEY"
    legend_ranges: tuple[str, ...] = ("A2:B31", "A34:B48", "D2:E9")

    def __post_init__(self) -> None:
        # raises ValueError for anything that isn't a column label
        column_label_to_number(self.name_column)

    def roster_sheet(self, day: date) -> str:
        """Each month has its own tab, named JAN, FEB, ..."""
        return MONTH_SHEETS[day.month - 1]


def is_weekend(day: date) -> bool:
    # 0 = Sunday ... 6 = Saturday
    return day.isoweekday() % 7 in (0, 6)


def classify_cell(cell: Cell, legend: Sequence[LegendEntry]) -> Assignment:
    """Turn a roster cell into an assignment using the legend

    Cells without any fill are holidays. Otherwise the first legend entry
    with the same text and the same color wins.
    """
    if cell.is_holiday:
        return Assignment.holiday(cell)
    for entry in legend:
        if entry.appearance == cell:
            return Assignment(label=entry.label, appearance=entry.appearance)
    return Assignment.key_not_found(cell)


class RosterResolver:
    """Looks up what a person is scheduled for on a given day"""

    def __init__(
        self,
        reader: SheetReader,
        layout: RosterLayout | None = None,
        epoch: date = DEFAULT_EPOCH,
    ) -> None:
        self.reader = reader
        self.layout = layout or RosterLayout()
        self.epoch = epoch

    async def resolve(
        self, person_name: str, day: date, on_progress: ProgressCallback | None = None
    ) -> DaySchedule:
        """Resolve the AM and PM assignments of person_name on day"""
        query = ScheduleQuery(person_name=person_name, date=day)
        progress = on_progress or (lambda step, total: None)

        if query.date < self.epoch:
            raise InvalidDate(query.date, self.epoch)

        if is_weekend(query.date):
            logger.info(f"{query.date} is a weekend, skipping the roster")
            weekend = Assignment.weekend()
            return DaySchedule(am=weekend, pm=weekend)

        sheet_name = self.layout.roster_sheet(query.date)
        progress(0, TOTAL_STEPS)

        row, column, legend = await asyncio.gather(
            asyncio.to_thread(self.find_row, sheet_name, query.person_name),
            asyncio.to_thread(self.find_column, sheet_name, query.date),
            asyncio.to_thread(self.get_legend),
        )
        progress(1, TOTAL_STEPS)

        cells = await asyncio.to_thread(self.get_slot_cells, sheet_name, row, column)
        progress(2, TOTAL_STEPS)

        am, pm = (classify_cell(cell, legend) for cell in cells)
        logger.info(f"Schedule for {query.person_name} on {query.date}: AM={am.label!r}, PM={pm.label!r}")
        progress(3, TOTAL_STEPS)
        return DaySchedule(am=am, pm=pm)

    def find_row(self, sheet_name: str, person_name: str) -> int:
        """Get the 1-based row of the person, matching names case-insensitively"""
        column = self.layout.name_column
        names = self.reader.get_column_values(f"{sheet_name}!{column}:{column}")
        wanted = person_name.strip().casefold()
        for index, name in enumerate(names):
            if name is not None and name.strip().casefold() == wanted:
                return index + 1
        raise PersonNotFound(person_name)

    def find_column(self, sheet_name: str, day: date) -> int:
        """Get the 1-based column whose header holds the day of the month"""
        header_row = self.layout.header_row
        days = self.reader.get_number_row(f"{sheet_name}!{header_row}:{header_row}")
        for index, value in enumerate(days):
            if value is not None and value == day.day:
                return index + 1
        raise DateColumnNotFound(day)

    def get_legend(self) -> list[LegendEntry]:
        """Read every legend range in order, then append the "Not assigned" entry"""
        ranges = [f"{self.layout.legend_sheet}!{cell_range}" for cell_range in self.layout.legend_ranges]
        legend = []
        for rows in self.reader.get_cells(ranges):
            for row in rows:
                if not row or not row[0].text:
                    continue
                appearance = row[1] if len(row) > 1 else Cell()
                legend.append(LegendEntry(label=row[0].text, appearance=appearance))
        legend.append(NOT_ASSIGNED)
        logger.debug(f"Read {len(legend)} legend entries")
        return legend

    def get_slot_cells(self, sheet_name: str, row: int, column: int) -> tuple[Cell, Cell]:
        """Get the AM cell at (row, column) and the PM cell right next to it"""
        cell_range = a1_range(sheet_name, column, row, column + 1, row)
        blocks = self.reader.get_cells([cell_range])
        rows = blocks[0] if blocks else []
        cells = list(rows[0]) if rows else []
        # trailing blank cells are left out of the response
        cells += [Cell()] * (2 - len(cells))
        return cells[0], cells[1]
