"""Display state of the schedule page.

The page has a label and a colored swatch per slot, a status line and an
error line, plus a fetch button that is disabled while a lookup runs.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

from pydantic import BaseModel

from ..schedule.errors import format_date
from ..schedule.models import Assignment, DaySchedule, Slot
from ..sheets.models import Color


class SlotView(BaseModel):
    label: str
    text: str
    color: str


class ScheduleView(BaseModel):
    am: SlotView | None = None
    pm: SlotView | None = None
    status: str = ""
    error: str = ""
    fetch_enabled: bool = True


def css_rgb(color: Color) -> str:
    """Render a [0, 1] color as a CSS rgb() fill, missing channels as 0"""
    red, green, blue = (round(channel) for channel in color.to_rgb255())
    return f"rgb({red}, {green}, {blue})"


def slot_view(assignment: Assignment) -> SlotView:
    return SlotView(
        label=assignment.label,
        text=assignment.appearance.text,
        color=css_rgb(assignment.appearance.background),
    )


class SchedulePresenter:
    """Keeps the page regions in sync with a schedule lookup"""

    def __init__(self) -> None:
        self.status = ""
        self.error = ""
        self.fetch_enabled = True
        self.slots: dict[Slot, SlotView] = {}

    @contextmanager
    def busy(self) -> Iterator["SchedulePresenter"]:
        """Disable fetching for the duration of a lookup, however it ends"""
        self.fetch_enabled = False
        self.error = ""
        try:
            yield self
        finally:
            self.fetch_enabled = True

    def progress(self, step: int, total: int) -> None:
        self.status = f"Fetching schedule... ({step}/{total})"

    def render(self, name: str, day: date, schedule: DaySchedule) -> None:
        for slot in Slot:
            self.slots[slot] = slot_view(schedule[slot])
        self.status = f"Schedule for {name} on {format_date(day)}"

    def fail(self, message: str) -> None:
        self.error = message or "Something went wrong"

    def view(self) -> ScheduleView:
        return ScheduleView(
            am=self.slots.get(Slot.AM),
            pm=self.slots.get(Slot.PM),
            status=self.status,
            error=self.error,
            fetch_enabled=self.fetch_enabled,
        )
