from datetime import date


def format_date(day: date) -> str:
    """Format a date like "Thu Jun 15 2023" regardless of locale"""
    weekday = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")[day.weekday()]
    month = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")[day.month - 1]
    return f"{weekday} {month} {day.day:02d} {day.year}"


class ScheduleError(Exception):
    """Base class for errors that abort a schedule lookup"""


class InvalidDate(ScheduleError):
    def __init__(self, day: date, epoch: date) -> None:
        self.date = day
        self.epoch = epoch
        super().__init__(f"No schedule before {epoch.isoformat()}, got {day.isoformat()}")


class PersonNotFound(ScheduleError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Could not find {name} in the roster")


class DateColumnNotFound(ScheduleError):
    def __init__(self, day: date) -> None:
        self.date = day
        super().__init__(f"Could not find {format_date(day)} in the roster")
