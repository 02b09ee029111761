"""Daily Roster - look up who works on which project, morning and afternoon.

This package reads a color-coded roster kept in Google Sheets and resolves a
person's AM and PM assignments for a day by matching roster cells against the
legend tab.
"""

__version__ = "0.1.0"

from .auth.credentials import CredentialContext
from .schedule.resolver import RosterResolver
from .sheets.client import SheetReader


__all__ = [
    "CredentialContext",
    "RosterResolver",
    "SheetReader",
]
