import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from daily_roster.api.dependencies import get_resolver
from daily_roster.api.presentation import SchedulePresenter, ScheduleView
from daily_roster.schedule.resolver import RosterResolver


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get("")
async def get_schedule(
    name: str = Query(default=""),
    day: date | None = Query(default=None, alias="date"),
    resolver: RosterResolver = Depends(get_resolver),
) -> ScheduleView:
    """Return the AM and PM assignments of a person for a day (today by default)."""
    if not name.strip():
        raise HTTPException(status_code=422, detail="Please enter your name")
    day = day or date.today()

    presenter = SchedulePresenter()
    with presenter.busy():
        schedule = await resolver.resolve(name, day, on_progress=presenter.progress)
    presenter.render(name, day, schedule)
    return presenter.view()
