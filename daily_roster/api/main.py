import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from daily_roster import __version__
from daily_roster.api.presentation import SchedulePresenter
from daily_roster.api.routers import auth, schedule
from daily_roster.auth.credentials import RevokeError, Unauthenticated
from daily_roster.schedule.errors import DateColumnNotFound, InvalidDate, PersonNotFound
from daily_roster.sheets.client import SheetError


logger = logging.getLogger(__name__)


class HealthStatus(BaseModel):
    status: str
    version: str


app = FastAPI(title="Daily Roster API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Answer with the page state of a failed lookup"""
    presenter = SchedulePresenter()
    presenter.fail(message)
    content = {"detail": message, **jsonable_encoder(presenter.view())}
    return JSONResponse(status_code=status_code, content=content)


@app.exception_handler(Unauthenticated)
async def unauthenticated_handler(_request: Request, exc: Unauthenticated) -> JSONResponse:
    return error_response(401, str(exc))


@app.exception_handler(InvalidDate)
async def invalid_date_handler(_request: Request, exc: InvalidDate) -> JSONResponse:
    return error_response(422, str(exc))


@app.exception_handler(PersonNotFound)
@app.exception_handler(DateColumnNotFound)
async def not_found_handler(_request: Request, exc: PersonNotFound | DateColumnNotFound) -> JSONResponse:
    logger.warning(f"Lookup failed: {exc}")
    return error_response(404, str(exc))


@app.exception_handler(RevokeError)
async def revoke_error_handler(_request: Request, exc: RevokeError) -> JSONResponse:
    return error_response(502, "Could not reach Google to log out, please try again")


@app.exception_handler(SheetError)
async def sheet_error_handler(request: Request, exc: SheetError) -> JSONResponse:
    logger.error(f"Sheet read failed for {request.url.path}", exc_info=exc)
    return error_response(502, "Something went wrong reading the roster")


# Create shared API v1 router
api_v1 = APIRouter(prefix="/api/v1")


@api_v1.get("/health")
async def health_check() -> HealthStatus:
    """Return health status of the API."""
    return {"status": "healthy", "version": __version__}


api_v1.include_router(auth.router)
api_v1.include_router(schedule.router)

app.include_router(api_v1)
