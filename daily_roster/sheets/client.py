import logging
import threading
from typing import Any

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..auth.credentials import CredentialContext, Unauthenticated
from .models import Cell, Color


logger = logging.getLogger(__name__)

CELL_FIELDS = "sheets.data.rowData.values(effectiveValue,effectiveFormat.backgroundColor)"
NUMBER_FIELDS = "sheets.data.rowData.values.effectiveValue"


class SheetError(Exception):
    """Custom exception for sheet-related errors"""


class SheetParseError(SheetError):
    """The API answered with a shape we don't know how to read"""


class SheetReader:
    """Read-only access to a single spreadsheet"""

    def __init__(self, spreadsheet_id: str, credentials: CredentialContext, service: Any = None) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.credentials = credentials
        self._service = service
        self._service_lock = threading.Lock()

    @property
    def service(self) -> Any:
        # concurrent reads share one service object, built by whichever thread gets here first
        with self._service_lock:
            if self._service is None:
                self._service = self._build_sheets_service()
        return self._service

    def _build_sheets_service(self) -> Any:
        """Create and return an authorized Sheets API service object"""
        creds = self.credentials.require()
        try:
            return build("sheets", "v4", credentials=creds, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {e!s}") from e

    def _execute(self, request: Any, description: str) -> dict[str, Any]:
        # httplib2 is not thread-safe, so every execution gets its own transport
        http = AuthorizedHttp(self.credentials.require(), http=httplib2.Http())
        try:
            return request.execute(http=http)
        except RefreshError as e:
            logger.warning(f"Access token rejected while reading {description}: {e}")
            raise Unauthenticated("Access token expired or revoked, please log in again") from e
        except (HttpError, TransportError, httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"Error reading {description}: {e}")
            raise SheetError(f"Failed to read {description}: {e!s}") from e

    def get_column_values(self, range_name: str) -> list[str | None]:
        """Get the raw values of a single column, blank cells as None"""
        self.credentials.require()
        logger.debug(f"Reading column {range_name}")
        request = (
            self.service.spreadsheets()
            .values()
            .get(spreadsheetId=self.spreadsheet_id, range=range_name, majorDimension="COLUMNS")
        )
        result = self._execute(request, range_name)
        columns = result.get("values", [])
        if not columns:
            return []
        return [value if value != "" else None for value in columns[0]]

    def get_cells(self, ranges: list[str], fields: str = CELL_FIELDS) -> list[list[list[Cell]]]:
        """Get formatted cells for each range, as rows of cells per range"""
        self.credentials.require()
        logger.debug(f"Reading cells {ranges}")
        request = self.service.spreadsheets().get(spreadsheetId=self.spreadsheet_id, ranges=ranges, fields=fields)
        result = self._execute(request, ", ".join(ranges))
        return [
            [[self._parse_cell(value) for value in row.get("values", [])] for row in block.get("rowData", [])]
            for block in self._data_blocks(result)
        ]

    def get_number_row(self, range_name: str) -> list[float | None]:
        """Get the effective numeric value of every cell in a single row"""
        self.credentials.require()
        logger.debug(f"Reading numbers {range_name}")
        request = self.service.spreadsheets().get(
            spreadsheetId=self.spreadsheet_id, ranges=[range_name], fields=NUMBER_FIELDS
        )
        result = self._execute(request, range_name)
        blocks = self._data_blocks(result)
        rows = blocks[0].get("rowData", []) if blocks else []
        if not rows:
            return []
        return [(value.get("effectiveValue") or {}).get("numberValue") for value in rows[0].get("values", [])]

    @staticmethod
    def _data_blocks(result: dict[str, Any]) -> list[dict[str, Any]]:
        """Flatten sheets -> data into one list, one block per requested range"""
        try:
            return [block for sheet in result["sheets"] for block in sheet["data"]]
        except (KeyError, TypeError) as e:
            raise SheetParseError(f"Unexpected response shape, missing {e!s}") from e

    @staticmethod
    def _parse_cell(value: dict[str, Any]) -> Cell:
        effective_value = value.get("effectiveValue") or {}
        effective_format = value.get("effectiveFormat") or {}
        return Cell(
            text=effective_value.get("stringValue", ""),
            background=Color.from_api(effective_format.get("backgroundColor")),
        )
