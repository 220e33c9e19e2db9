# /app/services/sheets_service.py

"""
The data access layer: a thin, read-only wrapper around the Google Sheets v4
API.

The rest of the application only relies on `get_rows(sheet, columns)`, which
returns the raw cell values of a sheet (header row included) as lists of
strings. Rows may be ragged and the result may be empty. One `SheetsTableStore`
is built at startup, held on `app.state`, and handed to each request through
the `get_table_store` dependency.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request
import httplib2
import google_auth_httplib2
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.config import Settings
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)

Row = List[str]


class SheetsTableStore:
    def __init__(self, service: Any, spreadsheet_id: str, http_factory: Optional[Callable[[], Any]] = None):
        """
        Args:
            service: A `sheets` v4 resource as returned by
                `googleapiclient.discovery.build`.
            spreadsheet_id: The spreadsheet every table is read from.
            http_factory: Builds a fresh transport for each request.
                httplib2 connections are not thread-safe and table reads run
                in worker threads, so no two calls may share one. When None,
                requests use the resource's own transport.
        """
        self.service = service
        self.spreadsheet_id = spreadsheet_id
        self.http_factory = http_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetsTableStore":
        creds = service_account.Credentials.from_service_account_info(
            settings.credentials_info, scopes=settings.scopes
        )
        service = build("sheets", "v4", credentials=creds, cache_discovery=False)
        return cls(
            service=service,
            spreadsheet_id=settings.spreadsheet_id,
            http_factory=lambda: google_auth_httplib2.AuthorizedHttp(creds, http=httplib2.Http()),
        )

    def _execute(self, request) -> Any:
        if self.http_factory is None:
            return request.execute()
        return request.execute(http=self.http_factory())

    def get_rows(self, sheet: str, columns: str) -> List[Row]:
        """
        Fetches `sheet!columns` (e.g. `Students!A:G`) as raw rows.

        Raises:
            UpstreamError: if the API call fails or returns a malformed body.
        """
        range_name = f"{sheet}!{columns}"
        try:
            response = self._execute(
                self.service.spreadsheets().values().get(spreadsheetId=self.spreadsheet_id, range=range_name)
            )
        except HttpError as e:
            raise UpstreamError(f"Sheets API error reading {range_name}: {e}") from e
        except OSError as e:
            raise UpstreamError(f"Could not reach Sheets API reading {range_name}: {e}") from e

        values = response.get("values", []) if isinstance(response, dict) else None
        if not isinstance(values, list) or not all(isinstance(r, list) for r in values):
            raise UpstreamError(f"Malformed response for {range_name}.")
        return [[str(cell) for cell in row] for row in values]

    def probe(self) -> Dict[str, str]:
        """Connectivity check used by the /health endpoint."""
        try:
            response = self._execute(self.service.spreadsheets().get(spreadsheetId=self.spreadsheet_id))
        except (HttpError, OSError) as e:
            raise UpstreamError(f"Failed to connect to Google Sheets: {e}") from e
        title = response.get("properties", {}).get("title", "")
        logger.info("Connected to Google Sheet %r", title)
        return {"spreadsheetId": self.spreadsheet_id, "title": title}


# --- DEPENDENCY PROVIDER ---
def get_table_store(request: Request) -> SheetsTableStore:
    """
    FastAPI dependency that provides the store built during application
    startup.
    """
    store: Optional[SheetsTableStore] = getattr(request.app.state, "table_store", None)
    if store is None:
        raise UpstreamError("The table store is not configured.")
    return store
