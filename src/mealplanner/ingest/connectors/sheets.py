"""Recipe sheet connector: fetches the published CSV recipe table."""

import csv
import io
from typing import Any

import httpx
from pydantic import ValidationError
from tenacity import (
    RetryError,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from mealplanner.config import get_settings
from mealplanner.ingest.connectors.base import ConnectorError, ConnectorResponse
from mealplanner.ingest.schemas import Recipe
from mealplanner.logging_config import get_logger

logger = get_logger(__name__)


def parse_recipes_csv(csv_text: str) -> list[Recipe]:
    """
    Decode a CSV recipe table into recipes.

    The first row holds the column headers. Quoted fields may span several
    lines (the ingredient list is one line per ingredient). Rows with a blank
    first column or a field count that does not match the header are skipped.
    """
    rows = csv.reader(io.StringIO(csv_text))
    try:
        header_row = next(rows)
    except StopIteration:
        return []

    headers = [h.strip().replace('"', "") for h in header_row]
    recipes: list[Recipe] = []

    for row_number, row in enumerate(rows, start=2):
        if len(row) != len(headers) or not row[0].strip():
            logger.debug(f"Skipping CSV row {row_number}: {len(row)} fields")
            continue

        record = {header: value.strip() for header, value in zip(headers, row)}
        try:
            recipes.append(Recipe.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping invalid recipe on CSV row {row_number}: {e}")

    return recipes


class SheetConnector:
    """Connector for a recipe table published as CSV."""

    BACKOFF_BASE = 1
    BACKOFF_MAX = 30

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ):
        settings = get_settings()
        self.url = url or settings.recipe_sheet_url
        self.timeout = timeout or settings.request_timeout
        self.max_retries = max_retries or settings.request_max_retries
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        """Return connector name."""
        return "recipe-sheet"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                headers={
                    "Accept": "text/csv",
                    "User-Agent": "Mealplanner/1.0",
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self) -> ConnectorResponse:
        """Fetch the sheet with retry logic."""
        client = await self._get_client()

        @retry(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=self.BACKOFF_BASE, max=self.BACKOFF_MAX),
        )
        async def _do_request() -> httpx.Response:
            return await client.get(self.url)

        try:
            response = await _do_request()
        except RetryError as e:
            logger.error(f"Request failed after {self.max_retries} retries: {self.url}")
            raise ConnectorError(
                f"Request failed after {self.max_retries} retries",
                response=str(e),
            ) from e

        if response.status_code >= 400:
            error_detail = response.text[:500] if response.text else "No details"
            logger.error(f"Sheet error {response.status_code} for {self.url}: {error_detail}")
            raise ConnectorError(
                f"Sheet request failed with status {response.status_code}",
                status_code=response.status_code,
                response=error_detail,
            )

        return ConnectorResponse(
            data=response.text,
            status_code=response.status_code,
            headers=dict(response.headers),
        )

    async def fetch_recipes(self) -> list[Recipe]:
        """
        Fetch and decode all recipes from the sheet.

        Returns:
            Recipes in sheet order.
        """
        logger.info("Fetching recipes from sheet")
        response = await self._request()

        recipes = parse_recipes_csv(response.data)
        logger.info(f"Loaded {len(recipes)} recipes")
        return recipes

    async def health_check(self) -> bool:
        """
        Check if the sheet is reachable.

        Returns:
            True if healthy, False otherwise.
        """
        try:
            response = await self._request()
            return response.is_success
        except (ConnectorError, httpx.HTTPError) as e:
            logger.warning(f"Health check failed: {e}")
            return False

    async def __aenter__(self) -> "SheetConnector":
        """Async context manager entry."""
        await self._get_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()
