"""Connectors for remote recipe sources."""

from mealplanner.ingest.connectors.base import ConnectorError, ConnectorResponse
from mealplanner.ingest.connectors.sheets import SheetConnector, parse_recipes_csv

__all__ = [
    "ConnectorError",
    "ConnectorResponse",
    "SheetConnector",
    "parse_recipes_csv",
]
