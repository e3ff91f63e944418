"""Type definitions and enums for export rendering."""

from enum import Enum
from typing import TypedDict


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


class KeySelection(str, Enum):
    BOTH = "both"
    PRIVATE_ONLY = "private"
    PUBLIC_ONLY = "public"


class ExportRow(TypedDict, total=False):
    privateKey: str
    publicKey: str
