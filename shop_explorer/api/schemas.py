"""API request/response schemas."""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shop_explorer.integrations.queries import DataType
from shop_explorer.services.stores import normalize_shop_domain


# === Store Schemas ===

class StoreCreate(BaseModel):
    """Request to register a store."""
    store_name: str = Field(..., min_length=1, max_length=255)
    shopify_domain: str = Field(..., min_length=1, max_length=255)
    api_access_token: str = Field(..., min_length=1)

    @field_validator("store_name", "api_access_token")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("shopify_domain")
    @classmethod
    def valid_domain(cls, value: str) -> str:
        # Raises ValueError for blank input; the service normalizes again on save
        normalize_shop_domain(value)
        return value


class StoreResponse(BaseModel):
    """Store as shown to operators. Never includes the access token."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_name: str
    shopify_domain: str
    created_at: datetime


# === Data Viewer Schemas ===

class ColumnSchema(BaseModel):
    key: str
    label: str


class DataViewResponse(BaseModel):
    """Normalized rows for one store and data type."""
    store_id: int
    data_type: DataType
    count: int
    columns: List[ColumnSchema]
    rows: List[dict[str, Any]]
    table: List[dict[str, dict[str, str]]]
