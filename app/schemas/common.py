"""
Common Pydantic schemas
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Model exchanged with clients and the store using camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

class UpdateModel(CamelModel):
    """Partial update body; unknown keys are rejected"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, keyed by attribute name"""
        return self.model_dump(exclude_unset=True, exclude_none=True)

class StoredRecord(CamelModel):
    """Fields every persisted record carries"""
    id: str
    created_at: str
    updated_at: Optional[str] = None
    version: int = 1

class StandardResponse(BaseModel):
    """Standard API response"""
    success: bool
    message: str
    data: Optional[Any] = None

class ErrorResponse(BaseModel):
    """Error response schema"""
    success: bool = False
    error: str
    error_code: Optional[str] = None
    details: Optional[Any] = None
