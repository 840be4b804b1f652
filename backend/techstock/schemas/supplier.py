"""Schemas for supplier endpoints."""

from pydantic import BaseModel, Field


class SupplierCreate(BaseModel):
    """Schema for adding a supplier."""

    name: str = Field(min_length=1, max_length=255)
    contact: str | None = Field(None, max_length=255)


class SupplierRead(BaseModel):
    """Schema for supplier list entries."""

    supplier_id: int = Field(validation_alias="id")
    name: str

    model_config = {"from_attributes": True}


class SupplierCreated(BaseModel):
    """Schema for the add-supplier response."""

    message: str
    supplier_id: int
