"""
Request/response schemas for the billing API.
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AccessRequest(BaseModel):
    # phone numbers often arrive as JSON numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    # optional here so that missing fields map to "Invalid request", not a 422
    phone: Optional[str] = None
    package: Optional[str] = Field(default=None, description="1h | 6h | 12h | 1d")


class AccessResponse(BaseModel):
    success: bool = True
    code: str
    message: str


class ConfirmRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: Optional[str] = None
    mpesa_ref: Optional[str] = Field(default=None, description="Payment reference, not verified")


class ConfirmResponse(BaseModel):
    success: bool = True
    username: str
    password: str
    message: str


class PackageResponse(BaseModel):
    id: str
    name: str
    price: int
    duration_seconds: int


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    phone: str
    package: str
    amount: int
    code: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    status: str
    created_at: datetime
    expires_at: Optional[datetime] = None


class ErrorResponse(BaseModel):
    error: str
