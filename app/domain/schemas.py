# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict


class Product(BaseModel):
    """Schema dla produktu (response, read-only)."""

    id: int = Field(..., gt=0)
    name: str
    # int first so 1500 stays 1500 on the wire, not 1500.0
    price: int | float

    model_config = ConfigDict(frozen=True)


class User(BaseModel):
    """Schema dla użytkownika (response, read-only)."""

    id: int = Field(..., gt=0)
    name: str
    age: int

    model_config = ConfigDict(frozen=True)


class MessageOut(BaseModel):
    """Schema dla błędów, np. {"message": "Product not found"}."""

    message: str
