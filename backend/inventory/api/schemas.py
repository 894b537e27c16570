from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase JSON (``first_name`` <-> ``firstName``)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class UserResponse(CamelModel):
    id: int
    first_name: str | None
    last_name: str | None
    email: str
    role: str
    created_at: datetime


class ProductResponse(CamelModel):
    id: int
    name: str
    price: float
    quantity: int
    description: str | None
    created_at: datetime
    updated_at: datetime
