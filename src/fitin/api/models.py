"""Pydantic models for API payloads."""

from pydantic import BaseModel


class UserDetailsPayload(BaseModel):
    """Details form payload, range-checked by `validate_details`."""

    height: float | str | None = None
    weight: float | str | None = None
    age: float | str | None = None
    gender: str | None = None
    activity_level: str | None = None
