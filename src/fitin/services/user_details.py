"""User details validation and persistence."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeVar
from uuid import UUID

from fitin.domain.calories import ActivityLevel, CalorieResults, Gender, UserDetails
from fitin.domain.errors import ValidationError
from fitin.services.calories import calculate_calories

HEIGHT_RANGE_CM = (100, 250)
WEIGHT_RANGE_KG = (30, 300)
AGE_RANGE_YEARS = (13, 100)

_logger = logging.getLogger(__name__)

_E = TypeVar("_E", bound=Enum)


class UserDetailsRepository(Protocol):
    """Persistence interface for user details."""

    def upsert(self, user_id: UUID, details: UserDetails) -> None:
        """Insert or replace the details row for a user."""

    def get(self, user_id: UUID) -> UserDetails | None:
        """Return stored details for a user, if present."""


@dataclass
class UserDetailsService:
    """Service for storing details and computing targets from them."""

    repository: UserDetailsRepository

    def save(self, user_id: UUID, details: UserDetails) -> CalorieResults:
        """Persist validated details and return the targets they produce."""
        self.repository.upsert(user_id, details)
        _logger.info("Saved user details: user_id=%s", user_id)
        return calculate_calories(details)

    def get(self, user_id: UUID) -> UserDetails | None:
        """Return stored details for a user."""
        return self.repository.get(user_id)

    def get_with_results(
        self, user_id: UUID
    ) -> tuple[UserDetails, CalorieResults] | None:
        """Return stored details together with freshly computed targets."""
        details = self.repository.get(user_id)
        if details is None:
            return None
        return details, calculate_calories(details)


def validate_details(raw: Mapping[str, object]) -> UserDetails:
    """Validate raw form values and build UserDetails.

    Fields are checked in form order and the first failure is raised.
    Numeric values may arrive as strings; age is truncated to a whole number.
    """
    height = _parse_number(raw.get("height"), field="height", label="Height")
    _check_range(height, HEIGHT_RANGE_CM, field="height", label="Height", unit=" cm")
    weight = _parse_number(raw.get("weight"), field="weight", label="Weight")
    _check_range(weight, WEIGHT_RANGE_KG, field="weight", label="Weight", unit=" kg")
    age = math.trunc(_parse_number(raw.get("age"), field="age", label="Age"))
    _check_range(age, AGE_RANGE_YEARS, field="age", label="Age", unit="")
    gender = _parse_choice(raw.get("gender"), Gender, field="gender", label="Gender")
    activity_level = _parse_choice(
        raw.get("activity_level"),
        ActivityLevel,
        field="activity_level",
        label="Activity level",
    )
    return UserDetails(
        height=height,
        weight=weight,
        age=age,
        gender=gender,
        activity_level=activity_level,
    )


def _parse_number(value: object, *, field: str, label: str) -> float:
    number: float | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int | float):
        try:
            number = float(value)
        except OverflowError:
            number = None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            number = None
    if number is None or not math.isfinite(number):
        raise ValidationError(field, f"{label} must be a number")
    return number


def _check_range(
    value: float, bounds: tuple[int, int], *, field: str, label: str, unit: str
) -> None:
    low, high = bounds
    if value < low:
        raise ValidationError(field, f"{label} must be at least {low}{unit}")
    if value > high:
        raise ValidationError(field, f"{label} must be less than {high}{unit}")


def _parse_choice(
    value: object, choices: type[_E], *, field: str, label: str
) -> _E:
    if isinstance(value, str):
        for choice in choices:
            if choice.value == value:
                return choice
    allowed = ", ".join(choice.value for choice in choices)
    raise ValidationError(field, f"{label} must be one of: {allowed}")
