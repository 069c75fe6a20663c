"""Calorie planning domain models."""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Self-reported weekly activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"


class GoalType(str, Enum):
    """Calorie goal selector."""

    CUT = "cut"
    BULK = "bulk"
    MAINTAIN = "maintain"


@dataclass(frozen=True)
class UserDetails:
    """Biometric details entered by a user."""

    height: float  # cm
    weight: float  # kg
    age: int
    gender: Gender
    activity_level: ActivityLevel


@dataclass(frozen=True)
class CalorieResults:
    """Maintenance, cut and bulk targets with a weight-based macro split."""

    maintenance_calories: int
    cut_calories: int
    bulk_calories: int
    protein_grams: int
    carbs_grams: int
    fat_grams: int


@dataclass(frozen=True)
class GoalCalorieResult:
    """Calorie target for a goal with a percentage-based macro split."""

    calories: int | float
    protein: int
    carbs: int
    fat: int
