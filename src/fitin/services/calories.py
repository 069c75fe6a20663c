"""Calorie and macro calculator.

BMR uses the Mifflin-St Jeor equation. Maintenance calories scale BMR by a
fixed activity multiplier; cut and bulk targets apply a 20% deficit and a 15%
surplus. Every intermediate quantity is rounded where it is produced, so the
order of the steps below matters for the integer results.
"""

import math

from fitin.domain.calories import (
    ActivityLevel,
    CalorieResults,
    Gender,
    GoalCalorieResult,
    GoalType,
    UserDetails,
)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTRA_ACTIVE: 1.9,
}

CUT_FACTOR = 0.8
BULK_FACTOR = 1.15

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

PROTEIN_GRAMS_PER_KG = 2
FAT_SHARE = 0.25

GOAL_PROTEIN_SHARE = 0.30
GOAL_FAT_SHARE = 0.25
GOAL_CARBS_SHARE = 0.45


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def calculate_bmr(weight: float, height: float, age: float, gender: Gender) -> float:
    """Return basal metabolic rate in kcal/day (unrounded)."""
    base = 10 * weight + 6.25 * height - 5 * age
    if gender == Gender.MALE:
        return base + 5
    return base - 161


def calculate_calories(details: UserDetails) -> CalorieResults:
    """Calculate maintenance, cut and bulk calories plus daily macros."""
    bmr = calculate_bmr(details.weight, details.height, details.age, details.gender)
    maintenance = round_half_up(bmr * ACTIVITY_MULTIPLIERS[details.activity_level])

    cut = round_half_up(maintenance * CUT_FACTOR)
    bulk = round_half_up(maintenance * BULK_FACTOR)

    # Protein is weight-based, fat is a share of calories, carbs take the rest.
    protein = round_half_up(details.weight * PROTEIN_GRAMS_PER_KG)
    fat_calories = round_half_up(maintenance * FAT_SHARE)
    fat = round_half_up(fat_calories / KCAL_PER_GRAM_FAT)
    protein_calories = protein * KCAL_PER_GRAM_PROTEIN
    # Not clamped: very small maintenance values give negative carbs.
    carb_calories = maintenance - protein_calories - fat_calories
    carbs = round_half_up(carb_calories / KCAL_PER_GRAM_CARBS)

    return CalorieResults(
        maintenance_calories=maintenance,
        cut_calories=cut,
        bulk_calories=bulk,
        protein_grams=protein,
        carbs_grams=carbs,
        fat_grams=fat,
    )


def get_goal_calories(
    maintenance: int | float, goal_type: GoalType
) -> GoalCalorieResult:
    """Return the calorie target and percentage-based macros for a goal."""
    target = maintenance
    if goal_type == GoalType.CUT:
        target = round_half_up(maintenance * CUT_FACTOR)
    elif goal_type == GoalType.BULK:
        target = round_half_up(maintenance * BULK_FACTOR)

    protein = round_half_up(target * GOAL_PROTEIN_SHARE / KCAL_PER_GRAM_PROTEIN)
    fat = round_half_up(target * GOAL_FAT_SHARE / KCAL_PER_GRAM_FAT)
    carbs = round_half_up(target * GOAL_CARBS_SHARE / KCAL_PER_GRAM_CARBS)

    return GoalCalorieResult(calories=target, protein=protein, carbs=carbs, fat=fat)
