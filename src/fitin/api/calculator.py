"""Calculator endpoints."""

from dataclasses import asdict

from fastapi import APIRouter

from fitin.api.models import UserDetailsPayload
from fitin.domain.calories import GoalType
from fitin.services.calories import calculate_calories, get_goal_calories
from fitin.services.user_details import validate_details

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.post("/calories")
async def calories(payload: UserDetailsPayload) -> dict[str, object]:
    """Return maintenance, cut and bulk targets for the submitted details."""
    details = validate_details(payload.model_dump())
    return asdict(calculate_calories(details))


@router.get("/goal")
async def goal_calories(maintenance: int, goal: GoalType) -> dict[str, object]:
    """Return the calorie target and macros for a goal."""
    return asdict(get_goal_calories(maintenance, goal))
