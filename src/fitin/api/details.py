"""Personal details form and persistence endpoints."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from fitin.api.dependencies import get_container, get_current_user, require_user
from fitin.api.models import UserDetailsPayload
from fitin.domain.calories import GoalType, UserDetails
from fitin.domain.models import AuthUser  # noqa: TC001
from fitin.services.calories import get_goal_calories
from fitin.services.user_details import validate_details

router = APIRouter(prefix="/details", tags=["details"])

_logger = logging.getLogger(__name__)


@router.get("", response_class=HTMLResponse)
async def details_form(
    request: Request, user: AuthUser | None = Depends(get_current_user)
) -> Response:
    """Serve the details form, sending anonymous visitors to sign in."""
    if user is None:
        return RedirectResponse(get_container(request).settings.auth_redirect_path)
    return HTMLResponse(_DETAILS_FORM_HTML)


@router.post("")
async def save_details(
    payload: UserDetailsPayload,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Validate and store the user's details."""
    container = get_container(request)
    details = validate_details(payload.model_dump())
    try:
        results = container.user_details_service.save(user.id, details)
    except Exception as exc:
        _logger.exception("Failed to save details", extra={"user_id": str(user.id)})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to save details. Please try again.",
        ) from exc
    return {
        "status": "ok",
        "message": "Details saved successfully!",
        "redirect": container.settings.details_success_path,
        "results": asdict(results),
    }


@router.get("/me")
async def my_details(
    request: Request, user: AuthUser = Depends(require_user)
) -> dict[str, object]:
    """Return stored details with the targets computed from them."""
    stored = get_container(request).user_details_service.get_with_results(user.id)
    if stored is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    details, results = stored
    return {"details": _serialize_details(details), "results": asdict(results)}


@router.get("/me/goal")
async def my_goal(
    goal: GoalType, request: Request, user: AuthUser = Depends(require_user)
) -> dict[str, object]:
    """Return goal calories and macros from the user's stored maintenance."""
    stored = get_container(request).user_details_service.get_with_results(user.id)
    if stored is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    _, results = stored
    return asdict(get_goal_calories(results.maintenance_calories, goal))


def _serialize_details(details: UserDetails) -> dict[str, object]:
    return {
        "height": details.height,
        "weight": details.weight,
        "age": details.age,
        "gender": details.gender.value,
        "activity_level": details.activity_level.value,
    }


_DETAILS_FORM_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Personal Details</title>
  </head>
  <body>
    <h1>Personal Details</h1>
    <p>Help us personalize your experience</p>
    <form id="details">
      <label>Height (cm) <input name="height" type="number" min="100" max="250"
        placeholder="175" required /></label><br />
      <label>Weight (kg) <input name="weight" type="number" min="30" max="300"
        placeholder="70" required /></label><br />
      <label>Age <input name="age" type="number" min="13" max="100"
        placeholder="25" required /></label><br />
      <label>Gender
        <select name="gender">
          <option value="male">Male</option>
          <option value="female">Female</option>
        </select>
      </label><br />
      <label>Activity Level
        <select name="activity_level">
          <option value="sedentary">Sedentary (little or no exercise)</option>
          <option value="lightly_active">Lightly Active (1-3 days/week)</option>
          <option value="moderately_active" selected>
            Moderately Active (3-5 days/week)
          </option>
          <option value="very_active">Very Active (6-7 days/week)</option>
          <option value="extra_active">Extra Active (athlete level)</option>
        </select>
      </label><br />
      <button type="submit">Continue</button>
    </form>
    <pre id="output"></pre>
    <script>
      document.getElementById('details').addEventListener('submit', async (e) => {
        e.preventDefault();
        const output = document.getElementById('output');
        const button = e.target.querySelector('button');
        button.disabled = true;
        button.textContent = 'Saving...';
        const body = Object.fromEntries(new FormData(e.target).entries());
        try {
          const res = await fetch('/details', {
            method: 'POST',
            credentials: 'same-origin',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify(body)
          });
          const data = await res.json();
          if (res.ok) {
            window.location.href = data.redirect;
            return;
          }
          output.textContent = data.detail.message || data.detail;
        } finally {
          button.disabled = false;
          button.textContent = 'Continue';
        }
      });
    </script>
  </body>
</html>
"""
