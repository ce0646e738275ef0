"""Per-user API endpoints with simple token auth."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import (
    APIRouter,
    Body,
    Depends,
    Header,
    HTTPException,
    Query,
    Request,
    status,
)

from flexlog.api.models import (
    NutritionPayload,
    UserSettingsPayload,
    WeeklyGoalsPayload,
    WorkoutPayload,
)
from flexlog.domain.goals import WeeklyGoals
from flexlog.domain.settings import UserProfile
from flexlog.services.averages import score_color
from flexlog.services.scoring import score_grade
from flexlog.services.trends import TREND_METRICS
from flexlog.services.user_settings import is_valid_timezone

if TYPE_CHECKING:
    from flexlog.containers import AppContainer
    from flexlog.domain.badges import Badge
    from flexlog.domain.scores import DailyLog
    from flexlog.services.goals import GoalStatus


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(
    prefix="/users/{user_id}",
    tags=["users"],
    dependencies=[Depends(require_token)],
)


@router.put("/logs/{log_date}")
async def save_daily_log(
    user_id: UUID,
    log_date: date,
    request: Request,
    data: dict[str, object] = Body(...),  # noqa: B008
) -> dict[str, object]:
    """Score a day's metrics and store them, replacing any earlier log."""
    container: AppContainer = request.app.state.container
    log = container.daily_log_service.save_log(user_id, log_date, data)
    return _daily_log_body(log)


@router.get("/logs")
async def list_daily_logs(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the full log history keyed by date."""
    container: AppContainer = request.app.state.container
    logs = container.daily_log_service.list_logs(user_id)
    return {
        "logs": {day.isoformat(): logs[day].to_record() for day in sorted(logs)}
    }


@router.get("/logs/{log_date}")
async def get_daily_log(
    user_id: UUID, log_date: date, request: Request
) -> dict[str, object]:
    """Return the stored log for a date."""
    container: AppContainer = request.app.state.container
    log = container.daily_log_service.get_log(user_id, log_date)
    if log is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _daily_log_body(log)


@router.get("/logs/{log_date}/comparison")
async def compare_daily_log(
    user_id: UUID, log_date: date, request: Request
) -> dict[str, object]:
    """Compare a day's log with the previous day's."""
    container: AppContainer = request.app.state.container
    comparisons = container.daily_log_service.compare_with_previous_day(
        user_id, log_date
    )
    if comparisons is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {
        "date": log_date.isoformat(),
        "comparisons": [
            {
                "metric": item.metric,
                "today": item.today,
                "previous": item.previous,
                "changePercent": item.change_percent,
            }
            for item in comparisons
        ],
    }


@router.get("/averages")
async def rolling_averages(
    user_id: UUID, request: Request, days: int | None = Query(default=None, ge=1)
) -> dict[str, object]:
    """Return rolling averages over the most recent logged days."""
    container: AppContainer = request.app.state.container
    window = days or container.settings.rolling_window_days
    summary = container.daily_log_service.get_averages(user_id, window)
    return {
        "days": summary.days,
        "overall": summary.overall,
        "color": summary.color,
        "sections": summary.sections.to_record(),
    }


@router.get("/trends/{metric}")
async def metric_trend(
    user_id: UUID,
    metric: str,
    request: Request,
    window: int = Query(default=7, ge=1),
) -> dict[str, object]:
    """Return the recent trend of a tracked metric."""
    if metric not in TREND_METRICS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown metric. Expected one of: {', '.join(TREND_METRICS)}",
        )
    container: AppContainer = request.app.state.container
    summary = container.daily_log_service.get_trend(user_id, metric, window)
    if summary is None:
        return {"metric": metric, "points": []}
    return {
        "metric": metric,
        "points": [
            {"date": point.day.isoformat(), "value": point.value}
            for point in summary.points
        ],
        "latest": summary.latest,
        "average": summary.average,
        "min": summary.minimum,
        "max": summary.maximum,
    }


@router.post("/workouts/{log_date}", status_code=status.HTTP_201_CREATED)
async def add_workout(
    user_id: UUID, log_date: date, payload: WorkoutPayload, request: Request
) -> dict[str, object]:
    """Append a workout to a date and re-check this week's badge."""
    container: AppContainer = request.app.state.container
    entry = container.goal_service.add_workout(
        user_id,
        log_date,
        exercise=payload.exercise,
        sets=payload.sets,
        reps=payload.reps,
        weight=payload.weight,
    )
    badges = _check_badges(container, user_id)
    return {"workout": entry.to_record(), "badges": _badges_body(badges)}


@router.get("/workouts/{log_date}")
async def list_workouts(
    user_id: UUID, log_date: date, request: Request
) -> dict[str, object]:
    """Return workouts logged on a date."""
    container: AppContainer = request.app.state.container
    entries = container.goal_service.list_workouts(user_id, log_date)
    return {"workouts": [entry.to_record() for entry in entries]}


@router.get("/exercises")
async def list_exercises(user_id: UUID, request: Request) -> dict[str, object]:
    """Return previously logged exercise names for autocomplete."""
    container: AppContainer = request.app.state.container
    return {"exercises": container.goal_service.list_exercise_names(user_id)}


@router.post("/nutrition/{log_date}", status_code=status.HTTP_201_CREATED)
async def add_nutrition(
    user_id: UUID, log_date: date, payload: NutritionPayload, request: Request
) -> dict[str, object]:
    """Append a nutrition entry to a date and re-check this week's badge."""
    container: AppContainer = request.app.state.container
    entry = container.goal_service.add_nutrition(
        user_id,
        log_date,
        description=payload.description,
        protein=payload.protein,
        calories=payload.calories,
    )
    badges = _check_badges(container, user_id)
    return {"entry": entry.to_record(), "badges": _badges_body(badges)}


@router.get("/nutrition/{log_date}")
async def list_nutrition(
    user_id: UUID, log_date: date, request: Request
) -> dict[str, object]:
    """Return nutrition entries logged on a date."""
    container: AppContainer = request.app.state.container
    entries = container.goal_service.list_nutrition(user_id, log_date)
    return {"entries": [entry.to_record() for entry in entries]}


@router.get("/goals")
async def get_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's weekly goals."""
    container: AppContainer = request.app.state.container
    return container.goal_service.get_goals(user_id).to_record()


@router.put("/goals")
async def set_goals(
    user_id: UUID, payload: WeeklyGoalsPayload, request: Request
) -> dict[str, object]:
    """Replace the user's weekly goals and re-check this week's badge."""
    container: AppContainer = request.app.state.container
    goals = container.goal_service.set_goals(
        user_id,
        WeeklyGoals(
            workouts=payload.workouts,
            total_reps=payload.total_reps,
            protein=payload.protein,
            calories=payload.calories,
        ),
    )
    _check_badges(container, user_id)
    return goals.to_record()


@router.get("/goals/progress")
async def goal_progress(user_id: UUID, request: Request) -> dict[str, object]:
    """Return this week's goal progress and the current streak."""
    container: AppContainer = request.app.state.container
    today = container.user_settings_service.today(user_id)
    return _goal_status_body(container.goal_service.get_status(user_id, today))


@router.get("/badges")
async def list_badges(user_id: UUID, request: Request) -> dict[str, object]:
    """Return earned badges."""
    container: AppContainer = request.app.state.container
    return {"badges": _badges_body(container.badge_service.list_badges(user_id))}


@router.post("/badges/check")
async def check_badges(user_id: UUID, request: Request) -> dict[str, object]:
    """Award this week's badge if the weekly goals are complete."""
    container: AppContainer = request.app.state.container
    return {"badges": _badges_body(_check_badges(container, user_id))}


@router.get("/settings")
async def get_settings(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's scoring defaults."""
    container: AppContainer = request.app.state.container
    return _profile_body(container.user_settings_service.get_profile(user_id))


@router.put("/settings")
async def save_settings(
    user_id: UUID, payload: UserSettingsPayload, request: Request
) -> dict[str, object]:
    """Replace the user's scoring defaults."""
    if not is_valid_timezone(payload.timezone):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Unknown timezone",
        )
    container: AppContainer = request.app.state.container
    profile = container.user_settings_service.save_profile(
        user_id,
        UserProfile(
            maintenance=payload.maintenance,
            goal=payload.goal,
            timezone=payload.timezone,
        ),
    )
    return _profile_body(profile)


def _check_badges(container: AppContainer, user_id: UUID) -> list[Badge]:
    now = container.user_settings_service.now(user_id)
    return container.badge_service.check_and_award(user_id, now)


def _daily_log_body(log: DailyLog) -> dict[str, object]:
    body: dict[str, object] = {"date": log.log_date.isoformat(), **log.to_record()}
    if log.score_data:
        body["grade"] = score_grade(log.score_data.score)
        body["color"] = score_color(log.score_data.score)
    return body


def _badges_body(badges: list[Badge]) -> list[dict[str, object]]:
    return [
        {
            **badge.to_record(),
            "levelName": badge.level.display_name,
            "icon": badge.level.icon,
            "color": badge.level.color,
        }
        for badge in badges
    ]


def _goal_status_body(goal_status: GoalStatus) -> dict[str, object]:
    return {
        "week": goal_status.week.to_record(),
        "goals": goal_status.goals.to_record(),
        "progress": goal_status.progress.to_record(),
        "complete": goal_status.complete,
        "percentages": goal_status.percentages,
        "consecutiveWeeks": goal_status.consecutive_weeks,
    }


def _profile_body(profile: UserProfile) -> dict[str, object]:
    return {
        "maintenance": profile.maintenance,
        "goal": profile.goal.value,
        "timezone": profile.timezone,
    }
