"""Presentation-neutral rendering of a sprint plan.

Both the HTML plan page and the ``sprint_plan`` management command paint the
same week list: an intro sentence, then for each week a title, a
reps/RPE/rest summary and the notes, in week order.
"""
from __future__ import annotations

import math

from pydantic import BaseModel

from sprints.schemas import PlanRequest, WeekPlan
from sprints.services.sprint_plan import PLAN_WEEKS

NO_DATA_MESSAGE = "No data found. Please go back and fill out the form."
SPRINT_DISTANCE = "100-yard"


class WeekCard(BaseModel):
    week: int
    title: str
    summary: str
    notes: str


def format_number(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def plan_intro(request: PlanRequest) -> str:
    return (
        f"Here is your {PLAN_WEEKS}-week, {SPRINT_DISTANCE} sprint program "
        f"({format_number(request.days)} day(s) per week, {request.level} level on {request.surface})."
    )


def week_title(week: WeekPlan) -> str:
    return f"Week {week.week} — {week.focus}"


def week_summary(week: WeekPlan) -> str:
    return (
        f"{format_number(week.sessions_per_week)} session(s) per week. "
        f"Each session: {week.reps} x {SPRINT_DISTANCE} sprints at RPE {week.rpe}, "
        f"{week.rest_seconds} seconds rest between sprints."
    )


def week_cards(plan: list[WeekPlan]) -> list[WeekCard]:
    return [
        WeekCard(week=week.week, title=week_title(week), summary=week_summary(week), notes=week.notes)
        for week in sorted(plan, key=lambda item: item.week)
    ]


def render_plan_text(request: PlanRequest, plan: list[WeekPlan]) -> str:
    blocks = [plan_intro(request)]
    for card in week_cards(plan):
        blocks.append("\n".join([card.title, card.summary, card.notes]))
    return "\n\n".join(blocks) + "\n"
