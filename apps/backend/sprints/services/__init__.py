from .plan_renderer import NO_DATA_MESSAGE, WeekCard, plan_intro, render_plan_text, week_cards
from .plan_request import collect_plan_params, has_plan_input, plan_query_string, plan_request_from_params
from .sprint_plan import build_sprint_plan

__all__ = [
    "NO_DATA_MESSAGE",
    "WeekCard",
    "build_sprint_plan",
    "collect_plan_params",
    "has_plan_input",
    "plan_intro",
    "plan_query_string",
    "plan_request_from_params",
    "render_plan_text",
    "week_cards",
]
