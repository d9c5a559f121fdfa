from __future__ import annotations

from dataclasses import dataclass

from sprints.schemas import Injury, Level, PlanRequest, Surface, WeekPlan

PLAN_WEEKS = 6
MIN_REST_SECONDS = 45
REST_STEP_SECONDS = 5
RPE_STEP = 0.5
MASTERS_AGE = 50


@dataclass(frozen=True)
class LevelBase:
    reps: int
    rpe: float
    rest: int


@dataclass(frozen=True)
class InjuryAdjustment:
    note: str
    rest_delta: int = 0
    rpe_delta: float = 0.0


LEVEL_BASES: dict[str, LevelBase] = {
    Level.ADVANCED.value: LevelBase(reps=10, rpe=8, rest=60),
    Level.INTERMEDIATE.value: LevelBase(reps=8, rpe=7, rest=75),
    Level.BEGINNER.value: LevelBase(reps=6, rpe=6, rest=90),
}
DEFAULT_LEVEL_BASE = LEVEL_BASES[Level.BEGINNER.value]

INJURY_ADJUSTMENTS: dict[str, InjuryAdjustment] = {
    Injury.KNEES.value: InjuryAdjustment(
        note="Stay on a flat, predictable surface. Focus on soft landings and avoid heavy braking.",
        rest_delta=15,
    ),
    Injury.HAMSTRINGS.value: InjuryAdjustment(
        note=(
            "Emphasize a long warm-up and keep the first 2 weeks at controlled intensity. "
            "Stop immediately at any pulling sensation."
        ),
        rpe_delta=-0.5,
    ),
    Injury.LOWER_BACK.value: InjuryAdjustment(
        note="Stay tall while sprinting, brace your core, and avoid excessive forward lean.",
    ),
}
NO_INJURY_ADJUSTMENT = InjuryAdjustment(note="")

SURFACE_DESCRIPTIONS: dict[str, str] = {
    Surface.TRACK.value: "Surface: track. Use the outer lanes when the inside lanes are busy and sprint in the direction of traffic.",
    Surface.TREADMILL.value: "Surface: treadmill. Straddle the belt between sprints and let the speed ramp up before stepping on.",
    Surface.FIELD.value: "Surface: field. Walk the stretch first and check the grass for holes and wet patches.",
    Surface.PAVEMENT.value: "Surface: pavement. Pick a flat, traffic-free stretch and keep the sprints to smooth, even ground.",
}
GENERIC_SURFACE_DESCRIPTION = "Surface: pick a flat, even stretch with good grip and no obstacles."
BUILD_UP_REMINDER = (
    "Choose shoes appropriate for that surface and do at least 2 easy build-up runs before the first sprint."
)

WARM_UP_NOTE = "Warm up thoroughly with 5–10 minutes of easy movement and 3–4 progressive build-up runs."
COOL_DOWN_NOTE = "Finish each session with light walking and stretching."

# (last week of band, focus label)
FOCUS_BANDS: tuple[tuple[int, str], ...] = (
    (2, "Technique & acceleration"),
    (4, "Speed & consistency"),
    (PLAN_WEEKS, "Peak speed & confidence"),
)


def level_base(level: str) -> LevelBase:
    return LEVEL_BASES.get(level, DEFAULT_LEVEL_BASE)


def injury_adjustment(injury: str) -> InjuryAdjustment:
    return INJURY_ADJUSTMENTS.get(injury, NO_INJURY_ADJUSTMENT)


def surface_note(surface: str) -> str:
    description = SURFACE_DESCRIPTIONS.get(surface, GENERIC_SURFACE_DESCRIPTION)
    return f"{description} {BUILD_UP_REMINDER}"


def focus_for_week(week: int) -> str:
    for last_week, label in FOCUS_BANDS:
        if week <= last_week:
            return label
    return FOCUS_BANDS[-1][1]


def week_notes(surface_text: str, injury_note: str) -> str:
    parts = [WARM_UP_NOTE, surface_text]
    if injury_note:
        parts.append(injury_note)
    parts.append(COOL_DOWN_NOTE)
    return " ".join(parts)


def build_sprint_plan(request: PlanRequest) -> list[WeekPlan]:
    """Build the 6-week progression for one athlete.

    Base reps, RPE and rest come from the level table, then age and injury
    adjust them. Every week after that is derived from the week number alone:
    one extra rep every two weeks, +0.5 RPE and 5 s less rest per week, with
    rest never below 45 s. Unknown level, surface or injury values use the
    defaults instead of failing.
    """
    base = level_base(request.level)
    base_reps, base_rpe, base_rest = base.reps, base.rpe, base.rest

    # NaN ages compare False here, so they get no adjustment.
    if request.age >= MASTERS_AGE:
        base_rest += 15
        base_rpe -= 0.5

    injury = injury_adjustment(request.injury)
    base_rest += injury.rest_delta
    base_rpe += injury.rpe_delta

    notes = week_notes(surface_note(request.surface), injury.note)

    plan = []
    for week in range(1, PLAN_WEEKS + 1):
        offset = week - 1
        plan.append(
            WeekPlan(
                week=week,
                sessions_per_week=request.days,
                reps=base_reps + offset // 2,
                rpe=f"{base_rpe + offset * RPE_STEP:.1f}",
                rest_seconds=max(MIN_REST_SECONDS, base_rest - offset * REST_STEP_SECONDS),
                focus=focus_for_week(week),
                notes=notes,
            )
        )
    return plan
