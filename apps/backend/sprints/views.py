import logging

from django.http import HttpResponseRedirect
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.http import require_GET, require_http_methods
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .forms import SprintPlanForm
from .serializers import SprintPlanSerializer
from .services import (
    NO_DATA_MESSAGE,
    build_sprint_plan,
    has_plan_input,
    plan_intro,
    plan_query_string,
    plan_request_from_params,
    week_cards,
)

logger = logging.getLogger(__name__)


def _build(params):
    plan_request = plan_request_from_params(params)
    plan = build_sprint_plan(plan_request)
    logger.debug(
        "Built sprint plan level=%r surface=%r injury=%r days=%r",
        plan_request.level,
        plan_request.surface,
        plan_request.injury,
        plan_request.days,
    )
    return plan_request, plan


@require_http_methods(["GET", "POST"])
def sprint_form(request):
    if request.method == "POST":
        return HttpResponseRedirect(f"{reverse('sprints:plan')}?{plan_query_string(request.POST)}")
    return render(request, "sprints/form.html", {"form": SprintPlanForm()})


@require_GET
def sprint_plan(request):
    if not has_plan_input(request.GET):
        return render(request, "sprints/plan.html", {"message": NO_DATA_MESSAGE})
    plan_request, plan = _build(request.GET)
    context = {
        "intro": plan_intro(plan_request),
        "cards": week_cards(plan),
    }
    return render(request, "sprints/plan.html", context)


@api_view(["GET"])
@permission_classes([AllowAny])
def health(_):
    return Response({"status": "ok"})


@api_view(["GET", "POST"])
@permission_classes([AllowAny])
def plan_api(request):
    params = request.query_params if request.method == "GET" else request.data
    if not hasattr(params, "get"):
        return Response(
            {"detail": "Expected an object with age, level, days, surface and injury."},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if not has_plan_input(params):
        return Response({"detail": NO_DATA_MESSAGE}, status=status.HTTP_400_BAD_REQUEST)
    plan_request, plan = _build(params)
    payload = {"request": plan_request, "intro": plan_intro(plan_request), "weeks": plan}
    return Response(SprintPlanSerializer(payload).data)
