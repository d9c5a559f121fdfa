import json

from django.core.management.base import BaseCommand

from sprints.serializers import SprintPlanSerializer
from sprints.services import (
    NO_DATA_MESSAGE,
    build_sprint_plan,
    has_plan_input,
    plan_intro,
    plan_request_from_params,
    render_plan_text,
)


class Command(BaseCommand):
    help = "Print a 6-week sprint plan for the given athlete inputs."

    def add_arguments(self, parser):
        parser.add_argument("--age")
        parser.add_argument("--level", default="beginner")
        parser.add_argument("--days", default="3")
        parser.add_argument("--surface", default="track")
        parser.add_argument("--injury", default="none")
        parser.add_argument("--format", choices=["text", "json"], default="text")

    def handle(self, *args, **options):
        params = {
            key: options[key]
            for key in ("age", "level", "days", "surface", "injury")
            if options.get(key) is not None
        }
        if not has_plan_input(params):
            self.stdout.write(NO_DATA_MESSAGE)
            return
        plan_request = plan_request_from_params(params)
        plan = build_sprint_plan(plan_request)
        if options["format"] == "json":
            payload = {"request": plan_request, "intro": plan_intro(plan_request), "weeks": plan}
            self.stdout.write(json.dumps(SprintPlanSerializer(payload).data, indent=2))
            return
        self.stdout.write(render_plan_text(plan_request, plan), ending="")
