import math

from rest_framework import serializers


def _finite_or_none(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


class PlanRequestSerializer(serializers.Serializer):
    age = serializers.SerializerMethodField()
    level = serializers.CharField()
    days = serializers.SerializerMethodField()
    surface = serializers.CharField()
    injury = serializers.CharField()

    def get_age(self, obj):
        return _finite_or_none(obj.age)

    def get_days(self, obj):
        return _finite_or_none(obj.days)


class WeekPlanSerializer(serializers.Serializer):
    week = serializers.IntegerField()
    sessions_per_week = serializers.SerializerMethodField()
    reps = serializers.IntegerField()
    rpe = serializers.CharField()
    rest_seconds = serializers.IntegerField()
    focus = serializers.CharField()
    notes = serializers.CharField()

    def get_sessions_per_week(self, obj):
        return _finite_or_none(obj.sessions_per_week)


class SprintPlanSerializer(serializers.Serializer):
    request = PlanRequestSerializer()
    intro = serializers.CharField()
    weeks = WeekPlanSerializer(many=True)
