from django import forms

from .schemas import Injury, Level, Surface

LEVEL_CHOICES = [
    (Level.BEGINNER.value, "Beginner"),
    (Level.INTERMEDIATE.value, "Intermediate"),
    (Level.ADVANCED.value, "Advanced"),
]
SURFACE_CHOICES = [
    (Surface.TRACK.value, "Track"),
    (Surface.TREADMILL.value, "Treadmill"),
    (Surface.FIELD.value, "Grass field"),
    (Surface.PAVEMENT.value, "Pavement / road"),
    (Surface.OTHER.value, "Other"),
]
INJURY_CHOICES = [
    (Injury.NONE.value, "None"),
    (Injury.KNEES.value, "Knees"),
    (Injury.HAMSTRINGS.value, "Hamstrings"),
    (Injury.LOWER_BACK.value, "Lower back"),
    (Injury.OTHER.value, "Other"),
]
DAYS_CHOICES = [(str(n), str(n)) for n in range(1, 6)]


class SprintPlanForm(forms.Form):
    """Widgets for the input page. Submitted values are never validated here."""

    age = forms.IntegerField(min_value=10, max_value=100, initial=30)
    level = forms.ChoiceField(choices=LEVEL_CHOICES, initial=Level.BEGINNER.value, label="Training level")
    days = forms.ChoiceField(choices=DAYS_CHOICES, initial="3", label="Days per week")
    surface = forms.ChoiceField(choices=SURFACE_CHOICES, initial=Surface.TRACK.value)
    injury = forms.ChoiceField(choices=INJURY_CHOICES, initial=Injury.NONE.value, label="Injury history")
