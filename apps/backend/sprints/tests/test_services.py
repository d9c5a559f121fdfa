import itertools
import math

from django.http import QueryDict
from django.test import SimpleTestCase

from sprints.schemas import PlanRequest
from sprints.services.plan_renderer import format_number, plan_intro, render_plan_text, week_cards, week_summary, week_title
from sprints.services.plan_request import (
    coerce_number,
    collect_plan_params,
    has_plan_input,
    plan_query_string,
    plan_request_from_params,
)
from sprints.services.sprint_plan import (
    BUILD_UP_REMINDER,
    COOL_DOWN_NOTE,
    GENERIC_SURFACE_DESCRIPTION,
    INJURY_ADJUSTMENTS,
    SURFACE_DESCRIPTIONS,
    WARM_UP_NOTE,
    build_sprint_plan,
    focus_for_week,
    surface_note,
)


def _plan(**overrides):
    values = {'age': 30, 'level': 'beginner', 'days': 3, 'surface': 'track', 'injury': 'none'}
    values.update(overrides)
    return build_sprint_plan(PlanRequest(**values))


class SprintPlanExamplesTest(SimpleTestCase):
    def test_advanced_athlete(self):
        plan = _plan(level='advanced')
        first, last = plan[0], plan[-1]
        self.assertEqual((first.reps, first.rpe, first.rest_seconds), (10, '8.0', 60))
        self.assertEqual(first.focus, 'Technique & acceleration')
        self.assertEqual((last.reps, last.rpe, last.rest_seconds), (12, '10.5', 45))
        self.assertEqual(last.focus, 'Peak speed & confidence')

    def test_masters_beginner_with_knee_history(self):
        plan = _plan(age=55, injury='knees')
        self.assertEqual(plan[0].rest_seconds, 120)
        self.assertEqual(plan[0].rpe, '5.5')
        self.assertEqual([w.rest_seconds for w in plan], [120, 115, 110, 105, 100, 95])

    def test_age_fifty_is_adjusted(self):
        self.assertEqual(_plan(age=50)[0].rest_seconds, 105)
        self.assertEqual(_plan(age=49)[0].rest_seconds, 90)

    def test_hamstrings_lower_rpe(self):
        plan = _plan(level='intermediate', injury='hamstrings')
        self.assertEqual([w.rpe for w in plan], ['6.5', '7.0', '7.5', '8.0', '8.5', '9.0'])
        self.assertEqual(plan[0].rest_seconds, 75)

    def test_unknown_level_uses_beginner_values(self):
        plan = _plan(level='elite')
        self.assertEqual((plan[0].reps, plan[0].rpe, plan[0].rest_seconds), (6, '6.0', 90))

    def test_nan_age_has_no_adjustment(self):
        plan = _plan(age=math.nan)
        self.assertEqual(plan[0].rest_seconds, 90)
        self.assertEqual(plan[0].rpe, '6.0')

    def test_days_are_echoed(self):
        self.assertTrue(all(w.sessions_per_week == 4 for w in _plan(days=4)))


class SprintPlanPropertiesTest(SimpleTestCase):
    def test_progression_invariants(self):
        combos = itertools.product(
            ['beginner', 'intermediate', 'advanced', 'unknown'],
            [20, 50, 70],
            ['none', 'knees', 'hamstrings', 'lower-back', 'other'],
        )
        for level, age, injury in combos:
            with self.subTest(level=level, age=age, injury=injury):
                plan = _plan(level=level, age=age, injury=injury)
                self.assertEqual([w.week for w in plan], [1, 2, 3, 4, 5, 6])
                reps = [w.reps for w in plan]
                self.assertEqual(reps, [reps[0] + (i // 2) for i in range(6)])
                rest = [w.rest_seconds for w in plan]
                self.assertTrue(all(a >= b for a, b in zip(rest, rest[1:])))
                self.assertGreaterEqual(min(rest), 45)
                rpe = [float(w.rpe) for w in plan]
                self.assertEqual([b - a for a, b in zip(rpe, rpe[1:])], [0.5] * 5)
                self.assertTrue(all(len(w.rpe.split('.')[1]) == 1 for w in plan))

    def test_focus_bands(self):
        self.assertEqual(
            [focus_for_week(week) for week in range(1, 7)],
            ['Technique & acceleration'] * 2 + ['Speed & consistency'] * 2 + ['Peak speed & confidence'] * 2,
        )

    def test_same_input_same_plan(self):
        request = PlanRequest(age=41, level='intermediate', days=2, surface='field', injury='lower-back')
        self.assertEqual(build_sprint_plan(request), build_sprint_plan(request))


class SprintPlanNotesTest(SimpleTestCase):
    def test_notes_without_injury(self):
        notes = _plan()[0].notes
        expected = f"{WARM_UP_NOTE} {SURFACE_DESCRIPTIONS['track']} {BUILD_UP_REMINDER} {COOL_DOWN_NOTE}"
        self.assertEqual(notes, expected)

    def test_injury_note_sits_before_cool_down(self):
        notes = _plan(injury='knees')[0].notes
        self.assertIn(f"{INJURY_ADJUSTMENTS['knees'].note} {COOL_DOWN_NOTE}", notes)
        self.assertTrue(notes.startswith(WARM_UP_NOTE))

    def test_other_injury_has_no_note(self):
        self.assertEqual(_plan(injury='other')[0].notes, _plan(injury='none')[0].notes)

    def test_unknown_surface_uses_generic_sentence(self):
        self.assertEqual(surface_note('sand'), f'{GENERIC_SURFACE_DESCRIPTION} {BUILD_UP_REMINDER}')
        self.assertEqual(surface_note('other'), surface_note(''))

    def test_table_entries_word_for_word(self):
        expected_surfaces = {
            'treadmill': 'Surface: treadmill. Straddle the belt between sprints and let the speed ramp up before stepping on.',
            'field': 'Surface: field. Walk the stretch first and check the grass for holes and wet patches.',
            'pavement': 'Surface: pavement. Pick a flat, traffic-free stretch and keep the sprints to smooth, even ground.',
        }
        for surface, description in expected_surfaces.items():
            with self.subTest(surface=surface):
                notes = _plan(surface=surface)[0].notes
                self.assertEqual(notes, f'{WARM_UP_NOTE} {description} {BUILD_UP_REMINDER} {COOL_DOWN_NOTE}')
        expected_injuries = {
            'hamstrings': (
                'Emphasize a long warm-up and keep the first 2 weeks at controlled intensity. '
                'Stop immediately at any pulling sensation.'
            ),
            'lower-back': 'Stay tall while sprinting, brace your core, and avoid excessive forward lean.',
        }
        for injury, note in expected_injuries.items():
            with self.subTest(injury=injury):
                notes = _plan(injury=injury)[0].notes
                self.assertTrue(notes.endswith(f' {note} {COOL_DOWN_NOTE}'))


class PlanRequestCoercionTest(SimpleTestCase):
    def test_coerce_number(self):
        self.assertEqual(coerce_number('30'), 30)
        self.assertIsInstance(coerce_number('30'), int)
        self.assertEqual(coerce_number(' 2.5 '), 2.5)
        self.assertEqual(coerce_number(''), 0)
        self.assertEqual(coerce_number(None), 0)
        self.assertTrue(math.isnan(coerce_number('thirty')))

    def test_coerce_number_follows_browser_literals(self):
        self.assertEqual(coerce_number('0x40'), 64)
        self.assertEqual(coerce_number('0b101'), 5)
        self.assertEqual(coerce_number('0o17'), 15)
        self.assertEqual(coerce_number('-1e2'), -100)
        self.assertEqual(coerce_number('.5'), 0.5)
        self.assertEqual(coerce_number('Infinity'), math.inf)
        for text in ('1_00', 'inf', 'nan', 'NaN', '-0x10', '0b12', '\u0665\u0660', '30 years'):
            with self.subTest(text=text):
                self.assertTrue(math.isnan(coerce_number(text)))

    def test_hex_age_gets_masters_adjustment(self):
        plan = build_sprint_plan(plan_request_from_params({'age': '0x40', 'level': 'beginner'}))
        self.assertEqual(plan[0].rest_seconds, 105)

    def test_repeated_keys_use_first_value(self):
        params = QueryDict('age=30&age=60&level=advanced&level=beginner&days=3&days=5')
        request = plan_request_from_params(params)
        self.assertEqual((request.age, request.level, request.days), (30, 'advanced', 3))
        self.assertEqual(collect_plan_params(params)['age'], '30')

    def test_request_from_params(self):
        request = plan_request_from_params({'age': '55', 'level': 'advanced', 'days': '4'})
        self.assertEqual(request.age, 55)
        self.assertEqual(request.days, 4)
        self.assertEqual(request.surface, '')
        self.assertEqual(request.injury, '')

    def test_has_plan_input_only_needs_age_key(self):
        self.assertTrue(has_plan_input({'age': ''}))
        self.assertFalse(has_plan_input({'level': 'advanced'}))

    def test_collect_plan_params(self):
        data = {'injury': 'knees', 'age': 40, 'extra': 'x', 'level': 'advanced'}
        self.assertEqual(
            collect_plan_params(data),
            {'age': '40', 'level': 'advanced', 'days': '', 'surface': '', 'injury': 'knees'},
        )
        self.assertEqual(plan_query_string(data), 'age=40&level=advanced&days=&surface=&injury=knees')


class PlanRendererTest(SimpleTestCase):
    def test_format_number(self):
        self.assertEqual(format_number(3), '3')
        self.assertEqual(format_number(3.0), '3')
        self.assertEqual(format_number(2.5), '2.5')
        self.assertEqual(format_number(math.nan), 'NaN')

    def test_week_strings(self):
        request = PlanRequest(age=30, level='advanced', days=3, surface='track', injury='none')
        week = build_sprint_plan(request)[0]
        self.assertEqual(
            plan_intro(request),
            'Here is your 6-week, 100-yard sprint program (3 day(s) per week, advanced level on track).',
        )
        self.assertEqual(week_title(week), 'Week 1 — Technique & acceleration')
        self.assertEqual(
            week_summary(week),
            '3 session(s) per week. Each session: 10 x 100-yard sprints at RPE 8.0, 60 seconds rest between sprints.',
        )

    def test_cards_follow_week_order(self):
        plan = _plan()
        cards = week_cards(list(reversed(plan)))
        self.assertEqual([c.week for c in cards], [1, 2, 3, 4, 5, 6])
        self.assertEqual(cards[2].notes, plan[2].notes)

    def test_render_plan_text(self):
        request = PlanRequest(age=30, level='beginner', days=2, surface='field', injury='none')
        text = render_plan_text(request, build_sprint_plan(request))
        self.assertTrue(text.startswith('Here is your 6-week'))
        self.assertEqual(text.count('Week '), 6)
        self.assertLess(text.index('Week 1 —'), text.index('Week 6 —'))
