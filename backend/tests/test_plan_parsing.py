import json
import unittest

from runai.services.plan_service import PlanGenerationError, parse_generated_plan
from db_helpers import sample_plan, sample_plan_json


class TestParseGeneratedPlan(unittest.TestCase):

    def assertRejected(self, content):
        with self.assertRaises(PlanGenerationError) as ctx:
            parse_generated_plan(content)
        self.assertEqual(str(ctx.exception), "Invalid AI response format")

    def test_valid_plan(self):
        plan = parse_generated_plan(sample_plan_json())
        self.assertEqual(plan.name, "Half Marathon Build")
        self.assertEqual(plan.difficulty_level, "intermediate")
        self.assertEqual(len(plan.weeks), 4)
        self.assertEqual(len(plan.weeks[0].workouts), 4)
        self.assertIsNone(plan.weeks[0].workouts[0].notes)

    def test_not_json(self):
        self.assertRejected("Here is your plan: week 1, run a lot.")

    def test_truncated_json(self):
        self.assertRejected(sample_plan_json()[:-20])

    def test_wrong_week_count(self):
        self.assertRejected(sample_plan_json(weeks=3))

    def test_week_numbers_must_be_sequential(self):
        data = sample_plan()
        data["weeks"][2]["week"] = 5
        self.assertRejected(json.dumps(data))

    def test_day_out_of_range(self):
        self.assertRejected(sample_plan_json(days=(0, 3)))
        self.assertRejected(sample_plan_json(days=(1, 8)))

    def test_effort_out_of_range(self):
        data = sample_plan()
        data["weeks"][1]["workouts"][0]["effort_level"] = 11
        self.assertRejected(json.dumps(data))

    def test_unknown_workout_type(self):
        data = sample_plan()
        data["weeks"][0]["workouts"][1]["workout_type"] = "fartlek"
        self.assertRejected(json.dumps(data))

    def test_unknown_difficulty(self):
        self.assertRejected(sample_plan_json(difficulty_level="elite"))

    def test_fractional_duration_is_accepted(self):
        data = sample_plan()
        data["weeks"][0]["workouts"][0]["planned_duration_minutes"] = 32.5

        plan = parse_generated_plan(json.dumps(data))

        self.assertEqual(plan.weeks[0].workouts[0].planned_duration_minutes, 32.5)

    def test_notes_longer_than_column(self):
        data = sample_plan()
        data["weeks"][0]["workouts"][1]["notes"] = "x" * 800
        self.assertRejected(json.dumps(data))

    def test_notes_at_column_limit(self):
        data = sample_plan()
        data["weeks"][0]["workouts"][1]["notes"] = "x" * 500
        plan = parse_generated_plan(json.dumps(data))
        self.assertEqual(len(plan.weeks[0].workouts[1].notes), 500)

    def test_focus_too_long_for_notes_fallback(self):
        data = sample_plan()
        data["weeks"][3]["focus"] = "f" * 481
        self.assertRejected(json.dumps(data))

    def test_missing_optional_fields(self):
        data = sample_plan()
        workout = data["weeks"][0]["workouts"][0]
        del workout["planned_distance_km"]
        del workout["planned_duration_minutes"]
        del workout["notes"]
        del data["description"]

        plan = parse_generated_plan(json.dumps(data))

        self.assertIsNone(plan.description)
        self.assertIsNone(plan.weeks[0].workouts[0].planned_distance_km)


if __name__ == '__main__':
    unittest.main()
