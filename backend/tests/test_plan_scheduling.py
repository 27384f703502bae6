import unittest
from datetime import date, timedelta

from runai.schemas.training_plan import GeneratedPlan
from runai.services.plan_service import build_workout_rows, plan_end_date, workout_date
from runai.services.dashboard_service import current_plan_week, week_bounds
from db_helpers import sample_plan


class TestWorkoutDates(unittest.TestCase):

    def setUp(self):
        self.start = date(2026, 10, 19)

    def test_first_day_is_start_date(self):
        self.assertEqual(workout_date(self.start, 0, 1), self.start)

    def test_day_seven_of_first_week(self):
        self.assertEqual(workout_date(self.start, 0, 7), self.start + timedelta(days=6))

    def test_second_week_day_three(self):
        self.assertEqual(workout_date(self.start, 1, 3), self.start + timedelta(days=9))

    def test_last_day_of_plan(self):
        self.assertEqual(workout_date(self.start, 3, 7), self.start + timedelta(days=27))

    def test_end_date_is_28_days_after_start(self):
        self.assertEqual(plan_end_date(self.start), date(2026, 11, 16))

    def test_rows_span_first_to_last_day(self):
        plan = GeneratedPlan.model_validate(sample_plan())
        rows = build_workout_rows(plan, user_id=1, plan_id=7, start_date=self.start)

        self.assertEqual(len(rows), 16)
        dates = [row.planned_date for row in rows]
        self.assertEqual(min(dates), self.start)
        self.assertEqual(max(dates), self.start + timedelta(days=27))
        self.assertTrue(all(row.training_plan_id == 7 and row.user_id == 1 for row in rows))

    def test_missing_notes_fall_back_to_week_focus(self):
        plan = GeneratedPlan.model_validate(sample_plan())
        rows = build_workout_rows(plan, user_id=1, plan_id=7, start_date=self.start)

        self.assertEqual(rows[0].notes, "Week 1: Focus 1")
        self.assertEqual(rows[1].notes, "Day 3 notes")
        self.assertEqual(rows[4].notes, "Week 2: Focus 2")

    def test_fractional_duration_is_rounded_to_whole_minutes(self):
        data = sample_plan()
        data["weeks"][0]["workouts"][0]["planned_duration_minutes"] = 32.5
        data["weeks"][0]["workouts"][1]["planned_duration_minutes"] = 44.6
        plan = GeneratedPlan.model_validate(data)

        rows = build_workout_rows(plan, user_id=1, plan_id=7, start_date=self.start)

        self.assertEqual(rows[0].planned_duration_minutes, 32)
        self.assertEqual(rows[1].planned_duration_minutes, 45)
        self.assertIsInstance(rows[1].planned_duration_minutes, int)

    def test_longest_focus_fallback_fits_notes_column(self):
        data = sample_plan()
        data["weeks"][3]["focus"] = "f" * 480
        plan = GeneratedPlan.model_validate(data)

        rows = build_workout_rows(plan, user_id=1, plan_id=7, start_date=self.start)

        self.assertLessEqual(len(rows[12].notes), 500)
        self.assertTrue(rows[12].notes.startswith("Week 4: "))

    def test_planned_values_are_copied(self):
        plan = GeneratedPlan.model_validate(sample_plan())
        rows = build_workout_rows(plan, user_id=1, plan_id=7, start_date=self.start)

        long_run = rows[7]
        self.assertEqual(long_run.workout_type, "long_run")
        self.assertEqual(long_run.planned_date, self.start + timedelta(days=13))
        self.assertEqual(long_run.planned_distance_km, 6.0)
        self.assertEqual(long_run.planned_duration_minutes, 35)
        self.assertEqual(long_run.effort_level, 5)


class TestCalendarHelpers(unittest.TestCase):

    def test_week_bounds_run_sunday_to_saturday(self):
        # 2026-10-19 is a Monday
        start, end = week_bounds(date(2026, 10, 19))
        self.assertEqual(start, date(2026, 10, 18))
        self.assertEqual(end, date(2026, 10, 24))

    def test_week_bounds_on_sunday(self):
        start, end = week_bounds(date(2026, 10, 18))
        self.assertEqual(start, date(2026, 10, 18))
        self.assertEqual(end, date(2026, 10, 24))

    def test_week_bounds_on_saturday(self):
        start, end = week_bounds(date(2026, 10, 24))
        self.assertEqual(start, date(2026, 10, 18))

    def test_current_plan_week_is_clamped(self):
        start = date(2026, 10, 1)
        self.assertEqual(current_plan_week(start, date(2026, 9, 20)), 1)
        self.assertEqual(current_plan_week(start, start), 1)
        self.assertEqual(current_plan_week(start, date(2026, 10, 8)), 2)
        self.assertEqual(current_plan_week(start, date(2026, 10, 28)), 4)
        self.assertEqual(current_plan_week(start, date(2026, 12, 1)), 4)


if __name__ == '__main__':
    unittest.main()
