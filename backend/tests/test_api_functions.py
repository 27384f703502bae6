import unittest
from unittest.mock import patch

from runai.models.training_plan import TrainingPlan
from runai.models.workout import Workout
from runai.services.llm_service import LLMServiceError
from db_helpers import ApiTestCase, sample_plan_json

CALL_LLM = "runai.services.llm_service.call_llm"
AI_COACH = "/functions/v1/ai-coach"
GENERATE_PLAN = "/functions/v1/generate-training-plan"


class TestAiCoachEndpoint(ApiTestCase):

    @patch(CALL_LLM)
    def test_reply(self, mock_llm):
        mock_llm.return_value = "Keep tomorrow's run easy and hydrate well."

        res = self.client.post(AI_COACH, json={
            "message": "My legs feel heavy after intervals.",
            "coachStyle": "tough",
            "userProfile": {"running_experience": "advanced", "race_goal": "marathon"},
            "recentWorkouts": [{"workout_type": "intervals", "planned_distance_km": 8,
                                "planned_duration_minutes": 45, "effort_level": 9}],
        })

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"response": "Keep tomorrow's run easy and hydrate well."})

        kwargs = mock_llm.call_args.kwargs
        self.assertEqual(kwargs["user_prompt"], "My legs feel heavy after intervals.")
        self.assertIn("Be direct, no-nonsense, and demanding.", kwargs["system_prompt"])
        self.assertIn("- Race goal: marathon", kwargs["system_prompt"])
        self.assertIn("1. intervals - 8km in 45 minutes (Effort: 9/10)", kwargs["system_prompt"])
        self.assertFalse(kwargs.get("json_mode", False))

    @patch(CALL_LLM)
    def test_minimal_body(self, mock_llm):
        mock_llm.return_value = "Happy to help!"

        res = self.client.post(AI_COACH, json={"message": "hi"})

        self.assertEqual(res.status_code, 200)
        self.assertNotIn("Runner Profile:", mock_llm.call_args.kwargs["system_prompt"])

    @patch(CALL_LLM)
    def test_llm_failure_returns_error_body(self, mock_llm):
        mock_llm.side_effect = LLMServiceError("OpenAI API error: 500", status_code=500)

        res = self.client.post(AI_COACH, json={"message": "hi"})

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"error": "OpenAI API error: 500"})

    @patch(CALL_LLM)
    def test_nothing_is_persisted(self, mock_llm):
        mock_llm.return_value = "Rest day."
        self.client.post(AI_COACH, json={"message": "hi"})

        self.assertEqual(self.db.query(Workout).count(), 0)
        self.assertEqual(self.db.query(TrainingPlan).count(), 0)

    def test_missing_message_returns_error_body(self):
        res = self.client.post(AI_COACH, json={"coachStyle": "tough"})

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"error": "Invalid request body"})

    def test_non_json_body_returns_error_body(self):
        res = self.client.post(AI_COACH, content="not json", headers={"Content-Type": "application/json"})

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"error": "Invalid request body"})

    @patch(CALL_LLM)
    def test_fractional_effort_is_accepted(self, mock_llm):
        mock_llm.return_value = "Nice work."

        res = self.client.post(AI_COACH, json={
            "message": "How was my week?",
            "recentWorkouts": [{"workout_type": "tempo", "planned_distance_km": 6,
                                "planned_duration_minutes": 30, "effort_level": 6.5}],
        })

        self.assertEqual(res.status_code, 200)
        self.assertIn("(Effort: 6.5/10)", mock_llm.call_args.kwargs["system_prompt"])

    def test_other_routes_keep_default_validation_errors(self):
        res = self.client.post("/users/signup", json={"email": "bad"})
        self.assertEqual(res.status_code, 422)
        self.assertIn("detail", res.json())

    def test_plain_options_request(self):
        res = self.client.options(AI_COACH)
        self.assertEqual(res.status_code, 200)

    def test_cors_preflight(self):
        res = self.client.options(AI_COACH, headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization, content-type",
        })
        self.assertEqual(res.status_code, 200)
        self.assertIn(res.headers["access-control-allow-origin"], ("*", "https://app.example.com"))

    @patch(CALL_LLM)
    def test_cors_header_on_response(self, mock_llm):
        mock_llm.return_value = "ok"
        res = self.client.post(AI_COACH, json={"message": "hi"}, headers={"Origin": "https://app.example.com"})
        self.assertEqual(res.headers["access-control-allow-origin"], "*")


class TestGenerateTrainingPlanEndpoint(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.user = self.make_user(running_experience="beginner", race_goal="5k", weekly_mileage_goal=3)

    def test_missing_authorization_header(self):
        res = self.client.post(GENERATE_PLAN)
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"success": False, "error": "No authorization header"})

    def test_invalid_token(self):
        res = self.client.post(GENERATE_PLAN, headers={"Authorization": "Bearer not-a-token"})
        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"success": False, "error": "User not authenticated"})

    @patch(CALL_LLM)
    def test_success(self, mock_llm):
        mock_llm.return_value = sample_plan_json(difficulty_level="beginner")

        res = self.client.post(GENERATE_PLAN, headers=self.auth_headers(self.user))

        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["workoutsCreated"], 16)
        self.assertEqual(body["plan"]["goal"], "5k")
        self.assertEqual(body["plan"]["difficulty_level"], "beginner")
        self.assertTrue(body["plan"]["is_active"])
        self.assertEqual(len(body["planData"]["weeks"]), 4)

        res = self.client.get("/training-plans/active", headers=self.auth_headers(self.user))
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["plan"]["id"], body["plan"]["id"])
        self.assertEqual(res.json()["current_week"], 1)
        self.assertEqual(len(res.json()["workouts"]), 16)

    @patch(CALL_LLM)
    def test_invalid_ai_output(self, mock_llm):
        mock_llm.return_value = "{\"name\": \"Plan\"}"

        res = self.client.post(GENERATE_PLAN, headers=self.auth_headers(self.user))

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"success": False, "error": "Invalid AI response format"})
        self.assertEqual(self.db.query(TrainingPlan).count(), 0)

    @patch(CALL_LLM)
    def test_unexpected_error_is_generic(self, mock_llm):
        mock_llm.side_effect = RuntimeError("boom")

        res = self.client.post(GENERATE_PLAN, headers=self.auth_headers(self.user))

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json(), {"success": False, "error": "Internal server error"})

    def test_options(self):
        res = self.client.options(GENERATE_PLAN)
        self.assertEqual(res.status_code, 200)


if __name__ == '__main__':
    unittest.main()
