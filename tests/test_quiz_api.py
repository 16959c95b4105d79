"""Tests for quiz API endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.core.quiz_data import FEEDBACK_TIERS, QUIZ_ITEMS
from app.core.quiz_errors import (
    AssessmentStoreError,
    CatalogConfigurationError,
    InvalidQuizInputError,
)
from app.core.schemas_quiz import FeedbackThreshold
from app.db.quiz_assessments import get_assessment_store
from app.main import app

client = TestClient(app)


def _body(deployed: bool = True, **overrides: bool) -> dict:
    return {
        "responses": [
            {"itemId": item.id, "deployed": overrides.get(item.id, deployed)}
            for item in QUIZ_ITEMS
        ]
    }


class TestQuizItemsEndpoint:
    def test_returns_full_catalog(self):
        response = client.get("/api/quiz/items")

        assert response.status_code == 200
        items = response.json()["items"]
        assert len(items) == 29
        assert [i["id"] for i in items] == [item.id for item in QUIZ_ITEMS]

    def test_items_use_camel_case(self):
        item = client.get("/api/quiz/items").json()["items"][0]

        assert item["id"] == "cca1"
        assert item["category"] == "Customer-Centric Approach"
        assert item["weightedPoints"] == 4
        assert {"title", "description", "advice"} <= set(item)


class TestSubmitAssessmentEndpoint:
    def test_all_deployed(self):
        response = client.post("/api/quiz/assess", json=_body(True))

        assert response.status_code == 200
        assessment = response.json()["assessment"]
        assert assessment["id"]
        assert assessment["completedAt"]
        assert assessment["responses"][0] == {"itemId": "cca1", "deployed": True}

        result = assessment["result"]
        assert result["overallPercentage"] == 100
        assert result["totalPossible"] == 100
        assert result["recommendations"] == list(
            FEEDBACK_TIERS[FeedbackThreshold.EXCEPTIONAL].recommendations
        )
        assert len(result["categoryScores"]) == 8
        assert result["categoryScores"][0]["isUnderperforming"] is False

    def test_stores_each_submission(self):
        first = client.post("/api/quiz/assess", json=_body(False)).json()["assessment"]
        second = client.post("/api/quiz/assess", json=_body(False)).json()["assessment"]

        assert first["id"] != second["id"]
        assert get_assessment_store().count() == 2

    def test_weak_categories_drive_recommendations(self):
        overrides = {item.id: False for item in QUIZ_ITEMS if item.id.startswith("rss")}
        response = client.post("/api/quiz/assess", json=_body(True, **overrides))

        result = response.json()["assessment"]["result"]
        referrals = next(
            c for c in result["categoryScores"] if c["category"] == "Referrals & Social Sharing"
        )
        assert referrals["percentage"] == 0
        assert referrals["isUnderperforming"] is True
        assert result["recommendations"] == [referrals["recommendations"][0]]

    def test_unknown_item_id_is_ignored(self):
        body = _body(True)
        body["responses"].append({"itemId": "not-a-question", "deployed": False})

        response = client.post("/api/quiz/assess", json=body)

        assert response.status_code == 200
        assert response.json()["assessment"]["result"]["overallPercentage"] == 100

    def test_partial_submission_counts_omitted_as_not_deployed(self):
        body = {"responses": [{"itemId": "cca1", "deployed": True}]}

        response = client.post("/api/quiz/assess", json=body)

        assert response.status_code == 200
        assert response.json()["assessment"]["result"]["overallPercentage"] == 4

    def test_accepts_snake_case_fields(self):
        body = {"responses": [{"item_id": "cca1", "deployed": True}]}

        response = client.post("/api/quiz/assess", json=body)

        assert response.status_code == 200


class TestSubmitAssessmentErrors:
    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"responses": None},
            {"responses": "yes"},
            {"responses": [{"itemId": "cca1"}]},
            {"responses": [{"itemId": "cca1", "deployed": "yes"}]},
            {"responses": [{"itemId": 5, "deployed": True}]},
        ],
    )
    def test_malformed_body_is_400(self, body):
        response = client.post("/api/quiz/assess", json=body)

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid request payload"
        assert data["details"]
        assert get_assessment_store().count() == 0

    def test_invalid_json_is_400(self):
        response = client.post(
            "/api/quiz/assess",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_invalid_input_from_scorer_is_400(self):
        with patch("app.api.quiz.score_quiz", side_effect=InvalidQuizInputError("Quiz catalog is empty")):
            response = client.post("/api/quiz/assess", json=_body())

        assert response.status_code == 400
        assert response.json()["details"] == ["Quiz catalog is empty"]

    def test_catalog_misconfiguration_is_500(self):
        with patch(
            "app.api.quiz.score_quiz",
            side_effect=CatalogConfigurationError("Category has no possible points"),
        ):
            response = client.post("/api/quiz/assess", json=_body())

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process assessment"}

    def test_storage_failure_is_500(self):
        with patch(
            "app.api.quiz.create_quiz_assessment",
            side_effect=AssessmentStoreError("collision"),
        ):
            response = client.post("/api/quiz/assess", json=_body())

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process assessment"}


class TestReportEndpoint:
    def test_renders_downloadable_report(self):
        result = client.post("/api/quiz/assess", json=_body(True)).json()["assessment"]["result"]

        response = client.post("/api/quiz/report", json=result)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        disposition = response.headers["content-disposition"]
        assert disposition.startswith('attachment; filename="loyalty-assessment-report-')
        assert disposition.endswith('.txt"')
        assert "Overall Score: 100%" in response.text
        assert "TOP RECOMMENDATIONS:" in response.text

    def test_malformed_result_is_400(self):
        response = client.post("/api/quiz/report", json={"overallPercentage": 250})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request payload"

    def test_render_failure_is_500(self):
        result = client.post("/api/quiz/assess", json=_body(True)).json()["assessment"]["result"]

        with patch("app.api.quiz.render_text_report", side_effect=RuntimeError("boom")):
            response = client.post("/api/quiz/report", json=result)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate report"}
