"""
Unit tests for Pydantic schema validators and serialisation.

Verifies that request schemas reject invalid data and that view and
response schemas accept the backend's loose shapes.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from talent_client.resources.base import as_payload, build_query
from talent_client.schemas.application import (
    ApplicationJourney,
    CommentCreate,
    ScreeningSchedule,
    StageHistoryEntry,
)
from talent_client.schemas.envelope import ApiEnvelope


# ---------------------------------------------------------------------------
# CommentCreate
# ---------------------------------------------------------------------------
class TestCommentCreate:
    def test_valid_comment(self):
        comment = CommentCreate(text="Great portfolio", stage="interview")
        assert comment.text == "Great portfolio"
        assert comment.author is None

    def test_blank_text_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            CommentCreate(text="   ")
        errors = exc_info.value.errors()
        assert any(e["loc"] == ("text",) for e in errors)

    def test_missing_text_raises(self):
        with pytest.raises(ValidationError):
            CommentCreate(author="Kim")


# ---------------------------------------------------------------------------
# ScreeningSchedule
# ---------------------------------------------------------------------------
class TestScreeningSchedule:
    def test_accepts_camel_case_input(self):
        screening = ScreeningSchedule.model_validate(
            {"scheduledDate": "2024-02-10", "meetingLink": "https://meet.example.com/x"}
        )
        assert screening.scheduled_date == "2024-02-10"
        assert screening.meeting_link == "https://meet.example.com/x"
        assert screening.send_email is True

    def test_payload_drops_unset_fields(self):
        payload = as_payload(ScreeningSchedule(interviewer="Kim", send_email=False))
        assert payload == {"interviewer": "Kim", "sendEmail": False}


# ---------------------------------------------------------------------------
# Response shapes
# ---------------------------------------------------------------------------
class TestResponseSchemas:
    def test_envelope_keeps_extra_fields(self):
        envelope = ApiEnvelope.model_validate({"success": True, "data": [], "count": 4})
        assert envelope.success is True
        assert envelope.model_extra == {"count": 4}

    def test_envelope_defaults_to_failure(self):
        assert ApiEnvelope().success is False

    def test_stage_history_ignores_unknown_keys(self):
        entry = StageHistoryEntry.model_validate(
            {"stage": "interview", "movedBy": "Kim", "durationDays": 2, "_id": "h1"}
        )
        assert entry.moved_by == "Kim"
        assert entry.duration_days == 2

    def test_journey_tolerates_missing_sections(self):
        journey = ApplicationJourney.model_validate({"applicationId": "app-1"})
        assert journey.application_id == "app-1"
        assert journey.current_stage is None
        assert journey.journey == []


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
class TestRequestHelpers:
    def test_as_payload_copies_mappings(self):
        source = {"title": "QA"}
        payload = as_payload(source)
        assert payload == source
        assert payload is not source

    def test_build_query_drops_empty_values(self):
        assert build_query(companyId="co-1", role=None, status="") == {"companyId": "co-1"}
        assert build_query(role=None) is None
