from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional, Union


CAMEL_CASE = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class StageHistoryEntry(BaseModel):
    """One audit-tracked stage transition, as recorded by the backend"""
    stage: Optional[str] = None
    entered_at: Any = None
    exited_at: Any = None
    duration_days: Optional[Union[int, float]] = None
    moved_by: Optional[str] = None
    notes: Optional[str] = None
    action: Optional[str] = None

    model_config = {**CAMEL_CASE, "extra": "ignore", "coerce_numbers_to_str": True}


class CommentView(BaseModel):
    id: Union[str, int]
    text: Optional[str] = None
    author: Optional[str] = None
    timestamp: str = ""
    stage: Optional[str] = None


class CandidateView(BaseModel):
    """
    Application merged with its candidate and job, flattened for the
    pipeline board and the candidate drawer.

    Interview rounds are loaded separately and merged in by the caller.
    """
    id: Optional[Union[str, int]] = None
    candidate_id: Optional[Union[str, int]] = None
    job_id: Optional[Union[str, int]] = None
    name: str = "Unknown"
    role: str = "Unknown Position"
    email: str = ""
    phone: str = ""
    location: str = ""
    experience: str = ""
    applied_date: str = ""
    ai_score: Union[int, float] = 0
    ai_reason: str = "AI analysis pending"
    status: str = "new"
    stage: str = "shortlisting"
    stage_name: str = ""
    profile_strength: str = "Good"
    is_hot_applicant: bool = False
    needs_attention: bool = False
    linked_in: str = ""
    portfolio: str = ""
    resume_url: str = ""
    referral_source: str = ""
    reference_number: str = ""
    graduation_year: Any = ""
    availability: str = "immediately"
    notice_period: str = ""
    motivation: str = ""

    # Rejection
    rejection_reason: str = ""
    rejection_date: str = ""

    # Screening call
    has_screening_call: bool = False
    screening_call_date: Any = ""
    screening_notes: str = ""
    screening_interviewer: str = ""
    screening_platform: str = ""
    screening_meeting_link: str = ""
    screening_duration: Any = ""

    comments: List[CommentView] = Field(default_factory=list)
    stage_history: List[StageHistoryEntry] = Field(default_factory=list)
    assigned_to: str = ""
    interview_rounds: List[Any] = Field(default_factory=list)

    original: Any = Field(default=None, exclude=True, repr=False)

    model_config = CAMEL_CASE


class CommentCreate(BaseModel):
    """New comment appended to an application's comment log"""
    text: str
    author: Optional[str] = None
    stage: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment text is required")
        return v


class ScreeningSchedule(BaseModel):
    """
    Screening call details.

    Sent with camelCase keys; with ``send_email`` the backend emails the
    invitation to the candidate.
    """
    date: Optional[str] = None
    scheduled_date: Optional[str] = None
    scheduled_time: Optional[str] = None
    notes: Optional[str] = None
    agenda: Optional[str] = None
    interviewer: Optional[str] = None
    interviewer_email: Optional[str] = None
    platform: Optional[str] = None
    meeting_link: Optional[str] = None
    duration: Optional[Union[str, int]] = None
    candidate_email: Optional[str] = None
    candidate_name: Optional[str] = None
    job_title: Optional[str] = None
    send_email: bool = True

    model_config = CAMEL_CASE


class JourneyEvent(BaseModel):
    """One entry of the application timeline"""
    type: Optional[str] = None
    stage: Optional[str] = None
    stage_name: Optional[str] = None
    timestamp: Any = None
    title: Optional[str] = None
    description: Optional[str] = None
    moved_by: Optional[str] = None
    author: Optional[str] = None
    duration_days: Optional[Union[int, float]] = None
    icon: Optional[str] = None
    color: Optional[str] = None

    model_config = {**CAMEL_CASE, "extra": "allow"}


class CurrentStage(BaseModel):
    stage: Optional[str] = None
    stage_name: Optional[str] = None
    days_in_stage: Optional[Union[int, float]] = 0
    status: Optional[str] = None

    model_config = CAMEL_CASE


class ApplicationJourney(BaseModel):
    """
    Ordered, read-only timeline of one application: submission, stage
    transitions, comments, interviews and other activity.
    """
    application_id: Optional[Union[str, int]] = None
    candidate_name: Optional[str] = None
    candidate_email: Optional[str] = None
    job_title: Optional[str] = None
    current_stage: Optional[CurrentStage] = None
    rejection_reason: Optional[str] = None
    rejection_date: Any = None
    journey: List[JourneyEvent] = Field(default_factory=list)
    total_days: Optional[int] = None

    model_config = {**CAMEL_CASE, "extra": "allow"}
