"""
Transformers from backend records to UI view models.

Backend records are nested (a job carries its department, role type and
work setup; an application carries its candidate and job) and use
snake_case keys. The views here are flat, use display-ready strings and
apply fixed fallbacks for missing values.

Both transforms are pure: they never mutate their argument, and every
view keeps the untouched record in ``original`` for later write-back
calls. The only impure input is the clock used to invent an id for a
comment the backend sent without one.
"""

from __future__ import annotations
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping, Optional
import logging
import time

from talent_client.schemas.application import CandidateView, CommentView, StageHistoryEntry
from talent_client.schemas.job import JobView
from talent_client.utils.status_mapper import DEFAULT_STAGE, DEFAULT_STATUS, stage_display_name

logger = logging.getLogger(__name__)

# Fixed English abbreviations; output must not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


# ── Value helpers ─────────────────────────────────────────────────────────────

def _or(value: Any, default: Any = "") -> Any:
    """Return ``value`` unless it is empty (None, "", 0, False), else ``default``."""
    return value if value else default


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _name_of(ref: Any, default: str) -> str:
    """Name of a populated lookup reference, or ``default``."""
    return _mapping(ref).get("name") or default


def _ref_id(ref: Any) -> Any:
    """Id of a reference that may be populated (a dict) or a bare id."""
    if isinstance(ref, Mapping):
        return ref.get("id") or ref.get("_id")
    return ref


def _range_value(value: Any) -> str:
    """
    Render one end of a numeric range.

    Example:
        >>> _range_value(50000.0)
        '50000'
        >>> _range_value(0)
        '0'
        >>> _range_value(None)
        ''
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a backend timestamp into a naive UTC datetime.

    Accepts ISO-8601 strings (with or without a trailing "Z"), datetimes,
    dates and epoch milliseconds. Returns None for empty or unparseable
    values.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def date_part(value: Any) -> str:
    """ISO date portion of a timestamp ("2024-01-15T10:30:00Z" -> "2024-01-15")."""
    if not value:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).split("T")[0]


def format_short_date(value: Any) -> str:
    """
    Format a timestamp as "Mon D, YYYY" (UTC).

    Example:
        >>> format_short_date("2024-03-05T18:00:00Z")
        'Mar 5, 2024'
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_timestamp(value: Any) -> str:
    """
    Format a timestamp as "MM/DD/YYYY, HH:MM AM" (UTC, 12-hour clock).

    Example:
        >>> format_timestamp("2024-03-05T18:07:00Z")
        '03/05/2024, 06:07 PM'
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    hour = parsed.hour % 12 or 12
    meridiem = "AM" if parsed.hour < 12 else "PM"
    return (
        f"{parsed.month:02d}/{parsed.day:02d}/{parsed.year}, "
        f"{hour:02d}:{parsed.minute:02d} {meridiem}"
    )


# ── Jobs ──────────────────────────────────────────────────────────────────────

def transform_job_to_frontend(job: Mapping[str, Any]) -> JobView:
    """
    Flatten a backend job into the jobs-board view.

    Missing lookups fall back to "Unknown" (department), "Full-time"
    (role type) and "Remote" (work setup). Salary and experience bounds
    become strings, empty when absent.

    Args:
        job: Raw job record as returned by the backend

    Returns:
        JobView with ``original`` set to ``job`` itself

    Example:
        view = transform_job_to_frontend({"id": "j1", "title": "Designer"})
        view.team            # "Unknown"
        view.original        # the dict passed in
    """
    return JobView(
        id=job.get("id") or job.get("_id"),
        name=job.get("title"),
        team=_name_of(job.get("department"), "Unknown"),
        place=job.get("location"),
        count=0,
        good=0,
        on=bool(job.get("is_active")),
        about_company=_or(job.get("about_company")),
        job_overview=_or(job.get("job_overview")),
        key_responsibilities=_or(job.get("key_responsibilities")),
        qualifications=_or(job.get("qualifications")),
        preferred_qualifications=_or(job.get("preferred_qualifications")),
        role_type=_name_of(job.get("role_type"), "Full-time"),
        work_setup=_name_of(job.get("work_setup"), "Remote"),
        salary_min=_range_value(job.get("salary_min")),
        salary_max=_range_value(job.get("salary_max")),
        experience_min=_range_value(job.get("experience_min")),
        experience_max=_range_value(job.get("experience_max")),
        skills=_or(job.get("skills")),
        benefits=_or(job.get("benefits")),
        application_deadline=_or(job.get("application_deadline")),
        original=job,
    )


# ── Applications ──────────────────────────────────────────────────────────────

def _comment_id(comment: Mapping[str, Any], clock: Callable[[], float]) -> Any:
    comment_id = comment.get("_id") or comment.get("id")
    if comment_id:
        return comment_id
    fallback = int(clock() * 1000)
    logger.warning(f"Comment without id, using generated id {fallback}")
    return fallback


def _comment_sort_key(comment: Mapping[str, Any]) -> tuple:
    parsed = parse_timestamp(comment.get("timestamp"))
    return (parsed is None, parsed or datetime.min)


def _comments(raw_comments: Any, clock: Callable[[], float]) -> list[CommentView]:
    comments = [c for c in (raw_comments or []) if isinstance(c, Mapping)]

    # Stable sort: undated comments keep their relative order after dated ones
    ordered = sorted(comments, key=_comment_sort_key)
    return [
        CommentView(
            id=_comment_id(c, clock),
            text=c.get("text"),
            author=c.get("author"),
            timestamp=format_timestamp(c.get("timestamp")),
            stage=c.get("stage"),
        )
        for c in ordered
    ]


def transform_candidate_to_frontend(
    application: Mapping[str, Any],
    clock: Callable[[], float] = time.time,
) -> CandidateView:
    """
    Merge an application with its candidate and job into one flat view.

    Args:
        application: Raw application record with nested ``candidate`` and
            ``job`` (either may be missing)
        clock: Seconds-since-epoch source for comment ids the backend did
            not assign

    Returns:
        CandidateView with ``original`` set to ``application`` itself.
        ``interview_rounds`` is always empty; interviews are loaded and
        merged by the caller.
    """
    candidate = _mapping(application.get("candidate"))
    job = _mapping(application.get("job"))
    stage = str(_or(application.get("stage"), DEFAULT_STAGE))

    return CandidateView(
        id=application.get("id") or application.get("_id"),
        candidate_id=candidate.get("id") or _ref_id(application.get("candidate_id")),
        job_id=job.get("id") or _ref_id(application.get("job_id")) or None,
        name=_or(candidate.get("name"), "Unknown"),
        role=_or(job.get("title"), "Unknown Position"),
        email=_or(candidate.get("email")),
        phone=_or(candidate.get("phone")),
        location=_or(candidate.get("location")),
        experience="",
        applied_date=date_part(application.get("applied_at")),
        ai_score=_or(application.get("ai_score"), 0),
        ai_reason=_mapping(application.get("ai_analysis")).get("summary") or "AI analysis pending",
        status=str(_or(application.get("status"), DEFAULT_STATUS)),
        stage=stage,
        stage_name=stage_display_name(stage),
        profile_strength=_or(application.get("profile_strength"), "Good"),
        is_hot_applicant=bool(application.get("is_hot_applicant")),
        needs_attention=bool(application.get("needs_attention")),
        linked_in=_or(candidate.get("linkedin_url")),
        portfolio=_or(candidate.get("portfolio_url")),
        resume_url=_or(candidate.get("resume_url")),
        referral_source=_or(application.get("referral_source")),
        reference_number=_or(application.get("reference_number")),
        graduation_year=_or(application.get("graduation_year")),
        availability=_or(application.get("availability"), "immediately"),
        notice_period=_or(application.get("notice_period")),
        motivation=_or(application.get("motivation")),
        rejection_reason=_or(application.get("rejection_reason")),
        rejection_date=format_short_date(application.get("rejection_date")),
        has_screening_call=bool(application.get("has_screening_call")),
        screening_call_date=_or(application.get("screening_call_date")),
        screening_notes=_or(application.get("screening_notes")),
        screening_interviewer=_or(application.get("screening_interviewer")),
        screening_platform=_or(application.get("screening_platform")),
        screening_meeting_link=_or(application.get("screening_meeting_link")),
        screening_duration=_or(application.get("screening_duration")),
        comments=_comments(application.get("comments"), clock),
        stage_history=[
            StageHistoryEntry.model_validate(entry)
            for entry in application.get("stage_history") or []
            if isinstance(entry, Mapping)
        ],
        assigned_to=_or(application.get("assigned_to")),
        interview_rounds=[],
        original=application,
    )
