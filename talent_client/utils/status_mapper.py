"""
Pipeline stage vocabulary shared by the transformers and the lifecycle
service.

An application's stage is its position in the recruiting pipeline; its
status is the lifecycle outcome and moves independently of the stage.

Pipeline stages (in order):
- shortlisting: Initial review of the application
- screening: Screening call scheduled or held
- assignment-sent / assignment-submitted: Take-home test in progress
- interview: Interview rounds
- offer-sent / offer-accepted: Offer stage
- hired: Successful hire (final positive state)
- rejected: Application rejected (final negative state)
"""

from typing import Optional

DEFAULT_STAGE = "shortlisting"
DEFAULT_STATUS = "new"

STAGE_NAMES = {
    "shortlisting": "Shortlisting",
    "screening": "Screening Call",
    "assignment-sent": "Assignment Sent",
    "assignment-submitted": "Assignment Submitted",
    "interview": "Interview",
    "offer-sent": "Offer Sent",
    "offer-accepted": "Offer Accepted",
    "hired": "Hired",
    "rejected": "Rejected",
}


def stage_display_name(stage: Optional[str]) -> str:
    """
    Map a pipeline stage id to its display name.

    Unknown stages are shown as-is so that custom pipeline stages still
    render.

    Example:
        >>> stage_display_name("screening")
        'Screening Call'
        >>> stage_display_name("culture-fit")
        'culture-fit'
        >>> stage_display_name(None)
        ''
        >>> stage_display_name(3)
        '3'
    """
    if stage is None or stage == "":
        return ""
    stage = str(stage)
    return STAGE_NAMES.get(stage.strip().lower(), stage)

