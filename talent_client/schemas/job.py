from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Any, Optional, Union


class JobView(BaseModel):
    """
    Flat job shape for the jobs board and job editor.

    Nested lookups (department, role type, work setup) are reduced to
    their names and numeric ranges are rendered as strings. Dump with
    ``by_alias=True`` for the camelCase UI keys.
    """
    id: Optional[Union[str, int]] = None
    name: Optional[str] = None
    team: str = "Unknown"
    place: Optional[str] = None
    count: int = 0  # filled in from applications by the caller
    good: int = 0
    on: bool = False
    about_company: str = ""
    job_overview: str = ""
    key_responsibilities: str = ""
    qualifications: str = ""
    preferred_qualifications: str = ""
    role_type: str = "Full-time"
    work_setup: str = "Remote"
    salary_min: str = ""
    salary_max: str = ""
    experience_min: str = ""
    experience_max: str = ""
    skills: Any = ""
    benefits: str = ""
    application_deadline: Any = ""
    # Untouched backend record, kept for write-back calls
    original: Any = Field(default=None, exclude=True, repr=False)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
