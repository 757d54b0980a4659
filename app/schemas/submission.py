"""
Competition submission schemas
"""

from typing import Literal, Optional
from pydantic import Field

from app.schemas.common import CamelModel, StoredRecord, UpdateModel

SubmissionStatus = Literal["Submitted", "Under Review", "Accepted", "Rejected"]

class SubmissionCreate(CamelModel):
    competition_id: str = Field(..., min_length=1)
    competition_name: Optional[str] = None
    title: str = Field(..., min_length=1)
    description: str = ""
    submission_url: str = ""

class SubmissionStatusUpdate(UpdateModel):
    status: SubmissionStatus

class Submission(StoredRecord):
    user_id: str
    competition_id: str
    competition_name: str = ""
    title: str
    description: str = ""
    submission_url: str = ""
    status: SubmissionStatus = "Submitted"
    timestamp: str
