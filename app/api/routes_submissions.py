"""
Competition submission routes
"""

from fastapi import APIRouter, Depends

from app.schemas.submission import SubmissionCreate, SubmissionStatusUpdate
from app.schemas.user import UserProfile
from app.services.kv_store import KeyValueStore, get_store
from app.services.submission_service import SubmissionService
from app.utils.security import get_current_user

router = APIRouter()

def get_submission_service(store: KeyValueStore = Depends(get_store)) -> SubmissionService:
    return SubmissionService(store)

@router.get("")
async def list_submissions(
    user: UserProfile = Depends(get_current_user),
    submissions: SubmissionService = Depends(get_submission_service),
):
    return {"submissions": [s.to_json() for s in submissions.list_all(user)]}

@router.get("/user/{user_id}")
async def list_user_submissions(
    user_id: str,
    user: UserProfile = Depends(get_current_user),
    submissions: SubmissionService = Depends(get_submission_service),
):
    return {"submissions": [s.to_json() for s in submissions.list_for_user(user, user_id)]}

@router.get("/event/{event_id}")
async def list_event_submissions(
    event_id: str,
    user: UserProfile = Depends(get_current_user),
    submissions: SubmissionService = Depends(get_submission_service),
):
    return {"submissions": [s.to_json() for s in submissions.list_for_event(user, event_id)]}

@router.post("", status_code=201)
async def create_submission(
    body: SubmissionCreate,
    user: UserProfile = Depends(get_current_user),
    submissions: SubmissionService = Depends(get_submission_service),
):
    return {"submission": submissions.create(user, body).to_json()}

@router.put("/{submission_id}")
async def update_submission_status(
    submission_id: str,
    body: SubmissionStatusUpdate,
    user: UserProfile = Depends(get_current_user),
    submissions: SubmissionService = Depends(get_submission_service),
):
    """Review a submission (admin)"""
    return {"submission": submissions.update_status(user, submission_id, body).to_json()}
