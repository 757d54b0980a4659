"""
Competition submission operations
"""

import logging
from typing import List

from app.schemas.submission import Submission, SubmissionCreate, SubmissionStatusUpdate
from app.schemas.user import UserProfile
from app.services.auth_service import ensure_admin, ensure_self_or_admin
from app.services.errors import NotFound
from app.services.kv_store import KeyValueStore
from app.services.repositories import EventRepo, SubmissionRepo, apply_update, new_id, utc_now_iso

logger = logging.getLogger(__name__)


class SubmissionService:
    def __init__(self, store: KeyValueStore):
        self.submissions = SubmissionRepo(store)
        self.events = EventRepo(store)

    def create(self, user: UserProfile, data: SubmissionCreate) -> Submission:
        competition = self.events.get(data.competition_id)
        if competition is None:
            raise NotFound.for_resource("Competition", data.competition_id)

        now = utc_now_iso()
        submission = Submission(
            id=new_id("submission"),
            created_at=now,
            timestamp=now,
            user_id=user.id,
            competition_id=competition.id,
            competition_name=data.competition_name or competition.title,
            title=data.title,
            description=data.description,
            submission_url=data.submission_url,
            status="Submitted",
        )
        self.submissions.save(submission)
        logger.info("Submission %s entered for competition %s", submission.id, competition.id)
        return submission

    def list_for_user(self, user: UserProfile, user_id: str) -> List[Submission]:
        ensure_self_or_admin(user, user_id)
        return self.submissions.list_for_user(user_id)

    def list_for_event(self, user: UserProfile, event_id: str) -> List[Submission]:
        ensure_admin(user)
        return self.submissions.list_for_event(event_id)

    def list_all(self, user: UserProfile) -> List[Submission]:
        ensure_admin(user)
        return self.submissions.list_all()

    def update_status(self, user: UserProfile, submission_id: str, data: SubmissionStatusUpdate) -> Submission:
        ensure_admin(user)
        submission = self.submissions.get(submission_id)
        if submission is None:
            raise NotFound.for_resource("Submission", submission_id)

        updated = apply_update(submission, data)
        self.submissions.save(updated)
        logger.info("Submission %s status %s -> %s", submission_id, submission.status, updated.status)
        return updated
