"""
Submission grading and the admin views over stored submissions.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from igloo.config import settings
from igloo.errors import NotFoundError, ValidationError
from igloo.models import Submission, Test
from igloo.schemas import SubmissionCreate
from igloo.services.grading import score_submission

logger = logging.getLogger(__name__)

DELETED_TEST_TITLE = "(deleted test)"
REQUIRED_FIELDS = ("test_id", "name", "grade", "email", "phone")


def submit_answers(db: Session, payload: SubmissionCreate) -> Submission:
    """
    Grade a test-taker's answers against the stored key and record them.

    Raises:
        ValidationError: if any identity field or the test id is missing
        NotFoundError: if the referenced test does not exist
    """
    if any(not getattr(payload, field) for field in REQUIRED_FIELDS):
        raise ValidationError("missing required fields")

    test = db.query(Test).filter(Test.id == payload.test_id).first()
    if test is None:
        raise NotFoundError("test not found")

    answers = payload.answers or {}
    score = score_submission(test.answer_key or {}, answers)

    submission = Submission(
        test_id=test.id,
        name=payload.name,
        grade=payload.grade,
        email=payload.email,
        phone=payload.phone,
        subject=payload.subject or "",
        level=payload.level or "",
        answers=answers,
        score=score,
    )
    db.add(submission)
    db.commit()
    db.refresh(submission)

    logger.info("Graded submission %s for test %s: %d", submission.id, test.id, score)
    return submission


def list_submissions(db: Session, limit: Optional[int] = None) -> List[Submission]:
    return (
        db.query(Submission)
        .order_by(Submission.submitted_at.desc(), Submission.id.desc())
        .limit(limit or settings.max_list_rows)
        .all()
    )


def get_submission_detail(db: Session, submission_id: str) -> dict:
    """
    Load a submission together with its test, if the test still exists.

    Detached submissions report ``(deleted test)`` as title and no
    questions or answer key.
    """
    row = (
        db.query(Submission, Test)
        .outerjoin(Test, Test.id == Submission.test_id)
        .filter(Submission.id == str(submission_id))
        .first()
    )
    if row is None:
        raise NotFoundError("not found")

    submission, test = row
    return {
        "id": submission.id,
        "test_id": submission.test_id,
        "name": submission.name,
        "grade": submission.grade,
        "email": submission.email,
        "phone": submission.phone,
        "subject": submission.subject,
        "level": submission.level,
        "answers": submission.answers or {},
        "score": submission.score,
        "submitted_at": submission.submitted_at,
        "title": (test.title if test is not None else None) or DELETED_TEST_TITLE,
        "questions": test.questions if test is not None else None,
        "answer_key": test.answer_key if test is not None else None,
    }


def delete_submission(db: Session, submission_id: str) -> str:
    deleted = db.query(Submission).filter(Submission.id == str(submission_id)).delete(synchronize_session=False)
    if not deleted:
        db.rollback()
        raise NotFoundError("not found")
    db.commit()

    logger.info("Deleted submission %s", submission_id)
    return str(submission_id)
