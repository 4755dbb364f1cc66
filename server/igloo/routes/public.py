from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from igloo.database import get_db
from igloo.schemas import ErrorResponse, PublicTest, SubmissionCreate, SubmissionReceipt
from igloo.services import submission_service, test_service

router = APIRouter(tags=["Test Taking"], responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})


@router.get("/tests", response_model=PublicTest)
async def get_test_for_taker(
    subject: str = Query("", description="Test subject, e.g. english"),
    level: str = Query("", description="Test level, e.g. beginner"),
    pick: str = Query(test_service.PICK_RANDOM, description="'random' (default) or 'latest'"),
    db: Session = Depends(get_db),
):
    """
    Pick one test for a subject/level.
    The answer key is never part of this response.
    """
    return test_service.pick_test(db, subject, level, pick)


@router.post("/submissions", response_model=SubmissionReceipt)
async def submit_answers(payload: SubmissionCreate = Body(...), db: Session = Depends(get_db)):
    """Grade and store a test-taker's answers"""
    return submission_service.submit_answers(db, payload)
