from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from typing import Any, Dict, List, Optional, Tuple
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile as StarletteUploadFile

from igloo.database import get_db
from igloo.errors import ValidationError
from igloo.schemas import (
    ErrorResponse,
    ImageReplaced,
    OkResponse,
    SubmissionDetail,
    SubmissionSummary,
    TestDetail,
    TestSummary,
)
from igloo.security import require_admin
from igloo.services import submission_service, test_service

router = APIRouter(
    tags=["Admin"],
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


async def _read_edit_body(request: Request) -> Tuple[Dict[str, Any], Optional[StarletteUploadFile]]:
    """Accept the edit payload as JSON or as a (multipart) form."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as e:
            raise ValidationError(f"invalid JSON body: {e}")
        if not isinstance(body, dict):
            raise ValidationError("JSON body must be an object")
        return body, None

    form = await request.form()
    changes: Dict[str, Any] = {}
    image = None
    for key, value in form.multi_items():
        if isinstance(value, StarletteUploadFile):
            if key == "image":
                image = value
        else:
            changes[key] = value
    return changes, image


# =====================================================
# TESTS
# =====================================================
@router.get("/tests", response_model=List[TestSummary])
async def list_tests(db: Session = Depends(get_db)):
    """Newest tests first"""
    return test_service.list_tests(db)


@router.get("/tests/{test_id}", response_model=TestDetail)
async def get_test(test_id: str, db: Session = Depends(get_db)):
    return test_service.get_test(db, test_id)


@router.post("/tests/upload", response_model=TestSummary)
async def upload_test(
    subject: Optional[str] = Form(None),
    level: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    num_questions: Optional[str] = Form(None),
    choices_count: Optional[str] = Form(None),
    answer_key: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """Upload an image test with its answer-key letters"""
    return test_service.upload_test(
        db,
        subject=subject,
        level=level,
        title=title,
        num_questions=num_questions,
        choices_count=choices_count,
        answer_key=answer_key,
        image=image,
    )


@router.put("/tests/{test_id}", response_model=TestDetail)
async def edit_test(test_id: str, request: Request, db: Session = Depends(get_db)):
    """
    Edit a test from JSON or multipart form data.
    Multipart requests may carry a replacement ``image``.
    """
    changes, image = await _read_edit_body(request)
    return test_service.edit_test(db, test_id, changes, image)


@router.put("/tests/{test_id}/image", response_model=ImageReplaced)
async def replace_test_image(
    test_id: str,
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    test = test_service.replace_image(db, test_id, image)
    return ImageReplaced(id=test.id, image_url=test.image_url)


@router.delete("/tests/{test_id}", response_model=OkResponse, response_model_exclude_none=True)
async def delete_test(test_id: str, db: Session = Depends(get_db)):
    """Delete a test; its submissions are kept and detached"""
    test_service.delete_test(db, test_id)
    return OkResponse()


# =====================================================
# SUBMISSIONS
# =====================================================
@router.get("/submissions", response_model=List[SubmissionSummary])
async def list_submissions(db: Session = Depends(get_db)):
    return submission_service.list_submissions(db)


@router.get("/submissions/{submission_id}", response_model=SubmissionDetail)
async def get_submission(submission_id: str, db: Session = Depends(get_db)):
    """Submission with its test, which may have been deleted since"""
    return submission_service.get_submission_detail(db, submission_id)


@router.delete("/submissions/{submission_id}", response_model=OkResponse)
async def delete_submission(submission_id: str, db: Session = Depends(get_db)):
    deleted_id = submission_service.delete_submission(db, submission_id)
    return OkResponse(id=deleted_id)
