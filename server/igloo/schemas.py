from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from datetime import datetime


# Test Schemas
class QuestionSheet(BaseModel):
    """The ``questions`` document of an image test."""
    type: str = "image"
    image_url: Optional[str] = None
    num_questions: int
    choices_count: int
    choices: List[str]


class TestSummary(BaseModel):
    id: str
    subject: str
    level: str
    title: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TestDetail(TestSummary):
    questions: Dict[str, Any]
    answer_key: Dict[str, Any]


class PublicTest(TestSummary):
    """Test as served to test-takers (no answer key)."""
    questions: Dict[str, Any]


class ImageReplaced(BaseModel):
    ok: bool = True
    id: str
    image_url: Optional[str] = None


# Submission Schemas
class SubmissionCreate(BaseModel):
    """Answers sent by a test-taker; required fields are checked by the grader."""
    test_id: Optional[str] = None
    name: Optional[str] = None
    grade: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    level: Optional[str] = None
    answers: Optional[Dict[str, Any]] = None

    class Config:
        coerce_numbers_to_str = True


class SubmissionReceipt(BaseModel):
    id: str
    score: int
    submitted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SubmissionSummary(BaseModel):
    id: str
    test_id: Optional[str] = None
    name: str
    grade: str
    email: str
    phone: str
    subject: str
    level: str
    score: int
    submitted_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class SubmissionDetail(SubmissionSummary):
    answers: Dict[str, Any]
    title: str
    questions: Optional[Dict[str, Any]] = None
    answer_key: Optional[Dict[str, Any]] = None


# Generic responses
class OkResponse(BaseModel):
    ok: bool = True
    id: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
