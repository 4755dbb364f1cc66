from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import relationship
from igloo.database import Base
from datetime import datetime, timezone
import enum
import uuid


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestionType(str, enum.Enum):
    IMAGE = "image"


class Test(Base):
    """Image-based test uploaded by an administrator"""
    __tablename__ = "tests"
    __test__ = False  # keep pytest from collecting the model

    id = Column(String(36), primary_key=True, default=new_id)
    subject = Column(String, nullable=False, index=True)
    level = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    # {"type", "image_url", "num_questions", "choices_count", "choices"}
    questions = Column(JSON, nullable=False)
    answer_key = Column(JSON, nullable=False)  # {"q1": 0, "q2": 3, ...}
    # client-side, sub-second precision on every backend
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    submissions = relationship("Submission", back_populates="test", passive_deletes=True)

    @property
    def image_url(self):
        return (self.questions or {}).get("image_url")

    def __repr__(self):
        return f"<Test {self.title} ({self.subject}/{self.level})>"
