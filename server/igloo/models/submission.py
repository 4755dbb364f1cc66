from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from igloo.database import Base
from igloo.models.content import new_id, utcnow


class Submission(Base):
    """A test-taker's graded answers"""
    __tablename__ = "submissions"

    id = Column(String(36), primary_key=True, default=new_id)
    # Detached (NULL) when the test is deleted
    test_id = Column(String(36), ForeignKey("tests.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String, nullable=False)
    grade = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    # Snapshot taken at submit time
    subject = Column(String, nullable=False, default="")
    level = Column(String, nullable=False, default="")
    answers = Column(JSON, nullable=False, default=dict)  # {question_id: choice_index}
    score = Column(Integer, nullable=False)
    submitted_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Relationships
    test = relationship("Test", back_populates="submissions")
