from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import JSONB
from app.core.database import Base

class SubmissionAnswer(Base):
    __tablename__ = "submission_answers"
    __table_args__ = (
        UniqueConstraint("submission_id", "question_id", name="uq_submission_answers_submission_question"),
    )

    id = Column(Integer, primary_key=True, index=True)
    submission_id = Column(Integer, ForeignKey("quiz_submissions.id"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("quiz_questions.id"), nullable=False)
    selected_option_ids = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False, default=list)
    answer_text = Column(String, nullable=True)
    is_correct = Column(Boolean, nullable=True) # NULL: awaiting manual review
    points_awarded = Column(Integer, nullable=False, default=0)

    submission = relationship("QuizSubmission", back_populates="answers")
    question = relationship("QuizQuestion")

    @property
    def question_text(self):
        return self.question.question_text if self.question else None

    @property
    def question_type(self):
        return self.question.question_type if self.question else None
