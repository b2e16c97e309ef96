from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, Index, UniqueConstraint

from core.utils import new_id, utcnow
from .base import Base, JSONDocument

APPLICATION_STATUSES = ('pending', 'admitted', 'rejected', 'withdrawn')


class Application(Base):
    """
    A student's application to an institution course.

    Non-withdrawn applications hold an `active_slot` in 1..limit. The unique
    constraint on (student_id, institution_id, active_slot) makes the store
    reject an insert that would exceed the per-institution limit even when two
    submissions race past the eligibility check. Withdrawing clears the slot
    (NULLs never collide).
    """
    __tablename__ = 'applications'

    id = Column(Text, primary_key=True, default=new_id)
    student_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    course_id = Column(Text, ForeignKey('courses.id', ondelete='CASCADE'), nullable=False)
    institution_id = Column(Text, ForeignKey('institutions.id', ondelete='CASCADE'), nullable=False)

    personal_statement = Column(Text)
    documents = Column(JSONDocument, default=list)
    status = Column(Text, nullable=False, default='pending')  # pending|admitted|rejected|withdrawn
    active_slot = Column(Integer, nullable=True)

    applied_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('student_id', 'institution_id', 'active_slot', name='uq_application_active_slot'),
        Index('idx_applications_student_status', 'student_id', 'status'),
        Index('idx_applications_institution', 'institution_id'),
        Index('idx_applications_applied_at', 'applied_at'),
    )
