from sqlalchemy import Column, Text, Float, TIMESTAMP, ForeignKey, Index

from core.utils import new_id, utcnow
from .base import Base, JSONDocument


class Transcript(Base):
    """Transcript record. Only the most recently uploaded one per student is used."""
    __tablename__ = 'transcripts'

    id = Column(Text, primary_key=True, default=new_id)
    student_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    gpa = Column(Float, nullable=True)
    certificates = Column(JSONDocument, nullable=False, default=list)
    file_url = Column(Text)

    uploaded_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_transcripts_student_uploaded', 'student_id', 'uploaded_at'),
    )
