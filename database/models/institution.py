from sqlalchemy import Column, Text, Boolean, TIMESTAMP, ForeignKey, Index
from sqlalchemy.orm import relationship

from core.utils import new_id, utcnow
from .base import Base, JSONDocument


class Institution(Base):
    __tablename__ = 'institutions'

    id = Column(Text, primary_key=True, default=new_id)
    admin_id = Column(Text, ForeignKey('users.id', ondelete='SET NULL'), nullable=True)

    name = Column(Text, nullable=False)
    type = Column(Text)
    location = Column(Text)
    description = Column(Text)
    contact = Column(JSONDocument, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    faculties = relationship("Faculty", back_populates="institution", cascade="all, delete-orphan")
    courses = relationship("Course", back_populates="institution", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_institutions_admin', 'admin_id'),
        Index('idx_institutions_active', 'is_active'),
    )


class Faculty(Base):
    __tablename__ = 'faculties'

    id = Column(Text, primary_key=True, default=new_id)
    institution_id = Column(Text, ForeignKey('institutions.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    description = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    institution = relationship("Institution", back_populates="faculties")

    __table_args__ = (
        Index('idx_faculties_institution', 'institution_id'),
    )


class Course(Base):
    __tablename__ = 'courses'

    id = Column(Text, primary_key=True, default=new_id)
    institution_id = Column(Text, ForeignKey('institutions.id', ondelete='CASCADE'), nullable=False)
    faculty_id = Column(Text, ForeignKey('faculties.id', ondelete='SET NULL'), nullable=True)

    name = Column(Text, nullable=False)
    description = Column(Text)
    duration = Column(Text)
    fees = Column(Text)
    requirements = Column(JSONDocument, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    institution = relationship("Institution", back_populates="courses")
    faculty = relationship("Faculty")

    __table_args__ = (
        Index('idx_courses_institution_active', 'institution_id', 'is_active'),
    )
