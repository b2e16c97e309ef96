#!/usr/bin/env python3
"""
Catalog service - institutions, faculties and courses.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from core.errors import NotFound
from database.models import Institution, User
from database.repository import CareerRepository
from ..models.requests import InstitutionCreateRequest, InstitutionUpdateRequest
from ..models.responses import CourseOut, FacultyOut, InstitutionOut
from ..utils import to_course_out, to_faculty_out, to_institution_out

logger = logging.getLogger(__name__)


class CatalogService:
    """Service for the public catalog and its administration."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CareerRepository(db)

    def list_institutions(self) -> List[InstitutionOut]:
        return [to_institution_out(i) for i in self.repo.institutions.list_active()]

    def list_all_institutions(self) -> List[InstitutionOut]:
        return [to_institution_out(i) for i in self.repo.institutions.list_all()]

    def get_institution(self, institution_id: str) -> InstitutionOut:
        return to_institution_out(self.repo.institutions.get_or_404(institution_id, "Institution"))

    def list_courses(self, institution_id: str) -> List[CourseOut]:
        """Active courses with faculty names, batch-loaded."""
        self.repo.institutions.get_or_404(institution_id, "Institution")
        courses = self.repo.courses.list_active_for_institution(institution_id)
        faculties = self.repo.faculties.get_many(c.faculty_id for c in courses)
        return [
            to_course_out(c, faculties[c.faculty_id].name if c.faculty_id in faculties else None)
            for c in courses
        ]

    def list_faculties(self, institution_id: str) -> List[FacultyOut]:
        self.repo.institutions.get_or_404(institution_id, "Institution")
        return [to_faculty_out(f) for f in self.repo.faculties.list_for_institution(institution_id)]

    def create_institution(self, request: InstitutionCreateRequest) -> InstitutionOut:
        institution = Institution(
            name=request.name.strip(),
            type=request.type,
            location=request.location,
            description=request.description,
            contact=request.contact,
            admin_id=request.admin_id,
            is_active=True,
        )
        self.repo.institutions.add(institution)
        self.repo.commit()
        logger.info(f"Institution {institution.id} created: {institution.name}")
        return to_institution_out(institution)

    def update_institution(self, institution_id: str, request: InstitutionUpdateRequest) -> InstitutionOut:
        institution = self.repo.institutions.update(institution_id, request.model_dump(exclude_unset=True))
        self.repo.commit()
        logger.info(f"Institution {institution.id} updated")
        return to_institution_out(institution)

    def own_institution_ids(self, actor: User) -> List[str]:
        institution_ids = [i.id for i in self.repo.institutions.get_by_admin(actor.id)]
        if not institution_ids:
            raise NotFound("Institution not found")
        return institution_ids

    def own_courses(self, actor: User) -> List[CourseOut]:
        courses: List[CourseOut] = []
        for institution_id in self.own_institution_ids(actor):
            courses.extend(self.list_courses(institution_id))
        return courses

    def own_faculties(self, actor: User) -> List[FacultyOut]:
        faculties: List[FacultyOut] = []
        for institution_id in self.own_institution_ids(actor):
            faculties.extend(self.list_faculties(institution_id))
        return faculties
