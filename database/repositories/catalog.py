from typing import Any, List

from sqlalchemy import select

from database.models import Institution, Faculty, Course
from database.repositories.base import BaseRepository


class InstitutionRepository(BaseRepository):
    model = Institution

    def list_active(self) -> List[Institution]:
        stmt = select(Institution).where(Institution.is_active.is_(True)).order_by(Institution.name, Institution.id)
        return self.db.execute(stmt).scalars().all()

    def get_by_admin(self, admin_id: Any) -> List[Institution]:
        stmt = select(Institution).where(Institution.admin_id == admin_id).order_by(Institution.id)
        return self.db.execute(stmt).scalars().all()


class CourseRepository(BaseRepository):
    model = Course

    def list_active_for_institution(self, institution_id: Any) -> List[Course]:
        stmt = (
            select(Course)
            .where(Course.institution_id == institution_id, Course.is_active.is_(True))
            .order_by(Course.name, Course.id)
        )
        return self.db.execute(stmt).scalars().all()


class FacultyRepository(BaseRepository):
    model = Faculty

    def list_for_institution(self, institution_id: Any) -> List[Faculty]:
        stmt = select(Faculty).where(Faculty.institution_id == institution_id).order_by(Faculty.name, Faculty.id)
        return self.db.execute(stmt).scalars().all()
