import logging
from datetime import datetime
from typing import Any, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from core.errors import ConflictError
from database.models import Application
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    model = Application

    def list_for_student(self, student_id: Any) -> List[Application]:
        """All of a student's applications, newest first, read from the store."""
        stmt = (
            select(Application)
            .where(Application.student_id == student_id)
            .order_by(Application.applied_at.desc(), Application.id)
            .execution_options(populate_existing=True)
        )
        return self.db.execute(stmt).scalars().all()

    def list_for_institution(self, institution_id: Any, status: Optional[str] = None) -> List[Application]:
        stmt = select(Application).where(Application.institution_id == institution_id)
        if status:
            stmt = stmt.where(Application.status == status)
        stmt = stmt.order_by(Application.applied_at.desc(), Application.id)
        return self.db.execute(stmt).scalars().all()

    def used_slots(self, student_id: Any, institution_id: Any) -> Set[int]:
        stmt = select(Application.active_slot).where(
            Application.student_id == student_id,
            Application.institution_id == institution_id,
            Application.active_slot.is_not(None)
        )
        return set(self.db.execute(stmt).scalars().all())

    def insert_in_free_slot(
        self,
        student_id: Any,
        course_id: Any,
        institution_id: Any,
        limit: int,
        personal_statement: Optional[str] = None,
        documents: Optional[list] = None
    ) -> Application:
        """
        Insert a pending application into the lowest free active slot.

        Raises ConflictError when every slot is taken or when a concurrent
        transaction claimed the same slot first (unique constraint). The
        insert runs in a savepoint so a lost race leaves nothing behind.
        """
        taken = self.used_slots(student_id, institution_id)
        free = [slot for slot in range(1, limit + 1) if slot not in taken]
        if not free:
            raise ConflictError("institution application limit reached; retry after refreshing")

        application = Application(
            student_id=student_id,
            course_id=course_id,
            institution_id=institution_id,
            personal_statement=personal_statement,
            documents=list(documents or []),
            status='pending',
            active_slot=free[0]
        )
        try:
            with self.db.begin_nested():
                self.db.add(application)
                self.db.flush()
        except IntegrityError as e:
            logger.warning(
                f"Slot {free[0]} for student {student_id} at institution {institution_id} "
                f"was claimed concurrently: {e.orig}"
            )
            raise ConflictError("concurrent application detected; please retry") from e
        return application

    def reload(self, application: Application) -> Application:
        """Re-read a loaded application from the store."""
        self.db.refresh(application)
        return application

    def set_status(self, application: Application, status: str) -> Application:
        application.status = status
        if status == 'withdrawn':
            # Frees the slot for a later application
            application.active_slot = None
        self.db.flush()
        return application

    def in_period(self, since: datetime) -> List[Application]:
        stmt = select(Application).where(Application.applied_at >= since)
        return self.db.execute(stmt).scalars().all()

    def recent(self, limit: int = 5) -> List[Application]:
        stmt = select(Application).order_by(Application.applied_at.desc()).limit(limit)
        return self.db.execute(stmt).scalars().all()
