import logging
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import exists, select

from database.models import User, Transcript
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalars().first()

    def lock_student(self, student_id: Any) -> Optional[User]:
        """
        Take the per-student row lock (SELECT ... FOR UPDATE).

        Serializes admission decisions for one student across concurrent
        transactions. Dialects without row locks (SQLite) ignore the clause.
        """
        stmt = select(User).where(User.id == student_id).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    def create_user(
        self,
        user_id: str,
        email: str,
        role: str,
        profile: Optional[Dict[str, Any]] = None,
        is_verified: bool = False
    ) -> User:
        user = User(
            id=user_id,
            email=email,
            role=role,
            profile=profile or {},
            is_verified=is_verified
        )
        self.db.add(user)
        self.db.flush()
        return user

    def update_profile(self, user: User, changes: Dict[str, Any]) -> User:
        # Reassign so the JSON column is marked dirty
        profile = dict(user.profile or {})
        profile.update(changes)
        user.profile = profile
        self.db.flush()
        return user

    def iter_student_pages_with_transcripts(self, page_size: int) -> Iterator[List[User]]:
        """
        Yield pages of students holding at least one transcript, ordered by id.

        Keyset pagination: each page starts after the last id of the previous
        one, so rows inserted mid-scan never shift a page.
        """
        has_transcript = exists().where(Transcript.student_id == User.id)
        last_id = None
        while True:
            stmt = select(User).where(User.role == 'student', has_transcript)
            if last_id is not None:
                stmt = stmt.where(User.id > last_id)
            stmt = stmt.order_by(User.id).limit(page_size)
            page = self.db.execute(stmt).scalars().all()
            if not page:
                return
            yield page
            if len(page) < page_size:
                return
            last_id = page[-1].id

    def recent(self, limit: int = 5) -> List[User]:
        stmt = select(User).order_by(User.created_at.desc()).limit(limit)
        return self.db.execute(stmt).scalars().all()
