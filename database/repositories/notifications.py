import logging
from typing import Any, List, Optional

from sqlalchemy import select

from database.models import Notification
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository):
    model = Notification

    def exists_with_dedup_key(self, dedup_key: str) -> bool:
        stmt = select(Notification.id).where(Notification.dedup_key == dedup_key)
        return self.db.execute(stmt).first() is not None

    def create_notification(
        self,
        user_id: Any,
        title: str,
        message: str,
        type: str,
        job_id: Optional[Any] = None,
        dedup_key: Optional[str] = None
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            job_id=job_id,
            dedup_key=dedup_key
        )
        self.db.add(notification)
        self.db.flush()
        return notification

    def list_for_user(self, user_id: Any, unread_only: bool = False, limit: int = 100) -> List[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.read.is_(False))
        stmt = stmt.order_by(Notification.created_at.desc(), Notification.id).limit(limit)
        return self.db.execute(stmt).scalars().all()
