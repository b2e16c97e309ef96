from sqlalchemy import Column, Text, Boolean, TIMESTAMP, ForeignKey, Index, UniqueConstraint

from core.utils import new_id, utcnow
from .base import Base

NOTIFICATION_TYPES = ('application', 'job', 'status')


class Notification(Base):
    """
    In-app notification record.

    dedup_key identifies one (recipient, subject, event) so at-least-once
    delivery never shows the same notice twice. NULL keys are not deduplicated.
    """
    __tablename__ = 'notifications'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    type = Column(Text, nullable=False)  # application|job|status
    job_id = Column(Text, nullable=True)
    read = Column(Boolean, nullable=False, default=False)
    dedup_key = Column(Text, nullable=True)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        UniqueConstraint('dedup_key', name='uq_notifications_dedup_key'),
        Index('idx_notifications_user_created', 'user_id', 'created_at'),
    )
