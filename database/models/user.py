from sqlalchemy import Column, Text, Boolean, TIMESTAMP, Index

from core.utils import utcnow
from .base import Base, JSONDocument

ROLES = ('student', 'institution', 'company', 'admin')


class User(Base):
    """
    Platform account keyed by the identity provider's subject id.

    Student profiles live in the `profile` document:
        {
            "name": "...",
            "contact": {...},
            "certificates": [{"name": "AWS", "issuer": "...", "issued_at": "2023-05"}],
            "work_experience": [
                {"company": "...", "title": "...", "start_date": "2021-01", "end_date": "2022-06"},
                {"company": "...", "years": 1.5}
            ]
        }
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True)
    email = Column(Text, nullable=False)
    role = Column(Text, nullable=False)  # student|institution|company|admin
    profile = Column(JSONDocument, nullable=False, default=dict)
    is_verified = Column(Boolean, nullable=False, default=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index('idx_users_role_id', 'role', 'id'),
        Index('idx_users_created_at', 'created_at'),
    )

    @property
    def certificates(self):
        return (self.profile or {}).get('certificates') or []

    @property
    def work_experience(self):
        return (self.profile or {}).get('work_experience') or []
