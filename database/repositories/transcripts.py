from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import select

from database.models import Transcript
from database.repositories.base import BaseRepository


class TranscriptRepository(BaseRepository):
    model = Transcript

    def add_transcript(
        self,
        student_id: Any,
        gpa: Optional[float],
        certificates: Optional[List[Any]] = None,
        file_url: Optional[str] = None
    ) -> Transcript:
        transcript = Transcript(
            student_id=student_id,
            gpa=gpa,
            certificates=list(certificates or []),
            file_url=file_url
        )
        self.db.add(transcript)
        self.db.flush()
        return transcript

    def latest_for(self, student_id: Any) -> Optional[Transcript]:
        stmt = (
            select(Transcript)
            .where(Transcript.student_id == student_id)
            .order_by(Transcript.uploaded_at.desc(), Transcript.id.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def latest_for_many(self, student_ids: Iterable[Any]) -> Dict[Any, Transcript]:
        """Latest transcript per student for a whole page in one query."""
        ids = {i for i in student_ids if i is not None}
        if not ids:
            return {}
        stmt = (
            select(Transcript)
            .where(Transcript.student_id.in_(ids))
            .order_by(Transcript.student_id, Transcript.uploaded_at.desc(), Transcript.id.desc())
        )
        latest: Dict[Any, Transcript] = {}
        for transcript in self.db.execute(stmt).scalars():
            latest.setdefault(transcript.student_id, transcript)
        return latest
