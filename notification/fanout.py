#!/usr/bin/env python3
"""
Job-posted fan-out: notify every student who qualifies for a new job.

Students are scanned in keyset pages by id with their latest transcripts
batch-loaded per page. Each notification is written in its own savepoint
and each page is committed, so a failed write costs one notification and a
crash mid-scan keeps the pages already done. Re-running is safe: dedup keys
suppress notifications that already exist.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Callable, Optional

from core.config_loader import NotificationConfig
from core.scorer import MatchingEngine
from database.repository import CareerRepository
from database.uow import career_uow
from notification.message_builder import NotificationMessageBuilder
from notification.service import NotificationService

logger = logging.getLogger(__name__)


@dataclass
class FanOutSummary:
    scanned: int = 0
    qualified: int = 0
    notified: int = 0
    failed: int = 0
    suppressed: int = 0

    def to_dict(self):
        return asdict(self)


class JobPostingFanOut:
    def __init__(
        self,
        repo: CareerRepository,
        engine: MatchingEngine,
        config: Optional[NotificationConfig] = None,
        notifier: Optional[NotificationService] = None
    ):
        self.repo = repo
        self.engine = engine
        self.config = config or NotificationConfig()
        # Writes stay inline so each one gets its own savepoint
        self.notifier = notifier or NotificationService(repo, self.config, connect=False)

    def run(self, job_id: Any) -> FanOutSummary:
        summary = FanOutSummary()

        job = self.repo.jobs.get(job_id)
        if job is None or not job.is_active:
            logger.warning(f"Skipping fan-out for missing or inactive job {job_id}")
            return summary

        if not self.config.enabled:
            logger.info("Notifications disabled; skipping job fan-out")
            return summary

        for page in self.repo.users.iter_student_pages_with_transcripts(self.config.fanout_page_size):
            transcripts = self.repo.transcripts.latest_for_many(s.id for s in page)

            for student in page:
                summary.scanned += 1
                result = self.engine.evaluate_qualification_for_notification(
                    student, transcripts.get(student.id), job
                )
                if not result.qualified:
                    continue
                summary.qualified += 1

                try:
                    notification_id = self.notifier.record(
                        NotificationMessageBuilder.job_posted(student.id, job)
                    )
                except Exception as e:
                    summary.failed += 1
                    logger.error(f"Failed to notify student {student.id} about job {job.id}: {e}")
                    continue

                if notification_id is None:
                    summary.suppressed += 1
                else:
                    summary.notified += 1

            self.repo.commit()

        logger.info(
            f"Job {job.id} fan-out: scanned={summary.scanned} qualified={summary.qualified} "
            f"notified={summary.notified} failed={summary.failed} suppressed={summary.suppressed}"
        )
        return summary


def run_job_posted_fanout(job_id: Any, session_factory: Callable, config, timeout_seconds: Optional[float] = None):
    """
    Background entry point. Opens its own unit of work; any failure is logged
    and swallowed because the job is already posted.
    """
    try:
        with career_uow(session_factory, timeout_seconds=timeout_seconds) as repo:
            fanout = JobPostingFanOut(repo, MatchingEngine(config.scoring), config.notifications)
            return fanout.run(job_id)
    except Exception as e:
        logger.error(f"Job {job_id} fan-out aborted: {e}", exc_info=True)
        return None
