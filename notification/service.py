#!/usr/bin/env python3
"""
Notification Service - in-app notification records with deduplication.

Delivery is fire-and-forget: a failed write is logged and never propagates
into the operation that triggered it.

Usage:
    from notification.service import NotificationService

    service = NotificationService(repo, config.notifications)
    service.notify(NotificationMessageBuilder.application_submitted(
        student_id, application_id, course.name
    ))

With `use_async_queue` enabled the record is written by an RQ worker
(`python -m notification.worker`) instead of inline.
"""

import logging
from typing import Any, Dict, Optional

from redis import Redis
from rq import Queue, Retry

from core.config_loader import NotificationConfig
from database.database import db_session_scope
from database.repository import CareerRepository
from notification.message_builder import NotificationContent

logger = logging.getLogger(__name__)

QUEUE_NAME = 'notifications'


def connect_queue(config: NotificationConfig) -> Optional[Queue]:
    """Connect to the notification queue, or None for sync mode."""
    if not config.use_async_queue:
        return None
    if not config.redis_url:
        logger.warning("Async queue enabled but no redis_url configured. Using sync mode.")
        return None
    try:
        redis_conn = Redis.from_url(config.redis_url)
        # Validate connection with ping before using
        redis_conn.ping()
        logger.info("Notification service connected to Redis")
        return Queue(QUEUE_NAME, connection=redis_conn)
    except Exception as e:
        logger.error(f"Redis connection failed: {e}. Falling back to sync mode.")
        return None


class NotificationService:
    """
    Records in-app notifications.

    This service coordinates:
    1. Deduplication by dedup key
    2. A savepoint per write so one failure never poisons the caller's transaction
    3. Optional queueing for async processing (via RQ)
    """

    def __init__(
        self,
        repo: CareerRepository,
        config: Optional[NotificationConfig] = None,
        queue: Optional[Queue] = None,
        connect: bool = True
    ):
        """
        Args:
            repo: Repository bound to the caller's session
            config: Notification settings
            queue: Pre-connected RQ queue (shared across requests)
            connect: Connect to Redis when no queue is given and async mode is enabled
        """
        self.repo = repo
        self.config = config or NotificationConfig()
        if queue is None and connect:
            queue = connect_queue(self.config)
        self.queue = queue
        self.async_mode = queue is not None

    def record(self, content: NotificationContent) -> Optional[str]:
        """
        Write one notification inside a savepoint.

        Returns the new id, or None when an identical notification (same dedup
        key) already exists. Raises on store errors; the savepoint is rolled
        back first.
        """
        notifications = self.repo.notifications
        if content.dedup_key and notifications.exists_with_dedup_key(content.dedup_key):
            logger.info(f"Suppressing duplicate notification {content.dedup_key}")
            return None

        with self.repo.db.begin_nested():
            notification = notifications.create_notification(
                user_id=content.user_id,
                title=content.title,
                message=content.message,
                type=content.type,
                job_id=content.job_id,
                dedup_key=content.dedup_key,
            )
        return notification.id

    def notify(self, content: NotificationContent, commit: bool = True) -> Optional[str]:
        """
        Deliver a notification without ever raising.

        Returns the notification id (or queued job id), None if suppressed,
        disabled or failed.
        """
        if not self.config.enabled:
            return None

        try:
            if self.async_mode:
                # Add retry policy for transient failures
                job = self.queue.enqueue(
                    process_notification_task,
                    content.model_dump(),
                    job_timeout=self.config.job_timeout,
                    result_ttl=86400,
                    retry=Retry(max=3, interval=[10, 30, 60])
                )
                logger.info(f"Queued notification as job {job.id}")
                return job.id

            notification_id = self.record(content)
            if commit:
                self.repo.commit()
            return notification_id

        except Exception as e:
            logger.error(f"Failed to deliver '{content.title}' notification to {content.user_id}: {e}")
            if commit and not self.async_mode:
                self.repo.rollback()
            return None

    def get_queue_status(self) -> Dict[str, Any]:
        if not self.async_mode:
            return {'status': 'sync_mode', 'queue_length': 0}

        try:
            return {
                'status': 'active',
                'queue_length': len(self.queue),
            }
        except Exception as e:
            return {'status': 'error', 'error': str(e)}


# Worker task - must be at module level for RQ
def process_notification_task(notification_data: Dict[str, Any]) -> Optional[str]:
    """Record a queued notification (called by the RQ worker)."""
    content = NotificationContent(**notification_data)
    logger.info(f"Processing queued '{content.title}' notification for {content.user_id}")

    with db_session_scope() as session:
        service = NotificationService(CareerRepository(session), connect=False)
        return service.record(content)
