"""
Notification Module

In-app notifications with deduplication, optional async processing, and
the job-posted fan-out.

Usage:
    from notification import NotificationService, NotificationMessageBuilder

    service = NotificationService(repo)
    service.notify(NotificationMessageBuilder.application_submitted(
        student_id, application_id, course_name
    ))
"""

from notification.message_builder import (
    NotificationContent,
    NotificationMessageBuilder,
    build_dedup_key,
)

from notification.service import (
    NotificationService,
    process_notification_task,
)

from notification.fanout import (
    FanOutSummary,
    JobPostingFanOut,
    run_job_posted_fanout,
)

__all__ = [
    # Messages
    'NotificationContent',
    'NotificationMessageBuilder',
    'build_dedup_key',
    # Service
    'NotificationService',
    'process_notification_task',
    # Fan-out
    'FanOutSummary',
    'JobPostingFanOut',
    'run_job_posted_fanout',
]
