from typing import Any, Optional

from pydantic import BaseModel


class NotificationContent(BaseModel):
    """One in-app notification, ready to be recorded or queued."""
    user_id: str
    title: str
    message: str
    type: str  # application|job|status
    job_id: Optional[str] = None
    dedup_key: Optional[str] = None


def build_dedup_key(user_id: Any, subject_id: Any, event: str) -> str:
    """Identity of one (recipient, subject, event); repeats of it are suppressed."""
    return f"{event}:{subject_id}:{user_id}"


class NotificationMessageBuilder:
    @staticmethod
    def application_submitted(student_id: str, application_id: str, course_name: Optional[str]) -> NotificationContent:
        return NotificationContent(
            user_id=student_id,
            title="Application Submitted",
            message=f"Your application for {course_name or 'the course'} has been submitted successfully",
            type="application",
            dedup_key=build_dedup_key(student_id, application_id, "application_submitted"),
        )

    @staticmethod
    def application_status_changed(
        student_id: str,
        application_id: str,
        course_name: Optional[str],
        status: str
    ) -> NotificationContent:
        return NotificationContent(
            user_id=student_id,
            title=f"Application {status.capitalize()}",
            message=f"Your application for {course_name or 'the course'} is now {status}",
            type="status",
            dedup_key=build_dedup_key(student_id, application_id, f"application_{status}"),
        )

    @staticmethod
    def job_posted(student_id: str, job) -> NotificationContent:
        company = f" at {job.company_name}" if job.company_name else ""
        return NotificationContent(
            user_id=student_id,
            title="New Job Opportunity",
            message=f"You qualify for {job.title}{company}",
            type="job",
            job_id=job.id,
            dedup_key=build_dedup_key(student_id, job.id, "job_posted"),
        )

    @staticmethod
    def job_application_status_changed(
        student_id: str,
        job_application_id: str,
        job,
        status: str
    ) -> NotificationContent:
        title = job.title if job is not None else "the job"
        return NotificationContent(
            user_id=student_id,
            title=f"Job Application {status.capitalize()}",
            message=f"Your application for {title} is now {status}",
            type="status",
            job_id=job.id if job is not None else None,
            dedup_key=build_dedup_key(student_id, job_application_id, f"job_application_{status}"),
        )
