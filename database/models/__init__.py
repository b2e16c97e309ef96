from .base import Base, JSONDocument
from .user import User, ROLES
from .institution import Institution, Faculty, Course
from .application import Application, APPLICATION_STATUSES
from .company import Company, Job, JobApplication, COMPANY_STATUSES, JOB_APPLICATION_STATUSES
from .transcript import Transcript
from .notification import Notification, NOTIFICATION_TYPES

__all__ = [
    'Base',
    'JSONDocument',
    'User',
    'ROLES',
    'Institution',
    'Faculty',
    'Course',
    'Application',
    'APPLICATION_STATUSES',
    'Company',
    'Job',
    'JobApplication',
    'COMPANY_STATUSES',
    'JOB_APPLICATION_STATUSES',
    'Transcript',
    'Notification',
    'NOTIFICATION_TYPES',
]
