from database.repositories.base import BaseRepository
from database.repositories.users import UserRepository
from database.repositories.transcripts import TranscriptRepository
from database.repositories.applications import ApplicationRepository
from database.repositories.catalog import InstitutionRepository, CourseRepository, FacultyRepository
from database.repositories.jobs import CompanyRepository, JobRepository, JobApplicationRepository
from database.repositories.notifications import NotificationRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'TranscriptRepository',
    'ApplicationRepository',
    'InstitutionRepository',
    'CourseRepository',
    'FacultyRepository',
    'CompanyRepository',
    'JobRepository',
    'JobApplicationRepository',
    'NotificationRepository',
]
