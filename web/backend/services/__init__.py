"""Business logic services."""

from .auth_service import AuthService
from .application_service import ApplicationService
from .student_service import StudentService
from .catalog_service import CatalogService
from .job_service import JobService
from .report_service import ReportService
