"""API route handlers."""

from .auth import router as auth_router
from .students import router as students_router
from .institutions import router as institutions_router
from .institution import router as institution_router
from .companies import router as companies_router
from .admin import router as admin_router
