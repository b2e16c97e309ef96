#!/usr/bin/env python3
"""
Auth service - platform profiles for identities verified by the identity provider.
"""

import logging

from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.errors import AuthenticationError, InternalError, NotFound, PermissionDenied, ValidationError
from core.identity import VerifiedIdentity
from database.repository import CareerRepository
from ..models.requests import CreateProfileRequest
from ..models.responses import ProfileResponse, ResendVerificationResponse, VerificationStatusResponse
from ..utils import to_user_profile

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account registration and verification."""

    def __init__(self, db: Session, ctx: AppContext, identity_provider=None):
        self.db = db
        self.repo = CareerRepository(db)
        self.ctx = ctx
        self.identity = identity_provider or ctx.identity

    def create_profile(self, identity: VerifiedIdentity, request: CreateProfileRequest) -> ProfileResponse:
        if not identity.email:
            raise ValidationError("Identity has no email address")

        if request.role == 'admin':
            expected = self.ctx.config.identity.admin_access_code
            if not expected:
                logger.error("Admin registration attempted but no admin access code is configured")
                raise InternalError("admin access code not configured")
            if request.admin_code != expected:
                raise PermissionDenied("Invalid admin access code")

        if self.repo.users.get(identity.subject_id) is not None:
            raise ValidationError("User profile already exists. Please login instead.")

        profile = {
            'first_name': request.first_name.strip(),
            'last_name': request.last_name.strip(),
            'phone': (request.phone or '').strip(),
        }
        user = self.repo.users.create_user(
            user_id=identity.subject_id,
            email=identity.email.strip().lower(),
            role=request.role,
            profile=profile,
            is_verified=identity.email_verified,
        )
        self.repo.commit()
        logger.info(f"Created {user.role} profile for {user.id}")
        return ProfileResponse(success=True, user=to_user_profile(user))

    def login(self, identity: VerifiedIdentity) -> ProfileResponse:
        user = self.repo.users.get(identity.subject_id)
        if user is None:
            raise NotFound("User profile not found. Please complete registration.")
        if not identity.email_verified:
            raise AuthenticationError("Please verify your email before logging in.")

        if not user.is_verified:
            user.is_verified = True
            self.repo.commit()
            logger.info(f"Marked {user.id} as verified")
        return ProfileResponse(success=True, user=to_user_profile(user))

    def resend_verification(self, email: str) -> ResendVerificationResponse:
        identity = self.identity
        if identity.lookup_user_by_email(email) is None:
            raise NotFound("No user found with this email address.")

        link = identity.generate_verification_link(email)
        logger.info(f"Verification link generated for {email}")
        return ResendVerificationResponse(
            success=True,
            message="Verification email sent successfully!",
            email=email,
            verification_link=link if self.ctx.config.identity.expose_verification_link else None,
        )

    def verification_status(self, identity: VerifiedIdentity) -> VerificationStatusResponse:
        record = self.identity.get_user(identity.subject_id)
        if record is None:
            raise NotFound("User not found")
        return VerificationStatusResponse(
            success=True,
            uid=record.uid,
            email=record.email,
            email_verified=record.email_verified,
        )
