#!/usr/bin/env python3
"""
Auth endpoints - profile registration, login and email verification.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.identity import VerifiedIdentity
from database.models import User
from ..dependencies import get_app_context, get_current_identity, get_current_user, get_db, get_identity_provider
from ..models.requests import CreateProfileRequest, ResendVerificationRequest
from ..models.responses import ProfileResponse, ResendVerificationResponse, VerificationStatusResponse
from ..services.auth_service import AuthService
from ..utils import to_user_profile

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/profile", response_model=ProfileResponse, status_code=201)
def create_profile(
    request: CreateProfileRequest,
    identity: VerifiedIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """
    Create the platform profile for a signed-in identity.

    Admin profiles require the configured admin access code.
    """
    return AuthService(db, ctx).create_profile(identity, request)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(user: User = Depends(get_current_user)):
    return ProfileResponse(success=True, user=to_user_profile(user))


@router.post("/login", response_model=ProfileResponse)
def login(
    identity: VerifiedIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context)
):
    """Log in with a verified email; marks the profile verified on first login."""
    return AuthService(db, ctx).login(identity)


@router.post("/resend-verification", response_model=ResendVerificationResponse)
def resend_verification(
    request: ResendVerificationRequest,
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context),
    identity_provider=Depends(get_identity_provider)
):
    return AuthService(db, ctx, identity_provider).resend_verification(request.email.strip())


@router.get("/verification-status", response_model=VerificationStatusResponse)
def verification_status(
    identity: VerifiedIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
    ctx: AppContext = Depends(get_app_context),
    identity_provider=Depends(get_identity_provider)
):
    return AuthService(db, ctx, identity_provider).verification_status(identity)
