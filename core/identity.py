"""
Identity provider backed by the Firebase Admin SDK.

Sign-in and token issuance happen client-side; the backend only verifies ID
tokens and looks users up. Every SDK call runs under the configured timeout
and a slow or failing provider surfaces as DependencyUnavailable.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin import exceptions as firebase_exceptions

from core.config_loader import IdentityConfig
from core.errors import AuthenticationError, DependencyUnavailable
from core.utils import run_with_timeout

logger = logging.getLogger(__name__)

APP_NAME = 'career-identity'


@dataclass(frozen=True)
class VerifiedIdentity:
    subject_id: str
    email: Optional[str]
    email_verified: bool = False


@dataclass(frozen=True)
class IdentityUser:
    uid: str
    email: Optional[str]
    email_verified: bool = False
    disabled: bool = False


class FirebaseIdentityProvider:
    def __init__(self, config: Optional[IdentityConfig] = None):
        self.config = config or IdentityConfig()
        self._app = None
        self._lock = threading.Lock()

    def _get_app(self) -> firebase_admin.App:
        if self._app is not None:
            return self._app

        with self._lock:
            if self._app is not None:
                return self._app
            try:
                self._app = firebase_admin.get_app(APP_NAME)
                return self._app
            except ValueError:
                pass

            options = {'projectId': self.config.project_id} if self.config.project_id else None
            try:
                if self.config.credentials_path:
                    cred = credentials.Certificate(self.config.credentials_path)
                else:
                    cred = credentials.ApplicationDefault()
                self._app = firebase_admin.initialize_app(cred, options, name=APP_NAME)
                logger.info("Firebase Admin SDK initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Firebase: {e}")
                raise DependencyUnavailable("identity provider not configured") from e
            return self._app

    def _call(self, func, what: str):
        return run_with_timeout(func, self.config.verify_timeout_seconds, what=what)

    def verify_token(self, id_token: Optional[str]) -> VerifiedIdentity:
        if not id_token:
            raise AuthenticationError("No token provided")

        app = self._get_app()
        try:
            decoded = self._call(lambda: auth.verify_id_token(id_token, app=app), "token verification")
        except (auth.InvalidIdTokenError, auth.UserDisabledError, ValueError) as e:
            logger.info(f"Token verification failed: {e}")
            raise AuthenticationError("Invalid token") from e
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Identity provider error during token verification: {e}")
            raise DependencyUnavailable("identity provider unavailable") from e

        return VerifiedIdentity(
            subject_id=decoded['uid'],
            email=decoded.get('email'),
            email_verified=bool(decoded.get('email_verified', False)),
        )

    def _to_user(self, record) -> IdentityUser:
        return IdentityUser(
            uid=record.uid,
            email=record.email,
            email_verified=bool(record.email_verified),
            disabled=bool(record.disabled),
        )

    def lookup_user_by_email(self, email: str) -> Optional[IdentityUser]:
        app = self._get_app()
        try:
            record = self._call(lambda: auth.get_user_by_email(email, app=app), "user lookup")
        except auth.UserNotFoundError:
            return None
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Identity provider error looking up {email}: {e}")
            raise DependencyUnavailable("identity provider unavailable") from e
        return self._to_user(record)

    def get_user(self, uid: str) -> Optional[IdentityUser]:
        app = self._get_app()
        try:
            record = self._call(lambda: auth.get_user(uid, app=app), "user lookup")
        except auth.UserNotFoundError:
            return None
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Identity provider error looking up {uid}: {e}")
            raise DependencyUnavailable("identity provider unavailable") from e
        return self._to_user(record)

    def generate_verification_link(self, email: str) -> str:
        app = self._get_app()
        settings = None
        if self.config.verification_continue_url:
            settings = auth.ActionCodeSettings(url=self.config.verification_continue_url)
        try:
            return self._call(
                lambda: auth.generate_email_verification_link(email, action_code_settings=settings, app=app),
                "verification link generation",
            )
        except firebase_exceptions.FirebaseError as e:
            logger.error(f"Failed to generate verification link for {email}: {e}")
            raise DependencyUnavailable("identity provider unavailable") from e
