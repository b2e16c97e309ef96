from dataclasses import dataclass
from typing import Optional

from rq import Queue

from core.config_loader import AppConfig
from core.eligibility import ApplicationAdmissionService, EligibilityChecker
from core.identity import FirebaseIdentityProvider
from core.scorer import MatchingEngine
from database.repository import CareerRepository
from notification.service import NotificationService, connect_queue


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Holds the stateless singletons (configuration, identity provider,
    engines). Session-bound services are built per unit of work from a
    CareerRepository via the factory methods below.
    """
    config: AppConfig
    identity: FirebaseIdentityProvider
    matching_engine: MatchingEngine
    eligibility_checker: EligibilityChecker
    notification_queue: Optional[Queue] = None

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        return cls(
            config=config,
            identity=FirebaseIdentityProvider(config.identity),
            matching_engine=MatchingEngine(config.scoring),
            eligibility_checker=EligibilityChecker(config.eligibility),
            notification_queue=connect_queue(config.notifications),
        )

    def notification_service(self, repo: CareerRepository) -> NotificationService:
        return NotificationService(
            repo, self.config.notifications, queue=self.notification_queue, connect=False
        )

    def admission_service(self, repo: CareerRepository) -> ApplicationAdmissionService:
        return ApplicationAdmissionService(
            repo,
            config=self.config.eligibility,
            notifier=self.notification_service(repo),
            checker=self.eligibility_checker,
        )
