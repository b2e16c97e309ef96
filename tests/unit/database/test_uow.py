import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from core.errors import DependencyUnavailable, NotFound
from database.models import User
from database.uow import career_uow
from tests import make_store, seed_user


class TestCareerUow(unittest.TestCase):

    def setUp(self):
        self.engine, self.session_factory = make_store()

    def tearDown(self):
        self.engine.dispose()

    def test_commits_on_success(self):
        with career_uow(self.session_factory) as repo:
            seed_user(repo.db, "s1")

        session = self.session_factory()
        self.assertIsNotNone(session.get(User, "s1"))
        session.close()

    def test_rolls_back_on_error(self):
        with self.assertRaises(NotFound):
            with career_uow(self.session_factory) as repo:
                seed_user(repo.db, "s1")
                repo.users.get_or_404("missing")

        session = self.session_factory()
        self.assertIsNone(session.get(User, "s1"))
        session.close()

    def test_store_errors_become_dependency_unavailable(self):
        session = MagicMock()
        factory = MagicMock(return_value=session)

        with self.assertRaises(DependencyUnavailable) as ctx:
            with career_uow(factory):
                raise OperationalError("SELECT 1", {}, Exception("canceling statement due to statement timeout"))

        self.assertTrue(ctx.exception.retryable)
        session.rollback.assert_called_once()
        session.close.assert_called_once()


if __name__ == '__main__':
    unittest.main()
