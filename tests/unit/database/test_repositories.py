#!/usr/bin/env python3
"""
Repository tests against an in-memory SQLite store.
"""

import unittest

from sqlalchemy.exc import IntegrityError

from core.errors import ConflictError, NotFound, ValidationError
from database.models import Application, User
from database.repository import CareerRepository
from tests import at, make_store, seed_institution, seed_transcript, seed_user


class RepositoryTestCase(unittest.TestCase):

    def setUp(self):
        self.engine, self.session_factory = make_store()
        self.session = self.session_factory()
        self.repo = CareerRepository(self.session)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()


class TestBaseRepository(RepositoryTestCase):

    def test_get_many_skips_missing_ids(self):
        seed_user(self.session, "a")
        seed_user(self.session, "b")

        found = self.repo.users.get_many(["a", "b", "zzz", None])

        self.assertEqual(set(found), {"a", "b"})
        self.assertEqual(self.repo.users.get_many([]), {})

    def test_get_or_404(self):
        with self.assertRaises(NotFound) as ctx:
            self.repo.users.get_or_404("nobody", "Student")
        self.assertEqual(str(ctx.exception), "Student not found")

    def test_query_operators(self):
        seed_user(self.session, "s1", "student")
        seed_user(self.session, "c1", "company")

        self.assertEqual([u.id for u in self.repo.users.query("role", "==", "company")], ["c1"])
        self.assertEqual({u.id for u in self.repo.users.query("id", "in", ["s1", "c1"])}, {"s1", "c1"})
        with self.assertRaises(ValidationError):
            self.repo.users.query("role", "~=", "x")
        with self.assertRaises(ValidationError):
            self.repo.users.query("nickname", "==", "x")

    def test_add_update_count(self):
        new_id = self.repo.users.add(User(id="u1", email="u1@example.com", role="student", profile={}))
        self.assertEqual(new_id, "u1")

        self.repo.users.update("u1", {"role": "company"})

        self.assertEqual(self.repo.users.count(role="company"), 1)
        self.assertEqual(self.repo.users.count(), 1)


class TestUserRepository(RepositoryTestCase):

    def test_student_pages_are_keyset_ordered_and_need_a_transcript(self):
        for i in range(5):
            seed_user(self.session, f"s{i}")
            seed_transcript(self.session, f"s{i}", 3.0)
        seed_user(self.session, "no-transcript")
        seed_user(self.session, "company", "company")
        seed_transcript(self.session, "company", 3.0)

        pages = list(self.repo.users.iter_student_pages_with_transcripts(page_size=2))

        self.assertEqual([[u.id for u in page] for page in pages], [["s0", "s1"], ["s2", "s3"], ["s4"]])

    def test_update_profile_merges(self):
        user = seed_user(self.session, "s1", profile={"first_name": "Ada"})
        self.repo.users.update_profile(user, {"phone": "123"})
        self.session.commit()
        self.session.expire_all()

        self.assertEqual(self.session.get(User, "s1").profile, {"first_name": "Ada", "phone": "123"})


class TestTranscriptRepository(RepositoryTestCase):

    def test_latest_transcript_wins(self):
        seed_user(self.session, "s1")
        seed_user(self.session, "s2")
        seed_transcript(self.session, "s1", 2.9, uploaded_at=at(0))
        newest = seed_transcript(self.session, "s1", 3.6, uploaded_at=at(60))
        only = seed_transcript(self.session, "s2", 3.1, uploaded_at=at(30))

        self.assertEqual(self.repo.transcripts.latest_for("s1").id, newest.id)
        latest = self.repo.transcripts.latest_for_many(["s1", "s2", "s3"])
        self.assertEqual({k: v.id for k, v in latest.items()}, {"s1": newest.id, "s2": only.id})
        self.assertIsNone(self.repo.transcripts.latest_for("s3"))


class TestApplicationRepository(RepositoryTestCase):

    def setUp(self):
        super().setUp()
        seed_user(self.session, "S")
        seed_institution(self.session, "I", courses=("c1", "c2", "c3"))
        self.session.commit()

    def insert(self, course="c1"):
        return self.repo.applications.insert_in_free_slot("S", f"I-{course}", "I", limit=2)

    def test_slots_fill_lowest_first(self):
        self.assertEqual(self.insert("c1").active_slot, 1)
        self.assertEqual(self.insert("c2").active_slot, 2)
        self.assertEqual(self.repo.applications.used_slots("S", "I"), {1, 2})

    def test_full_slots_conflict(self):
        self.insert("c1")
        self.insert("c2")
        with self.assertRaises(ConflictError):
            self.insert("c3")

    def test_withdrawn_application_releases_slot(self):
        first = self.insert("c1")
        self.repo.applications.set_status(first, "withdrawn")
        self.assertEqual(self.repo.applications.used_slots("S", "I"), set())
        self.assertEqual(first.status, "withdrawn")

    def test_store_rejects_duplicate_slot(self):
        self.insert("c1")
        self.session.commit()

        self.session.add(Application(
            student_id="S", course_id="I-c2", institution_id="I", status="pending", active_slot=1
        ))
        with self.assertRaises(IntegrityError):
            self.session.flush()
        self.session.rollback()

    def test_list_for_institution_filters_status(self):
        first = self.insert("c1")
        self.insert("c2")
        self.repo.applications.set_status(first, "rejected")

        pending = self.repo.applications.list_for_institution("I", "pending")
        self.assertEqual([a.course_id for a in pending], ["I-c2"])
        self.assertEqual(len(self.repo.applications.list_for_institution("I")), 2)


if __name__ == '__main__':
    unittest.main()
