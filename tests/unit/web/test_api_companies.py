#!/usr/bin/env python3
"""
API tests for company endpoints: profile, job posting, ranked applicants and
job-application review.
"""

from unittest.mock import patch

from database.models import JobApplication
from tests import at, seed_company, seed_job, seed_transcript, seed_user
from tests.harness import ApiTestCase


class CompanyApiTestCase(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.company = self.login_as("co-admin", "company")
        seed_company(self.db, "co", "co-admin")
        self.commit()


class TestCompanyProfile(CompanyApiTestCase):

    def test_get_and_update(self):
        self.assertEqual(self.client.get("/api/companies/profile", headers=self.company).json()['company']['id'], "co")

        response = self.client.put(
            "/api/companies/profile", json={"industry": "Mining"}, headers=self.company
        )

        self.assertEqual(response.json()['company']['industry'], "Mining")

    def test_company_user_without_company(self):
        headers = self.login_as("lonely", "company")
        self.assertEqual(self.client.get("/api/companies/profile", headers=headers).status_code, 404)


class TestJobPosting(CompanyApiTestCase):

    def job_payload(self, **extra):
        return {
            "title": "Cloud Engineer",
            "min_gpa": 3.0,
            "required_certificates": ["AWS"],
            "min_years_experience": 1,
            **extra,
        }

    @patch('web.backend.routers.companies.run_job_posted_fanout')
    def test_post_job_schedules_fanout(self, mock_fanout):
        response = self.client.post("/api/companies/jobs", json=self.job_payload(), headers=self.company)

        self.assertEqual(response.status_code, 201)
        data = response.json()
        self.assertTrue(data['notifications_scheduled'])
        self.assertEqual(data['job']['company_name'], "Company co")
        self.assertEqual(data['job']['requirements']['required_certificates'], ["AWS"])
        mock_fanout.assert_called_once_with(
            data['job']['id'],
            self.session_factory,
            self.ctx.config,
            self.ctx.config.database.statement_timeout_seconds,
        )

    @patch('web.backend.routers.companies.run_job_posted_fanout')
    def test_suspended_company_cannot_post(self, mock_fanout):
        seed_user(self.db, "root", "admin")
        self.commit()
        self.client.put("/api/admin/companies/co/status", json={"status": "suspended"}, headers=self.sign_in("root"))

        response = self.client.post("/api/companies/jobs", json=self.job_payload(), headers=self.company)

        self.assertEqual(response.status_code, 403)
        mock_fanout.assert_not_called()

    def test_missing_title(self):
        response = self.client.post("/api/companies/jobs", json={"min_gpa": 3.0}, headers=self.company)
        self.assertEqual(response.status_code, 400)

    def test_list_and_deactivate_job(self):
        seed_job(self.db, "job", "co")
        self.commit()

        self.assertEqual(self.client.get("/api/companies/jobs", headers=self.company).json()['count'], 1)
        response = self.client.patch("/api/companies/jobs/job", json={"is_active": False}, headers=self.company)

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()['job']['is_active'])

    def test_other_company_cannot_edit(self):
        seed_user(self.db, "rival-admin", "company")
        seed_company(self.db, "rival", "rival-admin")
        seed_job(self.db, "job", "rival")
        self.commit()

        response = self.client.patch("/api/companies/jobs/job", json={"is_active": False}, headers=self.company)

        self.assertEqual(response.status_code, 403)


class TestRankedApplicants(CompanyApiTestCase):

    def setUp(self):
        super().setUp()
        seed_job(self.db, "job", "co", min_gpa=3.0, certificates=["AWS"])
        for student_id, gpa, certificates, minutes in [
            ("A", 3.5, ["AWS", "PMP"], 10),
            ("B", 3.8, [], 0),
            ("C", None, [], 5),
        ]:
            seed_user(self.db, student_id, profile={"first_name": student_id})
            if gpa is not None:
                seed_transcript(self.db, student_id, gpa, certificates)
            self.db.add(JobApplication(
                id=f"ja-{student_id}", student_id=student_id, job_id="job", status="applied",
                applied_at=at(minutes),
            ))
        self.commit()

    def test_qualified_applicant_ranks_first(self):
        response = self.client.get("/api/companies/jobs/job/applicants", headers=self.company)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['count'], 3)
        self.assertEqual(data['qualified_count'], 1)
        applicants = data['applicants']
        self.assertEqual([a['student_id'] for a in applicants], ["A", "B", "C"])
        self.assertEqual(applicants[0]['rank'], 1)
        self.assertEqual(applicants[0]['match_score'], 41.0)
        self.assertEqual(applicants[0]['matched_certificates'], ["aws"])
        self.assertFalse(applicants[1]['qualified'])
        self.assertIn("missing required certificates: aws", applicants[1]['reasons'])
        self.assertEqual(applicants[2]['reasons'][0], "no transcript on file")

    def test_ranking_is_stable_across_calls(self):
        first = self.client.get("/api/companies/jobs/job/applicants", headers=self.company).json()
        second = self.client.get("/api/companies/jobs/job/applicants", headers=self.company).json()
        self.assertEqual(first, second)

    def test_only_owner_sees_applicants(self):
        headers = self.login_as("rival-admin", "company")
        seed_company(self.db, "rival", "rival-admin")
        self.commit()

        response = self.client.get("/api/companies/jobs/job/applicants", headers=headers)

        self.assertEqual(response.status_code, 403)

    def set_status(self, job_application_id, status):
        return self.client.put(
            f"/api/companies/job-applications/{job_application_id}/status",
            json={"status": status}, headers=self.company,
        )

    def test_shortlist_qualified_applicant(self):
        response = self.set_status("ja-A", "shortlisted")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.fresh(JobApplication, "ja-A").status, "shortlisted")
        notifications = self.client.get("/api/students/notifications", headers=self.sign_in("A")).json()
        self.assertEqual(notifications['notifications'][0]['title'], "Job Application Shortlisted")

    def test_unqualified_applicant_cannot_be_shortlisted(self):
        response = self.set_status("ja-B", "shortlisted")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], "applicant does not meet job requirements")
        self.assertEqual(self.fresh(JobApplication, "ja-B").status, "applied")

    def test_rejected_is_final(self):
        self.assertEqual(self.set_status("ja-B", "rejected").status_code, 200)
        self.assertEqual(self.set_status("ja-B", "shortlisted").status_code, 400)

    def test_unknown_job_application(self):
        self.assertEqual(self.set_status("ghost", "rejected").status_code, 404)
