import time
import unittest
from datetime import datetime, timezone

from core.errors import DependencyUnavailable
from core.utils import as_utc, new_id, normalize_certificates, run_with_timeout


class TestNormalizeCertificates(unittest.TestCase):

    def test_names_and_records(self):
        names = normalize_certificates([" AWS ", {"name": "PMP", "issuer": "PMI"}, "", None, {"issuer": "x"}])
        self.assertEqual(names, frozenset({"aws", "pmp"}))

    def test_empty(self):
        self.assertEqual(normalize_certificates(None), frozenset())


class TestRunWithTimeout(unittest.TestCase):

    def test_returns_result(self):
        self.assertEqual(run_with_timeout(lambda: 42, 1), 42)

    def test_times_out(self):
        with self.assertRaises(DependencyUnavailable):
            run_with_timeout(lambda: time.sleep(0.5), 0.05, what="slow call")

    def test_no_timeout_runs_inline(self):
        self.assertEqual(run_with_timeout(lambda: "ok", None), "ok")


class TestHelpers(unittest.TestCase):

    def test_as_utc_on_naive(self):
        self.assertEqual(as_utc(datetime(2026, 1, 1)).tzinfo, timezone.utc)

    def test_new_id_is_unique_hex(self):
        a, b = new_id(), new_id()
        self.assertNotEqual(a, b)
        self.assertEqual(len(a), 32)


if __name__ == '__main__':
    unittest.main()
