"""
Unit tests for the Firestore data-access layer, using a mocked client.
"""

import unittest
from unittest.mock import MagicMock

from firebase_service import FirebaseService


def make_doc(doc_id, data, exists=True):
    doc = MagicMock()
    doc.id = doc_id
    doc.exists = exists
    doc.to_dict.return_value = data
    return doc


class TestFirebaseService(unittest.TestCase):

    def setUp(self):
        self.db = MagicMock()
        self.collection = self.db.collection.return_value
        self.service = FirebaseService(db=self.db)

    def test_get_user_profile(self):
        self.collection.document.return_value.get.return_value = make_doc("u1", {"skills": ["react"]})

        profile = self.service.get_user_profile("u1")

        self.db.collection.assert_called_with("users")
        self.collection.document.assert_called_with("u1")
        self.assertEqual(profile, {"skills": ["react"]})

    def test_get_missing_user_profile(self):
        self.collection.document.return_value.get.return_value = make_doc("u1", None, exists=False)
        self.assertIsNone(self.service.get_user_profile("u1"))

    def test_client_failure_wrapped(self):
        self.collection.document.return_value.get.side_effect = Exception("deadline exceeded")
        with self.assertRaises(RuntimeError) as ctx:
            self.service.get_user_profile("u1")
        self.assertIn("u1", str(ctx.exception))

    def test_list_jobs_injects_document_id(self):
        self.collection.stream.return_value = [
            make_doc("j1", {"track": "backend"}),
            make_doc("j2", {"track": "frontend"}),
        ]

        jobs = self.service.list_jobs()

        self.db.collection.assert_called_with("jobs")
        self.assertEqual([j["id"] for j in jobs], ["j1", "j2"])
        self.assertEqual(jobs[1]["track"], "frontend")

    def test_list_learning_resources_collection_name(self):
        self.collection.stream.return_value = []
        self.assertEqual(self.service.list_learning_resources(), [])
        self.db.collection.assert_called_with("learningResources")

    def test_collection_overrides(self):
        service = FirebaseService(db=self.db, collections={"jobs": "jobs_v2"})
        self.collection.stream.return_value = []
        service.list_jobs()
        self.db.collection.assert_called_with("jobs_v2")

    def test_update_user_profile_merges(self):
        self.service.update_user_profile("u1", {"skills": ["go"]})
        self.collection.document.return_value.set.assert_called_once_with({"skills": ["go"]}, merge=True)

    def test_seed_jobs_counts_failures(self):
        ref = MagicMock(id="new")
        self.collection.add.side_effect = [(None, ref), Exception("quota"), (None, ref)]

        stats = self.service.seed_jobs([{"title": "a"}, {"title": "b"}, {"title": "c"}])

        self.assertEqual(stats, {"success": 2, "failed": 1})

    def test_delete_all_jobs(self):
        docs = [make_doc("j1", {}), make_doc("j2", {})]
        self.collection.stream.return_value = docs

        self.assertEqual(self.service.delete_all_jobs(), 2)
        for doc in docs:
            doc.reference.delete.assert_called_once_with()

    def test_count_jobs(self):
        self.collection.stream.return_value = [make_doc("j1", {}), make_doc("j2", {}), make_doc("j3", {})]
        self.assertEqual(self.service.count_jobs(), 3)

    def test_migrate_legacy_jobs(self):
        self.collection.stream.return_value = [
            make_doc("Data Scientist", {"Job Details": "Models", "Company Name": "Analytics Pro"}),
            make_doc("done", {"skillsRequired": ["go"], "experienceRequired": "Senior", "track": "Backend"}),
        ]

        stats = self.service.migrate_legacy_jobs()

        self.db.collection.assert_called_with("Jobs")
        self.assertEqual(stats, {"total": 2, "updated": 1, "skipped": 1})
        self.collection.document.assert_called_once_with("Data Scientist")
        updates = self.collection.document.return_value.update.call_args[0][0]
        self.assertEqual(updates["track"], "Data Science")
        self.assertEqual(updates["company"], "Analytics Pro")

    def test_migrate_failure_wrapped(self):
        self.collection.stream.side_effect = Exception("unavailable")
        with self.assertRaises(RuntimeError):
            self.service.migrate_legacy_jobs("OldJobs")


if __name__ == "__main__":
    unittest.main()
