"""
API tests for the FastAPI service, with the Firestore catalog replaced by a fake.
"""

import os
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app import app, filter_resources, get_catalog_service
from skillgap.schemas import RecommendedResource


PROFILE = {"skills": ["react", "node.js"], "experienceLevel": "intermediate", "preferredTrack": "fullstack"}

JOB_DOCS = [
    {"id": "j1", "title": "Full Stack Engineer", "company": "Digital Solutions BD",
     "skillsRequired": ["react", "node.js", "mongodb"], "experienceRequired": "intermediate", "track": "fullstack"},
    {"id": "j2", "title": "DevOps Engineer",
     "skillsRequired": ["docker", "aws"], "experienceRequired": "advanced", "track": "devops"},
    {"id": "Legacy Job", "Job Details": "Not migrated yet"},
]

RESOURCE_DOCS = [
    {"id": "r1", "title": "MongoDB Basics", "platform": "MongoDB University", "cost": "Free",
     "relatedSkills": ["mongodb"], "url": "https://learn.mongodb.com"},
    {"id": "r2", "title": "Docker Mastery", "platform": "Udemy", "cost": "Paid",
     "relatedSkills": ["docker", "kubernetes"], "url": "https://udemy.com/docker"},
    {"id": "r3", "title": "AWS Cloud Practitioner", "platform": "AWS Skill Builder", "cost": "Free",
     "relatedSkills": ["aws", "docker"], "url": "https://skillbuilder.aws"},
]


class FakeCatalog:
    """In-memory stand-in for FirebaseService."""

    def __init__(self, profiles=None, jobs=None, resources=None):
        self.profiles = profiles or {}
        self.jobs = list(jobs or [])
        self.resources = list(resources or [])
        self.migrated_collections = []

    def get_user_profile(self, user_id):
        return self.profiles.get(user_id)

    def update_user_profile(self, user_id, profile_data):
        self.profiles.setdefault(user_id, {}).update(profile_data)

    def list_jobs(self):
        return [dict(j) for j in self.jobs]

    def list_learning_resources(self):
        return [dict(r) for r in self.resources]

    def count_jobs(self):
        return len(self.jobs)

    def seed_jobs(self, jobs):
        self.jobs.extend(jobs)
        return {"success": len(jobs), "failed": 0}

    def delete_all_jobs(self):
        deleted = len(self.jobs)
        self.jobs = []
        return deleted

    def migrate_legacy_jobs(self, collection_name=None):
        self.migrated_collections.append(collection_name)
        return {"total": 1, "updated": 1, "skipped": 0}


class APITestCase(unittest.TestCase):

    def setUp(self):
        self.catalog = FakeCatalog(
            profiles={"u1": dict(PROFILE), "empty": {"skills": [], "experienceLevel": "beginner"}},
            jobs=JOB_DOCS,
            resources=RESOURCE_DOCS,
        )
        app.dependency_overrides[get_catalog_service] = lambda: self.catalog
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()


class TestRecommendationsEndpoint(APITestCase):

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_inline_recommendations(self):
        response = self.client.post("/api/recommendations", json={
            "profile": PROFILE,
            "jobs": JOB_DOCS[:2],
            "resources": RESOURCE_DOCS,
        })

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["matches"][0]["jobId"], "j1")
        self.assertEqual(body["matches"][0]["score"], 80)
        self.assertEqual(body["matches"][0]["rank"], 1)
        self.assertEqual(body["matches"][0]["title"], "Full Stack Engineer")
        self.assertEqual(body["skillGap"], ["mongodb", "docker", "aws"])
        self.assertEqual(
            [(r["id"], r["forSkill"]) for r in body["resources"]],
            [("r1", "mongodb"), ("r2", "docker"), ("r3", "docker")],
        )

    def test_invalid_input_is_422_with_field(self):
        response = self.client.post("/api/recommendations", json={
            "profile": {**PROFILE, "experienceLevel": "wizard"},
            "jobs": [],
            "resources": [],
        })

        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["field"], "profile.experienceLevel")

    def test_top_k_limits_matches(self):
        response = self.client.post("/api/recommendations", json={
            "profile": PROFILE,
            "jobs": JOB_DOCS[:2],
            "resources": RESOURCE_DOCS,
            "topK": 1,
        })

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(set(body), {"matches", "skillGap", "suggestions", "resources"})
        self.assertEqual([m["jobId"] for m in body["matches"]], ["j1"])
        self.assertEqual(body["skillGap"], ["mongodb"])
        self.assertEqual([r["id"] for r in body["resources"]], ["r1"])

    def test_negative_top_k(self):
        response = self.client.post("/api/recommendations", json={"profile": PROFILE, "topK": -3})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["field"], "topK")


class TestStoredCatalogEndpoints(APITestCase):

    def test_job_matches_skips_legacy_documents(self):
        response = self.client.post("/api/job-matches", json={"user_id": "u1"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual([m["jobId"] for m in body["matches"]], ["j1", "j2"])
        self.assertEqual(body["matches"][1]["missingSkills"], ["docker", "aws"])

    def test_job_matches_top_k(self):
        response = self.client.post("/api/job-matches", json={"user_id": "u1", "topK": 1})
        body = response.json()
        self.assertEqual(body["userId"], "u1")
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["skillGap"], ["mongodb"])

    def test_camel_case_user_id_accepted(self):
        response = self.client.post("/api/job-matches", json={"userId": "u1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["count"], 2)

    def test_unknown_user(self):
        response = self.client.post("/api/job-matches", json={"user_id": "nobody"})
        self.assertEqual(response.status_code, 404)

    def test_profile_without_skills(self):
        response = self.client.post("/api/learning-resources", json={"user_id": "empty"})
        self.assertEqual(response.status_code, 400)

    def test_learning_resources(self):
        response = self.client.post("/api/learning-resources", json={"user_id": "u1"})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["total"], 3)
        self.assertEqual([r["id"] for r in body["resources"]], ["r1", "r2", "r3"])

    def test_learning_resources_free_filter(self):
        response = self.client.post("/api/learning-resources", json={"user_id": "u1", "cost": "free"})
        body = response.json()
        self.assertEqual([r["id"] for r in body["resources"]], ["r1", "r3"])
        self.assertEqual(body["count"], 2)
        self.assertEqual(body["total"], 3)

    def test_learning_resources_search(self):
        response = self.client.post("/api/learning-resources", json={"user_id": "u1", "search": "udemy"})
        self.assertEqual([r["id"] for r in response.json()["resources"]], ["r2"])

    def test_invalid_cost_filter(self):
        response = self.client.post("/api/learning-resources", json={"user_id": "u1", "cost": "cheap"})
        self.assertEqual(response.status_code, 422)


class TestProfileEndpoint(APITestCase):

    def test_update_profile_normalizes_skills(self):
        response = self.client.put("/api/profile", json={
            "user_id": "u2",
            "skills": ["  React", "TypeScript", "react"],
            "experienceLevel": "Beginner",
            "preferredTrack": "frontend",
        })

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.catalog.profiles["u2"], {
            "skills": ["react", "typescript"],
            "experienceLevel": "beginner",
            "preferredTrack": "frontend",
        })
        self.assertEqual(response.json()["profile"]["experienceLevel"], "beginner")

    def test_update_profile_requires_skills(self):
        response = self.client.put("/api/profile", json={
            "user_id": "u2",
            "skills": [" "],
            "experienceLevel": "beginner",
            "preferredTrack": "frontend",
        })
        self.assertEqual(response.status_code, 400)

    def test_update_profile_missing_track(self):
        response = self.client.put("/api/profile", json={
            "user_id": "u2",
            "skills": ["react"],
            "experienceLevel": "beginner",
        })
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["field"], "profile.preferredTrack")


class TestAdminEndpoints(APITestCase):

    def test_seed_and_count(self):
        response = self.client.post("/api/admin/jobs/seed")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": 20, "failed": 0, "jobCount": 23})

        self.assertEqual(self.client.get("/api/admin/jobs/count").json(), {"count": 23})

    def test_delete_jobs(self):
        response = self.client.delete("/api/admin/jobs")
        self.assertEqual(response.json(), {"deleted": 3})

    def test_migrate_jobs(self):
        response = self.client.post("/api/admin/jobs/migrate", json={"collection": "OldJobs"})
        self.assertEqual(response.json(), {"total": 1, "updated": 1, "skipped": 0})
        self.assertEqual(self.catalog.migrated_collections, ["OldJobs"])


class TestSettingsFromEnvironment(APITestCase):

    def post_recommendations(self):
        return self.client.post("/api/recommendations", json={
            "profile": PROFILE,
            "jobs": JOB_DOCS[:2],
            "resources": RESOURCE_DOCS,
        })

    def assert_configuration_error(self, response):
        self.assertEqual(response.status_code, 500)
        self.assertIn("Invalid configuration", response.json()["detail"])

    @patch.dict(os.environ, {"TOP_K": "1"})
    def test_top_k_from_environment(self):
        response = self.post_recommendations()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()["matches"]), 1)

    @patch.dict(os.environ, {"TOP_K": "ten"})
    def test_unparseable_top_k(self):
        self.assert_configuration_error(self.post_recommendations())

    @patch.dict(os.environ, {"TOP_K": "-1"})
    def test_negative_top_k_is_a_server_error(self):
        self.assert_configuration_error(self.post_recommendations())

    @patch.dict(os.environ, {"SKILL_WEIGHT": "heavy"})
    def test_unparseable_weight(self):
        self.assert_configuration_error(self.post_recommendations())

    @patch.dict(os.environ, {"SKILL_WEIGHT": "0.9"})
    def test_weights_not_summing_to_one(self):
        self.assert_configuration_error(self.post_recommendations())


class TestFilterResources(unittest.TestCase):

    def setUp(self):
        self.resources = [
            RecommendedResource(id="a", title="React Crash Course", platform="YouTube", cost="Free",
                                related_skills=["react"], url="https://youtube.com/a", for_skill="react"),
            RecommendedResource(id="b", title="Node Complete Guide", platform="Udemy", cost="Paid",
                                related_skills=["node.js", "express"], url="https://udemy.com/b", for_skill="node.js"),
        ]

    def test_all(self):
        self.assertEqual(len(filter_resources(self.resources)), 2)

    def test_paid(self):
        self.assertEqual([r.id for r in filter_resources(self.resources, "paid")], ["b"])

    def test_search_related_skill(self):
        self.assertEqual([r.id for r in filter_resources(self.resources, search="EXPRESS")], ["b"])


if __name__ == "__main__":
    unittest.main()
