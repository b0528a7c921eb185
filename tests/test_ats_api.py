import sys
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scorer.main import app  # noqa: E402


class AtsApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume = {
            "summary": "Backend engineer building payment services.",
            "experience": [
                {"title": "Backend Engineer", "company": "Acme", "bullets": ["Built Python APIs"]},
                {"title": "Software Engineer", "company": "Globex", "bullets": ["Tuned PostgreSQL queries"]},
            ],
            "skills": ["Python", "PostgreSQL"],
            "education": [{"degree": "BSc", "field": "Computer Science", "institution": "State University"}],
        }
        cls.payload = {
            "resume": cls.resume,
            "jobDescription": "Requirements:\n- Python\n- Kubernetes\n- PostgreSQL",
            "jobTitle": "Senior Backend Engineer",
        }

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_score_returns_camel_cased_report(self):
        response = self.client.post("/v1/ats/score", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(0 <= body["overall"] <= 100)
        self.assertEqual(body["subscores"]["skillsMatch"], 67)
        self.assertIn("kubernetes", body["missingKeywords"])
        self.assertIn("python", body["matchedKeywords"])
        self.assertIn("formatIssues", body)
        self.assertIn(body["insights"]["titleRelevance"], ("high", "medium", "low"))

    def test_snake_case_body_is_accepted(self):
        payload = {
            "resume": self.resume,
            "job_description": self.payload["jobDescription"],
            "job_title": self.payload["jobTitle"],
        }
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["subscores"]["skillsMatch"], 67)

    def test_missing_resume_is_rejected(self):
        response = self.client.post("/v1/ats/score", json={"jobDescription": "Python", "jobTitle": "Engineer"})
        self.assertEqual(response.status_code, 422)

    def test_malformed_resume_is_rejected(self):
        payload = {**self.payload, "resume": {"experience": "ten years"}}
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_oversized_description_is_rejected(self):
        payload = {**self.payload, "jobDescription": "python " * 10000}
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_empty_job_scores_full_keyword_and_title(self):
        response = self.client.post("/v1/ats/score", json={"resume": self.resume})
        self.assertEqual(response.status_code, 200)
        subscores = response.json()["subscores"]
        self.assertEqual(subscores["keywordMatch"], 100)
        self.assertEqual(subscores["titleMatch"], 100)


if __name__ == "__main__":
    unittest.main()
