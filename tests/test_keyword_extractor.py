import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scorer.features.keyword_extractor import classify_description_lines, extract_keywords  # noqa: E402


def _terms(keywords):
    return [keyword.term for keyword in keywords]


class KeywordExtractorTests(unittest.TestCase):
    def test_title_and_requirements_terms_are_ranked(self):
        keywords = extract_keywords(
            "Senior Backend Engineer",
            "Requirements:\n- Python\n- Kubernetes\n- PostgreSQL",
        )
        self.assertEqual(_terms(keywords), ["backend", "python", "kubernetes", "postgresql"])
        by_term = {keyword.term: keyword for keyword in keywords}
        self.assertEqual(by_term["backend"].source_span, "title")
        self.assertEqual(by_term["backend"].weight, 3.0)
        self.assertEqual(by_term["python"].source_span, "requirements-line")
        self.assertEqual(by_term["python"].weight, 2.0)
        self.assertTrue(by_term["python"].is_skill)
        self.assertFalse(by_term["backend"].is_skill)

    def test_frequency_accumulates_and_best_multiplier_wins(self):
        keywords = extract_keywords(
            "Python Developer",
            "We build Python services.\n\nPython is used daily.",
        )
        by_term = {keyword.term: keyword for keyword in keywords}
        self.assertEqual(by_term["python"].frequency, 3)
        self.assertEqual(by_term["python"].weight, 9.0)
        self.assertEqual(by_term["python"].source_span, "title")
        self.assertEqual(by_term["services"].source_span, "summary-line")
        self.assertEqual(by_term["daily"].source_span, "body")
        self.assertNotIn("developer", by_term)

    def test_top_forty_with_first_seen_tie_break(self):
        words = [f"zq{first}{second}x" for first in "abcde" for second in "abcdefghij"]
        description = " ".join(words)

        keywords = extract_keywords("", description)
        self.assertEqual(len(keywords), 40)
        self.assertEqual(_terms(keywords), words[:40])
        self.assertEqual(_terms(extract_keywords("", description, limit=5)), words[:5])

    def test_known_phrases_consume_their_words(self):
        keywords = extract_keywords("", "Experience with machine learning and data pipelines")
        self.assertEqual(_terms(keywords), ["machine learning", "data pipelines"])
        self.assertTrue(keywords[0].is_skill)

    def test_synonyms_collapse_into_one_concept(self):
        keywords = extract_keywords("", "Requirements:\n- K8s\n- Kubernetes")
        self.assertEqual(_terms(keywords), ["kubernetes"])
        self.assertEqual(keywords[0].frequency, 2)
        self.assertIn("k8s", keywords[0].variants)
        self.assertNotIn("kubernetes", keywords[0].variants)

    def test_conjugations_collapse_into_one_keyword(self):
        keywords = extract_keywords("", "Manage vendors. Managing budgets.")
        terms = _terms(keywords)
        self.assertIn("manage", terms)
        self.assertNotIn("managing", terms)
        manage = next(keyword for keyword in keywords if keyword.term == "manage")
        self.assertEqual(manage.frequency, 2)
        self.assertIn("managing", manage.variants)

    def test_ambiguous_words_only_count_on_requirement_lines(self):
        self.assertNotIn("go", _terms(extract_keywords("", "Ready to go live.")))
        self.assertIn("go", _terms(extract_keywords("", "Requirements:\n- Go and Rust")))

    def test_noise_is_dropped(self):
        keywords = extract_keywords("", "5+ years, 2024, an ok fit.")
        self.assertEqual(_terms(keywords), ["fit"])

    def test_empty_inputs(self):
        self.assertEqual(extract_keywords("", ""), [])
        self.assertEqual(extract_keywords(None, None), [])


class DescriptionLineTests(unittest.TestCase):
    def test_lines_are_tagged_by_span(self):
        description = (
            "We build tools.\n"
            "More intro.\n"
            "\n"
            "About us here.\n"
            "Qualifications:\n"
            "Python skills\n"
            "\n"
            "- Docker\n"
            "Benefits:\n"
            "Free lunch\n"
        )
        self.assertEqual(
            classify_description_lines(description),
            [
                ("We build tools.", "summary-line"),
                ("More intro.", "summary-line"),
                ("About us here.", "body"),
                ("Qualifications:", "requirements-line"),
                ("Python skills", "requirements-line"),
                ("Docker", "requirements-line"),
                ("Benefits:", "body"),
                ("Free lunch", "body"),
            ],
        )

    def test_bullet_markers_are_stripped(self):
        tagged = classify_description_lines("Skills:\n1. Terraform\n• Ansible\n2) Helm")
        self.assertEqual([line for line, _ in tagged], ["Skills:", "Terraform", "Ansible", "Helm"])
        self.assertEqual({span for _, span in tagged[1:]}, {"requirements-line"})

    def test_requirement_wording_marks_a_line(self):
        tagged = classify_description_lines("Intro.\n\nKubernetes is a must have.")
        self.assertEqual(tagged[-1][1], "requirements-line")


if __name__ == "__main__":
    unittest.main()
