import sys
import unittest
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scorer.features.field_matcher import match_keywords, resume_field_texts  # noqa: E402
from ats_scorer.schemas import Keyword, KeywordMatch, ResumeContent  # noqa: E402


def _keyword(term: str, *, canonical: str | None = None, variants=(), is_skill: bool = False) -> Keyword:
    return Keyword(
        term=term,
        weight=2.0,
        source_span="requirements-line",
        variants=frozenset(variants),
        canonical=canonical or term,
        is_skill=is_skill,
    )


def _resume(**kwargs) -> ResumeContent:
    return ResumeContent.model_validate(kwargs)


class FieldMatcherTests(unittest.TestCase):
    def test_exact_match_in_skills(self):
        result = match_keywords([_keyword("python", is_skill=True)], _resume(skills=["Python"]))
        match = result.matches["python"]
        self.assertTrue(match.matched)
        self.assertEqual(match.match_kind, "exact")
        self.assertEqual(match.located_in, ["skills"])

    def test_every_field_with_a_hit_is_reported(self):
        resume = _resume(
            skills=["Python"],
            experience=[{"title": "Engineer", "company": "Acme", "bullets": ["Wrote Python services"]}],
            summary="Python engineer",
        )
        match = match_keywords([_keyword("python")], resume).matches["python"]
        self.assertEqual(match.located_in, ["skills", "experience", "summary"])

    def test_variant_and_stem_matches(self):
        resume = _resume(
            experience=[{"title": "Buyer", "company": "Acme", "bullets": ["Managed vendor relationships"]}],
        )
        keywords = [_keyword("manage", variants={"managed", "managing"}), _keyword("vendors")]
        result = match_keywords(keywords, resume)
        self.assertEqual(result.matches["manage"].match_kind, "stem")
        self.assertEqual(result.matches["vendors"].match_kind, "stem")
        self.assertEqual(result.matches["vendors"].located_in, ["experience"])

    def test_synonym_match(self):
        match = match_keywords([_keyword("kubernetes")], _resume(skills=["K8s"])).matches["kubernetes"]
        self.assertEqual(match.match_kind, "synonym")
        self.assertEqual(match.located_in, ["skills"])

    def test_hyphenated_resume_text_matches_spaced_keyword(self):
        result = match_keywords([_keyword("machine learning", is_skill=True)], _resume(skills=["Machine-Learning"]))
        match = result.matches["machine learning"]
        self.assertEqual(match.match_kind, "stem")
        self.assertEqual(match.located_in, ["skills"])

    def test_match_kind_follows_field_priority(self):
        resume = _resume(
            skills=["K8s"],
            experience=[{"title": "SRE", "company": "Acme", "bullets": ["Ran Kubernetes clusters"]}],
        )
        match = match_keywords([_keyword("kubernetes")], resume).matches["kubernetes"]
        self.assertEqual(match.match_kind, "synonym")
        self.assertEqual(match.located_in, ["skills", "experience"])

    def test_token_boundaries(self):
        match = match_keywords([_keyword("java")], _resume(skills=["JavaScript"])).matches["java"]
        self.assertFalse(match.matched)
        self.assertEqual(match.match_kind, "none")
        self.assertEqual(match.located_in, [])

    def test_phrases_do_not_span_bullets(self):
        resume = _resume(
            experience=[{"title": "Analyst", "company": "Acme", "bullets": ["Built machine", "learning tools"]}],
        )
        match = match_keywords([_keyword("machine learning")], resume).matches["machine learning"]
        self.assertFalse(match.matched)

    def test_role_titles_and_education_are_searched(self):
        resume = _resume(
            experience=[{"title": "Data Scientist", "company": "Acme"}],
            education=[{"degree": "BSc", "field": "Computer Science", "institution": "State University"}],
        )
        result = match_keywords([_keyword("scientist"), _keyword("computer science")], resume)
        self.assertEqual(result.matches["scientist"].located_in, ["experience"])
        self.assertEqual(result.matches["computer science"].located_in, ["education"])

    def test_matched_and_missing_partition_keywords(self):
        keywords = [_keyword("python"), _keyword("rust")]
        result = match_keywords(keywords, _resume(skills=["Python"]))
        self.assertEqual([keyword.term for keyword in result.matched()], ["python"])
        self.assertEqual([keyword.term for keyword in result.missing()], ["rust"])

    def test_field_texts_leave_input_untouched(self):
        resume = _resume(skills=["Python", "python", "SQL"], summary=None)
        texts = resume_field_texts(resume)
        self.assertEqual(texts["skills"], ["Python", "SQL"])
        self.assertEqual(texts["summary"], [])
        self.assertEqual(resume.skills, ["Python", "python", "SQL"])


class KeywordMatchInvariantTests(unittest.TestCase):
    def test_unmatched_cannot_have_locations(self):
        with self.assertRaises(ValidationError):
            KeywordMatch(matched=False, match_kind="none", located_in=["skills"])
        with self.assertRaises(ValidationError):
            KeywordMatch(matched=False, match_kind="exact")

    def test_matched_needs_kind_and_location(self):
        with self.assertRaises(ValidationError):
            KeywordMatch(matched=True, match_kind="exact")


if __name__ == "__main__":
    unittest.main()
