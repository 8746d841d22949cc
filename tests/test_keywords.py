import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.keywords import (
    count_phrases,
    extract_keywords,
    match_keywords,
    resume_search_text,
    summarize_keyword_matches,
    tokenize_job_description,
)
from atscore.schemas import KeywordMatch, ResumeDocument
from resume_fixtures import strong_resume_payload


class TokenizeTests(unittest.TestCase):
    def test_keeps_technology_markers(self):
        tokens = tokenize_job_description("Experience with C++, C#, .NET and Node.js (required)!")
        self.assertEqual(tokens, ["experience", "with", "c++", "c#", ".net", "and", "node.js", "required"])

    def test_sentence_final_period_stays_on_token(self):
        self.assertEqual(tokenize_job_description("We run Kubernetes."), ["we", "run", "kubernetes."])
        self.assertEqual(
            tokenize_job_description("Experience with Node.js. Kubernetes, etc."),
            ["experience", "with", "node.js.", "kubernetes", "etc."],
        )


class ExtractKeywordsTests(unittest.TestCase):
    def test_blank_description_yields_nothing(self):
        self.assertEqual(extract_keywords(""), [])
        self.assertEqual(extract_keywords("   \n"), [])

    def test_frequency_order_with_stable_ties(self):
        keywords = extract_keywords("python python python sql sql docker")
        self.assertEqual(
            keywords,
            ["python", "sql", "python python", "python sql", "sql sql", "sql docker"],
        )

    def test_stop_words_and_short_tokens_are_dropped(self):
        self.assertEqual(extract_keywords("experience required with strong skills"), [])
        counts = count_phrases(tokenize_job_description("Go and AWS on the team"))
        self.assertEqual(counts, {"aws": 1})

    def test_single_mentions_need_a_marker_or_length(self):
        keywords = extract_keywords("c++ docker terraform")
        self.assertIn("c++", keywords)
        self.assertIn("terraform", keywords)
        self.assertNotIn("docker", keywords)
        self.assertIn("docker terraform", keywords)

    def test_limit(self):
        self.assertEqual(extract_keywords("python python python sql sql docker", limit=2), ["python", "sql"])
        text = " ".join(f"platform{i}" for i in range(40))
        self.assertEqual(len(extract_keywords(text)), 25)


class MatchKeywordsTests(unittest.TestCase):
    def setUp(self):
        self.document = ResumeDocument.model_validate(strong_resume_payload())

    def test_blank_description(self):
        self.assertEqual(match_keywords(self.document, ""), [])
        self.assertEqual(match_keywords(self.document, "  "), [])

    def test_repeated_term_is_found(self):
        matches = match_keywords(self.document, "Kubernetes Kubernetes Kubernetes Kubernetes Kubernetes.")
        self.assertEqual(matches[0].keyword, "kubernetes")
        self.assertTrue(matches[0].found)
        self.assertEqual(matches[0].context, "Found in resume")

    def test_missing_keyword(self):
        matches = match_keywords(self.document, "Snowflake Snowflake and Kafka Kafka")
        by_keyword = {match.keyword: match for match in matches}
        self.assertFalse(by_keyword["snowflake"].found)
        self.assertIsNone(by_keyword["snowflake"].context)
        self.assertTrue(by_keyword["kafka"].found)

    def test_search_text_covers_every_section(self):
        text = resume_search_text(self.document)
        fragments = (
            "senior software engineer",
            "techcorp",
            "university of washington",
            "grafana",
            "amazon web services",
            "observability",
        )
        for fragment in fragments:
            with self.subTest(fragment=fragment):
                self.assertIn(fragment, text)
        self.assertNotIn("sarah.chen@example.com", text)


class CoverageTests(unittest.TestCase):
    def test_summary(self):
        matches = [
            KeywordMatch(keyword="python", found=True, context="Found in resume"),
            KeywordMatch(keyword="snowflake", found=False),
            KeywordMatch(keyword="kafka", found=True, context="Found in resume"),
        ]
        coverage = summarize_keyword_matches(matches)
        self.assertEqual(coverage.total, 3)
        self.assertEqual(coverage.matched, 2)
        self.assertEqual(coverage.missing, ["snowflake"])
        self.assertEqual(coverage.match_rate, 0.667)

    def test_empty(self):
        coverage = summarize_keyword_matches([])
        self.assertEqual(coverage.total, 0)
        self.assertEqual(coverage.match_rate, 0.0)


if __name__ == "__main__":
    unittest.main()
