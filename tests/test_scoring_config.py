import unittest
import sys
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.core.config.scoring import (
    clear_scoring_config_cache,
    get_scoring_config,
    get_scoring_value,
    load_scoring_policy,
    scoring_config_path,
)
from atscore.schemas import ResumeDocument
from atscore.scoring import DEFAULT_POLICY, score
from resume_fixtures import strong_resume_payload


class ScoringConfigTests(unittest.TestCase):
    def tearDown(self):
        clear_scoring_config_cache()

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.pass_threshold"), 70)
        self.assertEqual(get_scoring_value("ats.verdict_bands.excellent"), 90)
        self.assertEqual(get_scoring_value("keywords.top_n"), 25)
        self.assertEqual(get_scoring_value("remediation.context_skill_limit"), 15)

    def test_missing_paths_fall_back_to_default(self):
        self.assertEqual(get_scoring_value("ats.unknown", 5), 5)
        self.assertEqual(get_scoring_value("ats.pass_threshold.nested", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_env_override_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("ats:\n  pass_threshold: 55\n", encoding="utf-8")
            with patch("atscore.core.config.scoring.settings", SimpleNamespace(scoring_config_path=str(path))):
                clear_scoring_config_cache()
                self.assertEqual(scoring_config_path(), path)
                self.assertEqual(get_scoring_value("ats.pass_threshold"), 55)
                self.assertEqual(get_scoring_value("keywords.top_n", 25), 25)

    def test_invalid_files_raise(self):
        with tempfile.TemporaryDirectory() as tmp:
            cases = {
                "missing.yaml": None,
                "broken.yaml": "ats: [unclosed\n",
                "list.yaml": "- 1\n- 2\n",
            }
            for name, content in cases.items():
                path = Path(tmp) / name
                if content is not None:
                    path.write_text(content, encoding="utf-8")
                with self.subTest(name=name):
                    with patch("atscore.core.config.scoring.settings", SimpleNamespace(scoring_config_path=str(path))):
                        clear_scoring_config_cache()
                        with self.assertRaises(RuntimeError):
                            get_scoring_config()

    def test_default_path_is_packaged_next_to_loader(self):
        with patch("atscore.core.config.scoring.settings", SimpleNamespace(scoring_config_path=None)):
            path = scoring_config_path()
        self.assertEqual(path.parent.name, "config")
        self.assertEqual(path.parent.parent.name, "core")
        self.assertEqual(path.name, "scoring.yaml")
        self.assertTrue(path.exists())

    def test_policy_matches_builtin_defaults(self):
        self.assertEqual(load_scoring_policy(), DEFAULT_POLICY)

    def test_policy_reads_overrides_and_keeps_other_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("ats:\n  pass_threshold: 99\nkeywords:\n  top_n: 5\n", encoding="utf-8")
            with patch("atscore.core.config.scoring.settings", SimpleNamespace(scoring_config_path=str(path))):
                clear_scoring_config_cache()
                policy = load_scoring_policy()
        self.assertEqual(policy.pass_threshold, 99)
        self.assertEqual(policy.keyword_limit, 5)
        self.assertEqual(policy.excellent, DEFAULT_POLICY.excellent)
        self.assertFalse(score(ResumeDocument.model_validate(strong_resume_payload()), policy=policy).passes_ats)

    def test_scoring_does_not_read_config(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.yaml"
            with patch("atscore.core.config.scoring.settings", SimpleNamespace(scoring_config_path=str(missing))):
                clear_scoring_config_cache()
                report = score(ResumeDocument())
                self.assertEqual(report.overall, 4)
                self.assertTrue(score(ResumeDocument.model_validate(strong_resume_payload())).passes_ats)
                with self.assertRaises(RuntimeError):
                    load_scoring_policy()


if __name__ == "__main__":
    unittest.main()
