import unittest
import sys
import json
import importlib.util
import tempfile
from contextlib import redirect_stdout
from io import StringIO
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_fixtures import strong_resume_payload

_CLI_LOADER = importlib.util.spec_from_file_location("score_resume", PROJECT_ROOT / "scripts" / "score_resume.py")
score_resume = importlib.util.module_from_spec(_CLI_LOADER)
_CLI_LOADER.loader.exec_module(score_resume)


class ScoreResumeCliTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.resume_path = self.tmp / "resume.json"
        self.resume_path.write_text(json.dumps(strong_resume_payload()), encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def _run(self, *args: str) -> str:
        buffer = StringIO()
        with patch.object(sys, "argv", ["score_resume.py", *args]), redirect_stdout(buffer):
            score_resume.main()
        return buffer.getvalue()

    def test_prints_report_json(self):
        output = json.loads(self._run(str(self.resume_path)))
        self.assertEqual(output["report"]["overall"], 98)
        self.assertNotIn("keywords", output)

    def test_job_description_adds_keywords(self):
        jd_path = self.tmp / "jd.txt"
        jd_path.write_text("Kafka Kafka and Snowflake Snowflake", encoding="utf-8")
        output = json.loads(self._run(str(self.resume_path), "--job-description", str(jd_path)))
        missing = output["keyword_coverage"]["missing"]
        self.assertIn("snowflake", missing)
        self.assertNotIn("kafka", missing)

    def test_section_prints_prompt(self):
        output = self._run(str(self.resume_path), "--section", "Education")
        self.assertTrue(output.startswith("Fix ATS issues for the Education section:"))

    def test_invalid_json_exits(self):
        bad_path = self.tmp / "bad.json"
        bad_path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(SystemExit):
            self._run(str(bad_path))


if __name__ == "__main__":
    unittest.main()
