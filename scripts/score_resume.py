from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from atscore.core.config.scoring import load_scoring_policy  # noqa: E402
from atscore.keywords import match_keywords, summarize_keyword_matches  # noqa: E402
from atscore.prompts import build_remediation_prompt  # noqa: E402
from atscore.schemas import ResumeDocument  # noqa: E402
from atscore.scoring import score  # noqa: E402


def _load_document(path: Path) -> ResumeDocument:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Unable to read resume JSON '{path}': {exc}") from exc
    try:
        return ResumeDocument.model_validate(raw)
    except ValidationError as exc:
        raise SystemExit(f"Resume JSON '{path}' does not match the expected shape:\n{exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a structured resume JSON file for ATS compatibility.")
    parser.add_argument("resume", help="Path to the resume JSON document")
    parser.add_argument(
        "--job-description",
        default=None,
        help="Optional path to a plain-text job description for keyword matching",
    )
    parser.add_argument(
        "--section",
        default=None,
        help="Print the remediation prompt for this section (e.g. 'Professional Summary') instead of the report",
    )
    args = parser.parse_args()

    document = _load_document(Path(args.resume))
    policy = load_scoring_policy()
    report = score(document, policy=policy)

    if args.section:
        section = report.section(args.section)
        issues = section.issues if section is not None else []
        print(build_remediation_prompt(args.section, document, issues, skill_limit=policy.context_skill_limit))
        return

    output: dict = {"report": report.model_dump()}
    if args.job_description:
        jd_text = Path(args.job_description).read_text(encoding="utf-8")
        keywords = match_keywords(document, jd_text, limit=policy.keyword_limit)
        output["keywords"] = [match.model_dump() for match in keywords]
        output["keyword_coverage"] = summarize_keyword_matches(keywords).model_dump()

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
