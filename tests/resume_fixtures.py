from __future__ import annotations

import copy
from typing import Any

STRONG_SUMMARY = (
    "Senior software engineer with eight years of experience building scalable cloud platforms for fintech "
    "companies. Delivered distributed systems that cut infrastructure costs by 35% while improving reliability. "
    "Skilled in Python, Go, Kubernetes, and AWS, with a track record of mentoring engineers and leading "
    "cross-functional delivery."
)

_STRONG_RESUME: dict[str, Any] = {
    "header": {
        "name": "Sarah Chen",
        "title": "Senior Software Engineer",
        "location": "San Francisco, CA",
        "email": "sarah.chen@example.com",
        "phone": "+1 (555) 123-4567",
        "linkedin": "linkedin.com/in/sarah-chen",
    },
    "summary": STRONG_SUMMARY,
    "experience": [
        {
            "role": "Senior Software Engineer",
            "company_or_client": "TechCorp",
            "start_date": "Jan 2021",
            "end_date": "Present",
            "location": "San Francisco, CA",
            "bullets": [
                "Led migration of the payments platform to Kubernetes, reducing deployment time by 40%",
                "Designed event-driven billing services with clear ownership across product teams",
                "Mentored 6 engineers through weekly code reviews and design sessions",
                "Implemented automated testing pipelines that improved release confidence for the organization",
            ],
        }
    ],
    "education": [
        {
            "degree": "Bachelor of Science",
            "field": "Computer Science",
            "institution": "University of Washington",
            "gpa": "3.7",
            "graduation_date": "May 2016",
            "location": "Seattle, WA",
        }
    ],
    "certifications": [
        {"name": "AWS Certified Solutions Architect", "issuer": "Amazon Web Services", "date": "2022"},
    ],
    "skills": {
        "programming_languages": ["Python", "Go", "TypeScript", "SQL", "Java"],
        "cloud_mlops": ["AWS", "Kubernetes", "Docker", "Terraform", "PostgreSQL"],
        "collaboration_tools": ["Git", "Jira", "Grafana", "Kafka"],
    },
    "projects": [
        {
            "title": "Open Source Observability Toolkit",
            "organization": "GitHub",
            "date": "2023",
            "bullets": [
                "Built an open source Grafana plugin that visualizes Kubernetes cluster health and is now used by "
                "more than 120 engineering teams worldwide",
                "Wrote a command line tool in Go that audits Terraform state files and flags drift before changes "
                "reach the production environment",
                "Published a series of technical articles explaining how to design resilient event pipelines with "
                "Kafka, PostgreSQL, and idempotent consumers",
                "Maintained continuous integration workflows that run unit, integration, and load tests on every "
                "pull request for the whole project",
                "Documented contribution guidelines, coding standards, and release procedures so that new "
                "volunteers could ship their first change within a single week",
            ],
        }
    ],
}


def strong_resume_payload() -> dict[str, Any]:
    """Complete resume that earns 98/100 with no issues."""
    return copy.deepcopy(_STRONG_RESUME)


def empty_resume_payload() -> dict[str, Any]:
    return {
        "header": {"name": "", "title": "", "location": "", "email": "", "phone": "", "linkedin": ""},
        "summary": "",
        "experience": [],
        "education": [],
        "certifications": [],
        "skills": {},
        "projects": [],
    }
