from .remediation import build_remediation_prompt, format_issue_list

__all__ = ["build_remediation_prompt", "format_issue_list"]
