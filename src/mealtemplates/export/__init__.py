"""Submission payloads, validation, assignment and preview formatters."""

from mealtemplates.export.formatters import JSONFormatter, MarkdownFormatter, TableFormatter

__all__ = ["TableFormatter", "JSONFormatter", "MarkdownFormatter"]
