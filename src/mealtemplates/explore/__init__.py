"""Summaries computed over templates."""
