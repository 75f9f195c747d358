"""Applicant tracking pipeline service."""
