"""Eligibility assessment for tuition grant applications."""

from .filter import assess_status, classify, is_shortlisted

__all__ = ["assess_status", "classify", "is_shortlisted"]
