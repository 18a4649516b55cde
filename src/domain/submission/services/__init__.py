"""
Submission Domain Services
"""

from .summary_formatter import SummaryFormatter, format_timestamp_id

__all__ = ["SummaryFormatter", "format_timestamp_id"]
