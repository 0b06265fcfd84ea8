"""Text and JSON rendering of progression reports."""

from bodytrend.export.formatters import format_progression_report, report_to_dict

__all__ = ["format_progression_report", "report_to_dict"]
