"""Run reports for the class minifier."""

from .report_builder import ReportBuilder

__all__ = ['ReportBuilder']
