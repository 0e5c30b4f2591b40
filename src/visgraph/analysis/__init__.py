"""
Whole-graph analysis reports.
"""

from visgraph.analysis.report import GraphReport, analyze, format_path, render_report

__all__ = [
    "GraphReport",
    "analyze",
    "format_path",
    "render_report",
]
