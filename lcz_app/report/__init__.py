"""Console report of an impedance analysis."""

from .console import format_quantity, print_report, render_report

__all__ = ["format_quantity", "print_report", "render_report"]
