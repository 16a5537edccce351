from bid_request_checker.report.html import render_error_report, render_report

__all__ = ["render_error_report", "render_report"]
