from resume_validator.report.renderer import render_banner, render_report

__all__ = ["render_banner", "render_report"]
