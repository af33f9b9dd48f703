# File: spiderseek/report/__init__.py
"""spiderseek.report: JSON и HTML отчёты о запуске инъекции, используемые CLI и тестами."""

from spiderseek.report.html_report import render_html
from spiderseek.report.json_report import render_json

__all__ = ["render_json", "render_html"]
