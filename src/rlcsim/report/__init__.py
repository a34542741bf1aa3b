# src/rlcsim/report/__init__.py
from .printer import ReportPrinter, BANNER

__all__ = ["ReportPrinter", "BANNER"]
