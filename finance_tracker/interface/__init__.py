"""Mini README: Interactive interfaces for the finance tracker.

Exports the console session that powers the menu-driven tracker. The Typer
entry point in ``main_finance_tracker.py`` wires it to configuration.
"""

from .console import ConsoleSession

__all__ = ["ConsoleSession"]
