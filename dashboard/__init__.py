"""Tabbed terminal dashboard."""

from dashboard.app import handle_event, run_app, run_dashboard
from dashboard.navigation import NavigationState
from dashboard.terminal import TerminalSession
from dashboard.ui import View, render_ui

__all__ = [
    "NavigationState",
    "TerminalSession",
    "View",
    "handle_event",
    "render_ui",
    "run_app",
    "run_dashboard",
]
