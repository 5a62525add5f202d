"""UI builder classes for constructing MainWindow chrome.

Builders encapsulate menu and toolbar construction, keeping MainWindow
focused on coordination rather than widget wiring.
"""

from __future__ import annotations

from trails.ui.builders.menu_builder import MenuBuilder
from trails.ui.builders.toolbar_builder import ToolbarBuilder

__all__ = ["MenuBuilder", "ToolbarBuilder"]
