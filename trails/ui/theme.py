"""Centralized theme constants and style factory.

Two-layer color system:
  Layer 1 (Palette): raw color hex values, what the color IS.
  Layer 2 (Semantic): purpose-based aliases, what the color MEANS.
"""

from __future__ import annotations

__all__ = ["Theme"]


class Theme:
    """Central color and style definitions for the application."""

    # ══════════════════════════════════════════════════════
    # LAYER 1: PALETTE
    # ══════════════════════════════════════════════════════

    EPIC_SURFACE = "#202020"

    GRAY_BORDER = "#cccccc"

    BLUE = "#0078f2"
    BLUE_LIGHT = "#2a8ff7"
    GREEN = "#4caf50"
    ORANGE = "#ffa500"
    RED = "#c75450"
    WHITE = "#ffffff"

    # ══════════════════════════════════════════════════════
    # LAYER 2: SEMANTIC
    # ══════════════════════════════════════════════════════

    BG_CARD = EPIC_SURFACE
    CARD_BORDER = GRAY_BORDER
    TEXT_PRIMARY = WHITE
    ACCENT = BLUE
    ACCENT_HOVER = BLUE_LIGHT
    STATUS_INSTALLED = GREEN
    STATUS_UPDATE = ORANGE
    IMAGE_FAILED = RED

    # ══════════════════════════════════════════════════════
    # STYLE FACTORY
    # ══════════════════════════════════════════════════════

    @staticmethod
    def game_card() -> str:
        """Stylesheet for a game card frame.

        Returns:
            CSS stylesheet string scoped to the ``game-card`` object name.
        """
        return f"""
            QFrame#game-card {{ border: 1px solid {Theme.CARD_BORDER}; border-radius: 5px;
                                padding: 5px; margin: 5px; background-color: {Theme.BG_CARD}; }}
        """

    @staticmethod
    def button_primary() -> str:
        """Stylesheet for primary action buttons.

        Returns:
            CSS stylesheet string for QPushButton.
        """
        return f"""
            QPushButton {{ background-color: {Theme.ACCENT}; color: {Theme.TEXT_PRIMARY};
                          padding: 8px 16px; }}
            QPushButton:hover {{ background-color: {Theme.ACCENT_HOVER}; }}
        """

    @staticmethod
    def status_label(color: str) -> str:
        """Stylesheet for a small colored status caption."""
        return f"color: {color}; font-size: 9pt;"
