"""Color palette for MockMaster supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#0F172A",      # Slate 900
        dark="#F1F5F9"        # Slate 100
    )

    TEXT_SECONDARY = ThemeColors(
        light="#64748B",      # Slate 500
        dark="#94A3B8"        # Slate 400
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#F8FAFC",      # Slate 50
        dark="#0F172A"        # Slate 900
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F1F5F9",      # Slate 100
        dark="#1E293B"        # Slate 800
    )

    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#1E293B"
    )

    # Accent colors
    ACCENT_PRIMARY = ThemeColors(
        light="#4F46E5",      # Indigo 600
        dark="#818CF8"        # Indigo 400
    )

    ACCENT_SOFT = ThemeColors(
        light="#EEF2FF",      # Indigo 50
        dark="#312E81"        # Indigo 900
    )

    # Answer feedback
    CORRECT = ThemeColors(
        light="#047857",      # Emerald 700
        dark="#6EE7B7"
    )

    CORRECT_BG = ThemeColors(
        light="#ECFDF5",      # Emerald 50
        dark="#064E3B"
    )

    INCORRECT = ThemeColors(
        light="#B91C1C",      # Red 700
        dark="#FCA5A5"
    )

    INCORRECT_BG = ThemeColors(
        light="#FEF2F2",      # Red 50
        dark="#7F1D1D"
    )

    INCORRECT_BORDER = ThemeColors(
        light="#FECACA",      # Red 200
        dark="#991B1B"
    )

    EXPLANATION_BG = ThemeColors(
        light="#EEF2FF",
        dark="#1E1B4B"
    )

    # Countdown
    LOW_TIME_BG = ThemeColors(
        light="#EF4444",
        dark="#DC2626"
    )

    LOW_TIME_BLINK_BG = ThemeColors(
        light="#B91C1C",
        dark="#991B1B"
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#E2E8F0",      # Slate 200
        dark="#334155"        # Slate 700
    )

    # Button colors
    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#0F172A"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E2E8F0",
        dark="#334155"
    )
