"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QLineEdit, QComboBox {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 8px;
            }}
            QLineEdit:focus {{
                border-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: none;
                border-radius: 4px;
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_title_style() -> str:
        return "font-size: 22pt; font-weight: bold;"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_option_button_style(selected: bool, theme: Theme = Theme.LIGHT) -> str:
        if selected:
            return (
                f"text-align: left; padding: 12px; border: 2px solid {ColorPalette.ACCENT_PRIMARY.get(theme)};"
                f" background-color: {ColorPalette.ACCENT_SOFT.get(theme)}; font-weight: 600;"
            )
        return (
            f"text-align: left; padding: 12px; border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};"
            f" background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};"
        )

    @staticmethod
    def get_clock_style(low_time: bool, blink_state: bool = False, theme: Theme = Theme.LIGHT) -> str:
        base = "padding: 4px 10px; border-radius: 6px; font-family: monospace; font-weight: bold; font-size: 14pt;"
        if not low_time:
            return base + f" background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};"
        background = (
            ColorPalette.LOW_TIME_BLINK_BG.get(theme) if blink_state else ColorPalette.LOW_TIME_BG.get(theme)
        )
        return base + f" color: #fff; background-color: {background};"

    @staticmethod
    def get_score_message_style(percentage: int, theme: Theme = Theme.LIGHT) -> str:
        if percentage >= 100:
            color = ColorPalette.CORRECT.get(theme)
        elif percentage >= 60:
            color = ColorPalette.ACCENT_PRIMARY.get(theme)
        else:
            color = ColorPalette.TEXT_SECONDARY.get(theme)
        return f"font-size: 16pt; font-weight: 600; color: {color};"
