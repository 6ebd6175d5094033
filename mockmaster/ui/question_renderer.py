"""HTML rendering for the question card and the result breakdown."""

from __future__ import annotations

from mockmaster.core.markdown_math_renderer import renderer
from mockmaster.core.models import QuestionReview
from mockmaster.styling.color_palette import ColorPalette, Theme

_OPTION_LETTERS = ("A", "B", "C", "D")


def render_question_text(question_text: str, font_size: int = 16) -> str:
    """Render the prompt of the current question as a full HTML document.

    Args:
        question_text: The question text (supports Markdown and LaTeX)
        font_size: Font size in points for the question text

    Returns:
        HTML string ready for display in QWebEngineView
    """
    return renderer.render_full_document(question_text or "(No question text)", font_size=font_size)


def _breakdown_css(theme: Theme) -> str:
    return f"""
      .review {{ border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 12px; padding: 0.75rem 1rem; margin-bottom: 1rem; }}
      .review.wrong {{ border-color: {ColorPalette.INCORRECT_BORDER.get(theme)}; }}
      .review h4 {{ margin: 0 0 0.5rem 0; }}
      .verdict.right {{ color: {ColorPalette.CORRECT.get(theme)}; font-weight: 600; }}
      .verdict.wrong {{ color: {ColorPalette.INCORRECT.get(theme)}; font-weight: 600; }}
      .option {{ border-radius: 8px; padding: 0.35rem 0.6rem; margin: 0.25rem 0; background: {ColorPalette.BACKGROUND_SECONDARY.get(theme)}; }}
      .option.correct {{ background: {ColorPalette.CORRECT_BG.get(theme)}; color: {ColorPalette.CORRECT.get(theme)}; font-weight: 600; }}
      .option.picked {{ background: {ColorPalette.INCORRECT_BG.get(theme)}; color: {ColorPalette.INCORRECT.get(theme)}; }}
      .explanation {{ margin-top: 0.6rem; padding: 0.6rem; border-radius: 8px; background: {ColorPalette.EXPLANATION_BG.get(theme)}; }}
      .explanation .label {{ display: block; font-size: 0.75em; font-weight: 700; letter-spacing: 0.05em; text-transform: uppercase; color: {ColorPalette.ACCENT_PRIMARY.get(theme)}; }}
    """


def _render_review(number: int, review: QuestionReview) -> str:
    question = review.question
    status = "right" if review.is_correct else "wrong"
    if review.is_correct:
        verdict = "You got it right!"
    elif review.was_answered:
        verdict = "Incorrect"
    else:
        verdict = "Not answered"

    option_lines: list[str] = []
    for index, option in enumerate(question.options):
        css = "option"
        marker = ""
        if index == question.correct_answer_index:
            css += " correct"
            marker = " ✔"
        elif index == review.selected_index:
            css += " picked"
            marker = " ✘"
        option_lines.append(
            f'<div class="{css}"><b>{_OPTION_LETTERS[index]}.</b> {renderer.render_inline(option)}{marker}</div>'
        )

    return (
        f'<div class="review {status}">'
        f"<h4>{number}. {renderer.render_inline(question.text)}</h4>"
        f'<div class="verdict {status}">{verdict}</div>'
        f"{''.join(option_lines)}"
        f'<div class="explanation"><span class="label">Explanation</span>'
        f"{renderer.render_fragment(question.explanation)}</div>"
        f"</div>"
    )


def render_breakdown(reviews: list[QuestionReview], font_size: int = 12, theme: Theme = Theme.LIGHT) -> str:
    """Render the per-question result breakdown as a full HTML document."""
    body = "".join(_render_review(number, review) for number, review in enumerate(reviews, start=1))
    return renderer.wrap_with_mathjax(body, font_size=font_size, extra_css=_breakdown_css(theme))
