"""Rendering helpers shared by the CLI and the Gradio app."""

from __future__ import annotations

from typing import Sequence

from link_verdict.domain.url.models import AnalysisResult

NO_REASONS_MESSAGE = "No suspicious patterns detected."

VERDICT_COLORS = {
    "Safe": "green",
    "Suspicious": "orange",
    "Fraudulent": "red",
}


def verdict_color(verdict: str) -> str:
    return VERDICT_COLORS.get(verdict, "red")


def format_reasons(reasons: Sequence[str]) -> str:
    cleaned = [str(item).strip() for item in reasons if str(item).strip()]
    return "\n".join(cleaned) if cleaned else NO_REASONS_MESSAGE


def render_result_markdown(result: AnalysisResult) -> str:
    color = verdict_color(result.verdict)
    lines = [
        f'## <span style="color:{color}">{result.verdict}</span>',
        f"Score: **{result.score}**",
        "",
    ]
    if result.reasons:
        lines.extend(f"- {reason}" for reason in result.reasons)
    else:
        lines.append(NO_REASONS_MESSAGE)
    return "\n".join(lines)
