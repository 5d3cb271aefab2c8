"""Gradio app entrypoint."""

from __future__ import annotations

import os

import gradio as gr

from link_verdict.config.settings import load_config
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.engine import analyze
from link_verdict.ui.components import render_result_markdown

EMPTY_INPUT_MESSAGE = "Please enter a URL."


def _analyze_to_markdown(url: str, lists: HeuristicLists) -> str:
    raw = (url or "").strip()
    if not raw:
        return EMPTY_INPUT_MESSAGE
    return render_result_markdown(analyze(raw, lists))


def build() -> gr.Blocks:
    cfg, _ = load_config()
    lists = HeuristicLists.from_config(cfg)

    with gr.Blocks(title="link-verdict") as demo:
        gr.Markdown("# link-verdict")
        gr.Markdown("Offline lexical check: nothing is fetched, only the URL text is inspected.")
        inp = gr.Textbox(label="URL", placeholder="https://example.com/login")
        out = gr.Markdown()
        btn = gr.Button("Analyze")
        btn.click(lambda url: _analyze_to_markdown(url, lists), inputs=[inp], outputs=[out])
        inp.submit(lambda url: _analyze_to_markdown(url, lists), inputs=[inp], outputs=[out])
    return demo


if __name__ == "__main__":
    share = os.getenv("LINK_VERDICT_GRADIO_SHARE", "").strip().lower() in {"1", "true", "yes", "on"}
    build().launch(share=share)
