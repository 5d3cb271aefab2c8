"""Command-line runner."""

from __future__ import annotations

import argparse
import json

from link_verdict.config.settings import load_config
from link_verdict.core.logging import configure_logging
from link_verdict.domain.url.models import AnalysisResult
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.engine import analyze
from link_verdict.ui.components import format_reasons

EMPTY_INPUT_MESSAGE = "Please enter a URL."


def format_text(result: AnalysisResult) -> str:
    return f"{result.verdict} (score {result.score})\n{format_reasons(result.reasons)}"


def run_once(url: str, lists: HeuristicLists | None = None, *, as_json: bool = False) -> str:
    raw = (url or "").strip()
    if not raw:
        return EMPTY_INPUT_MESSAGE
    result = analyze(raw, lists)
    if as_json:
        return json.dumps(result.summary(), ensure_ascii=True)
    return format_text(result)


def run_interactive(lists: HeuristicLists, *, as_json: bool = False) -> None:
    print("enter a URL to analyze, or 'exit' to quit")
    while True:
        try:
            raw = input("> ").strip()
        except EOFError:
            break
        if raw.lower() in {"exit", "quit"}:
            break
        print(run_once(raw, lists, as_json=as_json))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="link-verdict")
    parser.add_argument("--url", help="Analyze a single URL and exit.")
    parser.add_argument("--config", help="Path to a YAML config overriding the packaged defaults.")
    parser.add_argument("--json", action="store_true", help="Print score, verdict and reasons as JSON.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    cfg, _ = load_config(args.config)
    configure_logging(cfg.log_level)
    lists = HeuristicLists.from_config(cfg)
    if args.url is not None:
        print(run_once(args.url, lists, as_json=args.json))
        return
    run_interactive(lists, as_json=args.json)
