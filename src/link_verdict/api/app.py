"""FastAPI entrypoint."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from fastapi import FastAPI, HTTPException

from link_verdict.config.settings import load_config
from link_verdict.core.logging import configure_logging
from link_verdict.policy.lists import HeuristicLists
from link_verdict.scoring.engine import analyze as analyze_url

app = FastAPI(title="link-verdict")


@lru_cache(maxsize=1)
def get_lists() -> HeuristicLists:
    """Load config on first use; call ``get_lists.cache_clear()`` to reload."""

    cfg, _ = load_config()
    configure_logging(cfg.log_level)
    return HeuristicLists.from_config(cfg)


def _require_url(raw: object) -> str:
    url = str(raw or "").strip()
    if not url:
        raise HTTPException(status_code=400, detail="Please enter a URL.")
    return url


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/analyze")
def analyze(payload: dict[str, Any]) -> dict[str, Any]:
    url = _require_url(payload.get("url"))
    return analyze_url(url, get_lists()).model_dump()


@app.post("/analyze/batch")
def analyze_batch(payload: dict[str, Any]) -> dict[str, Any]:
    urls = payload.get("urls")
    if not isinstance(urls, list):
        raise HTTPException(status_code=400, detail="'urls' must be a list of strings.")
    lists = get_lists()
    results = [analyze_url(_require_url(item), lists).model_dump() for item in urls]
    return {"count": len(results), "results": results}
