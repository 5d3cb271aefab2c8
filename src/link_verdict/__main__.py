"""CLI entrypoint for link_verdict."""

from __future__ import annotations

from link_verdict.cli import main

if __name__ == "__main__":
    main()
