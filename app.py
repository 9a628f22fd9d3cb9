#!/usr/bin/env python3
"""Repository entrypoint for the timebenchy command line."""

from __future__ import annotations

from timebenchy.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
