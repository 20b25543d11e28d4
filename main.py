"""CLI entrypoint for playing a word hunt puzzle in the terminal."""

from __future__ import annotations

import sys

from wordhunt.console import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
