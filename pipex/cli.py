"""Command line entry point: ``pipex infile cmd1 cmd2 outfile``."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .pipeline import (
    OPEN_ERROR_MESSAGE,
    CommandFailedError,
    CommandNotFoundError,
    run_pipeline,
)
from .printer import printf

USAGE_MESSAGE = "You Have Entered Few Arguments Than Expected\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the two-command pipeline described by ``argv``; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        printf(USAGE_MESSAGE)
        return 1
    infile, first, second, outfile = args
    try:
        status = run_pipeline(infile, first, second, outfile)
    except (CommandNotFoundError, CommandFailedError) as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{OPEN_ERROR_MESSAGE}: {exc.strerror}", file=sys.stderr)
        return 1
    # A command killed by a signal reports like a shell does.
    return 128 - status if status < 0 else status


if __name__ == "__main__":
    sys.exit(main())