"""Entry point for the enumgen CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from enumgen.cli import build_parser
from enumgen.common import UserInputError
from enumgen.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(Path(args.log_config) if args.log_config else None)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.error("generation failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
