"""Command-line entry point: `python -m minilisp FILE`."""

from __future__ import annotations

import argparse
import logging
import sys

from minilisp.config import get_log_level
from minilisp.errors import LispEvalError, LispParseError
from minilisp.interpreter import Interpreter
from minilisp.printer import render


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="minilisp", description="Evaluate a minilisp program.")
    p.add_argument("file", help="source file holding one compilation unit")
    p.add_argument("--parse-only", action="store_true", help="print the parsed forms instead of evaluating")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    p.add_argument("--log-level", default=None, help="logging level name (overrides MINILISP_LOG_LEVEL)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.log_level:
        level = logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            level = get_log_level()
    else:
        level = get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    try:
        if args.parse_only:
            result = interp.parse(interp.read_file(args.file))
        else:
            result = interp.run_file(args.file)
    except (OSError, UnicodeDecodeError) as ex:
        print(f"cannot read {args.file}: {ex}", file=sys.stderr)
        return 2
    except LispParseError as ex:
        print(f"parse failed: {ex}", file=sys.stderr)
        return 1
    except LispEvalError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    print(render(result, readable=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
