from __future__ import annotations

import argparse
import ast
import logging
import os
import sys
from dataclasses import replace
from typing import Any, List, NoReturn, Sequence

from qformat.core.models import FmtFlags
from qformat.errors import QFormatError
from qformat.formatter import Formatter
from qformat.logging.factory import DefaultLoggerFactory
from qformat.logging.helpers import get_logger
from qformat.runtime.config import FormatterConfig

logger = get_logger('cli')


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Options override the QFORMAT_* environment defaults.
    """
    p = argparse.ArgumentParser(
        prog="qformat",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "qformat – fill a template with arguments\n"
            "Each “%?” is replaced by the next ARG; “%%?” stands for a literal “%?”."
        ),
    )
    p.add_argument("template", metavar="TEMPLATE", help="Template text containing %%? placeholders.")
    p.add_argument("args", metavar="ARG", nargs="*", help="Values substituted in order.")

    g_out = p.add_argument_group("Output settings")
    g_out.add_argument(
        "-p",
        "--precision",
        type=int,
        dest="precision",
        help="Digits generated for floating point values (default 6).",
    )
    g_out.add_argument(
        "-f",
        "--flags",
        metavar="LIST",
        dest="flags",
        help=(
            "Comma-separated format flags replacing the defaults, e.g. "
            "“hex,showbase,uppercase” or “fixed,showpos”."
        ),
    )
    g_out.add_argument("-L", "--locale", metavar="NAME", dest="locale", help="System locale for numeric output.")
    g_out.add_argument(
        "-l",
        "--literal",
        action="store_true",
        dest="literal",
        help=(
            "Parse each ARG as a Python literal (numbers, True/False, lists, "
            "tuples, dicts). ARGs that are not literals stay plain text."
        ),
    )

    g_misc = p.add_argument_group("Miscellaneous")
    g_misc.add_argument("--json-logs", action="store_true", dest="json_logs", help="Emit logs as JSON.")
    g_misc.add_argument("-v", "--verbose", action="store_true", dest="verbose", help="Enable debug logging.")
    return p


def _configure_logging(cfg: FormatterConfig) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    global logger
    factory = DefaultLoggerFactory.from_config(cfg)
    logger = factory.get_logger('cli')


def _coerce_arg(raw: str) -> Any:
    try:
        return ast.literal_eval(raw)
    except (ValueError, TypeError, SyntaxError):
        return raw


def _merge_config(cfg: FormatterConfig, ns: argparse.Namespace) -> FormatterConfig:
    changes: dict[str, Any] = {}
    if ns.precision is not None:
        changes['precision'] = ns.precision
    if ns.flags is not None:
        changes['flags'] = FmtFlags.parse(ns.flags)
    if ns.locale:
        changes['locale'] = ns.locale
    if ns.json_logs:
        changes['json_logs'] = True
    if ns.verbose:
        changes['log_level'] = logging.DEBUG
    return replace(cfg, **changes) if changes else cfg


class QFormatCli:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with given argv-like sequence and return the formatted text."""
        ns = _build_parser().parse_args(list(argv))
        cfg = _merge_config(FormatterConfig.from_env(), ns)
        _configure_logging(cfg)

        values: List[Any] = [_coerce_arg(a) for a in ns.args] if ns.literal else list(ns.args)
        formatter = Formatter.from_config(cfg)
        return formatter.format(ns.template, *values)


def main() -> NoReturn:
    """Entry point for the `qformat` console script."""
    try:
        sys.stdout.write(QFormatCli.run(sys.argv[1:]) + '\n')
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except QFormatError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
