"""
CLI entrypoints for the provider processes.

    up-functions <provider> [--trace] [--quiet]   (or python -m up_functions.cli.main)
    up-env, up-file, up-id, up-list, up-math, up-random, up-string, up-time, up-fake

Each run reads one JSON request from stdin and writes one JSON response to stdout.
Diagnostics/trace/debug go to stderr via logging; stdout carries the response only.
"""

from __future__ import annotations

import argparse
import logging
import sys

from up_functions.cli.logging_setup import setup_cli_logging
from up_functions.config.settings import get_settings
from up_functions.providers import get_operation_table, provider_names
from up_functions.runner import run

logger = logging.getLogger("up_functions.cli")


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(
        prog="up-functions",
        description="Serve one template function request (JSON on stdin, JSON on stdout).",
    )
    p.add_argument("provider", choices=provider_names())
    p.add_argument("--quiet", action="store_true")
    p.add_argument("--trace", action="store_true")

    args = p.parse_args(argv)

    # Flags override the environment; quiet wins over trace.
    settings = get_settings()
    setup_cli_logging(trace=args.trace or settings.trace, quiet=args.quiet or settings.quiet)

    table = get_operation_table(args.provider)
    status = run(table, provider=args.provider)

    logger.debug("provider=%s exit=%d", args.provider, status)
    raise SystemExit(status)


def _serve(provider: str) -> None:
    main([provider, *sys.argv[1:]])


def env_main() -> None:
    _serve("env")


def file_main() -> None:
    _serve("file")


def id_main() -> None:
    _serve("id")


def list_main() -> None:
    _serve("list")


def math_main() -> None:
    _serve("math")


def random_main() -> None:
    _serve("random")


def string_main() -> None:
    _serve("string")


def time_main() -> None:
    _serve("time")


def fake_main() -> None:
    _serve("fake")


if __name__ == "__main__":
    main()
