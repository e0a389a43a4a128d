#!/usr/bin/env python3
"""
rpncalc.py - rpncalc command line tool.

Runs entirely locally; the HTTP API does not need to be running.

Variables are taken from --var NAME=VALUE first. Any variable still missing
is fetched from the value source (--source-url or RPNCALC_VALUE_SOURCE_URL)
when one is configured, otherwise asked for interactively unless
--no-prompt is given.

Subcommands:
    postfix  - convert an infix expression to postfix
    eval     - evaluate a postfix sequence
    calc     - convert and evaluate an infix expression

Usage:
    python rpncalc.py postfix --text "3 + 2 * (5 - x)"
    python rpncalc.py eval --postfix "3 2 5 x - * +" --var x=2
    python rpncalc.py calc --text "(s(x)) ^ 2 + (c(x)) ^ 2"
    python rpncalc.py calc --text "a / b" --var a=1 --var b=4 --trace
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from errors import CalculatorError


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_trace_table(requests: list[tuple[str, float]]) -> None:
    table = Table(title=f"Variables requested [{len(requests)}]", box=box.ASCII)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold cyan")
    table.add_column("Value", justify="right")
    for idx, (name, value) in enumerate(requests, start=1):
        table.add_row(str(idx), name, repr(value))
    _console().print(table)


def _var_arg(raw: str) -> tuple[str, float]:
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not sep or not name.isalpha():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {raw!r}")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def _read_arg(value: Optional[str], what: str) -> str:
    text = value or sys.stdin.read().strip()
    if not text:
        print(f"Error: pass the {what} with --{what} or on stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _fail(exc: CalculatorError) -> None:
    print(f"{exc.kind.value} ({exc.code}): {exc.message}", file=sys.stderr)
    sys.exit(1)


def _build_provider(args: argparse.Namespace):
    from adapters.variable_provider import (
        HttpVariableProvider,
        MappingVariableProvider,
        PromptVariableProvider,
        RecordingVariableProvider,
    )
    from config import Settings

    settings = Settings()
    source_url = args.source_url or settings.value_source_url

    fallback = None
    if source_url:
        fallback = HttpVariableProvider(source_url, timeout_ms=settings.value_source_timeout_ms)
    elif not args.no_prompt:
        fallback = PromptVariableProvider(console=_console())

    return RecordingVariableProvider(MappingVariableProvider(dict(args.var), fallback=fallback))


def _report(value: float, postfix: str, provider: Any, trace: bool) -> None:
    print(repr(value))
    if trace:
        _print_kv_table("Calculation", [("postfix", postfix), ("result", repr(value))])
        _print_trace_table(provider.requests)


# -- subcommands -----------------------------------------------------------

def _postfix(args: argparse.Namespace) -> None:
    from adapters.postfix_converter.shunting_yard_converter import ShuntingYardConverter

    text = _read_arg(args.text, "text")
    try:
        postfix = ShuntingYardConverter().to_postfix(text)
    except CalculatorError as exc:
        _fail(exc)
    print(postfix)


def _eval(args: argparse.Namespace) -> None:
    from adapters.postfix_evaluator.stack_evaluator import StackEvaluator

    postfix = _read_arg(args.postfix, "postfix")
    provider = _build_provider(args)
    try:
        value = StackEvaluator().evaluate(postfix, provider)
    except CalculatorError as exc:
        _fail(exc)
    _report(value, " ".join(postfix.split()), provider, args.trace)


def _calc(args: argparse.Namespace) -> None:
    from calculator import Calculator

    calc = Calculator(_read_arg(args.text, "text"))
    provider = _build_provider(args)
    outcome = calc.try_calculate(provider)
    if not outcome.ok:
        err = outcome.error
        print(f"{err.kind.value} ({err.code}): {err.message}", file=sys.stderr)
        sys.exit(1)
    _report(outcome.value, outcome.postfix, provider, args.trace)


# -- main ------------------------------------------------------------------

def _add_variable_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--var", action="append", type=_var_arg, default=[],
                   metavar="NAME=VALUE", help="Variable value (repeatable)")
    p.add_argument("--source-url", default="",
                   help="HTTP value source for missing variables")
    p.add_argument("--no-prompt", action="store_true",
                   help="Fail instead of asking for missing variables")
    p.add_argument("--trace", action="store_true",
                   help="Show which variables were requested")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="rpncalc - infix to postfix converter and evaluator",
    )
    parser.add_argument("--log-level", default=None,
                        help="Override RPNCALC_LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    # postfix
    p = sub.add_parser("postfix", help="Convert an infix expression to postfix")
    p.add_argument("--text", "-t", help="Expression (or stdin)")

    # eval
    p = sub.add_parser("eval", help="Evaluate a postfix sequence")
    p.add_argument("--postfix", "-p", help="Space separated postfix tokens (or stdin)")
    _add_variable_options(p)

    # calc
    p = sub.add_parser("calc", help="Convert and evaluate an infix expression")
    p.add_argument("--text", "-t", help="Expression (or stdin)")
    _add_variable_options(p)

    args = parser.parse_args(argv)

    from config import Settings
    logging.basicConfig(level=(args.log_level or Settings().log_level).upper())

    commands = {
        "postfix": _postfix,
        "eval":    _eval,
        "calc":    _calc,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()
