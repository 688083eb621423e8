from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any

import typer

from subtitle_segmenter.config import SegmenterSettings, load_settings
from subtitle_segmenter.core import explain
from subtitle_segmenter.patterns import patterns_for


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except Exception as exc:  # pragma: no cover - exercised in CLI tests
        _exit_with_error(exc)


def _non_blank_lines(lines: Iterable[str]) -> Iterator[str]:
    return (line.rstrip("\r\n") for line in lines if line.strip())


def _inputs(text: str | None, file: Path | None) -> Iterator[str]:
    """Yield subtitle texts from the argument, a file, or stdin."""
    if text is not None:
        yield text
    elif file is not None:
        with file.open(encoding="utf-8") as handle:
            yield from _non_blank_lines(handle)
    else:
        yield from _non_blank_lines(sys.stdin)


def _document(text: str, settings: SegmenterSettings, with_trace: bool) -> dict[str, Any]:
    trace = explain(text, settings)
    return trace.to_dict() if with_trace else {"text": text, "lines": list(trace.lines)}


def _run_segment(
    text: str | None,
    file: Path | None,
    config: Path | None,
    with_trace: bool,
    verbose: bool,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    settings = load_settings(config)
    for item in _inputs(text, file):
        print(json.dumps(_document(item, settings, with_trace), ensure_ascii=False))


def _run_patterns(config: Path | None) -> None:
    settings = load_settings(config)
    rows = [
        {
            "kind": p.kind.value,
            "placeholder": p.kind.placeholder(0),
            "description": p.description,
        }
        for p in patterns_for(settings)
    ]
    print(json.dumps(rows, indent=2, ensure_ascii=False))


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def segment(
    text: str | None = typer.Argument(None),
    file: Path | None = typer.Option(
        None, "--file", exists=True, dir_okay=False, readable=True
    ),
    config: Path | None = typer.Option(None, "--config"),
    with_trace: bool = typer.Option(False, "--explain"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Print each subtitle's display lines as one JSON document."""
    _safe(lambda: _run_segment(text, file, config, with_trace, verbose))


@app.command()
def patterns(config: Path | None = typer.Option(None, "--config")) -> None:
    """List the protected pattern kinds in application order."""
    _safe(lambda: _run_patterns(config))


if __name__ == "__main__":
    app()
