"""Command line front end that runs source text through the buffer and automata."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

from .buffer import DEFAULT_SIZE, CircularBuffer, SourceFilter
from .dfa import LineRecognizer

DEFAULT_PATH = "archivo.txt"


def trace_buffer(chars: Iterable[str]) -> Iterator[str]:
    """Yield a log of every character queued, ignored and dequeued."""
    buffer = CircularBuffer(DEFAULT_SIZE)
    source = SourceFilter(keep_single_space=False)
    for char in chars:
        if buffer.is_full():
            for value in buffer.drain():
                yield f"Desencolando: {value}"
        kept = source.feed(char)
        if kept is None:
            yield "Valor ignorado"
        else:
            buffer.push(kept)
            yield f"Encolando: {kept}"
    for value in buffer.drain():
        yield f"Desencolando: {value}"


def recognise_lines(chars: Iterable[str]) -> Iterator[str]:
    """Yield queued characters and a classification for every line."""
    buffer = CircularBuffer(DEFAULT_SIZE)
    source = SourceFilter(keep_single_space=True)
    recognizer = LineRecognizer()
    for char in chars:
        if buffer.is_full():
            buffer.drain()
        kept = source.feed(char)
        if kept is not None:
            buffer.push(kept)
            yield f"Encolando: {kept}"
            recognizer.feed(kept)
        if char == "\n":
            yield recognizer.result().value
            recognizer.reset()
    buffer.drain()
    yield recognizer.result().value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dfalex",
        description="Filter source text and classify each line.",
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH, help="file to read")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="only log the buffer traffic instead of classifying lines",
    )
    args = parser.parse_args(argv)

    try:
        with open(args.path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        print(f"Error al abrir el archivo: {exc.strerror}", file=sys.stderr)
        return 1

    text = data.decode("latin-1")
    lines = trace_buffer(text) if args.trace else recognise_lines(text)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())