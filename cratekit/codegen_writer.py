"""Line-oriented writer for generated code, with a per-thread current output."""

from __future__ import annotations

from collections.abc import Callable
import threading
import typing as t

_T = t.TypeVar("_T")


class Codegen:
    """A text sink for generated code."""

    def __init__(self, writer: t.TextIO) -> None:
        self._writer = writer

    @classmethod
    def create_file(cls, path: str) -> Codegen:
        """Open ``path`` for writing, truncating it, with a large buffer."""
        return cls(open(path, "w", encoding="utf-8", buffering=1024 * 1024))

    def write(self, text: str) -> int:
        return self._writer.write(text)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        self._writer.close()

    def __enter__(self) -> Codegen:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


_current = threading.local()


def scoped(g: Codegen, f: Callable[[], object]) -> Codegen:
    """Make ``g`` the current output of this thread while ``f`` runs; return ``g``."""
    previous = getattr(_current, "codegen", None)
    _current.codegen = g
    try:
        f()
    finally:
        _current.codegen = previous
    return g


def with_codegen(f: Callable[[Codegen], _T]) -> _T:
    """Call ``f`` with the current output; raise if no output is in scope."""
    g = getattr(_current, "codegen", None)
    if g is None:
        raise RuntimeError("codegen is not in scope")
    return f(g)


def emit(*args: t.Any) -> None:
    """Write one line to the current output.

    With no arguments an empty line is written; with one, the text as is;
    with more, the first is a :meth:`str.format` template for the rest.
    """
    if not args:
        line = ""
    elif len(args) == 1:
        line = str(args[0])
    else:
        line = str(args[0]).format(*args[1:])
    with_codegen(lambda g: g.write(line + "\n"))


def emit_lines(*args: str) -> None:
    """Write each argument as its own line to the current output."""

    def write_all(g: Codegen) -> None:
        for line in args:
            g.write(f"{line}\n")

    with_codegen(write_all)