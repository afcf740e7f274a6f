"""Configuration predicates (``key`` or ``key = "value"``) for boolean expressions."""

from __future__ import annotations

from dataclasses import dataclass

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _quote(text: str) -> str:
    parts = ['"']
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            parts.append(f"\\u{{{ord(ch):x}}}")
    parts.append('"')
    return "".join(parts)


@dataclass(frozen=True)
class Pred:
    """A configuration predicate: a bare flag or a key with a string value."""

    key: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.key
        return f"{self.key} = {_quote(self.value)}"


def flag(s: str) -> Pred:
    """A bare flag such as ``unix``."""
    return Pred(s)


def key_value(key: str, value: str) -> Pred:
    """A ``key = "value"`` predicate."""
    return Pred(key, value)


def target_family(s: str) -> Pred:
    return key_value("target_family", s)


def target_vendor(s: str) -> Pred:
    return key_value("target_vendor", s)


def target_arch(s: str) -> Pred:
    return key_value("target_arch", s)


def target_os(s: str) -> Pred:
    return key_value("target_os", s)


def target_env(s: str) -> Pred:
    return key_value("target_env", s)


def target_pointer_width(s: str) -> Pred:
    return key_value("target_pointer_width", s)