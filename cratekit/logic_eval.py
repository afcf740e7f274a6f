"""Evaluation of boolean expressions."""

from __future__ import annotations

from collections.abc import Callable
import typing as t

from cratekit.logic_ast import All, Any, Const, Expr, Not, Var


def eval_with(expr: Expr, f: Callable[[t.Any], bool]) -> bool:
    """Evaluate ``expr``, asking ``f`` for the value of each variable payload."""
    match expr:
        case Any(items=items):
            return any(eval_with(e, f) for e in items)
        case All(items=items):
            return all(eval_with(e, f) for e in items)
        case Not(inner=inner):
            return not eval_with(inner, f)
        case Var(value=value):
            return bool(f(value))
        case Const(value=value):
            return value
    raise TypeError(f"not an expression: {expr!r}")