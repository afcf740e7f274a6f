"""Boolean expression trees over arbitrary variables."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import typing as t


class Expr:
    """Base class of every boolean expression node."""

    def is_const_true(self) -> bool:
        return isinstance(self, Const) and self.value is True

    def is_const_false(self) -> bool:
        return isinstance(self, Const) and self.value is False

    def is_expr_not_var(self) -> bool:
        """True for ``not(<var>)``."""
        return isinstance(self, Not) and isinstance(self.inner, Var)

    def is_empty_not_any(self) -> bool:
        """True for ``not(any())``."""
        return isinstance(self, Not) and isinstance(self.inner, Any) and not self.inner.items

    def is_empty_not_all(self) -> bool:
        """True for ``not(all())``."""
        return isinstance(self, Not) and isinstance(self.inner, All) and not self.inner.items


@dataclass(eq=True)
class Any(Expr):
    """Disjunction of its items."""

    items: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return _fmt_list("any", self.items)


@dataclass(eq=True)
class All(Expr):
    """Conjunction of its items."""

    items: list[Expr] = field(default_factory=list)

    def __str__(self) -> str:
        return _fmt_list("all", self.items)


@dataclass(eq=True)
class Not(Expr):
    """Negation of the inner expression."""

    inner: Expr

    def __str__(self) -> str:
        return f"not({self.inner})"


@dataclass(frozen=True)
class Var(Expr):
    """A variable carrying an arbitrary payload."""

    value: t.Any

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Const(Expr):
    """A boolean constant."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


def _fmt_list(name: str, items: list[Expr]) -> str:
    return f"{name}({', '.join(str(e) for e in items)})"


def expr(x: t.Any) -> Expr:
    """Convert ``x`` to an expression: nodes pass through, bools become
    constants, anything else becomes a variable."""
    if isinstance(x, Expr):
        return x
    if isinstance(x, bool):
        return Const(x)
    return Var(x)


def any_(x: Any | Iterable[t.Any]) -> Any:
    """Build a disjunction from an iterable of expression-convertible values."""
    if isinstance(x, Any):
        return x
    return Any([expr(e) for e in x])


def all_(x: All | Iterable[t.Any]) -> All:
    """Build a conjunction from an iterable of expression-convertible values."""
    if isinstance(x, All):
        return x
    return All([expr(e) for e in x])


def not_(x: t.Any) -> Not:
    """Negate ``x``."""
    return Not(expr(x))


def var(x: t.Any) -> Var:
    """Wrap ``x`` as a variable."""
    return x if isinstance(x, Var) else Var(x)


def const(x: bool) -> Expr:
    """Build a boolean constant."""
    if not isinstance(x, bool):
        raise TypeError(f"expected bool, got {type(x).__name__}")
    return Const(x)