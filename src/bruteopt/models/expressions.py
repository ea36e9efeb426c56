"""
Linear Expression Builder
=========================
Optional sugar for writing objectives and restrictions as arithmetic::

    p1, p2, p3 = variables("p1", "p2", "p3")
    objective = 50 * p1 + 20 * p2 + 25 * p3      # LinearExpr, scope -> float
    capacity = 9 * p1 + 3 * p2 + 5 * p3 <= 500   # Comparison, scope -> bool

Both are plain callables over a ``ProblemScope``; the engine never needs to
know they came from here.
"""
import operator
from numbers import Real
from typing import Dict, Hashable, Optional, Tuple

from .scope import ProblemScope


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class LinearExpr:
    """``constant + sum(coefficient * variable)``, evaluated against a scope."""

    __slots__ = ("terms", "constant")

    def __init__(self, terms: Optional[Dict[Hashable, float]] = None, constant: float = 0.0):
        self.terms: Dict[Hashable, float] = dict(terms or {})
        self.constant = float(constant)

    @staticmethod
    def coerce(other) -> Optional["LinearExpr"]:
        if isinstance(other, LinearExpr):
            return other
        if isinstance(other, Var):
            return LinearExpr({other.key: 1.0})
        if isinstance(other, Real):
            return LinearExpr(constant=float(other))
        return None

    def __call__(self, scope: ProblemScope) -> float:
        return self.constant + scope.linear(self.terms)

    def _scaled(self, factor: float) -> "LinearExpr":
        return LinearExpr(
            {k: c * factor for k, c in self.terms.items()},
            self.constant * factor,
        )

    def __add__(self, other):
        rhs = LinearExpr.coerce(other)
        if rhs is None:
            return NotImplemented
        terms = dict(self.terms)
        for key, coef in rhs.terms.items():
            terms[key] = terms.get(key, 0.0) + coef
        return LinearExpr(terms, self.constant + rhs.constant)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = LinearExpr.coerce(other)
        if rhs is None:
            return NotImplemented
        return self + rhs._scaled(-1.0)

    def __rsub__(self, other):
        lhs = LinearExpr.coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self._scaled(-1.0)

    def __neg__(self):
        return self._scaled(-1.0)

    def __mul__(self, other):
        # Only scaling by a constant keeps the expression linear
        if not isinstance(other, Real):
            return NotImplemented
        return self._scaled(float(other))

    __rmul__ = __mul__

    def _compare(self, other, symbol: str) -> "Comparison":
        rhs = LinearExpr.coerce(other)
        if rhs is None:
            return NotImplemented
        return Comparison(self, symbol, rhs)

    def __le__(self, other):
        return self._compare(other, "<=")

    def __lt__(self, other):
        return self._compare(other, "<")

    def __ge__(self, other):
        return self._compare(other, ">=")

    def __gt__(self, other):
        return self._compare(other, ">")

    def __str__(self) -> str:
        parts = []
        for key, coef in self.terms.items():
            parts.append(str(key) if coef == 1.0 else f"{_fmt(coef)}*{key}")
        if self.constant or not parts:
            parts.append(_fmt(self.constant))
        return " + ".join(parts).replace("+ -", "- ")

    def __repr__(self) -> str:
        return f"LinearExpr({self})"


class Comparison:
    """A linear inequality; calling it on a scope tells whether it holds."""

    OPERATORS = {
        "<=": operator.le,
        "<": operator.lt,
        ">=": operator.ge,
        ">": operator.gt,
    }

    __slots__ = ("lhs", "symbol", "rhs")

    def __init__(self, lhs: LinearExpr, symbol: str, rhs: LinearExpr):
        if symbol not in self.OPERATORS:
            raise ValueError(f"Unsupported comparison operator: {symbol!r}")
        self.lhs = lhs
        self.symbol = symbol
        self.rhs = rhs

    def __call__(self, scope: ProblemScope) -> bool:
        return self.OPERATORS[self.symbol](self.lhs(scope), self.rhs(scope))

    def __bool__(self):
        raise TypeError(
            f"Comparison '{self}' has no truth value on its own; "
            "register it as a restriction or call it with a scope"
        )

    @property
    def name(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"{self.lhs} {self.symbol} {self.rhs}"

    def __repr__(self) -> str:
        return f"Comparison({self})"


class Var:
    """Expression handle for one decision variable, identified by ``key``."""

    __slots__ = ("key",)

    def __init__(self, key: Hashable):
        self.key = key

    def expr(self) -> LinearExpr:
        return LinearExpr({self.key: 1.0})

    def __call__(self, scope: ProblemScope) -> float:
        return scope.value(self.key)

    def __eq__(self, other):
        if isinstance(other, Var):
            return self.key == other.key
        return NotImplemented

    def __hash__(self):
        return hash(("Var", self.key))

    def __add__(self, other):
        return self.expr() + other

    def __radd__(self, other):
        return other + self.expr()

    def __sub__(self, other):
        return self.expr() - other

    def __rsub__(self, other):
        return other - self.expr()

    def __neg__(self):
        return -self.expr()

    def __mul__(self, other):
        return self.expr() * other

    __rmul__ = __mul__

    def __le__(self, other):
        return self.expr() <= other

    def __lt__(self, other):
        return self.expr() < other

    def __ge__(self, other):
        return self.expr() >= other

    def __gt__(self, other):
        return self.expr() > other

    def __str__(self) -> str:
        return str(self.key)

    def __repr__(self) -> str:
        return f"Var({self.key!r})"


def variables(*keys: Hashable) -> Tuple[Var, ...]:
    """One ``Var`` per key, in argument order."""
    return tuple(Var(k) for k in keys)
