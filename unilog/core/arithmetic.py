"""
Arithmetic simplification.

Compounds built from + - * / with two arguments are evaluated, operands
first, down to a single Num:

    +(2, *(3, 4))  ->  14

Variables and numbers come back unchanged. Compounds whose functor is
not an operator also come back unchanged -- their arguments are not
visited. This is not a general evaluator.

Arithmetic is over the naturals. 3 - 5 and 7 / 0 raise ArithmeticFault;
/ truncates.
"""

import operator

from .errors import ArithmeticFault, NotNumeric
from .terms import Ctr, Num, Term


def _sub(x: int, y: int) -> int:
    if y > x:
        raise ArithmeticFault(f"{x} - {y} underflows")
    return x - y


def _div(x: int, y: int) -> int:
    if y == 0:
        raise ArithmeticFault(f"{x} / 0")
    return x // y


OPERATORS = {
    "+": operator.add,
    "-": _sub,
    "*": operator.mul,
    "/": _div,
}


def is_op(name: str) -> bool:
    return name in OPERATORS


def simplify(term: Term) -> Term:
    """
    Reduce an arithmetic compound to a Num.

    Raises NotNumeric if an operand does not reduce to a number or an
    operator has other than two arguments; ArithmeticFault on underflow
    or division by zero.
    """
    if not isinstance(term, Ctr) or not is_op(term.name):
        return term
    if term.arity != 2:
        raise NotNumeric(f"{term.name} takes 2 arguments, got {term.arity}: {term}")

    x, y = (simplify(arg) for arg in term.args)
    if not (isinstance(x, Num) and isinstance(y, Num)):
        raise NotNumeric(f"{term} does not reduce to a number")
    return Num(OPERATORS[term.name](x.val, y.val))
