"""
unilog: the algebraic core of a Prolog-style logic engine.

Terms, substitutions, Robinson unification with occurs check, and
arithmetic simplification. Pure values in, pure values out: no search,
no clause database, no cut.

Usage:
    python -m unilog unify problem.json
    python -m unilog simplify expr.json
    python -m unilog vars goal.json
"""

from .core.errors import UnilogError, NotUnifiable, NotNumeric, ArithmeticFault
from .core.terms import Var, Num, Ctr, Term
from .core.substitution import Substitution
from .core.program import Atom, Fact, Rule, Clause, Program, Goal
from .core.unification import mgu, unify, unify_atoms
from .core.arithmetic import simplify

__all__ = [
    "UnilogError", "NotUnifiable", "NotNumeric", "ArithmeticFault",
    "Var", "Num", "Ctr", "Term",
    "Substitution",
    "Atom", "Fact", "Rule", "Clause", "Program", "Goal",
    "mgu", "unify", "unify_atoms",
    "simplify",
]
