"""
Robinson unification with occurs check.

Given two terms, find the most general substitution that makes them
identical -- or report that none exists.

Case order matters; the first match wins:
    X  ~ X             -> {}
    X  ~ Y             -> {X -> Y}            (left is bound to right)
    X  ~ f(..)         -> {X -> f(..)}        unless X occurs in f(..)
    n  ~ m             -> {} iff n == m
    X  ~ n             -> {X -> n}
    f(xs) ~ g(ys)      -> fail if f != g or arities differ
    f(xs) ~ f(ys)      -> unify pairwise, left to right, threading bindings
    anything else      -> fail

Threading is what makes f(X, X) ~ f(1, 2) fail: by the second pair
X has already become 1.
"""

from typing import Optional, Union

from .errors import NotUnifiable
from .program import Atom
from .substitution import Substitution
from .terms import Ctr, Num, Term, Var, is_term


def occurs_in(name: str, term: Term) -> bool:
    """Does variable name occur anywhere in term? Prevents infinite terms."""
    return term.has_var(name)


def _describe(t: Term) -> str:
    if isinstance(t, Ctr):
        return f"{t.name}/{t.arity}"
    return str(t)


def mgu_terms(t1: Term, t2: Term) -> Substitution:
    """
    Most general unifier of two terms. Raises NotUnifiable.

    Argument pairs wait on an explicit stack, first argument on top, so
    the walk is depth-first and left to right without recursing; long
    lists nest as deep as they are long.
    """
    for t in (t1, t2):
        if not is_term(t):
            raise TypeError(f"Expected Term, got {t!r}")

    acc = Substitution.empty()
    pending = [(t1, t2)]
    while pending:
        a, b = pending.pop()
        step = _unify_pair(acc.apply(a), acc.apply(b), pending)
        if step:
            acc = acc.compose(step)
    return acc


def _unify_pair(t1: Term, t2: Term, pending: list) -> Substitution:
    """One case of the table above. Compound pairs push their arguments."""
    if isinstance(t1, Var) and isinstance(t2, Var):
        if t1.name == t2.name:
            return Substitution.empty()
        return Substitution.of(t1.name, t2)

    if isinstance(t1, Var) and isinstance(t2, Ctr):
        return _bind(t1.name, t2)
    if isinstance(t1, Ctr) and isinstance(t2, Var):
        return _bind(t2.name, t1)

    if isinstance(t1, Num) and isinstance(t2, Num):
        if t1.val == t2.val:
            return Substitution.empty()
        raise NotUnifiable(f"{t1} and {t2} are different numbers")

    # numbers hold no variables; no occurs check needed
    if isinstance(t1, Var) and isinstance(t2, Num):
        return Substitution.of(t1.name, t2)
    if isinstance(t1, Num) and isinstance(t2, Var):
        return Substitution.of(t2.name, t1)

    if isinstance(t1, Ctr) and isinstance(t2, Ctr):
        if t1.name != t2.name or t1.arity != t2.arity:
            raise NotUnifiable(f"{_describe(t1)} does not match {_describe(t2)}")
        pending.extend(reversed(list(zip(t1.args, t2.args))))
        return Substitution.empty()

    raise NotUnifiable(f"{_describe(t1)} and {_describe(t2)} have incompatible shapes")


def _bind(name: str, ctr: Ctr) -> Substitution:
    if occurs_in(name, ctr):
        raise NotUnifiable(f"occurs check: {name} occurs in {_describe(ctr)}")
    return Substitution.of(name, ctr)


def unify_atoms(a1: Atom, a2: Atom) -> Substitution:
    """Atoms unify exactly as their compound-term views do."""
    return mgu_terms(a1.as_ctr(), a2.as_ctr())


def mgu(left: Union[Term, Atom], right: Union[Term, Atom]) -> Substitution:
    """
    Most general unifier of two terms or of two atoms.

    Raises NotUnifiable if there is none. Mixing an atom with a term
    is a caller error (TypeError), not a unification failure.
    """
    if isinstance(left, Atom) and isinstance(right, Atom):
        return unify_atoms(left, right)
    if isinstance(left, Atom) or isinstance(right, Atom):
        raise TypeError(f"Cannot unify an atom with a term: {left!r}, {right!r}")
    return mgu_terms(left, right)


def unify(left: Union[Term, Atom], right: Union[Term, Atom]) -> Optional[Substitution]:
    """
    Like mgu(), but failure is None instead of an exception.

    For search loops where most attempts are expected to fail.
    """
    try:
        return mgu(left, right)
    except NotUnifiable:
        return None
