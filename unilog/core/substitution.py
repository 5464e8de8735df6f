"""
Substitutions: finite maps from variable names to terms.

A Substitution is a value. Nothing ever mutates one in place;
compose() and apply() hand back new objects and share every
untouched term with their inputs.

    s = Substitution({"X": Ctr("f", [Var("Y")])})
    s.apply(Ctr("g", [Var("X"), Var("Y")]))   -> g(f(Y), Y)

apply() is a single pass. It does not chase X -> Y -> ... chains;
folding those in is compose()'s job.
"""

from collections.abc import Mapping
from typing import Iterable, Optional

from .terms import Term, Var, Num, Ctr, is_term


class Substitution(Mapping):
    """Immutable name -> Term mapping with apply and compose."""

    __slots__ = ("_bindings", "_hash")

    def __init__(self, bindings: Optional[Mapping] = None):
        bindings = dict(bindings or {})
        for name, term in bindings.items():
            if not isinstance(name, str):
                raise TypeError(f"Substitution keys are variable names, got {name!r}")
            if not is_term(term):
                raise TypeError(f"Substitution values are terms, got {term!r}")
        self._bindings = bindings
        self._hash = None

    @classmethod
    def empty(cls) -> "Substitution":
        return _EMPTY

    @classmethod
    def of(cls, name: str, term: Term) -> "Substitution":
        """Singleton binding name -> term."""
        return cls({name: term})

    @classmethod
    def _trusted(cls, bindings: dict) -> "Substitution":
        sub = cls.__new__(cls)
        sub._bindings = bindings
        sub._hash = None
        return sub

    # ── Mapping protocol ────────────────────────────────────────────────

    def __getitem__(self, name: str) -> Term:
        return self._bindings[name]

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __eq__(self, other):
        if isinstance(other, Substitution):
            return self._bindings == other._bindings
        return NotImplemented

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._bindings.items()))
        return self._hash

    # ── Algebra ─────────────────────────────────────────────────────────

    def apply(self, term: Term) -> Term:
        """Replace every bound variable in term by its value, once."""
        if not is_term(term):
            raise TypeError(f"Expected Term, got {term!r}")
        if not self._bindings:
            return term

        # post-order rebuild on an explicit stack; long lists nest deeply
        done = []
        stack = [(term, False)]
        while stack:
            node, rebuild = stack.pop()
            if isinstance(node, Var):
                done.append(self._bindings.get(node.name, node))
            elif isinstance(node, Num) or not node.args:
                done.append(node)
            elif rebuild:
                args = tuple(done[-node.arity:])
                del done[-node.arity:]
                done.append(Ctr(node.name, args))
            else:
                stack.append((node, True))
                stack.extend((arg, False) for arg in reversed(node.args))
        return done[0]

    def compose(self, other: "Substitution") -> "Substitution":
        """
        Apply self, then other.

        other is applied to every value self binds, then other's own
        bindings are laid on top; on a shared key other wins.
        """
        if not other._bindings:
            return self
        if not self._bindings:
            return other
        bindings = {name: other.apply(term) for name, term in self._bindings.items()}
        bindings.update(other._bindings)
        return Substitution._trusted(bindings)

    def restrict(self, names: Iterable[str]) -> "Substitution":
        """Keep only the bindings for names, e.g. the variables of a goal."""
        return Substitution._trusted(
            {n: self._bindings[n] for n in names if n in self._bindings}
        )

    def to_dict(self) -> dict:
        from .serialization import term_to_json
        return {name: term_to_json(term) for name, term in self._bindings.items()}

    @classmethod
    def from_dict(cls, d: dict) -> "Substitution":
        from .serialization import term_from_json
        return cls({name: term_from_json(t) for name, t in d.items()})

    def __str__(self):
        if not self._bindings:
            return "{}"
        items = [f"{name} -> {self._bindings[name]}" for name in sorted(self._bindings)]
        return "{" + ", ".join(items) + "}"

    def __repr__(self):
        return f"Substitution({self})"


_EMPTY = Substitution()
