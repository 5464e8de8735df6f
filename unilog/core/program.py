"""
Atoms, clauses, programs and goals.

An Atom is a relation applied to arguments -- parent(X, bob). It has
the same shape as a compound term (as_ctr() is lossless), but atoms
live in clause heads, bodies and goals, never inside other terms.

    Fact(head)          parent(tom, bob).
    Rule(head, body)    grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
    Program(clauses)    ordered; order matters to whoever searches it
    Goal(atoms)         ?- grandparent(tom, Who).

These are plain data. A resolution engine consumes them; nothing here
searches, renames or indexes.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from .terms import Ctr, Term, is_term, union_names
from .substitution import Substitution


@dataclass(frozen=True)
class Atom:
    name: str
    args: Tuple[Term, ...] = field(default=())

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"Atom name must be a str, got {self.name!r}")
        args = tuple(self.args)
        for arg in args:
            if not is_term(arg):
                raise TypeError(f"Expected Term argument to {self.name}, got {arg!r}")
        object.__setattr__(self, "args", args)

    @property
    def arity(self) -> int:
        return len(self.args)

    def as_ctr(self) -> Ctr:
        return Ctr(self.name, self.args)

    @classmethod
    def from_ctr(cls, ctr: Ctr) -> "Atom":
        return cls(ctr.name, ctr.args)

    def vars(self) -> Tuple[str, ...]:
        return self.as_ctr().vars()

    def subst(self, sub: Substitution) -> "Atom":
        return Atom(self.name, tuple(sub.apply(arg) for arg in self.args))

    def __str__(self):
        return str(self.as_ctr())


@dataclass(frozen=True)
class Fact:
    head: Atom

    @property
    def body(self) -> Tuple[Atom, ...]:
        return ()

    def vars(self) -> Tuple[str, ...]:
        return self.head.vars()

    def subst(self, sub: Substitution) -> "Fact":
        return Fact(self.head.subst(sub))

    def __str__(self):
        return f"{self.head}."


@dataclass(frozen=True)
class Rule:
    head: Atom
    body: Tuple[Atom, ...]

    def __post_init__(self):
        object.__setattr__(self, "body", tuple(self.body))

    def vars(self) -> Tuple[str, ...]:
        return union_names(self.head.vars(), *(atom.vars() for atom in self.body))

    def subst(self, sub: Substitution) -> "Rule":
        return Rule(self.head.subst(sub), tuple(atom.subst(sub) for atom in self.body))

    def __str__(self):
        return f"{self.head} :- {', '.join(str(a) for a in self.body)}."


Clause = Union[Fact, Rule]


@dataclass(frozen=True)
class Program:
    clauses: Tuple[Clause, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "clauses", tuple(self.clauses))

    def __iter__(self):
        return iter(self.clauses)

    def __len__(self):
        return len(self.clauses)

    def __str__(self):
        return "\n".join(str(c) for c in self.clauses)


@dataclass(frozen=True)
class Goal:
    atoms: Tuple[Atom, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "atoms", tuple(self.atoms))

    def vars(self) -> Tuple[str, ...]:
        return union_names(*(atom.vars() for atom in self.atoms))

    def subst(self, sub: Substitution) -> "Goal":
        return Goal(tuple(atom.subst(sub) for atom in self.atoms))

    @property
    def is_empty(self) -> bool:
        return len(self.atoms) == 0

    def __iter__(self):
        return iter(self.atoms)

    def __len__(self):
        return len(self.atoms)

    def __str__(self):
        return f"?- {', '.join(str(a) for a in self.atoms)}."
