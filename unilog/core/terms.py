"""
Terms: the symbolic values everything else operates on.

    Var("X")                      -> variable, identified by name
    Num(3)                        -> non-negative integer constant
    Ctr("f", [Var("X"), Num(1)])  -> compound: functor applied to arguments
    Ctr("nil")                    -> zero-arity compound, an atomic symbol

All three are frozen and hashable. Two terms are equal iff they are
structurally identical. str() gives the canonical textual form:
    X    3    f(X, 1)    nil()
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union


def union_names(*groups: Iterable[str]) -> Tuple[str, ...]:
    """Ordered union: first-seen order, no duplicates."""
    seen = {}
    for group in groups:
        for name in group:
            seen.setdefault(name, None)
    return tuple(seen)


def walk(term):
    """Every subterm of term, pre-order, left to right. No recursion."""
    stack = [term]
    while stack:
        t = stack.pop()
        yield t
        if isinstance(t, Ctr):
            stack.extend(reversed(t.args))


def _check_name(kind: str, name):
    if not isinstance(name, str):
        raise TypeError(f"{kind} name must be a str, got {name!r}")


@dataclass(frozen=True)
class Var:
    """A logic variable. Same name, same variable."""
    name: str

    def __post_init__(self):
        _check_name("Var", self.name)

    def vars(self) -> Tuple[str, ...]:
        return (self.name,)

    def has_var(self, name: str) -> bool:
        return self.name == name

    @property
    def is_ground(self) -> bool:
        return False

    def simplify(self):
        from .arithmetic import simplify
        return simplify(self)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Num:
    """An unsigned integer constant."""
    val: int

    def __post_init__(self):
        if isinstance(self.val, bool) or not isinstance(self.val, int):
            raise ValueError(f"Num expects an int, got {self.val!r}")
        if self.val < 0:
            raise ValueError(f"Num is unsigned, got {self.val}")

    def vars(self) -> Tuple[str, ...]:
        return ()

    def has_var(self, name: str) -> bool:
        return False

    @property
    def is_ground(self) -> bool:
        return True

    def simplify(self):
        from .arithmetic import simplify
        return simplify(self)

    def __str__(self):
        return str(self.val)


@dataclass(frozen=True)
class Ctr:
    """A compound term: functor name plus ordered arguments."""
    name: str
    args: Tuple["Term", ...] = field(default=())

    def __post_init__(self):
        _check_name("Ctr", self.name)
        args = tuple(self.args)
        for arg in args:
            if not isinstance(arg, (Var, Num, Ctr)):
                raise TypeError(f"Expected Term argument to {self.name}, got {arg!r}")
        object.__setattr__(self, "args", args)

    @property
    def arity(self) -> int:
        return len(self.args)

    def vars(self) -> Tuple[str, ...]:
        return union_names(t.name for t in walk(self) if isinstance(t, Var))

    def has_var(self, name: str) -> bool:
        """Occurs check: does variable `name` appear anywhere in here?"""
        return any(isinstance(t, Var) and t.name == name for t in walk(self))

    @property
    def is_ground(self) -> bool:
        return not any(isinstance(t, Var) for t in walk(self))

    def simplify(self):
        from .arithmetic import simplify
        return simplify(self)

    def __str__(self):
        return f"{self.name}({', '.join(str(a) for a in self.args)})"


Term = Union[Var, Num, Ctr]


def is_term(value) -> bool:
    return isinstance(value, (Var, Num, Ctr))
