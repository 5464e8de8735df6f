"""
JSON encoding for terms, atoms, clauses and substitutions.

    Num(3)                    <->  3
    Var("X")                  <->  {"_var": "X"}
    Ctr("f", [Var("X"), 1])   <->  {"_fn": ["f", {"_var": "X"}, 1]}
    Atom                      <->  same as its compound view
    Fact                      <->  {"type": "fact", "head": atom}
    Rule                      <->  {"type": "rule", "head": atom, "body": [atom, ...]}
    Substitution              <->  {"X": term, ...}
"""

import json

from .program import Atom, Fact, Goal, Program, Rule
from .substitution import Substitution
from .terms import Ctr, Num, Var


def term_to_json(t):
    if isinstance(t, Num):
        return t.val
    if isinstance(t, Var):
        return {"_var": t.name}
    if isinstance(t, Ctr):
        return {"_fn": [t.name] + [term_to_json(a) for a in t.args]}
    raise TypeError(f"Expected Term, got {t!r}")


def term_from_json(d):
    if isinstance(d, bool):
        raise ValueError(f"Not a term: {d!r}")
    if isinstance(d, int):
        return Num(d)
    if isinstance(d, dict):
        if "_var" in d:
            if not isinstance(d["_var"], str):
                raise ValueError(f"Variable name must be a string: {d!r}")
            return Var(d["_var"])
        if isinstance(d.get("_fn"), list) and d["_fn"]:
            name, *args = d["_fn"]
            if not isinstance(name, str):
                raise ValueError(f"Functor name must be a string: {d!r}")
            return Ctr(name, tuple(term_from_json(a) for a in args))
    raise ValueError(f"Not a term: {d!r}")


def atom_to_json(atom: Atom):
    return term_to_json(atom.as_ctr())


def atom_from_json(d) -> Atom:
    ctr = term_from_json(d)
    if not isinstance(ctr, Ctr):
        raise ValueError(f"Not an atom: {d!r}")
    return Atom.from_ctr(ctr)


def clause_to_json(clause):
    if isinstance(clause, Fact):
        return {"type": "fact", "head": atom_to_json(clause.head)}
    if isinstance(clause, Rule):
        return {"type": "rule", "head": atom_to_json(clause.head),
                "body": [atom_to_json(a) for a in clause.body]}
    raise TypeError(f"Expected Fact or Rule, got {clause!r}")


def clause_from_json(d):
    kind = d.get("type")
    if kind == "fact":
        return Fact(atom_from_json(d["head"]))
    if kind == "rule":
        return Rule(atom_from_json(d["head"]),
                    tuple(atom_from_json(a) for a in d.get("body", [])))
    raise ValueError(f"Unknown clause type: {kind!r}")


def program_to_json(program: Program) -> list:
    return [clause_to_json(c) for c in program]


def program_from_json(data: list) -> Program:
    return Program(tuple(clause_from_json(c) for c in data))


def goal_to_json(goal: Goal) -> list:
    return [atom_to_json(a) for a in goal]


def goal_from_json(data: list) -> Goal:
    return Goal(tuple(atom_from_json(a) for a in data))


def to_json(value):
    """Encode any core value."""
    if isinstance(value, Substitution):
        return value.to_dict()
    if isinstance(value, Atom):
        return atom_to_json(value)
    if isinstance(value, (Fact, Rule)):
        return clause_to_json(value)
    if isinstance(value, Program):
        return program_to_json(value)
    if isinstance(value, Goal):
        return goal_to_json(value)
    return term_to_json(value)


def save(value, path):
    with open(path, "w") as f:
        json.dump(to_json(value), f, indent=2)


def load_problem(path) -> dict:
    """Read a JSON problem document; decoding of its fields is up to the caller."""
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    return data
