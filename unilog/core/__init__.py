from .errors import UnilogError, NotUnifiable, NotNumeric, ArithmeticFault
from .terms import Var, Num, Ctr, Term, is_term
from .substitution import Substitution
from .program import Atom, Fact, Rule, Clause, Program, Goal
from .unification import occurs_in, mgu, mgu_terms, unify, unify_atoms
from .arithmetic import simplify, is_op
from .serialization import (
    term_to_json, term_from_json, atom_to_json, atom_from_json,
    clause_to_json, clause_from_json, program_to_json, program_from_json,
    goal_to_json, goal_from_json, save, load_problem,
)

__all__ = [
    "UnilogError", "NotUnifiable", "NotNumeric", "ArithmeticFault",
    "Var", "Num", "Ctr", "Term", "is_term",
    "Substitution",
    "Atom", "Fact", "Rule", "Clause", "Program", "Goal",
    "occurs_in", "mgu", "mgu_terms", "unify", "unify_atoms",
    "simplify", "is_op",
    "term_to_json", "term_from_json", "atom_to_json", "atom_from_json",
    "clause_to_json", "clause_from_json", "program_to_json", "program_from_json",
    "goal_to_json", "goal_from_json", "save", "load_problem",
]
