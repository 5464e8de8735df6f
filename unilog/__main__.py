"""
CLI entry point. Run as: python -m unilog <command> <problem.json>

Problem documents (terms use the encoding in core.serialization):
    unify:     {"left": term, "right": term}
               {"left_atom": atom, "right_atom": atom}
    simplify:  {"term": term}
    vars:      {"term": term}  or  {"goal": [atom, ...]}
"""

import argparse
import json
import sys

from .core.errors import UnilogError
from .core.serialization import (
    atom_from_json, goal_from_json, load_problem, term_from_json, to_json,
)
from .core.arithmetic import simplify
from .core.unification import mgu


def run_unify(problem: dict, quiet: bool):
    if "left_atom" in problem:
        left = atom_from_json(problem["left_atom"])
        right = atom_from_json(problem["right_atom"])
    else:
        left = term_from_json(problem["left"])
        right = term_from_json(problem["right"])
    if not quiet:
        print(f"Unifying {left} with {right}")
    sub = mgu(left, right)
    print(sub)
    return sub


def run_simplify(problem: dict, quiet: bool):
    term = term_from_json(problem["term"])
    if not quiet:
        print(f"Simplifying {term}")
    result = simplify(term)
    print(result)
    return result


def run_vars(problem: dict, quiet: bool):
    if "goal" in problem:
        subject = goal_from_json(problem["goal"])
    else:
        subject = term_from_json(problem["term"])
    if not quiet:
        print(f"Variables of {subject}")
    names = subject.vars()
    print(", ".join(names))
    return list(names)


COMMANDS = {
    "unify":    run_unify,
    "simplify": run_simplify,
    "vars":     run_vars,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Unification and term simplification")
    parser.add_argument("command", choices=list(COMMANDS.keys()), help="What to compute")
    parser.add_argument("problem", help="JSON problem document")
    parser.add_argument("--save",  type=str, default=None, help="Save result to file")
    parser.add_argument("--quiet", action="store_true",    help="Print only the result")
    args = parser.parse_args(argv)

    try:
        problem = load_problem(args.problem)
        result = COMMANDS[args.command](problem, args.quiet)
    except UnilogError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    except (KeyError, ValueError, TypeError) as e:
        print(f"Malformed problem {args.problem}: {e}")
        return 1
    except OSError as e:
        print(f"Cannot read problem {args.problem}: {e.strerror or e}")
        return 1

    if args.save:
        with open(args.save, "w") as f:
            json.dump(result if isinstance(result, list) else to_json(result), f, indent=2)
        if not args.quiet:
            print(f"Result saved to {args.save}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
