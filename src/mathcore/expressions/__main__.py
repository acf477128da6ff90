#!/usr/bin/env python3
"""
CLI for evaluating expressions and browsing the function registry.

Usage:
    python -m mathcore.expressions eval EXPRESSION [--var NAME=VALUE ...]
    python -m mathcore.expressions list [--category CATEGORY]
    python -m mathcore.expressions describe NAME
    python -m mathcore.expressions examples

Examples:
    # Evaluate an expression
    python -m mathcore.expressions eval "mean({2i; -1; 2.2; 0.6; -11})"

    # Bind variables (values are expressions themselves)
    python -m mathcore.expressions eval "x^2 + y" --var x=3 --var y=2i

    # List the statistics functions
    python -m mathcore.expressions list --category Statistics

    # Re-check every worked example in the registry
    python -m mathcore.expressions examples
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, Tuple

from ..errors import MathCoreError
from .builder import build_tree
from .coercion import Value, format_value
from .errors import BuildError


def parse_binding(binding: str) -> Tuple[str, Value]:
    """Parse 'name=expression' into (name, value); the value may not use variables."""
    if '=' not in binding:
        raise ValueError(f"Invalid variable format: {binding} (expected name=value)")

    name, text = binding.split('=', 1)
    name = name.strip()
    if not name:
        raise ValueError(f"Invalid variable format: {binding} (empty name)")
    return name, build_tree(text, allow_variables=False).evaluate()


def cmd_eval(args):
    """Evaluate an expression and print its result."""
    try:
        bindings = dict(parse_binding(b) for b in (args.var or []))
        tree = build_tree(args.expression)
        result = tree.evaluate(**bindings)
    except BuildError as e:
        print(e.diagnostic.format(), file=sys.stderr)
        return 1
    except (MathCoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_value(result))
    return 0


def cmd_list(args):
    """List registered functions and constants."""
    from .introspection import get_function_info, list_categories, list_functions

    if args.category and args.category.lower() not in [c.lower() for c in list_categories()]:
        print(f"Error: Unknown category: {args.category}", file=sys.stderr)
        print(f"Categories: {', '.join(list_categories())}", file=sys.stderr)
        return 1

    for name in list_functions(args.category):
        info = get_function_info(name)
        print(f"{name:<12} {info['display_name']}")
    return 0


def cmd_describe(args):
    """Describe one function or constant."""
    from .introspection import describe_function, get_function_info

    if get_function_info(args.name) is None:
        print(f"Error: Unknown function: {args.name}", file=sys.stderr)
        return 1
    print(describe_function(args.name))
    return 0


def cmd_examples(args):
    """Evaluate every worked example and report mismatches."""
    from .introspection import check_examples

    results = check_examples()
    failures = [r for r in results if not r.passed]
    for r in failures:
        print(f"FAIL {r.name}: {r.expression} = {r.actual} (expected {r.expected})")
    print(f"{len(results) - len(failures)}/{len(results)} examples passed")
    return 1 if failures else 0


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(
        prog='python -m mathcore.expressions',
        description='Complex scalar and matrix expression evaluator',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='action', required=True)

    # eval command
    eval_parser = subparsers.add_parser('eval', help='Evaluate an expression')
    eval_parser.add_argument('expression', help='Expression text')
    eval_parser.add_argument('--var', action='append', metavar='NAME=VALUE',
                             help='Variable value (can be repeated)')

    # list command
    list_parser = subparsers.add_parser('list', help='List functions and constants')
    list_parser.add_argument('-c', '--category', help='Only list this category')

    # describe command
    describe_parser = subparsers.add_parser('describe', help='Describe a function')
    describe_parser.add_argument('name', help='Function or constant name')

    # examples command
    subparsers.add_parser('examples', help='Check every worked example')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.action == 'eval':
        return cmd_eval(args)
    elif args.action == 'list':
        return cmd_list(args)
    elif args.action == 'describe':
        return cmd_describe(args)
    elif args.action == 'examples':
        return cmd_examples(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
