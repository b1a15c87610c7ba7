#!/usr/bin/env python3

import argparse as arg
import logging
import math
import sys

from mathexpr.backend.evaluator import evaluate, parse_expression
from mathexpr.frontend.errors import EvalError

log = logging.getLogger('calc')

QUIT = 'q'

def format_result(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer():
        return str(int(value))
    return repr(value)

def run(src: str, show_tree=False, out=None, err=None) -> bool:
    """Evaluates one expression and prints the outcome. Returns False on error."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        tree = parse_expression(src)
        if show_tree:
            print(tree, end='', file=out)
        print(format_result(evaluate(tree)), file=out)
    except EvalError as e:
        print(f'Error: {e}', file=err)
        return False
    return True

def repl(prompt: str, show_tree=False, out=None, err=None) -> None:
    try:
        import readline # noqa: F401, line editing for input()
    except ImportError:
        log.debug('readline unavailable, line editing disabled')
    try:
        while True:
            line = input(prompt).strip()
            if line.lower() == QUIT:
                break
            if not line:
                continue
            run(line, show_tree, out, err)
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='calc',
        description='Evaluates arithmetic expressions over + - * / ^ and parentheses',
        epilog=f"Without an expression, starts an interactive session; enter '{QUIT}' to quit.")

    parser.add_argument('expression', nargs='*',
                        help='expression to evaluate once, e.g. "2 * (3 + 4)"')
    parser.add_argument('-e', '--expr', dest='expr', default=None,
                        help='expression to evaluate once')
    parser.add_argument('-t', '--tree', dest='tree', action='store_true', default=False,
                        help='print the expression tree before its value')
    parser.add_argument('-p', '--prompt', dest='prompt', default='expr: ')
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    if args.expr is not None and args.expression:
        parser.error('give the expression either positionally or with -e, not both')

    src = args.expr if args.expr is not None else ' '.join(args.expression)
    if args.expr is None and not args.expression:
        repl(args.prompt, args.tree)
        return 0
    return 0 if run(src, args.tree) else 1

if __name__ == '__main__':
    sys.exit(main())
