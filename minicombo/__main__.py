"""
Parse arithmetic expressions and print their fully parenthesized form.

Expressions come from the command line, or else one per line from standard input
(type "quit" on a line by itself, or finish stdin, to stop). Integers, variables,
+ - * / and parentheses are understood, with the usual precedence.

Parsing takes the longest prefix that forms an expression; anything after that is
noted on standard error but is not an error unless --complete is given.
"""

import sys, argparse, warnings

from minicombo.core import run
from minicombo.expression import parse_expression, render, evaluate
from minicombo.lexical import identifier, skip_char
from minicombo.report import complain

def let_binding(text:str):
	""" Argument type for NAME=VALUE, where VALUE is an int or a float. """
	result = run(identifier << skip_char('='), text)
	if result is None: raise argparse.ArgumentTypeError("expected NAME=VALUE, got %r"%text)
	name, position = result
	for kind in (int, float):
		try: return name, kind(text[position:])
		except ValueError: pass
	raise argparse.ArgumentTypeError("%r is not a number"%text[position:])

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m minicombo', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('expressions', nargs='*', help='expressions to parse; read standard input if none are given')
	parser.add_argument('-s', '--spaces', action='store_true', help='allow whitespace around tokens')
	parser.add_argument('-e', '--evaluate', action='store_true', help='also print the value of each expression')
	parser.add_argument('-l', '--let', type=let_binding, action='append', default=[], metavar='NAME=VALUE', help='give a variable a value for --evaluate; may be repeated')
	parser.add_argument('-c', '--complete', action='store_true', help='treat text left over after the expression as an error')
	return parser.parse_args(argv)

def each_line(stream):
	for line in stream:
		text = line.strip()
		if text.lower() == 'quit': break
		elif text: yield text

def process(text:str, args, environment:dict) -> int:
	""" Handle one expression; returns an exit status. """
	result = parse_expression(text, spaces=args.spaces)
	if result is None:
		complain(text, None, "Not an expression: %r"%text, caption="nothing parses here")
		return 1
	tree, position = result
	if position < len(text):
		if args.complete:
			complain(text, result, "Unconsumed text after the expression.", caption="stopped here")
			return 1
		complain(text, result, "Note: only the first %d character(s) were parsed."%position, caption="ignored")
	print(render(tree))
	if args.evaluate:
		try: print(" -->", evaluate(tree, environment))
		except KeyError as ex:
			print("No such variable %r."%ex.args, file=sys.stderr)
			return 1
		except ZeroDivisionError:
			print("Division by zero.", file=sys.stderr)
			return 1
	return 0

def main(args) -> int:
	environment = {}
	for name, value in args.let:
		if name in environment: warnings.warn("variable %r given more than once; using %r"%(name, value))
		environment[name] = value
	status = 0
	for text in args.expressions or each_line(sys.stdin):
		status = max(status, process(text, args, environment))
	return status

if __name__ == '__main__': sys.exit(main(parse_arguments()))
