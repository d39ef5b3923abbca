"""
Arithmetic expressions, built from nothing but the combinators:

	expr   := term (('+' | '-') term)*
	term   := factor (('*' | '/') factor)*
	factor := '(' expr ')' | integer | identifier

Both binary levels are left-associative chains. Multiplication binds tighter
because the multiplicative chain serves as the "term" of the additive one.
The parenthesized factor refers back to `expr` through a forward reference.

Parsing stops at the end of the longest prefix that forms an expression.
Whatever follows is left alone for the caller to inspect (or ignore).

Nesting is limited by Python's recursion limit: each level of parentheses costs
four stack frames (two chains, the factor choice, the bracketing), so the default
limit of 1000 allows somewhat over two hundred levels. Deeper input raises
RecursionError. Long flat chains such as 1+1+...+1 cost nothing extra.
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .core import Parser, run, fmap, choice, between, chain_left
from .forward import forward
from . import lexical

class BinaryOp(Enum):
	ADD = '+'
	SUBTRACT = '-'
	MULTIPLY = '*'
	DIVIDE = '/'

	def apply(self, left, right): return _ARITHMETIC[self](left, right)

_ARITHMETIC = {
	BinaryOp.ADD: operator.add,
	BinaryOp.SUBTRACT: operator.sub,
	BinaryOp.MULTIPLY: operator.mul,
	BinaryOp.DIVIDE: operator.truediv,
}

@dataclass(frozen=True)
class IntegerConstant:
	value: int

@dataclass(frozen=True)
class Variable:
	name: str

@dataclass(frozen=True)
class BinaryOperation:
	left: "AST"
	operator: BinaryOp
	right: "AST"

AST = Union[IntegerConstant, Variable, BinaryOperation]


def _combiner(op:BinaryOp):
	return lambda left, right: BinaryOperation(left, op, right)

def build_grammar(*, spaces=False) -> Parser:
	"""
	Assemble a fresh expression parser.
	With `spaces=True`, whitespace may surround any token. Otherwise none is allowed.
	"""
	token = lexical.lexeme if spaces else (lambda p: p)
	expression, expression_ref = forward('expression')

	def operators(*ops):
		return choice(*[fmap(token(lexical.skip_char(op.value)), lambda _, op=op: _combiner(op)) for op in ops])

	factor = choice(
		between(token(lexical.skip_char('(')), expression, token(lexical.skip_char(')'))),
		fmap(token(lexical.integer), IntegerConstant),
		fmap(token(lexical.identifier), Variable),
	)
	term = chain_left(factor, operators(BinaryOp.MULTIPLY, BinaryOp.DIVIDE))
	expression_ref.assign(chain_left(term, operators(BinaryOp.ADD, BinaryOp.SUBTRACT)))
	return lexical.skip_spaces(expression) if spaces else expression

EXPRESSION = build_grammar()
SPACED_EXPRESSION = build_grammar(spaces=True)

def parse_expression(text:str, *, spaces=False):
	""" Returns a Success(tree, position) or None. """
	return run(SPACED_EXPRESSION if spaces else EXPRESSION, text)


def render(tree:AST) -> str:
	"""
	Fully parenthesized text. For any tree the grammar can produce (non-negative
	constants, names made of letters) the text parses back to an equal tree.
	A negative constant renders as, say, `-1`, which the grammar does not accept.
	"""
	if isinstance(tree, IntegerConstant): return str(tree.value)
	if isinstance(tree, Variable): return tree.name
	if isinstance(tree, BinaryOperation):
		return '(%s%s%s)'%(render(tree.left), tree.operator.value, render(tree.right))
	raise TypeError(tree)

def evaluate(tree:AST, environment=None):
	"""
	Compute the value of a tree. Variables come from the environment mapping;
	a missing one raises KeyError. Division is true division.
	"""
	if isinstance(tree, IntegerConstant): return tree.value
	if isinstance(tree, Variable): return (environment or {})[tree.name]
	if isinstance(tree, BinaryOperation):
		return tree.operator.apply(evaluate(tree.left, environment), evaluate(tree.right, environment))
	raise TypeError(tree)

def variables(tree:AST) -> list:
	""" Names of the variables mentioned, left to right, repeats included. """
	if isinstance(tree, Variable): return [tree.name]
	if isinstance(tree, BinaryOperation): return variables(tree.left) + variables(tree.right)
	return []
