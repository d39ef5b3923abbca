"""
Recursive grammars need to mention a rule before the rule exists.

`forward()` hands back two things: a forwarding parser, which you may use at once
anywhere the eventual rule belongs, and the reference cell it reads from. Once the
real rule is built (quite possibly out of the forwarding parser itself) assign it
to the cell, and the cycle is closed:

	expression, expression_ref = forward('expression')
	factor = between(skip_char('('), expression, skip_char(')')) | integer
	...
	expression_ref.assign(chain_left(term, additive))

Forgetting the assignment is a construction bug, so running the forwarding
parser too early raises `UnassignedReference` rather than quietly failing.
"""

from typing import Optional

from .core import Parser
from .interface import UnassignedReference, ReassignedReference

class ForwardReference:
	""" A write-once cell holding the parser that a forwarding parser delegates to. """
	__slots__ = ('name', '_target')

	def __init__(self, name:Optional[str]=None):
		self.name = name
		self._target = None

	@property
	def is_assigned(self) -> bool: return self._target is not None

	def assign(self, parser:Parser):
		if self._target is not None: raise ReassignedReference(self.name)
		assert isinstance(parser, Parser), parser
		self._target = parser

	def target_function(self):
		if self._target is None: raise UnassignedReference(self.name)
		return self._target._fn

	def __repr__(self):
		state = 'assigned' if self.is_assigned else 'unassigned'
		return '<ForwardReference %s (%s)>'%(self.name or '?', state)


class _Forwarding(Parser):
	"""
	Its parsing function is whatever the cell holds at the moment of the call.
	Combinators look up `_fn` on every call, so no extra stack frame is spent here.
	"""
	__slots__ = ('_cell',)

	def __init__(self, cell:ForwardReference):
		self._cell = cell

	@property
	def _fn(self): return self._cell.target_function()


def forward(name:Optional[str]=None) -> tuple[Parser, ForwardReference]:
	cell = ForwardReference(name)
	return _Forwarding(cell), cell
