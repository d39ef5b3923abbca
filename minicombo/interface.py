"""
Types which every part of minicombo deals in.

A parser answers exactly one question: starting at this offset into this text,
does a prefix match, and if so, what is it worth and where does it end?
The answer is either a `Success` or `None`. There is deliberately nothing in
between: a failure carries no position, no expectation set, no message. That
keeps alternation trivially correct, since a failed alternative can never
have moved the caller's cursor.

Mistakes in the *construction* of a grammar are another matter entirely.
Those are bugs in the program, not properties of the input, and they raise.
"""

from typing import NamedTuple, Any

class Success(NamedTuple):
	value: Any
	position: int # Just past the last consumed character.

class GrammarError(Exception):
	""" Base class of all exceptions arising from mis-assembled grammars. """

class UnassignedReference(GrammarError):
	""" A forwarding parser ran before anything was assigned to its reference cell. """

class ReassignedReference(GrammarError):
	""" Reference cells are assigned exactly once. """
