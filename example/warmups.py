"""
Small parsers that came before the expression grammar. They still make a decent
introduction: each one uses a little more of the kit than the last.
"""

from minicombo.core import bind, fmap, many, sequence
from minicombo.lexical import integer, identifier, skip_char, whitespace, string_of

# Explicit binds: integer '+' integer, valued as the sum.
sum_of_two = bind(integer, lambda first: skip_char('+') >> fmap(integer, lambda second: first + second))

# The same shape, written with generator sugar.
@sequence
def key_value():
	name = yield identifier
	yield skip_char('=')
	value = yield integer
	return name, value

@sequence
def key_values():
	first = yield key_value
	rest = yield many(string_of(whitespace) >> key_value)
	return [first] + rest
