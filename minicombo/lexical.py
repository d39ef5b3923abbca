""" Character-level parsers derived from the core. Classification is Python's own. """

from functools import reduce

from .core import Parser, satisfy, many, many1, fmap, keep_left, keep_right, sequence

def is_digit(c:str) -> bool: return c.isdecimal()
def is_letter(c:str) -> bool: return c.isalpha()
def is_whitespace(c:str) -> bool: return c.isspace()

digit = satisfy(is_digit)
letter = satisfy(is_letter)
whitespace = satisfy(is_whitespace)
spaces = many(whitespace)

def char(expect:str) -> Parser:
	assert len(expect) == 1, expect
	return satisfy(lambda c: c == expect)

def skip_char(expect:str) -> Parser:
	return fmap(char(expect), lambda _: None)

def literal(expect:str) -> Parser:
	""" Match a fixed string exactly, yielding it. """
	@sequence
	def matched():
		for c in expect: yield char(c)
		return expect
	return matched

def string_of(parser:Parser) -> Parser:
	""" One or more matches of a character parser, glued back together. """
	return fmap(many1(parser), ''.join)

def lexeme(parser:Parser) -> Parser:
	""" The parser, then any amount of trailing whitespace. """
	return keep_left(parser, spaces)

def skip_spaces(parser:Parser) -> Parser:
	""" Leading whitespace, then the parser. """
	return keep_right(spaces, parser)

def _make_integer(digits):
	# Python integers do not overflow, so the fold is exact for any length of input.
	return reduce(lambda total, c: total * 10 + int(c), digits, 0)

integer = fmap(many1(digit), _make_integer)
identifier = string_of(letter)
