"""
The parser core: a handful of primitives and the combinators that glue them together.

A `Parser` is nothing but a callable `(text, position) -> Success | None` in a thin
wrapper. The wrapper exists so that grammars can be written with a few operators:

	a | b     ordered choice
	a >> b    keep-right: run a then b, keep b's value
	a << b    keep-left: run a then b, keep a's value
	a & b     pair: run a then b, keep both values as a 2-tuple

Every combinator builds a new parser; none ever mutates an old one. Grammars are
assembled once and invoked as often as you like. Mind the one caller obligation:
`many` (and anything built on it) must never wrap a parser which can succeed
without consuming input, or it will spin forever.

Combinators call straight through to each other's `_fn`, looked up afresh on every
call, so that nested grammars spend as few Python stack frames per level as possible.
"""

from typing import Callable, Iterable, Optional

from .interface import Success

class Parser:
	""" Wraps a parsing function so that it composes nicely. """
	__slots__ = ('_fn',)

	def __init__(self, fn:Callable[[str, int], Optional[Success]]):
		self._fn = fn

	def __call__(self, text:str, position:int) -> Optional[Success]:
		return self._fn(text, position)

	def bind(self, continuation) -> "Parser": return bind(self, continuation)
	def map(self, f) -> "Parser": return fmap(self, f)
	def __or__(self, other:"Parser") -> "Parser": return choice(self, other)
	def __rshift__(self, other:"Parser") -> "Parser": return keep_right(self, other)
	def __lshift__(self, other:"Parser") -> "Parser": return keep_left(self, other)
	def __and__(self, other:"Parser") -> "Parser": return pair(self, other)


def run(parser:Parser, text:str) -> Optional[Success]:
	"""
	Apply a parser from the beginning of the text.
	Trailing unconsumed text is not an error: compare the result's position
	against len(text) if you care.
	"""
	return parser._fn(text, 0)

def _item(text, position):
	if 0 <= position < len(text):
		return Success(text[position], position+1)
	return None

item = Parser(_item) # The only primitive which looks for the end of the text.

def succeed(value) -> Parser:
	return Parser(lambda text, position: Success(value, position))

_NEVER = Parser(lambda text, position: None)

def fail() -> Parser:
	return _NEVER

def bind(parser:Parser, continuation:Callable[[object], Parser]) -> Parser:
	"""
	The one true composition primitive. On success, the continuation gets the value
	and must return the parser to run from wherever the first one left off.
	"""
	def bound(text, position):
		result = parser._fn(text, position)
		if result is None: return None
		return continuation(result.value)._fn(text, result.position)
	return Parser(bound)

def fmap(parser:Parser, f:Callable) -> Parser:
	def mapped(text, position):
		result = parser._fn(text, position)
		if result is None: return None
		return Success(f(result.value), result.position)
	return Parser(mapped)

def choice(*alternatives:Parser) -> Parser:
	""" Commit to the first alternative that succeeds. Each one starts over from the same position. """
	assert alternatives, "A choice among nothing is better written as fail()."
	def chosen(text, position):
		for alternative in alternatives:
			result = alternative._fn(text, position)
			if result is not None: return result
		return None
	return Parser(chosen)

def keep_right(a:Parser, b:Parser) -> Parser:
	def right(text, position):
		first = a._fn(text, position)
		if first is None: return None
		return b._fn(text, first.position)
	return Parser(right)

def keep_left(a:Parser, b:Parser) -> Parser:
	def left(text, position):
		first = a._fn(text, position)
		if first is None: return None
		second = b._fn(text, first.position)
		if second is None: return None
		return Success(first.value, second.position)
	return Parser(left)

def pair(a:Parser, b:Parser) -> Parser:
	def paired(text, position):
		first = a._fn(text, position)
		if first is None: return None
		second = b._fn(text, first.position)
		if second is None: return None
		return Success((first.value, second.value), second.position)
	return Parser(paired)

def between(opening:Parser, parser:Parser, closing:Parser) -> Parser:
	def bracketed(text, position):
		result = opening._fn(text, position)
		if result is None: return None
		inside = parser._fn(text, result.position)
		if inside is None: return None
		result = closing._fn(text, inside.position)
		if result is None: return None
		return Success(inside.value, result.position)
	return Parser(bracketed)

def many(parser:Parser) -> Parser:
	""" Zero or more. Never fails: stops at the first failure with whatever it has so far. """
	def repeated(text, position):
		values = []
		while True:
			result = parser._fn(text, position)
			if result is None: return Success(values, position)
			values.append(result.value)
			position = result.position
	return Parser(repeated)

def many1(parser:Parser) -> Parser:
	""" One or more. Fails only if the very first application fails. """
	rest = many(parser)
	def repeated(text, position):
		head = parser._fn(text, position)
		if head is None: return None
		tail = rest._fn(text, head.position)
		return Success([head.value] + tail.value, tail.position)
	return Parser(repeated)

def satisfy(predicate:Callable[[str], bool]) -> Parser:
	def satisfied(text, position):
		result = _item(text, position)
		if result is None or not predicate(result.value): return None
		return result
	return Parser(satisfied)

def chain_left(term:Parser, operator:Parser) -> Parser:
	"""
	Parse `term (operator term)*` and fold the result left-associatively.
	The operator parser's value must be a function (accumulator, next_term) -> accumulator.

	Stops, without failing, at the first place where an operator-term pair does
	not parse; in that case the dangling operator (if any) is left unconsumed.
	Precedence comes from nesting: use a tighter chain as the `term` of a looser one.
	"""
	def chained(text, position):
		result = term._fn(text, position)
		if result is None: return None
		accumulator, position = result
		while True:
			step = operator._fn(text, position)
			if step is None: break
			following = term._fn(text, step.position)
			if following is None: break
			accumulator = step.value(accumulator, following.value)
			position = following.position
		return Success(accumulator, position)
	return Parser(chained)

def sequence(generator_function:Callable[[], Iterable]) -> Parser:
	"""
	Decorator sugar for long chains of `bind`. The decorated generator yields
	parsers and receives each one's value in turn; whatever it finally returns
	is the value of the whole. Any yielded parser failing means the whole thing
	fails. For example:

		@sequence
		def assignment():
			name = yield identifier
			yield skip_char('=')
			value = yield integer
			return name, value

	A fresh generator runs on every invocation, so the resulting parser keeps
	no state between runs.
	"""
	def sequenced(text, position):
		steps = generator_function()
		try: step = next(steps)
		except StopIteration as stop: return Success(stop.value, position)
		while True:
			result = step._fn(text, position)
			if result is None:
				steps.close()
				return None
			position = result.position
			try: step = steps.send(result.value)
			except StopIteration as stop: return Success(stop.value, position)
	return Parser(sequenced)
