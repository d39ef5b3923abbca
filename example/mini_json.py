""" JSON is JavaScript Object Notation. See http://www.json.org/ for more.
Python has a standard library for JSON, so this is just a worked example:
values nest inside arrays and objects, which nest inside values, so it makes
a fair exercise of forward references. """

from minicombo.core import run, succeed, fmap, choice, between, many, satisfy, sequence
from minicombo.forward import forward
from minicombo.lexical import char, digit, lexeme, literal, skip_char, skip_spaces, string_of

###################################################################################
#  Begin with the lexical bits. Every token swallows the whitespace after it.
###################################################################################

def punctuation(c): return lexeme(skip_char(c))

reserved_words = {'true': True, 'false': False, 'null': None}
def reserved(word): return fmap(lexeme(literal(word)), lambda _: reserved_words[word])

# Numbers are matched as text first and converted at the end, which is much easier
# than trying to do arithmetic one digit at a time with signs and exponents about.
def optional(parser): return parser | succeed('')
digits = string_of(digit)
fraction = fmap(char('.') & digits, ''.join)
exponent = fmap(satisfy('eE'.__contains__) & optional(satisfy('+-'.__contains__)) & digits, lambda x: ''.join(x[0]) + x[1])

@sequence
def number_text():
	sign = yield optional(char('-'))
	whole = yield digits
	fractional = yield optional(fraction)
	power = yield optional(exponent)
	return sign + whole + fractional + power

number = lexeme(fmap(number_text, lambda text: float(text) if set(text) & set('.eE') else int(text)))

# Strings: plain characters in bulk, then the several kinds of escape.
escapes = {'b': '\b', 't': '\t', 'n': '\n', 'f': '\f', 'r': '\r', '"': '"', '/': '/', '\\': '\\'}
plain = string_of(satisfy(lambda c: c not in '\\"'))
simple_escape = fmap(skip_char('\\') >> satisfy(escapes.__contains__), escapes.__getitem__)
hex_digit = satisfy(lambda c: c in '0123456789abcdefABCDEF')

@sequence
def unicode_escape():
	yield literal('\\u')
	code = ''
	for _ in range(4): code += yield hex_digit
	return chr(int(code, 16))

string = lexeme(fmap(between(skip_char('"'), many(choice(plain, unicode_escape, simple_escape)), skip_char('"')), ''.join))

###################################################################################
#  Then the structure. `value` is needed before it can be built.
###################################################################################

value, value_ref = forward('value')

def separated_by(parser, separator):
	""" Zero or more, with separators in between. """
	@sequence
	def several():
		first = yield parser
		rest = yield many(separator >> parser)
		return [first] + rest
	return several | succeed([])

array = between(punctuation('['), separated_by(value, punctuation(',')), punctuation(']'))
key_value_pair = (string << punctuation(':')) & value
json_object = fmap(between(punctuation('{'), separated_by(key_value_pair, punctuation(',')), punctuation('}')), dict)

value_ref.assign(choice(string, number, json_object, array, reserved('true'), reserved('false'), reserved('null')))

###################################################################################
#  And finally, tie it up in a nice neat bow:
###################################################################################

document = skip_spaces(value)

def parse(text):
	""" Returns the value of the longest JSON prefix, or raises ValueError if there is none. """
	result = run(document, text)
	if result is None: raise ValueError("Not JSON", text[:20])
	return result.value
