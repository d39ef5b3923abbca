import unittest
import random
from minicombo.core import run
from minicombo.interface import Success
from minicombo import lexical

class TestCharacterClasses(unittest.TestCase):
	def test_00_single_characters(self):
		for parser, inside, outside in [
			(lexical.digit, '0123456789', 'aZ _+'),
			(lexical.letter, 'azAZé', '09 _+'),
			(lexical.whitespace, ' \t\r\n', 'a0_'),
		]:
			for c in inside:
				with self.subTest(c=c):
					self.assertEqual(Success(c, 1), run(parser, c))
			for c in outside:
				with self.subTest(c=c):
					self.assertIsNone(run(parser, c))

	def test_01_char_and_literal(self):
		self.assertEqual(Success('=', 1), run(lexical.char('='), '=1'))
		self.assertEqual(Success(None, 1), run(lexical.skip_char('='), '=1'))
		self.assertIsNone(run(lexical.skip_char('='), '1='))
		self.assertEqual(Success('true', 4), run(lexical.literal('true'), 'true!'))
		self.assertIsNone(run(lexical.literal('true'), 'tru'))

	def test_02_spaces(self):
		self.assertEqual(Success([], 0), run(lexical.spaces, 'x'))
		self.assertEqual(Success('x', 3), run(lexical.lexeme(lexical.char('x')), 'x  y'))
		self.assertEqual(Success('x', 3), run(lexical.skip_spaces(lexical.char('x')), '  xy'))

class TestInteger(unittest.TestCase):
	def test_00_digit_strings(self):
		rng = random.Random(1234)
		samples = ['0', '7', '007', '42', '1234567890'] + [''.join(rng.choice('0123456789') for _ in range(rng.randint(1, 30))) for _ in range(50)]
		for text in samples:
			with self.subTest(text=text):
				self.assertEqual(Success(int(text), len(text)), run(lexical.integer, text))

	def test_01_needs_a_leading_digit(self):
		for text in ['', 'a1', ' 1', '-1', '+1', '.5']:
			with self.subTest(text=text):
				self.assertIsNone(run(lexical.integer, text))

	def test_02_stops_at_first_non_digit(self):
		self.assertEqual(Success(42, 2), run(lexical.integer, '42Hello Marten from F#!'))

	def test_03_no_overflow(self):
		text = '9' * 100
		self.assertEqual(10**100 - 1, run(lexical.integer, text).value)

	def test_04_other_decimal_digits(self):
		self.assertEqual(Success(123, 3), run(lexical.integer, '١٢٣')) # Arabic-Indic

class TestIdentifier(unittest.TestCase):
	def test_00_letters(self):
		self.assertEqual(Success('answer', 6), run(lexical.identifier, 'answer=42'))
		self.assertEqual(Success('b', 1), run(lexical.identifier, 'b)'))
		self.assertIsNone(run(lexical.identifier, '1a'))
		self.assertIsNone(run(lexical.identifier, ''))

	def test_01_digits_end_an_identifier(self):
		self.assertEqual(Success('x', 1), run(lexical.identifier, 'x1'))


if __name__ == '__main__':
	unittest.main()
