""" Recursive rules, and what happens when they are wired up wrong. """
import unittest
from minicombo.core import run, satisfy, succeed, fmap, between
from minicombo.forward import forward, ForwardReference
from minicombo.interface import Success, GrammarError, UnassignedReference, ReassignedReference

def char(c): return satisfy(lambda x: x == c)

class TestForwardReference(unittest.TestCase):
	def test_00_self_recursion(self):
		# nested := '(' nested ')' | 'x'   -- valued as the nesting depth.
		nested, nested_ref = forward('nested')
		nested_ref.assign(fmap(between(char('('), nested, char(')')), lambda depth: depth + 1) | fmap(char('x'), lambda _: 0))
		for text, expect in [
			('x', Success(0, 1)),
			('(x)', Success(1, 3)),
			('(((x)))', Success(3, 7)),
			('((x)', None),
			('()', None),
		]:
			with self.subTest(text=text):
				self.assertEqual(expect, run(nested, text))

	def test_01_mutual_recursion(self):
		# Alternating a and b, starting with a, ending at the first mismatch.
		a_chain, a_ref = forward('a')
		b_chain, b_ref = forward('b')
		a_ref.assign(fmap(char('a') >> (b_chain | succeed('')), lambda rest: 'a' + rest))
		b_ref.assign(fmap(char('b') >> (a_chain | succeed('')), lambda rest: 'b' + rest))
		self.assertEqual(Success('abab', 4), run(a_chain, 'ababb'))
		self.assertIsNone(run(a_chain, 'b'))

	def test_02_unassigned_is_fatal_not_failure(self):
		early, cell = forward('early')
		self.assertFalse(cell.is_assigned)
		with self.assertRaises(UnassignedReference):
			run(early, 'anything')
		with self.assertRaises(GrammarError):
			run(early, '')

	def test_03_unassigned_inside_a_choice_still_raises(self):
		early, cell = forward()
		with self.assertRaises(UnassignedReference):
			run(early | succeed('fallback'), 'x')

	def test_04_single_assignment(self):
		p, cell = forward('once')
		cell.assign(succeed(1))
		self.assertTrue(cell.is_assigned)
		with self.assertRaises(ReassignedReference):
			cell.assign(succeed(2))
		self.assertEqual(Success(1, 0), run(p, ''))

	def test_05_cell_is_read_at_parse_time(self):
		p, cell = forward()
		composite = p >> char('!')
		cell.assign(char('?'))
		self.assertEqual(Success('!', 2), run(composite, '?!'))

	def test_06_repr(self):
		cell = ForwardReference('rule')
		self.assertIn('unassigned', repr(cell))
		cell.assign(succeed(None))
		self.assertIn('(assigned)', repr(cell))

	def test_07_forward_to_forward(self):
		outer, outer_ref = forward('outer')
		inner, inner_ref = forward('inner')
		outer_ref.assign(inner)
		with self.assertRaises(UnassignedReference):
			run(outer, 'x')
		inner_ref.assign(char('x'))
		self.assertEqual(Success('x', 1), run(outer, 'x'))
		self.assertEqual(Success('x', 1), outer('x', 0))

	def test_08_deep_self_recursion(self):
		nested, nested_ref = forward('nested')
		nested_ref.assign(fmap(between(char('('), nested, char(')')), lambda depth: depth + 1) | fmap(char('x'), lambda _: 0))
		text = '(' * 200 + 'x' + ')' * 200
		self.assertEqual(Success(200, len(text)), run(nested, text))


if __name__ == '__main__':
	unittest.main()
