import unittest

from boozetools.parsing.interface import ParseError
from robinson import syntax
from robinson.front_end import parse, parse_text, RobinsonParseError, END
from robinson.scanner import tokenize, NAME, INTEGER

class ParserTests(unittest.TestCase):

	def test_leaves(self):
		self.assertIsInstance(parse_text("x"), syntax.Var)
		self.assertEqual(-7, parse_text("-7").value)
		self.assertIs(True, parse_text("true").value)

	def test_let(self):
		tree = parse_text("(let x = 1 in x)")
		self.assertIsInstance(tree, syntax.Let)
		self.assertEqual("x", tree.var.name)
		self.assertIsInstance(tree.bound, syntax.IntLit)
		self.assertIsInstance(tree.body, syntax.Var)
		self.assertIsNot(tree.var, tree.body)

	def test_if(self):
		tree = parse_text("(if (< a b) then 0 else c)")
		self.assertIsInstance(tree, syntax.If)
		self.assertIsInstance(tree.if_part, syntax.Lt)
		self.assertEqual(0, tree.then_part.value)
		self.assertEqual("c", tree.else_part.name)

	def test_binary_forms(self):
		for op, cls in [
			("+", syntax.Add), ("-", syntax.Sub), ("*", syntax.Mul), ("/", syntax.Div),
			("<", syntax.Lt), ("&&", syntax.And), ("||", syntax.Or),
		]:
			with self.subTest(op):
				tree = parse_text("(%s a 2)" % op)
				self.assertIs(cls, type(tree))
				self.assertEqual("a", tree.lhs.name)
				self.assertEqual(2, tree.rhs.value)

	def test_not(self):
		tree = parse_text("(! (|| p q))")
		self.assertIsInstance(tree, syntax.Not)
		self.assertIsInstance(tree.arg, syntax.Or)

	def test_parse_accepts_tokens(self):
		tree = parse(tokenize("(* 2 (- 3 -4))"))
		self.assertIsInstance(tree, syntax.Mul)
		self.assertEqual(-4, tree.rhs.rhs.value)

	def test_extent_of_forms(self):
		tree = parse_text(" (- 1 (* 2 3))")
		self.assertEqual(1, tree.offset)
		self.assertEqual(13, tree.width())
		self.assertEqual(6, tree.rhs.offset)
		self.assertEqual(7, tree.rhs.width())
		self.assertEqual(1, tree.lhs.width())

	def test_extent_of_literals_is_their_source_text(self):
		tree = parse_text("(- -0 007)")
		self.assertEqual(3, tree.lhs.offset)
		self.assertEqual(2, tree.lhs.width())
		self.assertEqual(6, tree.rhs.offset)
		self.assertEqual(3, tree.rhs.width())
		self.assertEqual(10, tree.width())

	def test_nodes_start_unnumbered(self):
		for node in syntax.each_node(parse_text("(if a then (+ 1 b) else c)")):
			self.assertEqual(-1, node.slot)

	def test_each_node_is_preorder(self):
		tree = parse_text("(let x = (- 1 2) in x)")
		self.assertEqual(
			[syntax.Let, syntax.Var, syntax.Sub, syntax.IntLit, syntax.IntLit, syntax.Var],
			[type(n) for n in syntax.each_node(tree)],
		)

class SyntaxErrorTests(unittest.TestCase):

	def expect(self, text, found, offset):
		with self.assertRaises(RobinsonParseError) as cm:
			parse_text(text)
		self.assertEqual(found, cm.exception.found)
		self.assertEqual(offset, cm.exception.offset)
		return cm.exception

	def test_is_a_parse_error(self):
		self.assertTrue(issubclass(RobinsonParseError, ParseError))

	def test_empty(self):
		self.expect("", END, 0)
		with self.assertRaises(RobinsonParseError):
			parse([])

	def test_wrong_leading_token(self):
		self.expect(")", ")", 0)
		self.expect("then", "then", 0)
		self.expect("(foo 1 2)", NAME, 1)
		self.expect("(1)", INTEGER, 1)

	def test_let_needs_a_variable(self):
		ex = self.expect("(let 1 = 2 in 3)", INTEGER, 5)
		self.assertIn("let", ex.expected)
		self.expect("(let (+ a b) = 2 in 3)", "(", 5)

	def test_missing_keywords(self):
		ex = self.expect("(if x 0 else 1)", INTEGER, 6)
		self.assertEqual("'then'", ex.expected)
		self.expect("(if x then 0 1)", INTEGER, 13)
		self.expect("(let x 1 in x)", INTEGER, 7)
		self.expect("(let x = 1 x)", NAME, 11)

	def test_missing_close(self):
		self.expect("(- 1 2", END, 6)
		self.expect("(- 1 2 3)", INTEGER, 7)
		self.expect("(", END, 1)

	def test_end_of_tokens_is_past_the_last_one(self):
		with self.assertRaises(RobinsonParseError) as cm:
			parse(tokenize("(- 007"))
		self.assertEqual(END, cm.exception.found)
		self.assertEqual(6, cm.exception.offset)

	def test_trailing_blanks_do_not_move_the_end(self):
		self.expect("(- 1 2   ", END, 6)

	def test_nesting_beyond_the_stack(self):
		text = "(! " * 3000 + "x" + ")" * 3000
		with self.assertRaises(RobinsonParseError) as cm:
			parse_text(text)
		self.assertIn("nested", cm.exception.expected)
		self.assertIn(cm.exception.found, ("(", "!"))
		self.assertLess(cm.exception.offset, 3 * 3000)

	def test_trailing_tokens(self):
		ex = self.expect("x y", NAME, 2)
		self.assertEqual("the end of the line", ex.expected)
		self.expect("(- 1 2))", ")", 7)

	def test_message(self):
		ex = self.expect("(if x then 0 1)", INTEGER, 13)
		self.assertEqual("expected 'else' but found integer at offset 13", str(ex))

if __name__ == '__main__':
	unittest.main()
