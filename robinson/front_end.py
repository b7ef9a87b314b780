"""
A recursive-descent parser for the expression language.

The grammar is LL(1) and every compound form is parenthesized with its
operator up front, so one token (already consumed) always decides the production.
Two mutually-recursive methods do all the work: one for expressions, one for
whatever follows an open-parenthesis.
"""
from typing import Sequence
from boozetools.parsing.interface import ParseError
from . import syntax
from .scanner import Token, tokenize, NAME, INTEGER, BOOLEAN

END = "<END>"

class RobinsonParseError(ParseError):
	"""
	Arguments are:
		a phrase describing what the parser expected,
		the kind of token it found instead (or END),
		and the offset where that happened.
	"""
	def __init__(self, expected:str, found:str, offset:int):
		super().__init__(expected, found, offset)
		self.expected, self.found, self.offset = expected, found, offset
	def __str__(self):
		return "expected %s but found %s at offset %d" % (self.expected, _describe(self.found), self.offset)

def _describe(kind:str) -> str:
	if kind in (END, NAME, INTEGER, BOOLEAN): return kind
	return repr(kind)

class Parser:
	"""
	Tokens are consumed exactly once, in order.
	There is no backtracking; the first mismatch is fatal.
	"""

	def __init__(self, tokens:Sequence[Token], end_offset:int=None):
		self._tokens = tokens
		self._index = 0
		if end_offset is None:
			end_offset = tokens[-1].stop if tokens else 0
		self._end_offset = end_offset

	def parse(self) -> syntax.ValueExpression:
		"""
		The whole token sequence must be exactly one expression.
		Nesting too deep for the Python stack is reported as a syntax error
		at the innermost token reached.
		"""
		try: root = self.parse_expr()
		except RecursionError:
			deepest = self._tokens[self._index - 1]
			raise RobinsonParseError("an expression nested less deeply", deepest.kind, deepest.offset) from None
		if self._index < len(self._tokens):
			straggler = self._tokens[self._index]
			raise RobinsonParseError("the end of the line", straggler.kind, straggler.offset)
		return root

	def _next(self, expected:str) -> Token:
		if self._index >= len(self._tokens):
			raise RobinsonParseError(expected, END, self._end_offset)
		token = self._tokens[self._index]
		self._index += 1
		return token

	def _expect(self, kind:str):
		expected = repr(kind)
		token = self._next(expected)
		if token.kind != kind:
			raise RobinsonParseError(expected, token.kind, token.offset)
		return token

	def parse_expr(self) -> syntax.ValueExpression:
		token = self._next("an expression")
		if token.kind == "(": return self.parse_form(token.offset)
		if token.kind == NAME: leaf = syntax.Var(token.value, token.offset)
		elif token.kind == INTEGER: leaf = syntax.IntLit(token.value, token.offset)
		elif token.kind == BOOLEAN: leaf = syntax.BoolLit(token.value, token.offset)
		else: raise RobinsonParseError("an expression", token.kind, token.offset)
		leaf.stop = token.stop
		return leaf

	def parse_form(self, offset:int) -> syntax.ValueExpression:
		""" Called just after consuming an open-parenthesis at the given offset. """
		token = self._next("an operator, 'if', or 'let'")
		if token.kind in syntax.BINARY_FORMS:
			lhs = self.parse_expr()
			rhs = self.parse_expr()
			form = syntax.BINARY_FORMS[token.kind](lhs, rhs, offset)
		elif token.kind == "!":
			form = syntax.Not(self.parse_expr(), offset)
		elif token.kind == "if":
			if_part = self.parse_expr()
			self._expect("then")
			then_part = self.parse_expr()
			self._expect("else")
			form = syntax.If(if_part, then_part, self.parse_expr(), offset)
		elif token.kind == "let":
			start = self._index
			var = self.parse_expr()
			if not isinstance(var, syntax.Var):
				guilty = self._tokens[start]
				raise RobinsonParseError("a variable name after 'let'", guilty.kind, guilty.offset)
			self._expect("=")
			bound = self.parse_expr()
			self._expect("in")
			form = syntax.Let(var, bound, self.parse_expr(), offset)
		else:
			raise RobinsonParseError("an operator, 'if', or 'let'", token.kind, token.offset)
		close = self._expect(")")
		form.stop = close.stop
		return form

def parse(tokens:Sequence[Token]) -> syntax.ValueExpression:
	return Parser(tokens).parse()

def parse_line(text:str, tokens:Sequence[Token]) -> syntax.ValueExpression:
	""" Running out of tokens is blamed just past the last visible character of the line. """
	return Parser(tokens, len(text.rstrip())).parse()

def parse_text(text:str) -> syntax.ValueExpression:
	""" Scan and parse one line. Lexical and syntax errors propagate. """
	return parse_line(text, tokenize(text))
