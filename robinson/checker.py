"""
All the passes for one line of input, in order.
By the time a Checker is constructed, either every variable has a type,
or the report holds exactly one issue and Yuck has been raised.
"""
from . import syntax
from .diagnostics import Report
from .scanner import LexicalError, tokenize
from .front_end import RobinsonParseError, parse_line, parse_text
from .type_inference import number_slots, generate_constraints, report_types, infer_types
from .unification import Constraint, UnificationError, UnionFind, solve

class Yuck(Exception):
	"""
	The first argument will be the name of the pass fraught with error.
	The end-user might not care about this, but it's handy for testing.
	"""
	pass

class Checker:
	text: str
	tree: syntax.ValueExpression
	counter: int
	constraints: list[Constraint]
	partition: UnionFind
	types: dict[str, str]

	def __init__(self, text:str, report:Report):
		self.text = text
		try: tokens = tokenize(text)
		except LexicalError as ex:
			report.lexical_error(text, ex)
			raise Yuck("scan")
		report.info("Scanned %d token(s)." % len(tokens))

		try: self.tree = parse_line(text, tokens)
		except RobinsonParseError as ex:
			report.syntax_error(text, ex)
			raise Yuck("parse")

		self.counter = number_slots(self.tree)
		self.constraints = generate_constraints(self.tree, self.counter)
		report.info("Numbered %d slot(s); generated %d constraint(s)." % (self.counter, len(self.constraints)))

		try: self.partition = solve(self.constraints, self.counter)
		except UnificationError as ex:
			report.type_conflict(text, self._blame(ex.constraint), ex)
			raise Yuck("unify")

		self.types = report_types(self.tree, self.partition)

	def _blame(self, constraint:Constraint) -> list[syntax.ValueExpression]:
		""" The first node holding each constrained slot, if any does. """
		guilty = []
		if constraint is not None:
			for slot in constraint:
				for node in syntax.each_node(self.tree):
					if node.slot == slot:
						guilty.append(node)
						break
		return guilty

def infer_text(text:str) -> dict[str, str]:
	"""
	The plain pipeline, without a report.
	LexicalError, RobinsonParseError, and UnificationError propagate.
	"""
	return infer_types(parse_text(text))
