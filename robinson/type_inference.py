"""
Constraint-based type inference over the syntax tree.

Three walks over the tree:
	1. SlotNumbering gives every node a slot. All occurrences of a name share one.
	2. ConstraintGenerator emits the equations each kind of node demands.
	3. After unification, report_types reads off the type of each variable.

Both tree walks follow syntax.each_node: pre-order and left-to-right, and
without recursion, so nesting depth is no concern. The slot numbers,
and therefore the GENERICS-n names in the final report, are reproducible.
"""
from boozetools.support.foundation import Visitor
from . import syntax
from .unification import Constraint, UnionFind, solve

class SlotNumbering(Visitor):
	"""
	When this pass is finished, every node has a non-negative slot,
	and counter is the number of distinct slots handed out.

	Variables are identified purely by name. There is no notion of scope:
	a let-bound "x" and a free "x" elsewhere in the line are the same variable.
	"""

	def __init__(self):
		self.counter = 0
		self.by_name : dict[str, int] = {}

	def tour(self, root:syntax.ValueExpression):
		for node in syntax.each_node(root):
			self.visit(node)

	def fresh(self) -> int:
		slot = self.counter
		self.counter += 1
		return slot

	def visit_Var(self, expr:syntax.Var):
		if expr.name not in self.by_name:
			self.by_name[expr.name] = self.fresh()
		expr.slot = self.by_name[expr.name]

	def visit_IntLit(self, expr:syntax.IntLit):
		expr.slot = self.fresh()

	visit_BoolLit = visit_Add = visit_Sub = visit_Mul = visit_Div = visit_Lt = visit_IntLit
	visit_And = visit_Or = visit_Not = visit_If = visit_Let = visit_IntLit

def number_slots(root:syntax.ValueExpression) -> int:
	numbering = SlotNumbering()
	numbering.tour(root)
	return numbering.counter


class ConstraintGenerator(Visitor):
	"""
	Emits equality constraints between slots, node by node.
	The two base types sit just past the last slot the numbering pass handed out.
	"""

	def __init__(self, counter:int):
		self.INT = counter
		self.BOOL = counter + 1
		self.constraints : list[Constraint] = []

	def tour(self, root:syntax.ValueExpression):
		for node in syntax.each_node(root):
			self.visit(node)

	def equate(self, x:int, y:int):
		self.constraints.append(Constraint(x, y))

	def visit_Var(self, expr:syntax.Var):
		pass

	def visit_IntLit(self, expr:syntax.IntLit):
		self.equate(expr.slot, self.INT)

	def visit_BoolLit(self, expr:syntax.BoolLit):
		self.equate(expr.slot, self.BOOL)

	def _binary(self, expr:syntax.BinExp, result:int, operand:int):
		self.equate(expr.slot, result)
		self.equate(expr.lhs.slot, operand)
		self.equate(expr.rhs.slot, operand)

	def visit_Arithmetic(self, expr:syntax.BinExp):
		self._binary(expr, self.INT, self.INT)

	visit_Add = visit_Sub = visit_Mul = visit_Div = visit_Arithmetic

	def visit_Lt(self, expr:syntax.Lt):
		self._binary(expr, self.BOOL, self.INT)

	def visit_Logical(self, expr:syntax.BinExp):
		self._binary(expr, self.BOOL, self.BOOL)

	visit_And = visit_Or = visit_Logical

	def visit_Not(self, expr:syntax.Not):
		self.equate(expr.slot, self.BOOL)
		self.equate(expr.arg.slot, self.BOOL)

	def visit_If(self, expr:syntax.If):
		self.equate(expr.slot, expr.then_part.slot)
		self.equate(expr.if_part.slot, self.BOOL)
		self.equate(expr.then_part.slot, expr.else_part.slot)

	def visit_Let(self, expr:syntax.Let):
		self.equate(expr.slot, expr.body.slot)
		self.equate(expr.var.slot, expr.bound.slot)

def generate_constraints(root:syntax.ValueExpression, counter:int) -> list[Constraint]:
	generator = ConstraintGenerator(counter)
	generator.tour(root)
	return generator.constraints


def report_types(root:syntax.ValueExpression, partition:UnionFind) -> dict[str, str]:
	"""
	One entry per distinct variable name, in order of first appearance.
	Later occurrences share the slot, so they could only ever say the same thing.
	The type of the expression as a whole is deliberately left out.
	"""
	types = {}
	for var in syntax.each_var(root):
		if var.name not in types:
			types[var.name] = partition.type_name(var.slot)
	return types

def infer_types(root:syntax.ValueExpression) -> dict[str, str]:
	""" Number, constrain, solve, report. Raises UnificationError on a conflict. """
	counter = number_slots(root)
	partition = solve(generate_constraints(root, counter), counter)
	return report_types(root, partition)
