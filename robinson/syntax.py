"""
The set of parse-nodes in simple form.
The parser calls these constructors with subordinate semantic-values in a top-down descent.
Each node class is one variant of the expression language; the passes dispatch
on the class name by way of a Visitor, so there's no need for any "what kind am I?" method.
"""
from .ontology import Phrase

class ValueExpression(Phrase):
	pass

class Var(ValueExpression):
	def __init__(self, name:str, offset:int):
		assert isinstance(name, str)
		self.name, self.offset = name, offset
	def __repr__(self): return "<var %s>" % self.name

class IntLit(ValueExpression):
	def __init__(self, value:int, offset:int):
		self.value, self.offset = value, offset
	def __repr__(self): return "<int %d>" % self.value

class BoolLit(ValueExpression):
	def __init__(self, value:bool, offset:int):
		self.value, self.offset = value, offset
	def __repr__(self): return "<bool %s>" % ("true" if self.value else "false")

class BinExp(ValueExpression):
	""" Binary operators all look the same to the parser. """
	op = "?"
	def __init__(self, lhs:ValueExpression, rhs:ValueExpression, offset:int):
		self.lhs, self.rhs, self.offset = lhs, rhs, offset
	def children(self): return self.lhs, self.rhs
	def __repr__(self): return "(%s %r %r)" % (self.op, self.lhs, self.rhs)

class Add(BinExp): op = "+"
class Sub(BinExp): op = "-"
class Mul(BinExp): op = "*"
class Div(BinExp): op = "/"
class Lt(BinExp): op = "<"
class And(BinExp): op = "&&"
class Or(BinExp): op = "||"

class Not(ValueExpression):
	def __init__(self, arg:ValueExpression, offset:int):
		self.arg, self.offset = arg, offset
	def children(self): return self.arg,
	def __repr__(self): return "(! %r)" % self.arg

class If(ValueExpression):
	def __init__(self, if_part:ValueExpression, then_part:ValueExpression, else_part:ValueExpression, offset:int):
		self.if_part = if_part
		self.then_part = then_part
		self.else_part = else_part
		self.offset = offset
	def children(self): return self.if_part, self.then_part, self.else_part
	def __repr__(self): return "(if %r then %r else %r)" % self.children()

class Let(ValueExpression):
	def __init__(self, var:Var, bound:ValueExpression, body:ValueExpression, offset:int):
		assert isinstance(var, Var)
		self.var, self.bound, self.body, self.offset = var, bound, body, offset
	def children(self): return self.var, self.bound, self.body
	def __repr__(self): return "(let %r = %r in %r)" % self.children()

# The parser looks up binary forms by their leading keyword.
BINARY_FORMS: dict[str, type[BinExp]] = {
	cls.op: cls for cls in (Add, Sub, Mul, Div, Lt, And, Or)
}

def each_node(root:ValueExpression):
	""" Pre-order, left to right, without recursion. """
	stack = [root]
	while stack:
		node = stack.pop()
		yield node
		stack.extend(reversed(node.children()))

def each_var(root:ValueExpression):
	for node in each_node(root):
		if isinstance(node, Var):
			yield node
