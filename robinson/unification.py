"""
The unification approach to type-inference, in its simplest possible form.

Every syntactic position has a slot. Two extra slots at the top of the range
stand for the base types INT and BOOL. Each constraint says two slots denote
the same type, and a disjoint-set forest keeps track of which slots have been
forced together. The only way to fail is to force INT and BOOL together.
"""
from typing import Iterable, NamedTuple

class Constraint(NamedTuple):
	""" Unordered in meaning, but the order matters for which root wins. """
	lhs: int
	rhs: int

class UnificationError(Exception):
	"""
	Arguments are the names of the two base types that refused to merge.
	The constraint which forced the issue rides along, for the sake of blame.
	"""
	def __init__(self, one:str, other:str, constraint:Constraint=None):
		super().__init__(one, other)
		self.one, self.other = one, other
		self.constraint = constraint
	def __str__(self):
		return "cannot unify %s with %s" % (self.one, self.other)

class UnionFind:
	"""
	The slot domain is [0, counter) for type variables,
	then INT = counter and BOOL = counter+1.
	"""
	def __init__(self, counter:int):
		assert counter >= 0
		self.counter = counter
		self.INT = counter
		self.BOOL = counter + 1
		self.prev = list(range(counter + 2))

	def find(self, x:int) -> int:
		prev = self.prev
		root = x
		while prev[root] != root:
			root = prev[root]
		while prev[x] != root:
			prev[x], x = root, prev[x]
		return root

	def join(self, x:int, y:int):
		# The second argument's root becomes the root.
		self.prev[self.find(x)] = self.find(y)

	def is_variable(self, slot:int) -> bool:
		return slot < self.counter

	def type_name(self, slot:int) -> str:
		root = self.find(slot)
		if root == self.INT: return "INT"
		if root == self.BOOL: return "BOOL"
		return "GENERICS-%d" % root

	def unify(self, x:int, y:int):
		rx, ry = self.find(x), self.find(y)
		if self.is_variable(rx):
			self.join(rx, ry)
		elif self.is_variable(ry):
			self.join(ry, rx)
		elif rx != ry:
			raise UnificationError(self.type_name(rx), self.type_name(ry), Constraint(x, y))

def solve(constraints:Iterable[Constraint], counter:int) -> UnionFind:
	"""
	Process the constraints in the order given.
	The first conflict is fatal; there's nothing to roll back.
	"""
	partition = UnionFind(counter)
	for x, y in constraints:
		partition.unify(x, y)
	return partition
