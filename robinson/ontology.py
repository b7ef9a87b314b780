"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest so that the scanner, the parser,
and the inference passes can all agree on them without
importing one another.

Every phrase remembers where its text began, so that
diagnostics can point at the guilty bit of the line.
"""
from typing import Optional

UNNUMBERED = -1

class Phrase:
	offset: int
	stop: Optional[int] = None  # Parser fills this in: the offset just past the text.
	slot: int = UNNUMBERED  # The numbering pass fills this in, exactly once.
	
	def children(self) -> tuple["Phrase", ...]:
		""" Immediate sub-expressions, in left-to-right order """
		return ()
	
	def width(self) -> int:
		""" How many characters of source text to underline """
		if self.stop is None: return 1
		return self.stop - self.offset
