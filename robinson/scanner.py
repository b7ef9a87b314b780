"""
The scanner turns one line of text into a flat list of tokens.

It's a straightforward longest-match affair. The only wrinkle is
that a minus sign glued to a digit starts a negative integer,
while a minus sign with anything else after it is the operator.
"""
from typing import NamedTuple, Union

# Token kinds which carry a semantic value:
NAME = "name"
INTEGER = "integer"
BOOLEAN = "boolean"

RESERVED = frozenset(["if", "then", "else", "let", "in"])
BOOLEANS = {"true": True, "false": False}
PUNCTUATION = frozenset("()-*/<=+!")
DOUBLED = frozenset(["&&", "||"])

class Token(NamedTuple):
	"""
	Keywords and punctuation use their own text as the kind.
	The value is then just that same text again.
	The token's text is line[offset:stop].
	"""
	kind: str
	value: Union[str, int, bool]
	offset: int
	stop: int
	
	def width(self) -> int: return self.stop - self.offset

class LexicalError(Exception):
	""" Arguments are the unwelcome character and its offset. """
	def __init__(self, char:str, offset:int):
		super().__init__(char, offset)
		self.char, self.offset = char, offset
	def __str__(self):
		return "unrecognized character %r at offset %d" % (self.char, self.offset)

def tokenize(line:str) -> list[Token]:
	tokens = []
	pos, end = 0, len(line)
	while pos < end:
		c = line[pos]
		if c.isspace():
			pos += 1
		elif _is_letter(c):
			stop = _span(line, pos, _is_letter)
			word = line[pos:stop]
			if word in BOOLEANS: tokens.append(Token(BOOLEAN, BOOLEANS[word], pos, stop))
			elif word in RESERVED: tokens.append(Token(word, word, pos, stop))
			else: tokens.append(Token(NAME, word, pos, stop))
			pos = stop
		elif _is_digit(c) or (c == "-" and pos+1 < end and _is_digit(line[pos+1])):
			stop = _span(line, pos+1, _is_digit)
			tokens.append(Token(INTEGER, int(line[pos:stop]), pos, stop))
			pos = stop
		elif line[pos:pos+2] in DOUBLED:
			tokens.append(Token(line[pos:pos+2], line[pos:pos+2], pos, pos+2))
			pos += 2
		elif c in PUNCTUATION:
			tokens.append(Token(c, c, pos, pos+1))
			pos += 1
		else:
			raise LexicalError(c, pos)
	return tokens

def _span(line:str, pos:int, predicate) -> int:
	""" Index just past the maximal run of characters satisfying the predicate """
	while pos < len(line) and predicate(line[pos]):
		pos += 1
	return pos

def _is_letter(c:str) -> bool: return c.isascii() and c.isalpha()
def _is_digit(c:str) -> bool: return '0' <= c <= '9'
