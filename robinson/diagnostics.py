import sys, random
from typing import Sequence
from boozetools.support.failureprone import SourceText, illustration

from .ontology import Phrase
from .scanner import LexicalError
from .front_end import RobinsonParseError, END
from .unification import UnificationError

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		"Heavens to Betsy", 'Jeepers', "Mercy", 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'That line does not add up.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	"""
	Collects the issues found while checking a line.
	Each kind of failure has its own method, so the wording lives here
	rather than scattered among the passes.
	"""
	issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.issues = []

	def ok(self): return not self.issues
	def sick(self): return bool(self.issues)

	def issue(self, it:"Pic"):
		self.issues.append(it)

	def reset(self):
		self.issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self.issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self.issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the checker calls, one per phase:

	def lexical_error(self, text:str, ex:LexicalError):
		intro = "Lexical error: I don't recognize the character %r." % ex.char
		problem = [Annotation(text, ex.offset, 1, "here")]
		self.issue(Pic(intro, problem))

	def syntax_error(self, text:str, ex:RobinsonParseError):
		if ex.found == END:
			intro = "Syntax error: I ran out of words while expecting %s." % ex.expected
		else:
			intro = "Syntax error: I expected %s." % ex.expected
		problem = [Annotation(text, ex.offset, 1, "Got confused here")]
		self.issue(Pic(intro, problem))

	def type_conflict(self, text:str, guilty:Sequence[Phrase], ex:UnificationError):
		intro = "Type conflict: this would need %s and %s to be the same type." % (ex.one, ex.other)
		problem = [Annotation.of(text, g) for g in guilty]
		footer = ["Typecheck failed!"]
		self.issue(Pic(intro, problem, footer))

class Annotation:
	text: str
	offset: int
	width: int
	caption: str
	def __init__(self, text:str, offset:int, width:int=1, caption:str=""):
		self.text = text
		self.offset = offset
		self.width = max(width, 1)
		self.caption = caption

	@staticmethod
	def of(text:str, node:Phrase, caption:str=""):
		return Annotation(text, node.offset, node.width(), caption)

	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.offset)
		single_line = source.line_of_text(row)
		return illustration(single_line, col, self.width, prefix='  | ', caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self.intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self.intro, ""]
		for ann in self._anns:
			if ann.text.strip():
				lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
