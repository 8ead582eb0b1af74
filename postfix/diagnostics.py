import sys, random
from typing import Any, Sequence
from boozetools.support.failureprone import illustration

from .evaluator import EvaluationError
from .storage import SessionStorageError

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', 'Nuts', 'Rats',
	]

	resignations = [
		'The stack is not what it seemed.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'Those numbers will not add up.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects what went wrong, and says so politely on request. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	@property
	def issues(self) -> Sequence["Pic"]: return tuple(self._issues)

	def sick(self): return bool(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the command line calls:
	def evaluation_failed(self, words:Sequence[str], ex:EvaluationError):
		intro = ex.describe()
		problem = [Annotation(words, ex.word.spot, "stopped here")]
		footer = ["Everything to the left of this was already done."] if ex.word.spot else []
		self.issue(Pic(intro, problem, footer))

	def storage_failed(self, ex:SessionStorageError):
		intro = "Something went pear-shaped with the session file " + str(ex.path)
		self.issue(Pic(intro, [], [ex.problem]))

class Annotation:
	""" Points at one word of a command line. """
	def __init__(self, words:Sequence[str], spot:int, caption:str=""):
		self.line = " ".join(words)
		self.start = sum(len(w) + 1 for w in words[:spot])
		self.width = len(words[spot])
		self.caption = caption
	def illustrate(self):
		return illustration(self.line, self.start, self.width, prefix=' >>> ', caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def intro(self): return self._intro
	def as_text(self):
		lines = [self._intro]
		lines.extend(ann.illustrate() for ann in self._anns)
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
