"""
Keeping a session in a JSON file between invocations.

The file looks like:

	{"stack": ["3", "A"], "variables": [["A", "7"]]}

with the stack listed bottom to top and the variables in the order the
symbol table renders them. Saving goes through a temporary file in the
same folder and then replaces the real one, so a crash mid-write leaves
the previous session intact.
"""
import os, json, tempfile
from pathlib import Path
from . import lexicon
from .session import Session, Snapshot

DEFAULT_SESSION = "session.json"

class SessionStorageError(Exception):
	""" The session file could not be read, written, or made sense of. """
	def __init__(self, path:Path, problem:str):
		super().__init__(path, problem)
		self.path, self.problem = path, problem
	def __str__(self): return "%s: %s" % (self.path, self.problem)

class SessionFile:
	def __init__(self, path=DEFAULT_SESSION):
		self.path = Path(path)

	def exists(self) -> bool: return self.path.exists()

	def load(self) -> Session:
		""" A fresh session if there is no file yet. """
		try:
			with open(self.path, "r", encoding="utf-8") as fh: text = fh.read()
		except FileNotFoundError:
			return Session()
		except OSError as ex:
			raise SessionStorageError(self.path, "cannot read: %s" % ex.strerror) from ex
		try: document = json.loads(text)
		except ValueError as ex:
			raise SessionStorageError(self.path, "not valid JSON") from ex
		return Session.restore(self._snapshot_from(document))

	def save(self, session:Session):
		snapshot = session.snapshot()
		document = {
			"stack": list(snapshot.stack),
			"variables": [list(pair) for pair in snapshot.variables],
		}
		folder = self.path.parent
		try:
			fd, temp_name = tempfile.mkstemp(prefix=self.path.name + ".", suffix=".tmp", dir=folder)
			try:
				with os.fdopen(fd, "w", encoding="utf-8") as fh:
					json.dump(document, fh)
				os.replace(temp_name, self.path)
			except BaseException:
				os.unlink(temp_name)
				raise
		except OSError as ex:
			raise SessionStorageError(self.path, "cannot write: %s" % ex.strerror) from ex

	def clear(self):
		try: self.path.unlink()
		except FileNotFoundError: pass
		except OSError as ex:
			raise SessionStorageError(self.path, "cannot remove: %s" % ex.strerror) from ex

	def _snapshot_from(self, document) -> Snapshot:
		def bad(why): return SessionStorageError(self.path, why)
		if not isinstance(document, dict):
			raise bad("expected a JSON object")
		stack = document.get("stack", [])
		variables = document.get("variables", [])
		if not isinstance(stack, list) or not isinstance(variables, list):
			raise bad("'stack' and 'variables' must be lists")
		for token in stack:
			if not isinstance(token, str) or lexicon.kind_of(token) not in (lexicon.INTEGER, lexicon.VARIABLE):
				raise bad("stack entry %r is neither an integer nor a variable" % (token,))
		pairs = []
		for pair in variables:
			if not (isinstance(pair, list) and len(pair) == 2 and all(isinstance(x, str) for x in pair)):
				raise bad("variable entry %r is not a [name, value] pair" % (pair,))
			key, value = pair
			if lexicon.kind_of(key) != lexicon.VARIABLE:
				raise bad("%r is not a variable name" % key)
			if not lexicon.is_integer(value):
				raise bad("variable %s holds %r, which is not an integer" % (key, value))
			pairs.append((key, value))
		return Snapshot(tuple(stack), tuple(pairs))
