"""
One stack and one symbol table, together: the whole state of a calculation
between one invocation and the next.
"""
from typing import Callable, Iterable, Optional, NamedTuple
from . import syntax
from .evaluator import Evaluator
from .stack import ValueStack
from .symbol_table import SymbolTable

class Snapshot(NamedTuple):
	""" Plain data, suitable for whatever does the persisting. """
	stack: tuple[str, ...]
	variables: tuple[tuple[str, str], ...]

class Session:
	stack: ValueStack
	variables: SymbolTable

	def __init__(self):
		self.reset()

	def reset(self):
		self.stack = ValueStack()
		self.variables = SymbolTable()

	def evaluate(self, tokens:Iterable[str], on_step:Optional[Callable[[syntax.Word], None]]=None):
		Evaluator(self.stack, self.variables, on_step).evaluate(tokens)

	def render_stack(self) -> str: return self.stack.render()
	def render_symbol_table(self) -> str: return self.variables.render()

	def snapshot(self) -> Snapshot:
		return Snapshot(tuple(self.stack), tuple(self.variables))

	@classmethod
	def restore(cls, snapshot:Snapshot) -> "Session":
		session = cls()
		for token in snapshot.stack:
			session.stack.push(token)
		# Re-inserting in render order reproduces the same chains.
		for key, value in snapshot.variables:
			session.variables.insert(key, value)
		return session
