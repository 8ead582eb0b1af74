"""
The most basic stack of words.
Everything on it is the text of an integer or the name of a variable.
"""

class ValueStack:
	_values: list[str]

	def __init__(self, values=()):
		self._values = list(values)

	def __len__(self): return len(self._values)
	def __iter__(self):
		""" Bottom to top, which is also the order to persist them in. """
		return iter(self._values)

	def is_empty(self) -> bool: return not self._values

	def push(self, value:str):
		assert isinstance(value, str), type(value)
		self._values.append(value)

	def pop(self) -> tuple[str, bool]:
		""" Returns ("", False) and leaves the stack alone if there is nothing to pop. """
		if self.is_empty():
			return "", False
		return self._values.pop(), True

	def render(self) -> str:
		""" Top of stack first, like "[ 12 5 ]" """
		return "[ " + "".join(v + " " for v in reversed(self._values)) + "]"
