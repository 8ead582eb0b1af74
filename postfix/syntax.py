"""
The three kinds of word a postfix expression is made of, plus the catch-all for words that are none of them.
Each remembers its position in the command line so that complaints can point at it.
"""

class Word:
	text: str
	spot: int   # Position in the token sequence, counting from zero.
	def __init__(self, text:str, spot:int):
		assert isinstance(text, str)
		assert isinstance(spot, int), type(spot)
		self.text, self.spot = text, spot
	def __repr__(self): return "<%s %r>" % (type(self).__name__, self.text)

class Literal(Word):
	""" A base-10 integer, optionally signed. The stack keeps the text exactly as written. """
	@property
	def value(self) -> int: return int(self.text)

class Variable(Word):
	""" A single uppercase letter naming a slot in the symbol table. """

class Operator(Word):
	""" One of the five glyphs: + - * / = """

class Unsupported(Word):
	pass
