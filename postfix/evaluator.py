"""
Postfix evaluation against a stack and a symbol table that outlive any one call.

Words are processed strictly left to right. The first word that cannot be
evaluated raises an EvaluationError and nothing further happens. Whatever
the earlier words did to the stack and the table stays done; only the
failing word itself leaves the stack as it found it.
"""
import operator
from typing import Callable, Iterable, Optional
from boozetools.support.foundation import Visitor
from . import syntax, lexicon
from .stack import ValueStack
from .symbol_table import SymbolTable

class EvaluationError(Exception):
	""" Raised for the word where evaluation stopped. """
	gripe = "Evaluation went wrong."
	word: syntax.Word
	def __init__(self, word:syntax.Word, *details):
		super().__init__(word.text, *details)
		self.word = word
	def describe(self) -> str: return self.gripe

class MissingOperand(EvaluationError):
	gripe = "This operator needs two values on the stack, but there are fewer."

class UnknownVariable(EvaluationError):
	def __init__(self, word:syntax.Word, name:str):
		super().__init__(word, name)
		self.name = name
	def describe(self): return "There is no such variable: %s" % self.name

class InvalidAssignmentTarget(EvaluationError):
	def __init__(self, word:syntax.Word, target:str):
		super().__init__(word, target)
		self.target = target
	def describe(self): return "Wrong assignment order: %s is not a variable name." % self.target

class InvalidAssignmentValue(EvaluationError):
	def __init__(self, word:syntax.Word, value:str):
		super().__init__(word, value)
		self.value = value
	def describe(self): return "Wrong assignment argument: %s is not an integer literal." % self.value

class UnsupportedToken(EvaluationError):
	gripe = "This kind of input is not supported. A variable can only be a single letter in the range A-Z."

class DivisionByZero(EvaluationError):
	gripe = "Division by zero."

class IntegerOverflow(EvaluationError):
	gripe = "The result does not fit in a 64-bit signed integer."

def truncating_division(value1:int, value2:int) -> int:
	""" Rounds toward zero, where Python's // would round toward negative infinity. """
	quotient = abs(value1) // abs(value2)
	return quotient if (value1 < 0) == (value2 < 0) else -quotient

ARITHMETIC : dict[str, Callable[[int, int], int]] = {
	"+": operator.add,
	"-": operator.sub,
	"*": operator.mul,
	"/": truncating_division,
}
ASSIGN = "="

class Evaluator(Visitor):
	def __init__(self, stack:ValueStack, table:SymbolTable, on_step:Optional[Callable[[syntax.Word], None]]=None):
		self._stack = stack
		self._table = table
		self._on_step = on_step

	def evaluate(self, tokens:Iterable[str]):
		for word in lexicon.classify_all(tokens):
			self.visit(word)
			if self._on_step is not None:
				self._on_step(word)

	def visit_Literal(self, word:syntax.Literal):
		self._stack.push(word.text)

	def visit_Variable(self, word:syntax.Variable):
		self._stack.push(word.text)

	def visit_Unsupported(self, word:syntax.Unsupported):
		raise UnsupportedToken(word)

	def visit_Operator(self, word:syntax.Operator):
		operand1, operand2 = self._pop_operands(word)
		try:
			if word.text == ASSIGN:
				self.assign(word, operand2, operand1)
			else:
				value1 = self.resolve(word, operand1)
				value2 = self.resolve(word, operand2)
				if word.text == "/" and value2 == 0:
					raise DivisionByZero(word)
				result = ARITHMETIC[word.text](value1, value2)
				if not lexicon.SMALLEST <= result <= lexicon.LARGEST:
					raise IntegerOverflow(word)
				self._stack.push(str(result))
		except EvaluationError:
			self._stack.push(operand2)
			self._stack.push(operand1)
			raise

	def _pop_operands(self, word:syntax.Operator) -> tuple[str, str]:
		operand1, found = self._stack.pop()
		if not found:
			raise MissingOperand(word)
		operand2, found = self._stack.pop()
		if not found:
			self._stack.push(operand1)
			raise MissingOperand(word)
		return operand1, operand2

	def resolve(self, word:syntax.Operator, token:str) -> int:
		if lexicon.is_integer(token):
			return int(token)
		value, found = self._table.get(token)
		if not found:
			raise UnknownVariable(word, token)
		return int(value)

	def assign(self, word:syntax.Operator, name:str, value:str):
		# Only a literal integer may stand on the right. Copying one variable
		# into another ("A B =") is refused even when B is bound.
		if lexicon.is_integer(name):
			raise InvalidAssignmentTarget(word, name)
		if not lexicon.is_integer(value):
			raise InvalidAssignmentValue(word, value)
		self._table.insert(name, value)
