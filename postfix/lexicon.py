"""
Sorting command-line words into literals, variables, and operators.

The shell has already split the expression on whitespace, so each word
must scan as exactly one lexeme. A word that scans as several lexemes
(like "3A" or "AB") or that jams the scanner (like "x" or "3.5")
is unsupported, and so is an integer too big for 64 bits.
"""
from typing import Iterable, Optional
from boozetools.scanning.miniscan import Definition
from boozetools.scanning.interface import ScannerBlocked
from . import syntax

INTEGER, VARIABLE, OPERATOR = "integer", "variable", "operator"

LEXICON = Definition("Postfix++ Words")
LEXICON.token(INTEGER, r"[-+]?[0-9]+")
LEXICON.token(VARIABLE, r"[A-Z]")
LEXICON.token(OPERATOR, r"[-+*/=]")

# Integers are 64-bit signed.
SMALLEST, LARGEST = -2**63, 2**63 - 1
MAX_DIGITS = len(str(LARGEST))

_WORD_CLASS = {
	INTEGER: syntax.Literal,
	VARIABLE: syntax.Variable,
	OPERATOR: syntax.Operator,
}

def kind_of(text:str) -> Optional[str]:
	""" Answer INTEGER, VARIABLE, OPERATOR, or None for anything else. """
	try: lexemes = list(LEXICON.scan(text))
	except ScannerBlocked: return None
	if len(lexemes) == 1:
		kind = lexemes[0][0]
		if kind == INTEGER and not in_range(text): return None
		return kind

def in_range(text:str) -> bool:
	""" Digits are counted first so that int() never sees a monster. """
	if len(text.lstrip("+-").lstrip("0")) > MAX_DIGITS: return False
	return SMALLEST <= int(text) <= LARGEST

def is_integer(text:str) -> bool:
	return kind_of(text) == INTEGER

def classify(text:str, spot:int) -> syntax.Word:
	return _WORD_CLASS.get(kind_of(text), syntax.Unsupported)(text, spot)

def classify_all(words:Iterable[str]) -> list[syntax.Word]:
	return [classify(text, spot) for spot, text in enumerate(words)]
