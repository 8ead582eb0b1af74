import unittest

from postfix.stack import ValueStack
from postfix.symbol_table import SymbolTable, jenkins_hash, bucket_of, MAP_SIZE
from postfix import lexicon, syntax

class StackTests(unittest.TestCase):
	def test_last_in_first_out(self):
		stack = ValueStack()
		stack.push("1")
		stack.push("2")
		self.assertEqual(("2", True), stack.pop())
		self.assertEqual(("1", True), stack.pop())
		self.assertTrue(stack.is_empty())

	def test_pop_empty_does_nothing(self):
		stack = ValueStack()
		self.assertEqual(("", False), stack.pop())
		self.assertEqual(0, len(stack))

	def test_render_top_first(self):
		self.assertEqual("[ ]", ValueStack().render())
		self.assertEqual("[ 12 5 ]", ValueStack(["5", "12"]).render())


class SymbolTableTests(unittest.TestCase):
	def test_insert_then_get(self):
		table = SymbolTable()
		table.insert("A", "3")
		self.assertEqual(("3", True), table.get("A"))

	def test_get_on_empty_table(self):
		self.assertEqual(("", False), SymbolTable().get("Z"))

	def test_hash_wraps_at_eight_bits(self):
		self.assertEqual(64, jenkins_hash("A"))
		self.assertEqual(91, jenkins_hash("B"))
		for letter in map(chr, range(ord("A"), ord("Z")+1)):
			self.assertIn(jenkins_hash(letter), range(256))
			self.assertIn(bucket_of(letter), range(MAP_SIZE))

	def test_collisions_share_a_chain(self):
		self.assertEqual(bucket_of("A"), bucket_of("D"))
		table = SymbolTable()
		table.insert("A", "1")
		table.insert("D", "2")
		self.assertEqual(("1", True), table.get("A"))
		self.assertEqual(("2", True), table.get("D"))
		self.assertEqual(["A", "D"], [n.key for n in table.chain(bucket_of("A"))])

	def test_overwrite_keeps_chain_length(self):
		table = SymbolTable()
		for key in "ADK":
			table.insert(key, "0")
		chain = bucket_of("A")
		before = len(list(table.chain(chain)))
		for key in "ADK":  # Head, middle, and tail of the same chain.
			with self.subTest(key):
				table.insert(key, "9")
				self.assertEqual(("9", True), table.get(key))
				self.assertEqual(before, len(list(table.chain(chain))))
		self.assertEqual(3, len(table))

	def test_render_in_bucket_then_chain_order(self):
		table = SymbolTable()
		table.insert("B", "1")
		table.insert("A", "2")
		table.insert("E", "3")
		table.insert("D", "4")
		self.assertEqual("{\n\t[E: 3]\n\t[B: 1]\n\t[A: 2]\n\t[D: 4]\n}", table.render())
		self.assertEqual("{\n}", SymbolTable().render())


class LexiconTests(unittest.TestCase):
	def test_kinds(self):
		for text, kind in [
			("0", lexicon.INTEGER),
			("42", lexicon.INTEGER),
			("-7", lexicon.INTEGER),
			("+5", lexicon.INTEGER),
			("007", lexicon.INTEGER),
			("A", lexicon.VARIABLE),
			("Z", lexicon.VARIABLE),
			("+", lexicon.OPERATOR),
			("-", lexicon.OPERATOR),
			("*", lexicon.OPERATOR),
			("/", lexicon.OPERATOR),
			("=", lexicon.OPERATOR),
			("9223372036854775807", lexicon.INTEGER),
			("-9223372036854775808", lexicon.INTEGER),
			("0000000000000000000000001", lexicon.INTEGER),
		]:
			with self.subTest(text):
				self.assertEqual(kind, lexicon.kind_of(text))

	def test_unsupported(self):
		for text in ["", "a", "AB", "3A", "3.5", "++", "%", "1_000", " 1", "9223372036854775808", "-9223372036854775809", "9"*5000]:
			with self.subTest(text):
				self.assertIsNone(lexicon.kind_of(text))

	def test_classify_remembers_position(self):
		words = lexicon.classify_all(["3", "A", "+", "x"])
		self.assertEqual([syntax.Literal, syntax.Variable, syntax.Operator, syntax.Unsupported], [type(w) for w in words])
		self.assertEqual([0, 1, 2, 3], [w.spot for w in words])
		self.assertEqual(3, words[0].value)


if __name__ == '__main__':
	unittest.main()
