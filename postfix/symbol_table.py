"""
A small hash map from variable names to the text of their values.

There are only ever 26 possible keys, so a handful of buckets with a
singly-linked chain hanging off each one is plenty. New keys go on the
tail of their chain; a key already in the chain gets its value replaced
where it sits, so the chain never holds the same key twice.
"""
from typing import Iterator, Optional

MAP_SIZE = 5  # Number of buckets, i.e. heads of chains.

class Node:
	key: str
	value: str
	next: Optional["Node"]
	def __init__(self, key:str, value:str):
		self.key, self.value, self.next = key, value, None
	def __repr__(self): return "[%s: %s]" % (self.key, self.value)

def jenkins_hash(key:str) -> int:
	"""
	Jenkins' one-at-a-time hash, squeezed through an unsigned byte at every step.
	With only eight bits, the big shifts contribute nothing, but they are kept
	so the mixing reads like the published algorithm.
	"""
	h = 0
	for ch in key:
		h = (h + ord(ch)) & 0xFF
		h = (h + (h << 10)) & 0xFF
		h ^= h >> 6
	h = (h + (h << 3)) & 0xFF
	h ^= h >> 11
	h = (h + (h << 15)) & 0xFF
	return h

def bucket_of(key:str) -> int:
	return jenkins_hash(key) % MAP_SIZE

class SymbolTable:
	_buckets: list[Optional[Node]]

	def __init__(self):
		self._buckets = [None] * MAP_SIZE

	def insert(self, key:str, value:str):
		index = bucket_of(key)
		node = self._buckets[index]
		if node is None:
			self._buckets[index] = Node(key, value)
			return
		while True:
			if node.key == key:
				node.value = value
				return
			if node.next is None: break
			node = node.next
		node.next = Node(key, value)

	def get(self, key:str) -> tuple[str, bool]:
		for node in self.chain(bucket_of(key)):
			if node.key == key:
				return node.value, True
		return "", False

	def chain(self, index:int) -> Iterator[Node]:
		node = self._buckets[index]
		while node is not None:
			yield node
			node = node.next

	def __iter__(self) -> Iterator[tuple[str, str]]:
		""" Bucket order, then chain order. """
		for index in range(MAP_SIZE):
			for node in self.chain(index):
				yield node.key, node.value

	def __len__(self): return sum(1 for _ in self)

	def render(self) -> str:
		lines = ["{"]
		lines.extend("\t[%s: %s]" % pair for pair in self)
		lines.append("}")
		return "\n".join(lines)
