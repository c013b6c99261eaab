"""Misc code to avoid cyclic imports."""
import sys
import gzip
from collections.abc import Set, Iterable


def openread(filename, encoding='utf8'):
	"""Open stdin/file for reading; decompress gz files on-the-fly.

	:param encoding: if None, mode is binary; otherwise, text."""
	mode = 'rb' if encoding is None else 'rt'
	if filename == '-':
		return open(sys.stdin.fileno(), mode=mode, encoding=encoding,
				closefd=False)
	if filename.endswith('.gz'):
		return gzip.open(filename, mode=mode, encoding=encoding)
	return open(filename, mode=mode, encoding=encoding)


def checkbrackets(brackets, exc=ValueError):
	"""Validate a pair of bracket characters, such as ``'()'``.

	>>> checkbrackets('[]')
	('[', ']')
	>>> checkbrackets('[ ')
	Traceback (most recent call last):
	ValueError: brackets must be two non-whitespace characters; got '[ '"""
	if (not isinstance(brackets, str) or len(brackets) != 2
			or any(a.isspace() for a in brackets)):
		raise exc('brackets must be two non-whitespace characters; got %r'
				% (brackets, ))
	return brackets[0], brackets[1]


class OrderedSet(Set):
	"""A frozen, ordered set which maintains a regular tuple and set.

	The set is indexable; duplicates are dropped, keeping the first
	occurrence. Equality is defined _without_ regard for order.

	>>> s = OrderedSet('abracadabra')
	>>> s
	OrderedSet(('a', 'b', 'r', 'c', 'd'))
	>>> s[2], len(s), 'c' in s
	('r', 5, True)
	>>> s == set('abcdr')
	True"""

	def __init__(self, iterable=None):
		if iterable:
			self.seq = tuple(dict.fromkeys(iterable))
			self.theset = frozenset(self.seq)
		else:
			self.seq = ()
			self.theset = frozenset()

	def __hash__(self):
		return hash(self.theset)

	def __contains__(self, value):
		return value in self.theset

	def __len__(self):
		return len(self.theset)

	def __iter__(self):
		return iter(self.seq)

	def __getitem__(self, n):
		return self.seq[n]

	def __reversed__(self):
		return reversed(self.seq)

	def __repr__(self):
		if not self.seq:
			return '%s()' % self.__class__.__name__
		return '%s(%r)' % (self.__class__.__name__, self.seq)

	def __eq__(self, other):
		"""equality is defined _without_ regard for order."""
		if not isinstance(other, Iterable):
			return NotImplemented
		return self.theset == set(other)

	def __and__(self, other):
		"""maintain the order of the left operand."""
		if not isinstance(other, Iterable):
			return NotImplemented
		return self._from_iterable(value for value in self if value in other)


__all__ = ['openread', 'checkbrackets', 'OrderedSet']
