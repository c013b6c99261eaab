"""Productions (rewrite rules) and the predicates on their shape.

A production rewrites a sequence of head symbols into a sequence of
daughters. In text, symbols are separated by commas and the two sides by a
delimiter; whitespace is not significant:

>>> p = parserule('S --> NP, VP')
>>> p
Production(('S',), ('NP', 'VP'))
>>> print(p)
S --> NP,VP
>>> p.iscontextfree(), p.iscnf(), p.isrightregular()
(True, True, False)
"""
import re
from .symbol import Symbol, TERMINALBRACKETS

DELIMITER = '-->'
WHITESPACERE = re.compile(r'\s+')


class Production(object):
	"""A single rule ``head --> daughters``.

	:param head: a non-empty sequence of symbols; a single string is taken
		to be a head of one symbol.
	:param daughters: a (possibly empty) sequence of symbols.
	:param brackets: the terminal bracket pair for the symbols.

	Head and daughters are stored as tuples of ``Symbol`` objects.
	Productions are immutable and hashable; equality is structural and
	sensitive to the order of symbols. Symbols are not restricted, but only
	a production whose symbols contain no whitespace, comma or delimiter
	is read back unchanged by ``parserule(str(production))``."""
	__slots__ = ('head', 'daughters')

	def __init__(self, head, daughters=(), brackets=TERMINALBRACKETS):
		if isinstance(head, (str, Symbol)):
			head = (head, )
		if isinstance(daughters, (str, Symbol)):
			daughters = (daughters, )
		head = tuple(Symbol(a, brackets) for a in head)
		if not head:
			raise ValueError('a production needs at least one head symbol')
		object.__setattr__(self, 'head', head)
		object.__setattr__(self, 'daughters',
				tuple(Symbol(a, brackets) for a in daughters))

	def __setattr__(self, name, value):
		raise AttributeError('Production objects are immutable')

	@property
	def brackets(self):
		"""The terminal bracket pair of this production's symbols."""
		return self.head[0].brackets

	@classmethod
	def fromstring(cls, rule, delimiter=DELIMITER,
			brackets=TERMINALBRACKETS):
		"""Parse a rule such as ``'A, B --> [c], D'``."""
		return parserule(rule, delimiter, brackets)

	@classmethod
	def convert(cls, rule, delimiter=DELIMITER, brackets=TERMINALBRACKETS):
		"""Return a Production for a Production, rule string, or a pair
		``(head, daughters)``."""
		if isinstance(rule, Production):
			return rule
		elif isinstance(rule, str):
			return parserule(rule, delimiter, brackets)
		try:
			head, daughters = rule
		except (TypeError, ValueError):
			raise TypeError('expected a Production, a rule string or a '
					'(head, daughters) pair; got %r' % (rule, ))
		return cls(head, daughters, brackets)

	# === Classification ========================================
	def iscontextfree(self):
		"""A single non-terminal head: ``A --> w``."""
		return len(self.head) == 1 and self.head[0].isnonterminal()

	def isrightregular(self):
		"""``A --> [a]``, ``A --> []``, or ``A --> [a], B``.

		>>> [parserule(a).isrightregular() for a in (
		...     'B --> [a]', 'B --> [a], C', 'B --> []', 'B --> A, [b]')]
		[True, True, True, False]"""
		if not self.iscontextfree():
			return False
		daughters = self.daughters
		if len(daughters) == 1:
			return daughters[0].isterminal() or daughters[0].isepsilon()
		elif len(daughters) == 2:
			return (daughters[0].isterminal()
					and daughters[1].isnonterminal())
		return False

	def isleftregular(self):
		"""``A --> [a]``, ``A --> []``, or ``A --> B, [a]``.

		>>> [parserule(a).isleftregular() for a in (
		...     'B --> [a]', 'B --> [a], C', 'B --> A, [b]')]
		[True, False, True]"""
		if not self.iscontextfree():
			return False
		daughters = self.daughters
		if len(daughters) == 1:
			return daughters[0].isterminal()
		elif len(daughters) == 2:
			return (daughters[0].isnonterminal()
					and daughters[1].isterminal())
		return False

	def iscnf(self):
		"""Chomsky normal form: ``A --> B, C``, ``A --> [a]`` or ``S --> []``.

		The empty string is a terminal, so the last form is a special case
		of the second; it is accepted for any head."""
		if not self.iscontextfree():
			return False
		daughters = self.daughters
		if len(daughters) == 2:
			return all(a.isnonterminal() for a in daughters)
		elif len(daughters) == 1:
			return daughters[0].isterminal()
		return False

	def isgnf(self):
		"""Greibach normal form: ``A --> [a], B`` or ``A --> []``.

		>>> [parserule(a).isgnf() for a in (
		...     'A --> [a], B', 'A --> []', 'A --> [a]', 'A --> B, C')]
		[True, True, False, False]"""
		if not self.iscontextfree():
			return False
		daughters = self.daughters
		if len(daughters) == 2:
			return (daughters[0].isterminal()
					and daughters[1].isnonterminal())
		elif len(daughters) == 1:
			return daughters[0].isepsilon()
		return False

	def isleftrecursive(self):
		"""Test whether the daughters start with the head.

		Only this production is inspected; left recursion through other
		productions is not detected.

		>>> parserule('NP --> NP, PP').isleftrecursive()
		True
		>>> parserule('NP --> Det, NP').isleftrecursive()
		False"""
		n = len(self.head)
		return self.daughters[:n] == self.head

	def iscyclic(self):
		"""Test whether the head rewrites to itself: ``A --> A``."""
		return self.head == self.daughters

	def islexical(self):
		"""Test whether all daughters are terminals."""
		return bool(self.daughters) and all(
				a.isterminal() for a in self.daughters)

	def symbols(self):
		""":returns: tuple with the head symbols followed by the daughters."""
		return self.head + self.daughters

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Production):
			return NotImplemented
		return self.head == other.head and self.daughters == other.daughters

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __hash__(self):
		return hash((self.head, self.daughters))

	def __iter__(self):
		"""Unpack as ``head, daughters = production``."""
		return iter((self.head, self.daughters))

	def __reduce__(self):
		return (self.__class__, (
				tuple(a.text for a in self.head),
				tuple(a.text for a in self.daughters),
				self.brackets))

	# === String Representations ================================
	def tostring(self, delimiter=DELIMITER):
		"""Render this production; the inverse of ``parserule()`` for symbols
		without whitespace, commas or ``delimiter``.

		>>> Production('A', ()).tostring()
		'A --> '
		>>> parserule(Production('A', ('a b', '[,]')).tostring())
		Production(('A',), ('ab', '[', ']'))"""
		return '%s %s %s' % (
				','.join(a.text for a in self.head), delimiter,
				','.join(a.text for a in self.daughters))

	def __str__(self):
		return self.tostring()

	def __repr__(self):
		return '%s(%r, %r)' % (self.__class__.__name__,
				tuple(a.text for a in self.head),
				tuple(a.text for a in self.daughters))


def parserule(rule, delimiter=DELIMITER, brackets=TERMINALBRACKETS):
	"""Parse a rule string into a Production.

	Whitespace is removed; symbols are separated by commas, and ``delimiter``
	separates the head from the daughters.

	>>> parserule('a S a --> a ,    b')
	Production(('aSa',), ('a', 'b'))
	>>> parserule('X, p, y --> [a], [b]')
	Production(('X', 'p', 'y'), ('[a]', '[b]'))
	>>> parserule('A -->')
	Production(('A',), ())
	>>> parserule('A = b', delimiter='=')
	Production(('A',), ('b',))
	>>> parserule('A, B')
	Traceback (most recent call last):
	ValueError: malformed rule 'A, B': expected exactly one '-->'"""
	if not isinstance(rule, str):
		raise TypeError('expected a rule string; got %r' % (rule, ))
	delim = WHITESPACERE.sub('', delimiter)
	if not delim:
		raise ValueError('delimiter may not be empty')
	stripped = WHITESPACERE.sub('', rule)
	if stripped.count(delim) != 1:
		raise ValueError('malformed rule %r: expected exactly one %r' % (
				rule, delim))
	head, daughters = stripped.split(delim)
	if not head:
		raise ValueError('malformed rule %r: no head symbols' % rule)
	return Production(_splitsymbols(head, rule),
			_splitsymbols(daughters, rule) if daughters else (),
			brackets)


def _splitsymbols(side, rule):
	"""Split one side of a rule into its comma-separated symbols."""
	symbols = side.split(',')
	if not all(symbols):
		raise ValueError('malformed rule %r: empty symbol' % rule)
	return symbols


__all__ = ['Production', 'parserule', 'DELIMITER']
