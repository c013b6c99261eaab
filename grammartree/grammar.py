"""Grammars of rewrite rules, and their classification.

A grammar stores productions grouped by head, in order of addition:

>>> g = Grammar(['S --> NP, VP', 'NP --> [John]', 'VP --> [runs]'])
>>> len(g), g.start
(3, Symbol('S'))
>>> print(g)
S --> NP,VP
NP --> [John]
VP --> [runs]
>>> g.iscontextfree(), g.iscnf(), g.isregular()
(True, True, False)
>>> 'NP --> [John]' in g
True
"""
import logging
from collections.abc import Mapping
import numpy as np
from .symbol import Symbol, TERMINALBRACKETS
from .production import Production, DELIMITER
from .util import OrderedSet, openread

LINESEP = '\n'
# (description, name of Grammar predicate)
CLASSIFICATION = (
		('context-free', 'iscontextfree'),
		('left-regular', 'isleftregular'),
		('right-regular', 'isrightregular'),
		('regular', 'isregular'),
		('strictly regular', 'isstrictlyregular'),
		('linear', 'islinear'),
		('Chomsky normal form', 'iscnf'),
		('Greibach normal form', 'isgnf'),
		('left-recursive', 'isleftrecursive'),
		('cyclic', 'iscyclic'),
		)


class Grammar(object):
	"""A collection of productions, grouped by their head.

	:param rules: one of:

		- a rule string, or several separated by ``linesep``;
		- a sequence of rule strings, ``(head, daughters)`` pairs, or
			``Production`` objects;
		- a mapping of heads to lists of daughter sequences; such a mapping
			is taken as is, without validation.
	:param start: the start symbol; by default the first symbol of the head
		of the first rule. Must be a non-terminal of the grammar.
	:param delimiter: the string separating head and daughters in rules.
	:param brackets: the pair of characters delimiting terminal symbols.
	:param linesep: the separator of rules in multi-rule strings.

	``rules`` maps head tuples to lists of daughter tuples; a head never
	has an empty list of daughters."""

	def __init__(self, rules=None, start=None, delimiter=DELIMITER,
			brackets=TERMINALBRACKETS, linesep=LINESEP):
		self.delimiter = delimiter
		self.brackets = brackets
		self.linesep = linesep
		self.rules = {}
		self._order = []  # the head of each production, in order of addition
		self._start = None
		if rules is None:
			pass
		elif isinstance(rules, Mapping):
			self._fromdict(rules)
		else:
			self.extend(rules)
		if start is not None:
			self.start = start
		elif self._order:
			self._start = self._order[0][0]

	def _fromdict(self, rules):
		"""Take over a mapping of heads to lists of daughters."""
		for head, bucket in rules.items():
			if not bucket:
				continue
			head = self._symbols(head)
			bucket = [self._symbols(daughters) for daughters in bucket]
			self.rules.setdefault(head, []).extend(bucket)
			self._order.extend([head] * len(bucket))
		logging.debug('grammar from mapping with %d heads; not validated',
				len(self.rules))

	def _symbols(self, seq):
		"""Convert a symbol or a sequence of symbols to a tuple of Symbol."""
		if isinstance(seq, (str, Symbol)):
			seq = (seq, )
		return tuple(Symbol(a, self.brackets) for a in seq)

	def _splitlines(self, rules):
		"""Split a multi-rule string into rules, ignoring blank lines."""
		return [line for line in rules.split(self.linesep) if line.strip()]

	# === Start symbol ==========================================
	@property
	def start(self):
		"""The start symbol; None for an empty grammar."""
		return self._start

	@start.setter
	def start(self, symbol):
		symbol = Symbol(symbol, self.brackets)
		if symbol not in self.nonterminals():
			raise ValueError('start symbol %r is not a non-terminal of this '
					'grammar' % symbol.text)
		self._start = symbol

	def _inheritstart(self, start):
		"""Keep ``start`` if it is still valid; else use the first head."""
		if start is not None and start in self.nonterminals():
			self._start = start
		elif self._order:
			self._start = self._order[0][0]
		else:
			self._start = None

	# === Enumeration and lookup ================================
	def __iter__(self):
		"""Yield productions, grouped by head in order of first addition."""
		for head, bucket in self.rules.items():
			for daughters in bucket:
				yield Production(head, daughters, self.brackets)

	def __len__(self):
		return sum(len(bucket) for bucket in self.rules.values())

	def _locate(self, index):
		""":returns: ``(head, n)`` for the production at ``index``, such
			that it is ``rules[head][n]``; None if out of range."""
		if index < 0:
			index += len(self)
		if index < 0:
			return None
		for head, bucket in self.rules.items():
			if index < len(bucket):
				return head, index
			index -= len(bucket)
		return None

	def at(self, index):
		"""Return the production at ``index``, or None if out of range.

		>>> g = Grammar('S --> NP, VP')
		>>> g.at(0)
		Production(('S',), ('NP', 'VP'))
		>>> print(g.at(2))
		None"""
		loc = self._locate(index)
		if loc is None:
			return None
		head, n = loc
		return Production(head, self.rules[head][n], self.brackets)

	def __getitem__(self, index):
		if isinstance(index, slice):
			return list(self)[index]
		result = self.at(index)
		if result is None:
			raise IndexError('grammar index out of range')
		return result

	def heads(self):
		""":returns: list of the heads, in order of first addition."""
		return list(self.rules)

	def productions(self, head):
		""":returns: list of the productions with the given head.

		>>> g = Grammar(['N --> [home]', 'V --> [work]', 'N --> [rule]'])
		>>> g.productions('N')
		[Production(('N',), ('[home]',)), Production(('N',), ('[rule]',))]
		"""
		head = self._symbols(head)
		return [Production(head, daughters, self.brackets)
				for daughters in self.rules.get(head, ())]

	def __contains__(self, rule):
		rule = Production.convert(rule, self.delimiter, self.brackets)
		return rule.daughters in self.rules.get(rule.head, ())

	def contains(self, rule):
		"""Test whether this grammar contains a production.

		:param rule: a Production, a rule string, or a pair
			``(head, daughters)``."""
		return rule in self

	# === Mutation ==============================================
	def push(self, rule):
		"""Add a production after the existing productions for its head.

		:param rule: a Production, a rule string, or a pair
			``(head, daughters)``. Duplicates are stored again.
		:returns: the added Production."""
		rule = Production.convert(rule, self.delimiter, self.brackets)
		self.rules.setdefault(rule.head, []).append(rule.daughters)
		self._order.append(rule.head)
		logging.debug('added %s', rule)
		return rule

	def extend(self, rules):
		"""Push each of a sequence of rules; a string is split in lines."""
		if isinstance(rules, str):
			rules = self._splitlines(rules)
		for rule in rules:
			self.push(rule)

	def pop(self, index=None):
		"""Remove and return a production.

		:param index: index of the production, in the order of iteration.
			By default, the most recently added production is removed.
		:raises IndexError: if the index is out of range.

		When the start symbol is no longer a non-terminal of the grammar,
		the head of the earliest added production remaining takes its place.

		>>> g = Grammar(['S --> A', 'A --> [a]'])
		>>> g.push('S --> B')
		Production(('S',), ('B',))
		>>> g.pop()
		Production(('S',), ('B',))
		>>> g.pop(0)
		Production(('S',), ('A',))
		>>> g.heads(), g.start
		([(Symbol('A'),)], Symbol('A'))
		"""
		if index is None:
			if not self._order:
				raise IndexError('pop from empty grammar')
			head = self._order[-1]
			n = len(self.rules[head]) - 1
		else:
			loc = self._locate(index)
			if loc is None:
				raise IndexError('pop index out of range')
			head, n = loc
		bucket = self.rules[head]
		daughters = bucket.pop(n)
		if not bucket:
			del self.rules[head]
		self._forget(head, n)
		self._inheritstart(self._start)
		rule = Production(head, daughters, self.brackets)
		logging.debug('removed %s', rule)
		return rule

	def _forget(self, head, n):
		"""Remove the n-th occurrence of ``head`` from the addition order."""
		for m, a in enumerate(self._order):
			if a == head:
				if n == 0:
					del self._order[m]
					return
				n -= 1

	addrule = push
	removerule = pop

	# === Combination ===========================================
	def copy(self):
		"""Return a copy of this grammar with the same configuration."""
		result = self.__class__(None, delimiter=self.delimiter,
				brackets=self.brackets, linesep=self.linesep)
		result.rules = {head: list(bucket)
				for head, bucket in self.rules.items()}
		result._order = list(self._order)
		result._start = self._start
		return result

	def union(self, other):
		"""Return a new grammar with the productions of both grammars.

		Productions occurring in both are kept twice."""
		result = self.copy()
		result.extend(other)
		result._inheritstart(self._start if self._start is not None
				else getattr(other, 'start', None))
		return result

	def difference(self, other):
		"""Return a new grammar with the productions of this grammar that
		do not occur in ``other``."""
		if isinstance(other, str):
			other = self._splitlines(other)
		exclude = {Production.convert(a, self.delimiter, self.brackets)
				for a in other}
		result = self.__class__(None, delimiter=self.delimiter,
				brackets=self.brackets, linesep=self.linesep)
		result.extend(rule for rule in self if rule not in exclude)
		result._inheritstart(self._start)
		return result

	def __add__(self, other):
		if not isinstance(other, Grammar):
			return NotImplemented
		return self.union(other)

	def __sub__(self, other):
		if not isinstance(other, Grammar):
			return NotImplemented
		return self.difference(other)

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Grammar):
			return NotImplemented
		return self.rules == other.rules

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	__hash__ = None

	# === Alphabets =============================================
	def alphabet(self):
		""":returns: OrderedSet of all symbols, in order of appearance."""
		return OrderedSet(
				a for head, bucket in self.rules.items()
				for daughters in bucket
				for a in head + daughters)

	def terminals(self):
		""":returns: OrderedSet of the terminal symbols."""
		return OrderedSet(a for a in self.alphabet() if a.isterminal())

	def nonterminals(self):
		""":returns: OrderedSet of the non-terminal symbols.

		>>> Grammar(['S --> [a], B', 'B --> C, [b]']).nonterminals()
		OrderedSet((Symbol('S'), Symbol('B'), Symbol('C')))"""
		return OrderedSet(a for a in self.alphabet() if a.isnonterminal())

	# === Classification ========================================
	def iscontextfree(self):
		"""Test whether every production has a single non-terminal head."""
		return all(rule.iscontextfree() for rule in self)

	def isrightregular(self):
		"""Test whether every production is right-regular."""
		return all(rule.isrightregular() for rule in self)

	def isleftregular(self):
		"""Test whether every production is left-regular."""
		return all(rule.isleftregular() for rule in self)

	def isregular(self):
		"""Test whether this grammar is left-regular, right-regular, or both.
		"""
		return self.isleftregular() or self.isrightregular()

	def isstrictlyregular(self):
		"""Test whether this grammar is left-regular or right-regular, but
		not both.

		>>> Grammar('A --> [a]').isstrictlyregular()
		False
		>>> Grammar(['A --> [a]', 'A --> [a], A']).isstrictlyregular()
		True"""
		return self.isleftregular() != self.isrightregular()

	def islinear(self):
		"""Test whether each production is left-regular or right-regular.

		Unlike ``isregular()``, the productions may mix both kinds.

		>>> g = Grammar(['A --> [a], B', 'B --> A, [b]'])
		>>> g.islinear(), g.isregular()
		(True, False)"""
		return all(rule.isleftregular() or rule.isrightregular()
				for rule in self)

	def iscnf(self):
		"""Test whether this grammar is in Chomsky normal form."""
		return all(rule.iscnf() for rule in self)

	def isgnf(self):
		"""Test whether this grammar is in Greibach normal form."""
		return all(rule.isgnf() for rule in self)

	def isleftrecursive(self):
		"""Test whether some production is (directly) left-recursive."""
		return any(rule.isleftrecursive() for rule in self)

	def iscyclic(self):
		"""Test whether some production rewrites its head to itself."""
		return any(rule.iscyclic() for rule in self)

	def classify(self):
		""":returns: dict mapping a description of each grammar class to
			a bool; keys are in the order of ``CLASSIFICATION``."""
		return {desc: getattr(self, name)() for desc, name in CLASSIFICATION}

	# === Transformations =======================================
	def chomskynormalform(self):
		"""Return an equivalent grammar in Chomsky normal form."""
		raise NotImplementedError(
				'conversion to Chomsky normal form is not implemented')

	def greibachnormalform(self):
		"""Return an equivalent grammar in Greibach normal form."""
		raise NotImplementedError(
				'conversion to Greibach normal form is not implemented')

	cnf = chomskynormalform
	gnf = greibachnormalform

	# === Conversion ============================================
	def todict(self):
		""":returns: a copy of the mapping of heads to lists of daughters."""
		return {head: list(bucket) for head, bucket in self.rules.items()}

	def tolist(self):
		""":returns: a list of ``(head, daughters)`` tuples."""
		return [(head, daughters) for head, bucket in self.rules.items()
				for daughters in bucket]

	def tostring(self, delimiter=None):
		"""Return the productions in text, one per line."""
		delimiter = self.delimiter if delimiter is None else delimiter
		return self.linesep.join(rule.tostring(delimiter) for rule in self)

	def __str__(self):
		return self.tostring()

	def __repr__(self):
		return '%s(%r)' % (self.__class__.__name__,
				[rule.tostring(self.delimiter) for rule in self])


def readgrammar(filename, encoding='utf8', **kwds):
	"""Read a grammar with one rule per line from a file.

	:param filename: a filename, or ``-`` for standard input; files ending
		in ``.gz`` are decompressed.
	:param kwds: passed on to ``Grammar()``."""
	with openread(filename, encoding=encoding) as inp:
		return Grammar(inp.read(), **kwds)


def grammarinfo(grammar):
	"""Return a summary of a grammar's size, shape and classification.

	>>> print(grammarinfo(Grammar(['S --> A, B', 'A --> [a]', 'B --> [b]'])))
	productions: 3, heads: 3, start symbol: S
	terminals: 2, non-terminals: 3
	daughters per production: mean 1.33333, max 2
	daughters distribution: 1: 2, 2: 1
	context-free: yes
	left-regular: no
	right-regular: no
	regular: no
	strictly regular: no
	linear: no
	Chomsky normal form: yes
	Greibach normal form: no
	left-recursive: no
	cyclic: no"""
	lengths = np.array([len(rule.daughters) for rule in grammar],
			dtype=np.int64)
	result = ['productions: %d, heads: %d, start symbol: %s' % (
			len(grammar), len(grammar.rules), grammar.start),
			'terminals: %d, non-terminals: %d' % (
			len(grammar.terminals()), len(grammar.nonterminals()))]
	if len(lengths):
		result.append('daughters per production: mean %g, max %d' % (
				lengths.mean(), lengths.max()))
		result.append('daughters distribution: %s' % ', '.join(
				'%d: %d' % (n, cnt)
				for n, cnt in enumerate(np.bincount(lengths)) if cnt))
	result.extend('%s: %s' % (desc, 'yes' if value else 'no')
			for desc, value in grammar.classify().items())
	return '\n'.join(result)


__all__ = ['Grammar', 'readgrammar', 'grammarinfo', 'CLASSIFICATION',
		'LINESEP']
