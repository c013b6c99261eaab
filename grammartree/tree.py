"""Labeled trees in Penn-treebank style bracketed notation."""
# This is an adaptation of the original tree.py file from NLTK.
# Removed: probabilistic, immutable & parented trees, transforms;
# the parser tracks bracket depth instead of using a token regex.
# Original notice:
# Natural Language Toolkit: Text Trees
#
# Copyright (C) 2001-2010 NLTK Project
# Author: Edward Loper <edloper@gradient.cis.upenn.edu>
#         Steven Bird <sb@csse.unimelb.edu.au>
#         Nathan Bodenstab <bodenstab@cslu.ogi.edu> (tree transforms)
# URL: <http://www.nltk.org/>
# For license information, see LICENSE.TXT
import logging
from .symbol import TERMINALBRACKETS
from .production import Production, DELIMITER
from .grammar import Grammar
from .util import checkbrackets

TREEBRACKETS = '()'


class MalformedTreeError(ValueError):
	"""Raised for bracketed trees with unbalanced or misplaced brackets.

	:ivar treestr: the offending input.
	:ivar numopen, numclose: the number of opening and closing brackets."""

	def __init__(self, treestr, numopen, numclose, msg=None):
		if msg is None:
			msg = '%d opening brackets, %d closing brackets' % (
					numopen, numclose)
		super(MalformedTreeError, self).__init__(
				'Malformed bracketed tree %r: %s' % (treestr, msg))
		self.treestr = treestr
		self.numopen = numopen
		self.numclose = numclose


class Tree(object):
	"""A mutable, labeled, n-ary tree structure.

	Each Tree represents a single hierarchical grouping of leaves and subtrees.
	A tree's children are encoded as a list of leaves and subtrees, where
	a leaf is a token (a string); and a subtree is a nested Tree.
	Tree positions are defined as follows:

	- The tree position ``i`` specifies a Tree's ith child.
	- The tree position () specifies the Tree itself.
	- If ``p`` is the tree position of descendant ``d``, then
		``p + (i,)`` specifies the ith child of ``d``.

	The constructor can be called in two ways:

	- ``Tree(label, children)`` constructs a new tree with the specified label
		and list of children.
	- ``Tree(s)`` constructs a new tree by parsing the string s. Equivalent to
		calling the class method ``Tree.parse(s)``.

	>>> tree = Tree('(S (NP (NNP John)) (VP (V runs)))')
	>>> tree.label, [child.label for child in tree]
	('S', ['NP', 'VP'])
	>>> tree.height(), tree.leaves()
	(3, ['John', 'runs'])
	>>> print(tree.flatten())
	(S John runs)
	"""
	__slots__ = ('label', 'children')

	def __new__(cls, label_or_str=None, children=None):
		if label_or_str is None:
			return object.__new__(cls)  # used by copy.deepcopy
		if children is None:
			if not isinstance(label_or_str, str):
				raise TypeError("%s: Expected a label and child list "
						"or a single string; got: %s" % (
						cls.__name__, type(label_or_str)))
			return cls.parse(label_or_str)
		if (isinstance(children, str) or
				not hasattr(children, '__iter__')):
			raise TypeError("%s() argument 2 should be a list, not a "
					"string" % cls.__name__)
		return object.__new__(cls)

	def __init__(self, label_or_str, children=None):
		# Because __new__ may delegate to Tree.parse(), the __init__
		# method may end up getting called more than once (once when
		# constructing the return value for Tree.parse; and again when
		# __new__ returns). We therefore check if `children` is None
		# (which will cause __new__ to call Tree.parse()); if so, then
		# __init__ has already been called once, so just return.
		if children is None:
			return
		self.label = label_or_str
		self.children = list(children)

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Tree):
			return False
		return (self.label == other.label
				and self.children == other.children)

	def __ne__(self, other):
		return not self.__eq__(other)

	__hash__ = None

	# === Delegated list operations ==============================
	def append(self, child):
		"""Append ``child`` to this node."""
		self.children.append(child)

	def extend(self, children):
		"""Extend this node's children with an iterable."""
		self.children.extend(children)

	def insert(self, index, child):
		"""Insert child at integer index."""
		self.children.insert(index, child)

	def pop(self, index=-1):
		"""Remove child at specified integer index (or default to last)."""
		return self.children.pop(index)

	def remove(self, child):
		"""Remove child, based on equality."""
		self.children.remove(child)

	def index(self, child):
		"""Return index of child, based on equality."""
		return self.children.index(child)

	def __iter__(self):
		return self.children.__iter__()

	def __len__(self):
		return self.children.__len__()

	# === Indexing (with support for tree positions) ============
	def __getitem__(self, index):
		if isinstance(index, (int, slice)):
			return self.children.__getitem__(index)
		else:
			if len(index) == 0:
				return self
			elif len(index) == 1:
				return self[int(index[0])]
			return self[int(index[0])][index[1:]]

	def __setitem__(self, index, value):
		if isinstance(index, (int, slice)):
			return self.children.__setitem__(index, value)
		else:
			if len(index) == 0:
				raise IndexError('The tree position () may not be '
						'assigned to.')
			elif len(index) == 1:
				self[index[0]] = value
			else:
				self[index[0]][index[1:]] = value

	def __delitem__(self, index):
		if isinstance(index, (int, slice)):
			return self.children.__delitem__(index)
		else:
			if len(index) == 0:
				raise IndexError('The tree position () may not be deleted.')
			elif len(index) == 1:
				del self[index[0]]
			else:
				del self[index[0]][index[1:]]

	# === Basic tree operations =================================
	def isterminal(self):
		"""Test whether this tree has no children."""
		return not self.children

	def leaves(self):
		""":returns: list containing this tree's leaves.

		The order reflects the order of the tree's hierarchical structure."""
		return [node for node in self.preorder()
				if not isinstance(node, Tree)]

	def height(self):
		""":returns: The number of labeled nodes on the longest path
			from this node downwards; leaves are not counted.

		- The height of a tree without children is 1;
		- the height of a tree containing only leaves is 1;
		- the height of any other tree is one plus the maximum of its
			subtrees' heights.

		>>> Tree('(S (NP John) (VP (V runs)))').height()
		3"""
		result = 0
		agenda = [(self, 1)]
		while agenda:
			node, depth = agenda.pop()
			result = max(result, depth)
			agenda.extend((child, depth + 1) for child in node
					if isinstance(child, Tree))
		return result

	def subtrees(self, condition=None):
		"""Yield subtrees of this tree in depth-first, pre-order traversal.

		:param condition: a function ``Tree -> bool`` to filter which nodes are
			yielded (does not affect whether children are visited).

		NB: store traversal as list before any structural modifications."""
		# Non-recursive version
		agenda = [self]
		while agenda:
			node = agenda.pop()
			if isinstance(node, Tree):
				if condition is None or condition(node):
					yield node
				agenda.extend(node[::-1])

	def preorder(self):
		"""Yield nodes and leaves; each node precedes its children.

		>>> [getattr(a, 'label', a) for a in Tree('(S (A a) b)').preorder()]
		['S', 'A', 'a', 'b']"""
		agenda = [self]
		while agenda:
			node = agenda.pop()
			yield node
			if isinstance(node, Tree):
				agenda.extend(node[::-1])

	def postorder(self):
		"""Yield nodes and leaves; each node follows its children.

		>>> [getattr(a, 'label', a) for a in Tree('(S (A a) b)').postorder()]
		['a', 'A', 'b', 'S']

		NB: store traversal as list before any structural modifications."""
		# Non-recursive; requires no parent pointers but uses O(n) space.
		agenda = [self]
		visited = set()
		while agenda:
			node = agenda[-1]
			if not isinstance(node, Tree) or id(node) in visited:
				agenda.pop()
				yield node
			else:
				agenda.extend(node[::-1])
				visited.add(id(node))

	def treepositions(self, order='preorder'):
		""":param order: One of preorder, postorder, bothorder, leaves."""
		positions = []
		if order in ('preorder', 'bothorder'):
			positions.append(())
		for i, child in enumerate(self.children):
			if isinstance(child, Tree):
				childpos = child.treepositions(order)
				positions.extend((i, ) + p for p in childpos)
			else:
				positions.append((i, ))
		if order in ('postorder', 'bothorder'):
			positions.append(())
		return positions

	def flatten(self):
		"""Return a new tree with this tree's label and leaves as children.

		>>> print(Tree('(S (NP (Det The) (N politician)) (VP (V took) '
		...     '(NP (Det the) (N bribe))))').flatten())
		(S The politician took the bribe)"""
		return self.__class__(self.label, self.leaves())

	def productions(self, brackets=TERMINALBRACKETS):
		"""Read off one production for each node, in pre-order.

		Leaves become terminal symbols, enclosed in ``brackets``.

		>>> for rule in Tree('(S (NP John) (VP (V runs)))').productions():
		...     print(rule)
		S --> NP,VP
		NP --> [John]
		VP --> V
		V --> [runs]"""
		return [Production(node.label,
				[child.label if isinstance(child, Tree)
					else brackets[0] + child + brackets[1]
					for child in node],
				brackets)
				for node in self.subtrees()]

	def togrammar(self, brackets=TERMINALBRACKETS, delimiter=DELIMITER):
		"""Return the grammar licensing this tree; cf. ``productions()``."""
		return Grammar(self.productions(brackets), delimiter=delimiter,
				brackets=brackets)

	# === Not implemented =======================================
	def flatten_inplace(self):
		"""Replace the children of this tree by its leaves."""
		raise NotImplementedError('in-place flattening is not implemented; '
				'use flatten()')

	def preterminals(self):
		"""Return the pre-terminal nodes of this tree."""
		raise NotImplementedError('pre-terminals are not implemented')

	def partofspeech(self):
		"""Return a list of (leaf, pre-terminal label) pairs."""
		raise NotImplementedError('part-of-speech tags are not implemented')

	def chomskynormalform(self):
		"""Return a copy of this tree in Chomsky normal form."""
		raise NotImplementedError(
				'conversion to Chomsky normal form is not implemented')

	cnf = chomskynormalform

	# === Convert, copy =========================================
	@classmethod
	def convert(cls, val):
		"""Convert a tree between different subtypes of Tree.

		:param cls: the class that will be used for the new tree.
		:param val: The tree that should be converted."""
		if isinstance(val, Tree):
			children = [cls.convert(child) for child in val]
			return cls(val.label, children)
		return val

	def copy(self, deep=False):
		"""Create a copy of this tree."""
		if not deep:
			return self.__class__(self.label, self)
		return self.__class__.convert(self)

	# === Parsing ===============================================
	@classmethod
	def parse(cls, s, brackets=TREEBRACKETS):
		"""Parse a bracketed tree string and return the resulting tree.
		Trees are represented as nested bracketings, such as:
		``(S (NP (NNP John)) (VP (V runs)))``

		:param s: The string to parse
		:param brackets: The two bracket characters used to mark the
			beginning and end of trees and subtrees.
		:returns: A tree corresponding to the string representation s.
			A string without brackets gives a tree without children.
			If this class method is called using a subclass of Tree, then it
			will return a tree of that type.
		:raises MalformedTreeError: if the brackets are unbalanced, or
			if there is text before the first opening bracket.

		>>> Tree.parse('[S [NP John] [VP runs]]', brackets='[]')
		Tree('S', [Tree('NP', ['John']), Tree('VP', ['runs'])])
		>>> Tree.parse('(S (NP John)')
		Traceback (most recent call last):
		grammartree.tree.MalformedTreeError: Malformed bracketed tree \
'(S (NP John)': 2 opening brackets, 1 closing brackets"""
		open_b, close_b = checkbrackets(brackets, TypeError)
		if open_b == close_b:
			raise TypeError('opening and closing bracket must differ')
		numopen, numclose = s.count(open_b), s.count(close_b)
		if numopen != numclose:
			raise MalformedTreeError(s, numopen, numclose)
		if numopen == 0:
			return cls(s.strip(), [])
		start = min(s.index(open_b), s.index(close_b))
		if s[start] != open_b or s[:start].strip():
			raise MalformedTreeError(s, numopen, numclose,
					'expected %r at index %d' % (open_b, start))
		end = _matchbracket(s, start, open_b, close_b)
		if s[end:].strip():
			logging.warning('ignoring text after tree: %r', s[end:].strip())
		return cls._parsenode(s, start, end, open_b, close_b)

	@classmethod
	def _parsenode(cls, s, start, end, open_b, close_b):
		"""Parse the balanced bracketing ``(label child...)`` at
		``s[start:end]``; nodes under construction are kept on a stack."""
		stack = []
		result = None
		pos = start
		while pos < end:
			char = s[pos]
			if char.isspace():
				pos += 1
			elif char == open_b:
				labelend = _tokenend(s, pos + 1, end, open_b, close_b)
				stack.append(cls(s[pos + 1:labelend], []))
				pos = labelend
			elif char == close_b:
				node = stack.pop()
				if stack:
					stack[-1].append(node)
				else:
					result = node
				pos += 1
			else:
				tokend = _tokenend(s, pos, end, open_b, close_b)
				stack[-1].append(s[pos:tokend])
				pos = tokend
		return result

	# === String Representations ================================
	def __repr__(self):
		childstr = ", ".join(repr(c) for c in self)
		return '%s(%r, [%s])' % (self.__class__.__name__, self.label, childstr)

	def __str__(self):
		return self._pprint_flat(TREEBRACKETS)

	def tostring(self, brackets=TREEBRACKETS):
		"""Return this tree in bracketed notation on a single line.

		The result is parsed back into an equal tree by ``Tree.parse()``
		with the same brackets.

		>>> Tree('S', [Tree('NP', []), 'runs']).tostring('[]')
		'[S [NP] runs]'"""
		return self._pprint_flat(brackets)

	def pprint(self, margin=70, indent=0, brackets=TREEBRACKETS):
		"""	:returns: A pretty-printed string representation of this tree.
		:param margin: The right margin at which to do line-wrapping.
		:param indent: The indentation level at which printing begins. This
			number is used to decide how far to indent subsequent lines.
		:param brackets: a pair of opening and closing strings."""
		# Try writing it on one line.
		s = self._pprint_flat(brackets)
		if len(s) + indent < margin:
			return s
		# If it doesn't fit on one line, then write it on multi-lines.
		s = '%s%s' % (brackets[0], self.label)
		for child in self.children:
			if isinstance(child, Tree):
				s += '\n' + ' ' * (indent + 2) + child.pprint(margin,
						indent + 2, brackets)
			else:
				s += '\n' + ' ' * (indent + 2) + '%s' % child
		return s + brackets[1]

	def _pprint_flat(self, brackets):
		"""Pretty-printing helper function."""
		childstrs = []
		for child in self.children:
			if isinstance(child, Tree):
				childstrs.append(child._pprint_flat(brackets))
			else:
				childstrs.append('%s' % child)
		if not childstrs:
			return '%s%s%s' % (brackets[0], self.label, brackets[1])
		return '%s%s %s%s' % (brackets[0], self.label,
				' '.join(childstrs), brackets[1])

	def draw(self):
		""":returns: an indented, multi-line rendering of this tree."""
		return self.pprint(margin=0)


def _matchbracket(s, start, open_b, close_b):
	""":returns: the index after the bracket closing the one at ``start``."""
	depth = 0
	for pos in range(start, len(s)):
		if s[pos] == open_b:
			depth += 1
		elif s[pos] == close_b:
			depth -= 1
			if depth == 0:
				return pos + 1
	raise MalformedTreeError(s, s.count(open_b), s.count(close_b),
			'no closing bracket for %r at index %d' % (open_b, start))


def _tokenend(s, pos, end, open_b, close_b):
	""":returns: the index of the first whitespace or bracket character at or
		after ``pos``, or ``end``."""
	while (pos < end and not s[pos].isspace()
			and s[pos] != open_b and s[pos] != close_b):
		pos += 1
	return pos


def readtrees(lines, brackets=TREEBRACKETS):
	"""Read bracketed trees that may span several lines.

	:param lines: an iterable of strings (line endings optional).
	:yields: a Tree for each complete bracketing. Text outside of trees is
		ignored with a warning.
	:raises MalformedTreeError: on a closing bracket without an opening
		bracket, or if the input ends inside a tree.

	>>> for tree in readtrees(['(S (NP Mary) (VP', '(VB is) (JJ rich)))',
	...         '(A a) (B b)']):
	...     print(tree)
	(S (NP Mary) (VP (VB is) (JJ rich)))
	(A a)
	(B b)"""
	open_b, close_b = checkbrackets(brackets, TypeError)
	chunk = []
	depth = 0
	for line in lines:
		start = 0
		for n, char in enumerate(line):
			if char == open_b:
				if depth == 0:
					if line[start:n].strip():
						logging.warning('ignoring text outside of tree: %r',
								line[start:n].strip())
					start = n
				depth += 1
			elif char == close_b:
				depth -= 1
				if depth < 0:
					raise MalformedTreeError(line, line.count(open_b),
							line.count(close_b),
							'unexpected %r at index %d' % (close_b, n))
				if depth == 0:
					chunk.append(line[start:n + 1])
					yield Tree.parse(' '.join(chunk), brackets)
					chunk = []
					start = n + 1
		rest = line[start:]
		if depth:
			chunk.append(rest)
		elif rest.strip():
			logging.warning('ignoring text outside of tree: %r', rest.strip())
	if depth:
		treestr = ' '.join(chunk)
		raise MalformedTreeError(treestr, treestr.count(open_b),
				treestr.count(close_b))


__all__ = ['Tree', 'MalformedTreeError', 'readtrees', 'TREEBRACKETS']
