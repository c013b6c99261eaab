"""Terminal and non-terminal symbols.

A symbol is terminal if its surface form is enclosed in a pair of terminal
brackets, ``[word]`` by default; all other symbols are non-terminals.
The empty bracket pair ``[]`` denotes the empty string (epsilon).

>>> Symbol('[a]').isterminal(), Symbol('NP').isterminal()
(True, False)
>>> Symbol('<a>', brackets='<>').isterminal()
True
>>> Symbol('[]').isepsilon()
True
>>> Symbol('S') == 'S'
True
"""
from .util import checkbrackets

TERMINALBRACKETS = '[]'
EPSILON = '[]'


class Symbol(object):
	"""An immutable symbol of a grammar.

	:param text: the surface form of the symbol; may also be an existing
		Symbol, in which case its text is reused.
	:param brackets: the two characters that delimit terminal symbols.

	Equality and hashing only consider the text, so that a Symbol can be
	looked up with a plain string."""
	__slots__ = ('text', 'brackets')

	def __init__(self, text, brackets=TERMINALBRACKETS):
		if isinstance(text, Symbol):
			text = text.text
		if not isinstance(text, str):
			raise TypeError('expected a string; got %r' % (text, ))
		checkbrackets(brackets)
		object.__setattr__(self, 'text', text)
		object.__setattr__(self, 'brackets', brackets)

	def __setattr__(self, name, value):
		raise AttributeError('Symbol objects are immutable')

	def isterminal(self):
		"""Test whether this symbol is enclosed in the terminal brackets."""
		return (len(self.text) >= 2 and self.text[0] == self.brackets[0]
				and self.text[-1] == self.brackets[1])

	def isnonterminal(self):
		"""Test whether this symbol is not a terminal."""
		return not self.isterminal()

	def isepsilon(self):
		"""Test whether this symbol is the empty string."""
		return self.text == self.brackets

	def word(self):
		"""Return the text of a terminal without its brackets.

		>>> Symbol('[runs]').word()
		'runs'
		>>> Symbol('VP').word()
		'VP'"""
		if self.isterminal():
			return self.text[1:-1]
		return self.text

	def __eq__(self, other):
		if isinstance(other, Symbol):
			return self.text == other.text
		elif isinstance(other, str):
			return self.text == other
		return NotImplemented

	def __ne__(self, other):
		result = self.__eq__(other)
		if result is NotImplemented:
			return result
		return not result

	def __lt__(self, other):
		if isinstance(other, Symbol):
			return self.text < other.text
		elif isinstance(other, str):
			return self.text < other
		return NotImplemented

	def __hash__(self):
		return hash(self.text)

	def __str__(self):
		return self.text

	def __repr__(self):
		if self.brackets == TERMINALBRACKETS:
			return '%s(%r)' % (self.__class__.__name__, self.text)
		return '%s(%r, brackets=%r)' % (
				self.__class__.__name__, self.text, self.brackets)

	def __reduce__(self):
		return (self.__class__, (self.text, self.brackets))


def isterminal(symbol, brackets=TERMINALBRACKETS):
	"""Test whether ``symbol`` (a str or Symbol) is a terminal.

	>>> isterminal('[the]'), isterminal('Det'), isterminal('[')
	(True, False, False)"""
	return Symbol(symbol, brackets).isterminal()


def isnonterminal(symbol, brackets=TERMINALBRACKETS):
	"""Test whether ``symbol`` (a str or Symbol) is a non-terminal."""
	return not isterminal(symbol, brackets)


def isepsilon(symbol, brackets=TERMINALBRACKETS):
	"""Test whether ``symbol`` is the empty string ``[]``.

	>>> isepsilon('[]'), isepsilon('[a]'), isepsilon('<>', brackets='<>')
	(True, False, True)"""
	return Symbol(symbol, brackets).isepsilon()


__all__ = ['Symbol', 'isterminal', 'isnonterminal', 'isepsilon',
		'TERMINALBRACKETS', 'EPSILON']
