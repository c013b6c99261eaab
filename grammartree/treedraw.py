"""Render trees for LaTeX documents with the qtree or tikz-qtree package."""
import re
from .tree import Tree

LATEXRESERVED = re.compile(r'([#$%&~_{}])')


def latexlabel(label):
	"""Quote a label or leaf for latex.

	>>> print(latexlabel('NP_1'))
	NP\\_1
	>>> print(latexlabel('$'))
	\\$"""
	return LATEXRESERVED.sub(r'\\\1', '%s' % label)


def _qtree(node, indent=None, depth=0):
	"""Produce the bracketing ``[.label child ... ]`` of a node."""
	if not isinstance(node, Tree):
		return latexlabel(node)
	children = [_qtree(child, indent, depth + 1) for child in node]
	if indent is None or not any(isinstance(a, Tree) for a in node):
		return '[.%s %s]' % (latexlabel(node.label),
				''.join(a + ' ' for a in children))
	sep = '\n' + ' ' * (indent + 2 * (depth + 1))
	return '[.%s%s\n%s]' % (latexlabel(node.label),
			''.join(sep + a for a in children),
			' ' * (indent + 2 * depth))


def latexqtree(tree):
	r"""Produce code for the qtree package on a single line.

	>>> print(latexqtree(Tree('(S (NP (NNP John)) (VP (V runs)))')))
	\Tree [.S [.NP [.NNP John ] ] [.VP [.V runs ] ] ]"""
	return '\\Tree %s' % _qtree(tree)


def tikzqtree(tree, nodecolor='blue', leafcolor='red'):
	r"""Produce TiKZ-qtree code to draw a tree.

	To get trees with straight edges, add this in the preamble::

		\tikzset{edge from parent/.style={draw, edge from parent path={
			(\tikzparentnode.south) -- +(0,-3pt) -| (\tikzchildnode)}}}

	>>> print(tikzqtree(Tree('(S (NP John) (VP runs))')))
	% (S (NP John) (VP runs))
	\begin{tikzpicture}
	  \tikzset{every node/.style={color=blue}, font=\sf}
	  \tikzset{every leaf node/.style={color=red}}
	  \Tree [.S
	          [.NP John ]
	          [.VP runs ]
	        ]
	\end{tikzpicture}"""
	return '\n'.join([
		'%% %s' % tree,
		'\\begin{tikzpicture}',
		'  \\tikzset{every node/.style={color=%s}, font=\\sf}' % nodecolor,
		'  \\tikzset{every leaf node/.style={color=%s}}' % leafcolor,
		'  \\Tree %s' % _qtree(tree, indent=8),
		'\\end{tikzpicture}'])


__all__ = ['latexlabel', 'latexqtree', 'tikzqtree']
