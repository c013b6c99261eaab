"""Rewrite grammars and bracketed trees (grammartree).

Main components:

- Grammars of head --> daughters productions over terminal and non-terminal
  symbols, with membership queries, set-like combination and classification
  against the usual grammar classes (context-free, left/right-regular,
  Chomsky and Greibach normal form, left-recursive).
- Labeled trees read from Penn-treebank style bracketed notation, with
  traversal and shape queries.
"""
__version__ = '0.1.0'
