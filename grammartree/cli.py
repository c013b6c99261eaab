"""Command-line interfaces to modules."""
import sys
from sys import argv as sysargv
from sys import exit as sysexit

COMMANDS = {
		'grammar': 'Read rules and classify the grammar they form.',
		'tree': 'Read bracketed trees; report their shape or convert them.',
	}


def main(argv=None):
	"""Expose command-line interfaces."""
	from os.path import basename
	if argv is None:
		argv = sysargv
	thiscmd = basename(argv[0])
	if len(argv) == 2 and argv[1] in ('-v', '--version'):
		from grammartree import __version__
		print(__version__)
	elif len(argv) <= 1 or argv[1] not in COMMANDS:
		print('Usage: %s <command> [arguments]\n' % thiscmd, file=sys.stderr)
		print('Command is one of:', file=sys.stderr)
		for a, b in COMMANDS.items():
			print('   %s  %s' % (a.ljust(15), b), file=sys.stderr)
		print('for additional instructions issue: %s <command> --help'
			% thiscmd, file=sys.stderr)
	elif len(argv) == 3 and argv[2] in ('-h', '--help'):
		print(CLI[argv[1]].__doc__)
	else:
		CLI[argv[1]](argv[2:])


def setuplogging(opts):
	"""Log messages to stderr; only warnings if ``--quiet`` was given."""
	import logging
	quiet = '--quiet' in opts or '-q' in opts
	logging.basicConfig(level=logging.WARNING if quiet else logging.INFO,
			format='%(message)s')


def grammar(args):
	"""Usage: grammartree grammar [<rules>...] [options]

Read rules, one per line, and report the grammar classes they belong to.
If no file is given, rules are read from standard input.

Options:
  --delimiter=x  the separator of head and daughters [default: -->]
  --brackets=xy  the characters enclosing terminal symbols [default: []]
  --start=x      the start symbol; must be a non-terminal of the grammar.
  --info         print statistics on the rules as well.
  -q, --quiet    only report warnings and errors."""
	import logging
	from getopt import gnu_getopt, GetoptError
	from .grammar import Grammar, grammarinfo
	from .util import openread
	flags = ('help', 'info', 'quiet')
	options = ('delimiter=', 'brackets=', 'start=')
	try:
		opts, args = gnu_getopt(args, 'hq', flags + options)
	except GetoptError as err:
		print('error:', err, file=sys.stderr)
		print(grammar.__doc__)
		sysexit(2)
	opts = dict(opts)
	if '--help' in opts or '-h' in opts:
		print(grammar.__doc__)
		return
	setuplogging(opts)
	lines = []
	try:
		for filename in args or ['-']:
			with openread(filename) as inp:
				lines.extend(inp.read().splitlines())
			logging.info('read %s', filename)
		result = Grammar(
				'\n'.join(lines),
				start=opts.get('--start'),
				delimiter=opts.get('--delimiter', '-->'),
				brackets=opts.get('--brackets', '[]'))
	except (OSError, ValueError) as err:
		print('error: %s' % err, file=sys.stderr)
		sysexit(1)
	logging.info('%d rules, %d heads', len(result), len(result.rules))
	if '--info' in opts:
		print(grammarinfo(result))
	else:
		for desc, value in result.classify().items():
			print('%s: %s' % (desc, 'yes' if value else 'no'))


def tree(args):
	"""Usage: grammartree tree [<treebank>...] [options]

Read trees in bracketed notation and report their height and leaves, or
convert them to another format. Trees may span several lines. If no file
is given, trees are read from standard input.

Options:
  --brackets=xy  the brackets delimiting constituents [default: ()]
  --output=x     one of:
      summary    tree, height and leaves [default]
      bracket    the tree in bracketed notation on a single line
      pprint     the tree indented over multiple lines
      flat       the tree with its leaves as children of the root
      qtree      LaTeX code for the qtree package
      tikz       LaTeX code for tikz-qtree
      grammar    the productions licensing the tree
  -q, --quiet    only report warnings and errors."""
	import logging
	from getopt import gnu_getopt, GetoptError
	from .tree import readtrees
	from .treedraw import latexqtree, tikzqtree
	from .util import openread

	def processtree(n, tree):
		"""Produce output for a single tree."""
		if output == 'summary':
			return '%d. %s\nheight: %d\nleaves: %s' % (
					n, tree, tree.height(), ' '.join(tree.leaves()))
		elif output == 'bracket':
			return tree.tostring(brackets)
		elif output == 'pprint':
			return tree.pprint(brackets=brackets)
		elif output == 'flat':
			return tree.flatten().tostring(brackets)
		elif output == 'qtree':
			return latexqtree(tree)
		elif output == 'tikz':
			return tikzqtree(tree)
		elif output == 'grammar':
			return '\n'.join(str(a) for a in tree.productions())
		raise ValueError('unrecognized --output format: %r' % output)

	flags = ('help', 'quiet')
	options = ('brackets=', 'output=')
	try:
		opts, args = gnu_getopt(args, 'hq', flags + options)
	except GetoptError as err:
		print('error:', err, file=sys.stderr)
		print(tree.__doc__)
		sysexit(2)
	opts = dict(opts)
	if '--help' in opts or '-h' in opts:
		print(tree.__doc__)
		return
	setuplogging(opts)

	def readlines():
		"""Yield lines from all files in turn."""
		for filename in args or ['-']:
			with openread(filename) as inp:
				yield from inp
			logging.info('read %s', filename)

	brackets = opts.get('--brackets', '()')
	output = opts.get('--output', 'summary')
	n = 0
	try:
		for n, result in enumerate(readtrees(readlines(), brackets), 1):
			print(processtree(n, result))
	except (OSError, TypeError, ValueError) as err:
		print('error: %s' % err, file=sys.stderr)
		sysexit(1)
	logging.info('%d trees', n)


CLI = {'grammar': grammar, 'tree': tree}

__all__ = ['main', 'grammar', 'tree']
