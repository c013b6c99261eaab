"""setup.py for grammartree."""
from setuptools import setup

from grammartree import __version__

with open('README.rst') as inp:
	README = inp.read()

REQUIRES = [
		'numpy',
		]
METADATA = dict(name='grammartree',
		version=__version__,
		description='Rewrite grammars and bracketed trees',
		long_description=README,
		long_description_content_type='text/x-rst',
		classifiers=[
				'Development Status :: 4 - Beta',
				'Environment :: Console',
				'Intended Audience :: Science/Research',
				'License :: OSI Approved :: GNU General Public License (GPL)',
				'Operating System :: POSIX',
				'Programming Language :: Python :: 3',
				'Topic :: Text Processing :: Linguistic',
		],
		python_requires='>=3.6',
		install_requires=REQUIRES,
		extras_require={'test': ['pytest']},
		packages=['grammartree'],
		entry_points={
			'console_scripts': ['grammartree = grammartree.cli:main']},
	)

if __name__ == '__main__':
	setup(**METADATA)
