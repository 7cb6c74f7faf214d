#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'polyform',
                                                   '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC = "A format agnostic data object library that loads and dumps" \
" native structures, Json, Yaml and Xml."

LONG_DESC = """Polyform data objects detect the format of the data they are
given and load it with the matching loader. They render themselves back to
native lists and dicts, Json, Yaml and Xml. Containers hold other data objects
and find them by identifier.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='polyform',
    packages=find_packages(exclude=['polyform.test', 'polyform.test.*']),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='data object json yaml xml serialization container',
    author='Polyform contributors',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'lxml',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest', 'pymongo'],
    },
)
