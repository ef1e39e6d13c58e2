#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2006-2010 Edgewall Software
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution. The terms
# are also available at http://genshi.edgewall.org/wiki/License.
#
# This software consists of voluntary contributions made by many
# individuals. For the exact contribution history, see the revision
# history and logs, available at http://genshi.edgewall.org/log/.

from setuptools import setup


setup(
    name = 'htmlstream',
    version = '1.60',
    description = 'Chainable writer for uppercase, auto-formatted HTML',
    long_description = """\
HTMLStream writes HTML to any file-like object or callable through a
chainable interface. Tags are checked against a table of known elements
that also decides where newlines go, text is escaped according to a
selectable policy, and unknown tag names can be called as methods.""",
    license = 'BSD',
    classifiers = [
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
    packages = ['htmlstream', 'htmlstream.tests'],
    python_requires = '>=3.6',
    test_suite = 'htmlstream.tests.suite',
)
