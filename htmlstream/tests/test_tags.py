# -*- coding: utf-8 -*-
#
# Copyright (C) 2006 Edgewall Software
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution. The terms
# are also available at http://genshi.edgewall.org/wiki/License.
#
# This software consists of voluntary contributions made by many
# individuals. For the exact contribution history, see the revision
# history and logs, available at http://genshi.edgewall.org/log/.

import doctest
import unittest

from htmlstream.core import UnknownTagError
from htmlstream.tags import TagTable, DEFAULT_TAGS, NL_ALL, NL_AFTER_CLOSE, \
                            NL_AFTER_OPEN, NL_BEFORE_OPEN, NL_CLOSE


class TagTableTestCase(unittest.TestCase):

    def test_membership_case_insensitive(self):
        table = TagTable({'a': 0})
        self.assertTrue('A' in table)
        self.assertTrue('a' in table)
        self.assertFalse('B' in table)

    def test_flags(self):
        table = TagTable([('ul', NL_ALL), ('b', 0)])
        self.assertEqual(NL_ALL, table.flags('UL'))
        self.assertEqual(0, table.flags('b'))

    def test_unknown_flags(self):
        table = TagTable()
        try:
            table.flags('blink')
            self.fail('Expected UnknownTagError')
        except UnknownTagError as e:
            self.assertEqual('BLINK', e.tag)

    def test_set_registers(self):
        table = TagTable()
        table.set('blink', NL_AFTER_CLOSE)
        self.assertTrue('BLINK' in table)
        self.assertEqual(NL_AFTER_CLOSE, table.flags('blink'))

    def test_set_replaces_flags(self):
        table = TagTable({'P': NL_BEFORE_OPEN})
        table.set('p', NL_ALL)
        self.assertEqual(NL_ALL, table.flags('P'))

    def test_accept_keeps_flags(self):
        table = TagTable({'P': NL_BEFORE_OPEN})
        table.accept('p')
        table.accept('blink')
        self.assertEqual(NL_BEFORE_OPEN, table.flags('P'))
        self.assertEqual(0, table.flags('BLINK'))

    def test_iter_and_len(self):
        table = TagTable({'b': 0, 'a': 0})
        self.assertEqual(['A', 'B'], list(table))
        self.assertEqual(2, len(table))


class PrivateTagTableTestCase(unittest.TestCase):

    def setUp(self):
        self.shared = TagTable({'P': NL_BEFORE_OPEN, 'B': 0})
        self.private = self.shared.private()

    def test_snapshot(self):
        self.assertEqual(NL_BEFORE_OPEN, self.private.flags('P'))
        self.assertTrue(self.private.parent is self.shared)

    def test_private_changes_stay_private(self):
        self.private.set('P', NL_ALL)
        self.assertEqual(NL_ALL, self.private.flags('P'))
        self.assertEqual(NL_BEFORE_OPEN, self.shared.flags('P'))

    def test_shared_changes_not_visible(self):
        self.shared.set('P', NL_CLOSE)
        self.assertEqual(NL_BEFORE_OPEN, self.private.flags('P'))

    def test_shared_membership_visible(self):
        self.shared.set('BLINK', NL_ALL)
        self.assertTrue('BLINK' in self.private)
        self.assertEqual(0, self.private.flags('BLINK'))
        self.assertTrue('BLINK' in list(self.private))

    def test_private_tags_not_shared(self):
        self.private.set('BLINK', NL_ALL)
        self.assertFalse('BLINK' in self.shared)


class DefaultTagsTestCase(unittest.TestCase):

    def test_standard_elements_known(self):
        for name in ['HTML', 'HEAD', 'TITLE', 'BODY', 'A', 'IMG', 'TABLE',
                     'TR', 'TD', 'TH', 'UL', 'OL', 'LI', 'FORM', 'INPUT',
                     'SELECT', 'OPTION', 'TEXTAREA', 'P', 'BR', 'HR', 'H1',
                     'H6', 'PRE', 'DIV', 'SPAN', 'SCRIPT', 'STYLE', 'META',
                     'LINK', 'FRAMESET', 'FRAME', 'ARTICLE', 'SECTION', 'NAV',
                     'VIDEO', 'MARQUEE', 'BLINK', 'NOBR']:
            self.assertTrue(name in DEFAULT_TAGS, name)

    def test_unknown(self):
        self.assertFalse('MARQUEEX' in DEFAULT_TAGS)

    def test_default_formatting(self):
        self.assertEqual(NL_AFTER_OPEN, DEFAULT_TAGS.flags('BR'))
        self.assertEqual(NL_AFTER_CLOSE, DEFAULT_TAGS.flags('H2'))
        self.assertEqual(NL_BEFORE_OPEN, DEFAULT_TAGS.flags('LI'))
        self.assertEqual(NL_BEFORE_OPEN | NL_CLOSE, DEFAULT_TAGS.flags('UL'))
        self.assertEqual(0, DEFAULT_TAGS.flags('A'))

    def test_no_parent(self):
        self.assertTrue(DEFAULT_TAGS.parent is None)


def suite():
    suite = unittest.TestSuite()
    suite.addTest(doctest.DocTestSuite(TagTable.__module__))
    loader = unittest.defaultTestLoader
    suite.addTest(loader.loadTestsFromTestCase(TagTableTestCase))
    suite.addTest(loader.loadTestsFromTestCase(PrivateTagTableTestCase))
    suite.addTest(loader.loadTestsFromTestCase(DefaultTagsTestCase))
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
