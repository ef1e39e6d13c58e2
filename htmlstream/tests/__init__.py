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

def suite():
    import htmlstream
    from htmlstream.tests import test_core, test_input, test_output, \
                                 test_stream, test_tags
    suite = unittest.TestSuite()
    suite.addTest(doctest.DocTestSuite(htmlstream))
    suite.addTest(test_core.suite())
    suite.addTest(test_input.suite())
    suite.addTest(test_output.suite())
    suite.addTest(test_stream.suite())
    suite.addTest(test_tags.suite())
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
