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

"""This package provides a simple way of writing HTML to a file or any other
object with a ``write`` method, one tag or piece of text at a time.

The design is centered around the `HTMLStream` class, which escapes text,
renders tags with their attributes, and inserts newlines around tags as
configured in a table of known tags.


Generating content
------------------

>>> from io import StringIO
>>> from htmlstream import HTMLStream
>>> out = StringIO()
>>> html = HTMLStream(out)
>>> _ = html.tag('P').text('Hello, ').tag('B').text('<world>').tag('_B')

Text and attribute values are escaped automatically:

>>> out.getvalue()
'\\n<P>Hello, <B>&lt;world&gt;</B>'

Tags can also be written as method calls, with a leading underscore for the
end tag, and can be mixed with text in a single `output()` call:

>>> _ = html.auto_format(False).A(HREF='#top').t('Top')._A()
>>> _ = html.output(['IMG', 'SRC', 'logo.gif', 'ALT', ''], ' (c)')
>>> print(out.getvalue())
<BLANKLINE>
<P>Hello, <B>&lt;world&gt;</B><A HREF="#top">Top</A><IMG ALT="" SRC="logo.gif"> (c)


Formatting
----------

Which tags are known, and what newlines go around them, is stored in a
`TagTable`. All streams share the global `DEFAULT_TAGS` table unless they
ask for a private copy with `HTMLStream.private_tags()`.
"""

from htmlstream.core import *
from htmlstream.tags import *
from htmlstream.output import html_tag, TagFormatter
from htmlstream.stream import HTMLStream, Latin1Stream

__version__ = '1.60'
