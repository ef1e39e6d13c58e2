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

"""This module provides the rendering of start and end tags, including the
newlines that auto-formatting puts around them.
"""

from htmlstream.core import UnknownTagError, escape_all
from htmlstream.tags import DEFAULT_TAGS, NL_BEFORE_OPEN, NL_AFTER_OPEN, \
                            NL_BEFORE_CLOSE, NL_AFTER_CLOSE

__all__ = ['TagFormatter', 'html_tag', 'CLOSE_PREFIX']

CLOSE_PREFIX = '_' # "_A" means "</A>"


def _attrs_to_items(attrs):
    """Normalize attributes given as a mapping or as a sequence of pairs to a
    list of ``(NAME, value)`` tuples in output order.

    Attributes without a value come first, in the order given; the others
    follow sorted by name.
    """
    if not attrs:
        return []
    if hasattr(attrs, 'items'):
        attrs = attrs.items()
    bare, valued = [], []
    for name, value in attrs:
        if value is None:
            bare.append((name.upper(), None))
        else:
            valued.append((name.upper(), value))
    valued.sort(key=lambda item: item[0])
    return bare + valued


def html_tag(name, attrs=None, escape=escape_all):
    """Return the markup for a start tag, or for an end tag if the name starts
    with an underscore.

    The tag name is always uppercased, and so are the attribute names:

    >>> html_tag('a', {'href': 'index.html?x=1&y=2'})
    '<A HREF="index.html?x=1&amp;y=2">'
    >>> html_tag('_a')
    '</A>'

    An attribute with the value `None` is output without a value, which is
    what boolean attributes need. An empty string still gets quotes:

    >>> html_tag('td', [('nowrap', None), ('align', 'LEFT')])
    '<TD NOWRAP ALIGN="LEFT">'
    >>> html_tag('img', [('src', 'logo.gif'), ('alt', '')])
    '<IMG ALT="" SRC="logo.gif">'

    Attribute names are taken as they are, apart from the case:

    >>> html_tag('meta', {'http-equiv': 'Refresh', 'content': 5})
    '<META CONTENT="5" HTTP-EQUIV="Refresh">'
    >>> html_tag('input', {'ng_model': 'name'})
    '<INPUT NG_MODEL="name">'

    This function does not check whether the tag is known; `TagFormatter`
    does that.
    """
    if name.startswith(CLOSE_PREFIX):
        return '</%s>' % name[len(CLOSE_PREFIX):].upper()
    buf = ['<', name.upper()]
    for attr, value in _attrs_to_items(attrs):
        if value is None:
            buf += [' ', attr]
        else:
            buf += [' ', attr, '="', escape(str(value)), '"']
    buf += ['>']
    return ''.join(buf)


class TagFormatter(object):
    """Renders start and end tags of known HTML elements, surrounded by the
    newlines their entry in the tag table asks for.

    >>> formatter = TagFormatter()
    >>> formatter.render('ul')
    '\\n<UL>'
    >>> formatter.render('_ul')
    '\\n</UL>\\n'
    >>> formatter.render('br')
    '<BR>\\n'

    Auto-formatting can be turned off, in which case no newlines are added:

    >>> formatter.auto_format = False
    >>> formatter.render('br')
    '<BR>'

    Tags that the table does not know are rejected:

    >>> formatter.render('marqueex')
    Traceback (most recent call last):
    ...
    htmlstream.core.UnknownTagError: unknown HTML tag 'MARQUEEX'
    """

    def __init__(self, tags=None, escape=escape_all, auto_format=True):
        """Initialize the formatter.

        :param tags: the `TagTable` to consult; the global `DEFAULT_TAGS`
                     table if omitted
        :param escape: function used to escape attribute values
        :param auto_format: whether newlines should be inserted at all
        """
        if tags is None:
            tags = DEFAULT_TAGS
        self.tags = tags
        self.escape = escape
        self.auto_format = auto_format

    def _newlines(self, name):
        if name not in self.tags:
            raise UnknownTagError(name)
        if not self.auto_format:
            return 0
        return self.tags.flags(name)

    def render_open(self, name, attrs=None):
        """Return the start tag for the given element."""
        flags = self._newlines(name)
        buf = [html_tag(name, attrs, self.escape)]
        if flags & NL_BEFORE_OPEN:
            buf.insert(0, '\n')
        if flags & NL_AFTER_OPEN:
            buf.append('\n')
        return ''.join(buf)

    def render_close(self, name):
        """Return the end tag for the given element."""
        flags = self._newlines(name)
        buf = ['</%s>' % name.upper()]
        if flags & NL_BEFORE_CLOSE:
            buf.insert(0, '\n')
        if flags & NL_AFTER_CLOSE:
            buf.append('\n')
        return ''.join(buf)

    def render(self, name, attrs=None):
        """Return the start tag for the given element, or its end tag if the
        name carries the `CLOSE_PREFIX`; attributes are ignored for end tags.
        """
        if name.startswith(CLOSE_PREFIX):
            return self.render_close(name[len(CLOSE_PREFIX):])
        return self.render_open(name, attrs)
