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

"""Streaming HTML output.

An `HTMLStream` wraps anything that has a ``write`` method, and writes HTML
to it as soon as it is asked to:

>>> from io import StringIO
>>> out = StringIO()
>>> html = HTMLStream(out, auto_format=False)
>>> html.tag('A', HREF='/search?q=fish&chips').text('Fish & Chips').tag('_A')
<HTMLStream>
>>> print(out.getvalue())
<A HREF="/search?q=fish&amp;chips">Fish &amp; Chips</A>

Every method that outputs something returns the stream, so calls can be
chained. Tags can also be output by calling them as methods, with a leading
underscore for the end tag:

>>> out = StringIO()
>>> html = HTMLStream(out, auto_format=False)
>>> html.B.__name__
'B'
>>> _ = html.B().text('bold').t(' & ').I().text('italic')._I()._B()
>>> print(out.getvalue())
<B>bold &amp; <I>italic</I></B>

Or all at once, with descriptors for tags and strings for text:

>>> out = StringIO()
>>> _ = HTMLStream(out, auto_format=False).output(['A', 'HREF', 'x.html'],
...                                               'caption', ['_A'])
>>> print(out.getvalue())
<A HREF="x.html">caption</A>
"""

import logging

from htmlstream.core import ALL, LATIN_1, UnknownTagError, get_escaper
from htmlstream.output import CLOSE_PREFIX, TagFormatter
from htmlstream.tags import DEFAULT_TAGS
from htmlstream.util import hybridmethod

__all__ = ['HTMLStream', 'Latin1Stream']

log = logging.getLogger(__name__)


def _tag_method(name):
    def tag_method(self, attrs=None, **kwattrs):
        return self.tag(name, attrs, **kwattrs)
    tag_method.__name__ = name
    if name.startswith(CLOSE_PREFIX):
        tag_method.__doc__ = 'Output the </%s> end tag.' % \
                             name[len(CLOSE_PREFIX):].upper()
    else:
        tag_method.__doc__ = 'Output the <%s> start tag.' % name.upper()
    return tag_method


def _kwargs_to_attrs(kwargs):
    return [(k.rstrip('_').replace('_', '-'), v)
            for k, v in kwargs.items()]


def _descriptor_to_tag(item):
    """Split an `output()` tag descriptor into the tag name and attributes.

    >>> _descriptor_to_tag(['A', 'HREF', 'x.html', 'TARGET', '_top'])
    ('A', [('HREF', 'x.html'), ('TARGET', '_top')])
    >>> _descriptor_to_tag(('IMG', {'SRC': 'logo.gif'}))
    ('IMG', {'SRC': 'logo.gif'})
    >>> _descriptor_to_tag(['_A'])
    ('_A', None)
    """
    if not item:
        raise ValueError('empty tag descriptor')
    name, rest = item[0], item[1:]
    if not rest:
        return name, None
    if len(rest) == 1 and hasattr(rest[0], 'items'):
        return name, rest[0]
    if len(rest) % 2:
        raise ValueError('odd number of attribute names and values for %s' %
                         name)
    return name, list(zip(rest[::2], rest[1::2]))


class HTMLStream(object):
    """Writes HTML to a sink, escaping text and formatting tags as it goes.

    The sink is any object with a ``write`` method that takes a string, or a
    plain function taking a string. It is only borrowed: the stream never
    flushes or closes it.

    Tags are checked against a `TagTable`. By default a stream uses the
    table shared by all streams, so a change of formatting made through one
    stream shows in all the others:

    >>> from io import StringIO
    >>> out = StringIO()
    >>> html = HTMLStream(out)
    >>> html.tag('TITLE').text('Hello').tag('_TITLE')
    <HTMLStream>
    >>> out.getvalue()
    '<TITLE>Hello</TITLE>\\n'

    Unknown tags are rejected before anything is written:

    >>> html.tag('MARQUEEX')
    Traceback (most recent call last):
    ...
    htmlstream.core.UnknownTagError: unknown HTML tag 'MARQUEEX'
    """

    default_escape = ALL
    default_tags = DEFAULT_TAGS

    def __init__(self, sink, auto_escape=None, auto_format=True, tags=None):
        """Initialize the stream.

        :param sink: the object to write to
        :param auto_escape: the escape policy for text and attribute values:
                            ``'ALL'``, ``'LATIN_1'``, ``'NON_ENT'`` or a
                            function; defaults to `default_escape`
        :param auto_format: whether newlines are inserted around tags
        :param tags: the shared `TagTable` to use; defaults to `default_tags`
        """
        if hasattr(sink, 'write'):
            self._write = sink.write
        elif callable(sink):
            self._write = sink
        else:
            raise TypeError('%r has no write method' % (sink,))
        self._sink = sink
        if auto_escape is None:
            auto_escape = self.default_escape
        escape = get_escaper(auto_escape)
        self._escape_policy = self._policy_name(auto_escape)
        self._escape = escape
        if tags is None:
            tags = self.default_tags
        self._shared_tags = tags
        self._formatter = TagFormatter(tags, escape, bool(auto_format))

    def __getattr__(self, name):
        """Resolve an unknown attribute as a tag method: ``html.A(HREF=url)``
        outputs ``<A HREF="...">`` and ``html._A()`` outputs ``</A>``.

        For tags in the class's `default_tags` table the generated method is
        added to the class, so it is only generated once. Tags that only a
        custom table knows get a method bound to this stream alone.

        Names of regular stream methods win over tag names: ``html.output``
        is the `output()` method, ``html.OUTPUT`` the ``<OUTPUT>`` tag.
        """
        formatter = self.__dict__.get('_formatter')
        if formatter is None or name.startswith('__'):
            raise AttributeError(name)
        tagname = name
        if name.startswith(CLOSE_PREFIX):
            tagname = name[len(CLOSE_PREFIX):]
        if not tagname or tagname not in formatter.tags:
            raise UnknownTagError(tagname)
        method = _tag_method(name)
        cls = type(self)
        if tagname not in cls.default_tags:
            return method.__get__(self, cls)
        log.debug('Generating tag method %s.%s', cls.__name__, name)
        setattr(cls, name, method)
        return getattr(self, name)

    def __repr__(self):
        return '<%s>' % self.__class__.__name__

    def _policy_name(self, policy):
        if isinstance(policy, str):
            return policy.upper()
        return policy

    @property
    def escape_policy(self):
        """The current escape policy: a policy name or a function."""
        return self._escape_policy

    def sink(self):
        """Return the sink the stream writes to.

        Anything written to it directly is not escaped.
        """
        return self._sink

    def auto_escape(self, policy=None):
        """Set the escape policy used for text and attribute values, and
        return the previous one.

        Called without an argument, only returns the current policy.

        >>> from io import StringIO
        >>> out = StringIO()
        >>> html = HTMLStream(out)
        >>> html.auto_escape('LATIN_1')
        'ALL'
        >>> html.auto_escape()
        'LATIN_1'
        >>> print(html.text('Fran\\xe7ois').sink().getvalue())
        Fran&ccedil;ois

        :raises ValueError: for an unknown policy name
        """
        previous = self._escape_policy
        if policy is not None:
            escape = get_escaper(policy)
            self._escape_policy = self._policy_name(policy)
            self._escape = self._formatter.escape = escape
        return previous

    def auto_format(self, enabled):
        """Turn the insertion of newlines around tags on or off.

        Explicit `newline()` calls are not affected.
        """
        self._formatter.auto_format = bool(enabled)
        return self

    def private_tags(self):
        """Switch the stream to a private copy of its tag table.

        From now on, changing the formatting of a tag through this stream
        does not affect other streams, and changes made through the class or
        other streams do not affect this one. Tags registered elsewhere still
        become known to this stream.
        """
        if self._formatter.tags is self._shared_tags:
            self._formatter.tags = self._shared_tags.private()
        return self

    @hybridmethod
    def set_tag(self, name, newlines=0):
        """Register a tag and set its newline flags.

        Called on the class, this changes the table shared by all streams.
        Called on a stream that has a private table, only the formatting of
        that stream changes, but the tag becomes known to all streams.

        :param name: the tag name
        :param newlines: a combination of the ``NL_*`` flags in
                         `htmlstream.tags`
        """
        if isinstance(self, type):
            self.default_tags.set(name, newlines)
            return self
        tags = self._formatter.tags
        if tags is not self._shared_tags:
            self._shared_tags.accept(name)
        tags.set(name, newlines)
        return self

    @hybridmethod
    def accept_tag(self, name):
        """Register a tag as known, without changing its formatting if it
        already has some. Tags are always registered in the shared table."""
        if isinstance(self, type):
            self.default_tags.accept(name)
        else:
            self._shared_tags.accept(name)
        return self

    def tag(self, name, attrs=None, **kwattrs):
        """Output a start tag, or an end tag if the name starts with an
        underscore.

        Attributes can be given as a mapping, a sequence of ``(name, value)``
        pairs, keyword arguments, or a combination of them. `None` means an
        attribute without a value:

        >>> from io import StringIO
        >>> html = HTMLStream(StringIO(), auto_format=False)
        >>> print(html.tag('TD', {'NOWRAP': None}, ALIGN='LEFT').sink().getvalue())
        <TD NOWRAP ALIGN="LEFT">

        Keyword names lose a trailing underscore, and other underscores turn
        into hyphens, so that names like ``class`` and ``http-equiv`` can be
        given too:

        >>> html = HTMLStream(StringIO(), auto_format=False)
        >>> print(html.tag('META', http_equiv='Refresh', class_='x').sink().getvalue())
        <META CLASS="x" HTTP-EQUIV="Refresh">

        :raises UnknownTagError: if the tag is not known; nothing is written
        """
        if kwattrs:
            items = []
            if attrs:
                if hasattr(attrs, 'items'):
                    attrs = attrs.items()
                items.extend(attrs)
            items.extend(_kwargs_to_attrs(kwattrs))
            attrs = items
        self._write(self._formatter.render(name, attrs))
        return self

    def text(self, *fragments):
        """Output the given text fragments, escaped with the current policy.
        Fragments that are not strings are converted with `str()`."""
        text = self._escape(''.join([str(f) for f in fragments
                                     if f is not None]))
        if text:
            self._write(text)
        return self
    t = text

    def text_nbsp(self, *fragments):
        """Like `text()`, but spaces are output as non-breaking spaces.

        >>> from io import StringIO
        >>> html = HTMLStream(StringIO())
        >>> print(html.text_nbsp('Fish & Chips').sink().getvalue())
        Fish&nbsp;&amp;&nbsp;Chips
        """
        text = self._escape(''.join([str(f) for f in fragments
                                     if f is not None]))
        if text:
            self._write(text.replace(' ', '&nbsp;'))
        return self

    def entity(self, name):
        """Output the entity with the given name, such as ``nbsp``. The name
        is not checked."""
        self._write('&%s;' % name)
        return self
    ent = entity

    def raw(self, text):
        """Output the text as it is, without escaping or formatting.

        Unlike writing to `sink()` directly, this works for callable sinks
        too:

        >>> chunks = []
        >>> _ = HTMLStream(chunks.append).raw('<!DOCTYPE html>').text('&')
        >>> chunks
        ['<!DOCTYPE html>', '&amp;']
        """
        if text:
            self._write(text)
        return self

    def comment(self, text):
        """Output an HTML comment followed by a newline.

        One leading and one trailing space of the text are dropped, and the
        text is then separated from the delimiters by exactly one space:

        >>> from io import StringIO
        >>> html = HTMLStream(StringIO())
        >>> html.comment(' generated ').comment('by hand  ').sink().getvalue()
        '<!-- generated -->\\n<!-- by hand  -->\\n'
        """
        if text.startswith(' '):
            text = text[1:]
        if text.endswith(' '):
            text = text[:-1]
        self._write('<!-- %s -->\n' % text)
        return self

    def newline(self, count=1):
        """Output the given number of newlines, whether auto-formatting is
        enabled or not."""
        if count > 0:
            self._write('\n' * count)
        return self
    nl = newline

    def output(self, *items):
        """Output a mix of tags and text.

        Lists and tuples describe tags: the tag name, followed either by
        attribute names and values, or by a single mapping of attributes.
        Anything else is output as text.

        :raises ValueError: for a malformed tag descriptor
        """
        for item in items:
            if isinstance(item, (list, tuple)):
                self.tag(*_descriptor_to_tag(item))
            else:
                self.text(item)
        return self


class Latin1Stream(HTMLStream):
    """An `HTMLStream` that escapes the upper half of Latin-1 with mnemonic
    entities by default.

    >>> from io import StringIO
    >>> print(Latin1Stream(StringIO()).text('caf\\xe9').sink().getvalue())
    caf&eacute;
    """

    default_escape = LATIN_1
