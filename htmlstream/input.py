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

"""Support for replaying existing HTML documents through an `HTMLStream`.

>>> print(HTML('<p class=note>Fish &amp; Chips<br>'), end='')
<BLANKLINE>
<P CLASS="note">Fish &amp; Chips<BR>
"""

from html import unescape as decode_entities
import html.parser
from io import StringIO
import logging

from htmlstream.core import UnknownTagError
from htmlstream.stream import HTMLStream

__all__ = ['HTMLReader', 'StreamWriter', 'rewrite', 'HTML']

log = logging.getLogger(__name__)


class StreamWriter(object):
    """Consumer of parse events that writes them to an `HTMLStream`.

    The events are the ones delivered by `HTMLReader`: tag and attribute
    names are lowercase, attribute values are already decoded, text still
    contains its entities.

    >>> out = StringIO()
    >>> writer = StreamWriter(HTMLStream(out, auto_format=False))
    >>> writer.start('a', [('href', 'x.html?a=1&b=2'), ('title', None)])
    >>> writer.text('R&amp;D')
    >>> writer.end('a')
    >>> out.getvalue()
    '<A TITLE HREF="x.html?a=1&amp;b=2">R&amp;D</A>'
    """

    def __init__(self, stream, accept_unknown=False):
        """Initialize the writer.

        :param stream: the `HTMLStream` to write to
        :param accept_unknown: whether tags unknown to the stream should be
                               registered instead of raising an error
        """
        self.stream = stream
        self.accept_unknown = accept_unknown

    def _tag(self, name, attrs=None):
        try:
            self.stream.tag(name, attrs)
        except UnknownTagError as e:
            if not self.accept_unknown:
                raise
            log.warning('Accepting unknown tag <%s>', e.tag)
            self.stream.accept_tag(e.tag)
            self.stream.tag(name, attrs)

    def declaration(self, raw):
        self.stream.raw('<!%s>\n' % raw)

    def pi(self, raw):
        self.stream.raw('<?%s>' % raw)

    def start(self, name, attrs):
        self._tag(name, [(attr.upper(), value) for attr, value in attrs])

    def end(self, name):
        self._tag('_' + name)

    def text(self, raw):
        self.stream.text(decode_entities(raw))

    def comment(self, raw):
        self.stream.comment(raw)


class HTMLReader(html.parser.HTMLParser):
    """Parser for HTML input based on the Python `HTMLParser` module, passing
    what it finds on to a consumer such as `StreamWriter`.

    Entity and character references are handed to the consumer as part of the
    raw text they appear in.
    """

    def __init__(self, consumer):
        html.parser.HTMLParser.__init__(self, convert_charrefs=False)
        self.consumer = consumer
        self._text = []

    def _flush(self):
        if self._text:
            text = ''.join(self._text)
            del self._text[:]
            self.consumer.text(text)

    def close(self):
        html.parser.HTMLParser.close(self)
        self._flush()

    def handle_decl(self, decl):
        self._flush()
        self.consumer.declaration(decl)

    def handle_starttag(self, tag, attrib):
        self._flush()
        self.consumer.start(tag, attrib)

    def handle_startendtag(self, tag, attrib):
        self.handle_starttag(tag, attrib)

    def handle_endtag(self, tag):
        self._flush()
        self.consumer.end(tag)

    def handle_data(self, text):
        self._text.append(text)

    def handle_entityref(self, name):
        self._text.append('&%s;' % name)

    def handle_charref(self, name):
        self._text.append('&#%s;' % name)

    def handle_comment(self, text):
        self._flush()
        self.consumer.comment(text)

    def handle_pi(self, data):
        self._flush()
        self.consumer.pi(data)


def rewrite(source, stream, accept_unknown=False):
    """Parse an HTML document and write it to the given stream.

    :param source: the HTML text, or a file-like object to read it from
    :param stream: the `HTMLStream` to write to
    :param accept_unknown: whether unknown tags are registered instead of
                           raising an `UnknownTagError`
    :return: the stream
    """
    if isinstance(source, str):
        source = StringIO(source)
    reader = HTMLReader(StreamWriter(stream, accept_unknown))
    bufsize = 4 * 1024 # 4K
    while True:
        data = source.read(bufsize)
        if not data:
            break
        reader.feed(data)
    reader.close()
    return stream


def HTML(text, accept_unknown=False, **kwargs):
    """Return the given HTML text as it comes out of an `HTMLStream`.

    Keyword arguments are passed on to the `HTMLStream` constructor.

    >>> HTML('<b>caf&eacute;</b> <!--note-->', auto_escape='LATIN_1')
    '<B>caf&eacute;</B> <!-- note -->\\n'
    """
    out = StringIO()
    rewrite(text, HTMLStream(out, **kwargs), accept_unknown)
    return out.getvalue()
