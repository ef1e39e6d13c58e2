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

"""Core error classes and the escaping functions used for text and attribute
values."""

from html import unescape as _decode_entities
from html.entities import codepoint2name
import re

__all__ = ['HTMLStreamError', 'UnknownTagError', 'ALL', 'LATIN_1', 'NON_ENT',
           'escape', 'escape_all', 'escape_latin_1', 'escape_non_ent',
           'get_escaper', 'unescape', 'unmarkup']


class HTMLStreamError(Exception):
    """Base class for the errors raised by this package."""


class UnknownTagError(HTMLStreamError, AttributeError):
    """Exception raised when a tag name is used that is not known to the
    tag table in effect.

    It derives from `AttributeError` as well, so that the dynamic tag methods
    of a stream play well with `hasattr()` and `getattr()` with a default:

    >>> err = UnknownTagError('marqueex')
    >>> err.tag
    'MARQUEEX'
    >>> isinstance(err, AttributeError)
    True
    """

    def __init__(self, tag):
        self.tag = tag.upper()
        HTMLStreamError.__init__(self, 'unknown HTML tag %r' % self.tag)


ALL = 'ALL' # escape markup characters and everything beyond ASCII
LATIN_1 = 'LATIN_1' # like ALL, but use mnemonic entities for Latin-1
NON_ENT = 'NON_ENT' # like ALL, but leave ampersands alone

_MARKUP_CHARS = {'&': '&amp;', '<': '&lt;', '>': '&gt;', '"': '&quot;'}

_LATIN_1_NAMES = dict([(cp, '&%s;' % name)
                       for cp, name in codepoint2name.items()
                       if 0xA0 <= cp <= 0xFF])

_escape_chars = re.compile('[&<>"\x80-\U0010ffff]').sub
_escape_chars_non_ent = re.compile('[<>"\x80-\U0010ffff]').sub


def _numeric(match):
    char = match.group(0)
    if char in _MARKUP_CHARS:
        return _MARKUP_CHARS[char]
    return '&#%d;' % ord(char)

def _mnemonic(match):
    char = match.group(0)
    if char in _MARKUP_CHARS:
        return _MARKUP_CHARS[char]
    codepoint = ord(char)
    return _LATIN_1_NAMES.get(codepoint, '&#%d;' % codepoint)


def escape_all(text):
    """Escape the HTML markup characters (<, >, & and \") with named entities,
    and every non-ASCII character with a numeric character reference.

    >>> escape_all('<a href="x">Fish & Chips</a>')
    '&lt;a href=&quot;x&quot;&gt;Fish &amp; Chips&lt;/a&gt;'
    >>> escape_all('Fran\\xe7ois')
    'Fran&#231;ois'
    """
    if text is None:
        return ''
    return _escape_chars(_numeric, str(text))


def escape_latin_1(text):
    """Like `escape_all`, but characters of the upper half of Latin-1 are
    replaced with their mnemonic entity names.

    >>> escape_latin_1('Fran\\xe7ois <3')
    'Fran&ccedil;ois &lt;3'

    Characters without a mnemonic still get a numeric reference:

    >>> escape_latin_1('\\x85\\u20ac')
    '&#133;&#8364;'
    """
    if text is None:
        return ''
    return _escape_chars(_mnemonic, str(text))


def escape_non_ent(text):
    """Like `escape_all`, but ampersands are left alone, so that the text may
    contain literal entities.

    >>> escape_non_ent('Fish &amp; <Chips>')
    'Fish &amp; &lt;Chips&gt;'
    """
    if text is None:
        return ''
    return _escape_chars_non_ent(_numeric, str(text))


_POLICIES = {ALL: escape_all, LATIN_1: escape_latin_1, NON_ENT: escape_non_ent}


def get_escaper(policy):
    """Return the escape function for the given policy, which is either one of
    the policy names `ALL`, `LATIN_1` and `NON_ENT`, or a callable that is
    returned unchanged.

    >>> get_escaper('latin_1') is escape_latin_1
    True
    >>> get_escaper('NONE')
    Traceback (most recent call last):
    ...
    ValueError: unknown escape policy 'NONE'
    """
    if callable(policy):
        return policy
    try:
        return _POLICIES[policy.upper()]
    except (AttributeError, KeyError):
        raise ValueError('unknown escape policy %r' % (policy,)) from None


def escape(text, policy=ALL):
    """Escape the given text according to an escape policy.

    A custom policy is simply a function that receives the raw text and
    returns the text to output; its result is used as is.

    >>> escape('1 < 2 & "3"')
    '1 &lt; 2 &amp; &quot;3&quot;'
    >>> escape('&nbsp;\\xe9', NON_ENT)
    '&nbsp;&#233;'
    >>> escape('shout', lambda text: text.upper())
    'SHOUT'
    """
    return get_escaper(policy)(text)


_strip_tags = re.compile(r'<[^>]+>').sub

def unmarkup(text):
    """Return a copy of the text with anything that looks like a tag removed.

    >>> unmarkup('<B>bold</B> &amp; <I>italic</I>')
    'bold &amp; italic'
    >>> unmarkup('1 < 2')
    '1 < 2'
    """
    if text is None:
        return ''
    return _strip_tags('', str(text))


def unescape(text):
    """Remove any markup from the text and replace character and numeric
    entities with the characters they stand for.

    >>> unescape('<P>Fish &amp; Chips &lt;&#62;</P>')
    'Fish & Chips <>'
    >>> print(unescape('Fran&ccedil;ois'))
    François

    Anything that cannot be decoded is left as it is:

    >>> unescape('AT&T &bogus; &#')
    'AT&T &bogus; &#'
    """
    return _decode_entities(unmarkup(text))
