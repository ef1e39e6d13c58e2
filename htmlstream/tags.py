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

"""The table of known HTML tags, and the newlines to insert around each of
them when output is auto-formatted.

The formatting of a tag is a bit field:

 * `NL_BEFORE_OPEN`: newline before the start tag (``\\n<TAG>``)
 * `NL_AFTER_OPEN`: newline after the start tag (``<TAG>\\n``)
 * `NL_BEFORE_CLOSE`: newline before the end tag (``\\n</TAG>``)
 * `NL_AFTER_CLOSE`: newline after the end tag (``</TAG>\\n``)

>>> DEFAULT_TAGS.flags('h1') == NL_AFTER_CLOSE
True
>>> 'MARQUEE' in DEFAULT_TAGS, 'MARQUEEX' in DEFAULT_TAGS
(True, False)
"""

import logging

from htmlstream.core import UnknownTagError

__all__ = ['TagTable', 'DEFAULT_TAGS', 'NL_BEFORE_OPEN', 'NL_AFTER_OPEN',
           'NL_BEFORE_CLOSE', 'NL_AFTER_CLOSE', 'NL_OPEN', 'NL_CLOSE', 'NL_ALL']

log = logging.getLogger(__name__)

NL_BEFORE_OPEN = 0x1
NL_AFTER_OPEN = 0x2
NL_BEFORE_CLOSE = 0x4
NL_AFTER_CLOSE = 0x8

NL_OPEN = NL_BEFORE_OPEN | NL_AFTER_OPEN
NL_CLOSE = NL_BEFORE_CLOSE | NL_AFTER_CLOSE
NL_ALL = NL_OPEN | NL_CLOSE


class TagTable(object):
    """Mapping of uppercase tag names to their newline flags.

    Being in the table is what makes a tag "known"; names are looked up
    case-insensitively.

    >>> tags = TagTable([('B', 0), ('UL', NL_ALL)])
    >>> 'b' in tags
    True
    >>> tags.flags('ul') == NL_ALL
    True
    >>> tags.flags('blink')
    Traceback (most recent call last):
    ...
    htmlstream.core.UnknownTagError: unknown HTML tag 'BLINK'

    A private table is an independent snapshot of another table. It knows
    every tag its parent knows, now or later, but only takes the formatting
    of the tags it holds itself:

    >>> mine = tags.private()
    >>> tags.set('ul', 0)
    >>> mine.flags('ul') == NL_ALL
    True
    >>> tags.set('blink', NL_ALL)
    >>> 'BLINK' in mine, mine.flags('blink')
    (True, 0)
    """
    __slots__ = ['entries', 'parent']

    def __init__(self, entries=(), parent=None):
        """Create the table.

        :param entries: a mapping or a sequence of ``(name, flags)`` tuples
        :param parent: the shared table a private table was taken from; tags
                       known to the parent are known to this table too
        """
        if hasattr(entries, 'items'):
            entries = entries.items()
        self.entries = dict([(name.upper(), flags) for name, flags in entries])
        self.parent = parent

    def __contains__(self, name):
        name = name.upper()
        if name in self.entries:
            return True
        return self.parent is not None and name in self.parent

    def __iter__(self):
        names = set(self.entries)
        if self.parent is not None:
            names.update(self.parent)
        return iter(sorted(names))

    def __len__(self):
        return len(list(iter(self)))

    def __repr__(self):
        return '<%s (%d tags)>' % (self.__class__.__name__, len(self))

    def flags(self, name):
        """Return the newline flags of the given tag.

        :raises UnknownTagError: if the tag is not known to this table
        """
        name = name.upper()
        flags = self.entries.get(name)
        if flags is not None:
            return flags
        if name not in self:
            raise UnknownTagError(name)
        return 0

    def set(self, name, flags=0):
        """Register the tag with the given newline flags, replacing any
        formatting it had before."""
        name = name.upper()
        log.debug('Setting newline flags of <%s> to %#x in %r', name, flags,
                  self)
        self.entries[name] = flags

    def accept(self, name):
        """Register the tag as known, without any newlines if it is new; the
        formatting of a tag that is already known is kept."""
        name = name.upper()
        if name not in self.entries:
            log.debug('Accepting <%s> in %r', name, self)
            self.entries[name] = 0

    def private(self):
        """Return an independent copy of the table, for use by a single
        stream."""
        log.debug('Taking a private copy of %r', self)
        return TagTable(self.entries, parent=self)


def _default_entries():
    block = ['ADDRESS', 'APPLET', 'ARTICLE', 'ASIDE', 'AUDIO', 'BLOCKQUOTE',
             'BODY', 'CANVAS', 'CENTER', 'COLGROUP', 'DATALIST', 'DETAILS',
             'DIALOG', 'DIR', 'DIV', 'DL', 'FIELDSET', 'FIGURE', 'FOOTER',
             'FORM', 'FRAMESET', 'HEAD', 'HEADER', 'HGROUP', 'HTML', 'LAYER',
             'MAIN', 'MAP', 'MENU', 'MULTICOL', 'NAV', 'NOEMBED', 'NOFRAMES',
             'NOLAYER', 'NOSCRIPT', 'OBJECT', 'OL', 'OPTGROUP', 'PICTURE',
             'SCRIPT', 'SEARCH', 'SECTION', 'SELECT', 'STYLE', 'TABLE',
             'TBODY', 'TEMPLATE', 'TFOOT', 'THEAD', 'UL', 'VIDEO']
    items = ['AREA', 'CAPTION', 'DD', 'DT', 'FIGCAPTION', 'LEGEND', 'LI',
             'OPTION', 'P', 'PRE', 'SUMMARY', 'TD', 'TEXTAREA', 'TH', 'TR']
    after_open = ['BASE', 'BASEFONT', 'BGSOUND', 'BR', 'COL', 'EMBED', 'FRAME',
                  'HR', 'IMG', 'INPUT', 'ISINDEX', 'KEYGEN', 'LINK', 'META',
                  'NEXTID', 'PARAM', 'SOURCE', 'SPACER', 'TRACK', 'WBR']
    after_close = ['H1', 'H2', 'H3', 'H4', 'H5', 'H6', 'IFRAME', 'ILAYER',
                   'LISTING', 'PLAINTEXT', 'TITLE', 'XMP']
    inline = ['A', 'ABBR', 'ACRONYM', 'B', 'BDI', 'BDO', 'BIG', 'BLINK',
              'BUTTON', 'CITE', 'CODE', 'DATA', 'DEL', 'DFN', 'EM', 'FONT',
              'I', 'INS', 'KBD', 'LABEL', 'MARK', 'MARQUEE', 'METER', 'NOBR',
              'OUTPUT', 'PROGRESS', 'Q', 'RP', 'RT', 'RUBY', 'S', 'SAMP',
              'SERVER', 'SLOT', 'SMALL', 'SPAN', 'STRIKE', 'STRONG', 'SUB',
              'SUP', 'SVG', 'TIME', 'TT', 'U', 'VAR', 'MATH', 'MENUITEM', 'RB',
              'RTC']
    for names, flags in [(block, NL_BEFORE_OPEN | NL_CLOSE),
                         (items, NL_BEFORE_OPEN),
                         (after_open, NL_AFTER_OPEN),
                         (after_close, NL_AFTER_CLOSE), (inline, 0)]:
        for name in names:
            yield name, flags

DEFAULT_TAGS = TagTable(_default_entries())
