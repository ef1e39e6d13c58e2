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

"""Various utility classes and functions."""

from functools import partial, update_wrapper

__all__ = ['hybridmethod']


class hybridmethod(object):
    """Decorator for methods that can be called on the class as well as on an
    instance.

    The first argument of the decorated function is the instance when called
    through an instance, and the class otherwise:

    >>> class Thing(object):
    ...     @hybridmethod
    ...     def who(self_or_cls):
    ...         return self_or_cls
    >>> Thing.who() is Thing
    True
    >>> thing = Thing()
    >>> thing.who() is thing
    True
    """

    def __init__(self, func):
        self.func = func
        update_wrapper(self, func)

    def __get__(self, instance, owner):
        if instance is None:
            return partial(self.func, owner)
        return partial(self.func, instance)
