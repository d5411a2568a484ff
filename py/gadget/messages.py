# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Errors reported by gadget, and the sites they refer to

import abc

__all__ = (
    'Site',
    'SimpleSite',
    'LineSite',
    'GadgetError',
    'ESYNTAX',
    'EDUPSECTION',
    'ENOSECTION',
    'ENOKEY',
    'EVALUE',
    'ECHOICE',
    'ELOGLEVEL',
    'report',
)

def truncate(s, maxlen):
    "Make sure that s is not longer than maxlen"
    if len(s) > maxlen:
        return s[:maxlen-3] + '...'
    return s

class Site(metaclass=abc.ABCMeta):
    __slots__ = ()
    @abc.abstractmethod
    def loc(self): pass

class SimpleSite(Site):
    '''A site without line information, e.g. a whole stream or an
    option that was looked up programmatically'''
    __slots__ = ('_name',)
    def __init__(self, name):
        self._name = name
    def __repr__(self):
        return '<site %s>' % (self._name,)
    def loc(self):
        return self._name

class LineSite(Site):
    '''A line in a named file'''
    __slots__ = ('filename', 'lineno')
    def __init__(self, filename, lineno):
        self.filename = filename
        self.lineno = lineno
    def __repr__(self):
        return '<site %s>' % self.loc()
    def loc(self):
        return "%s:%d" % (self.filename, self.lineno)

class GadgetError(Exception):
    '''Base class for errors. Subclasses set fmt, which is expanded
    with the arguments following the site.'''
    kind = "error"
    fmt = "%s"

    def __init__(self, site, *msgargs):
        self.site = site
        self.msg = self.fmt % msgargs
        Exception.__init__(self, "%s: %s" % (self.loc(), self.msg))

    def loc(self):
        return self.site.loc() if self.site else "<unknown>"

    def tag(self):
        return self.__class__.__name__

# Configuration files

class ESYNTAX(GadgetError):
    """
    A line of a configuration file is malformed.
    """
    fmt = "syntax error%s: %s"
    def __init__(self, site, line, reason):
        where = " at '%s'" % truncate(line, 20) if line else ""
        GadgetError.__init__(self, site, where, reason)

class EDUPSECTION(GadgetError):
    """
    A section name may only be declared once in a configuration file.
    """
    fmt = "section '%s' was defined before"

class ENOSECTION(GadgetError):
    """
    The requested section does not exist.
    """
    fmt = "section '%s' does not exist"

class ENOKEY(GadgetError):
    """
    The requested key does not exist in the section.
    """
    fmt = "key '%s' not found in section '%s'"

class EVALUE(GadgetError):
    """
    An option value could not be converted to the requested type.
    """
    fmt = "invalid %s value for '%s' in section '%s': '%s'"

class ECHOICE(GadgetError):
    """
    An option value is not one of the allowed choices.
    """
    fmt = "invalid value for '%s' in section '%s': '%s' (allowed: %s)"

# Logging

class ELOGLEVEL(GadgetError):
    """
    A log level is given neither as a number 0 to 7, nor as a
    severity name.
    """
    fmt = "unknown log level '%s'"

def report(e):
    '''Log a GadgetError through the default logger'''
    from . import logging
    logging.error('%s %s: %s' % (e.loc(), e.tag(), e.msg))
