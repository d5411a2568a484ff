# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# INI-style configuration files

__all__ = (
    'Config',
    'load',
    'load_file',
    'no_validate',
)

import re

from ply import lex

from . import inilex
from .messages import *
from .set import Set, MapSet

# Accepted spellings of booleans
true_values = MapSet('1', 't', 'T', 'TRUE', 'true', 'True')
false_values = MapSet('0', 'f', 'F', 'FALSE', 'false', 'False')

_lexer = None

def get_lexer():
    global _lexer
    if _lexer is None:
        _lexer = lex.lex(module = inilex, optimize = 0)
    # Each load gets its own lexer state
    return _lexer.clone()

class Config(object):
    '''A configuration: unique sections, each holding key-value
    pairs. Values are kept as strings and converted on lookup.'''
    def __init__(self, name='<config>'):
        # where the configuration was read from
        self.name = name
        # {section: {key: value}}
        self.sections = {}

    def __repr__(self):
        return 'Config(%r)' % (self.name,)

    def _site(self):
        return SimpleSite(self.name)

    def get(self, section, key):
        '''Get the value of key in section. Raises ENOSECTION or ENOKEY
        if it is missing.'''
        opts = self.sections.get(section)
        if opts is None:
            raise ENOSECTION(self._site(), section)
        if key not in opts:
            raise ENOKEY(self._site(), key, section)
        return opts[key]

    def get_default(self, section, key, default):
        try:
            return self.get(section, key)
        except (ENOSECTION, ENOKEY):
            return default

    def int(self, section, key):
        '''Get a decimal integer, with an optional sign. Raises EVALUE
        for anything else, including forms int() would accept, such as
        "1_000".'''
        val = self.get(section, key)
        if not re.fullmatch(r'[+-]?[0-9]+', val):
            raise EVALUE(self._site(), 'integer', key, section, val)
        return int(val)

    def bool(self, section, key):
        val = self.get(section, key)
        if val in true_values:
            return True
        if val in false_values:
            return False
        raise EVALUE(self._site(), 'boolean', key, section, val)

    def array(self, section, key):
        '''Split a comma-separated value into a list of stripped
        strings'''
        return [v.strip() for v in self.get(section, key).split(',')]

    def choice(self, section, key, choices):
        '''Get a value that must be one of choices, given as a Set or
        any iterable of strings. Raises ECHOICE otherwise.'''
        if not isinstance(choices, Set):
            choices = MapSet(*choices)
        val = self.get(section, key)
        if not choices.contains(val):
            raise ECHOICE(self._site(), key, section, val,
                          ', '.join(sorted(map(str, choices))))
        return val

    def has_section(self, section):
        return section in self.sections

    def all_for(self, section):
        '''A copy of all options in section'''
        if section not in self.sections:
            raise ENOSECTION(self._site(), section)
        return dict(self.sections[section])

def no_validate(cfg):
    pass

def load(stream, validator=None, filename='<stream>'):
    '''Read a configuration from a text stream.

    Blank lines, and lines starting with '#' or ';', are skipped.
    "[name]" starts a section and "key = value" adds an option to the
    current section; whitespace around names, keys and values is
    stripped. A malformed line raises ESYNTAX and a repeated section
    raises EDUPSECTION.

    If given, validator is called with the loaded Config and may raise
    to reject it.'''
    lexer = get_lexer()
    lexer.filename = filename
    lexer.lineno = 1
    lexer.input(stream.read())

    cfg = Config(filename)
    cursection = None
    for tok in lexer:
        site = LineSite(filename, tok.lineno)
        if tok.type == 'SECTION':
            if not tok.value:
                raise ESYNTAX(site, None, "invalid, empty section name")
            if tok.value in cfg.sections:
                raise EDUPSECTION(site, tok.value)
            cursection = tok.value
            cfg.sections[cursection] = {}
        else:
            assert tok.type == 'KEYVALUE'
            if cursection is None:
                raise ESYNTAX(site, tok.value,
                              "key-value definition without section")
            (key, eq, val) = tok.value.partition('=')
            if not eq:
                raise ESYNTAX(site, tok.value,
                              "key-value definition misses assignment")
            cfg.sections[cursection][key.strip()] = val.strip()

    if validator is not None:
        validator(cfg)
    return cfg

def load_file(filename, validator=None):
    '''Read a configuration file. Raises OSError if it cannot be
    opened.'''
    with open(filename) as f:
        return load(f, validator, str(filename))
