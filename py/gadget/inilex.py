# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Lexer for INI-style configuration files. Every non-blank line
# becomes exactly one token; comments and blank lines produce none.

from .messages import ESYNTAX, LineSite

tokens = ('SECTION', 'KEYVALUE')

# Leading and trailing whitespace of a line
t_ignore = ' \t\r\x0b\x0c'

def t_NEWLINE(t):
    r'\n+'
    t.lexer.lineno += len(t.value)

# Any other whitespace before a token, such as U+00A0
def t_ignore_ws(t):
    r'[^\S\n]+'

# Comments must begin the line; a ';' or '#' later in a line belongs
# to the value
def t_comment(t):
    r'[#;][^\n]*'

def t_SECTION(t):
    r'\[[^\n]*'
    line = t.value.rstrip()
    if line.endswith(']'):
        t.value = line[1:-1].strip()
    else:
        # Not a section header after all; let the key-value rules
        # judge it
        t.type = 'KEYVALUE'
        t.value = line
    return t

def t_KEYVALUE(t):
    r'[^\s\[#;][^\n]*'
    t.value = t.value.rstrip()
    return t

def t_error(t):
    raise ESYNTAX(LineSite(t.lexer.filename, t.lexer.lineno),
                  t.value.split('\n', 1)[0], "illegal character")
