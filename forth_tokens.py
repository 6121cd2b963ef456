#!/usr/bin/env python3
"""
forth_tokens.py — Tokenizer for the line interpreter.

A line is split on whitespace and every word is classified into exactly one
Token by walking an ordered classifier table. First match wins:

  priority  kind       matches
  10        NUMBER     optional sign + digits          '42' '-7' '+3'
  20        OPERATOR   arithmetic / print symbols      '+' '-' '*' '/' '.'
  30        WORD       named words, case-insensitive   '.s' 'dup' 'swap'
  99        UNKNOWN    anything else

NUMBER comes before OPERATOR so that '-5' is a literal while '-' alone is
subtraction. Adding a token kind means adding a matcher and a table row.
"""

import re
from collections import namedtuple


NUMBER   = 'NUMBER'
OPERATOR = 'OPERATOR'
WORD     = 'WORD'
UNKNOWN  = 'UNKNOWN'


class Token(namedtuple('Token', 'kind value')):
    """kind is one of NUMBER/OPERATOR/WORD/UNKNOWN; value is an int, an
    opcode, or the raw text for UNKNOWN."""
    __slots__ = ()

    def __repr__(self):
        return f'{self.kind}({self.value!r})'


# ── Spellings ─────────────────────────────────────────────────────────────────

OPERATORS = {
    '+': 'plus',
    '-': 'minus',
    '*': 'star',
    '/': 'slash',
    '.': 'dot',
}

WORDS = {
    '.S':     'dotS',
    'DUP':    'dup',
    'DROP':   'drop',
    'SWAP':   'swap',
    'OVER':   'over',
    'ROT':    'rot',
    'NEGATE': 'negate',
    'ABS':    'abs',
    'MAX':    'max',
    'MIN':    'min',
    'DEPTH':  'depth',
    'CLEAR':  'clear',
    'WORDS':  'words',
}


# ── Matchers ──────────────────────────────────────────────────────────────────
# Each takes the raw word and returns the token value, or None to fall through.

_NUM_RE = re.compile(r'[+-]?[0-9]+')


def match_number(text: str):
    if not _NUM_RE.fullmatch(text):
        return None
    try:
        return int(text, 10)
    except ValueError:
        # past the interpreter's int string-conversion limit
        return None


def match_operator(text: str):
    return OPERATORS.get(text)


def match_word(text: str):
    return WORDS.get(text.upper())


def match_unknown(text: str):
    return text


# ── Classifier table ──────────────────────────────────────────────────────────

CLASSIFIERS = tuple(sorted([
    (10, NUMBER,   match_number),
    (20, OPERATOR, match_operator),
    (30, WORD,     match_word),
    (99, UNKNOWN,  match_unknown),
], key=lambda row: row[0]))


def classify(text: str) -> Token:
    for _, kind, matcher in CLASSIFIERS:
        value = matcher(text)
        if value is not None:
            break
    return Token(kind, value)


def tokenize(line: str) -> list:
    return [classify(word) for word in line.split()]


def vocabulary() -> list:
    """Every spelling the tokenizer turns into an opcode, in table order."""
    return list(OPERATORS) + [name.lower() for name in WORDS]
