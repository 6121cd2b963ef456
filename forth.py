#!/usr/bin/env python3
"""
forth.py — A line-at-a-time Forth interpreter.

No libraries. One data stack, one word table, one display buffer.

Architecture:
  - Tokenizer (forth_tokens): split a line and classify each word
  - Dispatcher: NUMBER pushes, OPERATOR/WORD look up an opcode in the
    word table, anything else is an undefined word
  - Word table: opcode -> behavior, filled once at construction
  - execute_line: run tokens in order, stop at the first ForthError and
    report it, otherwise report 'ok'

Values are exact: integers, or Fractions when a division does not come out
even. '1 3 / 3 *' leaves exactly 1.

Opcodes:
  plus minus star slash        ( b a -- b<op>a )
  dot                          ( a -- )        print a
  dotS                         ( -- )          print the whole stack
  dup drop swap over rot       stack shuffles
  negate abs max min depth     arithmetic helpers
  clear words                  housekeeping
"""

import sys
from fractions import Fraction

from forth_tokens import NUMBER, OPERATOR, WORD, tokenize, vocabulary

OK     = 'ok'
PROMPT = '> '
BANNER = 'Forth  -  type BYE or Ctrl-D to exit, WORDS to list vocabulary'


# ── Errors ────────────────────────────────────────────────────────────────────

class ForthError(Exception):
    description = 'Forth error'

    def __init__(self):
        super().__init__(self.description)


class StackUnderflow(ForthError):
    description = 'Stack underflow'


class DivisionByZero(ForthError):
    description = 'Division by zero'


class UndefinedWord(ForthError):
    description = 'Undefined word'


# ── Numbers ───────────────────────────────────────────────────────────────────

# Exact values grow without bound; printing them must not hit the int/str
# digit limit (Python 3.11+).
if hasattr(sys, 'set_int_max_str_digits'):
    sys.set_int_max_str_digits(0)


def _exact(value):
    """Fold whole Fractions back to int so results print and compare plainly."""
    if isinstance(value, Fraction) and value.denominator == 1:
        return value.numerator
    return value


def format_number(value) -> str:
    return str(_exact(value))


# ── Data stack ────────────────────────────────────────────────────────────────

class DataStack:
    def __init__(self):
        self._cells: list = []

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def push(self, value):
        self._cells.append(value)

    def pop(self):
        if not self._cells:
            raise StackUnderflow()
        return self._cells.pop()

    def peek(self, depth=0):
        """Value `depth` cells below the top, without removing it."""
        self.need(depth + 1)
        return self._cells[-1 - depth]

    def need(self, n):
        if len(self._cells) < n:
            raise StackUnderflow()

    def clear(self):
        self._cells.clear()

    def render(self) -> str:
        return f'<{len(self._cells)}> ' + ''.join(format_number(v) + ' ' for v in self._cells)


# ── Interpreter ───────────────────────────────────────────────────────────────

class Interpreter:
    def __init__(self):
        self.stack = DataStack()
        self.words: dict = {}
        self.out:   list = []
        self._define_builtins()

    def _emit(self, s):
        self.out.append(str(s))

    # ── Public ────────────────────────────────────────────────────────────────

    def execute_line(self, line: str) -> str:
        self.out = []
        try:
            for token in tokenize(line):
                self.dispatch(token)
        except ForthError as e:
            self.out.append(e.description)
        else:
            self.out.append(OK)
        return ''.join(self.out)

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def dispatch(self, token):
        if token.kind == NUMBER:
            self.stack.push(token.value)
            return
        if token.kind in (OPERATOR, WORD):
            fn = self.words.get(token.value)
            if fn is not None:
                fn()
                return
        raise UndefinedWord()

    def _def(self, opcode, fn):
        self.words[opcode] = fn

    # ── Built-ins ─────────────────────────────────────────────────────────────

    def _define_builtins(self):
        d  = self
        ds = self.stack

        # ── Arithmetic ───────────────────────────────────────────────────────
        def _binop(op):
            def fn():
                a = ds.pop(); b = ds.pop()
                ds.push(_exact(op(b, a)))
            return fn

        def w_slash():
            a = ds.pop(); b = ds.pop()
            # operands stay consumed on failure
            if a == 0:
                raise DivisionByZero()
            ds.push(_exact(Fraction(b) / a))

        d._def('plus',  _binop(lambda b, a: b + a))
        d._def('minus', _binop(lambda b, a: b - a))
        d._def('star',  _binop(lambda b, a: b * a))
        d._def('slash', w_slash)

        d._def('negate', lambda: ds.push(-ds.pop()))
        d._def('abs',    lambda: ds.push(abs(ds.pop())))
        d._def('max',    _binop(max))
        d._def('min',    _binop(min))

        # ── Stack manipulation ────────────────────────────────────────────────
        def w_swap():
            ds.need(2)
            a = ds.pop(); b = ds.pop()
            ds.push(a); ds.push(b)

        def w_rot():
            ds.need(3)
            c = ds.pop(); b = ds.pop(); a = ds.pop()
            ds.push(b); ds.push(c); ds.push(a)

        d._def('dup',   lambda: ds.push(ds.peek()))
        d._def('drop',  lambda: ds.pop())
        d._def('swap',  w_swap)
        d._def('over',  lambda: ds.push(ds.peek(1)))
        d._def('rot',   w_rot)
        d._def('depth', lambda: ds.push(len(ds)))
        d._def('clear', ds.clear)

        # ── Output ────────────────────────────────────────────────────────────
        d._def('dot',   lambda: d._emit(format_number(ds.pop()) + ' '))
        d._def('dotS',  lambda: d._emit(ds.render()))
        d._def('words', lambda: d._emit(' '.join(vocabulary()) + ' '))


# ── Tests ─────────────────────────────────────────────────────────────────────

def run_tests():
    cases = [
        # Arithmetic
        ('2 3 + .',              '5 ok'),
        ('10 3 - .',             '7 ok'),
        ('6 7 * .',              '42 ok'),
        ('20 4 / .',             '5 ok'),
        ('5 -5 + .',             '0 ok'),
        ('+5 .',                 '5 ok'),
        ('1 2 3 * + .',          '7 ok'),

        # Exact division
        ('1 3 / .',              '1/3 ok'),
        ('1 3 / 3 * .',          '1 ok'),
        ('7 2 / .',              '7/2 ok'),
        ('-6 4 / .',             '-3/2 ok'),
        ('2 3 / 3 2 / * .',      '1 ok'),

        # Inspection
        ('1 2 3 .s',             '<3> 1 2 3 ok'),
        ('2 .S',                 '<1> 2 ok'),
        ('.s',                   '<0> ok'),
        ('1 3 / .s',             '<1> 1/3 ok'),

        # Stack ops
        ('3 DUP * .',            '9 ok'),
        ('1 2 DROP .s',          '<1> 1 ok'),
        ('1 2 SWAP .s',          '<2> 2 1 ok'),
        ('1 2 OVER .s',          '<3> 1 2 1 ok'),
        ('1 2 3 ROT .s',         '<3> 2 3 1 ok'),
        ('1 2 DEPTH .s',         '<3> 1 2 2 ok'),
        ('1 2 CLEAR .s',         '<0> ok'),
        ('4 NEGATE .',           '-4 ok'),
        ('-4 ABS .',             '4 ok'),
        ('3 5 MAX .',            '5 ok'),
        ('3 5 MIN .',            '3 ok'),

        # Empty input
        ('',                     'ok'),
        ('   ',                  'ok'),

        # Errors
        ('.',                    'Stack underflow'),
        ('1 +',                  'Stack underflow'),
        ('1 swap',               'Stack underflow'),
        ('5 0 /',                'Division by zero'),
        ('foo',                  'Undefined word'),
        ('1 0 / 99 .',           'Division by zero'),
        ('7 . foo',              '7 Undefined word'),
        ('--5',                  'Undefined word'),
    ]

    passed = 0
    failures = []

    for src, expected in cases:
        result = Interpreter().execute_line(src)
        if result == expected:
            passed += 1
        else:
            failures.append((src, repr(expected), repr(result)))

    print(f'Tests: {passed}/{len(cases)} passed')
    for src, exp, got in failures:
        print(f'  FAIL: {src}')
        print(f'    exp: {exp}')
        print(f'    got: {got}')
    return passed, len(cases)


# ── Interactive REPL ──────────────────────────────────────────────────────────

def repl():
    f = Interpreter()
    print(BANNER)
    while True:
        try:
            line = input(PROMPT)
            if line.strip().upper() == 'BYE':
                break
            print(f.execute_line(line))
        except EOFError:
            break
        except KeyboardInterrupt:
            print('\nInterrupted, stack preserved')


def main():
    if '--test' in sys.argv:
        p, t = run_tests()
        sys.exit(0 if p == t else 1)
    repl()


if __name__ == '__main__':
    main()
