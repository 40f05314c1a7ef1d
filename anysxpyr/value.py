""" The value model, what the reader produces and the writer prints.

Every value carries the position of its first character in ``pos``
when it came from the reader, values built by hand have ``pos = None``.
Positions never take part in equality. """

from .char import cee_print, char_to_name, is_whitespace, special_names
from .number import Integer, Rational
from .settings import GAMBIT


class Parenkind:

    def __init__(self, name, opening, closing):
        self.name = name
        self.opening = opening
        self.closing = closing

    def __repr__(self):
        return self.name.upper()


ROUND = Parenkind('round', '(', ')')
SQUARE = Parenkind('square', '[', ']')
CURLY = Parenkind('curly', '{', '}')

opening_kinds = {k.opening: k for k in (ROUND, SQUARE, CURLY)}
closing_kinds = {k.closing: k for k in (ROUND, SQUARE, CURLY)}


class _m:
    """ helper methods"""

    def eq_value(self, other):
        return type(self) == type(other) and self.value == other.value

    def hash_value(self):
        return hash((self.__class__, self.value))


class Value:

    pos = None

    def _set_pos(self, pos):
        self.pos = pos
        return self

    def _print(self, fmt):
        raise NotImplementedError('implement in subclass')

    def __str__(self):
        return render(self)


# atoms

class Atom(Value):

    def __init__(self, value):
        self.value = value

    __eq__ = _m.eq_value
    __hash__ = _m.hash_value

    def __repr__(self):
        return f'{self.__class__.__name__}({self.value!r})'


class Bool(Atom):

    def __init__(self, value):
        self.value = bool(value)

    def _print(self, fmt):
        return '#t' if self.value else '#f'


class Char(Atom):

    def __init__(self, value):
        if not isinstance(value, str) or len(value) != 1:
            raise TypeError(f'not a single character {value!r}')

        self.value = value

    def _print(self, fmt):
        c = self.value
        if c in char_to_name:
            return '#\\' + char_to_name[c]
        elif is_whitespace(c) or _is_control(c):
            return f'#\\x{ord(c):x}'
        else:
            return '#\\' + c


class String(Atom):
    def _print(self, fmt):
        return quoted(self.value, '"')


class Symbol(Atom):
    def _print(self, fmt):
        return self.value if is_bare(self.value) else quoted(self.value, '|')


class UninternedSymbol(Atom):
    def _print(self, fmt):
        v = self.value
        return '#:' + (v if is_bare(v) else quoted(v, '|'))


class Keyword1(Atom):
    """ :foo """

    def _print(self, fmt):
        v = self.value
        if all(is_symbol_char(c) for c in v):
            return ':' + v
        elif fmt.hashcolon_is_keyword:
            return '#:' + quoted(v, '|')
        else:
            # FIXME there is no way to read this back in gambit
            return ':' + quoted(v, '|')


class Keyword2(Atom):
    """ foo: """

    def _print(self, fmt):
        v = self.value
        if v and v[0] != ':' and all(is_symbol_char(c) for c in v):
            return v + ':'
        else:
            return quoted(v, '|') + ':'


class Special(Atom):
    """ #!eof #!void #!optional #!rest #!key """

    def __init__(self, value):
        if value not in special_names:
            raise ValueError(f'unknown special {value!r}')

        self.value = value

    def _print(self, fmt):
        return '#!' + self.value


class Number(Atom):

    def __init__(self, value):
        if isinstance(value, int):
            value = Integer(value)
        elif not isinstance(value, (Integer, Rational)):
            raise TypeError(f'not a number {value!r}')

        self.value = value

    def _print(self, fmt):
        return str(self.value)


# lists

class List(Value):
    """ ``dot`` is the position of the . for improper lists, the tail
    is then the last of ``items`` """

    def __init__(self, kind, items, dot=None):
        self.kind = kind
        self.items = list(items)
        self.dot = dot

    @property
    def improper(self):
        return self.dot is not None

    def __repr__(self):
        dot = f', dot={self.dot!r}' if self.improper else ''
        return f'{self.__class__.__name__}({self.kind!r}, {self.items!r}{dot})'

    def __eq__(self, other):
        # no recursion, nesting can be deeper than the python stack
        todo = [(self, other)]
        while todo:
            a, b = todo.pop()
            if isinstance(a, List):
                if (type(a) != type(b) or
                    a.kind is not b.kind or
                    a.improper != b.improper or
                    len(a.items) != len(b.items)):
                    return False

                todo.extend(zip(a.items, b.items))
            elif a != b:
                return False

        return True

    __hash__ = None

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


# printing

def _is_control(c):
    o = ord(c)
    return o < 0x20 or 0x7f <= o <= 0x9f


def is_symbol_char(c):
    return not (is_whitespace(c) or c in '\'`,"|()[]{}\\')


def is_bare(text):
    """ symbols that can print without |..| """
    return (bool(text) and
            not text[0].isdigit() and
            all(c.isascii() and c.isalnum() for c in text))


def quoted(text, quote):
    out = [quote]
    for c in text:
        if c == quote or c == '\\':
            out.append('\\' + c)
        elif c in cee_print:
            out.append('\\' + cee_print[c])
        elif _is_control(c):
            out.append(f'\\u{ord(c):04x}')
        else:
            out.append(c)

    out.append(quote)
    return ''.join(out)


def render(value, fmt=None):
    """ text for value that reads back as an equal value under fmt """
    if fmt is None:
        fmt = GAMBIT

    out = []
    todo = [value]
    while todo:
        v = todo.pop()
        if isinstance(v, str):
            out.append(v)
        elif isinstance(v, List):
            parts = [v.kind.opening]
            last = len(v.items) - 1
            for i, item in enumerate(v.items):
                if i:
                    parts.append(' . ' if v.improper and i == last else ' ')

                parts.append(item)

            parts.append(v.kind.closing)
            todo.extend(reversed(parts))
        else:
            out.append(v._print(fmt))

    return ''.join(out)


def symbol(name, pos=None):
    return Symbol(name)._set_pos(pos)
