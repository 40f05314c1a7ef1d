""" Reader, tokens to values, and the writer.

The reader is a pushdown automaton with an explicit frame stack, so
nesting is limited by MAX_DEPTH and never by the python stack. Each
list, quote prefix, #; and dotted tail costs one unit of fuel, a
frame gets what is left of its parent's fuel. """

from .context import FileContext
from .errors import (
    ReadError, ReadErrorWithPosContext, ReadIOErrorWithContext,
    MissingItemAfterDot, ExpectingOneItemAfterDot, DotWithoutPrecedingItem,
    DotOutsideListContext, DotInWrongListContext, ImproperlyPlacedDot,
    ImproperListsNotAllowedByMode, NestingTooDeep, ParenMismatch,
    UnexpectedClosingParen, PrematureEofExpectingClosingParen,
    MissingExpressionAfter)
from .parser import (
    parse, AtomToken, Dot, QuoteLike, Open, Close, Whitespace,
    CommentExpr, Comment, BComment)
from .pos import buffered_chars
from .settings import as_settings
from .value import ROUND, List, render, symbol

debug = False

MAX_DEPTH = 500

# list frame states
ITEMS = 'items'
TAIL = 'tail'  # after the dot
CLOSE = 'close'  # after the tail, only a close may follow


class _Frame:

    state = ITEMS

    def __init__(self, fuel, pos=None):
        self.fuel = fuel
        self.pos = pos

    def __repr__(self):
        return f'<{self.__class__.__name__[1:5]} {self.fuel} {self.pos}>'


class _Top(_Frame):
    """ receives the finished top level value """


class _Discard(_Frame):
    """ #; drops whatever it receives """


class _Prefix(_Frame):

    def __init__(self, fuel, pos, name):
        super().__init__(fuel, pos)
        self.name = name


class _List(_Frame):

    def __init__(self, fuel, pos, kind):
        super().__init__(fuel, pos)
        self.kind = kind
        self.items = []
        self.dot = None


_skip = Whitespace, Comment, BComment


class Reader:
    """ Values from a (token, pos) iterable, the tokens are only
    consumed as far as the value being read. """

    def __init__(self, tokens, settings=None):
        self.tokens = iter(tokens)
        self.settings = as_settings(settings)

    def read(self):
        """ the next value, None at the end of input """
        return self._read(ImproperlyPlacedDot)

    def read_iter(self):
        while True:
            value = self._read(DotOutsideListContext)
            if value is None:
                return

            yield value

    def read_all(self):
        return list(self.read_iter())

    def _read(self, top_dot_error):
        stack = [_Top(MAX_DEPTH)]
        for token, pos in self.tokens:
            if isinstance(token, _skip):
                continue

            if debug:
                print(f'RD: {pos} {token!r} {stack}')

            value = self._token(stack, token, pos, top_dot_error)
            if value is not None:
                return value

        return self._eof(stack)

    def _token(self, stack, token, pos, top_dot_error):
        """ returns the top level value once it is complete """
        if isinstance(token, (Close, Dot)):
            # #; with nothing after it in this list does nothing
            while isinstance(stack[-1], _Discard):
                stack.pop()

        frame = stack[-1]
        if isinstance(token, Close):
            return self._close(stack, token.kind, pos)
        elif isinstance(token, Dot):
            self._dot(frame, pos, top_dot_error)
            return None
        elif isinstance(token, CommentExpr):
            stack.append(_Discard(self._child_fuel(frame, pos), pos))
            return None

        if frame.state == CLOSE:
            raise ExpectingOneItemAfterDot(pos)

        if isinstance(token, AtomToken):
            return self._deliver(stack, token.atom._set_pos(pos))
        elif isinstance(token, Open):
            stack.append(_List(self._child_fuel(frame, pos), pos, token.kind))
        elif isinstance(token, QuoteLike):
            stack.append(_Prefix(self._child_fuel(frame, pos), pos, token.name))
        else:
            raise TypeError(f'unknown token {token!r}')

        return None

    @staticmethod
    def _child_fuel(frame, pos):
        fuel = frame.fuel - 1 if frame.state == TAIL else frame.fuel
        if fuel <= 0:
            raise NestingTooDeep(pos)

        return fuel - 1

    def _dot(self, frame, pos, top_dot_error):
        if isinstance(frame, _Top):
            raise top_dot_error(pos)
        elif isinstance(frame, _Prefix):
            raise ImproperlyPlacedDot(pos)
        elif frame.kind is not ROUND:
            raise DotInWrongListContext(frame.kind, pos)
        elif frame.state == TAIL:
            raise ImproperlyPlacedDot(pos)
        elif frame.state == CLOSE:
            raise ExpectingOneItemAfterDot(pos)
        elif not frame.items:
            raise DotWithoutPrecedingItem(pos)
        elif frame.fuel <= 0:
            raise NestingTooDeep(pos)

        frame.dot = pos
        frame.state = TAIL

    def _close(self, stack, kind, pos):
        frame = stack[-1]
        if isinstance(frame, _Top):
            raise UnexpectedClosingParen(kind, pos)
        elif isinstance(frame, _Prefix):
            raise MissingExpressionAfter(frame.name, frame.pos)
        elif frame.state == TAIL:
            raise MissingItemAfterDot(pos)
        elif kind is not frame.kind:
            raise ParenMismatch(frame.kind, frame.pos, kind, pos)

        value = List(frame.kind, frame.items, frame.dot)._set_pos(frame.pos)
        if value.improper and not self.settings.modes.allow_improper_lists:
            raise ImproperListsNotAllowedByMode(value.dot)

        stack.pop()
        return self._deliver(stack, value)

    @staticmethod
    def _deliver(stack, value):
        while True:
            frame = stack[-1]
            if isinstance(frame, _Top):
                return value
            elif isinstance(frame, _Discard):
                stack.pop()
                return None
            elif isinstance(frame, _Prefix):
                stack.pop()
                value = List(ROUND, [symbol(frame.name, frame.pos), value]
                             )._set_pos(frame.pos)
                continue
            elif frame.state == TAIL:
                if isinstance(value, List) and value.kind is ROUND:
                    # (a . (b c)) is (a b c)
                    frame.items.extend(value.items)
                    frame.dot = value.dot
                else:
                    frame.items.append(value)

                frame.state = CLOSE
            else:
                frame.items.append(value)

            return None

    @staticmethod
    def _eof(stack):
        while stack:
            frame = stack.pop()
            if isinstance(frame, _Top):
                return None
            elif isinstance(frame, _Discard):
                continue
            elif isinstance(frame, _Prefix):
                raise MissingExpressionAfter(frame.name, frame.pos)
            elif frame.state == TAIL:
                raise MissingItemAfterDot(frame.dot)
            else:
                raise PrematureEofExpectingClosingParen(frame.kind, frame.pos)


def make_reader(chars, settings=None):
    settings = as_settings(settings)
    return Reader(parse(chars, settings), settings)


def read(chars, settings=None):
    """ the first value in chars, a string or (char, pos) pairs """
    return make_reader(chars, settings).read()


def read_all(chars, settings=None):
    return make_reader(chars, settings).read_all()


def read_iter(chars, settings=None):
    return make_reader(chars, settings).read_iter()


def read_file(path, settings=None):
    """ all values in the file at path, errors carry the path """
    context = FileContext(path)
    try:
        f = open(path, 'rt', encoding='utf-8', errors='strict')
    except OSError as e:
        raise ReadIOErrorWithContext(e, context) from e

    with f:
        try:
            return read_all(buffered_chars(f), settings)
        except ReadError as e:
            raise ReadErrorWithPosContext(e, context) from e


# writing

def write(value, out, fmt=None):
    out.write(render(value, as_settings(fmt).format))


def writeln(value, out, fmt=None):
    write(value, out, fmt)
    out.write('\n')


def write_all(values, out, fmt=None):
    """ one value per line with an empty line between values """
    for i, value in enumerate(values):
        if i:
            out.write('\n')

        writeln(value, out, fmt)


def write_file(path, values, fmt=None):
    with open(path, 'wt', encoding='utf-8') as f:
        write_all(values, f, fmt)
