""" Tokenizer.

``parse`` turns characters with positions into tokens with positions.
It is a generator so it only ever reads as far as the token it is
about to yield, and the first error ends it. """

from .char import (
    cee_delimited, cee_hex, cee_oct, name_to_char,
    is_valid_code_point, is_whitespace, special_names)
from .errors import (
    SourceIOError, UnexpectedEOF, TooManySemicolons, InvalidEscapedChar,
    NonHexDigit, InvalidCodePoint, MissingDelimiterForCodeSequence,
    TooManyDigits, InvalidHashToken, InvalidSpecialToken)
from .number import parse_number
from .pos import START, chars_with_pos
from .settings import as_settings
from .value import (
    opening_kinds, closing_kinds, Bool, Char, String, Symbol,
    UninternedSymbol, Keyword1, Keyword2, Special, Number, is_symbol_char)

debug = False

MAX_SEMICOLONS = 255


# tokens

class Token:

    _fields = ()

    def __init__(self, *args):
        if len(args) != len(self._fields):
            raise TypeError(f'{self.__class__.__name__} takes {self._fields}')

        for field, arg in zip(self._fields, args):
            setattr(self, field, arg)

    def __eq__(self, other):
        return type(self) == type(other) and all(
            getattr(self, f) == getattr(other, f) for f in self._fields)

    def __hash__(self):
        return hash((self.__class__, *(getattr(self, f) for f in self._fields)))

    def __repr__(self):
        args = ', '.join(repr(getattr(self, f)) for f in self._fields)
        return f'{self.__class__.__name__}({args})'


class AtomToken(Token):
    _fields = 'atom',

    def __str__(self):
        return str(self.atom)


class Dot(Token):
    def __str__(self):
        return '.'


class QuoteLike(Token):
    """ sugar for a two element list headed by ``name`` """
    name = None
    text = None

    def __str__(self):
        return self.text


class Quote(QuoteLike):
    name = 'quote'
    text = "'"


class Quasiquote(QuoteLike):
    name = 'quasiquote'
    text = '`'


class Unquote(QuoteLike):
    name = 'unquote'
    text = ','


class UnquoteSplicing(QuoteLike):
    name = 'unquote-splicing'
    text = ',@'


class Open(Token):
    _fields = 'kind',

    def __str__(self):
        return self.kind.opening


class Close(Token):
    _fields = 'kind',

    def __str__(self):
        return self.kind.closing


class Whitespace(Token):
    _fields = 'text',

    def __str__(self):
        return self.text


class CommentExpr(Token):
    """ #; comments out the next expression """

    def __str__(self):
        return '#;'


class Comment(Token):
    """ ;; text to the end of the line, newline not included """

    _fields = 'semicolons', 'text'

    def __str__(self):
        return ';' * self.semicolons + self.text


class BComment(Token):
    """ #| block |# """

    _fields = 'text',

    def __str__(self):
        return f'#|{self.text}|#'


# characters

class CharSource:
    """ (char, pos) pairs with one character of pushback """

    def __init__(self, chars):
        self._chars = iter(chars)
        self._back = None
        self._eof = False
        self.lastpos = START

    def next(self):
        if self._back is not None:
            cp, self._back = self._back, None
            return cp

        if self._eof:
            return None

        try:
            cp = next(self._chars)
        except StopIteration:
            self._eof = True
            return None
        except (OSError, UnicodeError) as e:
            self._eof = True
            raise SourceIOError(e, self.lastpos) from e

        self.lastpos = cp[1]
        return cp

    def unread(self, cp):
        if cp is not None:
            self._back = cp


def is_ascii_letter(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


def read_while(cs, pred):
    out = []
    while True:
        cp = cs.next()
        if cp is None:
            break
        if not pred(cp[0]):
            cs.unread(cp)
            break
        out.append(cp[0])

    return ''.join(out)


# \x \u \U
EXACT = 'exact'  # exactly n digits
FLEX = 'flex'  # 1 to n digits, ends at the first non hex digit
DELIMITED = 'delimited'  # 1 to n digits followed by ;


def read_hex_char(cs, start, escpos, maxlen, mode):
    """ the character for the hex digits after \\x \\u or \\U

    ``start`` is where the string started, ``escpos`` where the escape letter is """
    digits = []
    while True:
        cp = cs.next()
        if cp is None:
            if mode == FLEX and digits:
                break
            raise UnexpectedEOF(UnexpectedEOF.STRING, start)

        c, pos = cp
        if c in cee_hex:
            if len(digits) == maxlen:
                # only delimited can get here, the others stop at maxlen
                raise TooManyDigits(pos)
            digits.append(c)
            if mode != DELIMITED and len(digits) == maxlen:
                break
        elif mode == DELIMITED and c == ';' and digits:
            break
        elif not digits or mode == EXACT:
            raise NonHexDigit(c, pos)
        elif mode == FLEX:
            cs.unread(cp)
            break
        else:
            raise MissingDelimiterForCodeSequence(';', pos)

    code = int(''.join(digits), 16)
    if not is_valid_code_point(code):
        raise InvalidCodePoint(code, escpos)

    return chr(code)


def read_octal_char(cs, first):
    digits = [first]
    while len(digits) < 3:
        cp = cs.next()
        if cp is None:
            break
        if cp[0] not in cee_oct:
            cs.unread(cp)
            break
        digits.append(cp[0])

    return chr(int(''.join(digits), 8))


def read_delimited(cs, delim, start, fmt):
    """ the body of "..." or |...|, the opening delimiter already read """
    out = []
    while True:
        cp = cs.next()
        if cp is None:
            raise UnexpectedEOF(UnexpectedEOF.STRING, start)

        c, pos = cp
        if c == delim:
            return ''.join(out)
        elif c != '\\':
            out.append(c)
            continue

        cp = cs.next()
        if cp is None:
            raise UnexpectedEOF(UnexpectedEOF.STRING, start)

        e, epos = cp
        if e in cee_delimited:
            out.append(cee_delimited[e])
        elif e == 'u':
            out.append(read_hex_char(cs, start, epos, 4, EXACT))
        elif e == 'U':
            out.append(read_hex_char(cs, start, epos, 8, EXACT))
        elif e == 'x':
            mode = (DELIMITED if fmt.x_escape_terminated_by_semicolon_in_delimited
                    else FLEX)
            out.append(read_hex_char(cs, start, epos, fmt.x_escape_len, mode))
        elif e == '\n':
            # line continuation, drop the whitespace that follows
            read_while(cs, is_whitespace)
        elif e in cee_oct and fmt.octal_escapes_in_delimited:
            out.append(read_octal_char(cs, e))
        elif e == '0':
            out.append('\0')
        else:
            raise InvalidEscapedChar(e, epos)


def read_block_comment(cs, start):
    """ the body of #| |#, which nest """
    out = []
    depth = 1
    while True:
        cp = cs.next()
        if cp is None:
            raise UnexpectedEOF(UnexpectedEOF.COMMENT, start)

        c = cp[0]
        if c in '|#':
            np = cs.next()
            if np is not None and np[0] == ('#' if c == '|' else '|'):
                depth += -1 if c == '|' else 1
                if not depth:
                    return ''.join(out)

                out.append(c + np[0])
                continue

            cs.unread(np)

        out.append(c)


def read_char_literal(cs, pos):
    """ #\\ already read """
    cp = cs.next()
    if cp is None:
        raise InvalidHashToken(pos)

    # the first character is taken whatever it is so #\( works
    text = cp[0] + read_while(cs, is_symbol_char)
    if len(text) == 1:
        return Char(text)

    c0, rest = text[0], text[1:]
    if c0 in 'xuU' and len(rest) <= 8 and all(c in cee_hex for c in rest):
        code = int(rest, 16)
        if not is_valid_code_point(code):
            raise InvalidCodePoint(code, pos)

        return Char(chr(code))

    char = name_to_char(text)
    if char is None:
        raise InvalidHashToken(pos)

    return Char(char)


def read_hash(cs, pos, fmt, modes):
    """ everything starting with # """
    cp = cs.next()
    if cp is None:
        raise InvalidHashToken(pos)

    c = cp[0]
    if c == '\\':
        return AtomToken(read_char_literal(cs, pos))
    elif c == ';':
        return CommentExpr()
    elif c == '|':
        text = read_block_comment(cs, pos)
        return BComment(text) if modes.retain_comments else None
    elif c == ':':
        cp = cs.next()
        if cp is None:
            raise UnexpectedEOF(UnexpectedEOF.HASHCOLON, pos)

        if cp[0] == '|':
            text = read_delimited(cs, '|', pos, fmt)
        else:
            text = cp[0] + read_while(cs, is_symbol_char)

        cls = Keyword1 if fmt.hashcolon_is_keyword else UninternedSymbol
        return AtomToken(cls(text))
    elif c == '!':
        name = read_while(cs, is_ascii_letter)
        if name not in special_names:
            raise InvalidSpecialToken(name, pos)

        return AtomToken(Special(name))
    else:
        cs.unread(cp)
        name = read_while(cs, is_ascii_letter)
        if name == 't' or fmt.accept_long_false_true and name == 'true':
            return AtomToken(Bool(True))
        elif name == 'f' or fmt.accept_long_false_true and name == 'false':
            return AtomToken(Bool(False))

        raise InvalidHashToken(pos)


def classify_bare(text, fmt):
    """ symbol, keyword, number or dot """
    if text == '.' and fmt.has_dotted_pairs:
        return Dot()

    c0 = text[0]
    if '0' <= c0 <= '9':
        number = parse_number(False, text)
    elif c0 == '-':
        number = parse_number(True, text[1:])
    else:
        number = None

    if number is not None:
        return AtomToken(Number(number))
    elif c0 == ':':
        return AtomToken(Keyword1(text[1:]))
    elif text[-1] == ':':
        return AtomToken(Keyword2(text[:-1]))
    else:
        return AtomToken(Symbol(text))


def next_token(cs, c, pos, fmt, modes):
    """ the token starting with c at pos, None for skipped input """
    if c in opening_kinds:
        return Open(opening_kinds[c])
    elif c in closing_kinds:
        return Close(closing_kinds[c])
    elif is_whitespace(c):
        text = c + read_while(cs, is_whitespace)
        return Whitespace(text) if modes.retain_whitespace else None
    elif c == ';':
        rest = read_while(cs, lambda c: c != '\n')
        if not modes.retain_comments:
            return None

        text = rest.lstrip(';')
        semicolons = 1 + len(rest) - len(text)
        if semicolons > MAX_SEMICOLONS:
            raise TooManySemicolons(pos)

        return Comment(semicolons, text)
    elif c == '#':
        return read_hash(cs, pos, fmt, modes)
    elif c == '"':
        return AtomToken(String(read_delimited(cs, c, pos, fmt)))
    elif c == '|':
        return AtomToken(Symbol(read_delimited(cs, c, pos, fmt)))
    elif c == "'":
        return Quote()
    elif c == '`':
        return Quasiquote()
    elif c == ',':
        cp = cs.next()
        if cp is not None and cp[0] == '@':
            return UnquoteSplicing()

        cs.unread(cp)
        return Unquote()
    else:
        text = c + read_while(cs, is_symbol_char)
        return classify_bare(text, fmt)


def parse(chars, settings=None):
    """ Yield (token, pos) for chars, which is a string or an
    iterable of (char, pos) pairs. The first error is raised and
    ends the generator. """
    fmt, modes = as_settings(settings)
    if isinstance(chars, str):
        chars = chars_with_pos(chars)

    cs = CharSource(chars)
    while True:
        cp = cs.next()
        if cp is None:
            return

        c, pos = cp
        token = next_token(cs, c, pos, fmt, modes)
        if token is not None:
            if debug:
                print('TK:', pos, repr(token))

            yield token, pos
