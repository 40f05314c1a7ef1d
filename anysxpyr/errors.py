""" Everything that can go wrong while reading.

Errors from the tokenizer are ParseErrors, errors from the reader are
ReadErrors, and since a ParseError is a ReadError catching ReadError
catches both. ReadError is also a SyntaxError so code that only knows
about builtin exceptions still does the right thing. """


class SexprError(Exception): pass


class ReadError(SexprError, SyntaxError):
    """ Base for all positioned errors. ``str(e)`` is the message
    followed by the position it happened at, e.g. ``... @3.14`` """

    def __init__(self, pos):
        self.pos = pos
        # SyntaxError unpacks a second argument, only ever pass one
        super().__init__(f'{self.describe()} {pos}')

    def describe(self):
        raise NotImplementedError('implement in subclass')


# tokenizer

class ParseError(ReadError): pass


class SourceIOError(ParseError):
    """ The character source failed, ``pos`` is the last good position. """

    def __init__(self, error, pos):
        self.error = error
        super().__init__(pos)

    def describe(self):
        return f'IO error ({self.error}) after'


class UnexpectedEOF(ParseError):

    STRING = 'string/symbol/keyword'
    COMMENT = 'comment'
    HASHCOLON = 'keyword or uninterned symbol'

    def __init__(self, context, pos):
        self.context = context
        super().__init__(pos)

    def describe(self):
        return f'unexpected EOF reading {self.context} starting'


class TooManySemicolons(ParseError):
    def describe(self):
        return 'too many semicolons to start a comment'


class InvalidEscapedChar(ParseError):

    def __init__(self, char, pos):
        self.char = char
        super().__init__(pos)

    def describe(self):
        return f'invalid escaped character {self.char!r}'


class NonHexDigit(InvalidEscapedChar):
    def describe(self):
        return f'not a hex digit: {self.char!r}'


class InvalidCodePoint(ParseError):

    def __init__(self, code, pos):
        self.code = code
        super().__init__(pos)

    def describe(self):
        return f'invalid code point {self.code}'


class MissingDelimiterForCodeSequence(ParseError):

    def __init__(self, delimiter, pos):
        self.delimiter = delimiter
        super().__init__(pos)

    def describe(self):
        return f'missing delimiter {self.delimiter!r} after code sequence'


class TooManyDigits(ParseError):
    def describe(self):
        return 'too many digits in code sequence'


class InvalidHashToken(ParseError):
    def describe(self):
        return "invalid '#' token"


class InvalidSpecialToken(ParseError):

    def __init__(self, name, pos):
        self.name = name
        super().__init__(pos)

    def describe(self):
        return f"invalid '#!' name {self.name!r}"


# reader

class MissingItemAfterDot(ReadError):
    def describe(self):
        return "missing item after '.'"


class ExpectingOneItemAfterDot(ReadError):
    def describe(self):
        return "expecting exactly one item after '.'"


class DotWithoutPrecedingItem(ReadError):
    def describe(self):
        return "'.' without preceding item"


class DotOutsideListContext(ReadError):
    def describe(self):
        return "'.' outside of list context"


class _KindError(ReadError):

    def __init__(self, kind, pos):
        self.kind = kind
        super().__init__(pos)


class DotInWrongListContext(_KindError):
    def describe(self):
        k = self.kind
        return f"'.' only allowed in (..) lists, but used in {k.opening}..{k.closing}"


class ImproperlyPlacedDot(ReadError):
    def describe(self):
        return "improperly placed '.'"


class ImproperListsNotAllowedByMode(ReadError):
    def describe(self):
        return 'improper lists disallowed in given mode'


class NestingTooDeep(ReadError):
    def describe(self):
        return 'nesting too deep'


class ParenMismatch(ReadError):

    def __init__(self, expected, openpos, got, pos):
        self.expected = expected
        self.openpos = openpos
        self.got = got
        super().__init__(pos)

    def describe(self):
        e, g = self.expected, self.got
        return f"'{e.opening}' {self.openpos} expects '{e.closing}', got '{g.closing}'"


class UnexpectedClosingParen(_KindError):
    def describe(self):
        return f"unexpected closing character '{self.kind.closing}'"


class PrematureEofExpectingClosingParen(_KindError):
    def describe(self):
        k = self.kind
        return (f"premature EOF while expecting closing character "
                f"'{k.closing}' for '{k.opening}'")


class MissingExpressionAfter(ReadError):

    def __init__(self, name, pos):
        self.name = name
        super().__init__(pos)

    def describe(self):
        return f'missing expression after {self.name}'


# location

class ReadErrorWithLocation(SexprError):
    """ A failure together with where the input came from. """

    def __init__(self, error, context):
        self.error = error
        self.context = context
        super().__init__(str(self))

    def __str__(self):
        raise NotImplementedError('implement in subclass')


class ReadErrorWithPosContext(ReadErrorWithLocation):
    """ A ReadError, rendered with the source context at its position. """

    @property
    def pos(self):
        return self.error.pos

    def __str__(self):
        return f'{self.error.describe()} {self.context.format_with_pos(self.pos)}'


class ReadIOErrorWithContext(ReadErrorWithLocation):
    """ The source could not even be opened. """

    def __str__(self):
        return f'{self.context.format_without_pos()}: {self.error}'
