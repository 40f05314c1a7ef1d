from .settings import (
    configure,
    Format,
    Modes,
    Settings,)

from .reader import (
    Reader,
    read,
    read_all,
    read_iter,
    read_file,
    write,
    writeln,
    write_all,
    write_file,)

from .parser import parse
from .pos import Pos, chars_with_pos, buffered_chars
from .context import FileContext, SpecialContext
from .debug import dump

# numbers
from .number import (
    Integer,
    Rational,
    gcd,
    parse_number,)

# values
from .value import (
    Parenkind,
    ROUND,
    SQUARE,
    CURLY,
    Value,
    Atom,
    Bool,
    Char,
    String,
    Symbol,
    UninternedSymbol,
    Keyword1,
    Keyword2,
    Special,
    Number,
    List,
    render,)

# tokens
from .parser import (
    Token,
    AtomToken,
    Dot,
    Quote,
    Quasiquote,
    Unquote,
    UnquoteSplicing,
    Open,
    Close,
    Whitespace,
    CommentExpr,
    Comment,
    BComment,)

# errors
from .errors import (
    SexprError,
    ReadError,
    ParseError,
    SourceIOError,
    UnexpectedEOF,
    TooManySemicolons,
    InvalidEscapedChar,
    NonHexDigit,
    InvalidCodePoint,
    MissingDelimiterForCodeSequence,
    TooManyDigits,
    InvalidHashToken,
    InvalidSpecialToken,
    MissingItemAfterDot,
    ExpectingOneItemAfterDot,
    DotWithoutPrecedingItem,
    DotOutsideListContext,
    DotInWrongListContext,
    ImproperlyPlacedDot,
    ImproperListsNotAllowedByMode,
    NestingTooDeep,
    ParenMismatch,
    UnexpectedClosingParen,
    PrematureEofExpectingClosingParen,
    MissingExpressionAfter,
    ReadErrorWithLocation,
    ReadErrorWithPosContext,
    ReadIOErrorWithContext,)

# dialect configs
from .settings import (
    conf_gambit,
    conf_r7rs,
    conf_guile,
    GAMBIT,
    R7RS,
    GUILE,)
