__version__ = '0.1.0'

from .settings import configure
from .reader import (
    read,
    read_all,
    read_iter,
    read_file,
    write,
    write_all,
    write_file,)
from .parser import parse
from .debug import dump

# data types
from .value import (
    ROUND,
    SQUARE,
    CURLY,
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
from .number import Integer, Rational

from .errors import SexprError, ReadError, ParseError, ReadErrorWithLocation

# dialect configs
from .settings import (
    conf_gambit,
    conf_r7rs,
    conf_guile,)
