""" Dialect configuration.

There is one tokenizer and one reader, every difference between
dialects is one of the fields of Format. Presets are plain dicts so
that they can be mixed, e.g. ``configure(**conf_r7rs, x_escape_len=4)``
"""

from collections import namedtuple

Format = namedtuple(
    'Format',
    ('name',
     'has_dotted_pairs',  # a lone . is a Dot token instead of a symbol
     'octal_escapes_in_delimited',  # "\101" otherwise only "\0"
     'x_escape_terminated_by_semicolon_in_delimited',  # "\x41;"
     'x_escape_len',  # max hex digits after \x
     'accept_long_false_true',  # #true #false
     'hashcolon_is_keyword',  # #:foo is a keyword not an uninterned symbol
     ),
    defaults=('gambit', True, True, False, 8, False, False))

Modes = namedtuple(
    'Modes',
    ('retain_whitespace',
     'retain_comments',
     'allow_improper_lists',),
    defaults=(False, False, True))

Settings = namedtuple('Settings', ('format', 'modes'))


conf_gambit = dict(
    name='gambit',
    has_dotted_pairs=True,
    octal_escapes_in_delimited=True,
    x_escape_terminated_by_semicolon_in_delimited=False,
    x_escape_len=8,
    accept_long_false_true=False,
    hashcolon_is_keyword=False,
)

conf_r7rs = dict(
    name='r7rs',
    has_dotted_pairs=True,
    octal_escapes_in_delimited=False,
    x_escape_terminated_by_semicolon_in_delimited=True,
    x_escape_len=8,
    accept_long_false_true=False,
    hashcolon_is_keyword=True,
)

conf_guile = dict(
    name='guile',
    has_dotted_pairs=True,
    octal_escapes_in_delimited=False,
    x_escape_terminated_by_semicolon_in_delimited=True,
    x_escape_len=2,
    accept_long_false_true=True,
    hashcolon_is_keyword=True,
)

GAMBIT = Format(**conf_gambit)
R7RS = Format(**conf_r7rs)
GUILE = Format(**conf_guile)

formats = {f.name: f for f in (GAMBIT, R7RS, GUILE)}


def configure(**kwargs):
    """ Build Settings from any mix of Format and Modes fields.
    Anything not given comes from the gambit preset and default modes. """
    fkw = {k: v for k, v in kwargs.items() if k in Format._fields}
    mkw = {k: v for k, v in kwargs.items() if k in Modes._fields}
    unknown = set(kwargs) - set(fkw) - set(mkw)
    if unknown:
        raise TypeError(f'unknown settings {sorted(unknown)}')

    return Settings(GAMBIT._replace(**fkw), Modes(**mkw))


DEFAULT = configure()


def as_settings(settings):
    """ accept None, a Format, or Settings """
    if settings is None:
        return DEFAULT
    elif isinstance(settings, Format):
        return Settings(settings, Modes())
    else:
        return settings
