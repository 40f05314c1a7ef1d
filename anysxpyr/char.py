# escapes and character names


cee_base = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'v': '\v',
    'b': '\b',
    'a': '\a',
    'f': '\f',
}

cee_delimited = {
    # inside "..." and |...|
    **cee_base,
    '\\': '\\',
    '"': '"',
    "'": "'",
    '|': '|',
}

# reverse for printing, only the ones that are not the delimiter or
# backslash, those are handled by the printer since they depend on
# which delimiter is in use
cee_print = {v: k for k, v in cee_base.items()}

cee_oct = '01234567'
cee_hex = '0123456789abcdefABCDEF'


char_names = {
    # the r7rs set, this is also what we print
    'alarm': '\x07',
    'backspace': '\x08',  # aka '\b'
    'delete': '\x7f',
    'escape': '\x1b',
    'newline': '\x0a',    # ala '\n'
    'null': '\x00',       # "\u0000" "\x00"
    'return': '\x0d',     # \r
    'space': '\x20',
    'tab': '\x09',        # \t
}

known_multi = {
    # from Racket, also accepted when reading but never printed
    **char_names,
    'linefeed': '\x0a',
    'nul': '\x00',
    'page': '\x0c',       # \f
    'rubout': '\x7f',     # aka delete
    'vtab': '\x0b',       # \v
}

char_to_name = {v: k for k, v in char_names.items()}


def name_to_char(name):
    """ exact match only, names are case sensitive """
    return known_multi.get(name)


def is_whitespace(c):
    """ unicode White_Space, str.isspace also accepts the information
    separators U+001C to U+001F which are symbol characters here """
    return c.isspace() and not '\x1c' <= c <= '\x1f'


def is_valid_code_point(code):
    return 0 <= code <= 0x10ffff and not 0xd800 <= code <= 0xdfff


special_names = ('eof', 'void', 'optional', 'rest', 'key')
