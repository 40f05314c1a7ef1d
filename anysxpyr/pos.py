from io import TextIOBase
from collections import namedtuple


class Pos(namedtuple('Pos', ('line', 'col'))):
    """ Zero based line and column of a character.

    Prints Emacs style, one based line and zero based column. """

    __slots__ = ()

    def __str__(self):
        return f'@{self.line + 1}.{self.col}'

    def advance(self, char):
        if char == '\n':
            return Pos(self.line + 1, 0)
        else:
            return Pos(self.line, self.col + 1)


START = Pos(0, 0)


def chars_with_pos(chars, start=START):
    """ pair each character in chars with its position """
    pos = start
    for char in chars:
        yield char, pos
        pos = pos.advance(char)


def text_chars(f, chunksize=4096):
    while True:
        data = f.read(chunksize)
        if not data:
            break
        yield from data


def buffered_chars(path_or_fd, chunksize=4096):
    """ characters with positions for a path or an open text stream

    decoding is strict utf-8 for paths, failures are raised from the
    iteration and turned into SourceIOError by the tokenizer """
    if isinstance(path_or_fd, TextIOBase):  # stdin probably
        return chars_with_pos(text_chars(path_or_fd, chunksize))

    def path_gen():
        with open(path_or_fd, 'rt', encoding='utf-8', errors='strict') as f:
            yield from text_chars(f, chunksize)

    return chars_with_pos(path_gen())
