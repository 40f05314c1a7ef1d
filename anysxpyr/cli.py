""" anysxpyr read s-expressions

Usage:
    anysxpyr tokens [options] [<path>...]
    anysxpyr tree   [options] [<path>...]
    anysxpyr dump   [options] [<path>...]

Examples:
    python -m anysxpyr.cli tokens --print --pos -c some-file.scm
    python -m anysxpyr.cli tree --print --format=r7rs some-file.scm

Options:
    -f --format=NAME    dialect, one of gambit r7rs guile [default: gambit]
    -w --whitespace     keep whitespace tokens (tokens only)
    -c --comments       keep comment tokens (tokens only)
    -n --no-improper    improper lists are an error
    -p --pos            show token positions (tokens only)
    --print             print what was read
    --fuzz              run under afl
    -d --debug          debug output
"""

import sys
import pathlib
from io import TextIOBase
from contextlib import nullcontext
import clifn
from anysxpyr import __version__
from anysxpyr import parser as parsermod
from anysxpyr import reader as readermod
from anysxpyr.context import FileContext, SpecialContext
from anysxpyr.debug import dump as dump_value
from anysxpyr.errors import (
    ReadError, ReadErrorWithPosContext, ReadIOErrorWithContext,
    ParenMismatch, UnexpectedClosingParen)
from anysxpyr.parser import parse, Open, Close
from anysxpyr.pos import buffered_chars
from anysxpyr.reader import read_all, write_all
from anysxpyr.settings import configure, formats


def readFromStdIn(stdin=None):
    from select import select
    if stdin is None:
        from sys import stdin
    if select([stdin], [], [], 0.0)[0]:
        return stdin


class Options(clifn.Options):

    @property
    def path(self):
        return [pathlib.Path(path).expanduser() for path in self._args['<path>']]

    @property
    def format_name(self):
        return self._args['--format']

    @property
    def format(self):
        return formats.get(self.format_name)

    @property
    def settings(self):
        return configure(**self.format._asdict(),
                         retain_whitespace=self._args['--whitespace'],
                         retain_comments=self._args['--comments'],
                         allow_improper_lists=not self._args['--no-improper'])

    @property
    def show(self):
        return self._args['--print']

    @property
    def pos(self):
        return self._args['--pos']


class Main(clifn.Dispatcher):

    def default(self):
        raise NotImplementedError('oops')

    def _sources(self):
        if not self.options.path:
            stdin = readFromStdIn()
            return [] if stdin is None else [(stdin, SpecialContext('stdin'))]
        else:
            return [(path, FileContext(path)) for path in self.options.path]

    def _run(self, do):
        """ call do on the characters of each source, report failures
        and keep going with the next source """
        parsermod.debug = readermod.debug = self.options.debug

        failures = []
        for source, context in self._sources():
            try:
                if isinstance(source, TextIOBase):  # don't close stdin
                    f = nullcontext(source)
                else:
                    f = open(source, 'rt', encoding='utf-8', errors='strict')

                with f as fd:
                    do(buffered_chars(fd))
            except OSError as e:
                failures.append(ReadIOErrorWithContext(e, context))
            except ReadError as e:
                failures.append(ReadErrorWithPosContext(e, context))

        for failure in failures:
            print(failure, file=sys.stderr)

        return failures

    def tokens(self):
        settings = self.options.settings
        def do(chars):
            count_toplevel = 0
            count_enter = 0
            parens = []
            for token, pos in parse(chars, settings):
                if isinstance(token, Open):
                    count_enter += 1
                    if not parens:
                        count_toplevel += 1

                    indent = len(parens)
                    parens.append((token.kind, pos))
                elif isinstance(token, Close):
                    if not parens:
                        raise UnexpectedClosingParen(token.kind, pos)

                    kind, openpos = parens.pop()
                    if kind is not token.kind:
                        raise ParenMismatch(kind, openpos, token.kind, pos)

                    indent = len(parens)
                else:
                    indent = len(parens)

                if self.options.show:
                    p = f'{pos} ' if self.options.pos else ''
                    print(f'{" " * indent}{p}{token}')

            print(f';; count_toplevel = {count_toplevel}, count_enter = {count_enter}')

        return self._run(do)

    def tree(self):
        settings = self.options.settings
        def do(chars):
            values = read_all(chars, settings)
            if self.options.show:
                write_all(values, sys.stdout, settings)

        return self._run(do)

    def dump(self):
        settings = self.options.settings
        def do(chars):
            values = [dump_value(v) for v in read_all(chars, settings)]
            if self.options.show:
                write_all(values, sys.stdout, settings)

        return self._run(do)


def main():
    options, *ad = Options.setup(__doc__, version=f'anysxpyr {__version__}')

    if options.format is None:
        print(f'unknown format {options.format_name!r}, '
              f'not one of {sorted(formats)}', file=sys.stderr)
        sys.exit(2)

    main = Main(options)

    if main.options.debug:
        print(main.options)

    if options.fuzz:
        import os
        import afl
        while afl.loop(55555):
            out = main()

        os._exit(0)
    else:
        out = main()

    return out


if __name__ == '__main__':
    main()
