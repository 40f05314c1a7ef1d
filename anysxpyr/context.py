""" Where input came from, for error messages. """


class FileContext:

    def __init__(self, path):
        self.path = path

    def format_with_pos(self, pos):
        return f'in {str(self.path)!r}{pos}'

    def format_without_pos(self):
        return repr(str(self.path))


class SpecialContext:
    """ input without a path, e.g. stdin """

    def __init__(self, name):
        self.name = name

    def format_with_pos(self, pos):
        return f'from ({self.name}){pos}'

    def format_without_pos(self):
        return f'({self.name})'
