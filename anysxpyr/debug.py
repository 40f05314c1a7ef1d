""" Show exactly what was read, every atom becomes a list that says
what it is, e.g. ``"ab"`` dumps as ``(string 97 98)`` """

from .value import (
    ROUND, List, Bool, Char, String, Symbol, UninternedSymbol,
    Keyword1, Keyword2, Special, Number)

_stringlike = {
    String: 'string',
    Symbol: 'symbol',
    UninternedSymbol: 'uninterned-symbol',
    Keyword1: 'keyword1',
    Keyword2: 'keyword2',
}


def _list(head, items, pos):
    return List(ROUND, [Symbol(head), *items])._set_pos(pos)


def dump_atom(atom):
    cls = type(atom)
    if cls is Bool:
        return Symbol('true' if atom.value else 'false')._set_pos(atom.pos)
    elif cls is Char:
        return _list('integer->char', [Number(ord(atom.value))], atom.pos)
    elif cls in _stringlike:
        return _list(_stringlike[cls],
                     [Number(ord(c)) for c in atom.value],
                     atom.pos)
    elif cls is Special:
        return _list('special', [Symbol(atom.value)], atom.pos)
    elif cls is Number:
        return _list('number', [Number(atom.value)], atom.pos)
    else:
        raise TypeError(f'cannot dump {atom!r}')


def dump(value):
    """ the dumped form of value, always a proper list or a symbol """
    root = []
    todo = [(value, root)]
    while todo:
        v, out = todo.pop()
        if isinstance(v, List):
            head = 'improper-list' if v.improper else 'list'
            dumped = List(v.kind, [Symbol(head)])._set_pos(v.pos)
            out.append(dumped)
            todo.extend((item, dumped.items) for item in reversed(v.items))
        else:
            out.append(dump_atom(v))

    return root[0]
