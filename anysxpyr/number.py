""" Exact numbers.

Integers are small when they fit a signed machine word and big
otherwise. Python ints already have arbitrary precision, so the kind
is derived from the value instead of stored, which means that the
representation is always the minimal one no matter which operation
produced it. """

SMALL_MIN = -2 ** 63
SMALL_MAX = 2 ** 63 - 1


class Integer:

    __slots__ = ('value',)

    def __init__(self, value):
        if isinstance(value, Integer):
            value = value.value
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'not an integer {value!r}')

        self.value = value

    @property
    def is_small(self):
        return SMALL_MIN <= self.value <= SMALL_MAX

    @property
    def kind(self):
        return 'small' if self.is_small else 'big'

    def __repr__(self):
        return f'{self.__class__.__name__}({self.value})'

    def __str__(self):
        return str(self.value)

    def __int__(self):
        return self.value

    __index__ = __int__

    def __hash__(self):
        return hash((Integer, self.value))

    def __bool__(self):
        return self.value != 0

    def __eq__(self, other):
        if isinstance(other, Integer):
            return self.value == other.value
        return NotImplemented

    def __lt__(self, other):
        return self.value < _int(other)

    def __le__(self, other):
        return self.value <= _int(other)

    def __gt__(self, other):
        return self.value > _int(other)

    def __ge__(self, other):
        return self.value >= _int(other)

    def __add__(self, other):
        return Integer(self.value + _int(other))

    __radd__ = __add__

    def __sub__(self, other):
        return Integer(self.value - _int(other))

    def __rsub__(self, other):
        return Integer(_int(other) - self.value)

    def __mul__(self, other):
        return Integer(self.value * _int(other))

    __rmul__ = __mul__

    def __floordiv__(self, other):
        return Integer(self.value // _int(other))

    def __mod__(self, other):
        return Integer(self.value % _int(other))

    def __neg__(self):
        return Integer(-self.value)

    def __abs__(self):
        return Integer(abs(self.value))

    def mul_add(self, radix, digit):
        """ self * radix + digit, how digits are accumulated """
        return Integer(self.value * radix + digit)


def _int(other):
    if isinstance(other, Integer):
        return other.value
    elif isinstance(other, int) and not isinstance(other, bool):
        return other
    else:
        raise TypeError(f'not an integer {other!r}')


def gcd(a, b):
    """ Euclid on absolute values, gcd(0, b) == |b| """
    a, b = abs(_int(a)), abs(_int(b))
    while b:
        a, b = b, a % b

    return Integer(a)


class Rational:
    """ Always reduced, sign on the numerator, denominator > 0 """

    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator, denominator):
        n, d = _int(numerator), _int(denominator)
        if d == 0:
            raise ZeroDivisionError(f'{n}/0')

        g = gcd(n, d).value
        if d < 0:
            g = -g

        self.numerator = Integer(n // g)
        self.denominator = Integer(d // g)

    @property
    def is_integer(self):
        return self.denominator.value == 1

    def __repr__(self):
        return f'{self.__class__.__name__}({self.numerator}, {self.denominator})'

    def __str__(self):
        return f'{self.numerator}/{self.denominator}'

    def __hash__(self):
        return hash((Rational, self.numerator, self.denominator))

    def __eq__(self, other):
        if isinstance(other, Rational):
            return (self.numerator == other.numerator and
                    self.denominator == other.denominator)
        return NotImplemented

    def __neg__(self):
        return Rational(-self.numerator.value, self.denominator)


def parse_number(negative, text):
    """ Parse ascii decimal digits with at most one / in them.

    Returns None if text is not a number, including when it is a
    rational with a zero denominator, the caller decides what the text
    is instead. A rational that reduces to a whole number comes back
    as an Integer. """
    num = Integer(0)
    den = None
    seen_digit = False
    for c in text:
        if '0' <= c <= '9':
            digit = ord(c) - ord('0')
            if den is None:
                num = num.mul_add(10, digit)
            else:
                den = den.mul_add(10, digit)

            seen_digit = True
        elif c == '/' and den is None and seen_digit:
            den = Integer(0)
            seen_digit = False
        else:
            return None

    if not seen_digit:
        return None

    if negative:
        num = -num

    if den is None:
        return num
    elif not den:
        return None

    r = Rational(num, den)
    return r.numerator if r.is_integer else r
