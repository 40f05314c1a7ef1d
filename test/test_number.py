import pytest
from anysxpyr.number import (
    Integer, Rational, gcd, parse_number, SMALL_MIN, SMALL_MAX)

edges = (0, 1, -1, 2, 3, 1000, SMALL_MAX, SMALL_MIN, SMALL_MAX - 1,
         SMALL_MIN + 1, 2 ** 32, -2 ** 32, 2 ** 62, -2 ** 62, 2 ** 80)


def minimal(i, value):
    assert i.value == value
    assert i.is_small == (SMALL_MIN <= value <= SMALL_MAX)


def test_promotion():
    for a in edges:
        for b in edges:
            ia, ib = Integer(a), Integer(b)
            minimal(ia + ib, a + b)
            minimal(ia - ib, a - b)
            minimal(ia * ib, a * b)
            if b:
                minimal(ia // ib, a // b)
                minimal(ia % ib, a % b)

        minimal(-Integer(a), -a)
        minimal(abs(Integer(a)), abs(a))


def test_demotion():
    big = Integer(SMALL_MAX) + 1
    assert big.kind == 'big'
    assert (big - 1).kind == 'small'
    assert (-Integer(SMALL_MIN)).kind == 'big'
    assert (Integer(2 ** 80) // 2 ** 10).kind == 'big'
    assert (Integer(2 ** 80) // 2 ** 10 // 2 ** 10).kind == 'small'
    assert (Integer(2 ** 70 + 5) % 7).kind == 'small'


def test_mul_add():
    i = Integer(0)
    for digit in (9,) * 30:
        i = i.mul_add(10, digit)

    assert i.value == int('9' * 30)
    assert i.kind == 'big'
    assert Integer(SMALL_MAX // 10).mul_add(10, 7).is_small


def test_integer_misc():
    assert Integer(3) == Integer(3)
    assert Integer(3) != 3
    assert Integer(3) < 4 and Integer(3) >= Integer(3)
    assert hash(Integer(5)) == hash(Integer(5))
    assert int(Integer(-7)) == -7
    assert [0, 1, 2][Integer(1)] == 1
    assert str(Integer(-2 ** 100)) == str(-2 ** 100)
    with pytest.raises(TypeError):
        Integer(True)
    with pytest.raises(TypeError):
        Integer(1.5)


def test_gcd():
    assert gcd(0, 5) == Integer(5)
    assert gcd(5, 0) == Integer(5)
    assert gcd(-12, 18) == Integer(6)
    assert gcd(0, 0) == Integer(0)
    assert gcd(2 ** 100, 2 ** 80 * 3) == Integer(2 ** 80)


def test_rational_normalization():
    values = (1, -1, 2, -3, 6, -12, 17, 2 ** 70, -2 ** 65 * 3)
    for n in values:
        for d in values:
            r = Rational(n, d)
            assert r.denominator > 0
            assert gcd(r.numerator, r.denominator) == Integer(1)
            assert r.numerator.value * d == n * r.denominator.value

    r = Rational(2, -4)
    assert (r.numerator, r.denominator) == (Integer(-1), Integer(2))
    assert str(r) == '-1/2'
    assert Rational(0, -5) == Rational(0, 1)
    assert Rational(2 ** 70, 2 ** 69).is_integer
    assert -Rational(1, 3) == Rational(-1, 3)
    with pytest.raises(ZeroDivisionError):
        Rational(1, 0)


def test_parse_number():
    cases = (
        ((False, '42'), Integer(42)),
        ((True, '42'), Integer(-42)),
        ((False, '007'), Integer(7)),
        ((True, '0'), Integer(0)),
        ((False, '3/6'), Rational(1, 2)),
        ((True, '3/6'), Rational(-1, 2)),
        ((False, '4/2'), Integer(2)),
        ((False, '0/5'), Integer(0)),
        ((False, '99999999999999999999'), Integer(99999999999999999999)),
        ((False, ''), None),
        ((True, ''), None),
        ((False, '1/'), None),
        ((False, '/2'), None),
        ((False, '1/2/3'), None),
        ((False, '1/0'), None),
        ((False, '1a'), None),
        ((False, '1.5'), None),
        ((False, '١٢'), None),  # only ascii digits
    )
    for args, expect in cases:
        assert parse_number(*args) == expect, args
