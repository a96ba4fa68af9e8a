import primefac
import pytest

from bignum import BigInt, DivisionByZero, Sign, bi
from bignum.limbs import BITS, MASK, UINT64_MAX

A = "753489479832462184954378953724247348568249832473264754764234"
B = "483828738748356746537483"


def trunc_divmod(a: int, b: int):
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def check_div(a: int, b: int) -> None:
    q, r = trunc_divmod(a, b)
    x = BigInt.from_int(a)
    y = BigInt.from_int(b)
    assert int(x // y) == q
    assert int(x % y) == r
    assert x // y * y + x % y == x


def test_div_simple():
    assert bi("20") // bi("5") == bi("4")
    assert bi("0") // bi("5") == bi("0")
    assert bi("4") // bi("4") == bi("1")
    assert bi("-20") // bi("5") == bi("-4")
    assert bi("0") // bi("-5") == bi("0")


def test_div_long():
    assert bi(A) // bi(B) == bi("1557347506437310203365166016944716207")
    assert bi(B) // bi(A) == bi("0")


def test_mod_long():
    assert bi(A) % bi(B) == bi("141444857623785431677253")


def test_divmod_long():
    q, r = divmod(bi(A), bi(B))
    assert q == bi("1557347506437310203365166016944716207")
    assert r == bi("141444857623785431677253")


def test_truncates_toward_zero():
    assert bi("-7") // bi("2") == BigInt(-3)
    assert bi("7") // bi("-2") == BigInt(-3)
    assert bi("-7") // bi("-2") == BigInt(3)
    assert bi("-7") % bi("2") == BigInt(-1)
    assert bi("7") % bi("-2") == BigInt(1)


def test_div_by_one_is_identity():
    a = bi("-" + A)
    assert a // BigInt(1) == a
    assert a // BigInt(-1) == bi(A)


def test_equal_magnitudes():
    for a, b, q in (("17", "17", 1), ("-17", "17", -1), ("17", "-17", -1), ("-17", "-17", 1)):
        assert bi(a) // bi(b) == BigInt(q)
        assert (bi(a) % bi(b)).sign == Sign.ZERO


def test_div_self_in_place():
    a = bi(A)
    a //= a
    assert a == 1


def test_division_by_zero():
    a = bi(A)
    with pytest.raises(DivisionByZero):
        a //= BigInt(0)
    with pytest.raises(ZeroDivisionError):
        a %= 0
    with pytest.raises(DivisionByZero):
        BigInt(0).divide(BigInt(0))
    assert a == bi(A)


def test_limb_boundaries(boundary):
    for divisor in (1, 2, 10, MASK, MASK + 1, UINT64_MAX, -3, -(MASK + 7)):
        check_div(boundary, divisor)
        if boundary:
            check_div(divisor, boundary)


@pytest.mark.parametrize("limbs", [2, 3, 5, 8])
def test_equal_heads(limbs):
    top = (0xDEADBEEF << BITS) | 0x12345678
    low = (1 << (BITS * (limbs - 2))) - 1
    a = (top << (BITS * (limbs - 2))) | low
    b = (top << (BITS * (limbs - 2))) | 1
    check_div(a, b)
    check_div(-a, b)


@pytest.mark.parametrize("fill", [0, 1, MASK - 1, MASK])
def test_max_heads(fill):
    for limbs in range(2, 7):
        low = 0
        for _ in range(limbs - 2):
            low = (low << BITS) | fill
        a = (UINT64_MAX << (BITS * (limbs - 2))) | low
        check_div(a, UINT64_MAX << (BITS * (limbs - 2)))
        check_div(a, (MASK << (BITS * (limbs - 2))) | low)
        check_div(a, (1 << (BITS * (limbs - 2))) | low)
        check_div(a, UINT64_MAX)


def test_small_top_limb_divisor():
    a = (1 << 300) - 12345
    check_div(a, (1 << BITS) + 5)
    check_div(a, (1 << 64) + MASK)


def test_prime_products_divide_exactly():
    gen = primefac.primegen()
    primes = [next(gen) for _ in range(200)][150:]
    product = BigInt(1)
    for p in primes:
        product *= p

    for p in primes:
        assert (product % p).sign == Sign.ZERO
        assert product // p * p == product

    q = BigInt(product)
    for p in primes:
        q //= p
    assert q == 1


def test_factors_multiply_back():
    n = 600851475143 * 1000000007
    product = BigInt(1)
    for p in primefac.primefac(n):
        assert primefac.isprime(p)
        product *= BigInt.from_int(p)
    assert product == n
    assert BigInt.from_int(n) % 1000000007 == 0
