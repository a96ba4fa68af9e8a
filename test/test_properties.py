from hypothesis import assume, given, strategies as st

from bignum import BigInt, Sign
from bignum.limbs import BITS, MASK, UINT64_MAX

limb_edges = st.sampled_from([0, 1, MASK - 1, MASK, MASK + 1, UINT64_MAX, UINT64_MAX + 1])

magnitudes = st.one_of(
    st.integers(0, MASK),
    st.integers(0, UINT64_MAX),
    st.integers(0, 1 << 160),
    limb_edges,
)

ints = st.builds(lambda m, neg: -m if neg else m, magnitudes, st.booleans())
nonzero_ints = ints.filter(lambda x: x != 0)


def to_big(x: int) -> BigInt:
    return BigInt.from_int(x)


@given(ints)
def test_round_trip_text(x):
    b = to_big(x)
    assert str(b) == str(x)
    assert BigInt(str(b)) == b


@given(ints)
def test_canonical_form(x):
    b = to_big(x)
    digits = b.digits
    assert (b.sign == Sign.ZERO) == (digits == [])
    assert not digits or digits[-1] != 0
    assert all(0 <= d <= MASK for d in digits)


@given(ints, ints)
def test_add_matches_int(x, y):
    assert int(to_big(x) + to_big(y)) == x + y
    assert int(to_big(x) - to_big(y)) == x - y


@given(ints, ints)
def test_commutative(x, y):
    a, b = to_big(x), to_big(y)
    assert a + b == b + a
    assert a * b == b * a


@given(ints, ints, ints)
def test_associative_and_distributive(x, y, z):
    a, b, c = to_big(x), to_big(y), to_big(z)
    assert (a + b) + c == a + (b + c)
    assert (a * b) * c == a * (b * c)
    assert a * (b + c) == a * b + a * c


@given(ints)
def test_additive_inverse(x):
    a = to_big(x)
    r = a + (-a)
    assert r.sign == Sign.ZERO
    assert r.digits == []


@given(ints, nonzero_ints)
def test_division_identity(x, y):
    a, b = to_big(x), to_big(y)
    q, r = a // b, a % b
    assert q * b + r == a
    assert r.compare(0) == 0 or r.sign == a.sign
    assert abs(r) < abs(b)


@given(ints, st.integers(-(1 << 31), (1 << 31) - 1))
def test_int32_fast_paths(x, k):
    a = to_big(x)
    a += k
    assert int(a) == x + k
    a = to_big(x)
    a -= k
    assert int(a) == x - k
    a = to_big(x)
    a *= k
    assert int(a) == x * k


@given(ints, ints)
def test_compare_matches_int(x, y):
    a, b = to_big(x), to_big(y)
    assert a.compare(b) == (x > y) - (x < y)
    assert (a < b) == (x < y)
    assert (a == b) == (x == y)


@given(ints)
def test_post_increment(x):
    a = to_big(x)
    before = a.post_increment()
    assert int(before) == x
    assert int(a) == x + 1
    before = a.post_decrement()
    assert int(before) == x + 1
    assert int(a) == x


@given(st.integers(2, 6), st.integers(0, MASK), st.integers(0, MASK), st.data())
def test_division_adversarial_heads(limbs, top_fill, low_fill, data):
    # Heads at or near the limb maximum, sharing or almost sharing their top limbs.
    top = data.draw(st.sampled_from([MASK, MASK - 1, 1, top_fill]))
    low_bits = BITS * (limbs - 2)
    a = (((top << BITS) | MASK) << low_bits) | (low_fill * ((1 << low_bits) - 1) // MASK)
    b = data.draw(st.sampled_from([
        ((top << BITS) | MASK) << low_bits,
        (UINT64_MAX << low_bits) | low_fill,
        (MASK << low_bits) | low_fill,
        ((top_fill or 1) << low_bits) | MASK,
        low_fill or 3,
    ]))
    assume(a != 0 and b != 0)
    x, y = to_big(a), to_big(b)
    q, r = x // y, x % y
    assert int(q) == a // b
    assert int(r) == a % b
