from typing import List

from bignum.sign import Sign

BITS = 32
MAX_VALUE = (1 << BITS)
MASK = MAX_VALUE - 1

UINT64_MAX = (1 << 64) - 1
INT64_MAX = (1 << 63) - 1
INT64_MIN = -(1 << 63)
INT32_MAX = (1 << 31) - 1
INT32_MIN = -(1 << 31)


def to_limbs(n: int) -> List[int]:
    a: List[int] = []
    n = abs(n)
    while n:
        a.append(n & MASK)
        n >>= BITS
    return a


def from_limbs(l: List[int]) -> int:
    a = 0
    for x in l[::-1]:
        a = (a << BITS) | x

    return a


def trim(digits: List[int]) -> None:
    while digits and digits[-1] == 0:
        digits.pop()


def compare_buffers(lhs: List[int], rhs: List[int]) -> int:
    """Three-way compare of two canonical magnitudes: -1, 0 or 1."""
    if len(lhs) != len(rhs):
        return 1 if len(lhs) > len(rhs) else -1

    for l, r in zip(reversed(lhs), reversed(rhs)):
        if l != r:
            return 1 if l > r else -1

    return 0


def propagate_add_carry(digits: List[int], carry: int, start: int) -> None:
    i = start
    while carry and i < len(digits):
        carry += digits[i]
        digits[i] = carry & MASK
        carry >>= BITS
        i += 1

    if carry:
        digits.append(carry)


def propagate_sub_borrow(digits: List[int], borrow: int, start: int) -> None:
    # The caller guarantees the magnitude in `digits` is at least `borrow`.
    i = start
    while borrow:
        digit = digits[i]
        if digit >= borrow:
            digits[i] = digit - borrow
            borrow = 0
        else:
            digits[i] = MAX_VALUE - borrow + digit
            borrow = 1
        i += 1


def add_buffers(lhs: List[int], rhs: List[int]) -> None:
    """Add the magnitude `rhs` into `lhs`, growing it as needed."""
    carry = 0
    common = min(len(lhs), len(rhs))

    for i in range(common):
        carry += lhs[i] + rhs[i]
        lhs[i] = carry & MASK
        carry >>= BITS

    for i in range(common, len(rhs)):
        carry += rhs[i]
        lhs.append(carry & MASK)
        carry >>= BITS

    propagate_add_carry(lhs, carry, len(rhs))


def _sub_common(larger: List[int], smaller: List[int], out: List[int]) -> int:
    size = len(smaller)
    if len(out) < len(larger):
        out.extend(larger[len(out):])

    borrow = 0
    for i in range(size):
        digit = larger[i]
        borrow += smaller[i]
        if digit >= borrow:
            out[i] = digit - borrow
            borrow = 0
        else:
            out[i] = MAX_VALUE - borrow + digit
            borrow = 1

    return borrow


def sub_buffers(lhs: List[int], rhs: List[int]) -> Sign:
    """Store |lhs - rhs| into `lhs` and return the sign of lhs - rhs.

    `rhs` is only read. When it holds the larger magnitude the difference is
    still written into `lhs` and the reported sign is negative.
    """
    cmp = compare_buffers(lhs, rhs)
    if cmp == 0:
        lhs.clear()
        return Sign.ZERO

    if cmp > 0:
        borrow = _sub_common(lhs, rhs, lhs)
        start = len(rhs)
    else:
        start = len(lhs)
        borrow = _sub_common(rhs, lhs, lhs)

    propagate_sub_borrow(lhs, borrow, start)
    trim(lhs)
    return Sign.from_cmp(cmp)


def left_shift(digits: List[int], count: int) -> None:
    if count <= 0 or not digits:
        return
    digits[:0] = [0] * count


def get_head(digits: List[int], start_index: int = 0) -> int:
    """Top one or two limbs of `digits` as a single (up to 64 bit) value.

    A limb only takes part when its index is at least `start_index`, so a
    shorter buffer yields the head aligned with a longer one.
    """
    head = 0
    size = len(digits)

    if digits and start_index <= size - 1:
        head += digits[-1]

    if size > 1 and start_index <= size - 2:
        head <<= BITS
        head |= digits[-2]

    return head
