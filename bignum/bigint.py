import logging
from typing import List, Tuple, Union

from bignum.errors import DivisionByZero, InvalidFormat, OutOfRange
from bignum.limbs import (
    BITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    MASK,
    UINT64_MAX,
    add_buffers,
    compare_buffers,
    from_limbs,
    get_head,
    left_shift,
    propagate_add_carry,
    propagate_sub_borrow,
    sub_buffers,
    to_limbs,
    trim,
)
from bignum.sign import Sign

logger = logging.getLogger(__name__)

DEC_BASE = 10
DIGITS = "0123456789"

Operand = Union['BigInt', int]


def _check_range(value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise OutOfRange(value, low, high)


class BigInt:
    """Arbitrary-precision signed integer.

    The value is kept as a sign and a little-endian list of 32-bit limbs with
    no most-significant zero limb. The sign is ZERO exactly when the list is
    empty. The `i*` methods and the augmented assignment operators mutate the
    receiver; every other operation returns a new value.
    """

    __slots__ = ('_sign', '_digits')

    def __init__(self, value: Union['BigInt', int, str] = 0) -> None:
        self._sign = Sign.ZERO
        self._digits: List[int] = []

        if isinstance(value, BigInt):
            self._assign(value)
        elif isinstance(value, bool):
            raise TypeError("BigInt() does not accept bool")
        elif isinstance(value, int):
            self._init_int(value)
        elif isinstance(value, str):
            self._init_str(value)
        else:
            raise TypeError(f"BigInt() argument must be int, str or BigInt, not {type(value).__name__!r}")

    def _init_int(self, value: int) -> None:
        _check_range(value, INT64_MIN, INT64_MAX)
        if value == 0:
            return

        # abs() also covers INT64_MIN, whose magnitude is INT64_MAX + 1.
        val_abs = abs(value)
        self._sign = Sign.of(value)
        self._digits.append(val_abs & MASK)
        if val_abs > MASK:
            self._digits.append(val_abs >> BITS)

    def _init_str(self, text: str) -> None:
        it = 0
        is_neg = False
        if text[:1] == '-':
            is_neg = True
            it = 1

        if it == len(text):
            raise InvalidFormat(text, "no digits")

        tmp = BigInt()
        for ch in text[it:]:
            if ch not in DIGITS:
                raise InvalidFormat(text, f"unexpected character {ch!r}")
            tmp.imul_int(DEC_BASE)
            tmp.iadd_int(ord(ch) - ord('0'))

        self._digits = tmp._digits
        if not self._digits:
            self._sign = Sign.ZERO
        elif is_neg:
            self._sign = Sign.NEGATIVE
        else:
            self._sign = Sign.POSITIVE

    @classmethod
    def parse(cls, text: str) -> 'BigInt':
        return cls(text)

    @classmethod
    def from_int(cls, value: int) -> 'BigInt':
        """Build from a Python int of any size."""
        res = cls()
        res._digits = to_limbs(value)
        res._sign = Sign.of(value)
        return res

    @classmethod
    def _from_parts(cls, sign: Sign, digits: List[int]) -> 'BigInt':
        res = cls()
        res._sign = sign
        res._digits = digits
        return res

    @classmethod
    def _coerce(cls, value: Operand) -> 'BigInt':
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        raise TypeError(f"unsupported operand type {type(value).__name__!r}")

    def _assign(self, other: 'BigInt') -> None:
        self._sign = other._sign
        self._digits = list(other._digits)

    def _clear(self) -> None:
        self._sign = Sign.ZERO
        self._digits = []

    # Accessors

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def digits(self) -> List[int]:
        return list(self._digits)

    def __bool__(self) -> bool:
        return self._sign != Sign.ZERO

    def __int__(self) -> int:
        return int(self._sign) * from_limbs(self._digits)

    __index__ = __int__

    def __len__(self) -> int:
        return len(self._digits)

    def __copy__(self) -> 'BigInt':
        return BigInt(self)

    def __deepcopy__(self, memo) -> 'BigInt':
        return BigInt(self)

    # Compound operations with a BigInt operand

    def iadd(self, other: 'BigInt') -> 'BigInt':
        if other._sign == Sign.ZERO:
            return self

        if self._sign == Sign.ZERO:
            self._assign(other)
            return self

        if other is self:
            other = BigInt(other)

        if self._sign == other._sign:
            add_buffers(self._digits, other._digits)
        else:
            self._sign = self._sign * sub_buffers(self._digits, other._digits)

        return self

    def isub(self, other: 'BigInt') -> 'BigInt':
        if other._sign == Sign.ZERO:
            return self

        if self._sign == Sign.ZERO:
            self._assign(other)
            self._sign = other._sign.opposite()
            return self

        if other is self:
            other = BigInt(other)

        if self._sign == other._sign:
            self._sign = self._sign * sub_buffers(self._digits, other._digits)
        else:
            add_buffers(self._digits, other._digits)

        return self

    def imul(self, other: 'BigInt') -> 'BigInt':
        if self._sign == Sign.ZERO:
            return self

        if other._sign == Sign.ZERO:
            self._clear()
            return self

        lhs = self._digits
        rhs = other._digits
        new_digits = [0] * (len(lhs) + len(rhs))

        for i, a in enumerate(lhs):
            for j, b in enumerate(rhs):
                carry = a * b
                k = i + j
                while carry:
                    carry += new_digits[k]
                    new_digits[k] = carry & MASK
                    carry >>= BITS
                    k += 1

        trim(new_digits)
        self._sign = self._sign * other._sign
        self._digits = new_digits
        return self

    def idiv(self, other: 'BigInt') -> 'BigInt':
        """Truncating division in place: the quotient rounds toward zero."""
        self._divide(other)
        return self

    def imod(self, other: 'BigInt') -> 'BigInt':
        """Remainder in place, with the sign of the dividend."""
        if other._sign == Sign.ZERO:
            raise DivisionByZero()

        quotient = BigInt(self).idiv(other)
        self.isub(quotient.imul(other))
        return self

    def _divide(self, other: 'BigInt') -> None:
        if other._sign == Sign.ZERO:
            raise DivisionByZero()

        if self._sign == Sign.ZERO or other == _ONE:
            return

        if compare_buffers(self._digits, other._digits) < 0:
            self._clear()
            return

        if other is self:
            other = BigInt(other)

        res_sign = self._sign * other._sign
        self._sign = Sign.POSITIVE
        div_result = BigInt()

        cmp = compare_buffers(self._digits, other._digits)
        while cmp > 0:
            div_result.iadd(self._div_one_iter(other))
            cmp = compare_buffers(self._digits, other._digits)

        if cmp == 0:
            div_result.iadd_int(1)

        self._digits = div_result._digits
        self._sign = res_sign

    def _div_one_iter(self, other: 'BigInt') -> 'BigInt':
        cur_sub = BigInt(other)
        cur_sub._sign = Sign.POSITIVE

        zero_cnt = max(len(self._digits) - len(other._digits), 1) - 1
        cur_sub.left_shift(zero_cnt)
        div_digit = self._div_digit(cur_sub)

        cur_sub.imul(div_digit)
        div_digit.left_shift(zero_cnt)

        self.isub(cur_sub)
        return div_digit

    def _div_digit(self, other: 'BigInt') -> 'BigInt':
        head_lhs = get_head(self._digits)
        head_rhs = get_head(other._digits, len(self._digits) - 2)

        if head_rhs == UINT64_MAX:
            return BigInt(1)

        digit = min(head_lhs // (head_rhs + 1), INT64_MAX)
        if digit == 0:
            # Equal lengths and equal two-limb heads: the quotient is exactly one.
            digit = 1
        logger.debug("division step: %d limbs left, quotient digit %d", len(self._digits), digit)
        return BigInt(digit)

    def left_shift(self, digit_num: int) -> 'BigInt':
        """Multiply the magnitude by 2**(32 * digit_num) in place."""
        left_shift(self._digits, digit_num)
        return self

    # Compound operations with an int32 operand

    def iadd_int(self, other: int) -> 'BigInt':
        _check_range(other, INT32_MIN, INT32_MAX)
        return self._add_small(abs(other), Sign.of(other))

    def isub_int(self, other: int) -> 'BigInt':
        _check_range(other, INT32_MIN, INT32_MAX)
        return self._add_small(abs(other), Sign.of(other).opposite())

    def imul_int(self, other: int) -> 'BigInt':
        _check_range(other, INT32_MIN, INT32_MAX)
        if self._sign == Sign.ZERO:
            return self

        if other == 0:
            self._clear()
            return self

        if other < 0:
            self._sign = self._sign.opposite()
            other = -other

        carry = 0
        for i, digit in enumerate(self._digits):
            carry += digit * other
            self._digits[i] = carry & MASK
            carry >>= BITS

        if carry:
            self._digits.append(carry)

        return self

    def _add_small(self, magnitude: int, sign: Sign) -> 'BigInt':
        if sign == Sign.ZERO:
            return self

        if self._sign == Sign.ZERO:
            self._sign = sign
            self._digits = [magnitude]
            return self

        if self._sign == sign:
            propagate_add_carry(self._digits, magnitude, 0)
            return self

        if len(self._digits) == 1:
            digit = self._digits[0]
            self._sign = self._sign * Sign.of(digit - magnitude)
            self._digits[0] = abs(digit - magnitude)
        else:
            propagate_sub_borrow(self._digits, magnitude, 0)

        trim(self._digits)
        return self

    # Increment and decrement

    def increment(self) -> 'BigInt':
        return self.iadd_int(1)

    def decrement(self) -> 'BigInt':
        return self.isub_int(1)

    def post_increment(self) -> 'BigInt':
        copy = BigInt(self)
        self.iadd_int(1)
        return copy

    def post_decrement(self) -> 'BigInt':
        copy = BigInt(self)
        self.isub_int(1)
        return copy

    # Copying operations

    def add(self, other: Operand) -> 'BigInt':
        return BigInt(self).__iadd__(other)

    def subtract(self, other: Operand) -> 'BigInt':
        return BigInt(self).__isub__(other)

    def multiply(self, other: Operand) -> 'BigInt':
        return BigInt(self).__imul__(other)

    def divide(self, other: Operand) -> 'BigInt':
        return BigInt(self).idiv(BigInt._coerce(other))

    def modulo(self, other: Operand) -> 'BigInt':
        return BigInt(self).imod(BigInt._coerce(other))

    def divmod(self, other: Operand) -> Tuple['BigInt', 'BigInt']:
        other = BigInt._coerce(other)
        quotient = self.divide(other)
        remainder = self.subtract(quotient.multiply(other))
        return quotient, remainder

    def negate(self) -> 'BigInt':
        res = BigInt(self)
        res._sign = self._sign.opposite()
        return res

    def abs(self) -> 'BigInt':
        res = BigInt(self)
        if res._sign == Sign.NEGATIVE:
            res._sign = Sign.POSITIVE
        return res

    # Operators

    def __iadd__(self, other: Operand) -> 'BigInt':
        if isinstance(other, int) and INT32_MIN <= other <= INT32_MAX:
            return self.iadd_int(other)
        return self.iadd(BigInt._coerce(other))

    def __isub__(self, other: Operand) -> 'BigInt':
        if isinstance(other, int) and INT32_MIN <= other <= INT32_MAX:
            return self.isub_int(other)
        return self.isub(BigInt._coerce(other))

    def __imul__(self, other: Operand) -> 'BigInt':
        if isinstance(other, int) and INT32_MIN <= other <= INT32_MAX:
            return self.imul_int(other)
        return self.imul(BigInt._coerce(other))

    def __ifloordiv__(self, other: Operand) -> 'BigInt':
        return self.idiv(BigInt._coerce(other))

    def __imod__(self, other: Operand) -> 'BigInt':
        return self.imod(BigInt._coerce(other))

    def __add__(self, other: Operand) -> 'BigInt':
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Operand) -> 'BigInt':
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Operand) -> 'BigInt':
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.multiply(other)

    def __floordiv__(self, other: Operand) -> 'BigInt':
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: Operand) -> 'BigInt':
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.modulo(other)

    def __divmod__(self, other: Operand) -> Tuple['BigInt', 'BigInt']:
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.divmod(other)

    def __radd__(self, other: int) -> 'BigInt':
        if not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __rsub__(self, other: int) -> 'BigInt':
        if not isinstance(other, int):
            return NotImplemented
        return BigInt._coerce(other).subtract(self)

    def __rmul__(self, other: int) -> 'BigInt':
        if not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    def __rfloordiv__(self, other: int) -> 'BigInt':
        if not isinstance(other, int):
            return NotImplemented
        return BigInt._coerce(other).divide(self)

    def __rmod__(self, other: int) -> 'BigInt':
        if not isinstance(other, int):
            return NotImplemented
        return BigInt._coerce(other).modulo(self)

    def __neg__(self) -> 'BigInt':
        return self.negate()

    def __pos__(self) -> 'BigInt':
        return BigInt(self)

    def __abs__(self) -> 'BigInt':
        return self.abs()

    # Comparison

    def compare(self, other: Operand) -> int:
        """Three-way comparison: -1, 0 or 1."""
        other = BigInt._coerce(other)
        if self._sign == other._sign:
            if self._sign == Sign.ZERO:
                return 0

            buf_cmp = compare_buffers(self._digits, other._digits)
            return buf_cmp if self._sign == Sign.POSITIVE else -buf_cmp

        return 1 if self._sign > other._sign else -1

    def __eq__(self, other) -> bool:
        if isinstance(other, bool) or not isinstance(other, (BigInt, int)):
            return NotImplemented
        other = BigInt._coerce(other)
        return self._sign == other._sign and self._digits == other._digits

    def __lt__(self, other) -> bool:
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, (BigInt, int)):
            return NotImplemented
        return self.compare(other) >= 0

    __hash__ = None

    # Text

    def to_string(self) -> str:
        if self._sign == Sign.ZERO:
            return "0"

        was_negative = self._sign == Sign.NEGATIVE
        val = self.abs()
        base = BigInt(DEC_BASE)
        buf: List[str] = []

        while val:
            quotient = val.divide(base)
            rem = val.isub(BigInt(quotient).imul_int(DEC_BASE))
            buf.append(DIGITS[rem._digits[0] if rem else 0])
            val = quotient

        if was_negative:
            buf.append('-')

        return ''.join(reversed(buf))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"


_ONE = BigInt(1)


def bi(text: str) -> BigInt:
    return BigInt(text)
