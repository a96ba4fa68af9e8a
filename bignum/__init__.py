from bignum.bigint import BigInt, bi
from bignum.errors import BigIntError, DivisionByZero, InvalidFormat, OutOfRange
from bignum.sign import Sign
from bignum.textio import read_all, read_bigint, write_bigint

__all__ = [
    'BigInt',
    'BigIntError',
    'DivisionByZero',
    'InvalidFormat',
    'OutOfRange',
    'Sign',
    'bi',
    'read_all',
    'read_bigint',
    'write_bigint',
]
