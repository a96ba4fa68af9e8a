from enum import IntEnum


class Sign(IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    def __mul__(self, other) -> 'Sign':
        if not isinstance(other, Sign):
            return NotImplemented
        # Zero absorbs, equal signs give positive, different give negative.
        return Sign(int(self) * int(other))

    def opposite(self) -> 'Sign':
        return Sign(-int(self))

    @staticmethod
    def from_cmp(cmp: int) -> 'Sign':
        return Sign((cmp > 0) - (cmp < 0))

    @staticmethod
    def of(value: int) -> 'Sign':
        return Sign((value > 0) - (value < 0))
