class BigIntError(Exception):
    pass


class InvalidFormat(BigIntError, ValueError):
    def __init__(self, text: str, reason: str = "expected an optional '-' followed by decimal digits") -> None:
        self.text = text
        t_text = text
        if len(t_text) > 50:
            t_text = t_text[:50] + '...'
        super().__init__(f"invalid decimal integer {t_text!r}: {reason}")


class DivisionByZero(BigIntError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("division by zero")


class OutOfRange(BigIntError, OverflowError):
    def __init__(self, value: int, low: int, high: int) -> None:
        self.value = value
        super().__init__(f"{value} is outside [{low}, {high}]")
