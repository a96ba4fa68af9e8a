import argparse
import os
import random
from pathlib import Path
from typing import List, Tuple

import primefac

from bignum import BigInt
from bignum.limbs import BITS, MASK, UINT64_MAX

CURRENT_PATH = Path(os.path.realpath(__file__)) / ".." / ".." / "test" / "fuzzer"
FILE_PATH = (CURRENT_PATH / "division_cases.txt").resolve()

Case = Tuple[int, int]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="Division Case Generator")

    parser.add_argument('-l', '--limbs', type=int, help="Maximum number of limbs in a dividend.", default=8)
    parser.add_argument('-n', '--count', type=int, help="Random cases per family.", default=10)
    parser.add_argument('-w', '--write', help=f"Write the cases to {FILE_PATH.name}.", action='store_true')

    return parser.parse_args()


def from_top(top: List[int], low_limbs: int, fill: int) -> int:
    # `top` is most-significant first; the low limbs are all `fill`.
    n = 0
    for x in top:
        n = (n << BITS) | x
    for _ in range(low_limbs):
        n = (n << BITS) | fill
    return n


def boundary_heads(max_limbs: int) -> List[Case]:
    cases: List[Case] = []
    for limbs in range(2, max_limbs + 1):
        for fill in (0, 1, MASK - 1, MASK):
            full = from_top([MASK, MASK], limbs - 2, fill)
            cases.append((full, from_top([MASK, MASK], limbs - 2, 0)))
            cases.append((full, from_top([MASK], limbs - 2, fill)))
            cases.append((full, from_top([1], limbs - 2, fill)))
            cases.append((from_top([1, 0], limbs - 2, fill), from_top([MASK], limbs - 2, MASK)))
    cases.append((UINT64_MAX, UINT64_MAX - 1))
    cases.append((UINT64_MAX + 1, UINT64_MAX))
    return cases


def equal_heads(max_limbs: int, count: int) -> List[Case]:
    cases: List[Case] = []
    for _ in range(count):
        limbs = random.randint(3, max(3, max_limbs))
        top = [random.randint(1, MASK), random.randint(0, MASK)]
        low = random.getrandbits(BITS * (limbs - 2))
        a = (from_top(top, limbs - 2, 0)) | low
        b = (from_top(top, limbs - 2, 0)) | random.getrandbits(BITS * (limbs - 2))
        cases.append((max(a, b), min(a, b) or 1))
    return cases


def prime_products(count: int) -> List[Case]:
    cases: List[Case] = []
    gen = primefac.primegen()
    primes = []
    for p in gen:
        if p > 1 << 16:
            break
        primes.append(p)

    for _ in range(count):
        divisor = 1
        for p in random.sample(primes, 3):
            divisor *= p
        quotient = random.getrandbits(BITS * 3) | 1
        cases.append((divisor * quotient, divisor))
        cases.append((divisor * quotient + divisor - 1, divisor))
    return cases


def check(a: int, b: int) -> bool:
    q = BigInt.from_int(a).divide(BigInt.from_int(b))
    r = BigInt.from_int(a).modulo(BigInt.from_int(b))
    eq, er = a // b, a % b
    if int(q) != eq or int(r) != er:
        print(f"{a} / {b} -- \x1b[31mFAILED\x1b[0m\n\tgot {int(q)} rem {int(r)}, expected {eq} rem {er}")
        return False
    return True


def write_cases(path: Path, cases: List[Case]) -> None:
    with open(path, "w") as f:
        for a, b in cases:
            f.write(f"{a}\n{b}\n{a // b}\n{a % b}\n\n")


def main() -> None:
    args = parse_args()
    random.seed(101)

    cases = boundary_heads(args.limbs) + equal_heads(args.limbs, args.count) + prime_products(args.count)
    failed = sum(not check(a, b) for a, b in cases)
    if failed:
        print(f"{failed} of {len(cases)} cases \x1b[31mFAILED\x1b[0m")
    else:
        print(f"{len(cases)} cases \x1b[32mPASSED\x1b[0m")

    if args.write:
        write_cases(FILE_PATH, cases)


if __name__ == "__main__":
    main()
