import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from bignum.bigint import BigInt
from bignum.errors import BigIntError

OPS: Dict[str, Callable[[BigInt, BigInt], BigInt]] = {
    'a': BigInt.add,
    's': BigInt.subtract,
    'm': BigInt.multiply,
    'd': BigInt.divide,
    'r': BigInt.modulo,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="bignum-driver", description="Run one BigInt operation.")

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('-c', '--parse', action='store_true', help="Parse a number and print it back.")
    group.add_argument('-a', '--add', dest='op', action='store_const', const='a', help="Add two numbers.")
    group.add_argument('-s', '--sub', dest='op', action='store_const', const='s', help="Subtract two numbers.")
    group.add_argument('-m', '--mul', dest='op', action='store_const', const='m', help="Multiply two numbers.")
    group.add_argument('-d', '--div', dest='op', action='store_const', const='d', help="Divide two numbers.")
    group.add_argument('-r', '--mod', dest='op', action='store_const', const='r', help="Remainder of two numbers.")

    parser.add_argument('-f', '--file', type=Path, help="Read operands from this file and write the result back into it.")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log every long division step.")
    parser.add_argument('operands', nargs='*')

    return parser.parse_args(argv)


def read_operands(path: Path) -> List[str]:
    with open(path, 'r') as f:
        return [line.strip() for line in f if line.strip()]


def write_result(path: Path, result: str, elapsed: str) -> None:
    with open(path, 'w') as f:
        f.write(result)
        f.write('\n')
        f.write(elapsed)
        f.write('\n')


def run(args: argparse.Namespace) -> str:
    operands = read_operands(args.file) if args.file else args.operands
    expected = 1 if args.parse else 2
    if len(operands) != expected:
        raise ValueError(f"expected {expected} operand(s), found {len(operands)}")

    nums = [BigInt(x) for x in operands]
    if args.parse:
        return nums[0].to_string()
    return OPS[args.op](nums[0], nums[1]).to_string()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start = time.perf_counter()
    try:
        result = run(args)
    except (BigIntError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    elapsed = f"{(time.perf_counter() - start) * 1000:.3f}ms"

    if args.file:
        write_result(args.file, result, elapsed)
    print(result)
    print(elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
