"""
CLI entry point for parallel palindrome selection.

Usage:
    python -m palindrome_filter                          # 0 .. 1,000,000 on the auto backend
    python -m palindrome_filter --start -500 --stop 500000
    python -m palindrome_filter --backend processes --workers 4 --no-numba
    python -m palindrome_filter --list-backends          # Show available backends
"""
import argparse
import logging
import sys

import numpy as np

from .constants import INT32_MIN, INT32_MAX


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Parallel selection of decimal palindromes from a range of 32-bit integers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m palindrome_filter                       Filter 0 .. 1,000,000
  python -m palindrome_filter --stop 100000000      Larger range
  python -m palindrome_filter --backend numba       Use the prange kernel
  python -m palindrome_filter --list-backends       Show available backends
        """,
    )

    parser.add_argument('--start', type=int, default=0, help='First number (inclusive, default: 0)')
    parser.add_argument('--stop', type=int, default=1_000_000, help='Last number (exclusive, default: 1000000)')
    parser.add_argument('--backend', choices=['threads', 'processes', 'numba', 'auto'], default='auto',
                        help='Backend selection (default: auto-detect)')
    parser.add_argument('--workers', '-w', type=int, default=None, help='Worker threads/processes')
    parser.add_argument('--no-numba', action='store_true', help='Use the pure-Python predicate')
    parser.add_argument('--list-backends', action='store_true', help='List available backends')
    parser.add_argument('--show', type=int, default=0, metavar='N',
                        help='Print the N smallest palindromes found')
    parser.add_argument('--quiet', '-q', action='store_true', help='Minimal output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )

    # List backends
    if args.list_backends:
        from .backends import list_backends
        print("Available backends:")
        print(f"  {'Name':<10} {'Description':<40} {'Available'}")
        print(f"  {'-'*10} {'-'*40} {'-'*9}")
        for name, desc, avail in list_backends():
            status = "YES" if avail else "NO"
            print(f"  {name:<10} {desc:<40} {status}")
        return 0

    if args.start < INT32_MIN or args.stop - 1 > INT32_MAX:
        parser.error(f"range must lie within [{INT32_MIN}, {INT32_MAX}]")
    if args.stop < args.start:
        parser.error("--stop must not be below --start")

    # Select backend
    from .backends import get_backend
    try:
        backend = get_backend(args.backend, n_workers=args.workers, use_numba=not args.no_numba)
    except ValueError as e:
        parser.error(str(e))

    # Run
    from .selector import PalindromeFilter

    numbers = np.arange(args.start, args.stop, dtype=np.int64)
    result = PalindromeFilter(backend=backend).run(numbers, verbose=not args.quiet)

    if args.quiet:
        print(result.n_palindromes)
    if args.show > 0:
        print(" ".join(str(p) for p in sorted(result.palindromes)[:args.show]))

    return 0


if __name__ == '__main__':
    sys.exit(main())
