"""Command line entry point: extract the entries named in a list file."""

from __future__ import annotations

import argparse
import sys

from .unpacker import WDFUnpacker, WdfError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="wdfunpack", description="Extract files named in a list from a WDF archive."
    )
    parser.add_argument("wdf", help="archive to read")
    parser.add_argument("lst", help="list file with one entry name per line")
    parser.add_argument("out_dir", help="directory to extract into")
    args = parser.parse_args(argv)

    try:
        with WDFUnpacker(args.wdf) as unpacker:
            batch = unpacker.extract_by_lst(args.lst, args.out_dir)
    except (OSError, WdfError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in batch.logs:
        print(line)
    print(f"Done: {batch.success} extracted, {batch.fail} failed")
    return 0


if __name__ == "__main__":
    sys.exit(main())