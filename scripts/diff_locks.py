#!/usr/bin/env python3
"""Local CLI entrypoint to diff two lockfiles outside of GitHub Actions.

Usage:
  python scripts/diff_locks.py --base old/package-lock.json --head package-lock.json [--threshold 25]

This calls the same parse/diff/render functions used by the Action wrapper and
prints the comment body instead of publishing it.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from lock_changes.core import diff_locks, parse_lock
from lock_changes.errors import LockChangesError
from lock_changes.render import DEFAULT_COLLAPSIBLE_THRESHOLD, render_comment


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--base", type=Path, required=True, help="Lockfile before the change")
    parser.add_argument("--head", type=Path, required=True, help="Lockfile after the change")
    parser.add_argument("--threshold", type=int, default=DEFAULT_COLLAPSIBLE_THRESHOLD)
    args = parser.parse_args(argv)

    try:
        previous = parse_lock(args.base.read_text(encoding="utf-8"), args.base.name)
        current = parse_lock(args.head.read_text(encoding="utf-8"), args.head.name)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except LockChangesError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    changes = diff_locks(previous, current)
    if not changes:
        print("No lockfile changes.", file=sys.stderr)
        return 0

    print(render_comment(changes, max(args.threshold, 0)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
