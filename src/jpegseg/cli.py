from __future__ import annotations
import argparse, json, logging, sys
from .binary.errors import StreamError

def cmd_info(args):
    from .binary.reader import _load_bytes, parse_file, summarize_file

    try:
        raw = _load_bytes(args.input)
    except OSError as e:
        print(f"cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    try:
        # Fast path: per-marker counts only
        if args.summary:
            for marker, count in summarize_file(raw).items():
                print(f"{marker.display_name}: {count}")
            return 0

        f = parse_file(raw)
    except StreamError as e:
        print(e.describe(), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(f.model_dump(mode="json")["segments"], indent=2))
    else:
        for segment in f.segments:
            print(segment.summary())
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="jpegseg", description="JPEG segment framing utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="Log every decoded segment")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="list the segments of a file")
    sp.add_argument("input", help="Path to a JPEG-style segment stream")
    fmt = sp.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="Print segments as JSON (payload as hex)")
    fmt.add_argument("--summary", action="store_true", help="Print a count of segments per marker")
    sp.set_defaults(func=cmd_info)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("jpegseg").setLevel(logging.DEBUG if ns.verbose else logging.WARNING)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
