from __future__ import annotations
import argparse, base64, json, logging, sys
from pathlib import Path
from typing import Any, List, Optional
from pydantic import ValidationError

from .binary.errors import MessagePackError
from .binary.reader import decode_prefix, iter_values
from .models.value import Array, Binary, Extended, Map, Nil, String, Value

log = logging.getLogger("msgunpack")


def to_jsonable(v: Value) -> Any:
    """Plain JSON-ready structure for printing; bytes go out as base64."""
    if isinstance(v, Nil):
        return None
    if isinstance(v, Binary):
        return {"$binary": base64.b64encode(v.value).decode("ascii")}
    if isinstance(v, Extended):
        return {"$ext": v.type, "data": base64.b64encode(v.data).decode("ascii")}
    if isinstance(v, Array):
        return [to_jsonable(x) for x in v.items]
    if isinstance(v, Map):
        if all(isinstance(k, String) for k in v.entries):
            return {k.value: to_jsonable(x) for k, x in v.entries.items()}
        return [[to_jsonable(k), to_jsonable(x)] for k, x in v.entries.items()]
    return v.value


def cmd_info(args) -> int:
    raw = Path(args.input).read_bytes()
    log.debug("read %d bytes from %s", len(raw), args.input)

    if args.all or args.summary:
        values: List[Value] = list(iter_values(raw, args.compat, max_depth=args.max_depth))
        consumed = len(raw)
    else:
        value, cur = decode_prefix(raw, args.compat, max_depth=args.max_depth)
        values = [value]
        consumed = cur.tell()
        if cur.remaining():
            log.info("ignoring %d trailing bytes after first value", cur.remaining())

    if args.summary:
        print(f"values={len(values)}, bytes={consumed}")
        return 0

    out = [to_jsonable(v) for v in values] if args.all else to_jsonable(values[0])
    print(json.dumps(out, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="msgunpack", description="MessagePack decoding utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="decode a file and print the value(s) as JSON")
    sp.add_argument("input", help="Path to a file of MessagePack bytes")
    sp.add_argument("--all", action="store_true", help="Decode every concatenated top-level value")
    sp.add_argument("--compat", action="store_true", help="Read string tags as raw binary")
    sp.add_argument("--max-depth", type=int, default=None, help="Reject containers nested deeper than N")
    sp.add_argument("--summary", action="store_true", help="Only print value count and bytes consumed")
    sp.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Enable debug logging")
    sp.set_defaults(func=cmd_info)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if not hasattr(ns, "func"):
        p.print_help()
        return 2

    try:
        return ns.func(ns)
    except MessagePackError as e:
        print(f"msgunpack: error [{type(e).__name__}]: {e}", file=sys.stderr)
        return 2
    except ValidationError as e:
        print(f"msgunpack: invalid option: {e.errors()[0]['msg']}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
