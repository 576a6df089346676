from __future__ import annotations

"""
aegraph CLI

Lists the sites where an inference rule applies to a graph, or applies a
rule at one site, and emits JSON.

  python3 -m aegraph.aegraph_cli rules
  python3 -m aegraph.aegraph_cli list double-cut "([[C]])" --pretty
  python3 -m aegraph.aegraph_cli apply double-cut "[0]" "([[C]])"
  echo "(A, [A])" | python3 -m aegraph.aegraph_cli list deiteration --stdin

Contract: emits JSON with schema tag + schema_doc.
Exit codes: 0 ok, 1 rule could not be applied at the address, 2 bad input.
"""

import argparse
import datetime
import hashlib
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from aegraph.core.graph import Graph
from aegraph.core.graph_parser import parse_graph
from aegraph.errors import AEGraphError, InvalidAddressError
from aegraph.rule_registry import get_rule, list_rule_names
from aegraph.settings import configure_logging, load_settings, with_schema_fields

SCHEMA_TAG = "aegraph-rule-run.v1"
SCHEMA_DOC = "docs/rule_run_schema.md"

logger = logging.getLogger(__name__)


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(action: str, rule: str, graph: str, address: Optional[List[int]]) -> str:
    payload = json.dumps(
        {"action": action, "rule": rule, "graph": graph, "address": address},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _resolve_graph_text(args: argparse.Namespace) -> str:
    """
    Exactly one source:
      1) positional graph
      2) --file
      3) --stdin
    """
    sources = sum([args.graph is not None, args.file is not None, bool(args.stdin)])
    if sources != 1:
        raise ValueError("Provide exactly one graph source: positional graph OR --stdin OR --file")
    if args.graph is not None:
        return args.graph.strip()
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8").strip()
    return sys.stdin.read().strip()


def _parse_address(text: str) -> List[int]:
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Address must be JSON. Parse error: {e}") from e

    if not isinstance(obj, list):
        raise ValueError("Address JSON must be a list of integers (e.g. [0,1]).")
    for i, v in enumerate(obj):
        # bool is an int subclass, but we don't want True/False silently.
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"Address[{i}] is not an integer: {v!r}")
        if v < 0:
            raise ValueError(f"Address[{i}] is negative: {v}")
    return obj


def _emit(payload: Dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _stats(g: Graph) -> Dict[str, int]:
    return {"size": g.size(), "depth": g.depth(), "cuts": g.count_nodes() - 1}


def _base_payload(action: str, rule: str, g: Graph, address: Optional[List[int]]) -> Dict[str, Any]:
    return {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "action": action,
        "rule": rule,
        "input": str(g),
        "ok": True,
        "warnings": [],
        "stats": _stats(g),
        "meta": {
            "tool": "aegraph_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(action, rule, str(g), address),
            },
        },
    }


def _cmd_list(args: argparse.Namespace, g: Graph) -> Dict[str, Any]:
    rule = get_rule(args.rule)
    options = {}
    if args.level is not None:
        if "level" not in rule.find_options:
            raise ValueError(f"--level is not supported by rule {rule.name!r}")
        options["level"] = args.level

    found = rule.find(g, **options)
    payload = _base_payload("list", rule.name, g, None)
    payload["candidates"] = sorted(list(a) for a in found)
    logger.info("%s: %d candidate(s) in %s", rule.name, len(found), g)
    return payload


def _cmd_apply(args: argparse.Namespace, g: Graph) -> Dict[str, Any]:
    rule = get_rule(args.rule)
    address = _parse_address(args.address)
    payload = _base_payload("apply", rule.name, g, address)
    payload["address"] = address
    try:
        out = rule.apply(g, address)
    except InvalidAddressError as e:
        logger.warning("%s not applicable at %s: %s", rule.name, address, e)
        payload["ok"] = False
        payload["output"] = None
        payload["warnings"].append(str(e))
        return payload
    payload["output"] = str(out)
    payload["output_stats"] = _stats(out)
    return payload


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="aegraph",
        description="Enumerate or apply existential graph inference rules and emit JSON.",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc path and exit.")
    sub = ap.add_subparsers(dest="command")

    sub.add_parser("rules", help="List registered rule names.")

    def _add_rule_and_address(p: argparse.ArgumentParser, with_address: bool) -> None:
        # the optional graph positional must come last so flags can sit anywhere
        p.add_argument("rule", help="Rule name (see `aegraph rules`).")
        if with_address:
            p.add_argument("address", help='Address as a JSON list, e.g. "[0, 1]".')
        p.add_argument("graph", nargs="?", default=None, help='Graph text, e.g. "(A, [B])".')
        p.add_argument("--stdin", action="store_true", help="Read graph text from stdin.")
        p.add_argument("--file", default=None, help="Read graph text from a file path.")
        p.add_argument("--pretty", action="store_true", help="Pretty-print JSON output.")

    p_list = sub.add_parser("list", help="List every address where the rule applies.")
    _add_rule_and_address(p_list, with_address=False)
    p_list.add_argument("--level", type=int, default=None, help="Starting nesting level (erasure only).")

    p_apply = sub.add_parser("apply", help="Apply the rule at one address.")
    _add_rule_and_address(p_apply, with_address=True)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    configure_logging(settings)

    ap = build_parser()
    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC}")
        return 0

    if args.command == "rules":
        for name in list_rule_names():
            print(f"{name}\t{get_rule(name).summary}")
        return 0

    if args.command not in ("list", "apply"):
        ap.print_help()
        return 2

    try:
        g = parse_graph(_resolve_graph_text(args))
        if args.command == "list":
            payload = _cmd_list(args, g)
        else:
            payload = _cmd_apply(args, g)
    except (AEGraphError, ValueError, KeyError, OSError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    _emit(with_schema_fields(payload, kind="rule-run", settings=settings), pretty=bool(args.pretty))
    return 0 if payload["ok"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
