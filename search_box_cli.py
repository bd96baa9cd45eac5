#!/usr/bin/env python3
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import TextIO

from search_box.api import import_dataset, new_session, search
from search_box.config import SearchBoxConfig
from search_box.errors import ConfigError, DatasetError
from search_box.highlight import render_highlight
from search_box.session import SearchSession
from search_box.utils import json_dumps

logger = logging.getLogger("search_box")

REPL_KEYS = {
    ":down": "ArrowDown",
    ":up": "ArrowUp",
    ":enter": "Enter",
    ":esc": "Escape",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search box with cached suggestions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log cache hits and misses")
    parser.add_argument("--data", default="", help="Dataset path (.json or SQLite); built-in list if omitted")
    parser.add_argument("--capacity", type=int, default=None, help="Result cache capacity (config default if omitted)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    search_cmd = sub.add_parser("search", help="Filter the dataset once")
    search_cmd.add_argument("query", help="Query text")
    search_cmd.add_argument("--json", action="store_true")

    import_cmd = sub.add_parser("import", help="Copy a dataset into a SQLite table")
    import_cmd.add_argument("source", help="Source dataset (.json or SQLite)")
    import_cmd.add_argument("db_path", help="Target SQLite database")

    sub.add_parser("repl", help="Interactive search box (:down :up :enter :esc :clear :quit)")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SearchBoxConfig:
    cfg = SearchBoxConfig()
    changes = {}
    if args.data:
        changes["data_path"] = Path(args.data)
    if args.capacity is not None:
        changes["cache_capacity"] = args.capacity
    return dataclasses.replace(cfg, **changes) if changes else cfg


def render(session: SearchSession, out: TextIO) -> None:
    if session.no_results:
        print("No results found", file=out)
        return
    for idx, rec in enumerate(session.visible_suggestions):
        marker = ">" if idx == session.active_index else " "
        print(f"{marker} {render_highlight(rec.name, session.highlight)}", file=out)


def run_repl(session: SearchSession, inp: TextIO, out: TextIO) -> None:
    for raw in inp:
        line = raw.rstrip("\n")
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd in REPL_KEYS:
            picked = session.handle_key(REPL_KEYS[cmd])
            if picked is not None:
                print(f"Selected: {picked.name}", file=out)
        elif cmd == ":clear":
            session.clear_input()
        else:
            session.type_text(line)
            session.flush()
        render(session, out)
    logger.info(f"Session cache stats: {session.stats.to_dict()}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        cfg = build_config(args)
        if args.cmd == "search":
            out = search(args.query, cfg=cfg)
            if not args.json:
                for row in out["results"]:
                    print(render_highlight(row["name"], out["query"]))
                if not out["results"] and out["query"]:
                    print("No results found")
                return
        elif args.cmd == "import":
            out = import_dataset(args.source, args.db_path, cfg)
        elif args.cmd == "repl":
            run_repl(new_session(cfg), sys.stdin, sys.stdout)
            return
        else:
            raise SystemExit(f"Unknown command: {args.cmd}")
    except DatasetError as e:
        raise SystemExit(f"Dataset error: {e}") from e
    except ConfigError as e:
        raise SystemExit(f"Config error: {e}") from e

    print(json_dumps(out))


if __name__ == "__main__":
    main()
