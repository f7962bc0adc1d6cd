from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

import questionary as q
import yaml
from questionary import Style
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from tqdm import tqdm
from colorama import init as colorama_init, Fore, Style as CStyle

from steamid_codec import SteamIDError, describe, parse_any
from steamid_codec.config import load_config, validate
from steamid_codec.enums import Universe
from steamid_codec.utils import read_ids


# ────────────────────────────── Initialization

colorama_init(autoreset=True)

THEME = Theme({"accent": "cyan", "hint": "cyan", "warn": "yellow"})
console = Console(theme=THEME)
err_console = Console(theme=THEME, stderr=True)


def app_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    return Path(__file__).parent


ENV = app_root() / ".env"

# ────────────────────────────── Styles (CMD-Safe)
CUSTOM_STYLE = Style(
    [
        ("qmark", "fg:yellow bold"),
        ("question", "fg:cyan bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:yellow bold"),
        ("selected", "fg:black bg:yellow bold"),
        ("highlighted", "fg:black bg:yellow bold"),
        ("instruction", "fg:gray"),
        ("text", ""),
        ("disabled", "fg:gray"),
    ]
)


def print_banner() -> None:
    print(Fore.CYAN + CStyle.BRIGHT + "steamid-codec" + CStyle.RESET_ALL)
    print(Fore.CYAN + "-" * 70 + "\n")


# ────────────────────────────── Conversion

def convert(s: str, cfg: Dict) -> Optional[Dict[str, str]]:
    """Parse one input and build its rows; reports failures and returns None."""
    try:
        sid = parse_any(s, default_universe=cfg["default_universe"])
    except SteamIDError as exc:
        err_console.print(escape(str(exc)), style="warn")
        return None
    rows = describe(sid)
    if cfg["zero_universe"]:
        rows["Steam2"] = rows["Steam2Legacy"]
    if not cfg["show_validity"]:
        rows.pop("Valid", None)
    return rows


def render(source: str, rows: Dict[str, str], cfg: Dict) -> None:
    if cfg["output"] == "json":
        sys.stdout.write(json.dumps({"input": source, **rows}) + "\n")
        return
    table = Table(title=Text(source), show_header=False, title_style="accent")
    table.add_column(style="hint")
    table.add_column()
    for key, value in rows.items():
        table.add_row(Text(key), Text(value))
    console.print(table)


def convert_all(inputs: List[str], cfg: Dict, progress: bool = False) -> int:
    """Convert and print every input; returns the number of failures."""
    failures = 0
    results = []
    for s in tqdm(inputs, desc="converting", unit="ids", disable=not progress, leave=False):
        rows = convert(s, cfg)
        if rows is None:
            failures += 1
            continue
        results.append((s, rows))
    for s, rows in results:
        render(s, rows, cfg)
    return failures


# ────────────────────────────── Prompts

def _guided_config(cfg: Dict) -> Dict:
    console.print("Settings (Press Enter to keep current)", style="accent")
    universe = q.select(
        "Universe for bare account ids:",
        choices=[u.name for u in Universe],
        default=Universe(cfg["default_universe"]).name,
        style=CUSTOM_STYLE,
    ).ask()
    if universe:
        cfg["default_universe"] = int(Universe[universe])
    zero = q.confirm(
        f"Print STEAM_0 for public accounts? [default {cfg['zero_universe']}]",
        default=cfg["zero_universe"],
        style=CUSTOM_STYLE,
    ).ask()
    if zero is not None:
        cfg["zero_universe"] = zero
    cfg["output"] = (
        q.select(
            "Output:",
            choices=["table", "json"],
            default=cfg["output"],
            style=CUSTOM_STYLE,
        ).ask()
        or cfg["output"]
    )
    return validate(cfg)


def _convert_file(cfg: Dict) -> None:
    s = q.path("File with one id per line", style=CUSTOM_STYLE).ask()
    if not s:
        return
    path = Path(s.strip()).expanduser()
    if not path.is_file():
        console.print(f"No such file: {escape(str(path))}", style="warn")
        return
    ids = read_ids(path)
    failures = convert_all(ids, cfg, progress=True)
    console.print(f"Converted {len(ids) - failures}/{len(ids)}", style="accent")


def interactive(cfg: Dict) -> int:
    print_banner()
    while True:
        choice = q.select(
            "What do you want to do?",
            choices=["Convert an ID", "Convert a file of IDs", "Settings", "Quit"],
            style=CUSTOM_STYLE,
        ).ask()

        if not choice or choice == "Quit":
            return 0
        if choice == "Convert an ID":
            s = q.text("SteamID64, STEAM_X:Y:Z, [U:1:N] or account id", style=CUSTOM_STYLE).ask()
            if s:
                convert_all([s], cfg)
        elif choice == "Convert a file of IDs":
            _convert_file(cfg)
        elif choice == "Settings":
            cfg = _guided_config(cfg)


# ────────────────────────────── Entry point

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="steamid",
        description="Convert Steam IDs between SteamID64, SteamID2 and SteamID3.",
    )
    parser.add_argument("ids", nargs="*", metavar="ID", help="SteamID64, STEAM_X:Y:Z, [L:U:N] or a 32-bit account id")
    parser.add_argument("--file", "-f", type=Path, help="Read ids from a file, one per line.")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per id.")
    parser.add_argument("--universe", "-u", type=int, help="Universe for bare 32-bit account ids.")
    parser.add_argument("--zero-universe", "-z", action="store_true", help="Print STEAM_0 for public accounts.")
    parser.add_argument("--config", "-c", type=Path, help="YAML file overriding the default settings.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, env_file=ENV)
        if args.universe is not None:
            cfg["default_universe"] = args.universe
        if args.zero_universe:
            cfg["zero_universe"] = True
        if args.json:
            cfg["output"] = "json"
        cfg = validate(cfg)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"Bad configuration: {escape(str(exc))}", style="warn")
        return 2

    inputs = list(args.ids)
    if args.file:
        try:
            inputs += read_ids(args.file)
        except OSError as exc:
            err_console.print(f"Cannot read {escape(str(args.file))}: {escape(str(exc))}", style="warn")
            return 2

    if not inputs:
        return interactive(cfg)
    return 1 if convert_all(inputs, cfg, progress=bool(args.file)) else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        console.print("\n[warn]ctrl-c; bye")
