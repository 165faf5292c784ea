# typeahead/rank_cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
from loguru import logger

from .config import parse_emoji
from .emoji import sort_emojis
from .triage import triage

EMOJI_COLUMNS = ("emoji_name", "emoji_code", "reaction_type", "emoji_url")

# ---------- IO helpers ----------

def _norm_col(s: str) -> str:
    return str(s).strip().lower().replace(" ", "_").replace("-", "_")


def _read_any(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    ext = path.suffix.lower()
    if ext == ".xlsx":
        df = pd.read_excel(path, dtype=str)
    else:
        df = pd.read_csv(path, dtype=str, encoding="utf-8", keep_default_na=False)
    df.columns = [_norm_col(c) for c in df.columns]
    logger.info("Loaded {} candidate rows from {}", len(df), path)
    return df


def load_candidates(path: Path, column: str = "name") -> List[str]:
    df = _read_any(path)
    col = _norm_col(column)
    if col not in df.columns:
        raise ValueError(f"Expected column '{column}'. Found: {list(df.columns)}")
    return [str(v) for v in df[col].tolist() if isinstance(v, str) and v]


def load_emojis(path: Path) -> list:
    df = _read_any(path)
    if "emoji_name" not in df.columns:
        raise ValueError(f"Expected column 'emoji_name'. Found: {list(df.columns)}")
    missing = [c for c in EMOJI_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("Emoji file has no {} column(s); using defaults", missing)

    emojis = []
    for _, row in df.iterrows():
        # blank cells mean "absent": realm rows carry no emoji_code
        raw = {c: row[c] for c in EMOJI_COLUMNS if c in df.columns and isinstance(row[c], str) and row[c]}
        if "reaction_type" not in raw:
            raw["reaction_type"] = "unicode_emoji" if "emoji_code" in raw else "realm_emoji"
        emojis.append(parse_emoji(raw))
    return emojis


# ---------- CLI ----------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Rank typeahead candidates from a CSV or .xlsx file.")
    ap.add_argument("--candidates", type=Path, required=True,
                    help="CSV or .xlsx file with one candidate per row")
    ap.add_argument("--query", required=True, help="Query as the user typed it")
    ap.add_argument("--column", default="name",
                    help="Column holding the candidate strings (ignored with --emoji)")
    ap.add_argument("--emoji", action="store_true",
                    help="Treat rows as emoji (emoji_name, emoji_code, reaction_type)")
    ap.add_argument("--limit", type=int, default=10)
    ap.add_argument("--verbose", action="store_true", help="Show debug logs")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")
    logger.enable("typeahead")

    if args.emoji:
        ranked = sort_emojis(load_emojis(args.candidates), args.query)
        for emoji in ranked[: args.limit]:
            code = "realm" if emoji.is_realm_emoji else emoji.emoji_code
            print(f"{emoji.emoji_name}\t{code}")
        return 0

    result = triage(args.query, load_candidates(args.candidates, args.column), lambda s: s)
    for i, name in enumerate(result.matches[: args.limit], start=1):
        print(f"{i:>3}. {name}")
    print(f"matches={len(result.matches)} rest={len(result.rest)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
