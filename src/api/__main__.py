"""
どこで: `api.__main__`（`python -m api` / `pyxiclock`）。
何を: コマンドライン引数を `run_scene` に渡して起動する。
"""

from __future__ import annotations

import argparse
from typing import Sequence

from common.logging import setup_default_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pyxiclock", description="cursor clock animation")
    p.add_argument("--width", type=int, default=None, help="window width [px]")
    p.add_argument("--height", type=int, default=None, help="window height [px]")
    p.add_argument("--fps", type=int, default=None, help="frame rate")
    p.add_argument("--background", type=str, default=None, help="clear color (#RRGGBB)")
    p.add_argument("--palette", type=str, default=None, help="palette name")
    p.add_argument("--seed", type=int, default=None, help="noise seed")
    p.add_argument("--log-level", type=str, default=None, help="DEBUG/INFO/WARNING/...")
    p.add_argument(
        "--init-only", action="store_true", help="resolve settings and build the scene, then exit"
    )
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    from api.sketch import run_scene

    run_scene(
        width=args.width,
        height=args.height,
        fps=args.fps,
        background=args.background,
        palette=args.palette,
        seed=args.seed,
        init_only=args.init_only,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
