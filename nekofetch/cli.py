# nekofetch/cli.py
from __future__ import annotations
import argparse, logging, sys
from typing import List

from . import __version__
from .art import BLAHAJ, MINI_CAT, random_cat
from .app.flow import build_info_lines
from .config import load_config
from .context.system import gather_system_info
from .ui.display import display_info

logger = logging.getLogger("nekofetch")

REPO_URL = "https://github.com/ryawaa/nekofetch"

def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="nekofetch",
        description="A cat-themed system information tool.",
        epilog="Fields can be hidden in nekofetch_config.yml (see README).",
    )
    ap.add_argument("--no-ascii", action="store_true", help="do not display the ASCII art")
    ap.add_argument("--mini", action="store_true", help="display a minimal version")
    ap.add_argument("--caps", action="store_true", help="capitalize labels")
    ap.add_argument("--blahaj", "--haj", action="store_true", help="display the Blahaj ASCII art")
    ap.add_argument("--colors", action="store_true", help="display terminal colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="log diagnostics to stderr")
    ap.add_argument("--version", action="version",
                    version=f"%(prog)s {__version__}\nRepository: {REPO_URL}\n"
                            "Special thanks to Joan G. Stark for ASCII art inspiration")
    return ap.parse_args(argv)

def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)

    if args.blahaj:
        sys.stdout.write(BLAHAJ)
        return 0

    setup_logging(args.verbose)

    config = load_config()
    info = gather_system_info()
    lines = build_info_lines(info, config, caps=args.caps, mini=args.mini)

    if args.mini:
        art = MINI_CAT
    elif args.no_ascii:
        art = []
    else:
        art = random_cat()
    logger.debug("mode=%s caps=%s art rows=%d info lines=%d",
                 "mini" if args.mini else "full", args.caps, len(art), len(lines))

    display_info(art, lines, show_colors=args.colors and not args.mini)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
