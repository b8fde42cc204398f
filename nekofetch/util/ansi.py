import os, re, sys

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
def strip_ansi(s: str) -> str:
    return ANSI_RE.sub("", s or "")

def visible_len(s: str) -> int: return len(strip_ansi(s))

def ljust_visible(s: str, width: int) -> str:
    pad = max(0, width - visible_len(s))
    return s + (" " * pad)

USE_COLOR = sys.stdout.isatty() and not os.environ.get("NO_COLOR")
def c(txt, code): return f"\033[{code}m{txt}\033[0m" if USE_COLOR else txt
def rgb(txt, r: int, g: int, b: int): return c(txt, f"38;2;{r};{g};{b}")
def bold(txt, code): return c(txt, f"1;{code}")

# SGR foreground codes
BRIGHT_CYAN = "96"
