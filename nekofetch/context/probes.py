# nekofetch/context/probes.py
"""
Platform probes for facts that need an external command.

- One registry per fact, keyed by platform ("linux", "darwin", "windows").
- Each entry is an ordered list of (command, parser) pairs; the first pair
  whose command exists and whose parser returns a non-empty string wins.
- A missing binary, non-zero exit, timeout or unparseable output is just
  "no answer": the caller falls back to "Unknown".

Public API:
    current_platform() -> str
    probe(fact: str, platform_key: str | None = None) -> str
"""

from __future__ import annotations
import logging
import shutil
import subprocess
import sys
from typing import Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

Parser = Callable[[str], str]
Probe = Tuple[List[str], Parser]

# ---------------- Running ----------------

def _run(cmd: List[str], timeout: int = 10) -> str:
    if not shutil.which(cmd[0]):
        logger.debug("%s not installed", cmd[0])
        return ""
    try:
        r = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout,
                           errors="replace")
    except Exception as e:
        logger.debug("%s failed: %s", " ".join(cmd), e)
        return ""
    if r.returncode != 0:
        logger.debug("%s exited %d", " ".join(cmd), r.returncode)
        return ""
    return r.stdout

def current_platform() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return sys.platform

# ---------------- Parsers ----------------

def _count(manager: str) -> Parser:
    def parse(out: str) -> str:
        n = sum(1 for l in out.splitlines() if l.strip())
        return f"{n} ({manager})" if n else ""
    return parse

def _after(prefix: str) -> Parser:
    """Value of the first line starting with `prefix` (leading space ignored)."""
    def parse(out: str) -> str:
        for line in out.splitlines():
            line = line.strip()
            if line.startswith(prefix):
                return line[len(prefix):].strip()
        return ""
    return parse

def _xdpyinfo_dimensions(out: str) -> str:
    # "  dimensions:    1920x1080 pixels (508x285 millimeters)"
    for line in out.splitlines():
        if "dimensions:" in line:
            parts = line.split()
            if len(parts) >= 2:
                return parts[1]
    return ""

def _lspci_gpu(out: str) -> str:
    # 00:02.0 "VGA compatible controller" "Intel Corporation" "UHD Graphics 620" -r07 ...
    for line in out.splitlines():
        if "VGA compatible controller" in line or "3D controller" in line:
            parts = line.split('"')
            if len(parts) >= 6:
                return f"{parts[3]} {parts[5]}".strip()
            if len(parts) >= 4:
                return parts[3].strip()
    return ""

def _wmic_first(out: str) -> str:
    # header line, then one row per device, padded and separated by blank lines
    rows = [l.strip() for l in out.splitlines() if l.strip()]
    return rows[1] if len(rows) >= 2 else ""

def _wmic_resolution(out: str) -> str:
    # CurrentHorizontalResolution  CurrentVerticalResolution
    # 1920                         1080
    for line in out.splitlines()[1:]:
        parts = line.split()
        if len(parts) == 2 and all(p.isdigit() for p in parts):
            return f"{parts[0]}x{parts[1]}"
    return ""

def _strip_quotes(out: str) -> str:
    return out.strip().strip("'\"")

def _first_line(out: str) -> str:
    lines = out.strip().splitlines()
    return lines[0].strip() if lines else ""

# ---------------- Registry ----------------

PROBES: Dict[str, Dict[str, List[Probe]]] = {
    "packages": {
        "linux": [
            (["dpkg-query", "-f", ".\n", "-W"], _count("dpkg")),
            (["pacman", "-Qq"], _count("pacman")),
            (["rpm", "-qa"], _count("rpm")),
        ],
        "darwin": [
            (["brew", "list", "-1"], _count("brew")),
        ],
    },
    "resolution": {
        "linux": [
            (["xdpyinfo"], _xdpyinfo_dimensions),
        ],
        "darwin": [
            (["system_profiler", "SPDisplaysDataType"], _after("Resolution:")),
        ],
        "windows": [
            (["wmic", "path", "Win32_VideoController", "get",
              "CurrentHorizontalResolution,CurrentVerticalResolution"], _wmic_resolution),
        ],
    },
    "gpu": {
        "linux": [
            (["lspci", "-mm"], _lspci_gpu),
        ],
        "darwin": [
            (["system_profiler", "SPDisplaysDataType"], _after("Chipset Model:")),
        ],
        "windows": [
            (["wmic", "path", "win32_VideoController", "get", "name"], _wmic_first),
        ],
    },
    "wm_theme": {
        "linux": [
            (["gsettings", "get", "org.gnome.desktop.interface", "gtk-theme"], _strip_quotes),
        ],
    },
    "cpu_brand": {
        "darwin": [
            (["sysctl", "-n", "machdep.cpu.brand_string"], _first_line),
        ],
        "windows": [
            (["wmic", "cpu", "get", "name"], _wmic_first),
        ],
    },
    "host": {
        "darwin": [
            (["sysctl", "-n", "hw.model"], _first_line),
        ],
        "windows": [
            (["wmic", "computersystem", "get", "model"], _wmic_first),
        ],
    },
}

def probe(fact: str, platform_key: str | None = None) -> str:
    """
    Try each registered command for `fact` on the platform, in order.
    Returns the first non-empty parsed answer, else "Unknown".
    """
    key = platform_key or current_platform()
    for cmd, parse in PROBES.get(fact, {}).get(key, []):
        out = _run(cmd)
        if not out.strip():
            continue
        try:
            value = parse(out)
        except Exception as e:
            logger.debug("could not parse %s output: %s", cmd[0], e)
            continue
        if value:
            return value
    return UNKNOWN
