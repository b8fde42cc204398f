"""System facts: OS, hardware, session and environment, each as a display string."""
from __future__ import annotations
import getpass, logging, os, platform, socket, time
from typing import Callable, Dict

import distro
import psutil

from .probes import UNKNOWN, current_platform, probe

logger = logging.getLogger(__name__)

FactMap = Dict[str, str]

MIB = 1024 * 1024

def _safe(name: str, fn: Callable[[], str]) -> str:
    try:
        value = fn()
    except Exception as e:
        logger.debug("fact %s unavailable: %s", name, e)
        return UNKNOWN
    value = (value or "").strip()
    return value or UNKNOWN

def _env(*names: str) -> str:
    for n in names:
        v = os.environ.get(n)
        if v:
            return v
    return ""

def _read_file(path: str) -> str:
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()

# ─────── individual facts ───────
def os_name(plat: str) -> str:
    if plat == "linux":
        name = distro.name(pretty=True)
        return name or f"{platform.system()} {platform.release()}"
    if plat == "darwin":
        return f"macOS {platform.mac_ver()[0]}".strip()
    if plat == "windows":
        return f"Windows {platform.release()} {platform.version()}"
    return f"{platform.system()} {platform.release()}"

def host_model(plat: str) -> str:
    if plat == "linux":
        vendor = product = ""
        try:
            product = _read_file("/sys/devices/virtual/dmi/id/product_name").strip()
            vendor = _read_file("/sys/devices/virtual/dmi/id/sys_vendor").strip()
        except OSError:
            pass
        if not product:
            # ARM boards expose a device tree model instead of DMI
            try:
                return _read_file("/proc/device-tree/model").strip("\x00\n ")
            except OSError:
                return ""
        return product if not vendor or product.startswith(vendor) else f"{vendor} {product}"
    return probe("host", plat)

def format_uptime(seconds: float) -> str:
    s = int(seconds)
    days, hours, mins = s // 86400, (s % 86400) // 3600, (s % 3600) // 60
    return f"{days} days, {hours} hours, {mins} mins"

def uptime() -> str:
    return format_uptime(time.time() - psutil.boot_time())

def cpu_brand(plat: str) -> str:
    if plat == "linux":
        for line in _read_file("/proc/cpuinfo").splitlines():
            # "Model" covers Raspberry Pi style kernels with no model name
            if line.startswith(("model name", "Model", "Hardware")) and ":" in line:
                return line.split(":", 1)[1].strip()
    brand = probe("cpu_brand", plat)
    if brand != UNKNOWN:
        return brand
    return platform.processor()

def cpu(plat: str) -> str:
    brand = _safe("cpu brand", lambda: cpu_brand(plat))
    cores = psutil.cpu_count(logical=True) or 0
    return f"{brand} ({cores} cores)"

def memory() -> str:
    vm = psutil.virtual_memory()
    used = (vm.total - vm.available) // MIB
    return f"{used}MiB / {vm.total // MIB}MiB"

def _system_root() -> str:
    return os.path.abspath(os.sep)

def storage() -> str:
    root = _system_root()
    usage = psutil.disk_usage(root)
    name = root
    for part in psutil.disk_partitions(all=False):
        if part.mountpoint == root:
            name = part.device or root
            break
    used = (usage.total - usage.free) // MIB
    return f"{name}: {used}MiB / {usage.total // MIB}MiB"

def desktop_environment(plat: str) -> str:
    if plat == "linux":
        return _env("XDG_CURRENT_DESKTOP", "DESKTOP_SESSION")
    if plat == "darwin":
        return "Aqua"
    return ""

def window_manager(plat: str) -> str:
    if plat == "linux":
        return _env("XDG_SESSION_DESKTOP")
    if plat == "darwin":
        return "Quartz Compositor"
    return ""

def wm_theme(plat: str) -> str:
    if plat == "darwin":
        return "Blue (Dark)"
    return probe("wm_theme", plat)

# ─────── all together ───────
def gather_system_info(plat: str | None = None) -> FactMap:
    """Every fact the presenter knows about; anything undeterminable is "Unknown"."""
    plat = plat or current_platform()
    facts = {
        "username": lambda: getpass.getuser(),
        "hostname": lambda: socket.gethostname(),
        "os": lambda: os_name(plat),
        "host": lambda: host_model(plat),
        "kernel": lambda: platform.release(),
        "uptime": uptime,
        "shell": lambda: _env("SHELL", "ComSpec"),
        "terminal": lambda: _env("TERM_PROGRAM", "TERM"),
        "cpu": lambda: cpu(plat),
        "memory": memory,
        "gpu": lambda: probe("gpu", plat),
        "packages": lambda: probe("packages", plat),
        "resolution": lambda: probe("resolution", plat),
        "de": lambda: desktop_environment(plat),
        "wm": lambda: window_manager(plat),
        "wm_theme": lambda: wm_theme(plat),
        "storage": storage,
    }
    info = {key: _safe(key, fn) for key, fn in facts.items()}
    logger.debug("gathered %d facts for %s", len(info), plat)
    return info
