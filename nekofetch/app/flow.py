# nekofetch/app/flow.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from ..config import Config
from ..context.probes import UNKNOWN
from ..util.ansi import BRIGHT_CYAN, bold

# (fact key, label) in display order
ENTRIES: List[Tuple[str, str]] = [
    ("os", "OS"),
    ("host", "Host"),
    ("kernel", "Kernel"),
    ("uptime", "Uptime"),
    ("packages", "Packages"),
    ("shell", "Shell"),
    ("resolution", "Resolution"),
    ("de", "DE"),
    ("wm", "WM"),
    ("wm_theme", "WM Theme"),
    ("terminal", "Terminal"),
    ("cpu", "CPU"),
    ("gpu", "GPU"),
    ("memory", "Memory"),
    ("storage", "Storage"),
]

MINI_KEYS = ("os", "cpu", "memory")

# fact key -> config toggle; "host" shares the hostname switch
TOGGLES: Dict[str, str] = {key: f"show_{key}" for key, _ in ENTRIES}
TOGGLES["host"] = "show_hostname"

LABEL_COLORS: Dict[str, str] = {key: BRIGHT_CYAN for key, _ in ENTRIES}
USER_COLOR = BRIGHT_CYAN

@dataclass
class InfoLine:
    label: str
    value: str
    color: str = BRIGHT_CYAN

    def render(self) -> str:
        if not self.label:
            return bold(self.value, self.color)
        return f"{bold(self.label, self.color)} {self.value}"

def is_shown(config: Config, key: str) -> bool:
    toggle = TOGGLES.get(key)
    return getattr(config, toggle) if toggle else True

def _fact(info: Mapping[str, str], key: str) -> str:
    return info.get(key) or UNKNOWN

def _user_line(info: Mapping[str, str], config: Config) -> List[InfoLine]:
    if not config.show_username:
        return []
    who = _fact(info, "username")
    if config.show_hostname:
        who = f"{who}@{_fact(info, 'hostname')}"
    return [InfoLine("", who, USER_COLOR)]

def build_info_lines(info: Mapping[str, str], config: Config,
                     caps: bool = False, mini: bool = False) -> List[InfoLine]:
    """Facts to show, in display order. Mini mode only ever looks at os, cpu and memory."""
    if mini:
        return [
            InfoLine(key.upper() if caps else key, _fact(info, key), LABEL_COLORS[key])
            for key in MINI_KEYS if is_shown(config, key)
        ]

    lines = _user_line(info, config)
    for key, label in ENTRIES:
        if not is_shown(config, key):
            continue
        label = label.upper() if caps else label.lower()
        lines.append(InfoLine(label, _fact(info, key), LABEL_COLORS[key]))
    return lines
