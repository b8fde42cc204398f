# nekofetch/ui/display.py
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from ..app.flow import InfoLine
from ..util.ansi import ljust_visible, rgb, visible_len

ART_RGB = (173, 216, 230)  # light blue

PALETTE: List[Tuple[int, int, int]] = [
    (0, 0, 0),        # black
    (128, 0, 0),      # red
    (0, 128, 0),      # green
    (128, 128, 0),    # yellow
    (0, 0, 128),      # blue
    (128, 0, 128),    # magenta
    (0, 128, 128),    # cyan
    (192, 192, 192),  # white
    (128, 128, 128),  # bright black
    (255, 0, 0),      # bright red
    (0, 255, 0),      # bright green
    (255, 255, 0),    # bright yellow
    (0, 0, 255),      # bright blue
    (255, 0, 255),    # bright magenta
    (0, 255, 255),    # bright cyan
    (255, 255, 255),  # bright white
]

SWATCH = "██"

def render_rows(art: Sequence[str], info: Sequence[InfoLine]) -> List[str]:
    """
    Pair art rows with info rows by index. The art column is padded to the
    widest art row; whichever side runs out first renders blank.
    """
    if not art:
        return [line.render() for line in info]
    width = max(visible_len(a) for a in art)
    rows = []
    for i in range(max(len(art), len(info))):
        a = art[i] if i < len(art) else ""
        text = info[i].render() if i < len(info) else ""
        rows.append(f"{rgb(ljust_visible(a, width), *ART_RGB)} {text}".rstrip())
    return rows

def palette_line() -> str:
    return "".join(f"{rgb(SWATCH, r, g, b)} " for r, g, b in PALETTE)

def display_info(art: Sequence[str], info: Sequence[InfoLine],
                 show_colors: bool = False, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    for row in render_rows(art, info):
        out.write(row + "\n")
    if show_colors:
        out.write("\n")
        out.write(palette_line() + "\n")
    out.flush()
