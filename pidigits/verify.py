from typing import Tuple

from .extractor import DigitWindow
from .reference import mp_window, spigot_window


SPIGOT_LIMIT = 2000


def reference_window(n: int, count: int) -> Tuple[str, str]:
    if int(n) + int(count) <= SPIGOT_LIMIT:
        return spigot_window(n, count), "pi spigot"
    return mp_window(n, count), "mp reference"


def verify_window(window: DigitWindow) -> Tuple[bool, str]:
    expected, kind = reference_window(window.position, window.count)
    return expected == window.text, kind
