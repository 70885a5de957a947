from typing import Callable
from rich.color import ColorSystem
from rich.style import Style

# (style spec, text) -> text ready for the output stream
Colorizer = Callable[[str, str], str]

def apply_color(spec: str, text: str) -> str:
    """Wrap text in ANSI codes for a rich style spec such as ``"bold green"``."""
    if not spec:
        return text
    return Style.parse(spec).render(text, color_system=ColorSystem.STANDARD)

def no_color(spec: str, text: str) -> str:
    return text
