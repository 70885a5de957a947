from dataclasses import dataclass
import platform
import shutil

FALLBACK_WIDTH = 96
MAX_HEADER_LENGTH = 50

@dataclass(frozen=True)
class Layout:
    max_columns: int
    max_header_length: int

def terminal_width() -> int:
    """Width of the attached terminal, or 96 when it cannot be determined."""
    if platform.system() == "Windows":
        return FALLBACK_WIDTH
    width = shutil.get_terminal_size(fallback=(0, 0)).columns
    # CI runners report no terminal at all
    return width or FALLBACK_WIDTH

def compute_layout(terminal_width: int) -> Layout:
    max_columns = terminal_width if terminal_width > 0 else FALLBACK_WIDTH
    return Layout(max_columns=max_columns, max_header_length=min(max_columns // 2, MAX_HEADER_LENGTH))
