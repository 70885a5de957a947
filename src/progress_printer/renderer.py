from dataclasses import dataclass
from importlib import metadata
from typing import Optional, TextIO
import os
import sys

from .colors import Colorizer, apply_color
from .config import MarkerSet, RenderOptions, find_config_file, load_config_or_fallback
from .layout import compute_layout, terminal_width

DIST_NAME = "progress-printer"

HEADER_PREFIX = " ==> "
HEADER_ELLIPSIS = "..."
HEADER_SUFFIX = "   "
HEADER_STYLE = "bold cyan"

# Columns charged per status, whatever the marker's real width.
STATUS_WIDTH = 2

@dataclass(frozen=True)
class Outcome:
    style: str
    marker: str  # MarkerSet attribute
    label: str

OUTCOMES = {
    ".": Outcome("bold green", "pass_", " Passed"),
    "S": Outcome("bold yellow", "skipped", " Skipped"),
    "I": Outcome("bold blue", "incomplete", " Incomplete"),
    "F": Outcome("bold red", "fail", " Fail"),
    "E": Outcome("bold red", "error", " Error"),
}

@dataclass
class RenderState:
    """Mutable line state for one test session.

    Only the renderer that owns it may mutate it, and never from more than
    one outcome stream at a time: it is not safe for concurrent use.
    """
    max_columns: int
    max_header_length: int
    current_group_name: str = ""
    last_rendered_group_name: str = ""
    column: int = 0

def format_header(name: str, max_len: int) -> str:
    """Fit ``" ==> name   "`` into exactly ``max_len`` characters.

    Short names are padded with spaces. Long names keep their tail, the most
    specific part of a dotted name, behind an ellipsis. When ``max_len`` cannot
    even hold the prefix, ellipsis and suffix the tail is dropped and the
    result comes out shorter than requested.
    """
    candidate = HEADER_PREFIX + name + HEADER_SUFFIX
    if len(candidate) <= max_len:
        return candidate.ljust(max_len)
    budget = max_len - len(HEADER_PREFIX) - len(HEADER_ELLIPSIS) - len(HEADER_SUFFIX)
    tail = name[len(name) - budget:] if budget > 0 else ""
    return HEADER_PREFIX + HEADER_ELLIPSIS + tail + HEADER_SUFFIX

def package_info():
    try:
        meta = metadata.metadata(DIST_NAME)
        return meta["Summary"] or DIST_NAME, meta["Version"]
    except metadata.PackageNotFoundError:
        return DIST_NAME, "n/a"

class ProgressRenderer:
    """Per-test progress output grouped under a header for each test class."""

    def __init__(self, options: Optional[RenderOptions] = None, markers: Optional[MarkerSet] = None,
                 stream: Optional[TextIO] = None, width: Optional[int] = None,
                 colorize: Colorizer = apply_color, config_path=None, config_error: Optional[str] = None):
        self.options = options or RenderOptions()
        self.markers = markers or MarkerSet()
        self.stream = stream if stream is not None else sys.stdout
        self.colorize = colorize
        self.config_path = config_path
        layout = compute_layout(terminal_width() if width is None else width)
        self.state = RenderState(max_columns=layout.max_columns, max_header_length=layout.max_header_length)
        self._start_session(config_error)

    @classmethod
    def from_config(cls, path=None, stream: Optional[TextIO] = None, width: Optional[int] = None,
                    colorize: Colorizer = apply_color, **overrides) -> "ProgressRenderer":
        """Build a renderer from a YAML file, the nearest one found by default.

        ``overrides`` replace individual ``RenderOptions`` fields; ``None``
        values are ignored so CLI flags can be passed through unconditionally.
        """
        path = path or find_config_file()
        cfg, error = load_config_or_fallback(path)
        options = cfg.options.model_copy(update={k: v for k, v in overrides.items() if v is not None})
        return cls(options, cfg.markers, stream=stream, width=width, colorize=colorize,
                   config_path=path, config_error=error)

    def _write(self, text: str) -> None:
        self.stream.write(text)
        if hasattr(self.stream, "flush"):
            self.stream.flush()

    def _start_session(self, config_error: Optional[str]) -> None:
        name, version = package_info()
        self._write("\n")
        self._write(self.colorize("green", f"{name} {version} by its contributors.") + "\n")
        if config_error:
            self._write(self.colorize("red", "Unable to locate valid configuration file") + "\n")
        if self.options.show_config and self.config_path:
            filename = str(self.config_path)
            home = os.path.expanduser("~")
            if home and home != "~" and filename.startswith(home):
                filename = "~" + filename[len(home):]
            self._write(self.colorize("yellow", f"Configuration: {filename}") + "\n\n")

    def enter_group(self, name: str) -> None:
        self.state.current_group_name = name

    def on_group_entered(self, name: Optional[str] = None) -> None:
        """Print a header when the test belongs to a different group than the last one."""
        if name is None:
            name = self.state.current_group_name
        if self.options.hide_group_header:
            return
        if name == self.state.last_rendered_group_name:
            return
        header = format_header(name, self.state.max_header_length)
        self._write("\n")
        self._write(self.colorize(HEADER_STYLE, header))
        self.state.column = len(header)
        self.state.last_rendered_group_name = name

    def emit_status(self, code: str, color: Optional[str] = None) -> None:
        """Append the marker for one outcome code, wrapping under the header column when full."""
        state = self.state
        if not self.options.debug_mode and state.column + STATUS_WIDTH > state.max_columns:
            self._write("\n" + " " * state.max_header_length)
            state.column = state.max_header_length

        key = code.upper()
        outcome = OUTCOMES.get(key)
        if outcome is None:
            text = code
        else:
            color = outcome.style
            text = key if self.options.simple_output else getattr(self.markers, outcome.marker)
            if self.options.debug_mode:
                text += outcome.label

        text += " "
        self._write(self.colorize(color, text) if color else text)
        if self.options.debug_mode:
            self._write("\n")
        state.column += STATUS_WIDTH

    def write_progress(self, code: str, color: Optional[str] = None) -> None:
        if not self.options.debug_mode:
            self.on_group_entered()
        self.emit_status(code, color)
