import io
import pytest
from progress_printer.colors import no_color
from progress_printer.config import MarkerSet, RenderOptions
from progress_printer.renderer import ProgressRenderer

@pytest.fixture
def make_renderer():
    """Build a renderer on a StringIO, with the session banner already discarded."""
    def _make(width=80, **options):
        stream = io.StringIO()
        renderer = ProgressRenderer(RenderOptions(**options), MarkerSet(), stream=stream, width=width, colorize=no_color)
        stream.seek(0)
        stream.truncate()
        return renderer
    return _make

