from typing import Optional
import sys
import unittest
from ..colors import Colorizer, apply_color
from ..renderer import ProgressRenderer

def group_name(test) -> str:
    """Dotted name of the class a test belongs to."""
    if isinstance(test, unittest.TestCase):
        cls = type(test)
        return f"{cls.__module__}.{cls.__qualname__}"
    # class/module fixture failures arrive as holders named "setUpClass (pkg.mod.Class)"
    test_id = test.id()
    if test_id.endswith(")") and " (" in test_id:
        return test_id[test_id.index(" (") + 2:-1]
    return test_id.rpartition(".")[0] or test_id

class PrettyTestResult(unittest.TextTestResult):
    """Feeds each outcome into a ProgressRenderer instead of the default dot stream."""

    renderer: Optional[ProgressRenderer] = None

    def __init__(self, stream, descriptions, verbosity, **kwargs):
        super().__init__(stream, descriptions, verbosity, **kwargs)
        self.dots = False
        self.showAll = False

    def _progress(self, test, code: str) -> None:
        if self.renderer is None:
            return
        self.renderer.enter_group(group_name(test))
        self.renderer.write_progress(code)

    def addSuccess(self, test):
        super().addSuccess(test)
        self._progress(test, ".")

    def addFailure(self, test, err):
        super().addFailure(test, err)
        self._progress(test, "F")

    def addError(self, test, err):
        super().addError(test, err)
        self._progress(test, "E")

    def addSkip(self, test, reason):
        super().addSkip(test, reason)
        self._progress(test, "S")

    def addExpectedFailure(self, test, err):
        super().addExpectedFailure(test, err)
        self._progress(test, "I")

    def addUnexpectedSuccess(self, test):
        super().addUnexpectedSuccess(test)
        self._progress(test, "F")

    def addSubTest(self, test, subtest, err):
        super().addSubTest(test, subtest, err)
        if err is not None:
            self._progress(test, "F" if issubclass(err[0], test.failureException) else "E")

    def printErrors(self):
        self.stream.writeln()
        self.stream.flush()
        super().printErrors()

class PrettyTestRunner(unittest.TextTestRunner):
    """TextTestRunner that reports progress through a ProgressRenderer.

    A verbosity above 1 switches the renderer to debug mode: one labelled
    outcome per line and no group headers.
    """

    resultclass = PrettyTestResult

    def __init__(self, stream=None, verbosity: int = 1, renderer: Optional[ProgressRenderer] = None,
                 config: Optional[str] = None, colorize: Colorizer = apply_color,
                 width: Optional[int] = None, simple_output: Optional[bool] = None,
                 hide_group_header: Optional[bool] = None, **kwargs):
        if stream is None:
            stream = sys.stdout
        super().__init__(stream=stream, verbosity=verbosity, **kwargs)
        if renderer is None:
            renderer = ProgressRenderer.from_config(
                config, stream=self.stream, width=width, colorize=colorize,
                simple_output=simple_output, hide_group_header=hide_group_header,
                debug_mode=True if verbosity > 1 else None,
            )
        self.renderer = renderer

    def _makeResult(self):
        result = super()._makeResult()
        result.renderer = self.renderer
        return result
