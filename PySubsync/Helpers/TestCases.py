import unittest
from collections.abc import Sequence
from typing import Any

from PySubsync.Helpers.Tests import log_input_expected_error, log_input_expected_result, log_test_name
from PySubsync.SubtitleCue import SubtitleCue
from PySubsync.SubtitleData import SubtitleData

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test and the values compared by the assertLogged helpers
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, field : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else field, expected, actual)
        self.assertEqual(expected, actual, f"{field}: expected {expected!r}, got {actual!r}")

    def assertLoggedSequenceEqual(self, field : str, expected : Sequence, actual : Sequence, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else field, expected, actual)
        self.assertSequenceEqual(expected, actual, f"{field}: sequences differ")

    def assertLoggedIsNone(self, field : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else field, None, actual)
        self.assertIsNone(actual, f"{field}: expected None, got {actual!r}")

    def assertLoggedTrue(self, field : str, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else field, True, actual)
        self.assertTrue(actual, f"{field}: expected a true value, got {actual!r}")

    def assertLoggedIsInstance(self, field : str, obj : Any, expected_type : type, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else field, expected_type.__name__, type(obj).__name__)
        self.assertIsInstance(obj, expected_type, f"{field}: expected {expected_type.__name__}, got {type(obj).__name__}")

    def assertLoggedRaises(self, field : str, expected_error : type[Exception], func, *args, **kwargs) -> Exception:
        """
        Assert that calling func raises expected_error, and return the error for further checks
        """
        with self.assertRaises(expected_error, msg=field) as context:
            func(*args, **kwargs)
        log_input_expected_error(args or field, expected_error, context.exception)
        return context.exception

    def assertLoggedCueTimes(self, field : str, expected : Sequence[tuple[int, int]], data : SubtitleData) -> None:
        """
        Assert the (start, end) times of every cue in the collection
        """
        actual = [ (cue.start, cue.end) for cue in data ]
        self.assertLoggedSequenceEqual(field, list(expected), actual)

def BuildSubtitleData(timings : Sequence[tuple[int, int]], text_template : str = "Line {}\r\n") -> SubtitleData:
    """
    Build a cue collection from (start, end) pairs with numbered body text
    """
    cues = [ SubtitleCue(start, end, text_template.format(number)) for number, (start, end) in enumerate(timings, start=1) ]
    return SubtitleData(cues=cues)
