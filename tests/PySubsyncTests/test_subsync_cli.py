import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

from PySubsync.Formats.SrtFileHandler import SrtFileHandler
from PySubsync.Helpers.TestCases import LoggedTestCase
from PySubsync.SubtitleError import SubtitleError
from scripts.subsync import main
from scripts.subsync_common import CreateArgParser, CreateOptions

sample_srt = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "First\n"
    "\n"
    "2\n"
    "00:00:05,000 --> 00:00:06,000\n"
    "Last\n"
    "\n"
)

synced_srt = (
    "1\r\n"
    "00:00:00,000 --> 00:00:01,000\r\n"
    "First\r\n"
    "\r\n"
    "2\r\n"
    "00:00:04,000 --> 00:00:05,000\r\n"
    "Last\r\n"
    "\r\n"
)

class TestSubsyncCommandLine(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.temp_dir.name, "input.srt")
        with open(self.input_path, 'w', encoding='utf-8', newline='') as f:
            f.write(sample_srt)

    def tearDown(self) -> None:
        self.temp_dir.cleanup()
        super().tearDown()

    def _read(self, path : str) -> str:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()

    def _run(self, argv : list[str]) -> tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            result = main(argv)
        return result, stdout.getvalue(), stderr.getvalue()

    def test_no_arguments(self):
        result, _, stderr = self._run([])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("usage printed", stderr.startswith("usage: subsync"))

    def test_sync_to_output(self):
        output_path = os.path.join(self.temp_dir.name, "output.srt")
        result, _, stderr = self._run(["-f", "00:00:00,000", "-l", "00:00:04,000", "-i", self.input_path, "-o", output_path])
        self.assertLoggedEqual("exit code", 0, result, input_value=stderr)
        self.assertLoggedEqual("output", synced_srt, self._read(output_path))
        self.assertLoggedEqual("input untouched", sample_srt, self._read(self.input_path))

    def test_sync_in_place(self):
        result, _, _ = self._run(["-f", "00:00:00.000", "-l", "00:00:04.000", "-i", self.input_path])
        self.assertLoggedEqual("exit code", 0, result)
        self.assertLoggedEqual("input rewritten", synced_srt, self._read(self.input_path))

    def test_defaults_only_normalise(self):
        result, _, _ = self._run(["-i", self.input_path])
        self.assertLoggedEqual("exit code", 0, result)
        self.assertLoggedEqual("crlf output", sample_srt.replace("\n", "\r\n"), self._read(self.input_path))

    def test_invalid_anchor(self):
        result, _, stderr = self._run(["-f", "00:00:xx,000", "-i", self.input_path])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("error reported", "Error: " in stderr, input_value=stderr)
        self.assertLoggedTrue("option named", "-f option" in stderr, input_value=stderr)
        self.assertLoggedEqual("input untouched", sample_srt, self._read(self.input_path))

    def test_first_after_last(self):
        result, _, stderr = self._run(["-f", "00:00:05,000", "-l", "00:00:01,000", "-i", self.input_path])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("error reported", "Error: First subtitle can not be after last subtitle" in stderr, input_value=stderr)

    def test_missing_input(self):
        missing_path = os.path.join(self.temp_dir.name, "missing.srt")
        result, _, stderr = self._run(["-i", missing_path])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("error reported", "Error: " in stderr, input_value=stderr)

    def test_malformed_input(self):
        with open(self.input_path, 'w', encoding='utf-8', newline='') as f:
            f.write("1\n\nText\n\n")

        result, _, stderr = self._run(["-i", self.input_path])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("line number reported", "Error: Line 2: " in stderr, input_value=stderr)

    def test_failed_save_keeps_input(self):
        with open(self.input_path, 'rb') as f:
            original = f.read()

        with mock.patch.object(SrtFileHandler, 'compose', side_effect=SubtitleError("Unable to compose")):
            result, _, stderr = self._run(["-f", "00:00:00,000", "-l", "00:00:04,000", "-i", self.input_path])

        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("error reported", "Error: Unable to compose" in stderr, input_value=stderr)
        with open(self.input_path, 'rb') as f:
            self.assertLoggedEqual("input byte-identical", original, f.read())

    def test_very_large_anchor_in_place(self):
        with open(self.input_path, 'w', encoding='utf-8', newline='') as f:
            f.write("1\n00:00:00,000 --> 00:00:00,001\nFirst\n\n2\n00:00:00,001 --> 00:00:00,002\nLast\n\n")

        result, _, stderr = self._run(["-f", "00:00:00,000", "-l", "27777:46:40,000", "-i", self.input_path])
        self.assertLoggedEqual("exit code", 0, result, input_value=stderr)

        output = self._read(self.input_path)
        self.assertLoggedTrue("first cue", "00:00:00,000 --> 27777:46:40,000\r\n" in output, input_value=output)
        self.assertLoggedTrue("last cue", "27777:46:40,000 --> 55555:33:20,000\r\n" in output, input_value=output)

    def test_unknown_encoding(self):
        result, _, stderr = self._run(["--encoding", "no-such-encoding", "-i", self.input_path])
        self.assertLoggedEqual("exit code", 1, result)
        self.assertLoggedTrue("error reported", "Error: " in stderr, input_value=stderr)
        self.assertLoggedEqual("input untouched", sample_srt, self._read(self.input_path))

    def test_stdin_to_stdout(self):
        with mock.patch('sys.stdin', io.StringIO(sample_srt)):
            result, stdout, _ = self._run(["-f", "00:00:00,000", "-l", "00:00:04,000", "-i", "-", "-o", "-"])
        self.assertLoggedEqual("exit code", 0, result)
        self.assertLoggedEqual("stdout", synced_srt, stdout)

    def test_version(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as context:
            main(["-v"])
        self.assertLoggedEqual("exit code", 0, context.exception.code)
        self.assertLoggedEqual("version", "0.2.0", stdout.getvalue().strip())

    def test_usage_error(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as context:
            main(["-i", self.input_path, "unexpected"])
        self.assertLoggedEqual("exit code", 2, context.exception.code)

    def test_missing_input_option(self):
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as context:
            main(["-f", "00:00:01,000"])
        self.assertLoggedEqual("exit code", 2, context.exception.code)

class TestCreateOptions(LoggedTestCase):
    def test_CreateOptions(self):
        args = CreateArgParser().parse_args(["-f", "00:01:00,000", "-i", "file.srt", "--max-text-bytes", "1023", "--keep-unterminated"])
        options = CreateOptions(args)
        self.assertLoggedEqual("first_sub", 60000, options.first_sub)
        self.assertLoggedIsNone("last_sub", options.last_sub)
        self.assertLoggedEqual("max_text_bytes", 1023, options.max_text_bytes)
        self.assertLoggedEqual("discard_unterminated_cue", False, options.discard_unterminated_cue)

    def test_CreateOptions_defaults(self):
        args = CreateArgParser().parse_args(["-i", "file.srt"])
        options = CreateOptions(args)
        self.assertLoggedIsNone("first_sub", options.first_sub)
        self.assertLoggedEqual("discard_unterminated_cue", True, options.discard_unterminated_cue)

if __name__ == '__main__':
    unittest.main()
