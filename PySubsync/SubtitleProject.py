import logging
import os
import sys
from datetime import timedelta

from PySubsync.Formats.SrtFileHandler import SrtFileHandler
from PySubsync.Helpers import GetInputPath, GetOutputPath
from PySubsync.Helpers.Time import FormatTimecode, GetTimecode
from PySubsync.Options import Options
from PySubsync.SubtitleData import SubtitleData
from PySubsync.SubtitleError import EmptyInputError, InvalidAnchorsError, SubtitleError
from PySubsync.SubtitleFileHandler import SubtitleFileHandler
from PySubsync.SubtitleSynchronizer import LinearMapping, SubtitleSynchronizer

STDIO_PATH = '-'

class SubtitleProject:
    """
    Loads a subtitle file, re-times it between two anchors and writes it out again.

    Anchors that are not given default to the start of the first and last subtitle,
    so omitting both leaves the timings unchanged.
    """
    def __init__(self, options : Options|None = None, file_handler : SubtitleFileHandler|None = None):
        self.options : Options = options or Options()
        self.file_handler : SubtitleFileHandler = file_handler or SrtFileHandler(self.options)
        self.sourcepath : str|None = None
        self.outputpath : str|None = None
        self.subtitles : SubtitleData|None = None

    @property
    def has_subtitles(self) -> bool:
        return bool(self.subtitles and len(self.subtitles) > 0)

    def InitialiseProject(self, filepath : str, outputpath : str|None = None) -> None:
        """
        Load subtitles from filepath ('-' for standard input) and set the output path.
        Without an output path the source file is overwritten.
        """
        self.sourcepath = GetInputPath(filepath)
        self.outputpath = GetOutputPath(self.sourcepath, outputpath)
        if not self.sourcepath:
            raise SubtitleError("No input file specified")

        self.LoadSubtitles(self.sourcepath)

    def LoadSubtitles(self, filepath : str) -> SubtitleData:
        if filepath == STDIO_PATH:
            logging.debug("Reading subtitles from standard input")
            self.subtitles = self.file_handler.parse_file(sys.stdin)
        else:
            extension = os.path.splitext(filepath)[1].lower()
            if extension not in self.file_handler.get_file_extensions():
                logging.warning(f"Unexpected extension '{extension}' for {filepath}, reading it as {' or '.join(self.file_handler.get_file_extensions())}")

            logging.debug(f"Reading subtitles from {filepath}")
            self.subtitles = self.file_handler.load_file(filepath)

        logging.info(f"Loaded {len(self.subtitles)} subtitles")
        return self.subtitles

    def ResolveAnchors(self, first : int|str|timedelta|None = None, last : int|str|timedelta|None = None) -> tuple[int, int]:
        """
        Return concrete (first, last) anchors in milliseconds, taking defaults from the subtitles
        """
        subtitles = self.subtitles
        if not subtitles or subtitles.first is None or subtitles.last is None:
            raise EmptyInputError()

        first_anchor = GetTimecode(first) if first is not None else subtitles.first.start
        last_anchor = GetTimecode(last) if last is not None else subtitles.last.start
        return first_anchor, last_anchor

    def SyncSubtitles(self, first : int|str|timedelta|None = None, last : int|str|timedelta|None = None) -> LinearMapping:
        """
        Re-time the loaded subtitles. Explicit anchors take precedence over the project options.
        """
        if first is None:
            first = self.options.first_sub
        if last is None:
            last = self.options.last_sub

        first_anchor, last_anchor = self.ResolveAnchors(first, last)
        if first_anchor > last_anchor:
            raise InvalidAnchorsError(first_anchor, last_anchor)

        logging.info(f"Moving first subtitle to {FormatTimecode(first_anchor)} and last subtitle to {FormatTimecode(last_anchor)}")

        synchronizer = SubtitleSynchronizer(first_anchor, last_anchor)
        return synchronizer.Synchronize(self.subtitles) # type: ignore[arg-type]

    def SaveSubtitles(self, outputpath : str|None = None) -> None:
        """
        Write the subtitles to outputpath ('-' for standard output), or the project output path
        """
        if self.subtitles is None:
            raise SubtitleError("No subtitles to save")

        outputpath = GetOutputPath(self.sourcepath, outputpath or self.outputpath)
        if not outputpath:
            raise SubtitleError("No output file specified")

        if outputpath == STDIO_PATH:
            sys.stdout.write(self.file_handler.compose(self.subtitles))
            sys.stdout.flush()
        else:
            logging.debug(f"Writing subtitles to {outputpath}")
            self.file_handler.save_file(self.subtitles, outputpath)
