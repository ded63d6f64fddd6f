import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySubsync import init_options
from PySubsync.Helpers.Time import ParseTimecode
from PySubsync.Options import LEGACY_MAX_TEXT_BYTES, Options
from PySubsync.SubtitleError import MalformedTimecodeError, SubtitleError
from PySubsync.version import __version__

EXAMPLE = "Example:\n  subsync -f 00:01:33,492 -l 01:39:23,561 -i file.srt"

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(log_path: str|None = None, debug: bool = False) -> LoggerOptions:
    """ Initialise the console logger and, if a path is given, a log file """
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'WARNING').upper()
        logging_level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    if log_path:
        try:
            file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
            file_handler.setLevel(logging_level)
            file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s: %(message)s'))
            logging.getLogger('').addHandler(file_handler)
        except OSError as e:
            logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser() -> ArgumentParser:
    """
    Create the command line parser for subsync
    """
    parser = ArgumentParser(
        prog='subsync',
        description="Synchronize SubRip subtitles by moving the first and last subtitle to new times",
        epilog=EXAMPLE,
    )
    parser.add_argument('-f', '--first-sub', type=str, default=None, help="Time of the first subtitle (hh:mm:ss,mmm)")
    parser.add_argument('-l', '--last-sub', type=str, default=None, help="Time of the last subtitle (hh:mm:ss,mmm)")
    parser.add_argument('-i', '--input', type=str, required=True, help="Input file, or - for standard input")
    parser.add_argument('-o', '--output', type=str, default=None, help="Output file, or - for standard output (if not specified, it overwrites the input file)")
    parser.add_argument('-v', '--version', action='version', version=__version__.lstrip('v'), help="Print version")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    parser.add_argument('--logfile', type=str, default=None, help="Write log messages to this file")
    parser.add_argument('--encoding', type=str, default=None, help="Encoding of the subtitle file")
    parser.add_argument('--max-text-bytes', type=int, default=None, help=f"Truncate subtitle text beyond this many bytes ({LEGACY_MAX_TEXT_BYTES} matches the legacy fixed buffer)")
    parser.add_argument('--keep-unterminated', action='store_true', help="Keep a final subtitle that is not followed by a blank line")
    return parser

def ParseAnchor(value : str|None, option : str) -> int|None:
    """
    Convert an anchor argument to milliseconds, reporting which option was wrong
    """
    if value is None:
        return None
    try:
        return ParseTimecode(value)
    except MalformedTimecodeError as e:
        raise SubtitleError(f"{e}, please check the value of the {option} option", e)

def CreateOptions(args: Namespace) -> Options:
    """ Create options from the command line arguments """
    settings = {
        'encoding': args.encoding,
        'max_text_bytes': args.max_text_bytes,
        'first_sub': ParseAnchor(args.first_sub, '-f'),
        'last_sub': ParseAnchor(args.last_sub, '-l'),
    }

    if args.keep_unterminated:
        settings['discard_unterminated_cue'] = False

    return init_options(**settings)
