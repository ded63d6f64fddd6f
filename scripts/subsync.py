"""
Synchronize SubRip subtitles.

The first and last subtitle are moved to the given times and every other subtitle is rescaled
linearly between them. If -f or -l is omitted, the current time of that subtitle is kept.

    subsync -f 00:01:33,492 -l 01:39:23,561 -i file.srt
"""
import logging
import sys

from PySubsync.SettingsType import SettingsError
from PySubsync.SubtitleError import SubtitleError
from PySubsync.SubtitleProject import SubtitleProject

from scripts.subsync_common import CreateArgParser, CreateOptions, InitLogger

def main(argv : list[str]|None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    parser = CreateArgParser()
    if not argv:
        parser.print_usage(sys.stderr)
        return 1

    args = parser.parse_args(argv)

    logger_options = InitLogger(args.logfile, args.debug)

    try:
        options = CreateOptions(args)

        project = SubtitleProject(options)
        project.InitialiseProject(args.input, args.output)
        project.SyncSubtitles()
        project.SaveSubtitles()

    except (SubtitleError, SettingsError, OSError, UnicodeError, LookupError, OverflowError) as e:
        logging.debug("subsync failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    finally:
        if logger_options.file_handler:
            logging.getLogger('').removeHandler(logger_options.file_handler)
            logger_options.file_handler.close()

    return 0

if __name__ == "__main__":
    sys.exit(main())
