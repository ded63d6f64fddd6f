import logging
import os
import shutil
import tempfile
from typing import TextIO

from PySubsync.SubtitleFileHandler import SubtitleFileHandler
from PySubsync.SubtitleData import SubtitleData
from PySubsync.SubtitleParser import SubtitleParser
from PySubsync.SubtitleSerializer import SerializeCues

class SrtFileHandler(SubtitleFileHandler):
    """
    File handler for SubRip (srt) files.

    Cue blocks are read with SubtitleParser and written with CRLF line endings.
    """

    SUPPORTED_EXTENSIONS = {'.srt': 10}

    def load_file(self, path: str) -> SubtitleData:
        encoding = self.options.encoding
        try:
            with open(path, 'r', encoding=encoding, newline='') as f:
                data = self.parse_file(f)
        except UnicodeDecodeError:
            fallback_encoding = self.options.fallback_encoding
            if not fallback_encoding or fallback_encoding == encoding:
                raise

            logging.info(f"Unable to decode {path} as {encoding}, retrying with {fallback_encoding}")
            encoding = fallback_encoding
            with open(path, 'r', encoding=encoding, newline='') as f:
                data = self.parse_file(f)

        data.metadata['encoding'] = encoding
        return data

    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """
        Parse SRT content from an open text stream
        """
        return self.parse_string(file_obj.read())

    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse SRT string content and return SubtitleData with the cues in input order
        """
        parser = SubtitleParser(
            max_text_bytes=self.options.max_text_bytes,
            discard_unterminated_cue=self.options.discard_unterminated_cue,
        )
        data = parser.ParseString(content)
        data.metadata['format'] = '.srt'
        return data

    def compose(self, data: SubtitleData) -> str:
        """
        Compose cues into SRT format, renumbered from 1
        """
        return "".join(SerializeCues(data.cues))

    def save_file(self, data: SubtitleData, path: str) -> None:
        """
        Write the cues to path. The content is composed and encoded before anything is written,
        then swapped into place, so an existing file is never left partially written.
        """
        encoding = data.metadata.get('encoding') or self.options.encoding
        content = self.compose(data).encode(encoding)

        directory = os.path.dirname(os.path.abspath(path))
        fd, temp_path = tempfile.mkstemp(prefix='.subsync-', suffix='.tmp', dir=directory)
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(content)

            if os.path.exists(path):
                shutil.copymode(path, temp_path)
            else:
                os.chmod(temp_path, 0o644)

            os.replace(temp_path, path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

        logging.debug(f"Wrote {len(data)} subtitles to {path} as {encoding}")
