from abc import ABC, abstractmethod
from typing import TextIO

from PySubsync.Options import Options
from PySubsync.SubtitleData import SubtitleData

class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle files.

    Implementations handle format-specific operations while the synchronization logic remains format-agnostic.
    """

    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    def __init__(self, options : Options|None = None):
        self.options : Options = options or Options()

    @abstractmethod
    def parse_file(self, file_obj: TextIO) -> SubtitleData:
        """
        Parse subtitle file content and return the cues with file-level metadata.

        Raises:
            SubtitleParseError: If parsing fails
        """
        raise NotImplementedError

    @abstractmethod
    def parse_string(self, content: str) -> SubtitleData:
        """
        Parse subtitle string content and return the cues with file-level metadata.

        Raises:
            SubtitleParseError: If parsing fails
        """
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: SubtitleData) -> str:
        """
        Compose subtitle cues into text for saving.
        """
        raise NotImplementedError

    @abstractmethod
    def load_file(self, path: str) -> SubtitleData:
        """
        Open a subtitle file and parse it.

        Raises:
            SubtitleParseError: If parsing fails
            UnicodeDecodeError: If the file cannot be decoded with either encoding
        """
        raise NotImplementedError

    @abstractmethod
    def save_file(self, data: SubtitleData, path: str) -> None:
        """
        Compose subtitle cues and write them to a file.
        """
        raise NotImplementedError

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())
