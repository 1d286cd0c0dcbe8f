"""Exceptions raised while loading dictionaries and configurations."""


class OpenCCError(Exception):
    """Base class of every error raised by this package."""


class InvalidFormat(OpenCCError):
    """Input data does not follow the expected format."""


class InvalidTextDictionary(InvalidFormat):
    """A line of a text dictionary cannot be parsed."""

    def __init__(self, reason: str, line_num: int) -> None:
        super().__init__(f"{reason} (line {line_num})")
        self.reason = reason
        self.line_num = line_num


class FileNotFound(OpenCCError):
    """A dictionary or configuration file could not be located."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"{file_name} not found or not accessible.")
        self.file_name = file_name