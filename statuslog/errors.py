"""statuslog - Exceptions"""


class StatuslogError(Exception):
    """Base class for all statuslog errors"""


class ParseError(StatuslogError):
    """A single line could not be turned into a LogEntry"""


class MalformedLine(ParseError):
    def __init__(self, line: str):
        self.line = line
        super().__init__("line does not match the access log format")


class InvalidTimestamp(ParseError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid timestamp: {text!r}")


class InvalidNumber(ParseError):
    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"invalid {field}: {text!r}")


class LogReadError(StatuslogError):
    """The log file could not be opened or read"""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")
