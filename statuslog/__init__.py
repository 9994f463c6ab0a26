"""statuslog - HTTP status code summaries from access logs"""

from .patterns import VERSION, ACCESS_LOG_PATTERN, TIMESTAMP_FORMAT
from .errors import (
    StatuslogError, ParseError, MalformedLine, InvalidTimestamp,
    InvalidNumber, LogReadError,
)
from .models import LogEntry, StatusCodeCount, ReadResult
from .parser import parse_line
from .reader import read_log
from .aggregate import count_by_status, most_common_status
from .analyzer import LogAnalyzer
from .output import print_report

__all__ = [
    'VERSION', 'ACCESS_LOG_PATTERN', 'TIMESTAMP_FORMAT',
    'StatuslogError', 'ParseError', 'MalformedLine', 'InvalidTimestamp',
    'InvalidNumber', 'LogReadError',
    'LogEntry', 'StatusCodeCount', 'ReadResult',
    'parse_line', 'read_log', 'count_by_status', 'most_common_status',
    'LogAnalyzer', 'print_report',
]
