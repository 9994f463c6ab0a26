"""statuslog - Access log line parser"""

from datetime import datetime

from .errors import InvalidNumber, InvalidTimestamp, MalformedLine
from .models import LogEntry
from .patterns import ACCESS_LOG_PATTERN, TIMESTAMP_FORMAT, TIMESTAMP_SHAPE


def _to_int(field: str, text: str) -> int:
    # plain decimal only: int() would also take "+5", "1_000" and non-ASCII digits
    if not (text.isascii() and text.isdigit()):
        raise InvalidNumber(field, text)
    return int(text)


def parse_line(line: str) -> LogEntry:
    """Parse one access log line into a LogEntry.

    The whole line has to match; a trailing newline is allowed. Raises
    MalformedLine, InvalidTimestamp or InvalidNumber, all ParseError.
    """
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]

    match = ACCESS_LOG_PATTERN.fullmatch(line)
    if not match:
        raise MalformedLine(line)
    groups = match.groupdict()

    stamp = groups['timestamp']
    if not TIMESTAMP_SHAPE.fullmatch(stamp):
        raise InvalidTimestamp(stamp)
    try:
        timestamp = datetime.strptime(stamp, TIMESTAMP_FORMAT)
    except ValueError:
        raise InvalidTimestamp(stamp) from None

    return LogEntry(
        ip=groups['ip'],
        user=groups['user'],
        timestamp=timestamp,
        method=groups['method'],
        path=groups['path'],
        protocol=groups['protocol'],
        status_code=_to_int('status_code', groups['status']),
        response_size=_to_int('response_size', groups['size']),
        referer=groups['referer'],
        user_agent=groups['user_agent'],
    )
