"""statuslog - Log file reader"""

import logging
from pathlib import Path
from typing import List, Union

from .errors import LogReadError, ParseError
from .models import LogEntry, ReadResult
from .parser import parse_line

logger = logging.getLogger(__name__)


def read_log(filepath: Union[str, Path]) -> ReadResult:
    """Parse every line of an access log.

    Lines that fail to parse are logged and skipped. Failing to open or
    read the file raises LogReadError and nothing is returned.
    """
    path = Path(filepath)
    entries: List[LogEntry] = []
    skipped = 0
    line_num = 0

    logger.debug("Reading %s", path)
    try:
        with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
            for line_num, line in enumerate(f, 1):
                try:
                    entries.append(parse_line(line))
                except ParseError as e:
                    skipped += 1
                    logger.warning("%s:%d: failed to parse: %s", path, line_num, e)
    except OSError as e:
        raise LogReadError(path, e.strerror or str(e)) from e

    logger.info("Parsed %d of %d lines from %s", len(entries), line_num, path)
    return ReadResult(entries=entries, skipped=skipped, total_lines=line_num)
