"""statuslog - Constants and patterns"""

import re

VERSION = "1.0.0"

DEFAULT_LOG_PATH = "testdata/access.log"
LOG_PATH_ENV = "STATUSLOG_FILE"

# Combined log format, matched against the whole line
ACCESS_LOG_PATTERN = re.compile(
    r'(?P<ip>\d+\.\d+\.\d+\.\d+) - (?P<user>\S+) '
    r'\[(?P<timestamp>[^\]]+)\] '
    r'"(?P<method>\S+) (?P<path>\S+) (?P<protocol>\S+)" '
    r'(?P<status>\S+) (?P<size>\S+) '
    r'"(?P<referer>[^"]*)" "(?P<user_agent>[^"]*)"',
    re.ASCII,
)

# e.g. 10/Oct/2023:13:55:36 -0700
TIMESTAMP_FORMAT = "%d/%b/%Y:%H:%M:%S %z"
# strptime alone also takes single digits and offsets like "Z" or "-07:00"
TIMESTAMP_SHAPE = re.compile(r'\d{2}/[A-Za-z]{3}/\d{4}:\d{2}:\d{2}:\d{2} [+-]\d{4}', re.ASCII)
