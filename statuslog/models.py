"""statuslog - Data models"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Dict, List


@dataclass(frozen=True)
class LogEntry:
    """Parsed access log line"""
    ip: str
    user: str
    timestamp: datetime
    method: str
    path: str
    protocol: str
    status_code: int
    response_size: int
    referer: str
    user_agent: str

    def to_dict(self) -> Dict:
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data


@dataclass(frozen=True)
class StatusCodeCount:
    """Occurrences of one status code"""
    code: int
    count: int


@dataclass(frozen=True)
class ReadResult:
    """Entries read from one file, plus how many lines were dropped"""
    entries: List[LogEntry] = field(default_factory=list)
    skipped: int = 0
    total_lines: int = 0
