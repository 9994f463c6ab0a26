"""statuslog - Analysis pipeline"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from .aggregate import count_by_status, most_common_status
from .models import ReadResult, StatusCodeCount
from .reader import read_log


class LogAnalyzer:
    """Reads an access log and summarizes its status codes"""

    def __init__(self):
        self.result: Optional[ReadResult] = None
        self.status_counts: List[StatusCodeCount] = []

    def analyze_file(self, filepath: Union[str, Path]) -> Dict:
        self.result = read_log(filepath)
        self.status_counts = count_by_status(self.result.entries)
        return self.generate_report(str(filepath))

    def generate_report(self, filepath: str) -> Dict:
        entries = self.result.entries if self.result else []
        top = most_common_status(self.status_counts)

        return {
            'file': filepath,
            'summary': {
                'total_lines': self.result.total_lines if self.result else 0,
                'total_entries': len(entries),
                'skipped_lines': self.result.skipped if self.result else 0,
                'unique_status_codes': len(self.status_counts),
            },
            'first_entry': entries[0].to_dict() if entries else None,
            'most_common': {'code': top.code, 'count': top.count} if top else None,
            'status_codes': [{'code': s.code, 'count': s.count} for s in self.status_counts],
        }
