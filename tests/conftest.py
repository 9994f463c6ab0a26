import pytest

VALID_LINE = (
    '192.168.1.1 - frank [10/Oct/2023:13:55:36 -0700] '
    '"GET /index.html HTTP/1.1" 200 2326 "http://example.com" "Mozilla/5.0"'
)


def make_line(ip='10.0.0.1', status=200, size=100, path='/'):
    return (
        f'{ip} - - [10/Oct/2023:13:55:36 -0700] '
        f'"GET {path} HTTP/1.1" {status} {size} "-" "pytest"'
    )


@pytest.fixture
def write_log(tmp_path):
    def _write(*lines, name='access.log'):
        path = tmp_path / name
        path.write_text(''.join(line + '\n' for line in lines), encoding='utf-8')
        return path
    return _write
