from statuslog import StatusCodeCount, count_by_status, most_common_status, parse_line

from conftest import make_line


def entries_with(*statuses):
    return [parse_line(make_line(status=s)) for s in statuses]


def test_empty_input():
    assert count_by_status([]) == []
    assert most_common_status([]) is None


def test_counts_sorted_ascending_with_code_tiebreak():
    counts = count_by_status(entries_with(200, 200, 404, 200, 500))

    assert counts == [
        StatusCodeCount(404, 1),
        StatusCodeCount(500, 1),
        StatusCodeCount(200, 3),
    ]
    assert most_common_status(counts) == StatusCodeCount(200, 3)


def test_one_element_per_distinct_code():
    counts = count_by_status(entries_with(301, 302, 302, 304, 301, 302))
    assert {c.code: c.count for c in counts} == {301: 2, 302: 3, 304: 1}
    assert [c.count for c in counts] == sorted(c.count for c in counts)


def test_idempotent_and_input_untouched():
    entries = entries_with(500, 200, 500)
    snapshot = list(entries)

    assert count_by_status(entries) == count_by_status(entries)
    assert entries == snapshot


def test_accepts_any_iterable():
    counts = count_by_status(iter(entries_with(418)))
    assert counts == [StatusCodeCount(418, 1)]
