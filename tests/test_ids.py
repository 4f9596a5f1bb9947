from concurrent.futures import ThreadPoolExecutor

from alers.ids import next_id


def test_ids_are_distinct():
    ids = [next_id() for _ in range(1000)]
    assert len(set(ids)) == len(ids)


def test_ids_increase():
    first = next_id()
    second = next_id()
    assert second > first


def test_ids_unique_across_threads():
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: next_id(), range(8 * 200)))
    assert len(results) == 8 * 200
    assert len(set(results)) == len(results)