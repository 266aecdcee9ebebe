from concurrent.futures import ThreadPoolExecutor

from jdb_client import connect, next_request_id


def test_ids_start_at_one_and_increase():
    c = connect("http://127.0.0.1:6001", "n1")
    assert [next_request_id(c) for _ in range(3)] == [1, 2, 3]


def test_handles_do_not_share_counters():
    a = connect("http://127.0.0.1:6001", "a")
    b = connect("http://127.0.0.1:6001", "b")
    a.next_request_id()
    a.next_request_id()
    assert b.next_request_id() == 1
    assert a.next_request_id() == 3


def test_concurrent_ids_are_unique_and_complete():
    c = connect("http://127.0.0.1:6001", "n1")
    n = 2000
    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(lambda _: c.next_request_id(), range(n)))
    assert sorted(ids) == list(range(1, n + 1))


def test_every_operation_takes_a_fresh_id(client, session):
    session.reply(200, '{"ok": true}').reply(200, '{"value": "1"}').reply(200, '{"replaced": false}')
    client.put("x", "1")
    client.get("x")
    client.cas("x", "0", "2")
    assert [call[1]["params"]["id"] for call in session.calls] == [1, 2, 3]
