import json
import threading

from cmadness.webserver.stats import RequestStats


def test_initial_dump():
    assert RequestStats().dump_json() == (
        b'HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{"total_requests":0}'
    )


def test_counts_requests():
    stats = RequestStats()
    for _ in range(3):
        stats.increment("10.0.0.1", "/")
    body = stats.dump_json().partition(b"\r\n\r\n")[2]
    assert json.loads(body) == {"total_requests": 3}


def test_thread_safe_counting():
    stats = RequestStats()

    def hammer():
        for _ in range(500):
            stats.increment("10.0.0.1", "/")

    workers = [threading.Thread(target=hammer) for _ in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    assert stats.total_requests == 4 * 500