import threading

from wordcrawl.domain.visited_tracker import VisitedTracker


def test_url_not_visited_initially():
    tracker = VisitedTracker()
    assert not tracker.is_visited("https://example.com")
    assert len(tracker) == 0


def test_claiming_url_makes_it_visited():
    tracker = VisitedTracker()
    assert tracker.claim("https://example.com")
    assert tracker.is_visited("https://example.com")


def test_different_urls_tracked_independently():
    tracker = VisitedTracker()
    tracker.claim("https://example.com")
    assert tracker.is_visited("https://example.com")
    assert not tracker.is_visited("https://other.com")


def test_second_claim_of_same_url_fails():
    tracker = VisitedTracker()
    assert tracker.claim("https://example.com")
    assert not tracker.claim("https://example.com")
    assert len(tracker) == 1


def test_concurrent_claims_have_exactly_one_winner():
    tracker = VisitedTracker()
    barrier = threading.Barrier(16)
    wins = []
    lock = threading.Lock()

    def worker():
        barrier.wait()
        won = tracker.claim("https://example.com/hot")
        with lock:
            wins.append(won)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert wins.count(True) == 1
    assert tracker.snapshot() == frozenset({"https://example.com/hot"})
