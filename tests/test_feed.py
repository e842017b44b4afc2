"""Tests for the change feed"""
from git_porcelain.utils import ChangeFeed


class TestChangeFeed:
    def test_publish_calls_subscribers(self):
        feed = ChangeFeed()
        received = []
        feed.subscribe(received.append)

        feed.publish(1)
        feed.publish(2)

        assert received == [1, 2]

    def test_unsubscribe(self):
        feed = ChangeFeed()
        received = []
        unsubscribe = feed.subscribe(received.append)

        unsubscribe()
        feed.publish(1)

        assert received == []
        assert len(feed) == 0

    def test_failing_subscriber_does_not_stop_others(self):
        feed = ChangeFeed()
        received = []

        def broken(value):
            raise RuntimeError("boom")

        feed.subscribe(broken)
        feed.subscribe(received.append)
        feed.publish("x")

        assert received == ["x"]
