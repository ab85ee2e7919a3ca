# Area: Shared Tests
"""Tests for the session channel notifier."""

from xox_coordinator._shared.notifier import ChannelNotifier, channel_key


class TestChannelKey:
    def test_key_format(self):
        assert channel_key(42) == "session:42"


class TestChannelNotifier:
    """Tests for ChannelNotifier class."""

    def test_subscriber_receives_payload(self):
        notifier = ChannelNotifier()
        with notifier.subscribe("session:1") as queue:
            notifier.broadcast('{"v": 1}', "session:1")
            assert queue.get(timeout=1) == '{"v": 1}'

    def test_channels_are_isolated(self):
        """Test that a broadcast only reaches its own channel."""
        notifier = ChannelNotifier()
        with notifier.subscribe("session:1") as one, notifier.subscribe("session:2") as two:
            notifier.broadcast("a", "session:1")
            assert one.get(timeout=1) == "a"
            assert two.empty()

    def test_every_subscriber_gets_a_copy(self):
        notifier = ChannelNotifier()
        with notifier.subscribe("session:1") as a, notifier.subscribe("session:1") as b:
            notifier.broadcast("x", "session:1")
            assert a.get(timeout=1) == "x"
            assert b.get(timeout=1) == "x"

    def test_unsubscribe_on_exit(self):
        notifier = ChannelNotifier()
        with notifier.subscribe("session:1"):
            assert notifier.subscriber_count("session:1") == 1
        assert notifier.subscriber_count("session:1") == 0

    def test_broadcast_without_subscribers(self):
        """Test that broadcasting to an empty channel is a no-op."""
        ChannelNotifier().broadcast("x", "session:9")
