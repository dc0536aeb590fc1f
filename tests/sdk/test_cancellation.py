from typing import List

from gorgias._utils import CancellationToken, LinkedCancellationToken


class TestCancellationToken:
    def test_cancel_runs_callbacks_once(self) -> None:
        token = CancellationToken()
        calls: List[str] = []
        token.add_callback(lambda: calls.append("a"))

        token.cancel()
        token.cancel()

        assert token.cancelled
        assert calls == ["a"]
        assert token.listener_count == 0

    def test_callback_on_cancelled_token_runs_immediately(self) -> None:
        token = CancellationToken()
        token.cancel()
        calls: List[int] = []

        token.add_callback(lambda: calls.append(1))

        assert calls == [1]

    def test_unregister(self) -> None:
        token = CancellationToken()
        calls: List[int] = []
        unregister = token.add_callback(lambda: calls.append(1))

        unregister()
        unregister()
        token.cancel()

        assert calls == []


class TestLinkedToken:
    def test_fires_when_any_source_fires(self) -> None:
        first, second = CancellationToken(), CancellationToken()
        linked = CancellationToken.any_of(first, second)

        second.cancel()

        assert linked.cancelled
        assert not first.cancelled

    def test_unlinks_from_all_sources_on_trigger(self) -> None:
        first, second = CancellationToken(), CancellationToken()
        CancellationToken.any_of(first, second)

        assert first.listener_count == 1
        second.cancel()

        assert first.listener_count == 0

    def test_close_unlinks_without_cancelling(self) -> None:
        source = CancellationToken()

        with CancellationToken.any_of(source) as linked:
            assert source.listener_count == 1

        assert source.listener_count == 0
        source.cancel()
        assert not linked.cancelled

    def test_already_cancelled_source(self) -> None:
        source = CancellationToken()
        source.cancel()

        linked = CancellationToken.any_of(source, CancellationToken())

        assert linked.cancelled

    def test_none_sources_are_ignored(self) -> None:
        linked = CancellationToken.any_of(None, None)

        assert isinstance(linked, LinkedCancellationToken)
        assert not linked.cancelled

    def test_linked_callbacks_run(self) -> None:
        source = CancellationToken()
        linked = CancellationToken.any_of(source)
        calls: List[int] = []
        linked.add_callback(lambda: calls.append(1))

        source.cancel()

        assert calls == [1]
