"""Tests for the Textual chat widget, driven headless with the pilot."""
import pytest

from simplechat.chat import FALLBACK_REPLY
from simplechat.transcript import ChatTurn, Sender
from simplechat.ui import ChatApp, ChatHistoryWidget, DebugPanel, HistoryInput, LogLevel


def _pairs(app: ChatApp) -> list[tuple[Sender, str]]:
    return [(turn.sender, turn.text) for turn in app.transcript]


async def _settle(app: ChatApp, pilot) -> None:
    """Let submitted messages start their workers, then wait for replies."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestLogLevel:
    """Tests for LogLevel helpers."""

    def test_parse(self):
        assert LogLevel.parse("error") is LogLevel.ERROR
        assert LogLevel.parse("WARNING") is LogLevel.WARNING
        assert LogLevel.parse("bogus") is LogLevel.DEBUG

    def test_ordering(self):
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR


class TestChatApp:
    """Tests for ChatApp send flow."""

    @pytest.mark.asyncio
    async def test_enter_sends_message(self, scripted_llm):
        """Example scenario through the UI: Hello -> Hi there!"""
        app = ChatApp(llm=scripted_llm("Hi there!"))
        async with app.run_test() as pilot:
            text_input = app.query_one("#chat-input", HistoryInput)
            text_input.value = "Hello"
            await pilot.press("enter")
            await _settle(app, pilot)

            assert _pairs(app) == [
                (Sender.USER, "Hello"),
                (Sender.ASSISTANT, "Hi there!"),
            ]
            assert text_input.value == ""
            assert len(app.query(".chat-turn")) == 2
            assert len(app.query(".user-turn")) == 1
            assert len(app.query(".assistant-turn")) == 1

    @pytest.mark.asyncio
    async def test_send_button(self, scripted_llm):
        llm = scripted_llm("pong")
        app = ChatApp(llm=llm)
        async with app.run_test() as pilot:
            app.query_one("#chat-input", HistoryInput).value = "ping"
            await pilot.click("#send-btn")
            await _settle(app, pilot)

            assert _pairs(app) == [
                (Sender.USER, "ping"),
                (Sender.ASSISTANT, "pong"),
            ]
            assert len(llm.calls) == 1

    @pytest.mark.asyncio
    async def test_blank_input_is_ignored(self, scripted_llm):
        llm = scripted_llm()
        app = ChatApp(llm=llm)
        async with app.run_test() as pilot:
            text_input = app.query_one("#chat-input", HistoryInput)
            text_input.value = "   "
            await pilot.press("enter")
            await _settle(app, pilot)

            assert len(app.transcript) == 0
            assert llm.calls == []
            assert text_input.value == "   "

    @pytest.mark.asyncio
    async def test_input_clears_before_reply(self, scripted_llm, gated_reply):
        """Test that the user turn and the empty input appear while the request is pending."""
        gate, reply = gated_reply("Hi there!")
        app = ChatApp(llm=scripted_llm(reply), model="test-model")
        async with app.run_test() as pilot:
            text_input = app.query_one("#chat-input", HistoryInput)
            text_input.value = "Hello"
            await pilot.press("enter")
            await pilot.pause()

            assert _pairs(app) == [(Sender.USER, "Hello")]
            assert text_input.value == ""
            assert app.awaiting == 1
            assert app.sub_title == "test-model | awaiting reply"

            gate.set()
            await _settle(app, pilot)

            assert len(app.transcript) == 2
            assert app.awaiting == 0
            assert app.sub_title == "test-model | idle"

    @pytest.mark.asyncio
    async def test_concurrent_sends_all_settle(self, scripted_llm, gated_reply):
        """Test that a second send while the first is pending is not dropped."""
        slow_gate, slow_reply = gated_reply("slow answer")
        app = ChatApp(llm=scripted_llm(slow_reply, "fast answer"))
        async with app.run_test() as pilot:
            text_input = app.query_one("#chat-input", HistoryInput)
            text_input.value = "first"
            await pilot.press("enter")
            await pilot.pause()
            text_input.value = "second"
            await pilot.press("enter")
            await pilot.pause()
            await pilot.pause()

            slow_gate.set()
            await _settle(app, pilot)

            assert _pairs(app) == [
                (Sender.USER, "first"),
                (Sender.USER, "second"),
                (Sender.ASSISTANT, "fast answer"),
                (Sender.ASSISTANT, "slow answer"),
            ]
            assert app.awaiting == 0

    @pytest.mark.asyncio
    async def test_failure_shows_fallback_and_logs(self, scripted_llm):
        app = ChatApp(llm=scripted_llm(ConnectionError("network unreachable")))
        async with app.run_test() as pilot:
            app.query_one("#chat-input", HistoryInput).value = "Hello"
            await pilot.press("enter")
            await _settle(app, pilot)

            assert _pairs(app) == [
                (Sender.USER, "Hello"),
                (Sender.ASSISTANT, FALLBACK_REPLY),
            ]
            assert app.query_one("#debug-panel", DebugPanel).entry_count >= 1

    @pytest.mark.asyncio
    async def test_clear_chat(self, scripted_llm):
        app = ChatApp(llm=scripted_llm("Hi there!"))
        async with app.run_test() as pilot:
            app.query_one("#chat-input", HistoryInput).value = "Hello"
            await pilot.press("enter")
            await _settle(app, pilot)

            await pilot.press("ctrl+l")
            await pilot.pause()

            assert len(app.transcript) == 0
            assert len(app.query(".chat-turn")) == 0

    @pytest.mark.asyncio
    async def test_history_scrolls_to_newest_turn(self, scripted_llm):
        app = ChatApp(llm=scripted_llm("latest reply"))
        async with app.run_test(size=(80, 24)) as pilot:
            history = app.query_one("#chat-history", ChatHistoryWidget)
            for i in range(30):
                app.transcript.append(ChatTurn(sender=Sender.USER, text=f"line {i}"))
            await pilot.pause()
            await pilot.pause()

            assert history.max_scroll_y > 0
            assert history.scroll_y == history.max_scroll_y

            # A send after scrolling away brings the newest turn back into view
            history.scroll_home(animate=False)
            await pilot.pause()
            assert history.scroll_y == 0

            app.query_one("#chat-input", HistoryInput).value = "Hello"
            await pilot.press("enter")
            await _settle(app, pilot)
            await pilot.pause()

            assert app.transcript.last().text == "latest reply"
            assert history.scroll_y == history.max_scroll_y > 0

    @pytest.mark.asyncio
    async def test_input_history_recall(self, scripted_llm):
        app = ChatApp(llm=scripted_llm("one", "two"))
        async with app.run_test() as pilot:
            text_input = app.query_one("#chat-input", HistoryInput)
            for text in ("first", "second"):
                text_input.value = text
                await pilot.press("enter")
                await _settle(app, pilot)

            assert text_input.history == ["first", "second"]

            await pilot.press("up")
            assert text_input.value == "second"
            await pilot.press("up")
            assert text_input.value == "first"
            await pilot.press("down")
            assert text_input.value == "second"
            await pilot.press("down")
            assert text_input.value == ""


class TestDebugPanel:
    """Tests for the log panel."""

    @pytest.mark.asyncio
    async def test_hidden_by_default_and_toggle(self, scripted_llm):
        app = ChatApp(llm=scripted_llm())
        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display is False

            await pilot.press("f2")
            assert panel.display is True
            assert panel.border_subtitle == "Level: DEBUG"

            await pilot.press("f2")
            assert panel.display is False

    @pytest.mark.asyncio
    async def test_log_level_filters_entries(self, scripted_llm):
        app = ChatApp(llm=scripted_llm("fine"), log_level="error")
        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display is True
            assert panel.log_level == LogLevel.ERROR

            app.query_one("#chat-input", HistoryInput).value = "Hello"
            await pilot.press("enter")
            await _settle(app, pilot)

            # Successful sends only log at info/debug
            assert panel.entry_count == 0

            panel.error("TUI", "something [bold]odd[/bold]")
            assert panel.entry_count == 1
