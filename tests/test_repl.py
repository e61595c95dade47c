import httpx
import openai

from chatterm import ChatREPL, TransportError
from chatterm.cli import INTRO
from .test_base import BaseChatTest, completion_body, raw_reply


class TestREPL(BaseChatTest):
    def test_repl_basic_interaction(self):
        """A message is wrapped in the prompt template and the reply remembered"""
        self.set_input("hello")
        self.set_replies("Hi there")

        self.chat.repl()

        self.assertEqual(self.sent_prompts(), ["User: hello\nChatbot:"])
        self.assertEqual(self.chat.turn.last_input, "hello")
        self.assertEqual(self.chat.turn.last_response, "Hi there")
        self.assertTrue(any("Hi there" in line for line in self.printed()))

    def test_resend_reuses_last_input(self):
        """'r' sends the remembered input, never the literal 'r'"""
        self.set_input("hello", "r")
        self.set_replies("Hi there", "Hello again")

        self.chat.repl()

        self.assertEqual(self.sent_prompts(), ["User: hello\nChatbot:"] * 2)
        self.assertEqual(self.chat.turn.last_input, "hello")
        self.assertEqual(self.chat.turn.last_response, "Hello again")

    def test_previous_input_echoed_before_sending(self):
        """The old input is shown before the new one goes out"""
        printed_at_send = []

        def fake_create(**kwargs):
            printed_at_send.append(self.printed())
            return self.replies.pop(0)

        self.replies = [raw_reply(completion_body("one")), raw_reply(completion_body("two"))]
        self.mock_create.side_effect = fake_create
        self.set_input("first", "second")

        self.chat.repl()

        self.assertFalse(any("Previous: first" in line for line in printed_at_send[0]))
        self.assertTrue(any("Previous: first" in line for line in printed_at_send[1]))
        self.assertEqual(self.sent_prompts()[1], "User: second\nChatbot:")
        self.assertEqual(self.chat.turn.last_input, "second")

    def test_intro_and_clear_only_once(self):
        """The screen is cleared and the intro printed on the first iteration only"""
        self.set_input("one", "two")
        self.set_replies("a", "b")

        self.chat.repl()

        self.mock_clear.assert_called_once()
        self.assertEqual(sum(INTRO in line for line in self.printed()), 1)

    def test_end_of_input_stops_loop(self):
        """Ctrl-D at the prompt ends the loop without a request"""
        self.set_input()

        self.chat.repl()

        self.mock_create.assert_not_called()

    def test_client_failure_ends_loop(self):
        """Errors are not recovered: the loop stops at the failing turn"""
        self.set_input("hello", "never read")
        self.mock_create.side_effect = openai.APIConnectionError(
            request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        )

        with self.assertRaises(TransportError):
            self.chat.repl()

        self.assertEqual(self.mock_console.input.call_count, 1)
        self.assertIsNone(self.chat.turn.last_response)

    def test_basic_variant(self):
        """The bare loop has no commands, no footer and no screen clearing"""
        chat = ChatREPL(self.client, extended=False)
        self.set_input("c", "r")
        self.set_replies("first reply", "second reply")

        chat.repl()

        self.assertEqual(self.sent_prompts(), ["User: c\nChatbot:", "User: r\nChatbot:"])
        self.mock_copy.assert_not_called()
        self.mock_clear.assert_not_called()
        self.assertFalse(any("Previous:" in line for line in self.printed()))
        self.assertFalse(any(INTRO in line for line in self.printed()))
