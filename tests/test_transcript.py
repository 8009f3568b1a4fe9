"""Tests for the client-side conversation."""

import pytest

from chat_forms.models.messages import ChatMessage, ToolInvocation
from chat_forms.renderer.transcript import Conversation
from chat_forms.renderer.views import FormView, SubmittedView


FEEDBACK_FORM = {
    "title": "Share Your Feedback",
    "icon": "message",
    "accentColor": "amber",
    "fields": [{"id": "rating", "label": "Rating", "type": "rating"}],
    "submitLabel": "Submit Feedback",
}


def _assistant(*invocations: ToolInvocation, text: str = "") -> ChatMessage:
    return ChatMessage(id="a1", role="assistant", content=text, tool_invocations=list(invocations))


def _form_result(call_id: str, result) -> ToolInvocation:
    return ToolInvocation(tool_call_id=call_id, tool_name="renderForm", state="result", result=result)


class TestConversation:
    """Tests for mounting forms from assistant messages."""

    def test_mounts_form_once(self):
        """Test that a form result is mounted under its call id."""
        conversation = Conversation(chat_id="chat-1")
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM)))
        form = conversation.form("call_1")
        form.control("rating").click_star(4)

        # Re-adding the same invocation keeps the mounted form and its values
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM)))
        assert conversation.form("call_1") is form
        assert form.values["rating"] == "4"

    def test_skip_sentinel_renders_nothing(self):
        """Test that the skip sentinel leaves no trace."""
        conversation = Conversation()
        conversation.add_message(_assistant(
            _form_result("call_1", FEEDBACK_FORM),
            _form_result("call_2", {"__skipRender": True}),
        ))
        assert list(conversation.forms) == ["call_1"]
        tools = conversation.view()[0].tools
        assert [t.tool_call_id for t in tools] == ["call_1"]

    def test_pending_call_is_placeholder(self):
        """Test that an unfinished call shows a placeholder."""
        conversation = Conversation()
        conversation.add_message(_assistant(ToolInvocation(
            tool_call_id="call_1", tool_name="renderForm", state="call", args={},
        )))
        tool = conversation.view()[0].tools[0]
        assert tool.kind == "placeholder"
        assert conversation.forms == {}

    def test_other_tools_render_as_json(self):
        """Test that non-form tool results are shown as JSON."""
        conversation = Conversation()
        conversation.add_message(_assistant(ToolInvocation(
            tool_call_id="call_1", tool_name="getWeather", result={"temp": 21},
        )))
        tool = conversation.view()[0].tools[0]
        assert tool.kind == "json"
        assert '"temp": 21' in tool.text

    def test_error_result(self):
        """Test that a rejected form shows an error."""
        conversation = Conversation()
        conversation.add_message(_assistant(
            _form_result("call_1", {"error": "Field 'pick' of type 'select' requires options"}),
        ))
        tool = conversation.view()[0].tools[0]
        assert tool.kind == "error"
        assert "pick" in tool.text

    def test_invalid_form_result(self):
        """Test that an unreadable form result shows an error."""
        conversation = Conversation()
        conversation.add_message(_assistant(
            _form_result("call_1", {"fields": [{"id": "x", "type": "hologram"}]}),
        ))
        tool = conversation.view()[0].tools[0]
        assert tool.kind == "error"
        with pytest.raises(KeyError):
            conversation.form("call_1")

    def test_form_view(self):
        """Test the mounted form's view."""
        conversation = Conversation()
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM), text="Here you go."))
        message = conversation.view()[0]
        assert message.text == "Here you go."
        assert isinstance(message.tools[0].form, FormView)
        assert message.tools[0].form.title == "Share Your Feedback"


class TestSubmission:
    """Tests for submitting a mounted form."""

    def test_submit_appends_echo(self):
        """Test that submission becomes a prefixed user message."""
        conversation = Conversation()
        conversation.add_user_text("leave feedback")
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM)))
        form = conversation.form("call_1")
        form.control("rating").click_star(4)
        form.submit()

        last = conversation.messages[-1]
        assert last.role == "user"
        assert last.text == "Form submitted: rating: 4"
        assert conversation.take_outbox() == [last]
        assert conversation.take_outbox() == []

    def test_echo_hidden_from_view(self):
        """Test that the echo message is not shown."""
        conversation = Conversation()
        conversation.add_user_text("leave feedback")
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM)))
        conversation.form("call_1").submit()

        views = conversation.view()
        assert [v.role for v in views] == ["user", "assistant"]
        assert isinstance(views[1].tools[0].form, SubmittedView)

    def test_double_submit_sends_once(self):
        """Test that a second submit adds no message."""
        conversation = Conversation()
        conversation.add_message(_assistant(_form_result("call_1", FEEDBACK_FORM)))
        form = conversation.form("call_1")
        form.submit()
        form.submit()
        assert len(conversation.take_outbox()) == 1

    def test_history_mounts_forms(self):
        """Test building a conversation from saved messages."""
        conversation = Conversation(messages=[
            ChatMessage(role="user", content="leave feedback"),
            _assistant(_form_result("call_1", FEEDBACK_FORM)),
        ])
        assert "call_1" in conversation.forms
