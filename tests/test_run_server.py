"""Tests for the server entry point."""

import logging

import run_server as entry_point
from chat_forms.server import SessionStore


class FixedTokenSessions(SessionStore):
    def create(self, user_id: str) -> str:
        self._sessions["tok-123"] = user_id
        return "tok-123"


class TestMain:
    """Tests for main()."""

    def test_token_printed_not_logged(self, monkeypatch, capsys, caplog):
        """Test that the session token goes to stdout and never to the log."""
        served = []

        async def fake_run_server(app, host=None, port=None):
            served.append((host, port))

        monkeypatch.setattr(entry_point, "run_server", fake_run_server)
        monkeypatch.setattr(entry_point, "SessionStore", FixedTokenSessions)
        monkeypatch.setattr("sys.argv", ["run_server.py", "--port", "9200", "--user", "ana"])
        caplog.set_level(logging.DEBUG)

        entry_point.main()

        assert [port for _, port in served] == [9200]
        assert "Session token for 'ana': tok-123" in capsys.readouterr().out
        assert "tok-123" not in caplog.text
