"""
Chat HTTP server for Chat Forms.

Exposes the chat turn endpoint, chat deletion and a health check.
"""

from chat_forms.server.app import create_app, run_server
from chat_forms.server.store import InMemoryChatStore, SessionStore, StoredChat

__all__ = [
    "create_app",
    "run_server",
    "InMemoryChatStore",
    "SessionStore",
    "StoredChat",
]
