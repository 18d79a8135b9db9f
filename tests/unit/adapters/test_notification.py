"""
Tests unitaires pour LoggingErrorNotifier.
"""

import pytest
from loguru import logger

from src.adapters.notification import LoggingErrorNotifier


@pytest.fixture
def captured_messages():
    """Capture les messages loguru emis pendant le test."""
    messages: list = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)


class TestLoggingErrorNotifier:
    """Tests pour notify."""

    @pytest.mark.asyncio
    async def test_logs_summary_and_each_path(self, captured_messages):
        await LoggingErrorNotifier().notify(["/library/A", "/library/B"])

        text = "".join(captured_messages)
        assert "2 chemin(s) en echec" in text
        assert "/library/A" in text
        assert "/library/B" in text
        assert len(captured_messages) == 3

    @pytest.mark.asyncio
    async def test_empty_report_still_logged(self, captured_messages):
        await LoggingErrorNotifier().notify([])

        assert len(captured_messages) == 1
        assert "aucun chemin" in captured_messages[0]
