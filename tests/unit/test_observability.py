"""Unit tests for observability module."""

from unittest.mock import MagicMock, patch

import pytest


class TestLangFuseClient:
    """Test LangFuse client wrapper."""

    def test_get_langfuse_client_disabled(self):
        """Test getting LangFuse client when disabled."""
        from erp_analytics.observability import get_langfuse_client, reset_langfuse_client

        reset_langfuse_client()
        settings_instance = MagicMock()
        settings_instance.langfuse_enabled = False

        with patch("erp_analytics.config.settings.get_settings", return_value=settings_instance):
            client = get_langfuse_client()

        assert client is None
        reset_langfuse_client()

    def test_create_span_without_client(self):
        """Test that spans are skipped when no client is configured."""
        from erp_analytics.observability import create_span

        with patch("erp_analytics.observability.langfuse_client.get_langfuse_client", return_value=None):
            assert create_span(name="noop") is None

    def test_export_event_uses_client(self):
        """Test that export events are named by kind and carry the window."""
        from erp_analytics.observability import log_export_event

        mock_client = MagicMock()
        with patch("erp_analytics.observability.langfuse_client.get_langfuse_client", return_value=mock_client):
            log_export_event("analytics", window_days=30, account_id="user_1")

        kwargs = mock_client.create_event.call_args.kwargs
        assert kwargs["name"] == "analytics_exported"
        assert kwargs["input"] == {"window_days": 30}
        assert kwargs["metadata"] == {"account_id": "user_1"}

    def test_client_errors_are_not_raised(self):
        """Test that a failing backend does not break the caller."""
        from erp_analytics.observability import create_span, log_export_event

        mock_client = MagicMock()
        mock_client.start_span.side_effect = RuntimeError("langfuse down")
        mock_client.create_event.side_effect = RuntimeError("langfuse down")
        with patch("erp_analytics.observability.langfuse_client.get_langfuse_client", return_value=mock_client):
            assert create_span(name="analytics_report") is None
            log_export_event("data_backup", record_counts={"products": 1})

    def test_failed_init_not_retried(self):
        """Test that a client that fails to start is not rebuilt on every call."""
        from erp_analytics.observability import get_langfuse_client, reset_langfuse_client

        reset_langfuse_client()
        settings_instance = MagicMock()
        settings_instance.langfuse_enabled = True

        with (
            patch("erp_analytics.config.settings.get_settings", return_value=settings_instance),
            patch("langfuse.Langfuse", side_effect=RuntimeError("bad credentials")) as mock_langfuse,
        ):
            assert get_langfuse_client() is None
            assert get_langfuse_client() is None

        assert mock_langfuse.call_count == 1
        reset_langfuse_client()

    def test_flush_without_client_is_noop(self):
        """Test that flushing never creates a client."""
        from erp_analytics.observability import flush_langfuse, reset_langfuse_client

        reset_langfuse_client()
        with patch("erp_analytics.observability.langfuse_client.get_langfuse_client") as mock_get:
            flush_langfuse()

        mock_get.assert_not_called()


class TestTraceDecorator:
    """Test tracing decorator."""

    @pytest.mark.asyncio
    async def test_trace_decorator_async_function(self):
        """Test trace decorator on async function."""
        from erp_analytics.observability import trace

        @trace(name="test_function", trace_type="function")
        async def test_func(x, y):
            return x + y

        result = await test_func(2, 3)
        assert result == 5

    def test_trace_decorator_sync_function(self):
        """Test trace decorator on sync function."""
        from erp_analytics.observability import trace

        @trace(name="test_sync", trace_type="function")
        def test_func(x, y):
            return x * y

        assert test_func(4, 5) == 20
        assert test_func.__name__ == "test_func"

    @pytest.mark.asyncio
    async def test_trace_decorator_with_error(self):
        """Test trace decorator when function raises error."""
        from erp_analytics.observability import trace

        @trace(name="failing_function", trace_type="function")
        async def failing_func():
            raise ValueError("Test error")

        with pytest.raises(ValueError, match="Test error"):
            await failing_func()

    def test_span_updated_and_ended(self):
        """Test that a created span records the error and is ended."""
        from erp_analytics.observability import trace

        span = MagicMock()

        @trace(name="traced", trace_type="aggregation")
        def failing():
            raise RuntimeError("boom")

        with patch("erp_analytics.observability.decorators.create_span", return_value=span) as mock_create:
            with pytest.raises(RuntimeError):
                failing()

        assert mock_create.call_args.kwargs["name"] == "traced"
        assert mock_create.call_args.kwargs["metadata"]["type"] == "aggregation"
        assert span.update.call_args.kwargs["metadata"]["error"] == "boom"
        span.end.assert_called_once()

    def test_span_failure_does_not_break_function(self):
        """Test that tracing errors are ignored."""
        from erp_analytics.observability import trace

        span = MagicMock()
        span.update.side_effect = RuntimeError("langfuse down")

        @trace()
        def add(x, y):
            return x + y

        with patch("erp_analytics.observability.decorators.create_span", return_value=span):
            assert add(1, 2) == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
