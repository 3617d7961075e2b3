"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Header injection
- Slow request detection
- Error handling
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from markertrack.server.middleware.logfire_middleware import LogfireMiddleware


def _request(method: str = "GET", path: str = "/api/user"):
    mock_request = AsyncMock(spec=Request)
    mock_request.method = method
    mock_request.url.path = path
    mock_request.state = MagicMock()
    return mock_request


class TestLogfireMiddlewareDispatch:
    """Test LogfireMiddleware.dispatch method."""

    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        mock_response = Response(content="test", status_code=200)

        async def mock_call_next(request):
            return mock_response

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("markertrack.server.middleware.logfire_middleware.log_api_request") as mock_log:
            response = await middleware.dispatch(_request(), mock_call_next)

            assert response.status_code == 200
            mock_log.assert_called_once()
            call_args = mock_log.call_args
            assert call_args[1]["method"] == "GET"
            assert call_args[1]["path"] == "/api/user"
            assert call_args[1]["status_code"] == 200
            assert call_args[1]["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_middleware_adds_process_time_header(self):
        async def mock_call_next(request):
            return Response(content="test", status_code=201)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("markertrack.server.middleware.logfire_middleware.log_api_request"):
            response = await middleware.dispatch(_request("POST"), mock_call_next)

        assert "X-Process-Time" in response.headers
        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_slow_request_logs_warning(self):
        async def mock_call_next(request):
            return Response(content="slow", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock(), slow_request_ms=-1)

        with patch("markertrack.server.middleware.logfire_middleware.log_api_request"), patch(
            "markertrack.server.middleware.logfire_middleware.logger"
        ) as mock_logger:
            await middleware.dispatch(_request(), mock_call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]

    @pytest.mark.asyncio
    async def test_fast_request_does_not_warn(self):
        async def mock_call_next(request):
            return Response(content="fast", status_code=200)

        middleware = LogfireMiddleware(app=AsyncMock(), slow_request_ms=60_000)

        with patch("markertrack.server.middleware.logfire_middleware.log_api_request"), patch(
            "markertrack.server.middleware.logfire_middleware.logger"
        ) as mock_logger:
            await middleware.dispatch(_request(), mock_call_next)

        mock_logger.warning.assert_not_called()

    @pytest.mark.asyncio
    async def test_middleware_reraises_and_reports_500(self):
        async def mock_call_next(request):
            raise RuntimeError("boom")

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("markertrack.server.middleware.logfire_middleware.log_api_request") as mock_log, patch(
            "markertrack.server.middleware.logfire_middleware.logger"
        ) as mock_logger:
            with pytest.raises(RuntimeError):
                await middleware.dispatch(_request(), mock_call_next)

        mock_logger.error.assert_called_once()
        assert mock_log.call_args[1]["status_code"] == 500

    def test_default_threshold(self):
        assert LogfireMiddleware(app=AsyncMock()).slow_request_ms == 1000.0
