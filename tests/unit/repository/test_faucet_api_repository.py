import asyncio
import json
from decimal import Decimal
from unittest.mock import AsyncMock
from unittest.mock import MagicMock
from unittest.mock import patch

import aiohttp
import pytest

from devnetrequester.repository.faucet_api_repository import FaucetApiRepository

ADDRESS = "2gAwqZmY7nRi9XCNQs3CjfSzDiVe5npwK3yS7ijo3E8h"
FAUCET_URL = "https://faucet.solana.com/api/airdrop"
SIGNATURE = "5J7XqWxkz6tzBvYUDwDYrHn7zJqKyxbgrA9Wq3UcPyRFz5NwhXfxJcRkY8nD3sGWqfJ"


def _mock_client_session(status: int = 200, body: str = "", side_effect=None):
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)

    session = MagicMock()
    session.post = AsyncMock(return_value=response, side_effect=side_effect)

    session_context = MagicMock()
    session_context.__aenter__ = AsyncMock(return_value=session)
    session_context.__aexit__ = AsyncMock(return_value=False)
    return MagicMock(return_value=session_context), session


@pytest.fixture
def repository():
    return FaucetApiRepository(FAUCET_URL, 30)


async def test_request_funds_success(repository):
    client_session, session = _mock_client_session(
        body=json.dumps({"signature": SIGNATURE})
    )
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is True
    assert result.transaction_signature == SIGNATURE
    assert result.error is None

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == FAUCET_URL
    # Amount is sent in lamports
    assert kwargs["json"] == {"address": ADDRESS, "amount": 5_000_000_000}
    timeout = client_session.call_args.kwargs["timeout"]
    assert timeout.total == 30


async def test_request_funds_no_signature(repository):
    client_session, _ = _mock_client_session(body=json.dumps({"message": "ok"}))
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert result.error == "No signature returned"


async def test_request_funds_non_json_body(repository):
    client_session, _ = _mock_client_session(body="<html>Bad gateway</html>")
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert result.error == "No signature returned"


async def test_request_funds_rate_limited(repository):
    body = json.dumps({"error": "You've reached your airdrop limit today"})
    client_session, _ = _mock_client_session(status=429, body=body)
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert result.error == f"429 - {body}"


async def test_request_funds_timeout(repository):
    client_session, _ = _mock_client_session(side_effect=asyncio.TimeoutError())
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert "timed out" in result.error


async def test_request_funds_connection_error(repository):
    client_session, _ = _mock_client_session(
        side_effect=aiohttp.ClientConnectionError("Connection refused")
    )
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert result.error == "Connection refused"


async def test_request_funds_non_string_signature(repository):
    client_session, _ = _mock_client_session(body=json.dumps({"signature": 123}))
    with patch.object(aiohttp, "ClientSession", client_session):
        result = await repository.request_funds(ADDRESS, Decimal("5"))

    assert result.success is False
    assert result.transaction_signature is None
    assert result.error == "No signature returned"
