from decimal import Decimal
from unittest.mock import AsyncMock
from unittest.mock import MagicMock
from unittest.mock import patch

import pytest

from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

ADDRESS = "2gAwqZmY7nRi9XCNQs3CjfSzDiVe5npwK3yS7ijo3E8h"
SIGNATURE = "9K2bGmPx7YwWZc3aXhVkQoNc8EjTq4vLrDs5uFgHy1BnMi6JtKpRw2eSzA7xCdUf3o"


@pytest.fixture
def client():
    mock = MagicMock()
    mock.get_balance = AsyncMock(return_value=MagicMock(value=1_500_000_000))
    mock.request_airdrop = AsyncMock(return_value=MagicMock(value=SIGNATURE))
    mock.get_latest_blockhash = AsyncMock(
        return_value=MagicMock(value=MagicMock(last_valid_block_height=1234))
    )
    mock.confirm_transaction = AsyncMock(
        return_value=MagicMock(value=[MagicMock(err=None)])
    )
    mock.get_version = AsyncMock(
        return_value=MagicMock(value=MagicMock(solana_core="2.1.13"))
    )
    return mock


@pytest.fixture
def repository(client):
    with patch(
        "devnetrequester.repository.solana_rpc_repository.AsyncClient",
        return_value=client,
    ):
        yield SolanaRpcRepository("https://api.devnet.solana.com", 30)


async def test_get_balance(repository, client):
    balance = await repository.get_balance(ADDRESS)

    assert balance == Decimal("1.5")
    client.get_balance.assert_called_once()
    assert str(client.get_balance.call_args.args[0]) == ADDRESS


async def test_get_balance_error(repository, client):
    client.get_balance.side_effect = Exception("503 Service Unavailable")

    assert await repository.get_balance(ADDRESS) is None


async def test_get_balance_invalid_address(repository, client):
    assert await repository.get_balance("invalid_address") is None
    client.get_balance.assert_not_called()


async def test_get_version(repository):
    assert await repository.get_version() == "2.1.13"


async def test_request_airdrop_success(repository, client):
    result = await repository.request_airdrop(ADDRESS, Decimal("2"))

    assert result.success is True
    assert result.transaction_signature == SIGNATURE
    args = client.request_airdrop.call_args.args
    assert str(args[0]) == ADDRESS
    assert args[1] == 2_000_000_000
    client.confirm_transaction.assert_called_once()
    assert client.confirm_transaction.call_args.kwargs["last_valid_block_height"] == 1234


async def test_request_airdrop_rejected(repository, client):
    client.request_airdrop.side_effect = Exception("429 Too Many Requests")

    result = await repository.request_airdrop(ADDRESS, Decimal("2"))

    assert result.success is False
    assert result.error == "429 Too Many Requests"
    client.confirm_transaction.assert_not_called()


async def test_request_airdrop_confirmation_error(repository, client):
    client.confirm_transaction.return_value = MagicMock(
        value=[MagicMock(err="InstructionError")]
    )

    result = await repository.request_airdrop(ADDRESS, Decimal("2"))

    assert result.success is False
    assert "was not confirmed" in result.error


async def test_request_airdrop_confirmation_timeout(repository, client):
    client.confirm_transaction.side_effect = Exception(
        "Unable to confirm transaction"
    )

    result = await repository.request_airdrop(ADDRESS, Decimal("2"))

    assert result.success is False
    assert result.error == "Unable to confirm transaction"
