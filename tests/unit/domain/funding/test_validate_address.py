from devnetrequester.domain.funding import validate_address


def test_valid_addresses():
    addresses = [
        "2gAwqZmY7nRi9XCNQs3CjfSzDiVe5npwK3yS7ijo3E8h",
        "4kbGbZtfkfkRVGunkbKX4M7dGPm9MghJZodjbnRZbmug",
        "11111111111111111111111111111111",
    ]
    for address in addresses:
        assert validate_address.execute(address) is True


def test_empty_address():
    assert validate_address.execute("") is False


def test_wrong_length():
    assert validate_address.execute("4kbGbZtfkfkRVGun") is False
    assert (
        validate_address.execute("4kbGbZtfkfkRVGunkbKX4M7dGPm9MghJZodjbnRZbmug4kbGbZ")
        is False
    )


def test_invalid_characters():
    # 0, O, I and l are not part of the base58 alphabet
    assert validate_address.execute("invalid_address") is False
    assert validate_address.execute("0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OIl0OI") is False
