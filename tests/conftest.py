"""测试夹具。"""

import pytest

from storage import JsonFileStore
from wallet_store import WalletStore


@pytest.fixture
def secret_store(tmp_path) -> JsonFileStore:
    """预先写入敏感键的持久化存储。"""
    store = JsonFileStore(tmp_path / "wallet_secrets.json")
    store.set("wallets", [{"id": "old"}])
    store.set("mnemonics", ["old phrase"])
    store.set("unrelated", 1)
    return store


@pytest.fixture
def store(secret_store) -> WalletStore:
    return WalletStore(durable_store=secret_store)


@pytest.fixture
def failing_urandom(monkeypatch):
    """让安全随机源抛出 OSError。"""
    import wallet_service

    def _fail(size):
        raise OSError("entropy source offline")

    monkeypatch.setattr(wallet_service.os, "urandom", _fail)
