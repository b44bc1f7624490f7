"""密钥材料生成测试。"""

import re

import pytest
from base58 import b58decode

import wallet_service
from config import ChainType
from errors import ChainUnsupported, EntropyUnavailable
from wallet_service import (
    derive_public_key,
    generate_keypair,
    generate_phrase,
    is_valid_public_key,
    validate_phrase,
)

ETH_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


class TestGeneratePhrase:
    """助记词生成。"""

    def test_default_is_twelve_words(self):
        mnemonic = generate_phrase()
        assert mnemonic.word_count == 12
        assert len(mnemonic.words()) == 12

    def test_checksum_valid(self):
        assert validate_phrase(generate_phrase().phrase)

    def test_consecutive_phrases_differ(self):
        assert generate_phrase().phrase != generate_phrase().phrase

    @pytest.mark.parametrize("num_words", [12, 15, 18, 21, 24])
    def test_supported_word_counts(self, num_words):
        mnemonic = generate_phrase(num_words)
        assert mnemonic.word_count == num_words
        assert validate_phrase(mnemonic.phrase)

    def test_unsupported_word_count(self):
        with pytest.raises(ValueError):
            generate_phrase(13)

    def test_known_vectors(self):
        assert validate_phrase(" ".join(["abandon"] * 11 + ["about"]))
        # 词表正确但校验和错误
        assert not validate_phrase(" ".join(["abandon"] * 12))
        assert not validate_phrase("abandon abandon notaword")

    def test_repr_hides_phrase(self):
        mnemonic = generate_phrase()
        assert mnemonic.phrase not in repr(mnemonic)

    def test_entropy_unavailable(self, failing_urandom):
        with pytest.raises(EntropyUnavailable):
            generate_phrase()


class TestEthereumKeypair:
    """以太坊密钥。"""

    def test_address_format(self):
        public_key, private_key = generate_keypair(ChainType.ETHEREUM)
        assert ETH_ADDRESS_RE.match(public_key)
        assert is_valid_public_key(ChainType.ETHEREUM, public_key)
        assert re.match(r"^0x[0-9a-f]{64}$", private_key)

    def test_private_key_derives_address(self):
        public_key, private_key = generate_keypair(ChainType.ETHEREUM)
        assert derive_public_key(ChainType.ETHEREUM, private_key) == public_key

    def test_lowercase_address_is_not_checksummed(self):
        public_key, _ = generate_keypair(ChainType.ETHEREUM)
        if public_key.lower() != public_key:
            assert not is_valid_public_key(ChainType.ETHEREUM, public_key.lower())

    def test_keys_are_fresh(self):
        assert generate_keypair(ChainType.ETHEREUM) != generate_keypair(ChainType.ETHEREUM)

    def test_out_of_range_candidate_is_redrawn(self, monkeypatch):
        draws = iter([b"\x00" * 32, b"\xff" * 32, b"\x01" * 32])
        monkeypatch.setattr(wallet_service, "_secure_random_bytes", lambda size: next(draws))
        _, private_key = generate_keypair(ChainType.ETHEREUM)
        assert private_key == "0x" + "01" * 32

    def test_entropy_unavailable(self, failing_urandom):
        with pytest.raises(EntropyUnavailable):
            generate_keypair(ChainType.ETHEREUM)


class TestSolanaKeypair:
    """Solana 密钥。"""

    def test_formats(self):
        public_key, private_key = generate_keypair(ChainType.SOLANA)
        assert len(b58decode(public_key)) == 32
        assert is_valid_public_key(ChainType.SOLANA, public_key)
        assert len(private_key) == 128
        bytes.fromhex(private_key)

    def test_secret_key_ends_with_public_key(self):
        public_key, private_key = generate_keypair(ChainType.SOLANA)
        assert bytes.fromhex(private_key)[32:] == b58decode(public_key)

    def test_private_key_derives_public_key(self):
        public_key, private_key = generate_keypair(ChainType.SOLANA)
        assert derive_public_key(ChainType.SOLANA, private_key) == public_key

    def test_mismatched_secret_key_rejected(self):
        _, first = generate_keypair(ChainType.SOLANA)
        _, second = generate_keypair(ChainType.SOLANA)
        with pytest.raises(ValueError):
            derive_public_key(ChainType.SOLANA, first[:64] + second[64:])

    def test_invalid_base58(self):
        assert not is_valid_public_key(ChainType.SOLANA, "0OIl")

    def test_entropy_unavailable(self, failing_urandom):
        with pytest.raises(EntropyUnavailable):
            generate_keypair(ChainType.SOLANA)


class TestUnsupportedChain:
    """链类型校验。"""

    @pytest.mark.parametrize("chain", ["bitcoin", "Ethereum", "", None])
    def test_rejected(self, chain):
        with pytest.raises(ChainUnsupported):
            generate_keypair(chain)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            derive_public_key("tron", "00")
