"""密钥材料生成服务，支持以太坊与 Solana 双链。

每次调用都从操作系统安全随机源读取新的熵，钱包之间互相独立，
不从助记词派生。
"""

import logging
import os
from typing import Tuple

from base58 import b58decode, b58encode
from eth_account import Account
from eth_keys import constants as eth_constants
from eth_utils import is_checksum_address
from mnemonic import Mnemonic as Bip39Mnemonic
from nacl.signing import SigningKey

from config import MNEMONIC_WORD_COUNT, SUPPORTED_CHAINS, WORD_COUNT_TO_STRENGTH, ChainType
from errors import ChainUnsupported, EntropyUnavailable
from models import Mnemonic

logger = logging.getLogger(__name__)

# 使用标准 BIP39 英文词表的编码器
MNEMONIC_GEN = Bip39Mnemonic("english")

# 曲线阶常量
SECP256K1_N = eth_constants.SECPK1_N

ED25519_SEED_SIZE = 32


def _secure_random_bytes(size: int) -> bytes:
    """读取操作系统安全随机源，失败时直接报错。"""
    try:
        data = os.urandom(size)
    except (OSError, NotImplementedError) as exc:
        logger.error("安全随机源不可用: %s", exc)
        raise EntropyUnavailable("无法读取安全随机源") from exc
    if len(data) != size:
        raise EntropyUnavailable("安全随机源返回的字节数不足")
    return data


def ensure_supported_chain(chain: str) -> str:
    """校验链类型，返回规范值。"""
    if chain not in SUPPORTED_CHAINS:
        raise ChainUnsupported(chain)
    return chain


def generate_phrase(num_words: int = MNEMONIC_WORD_COUNT) -> Mnemonic:
    """使用标准 BIP39 词表生成带校验和的助记词。"""
    if num_words not in WORD_COUNT_TO_STRENGTH:
        raise ValueError("助记词长度仅支持 12/15/18/21/24")
    entropy = _secure_random_bytes(WORD_COUNT_TO_STRENGTH[num_words] // 8)
    return Mnemonic(MNEMONIC_GEN.to_mnemonic(entropy))


def validate_phrase(phrase: str) -> bool:
    """校验助记词的词表与校验和。"""
    try:
        return bool(MNEMONIC_GEN.check(phrase))
    except (ValueError, LookupError):
        return False


def _generate_ethereum_keypair() -> Tuple[str, str]:
    """生成 secp256k1 私钥，返回校验和地址与 0x 前缀十六进制私钥。"""
    while True:
        candidate = _secure_random_bytes(32)
        # 私钥必须落在 [1, n-1]，越界则重新抽取
        if 0 < int.from_bytes(candidate, "big") < SECP256K1_N:
            break
    acct = Account.from_key(candidate)
    return acct.address, "0x" + candidate.hex()


def _generate_solana_keypair() -> Tuple[str, str]:
    """生成 ed25519 密钥，返回 Base58 公钥与 64 字节密钥的十六进制。"""
    signing_key = SigningKey(_secure_random_bytes(ED25519_SEED_SIZE))
    verify_key = signing_key.verify_key
    secret_key_bytes = signing_key.encode() + verify_key.encode()
    address = b58encode(verify_key.encode()).decode("utf-8")
    return address, secret_key_bytes.hex()


def generate_keypair(chain: str) -> Tuple[str, str]:
    """按链类型生成 (公钥, 私钥)。"""
    ensure_supported_chain(chain)
    if chain == ChainType.ETHEREUM:
        return _generate_ethereum_keypair()
    return _generate_solana_keypair()


def derive_public_key(chain: str, private_key: str) -> str:
    """由私钥重新计算公钥表示，用于校验钱包记录。"""
    ensure_supported_chain(chain)
    if chain == ChainType.ETHEREUM:
        return Account.from_key(private_key).address

    secret_key_bytes = bytes.fromhex(private_key)
    if len(secret_key_bytes) != ED25519_SEED_SIZE * 2:
        raise ValueError("Solana 密钥长度应为 64 字节")
    verify_key = SigningKey(secret_key_bytes[:ED25519_SEED_SIZE]).verify_key
    if verify_key.encode() != secret_key_bytes[ED25519_SEED_SIZE:]:
        raise ValueError("Solana 密钥后半段与公钥不一致")
    return b58encode(verify_key.encode()).decode("utf-8")


def is_valid_public_key(chain: str, public_key: str) -> bool:
    """基础格式校验：以太坊检查 EIP-55 校验和，Solana 检查 Base58 长度。"""
    ensure_supported_chain(chain)
    if chain == ChainType.ETHEREUM:
        return is_checksum_address(public_key)
    try:
        return len(b58decode(public_key)) == 32
    except ValueError:
        return False
