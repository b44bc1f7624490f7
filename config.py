"""全局配置，提供链类型、助记词长度与本地文件路径。"""

from pathlib import Path
from typing import Dict, Tuple


class ChainType:
    """链类型字符串枚举，集合固定为以太坊与 Solana。"""

    ETHEREUM = "ethereum"
    SOLANA = "solana"


SUPPORTED_CHAINS: Tuple[str, ...] = (ChainType.ETHEREUM, ChainType.SOLANA)

CHAIN_LABELS: Dict[str, str] = {
    ChainType.ETHEREUM: "Ethereum",
    ChainType.SOLANA: "Solana",
}

# BIP39 词数与熵位数的对应关系
WORD_COUNT_TO_STRENGTH: Dict[int, int] = {12: 128, 15: 160, 18: 192, 21: 224, 24: 256}

# 默认 12 词（128 位熵）
MNEMONIC_WORD_COUNT = 12

# 隐藏状态下的占位文本
MASKED_SECRET = "••••••••••••••••"

# 主题偏好，仅保存一个布尔值
DEFAULT_DARK_MODE = True
DARK_MODE_KEY = "darkMode"
USER_SETTINGS_FILE = Path("user_settings.json")

# 敏感数据的持久化位置，与设置文件互不共用
SECRET_STORE_FILE = Path("wallet_secrets.json")
DURABLE_SECRET_KEYS: Tuple[str, ...] = ("wallets", "mnemonics")
