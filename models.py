"""数据模型定义，包含助记词、钱包记录与存储状态。"""

from dataclasses import dataclass, field
from typing import List

from config import CHAIN_LABELS, ChainType


class StoreState:
    """WalletStore 的助记词状态。"""

    NO_PHRASE = "no_phrase"
    PHRASE_HIDDEN = "phrase_hidden"
    PHRASE_REVEALED = "phrase_revealed"


@dataclass(frozen=True)
class Mnemonic:
    """助记词，词数在创建时确定。"""

    phrase: str
    word_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_count", len(self.words()))

    def words(self) -> List[str]:
        return self.phrase.split()

    def __repr__(self) -> str:
        # 不在日志或异常中输出明文
        return f"Mnemonic(word_count={self.word_count})"


@dataclass(frozen=True)
class WalletEntry:
    """单个钱包记录，创建后不可修改。"""

    id: str
    chain: str
    public_key: str
    private_key: str = field(repr=False)

    def is_solana(self) -> bool:
        """是否为 Solana 链记录。"""
        return self.chain == ChainType.SOLANA

    def chain_label(self) -> str:
        return CHAIN_LABELS.get(self.chain, self.chain)
