"""钱包集合与助记词的内存状态，负责全部增删、显示切换与清除逻辑。"""

import logging
import uuid
from typing import Callable, Dict, List, Optional, Tuple

from config import DURABLE_SECRET_KEYS, MNEMONIC_WORD_COUNT
from models import Mnemonic, StoreState, WalletEntry
from reveal_gate import SecretRevealGate
from storage import JsonFileStore
from wallet_service import ensure_supported_chain, generate_keypair, generate_phrase

logger = logging.getLogger(__name__)


class WalletStore:
    """
    内存中的钱包状态机。

    助记词、有序钱包列表与显示状态只由本类修改。每个操作要么完整生效，
    要么抛出异常且不改变任何状态。

    :param durable_store: 可选的持久化存储，clear_all 时按固定键清除
    :param phrase_factory: 助记词生成函数，接受词数
    :param keypair_factory: 密钥生成函数，接受链类型
    """

    def __init__(
        self,
        durable_store: Optional[JsonFileStore] = None,
        word_count: int = MNEMONIC_WORD_COUNT,
        phrase_factory: Callable[[int], Mnemonic] = generate_phrase,
        keypair_factory: Callable[[str], Tuple[str, str]] = generate_keypair,
    ) -> None:
        self.durable_store = durable_store
        self.word_count = word_count
        self._phrase_factory = phrase_factory
        self._keypair_factory = keypair_factory

        self._mnemonic: Optional[Mnemonic] = None
        self._wallets: List[WalletEntry] = []
        self._gate = SecretRevealGate()

    # ------------------------- 读取 ------------------------- #
    @property
    def mnemonic(self) -> Optional[Mnemonic]:
        return self._mnemonic

    @property
    def wallets(self) -> Tuple[WalletEntry, ...]:
        """按插入顺序返回钱包快照。"""
        return tuple(self._wallets)

    @property
    def mnemonic_visible(self) -> bool:
        return self._gate.mnemonic_visible

    @property
    def state(self) -> str:
        if self._mnemonic is None:
            return StoreState.NO_PHRASE
        if self._gate.mnemonic_visible:
            return StoreState.PHRASE_REVEALED
        return StoreState.PHRASE_HIDDEN

    def __len__(self) -> int:
        return len(self._wallets)

    def get_wallet(self, wallet_id: str) -> Optional[WalletEntry]:
        for wallet in self._wallets:
            if wallet.id == wallet_id:
                return wallet
        return None

    def is_private_key_visible(self, wallet_id: str) -> bool:
        return self._gate.is_private_key_visible(wallet_id)

    def reveal_flags(self) -> Dict[str, bool]:
        return self._gate.private_key_flags()

    # ------------------------- 修改 ------------------------- #
    def new_phrase(self) -> Mnemonic:
        """生成新助记词并清空当前钱包列表与显示状态。"""
        mnemonic = self._phrase_factory(self.word_count)
        self._install_phrase(mnemonic)
        return mnemonic

    def _install_phrase(self, mnemonic: Mnemonic) -> None:
        dropped = len(self._wallets)
        self._mnemonic = mnemonic
        self._wallets = []
        self._gate.reset()
        logger.info("已生成新助记词（%d 词），清除 %d 个钱包", mnemonic.word_count, dropped)

    def add_wallet(self, chain: str) -> WalletEntry:
        """
        生成一个独立钱包并追加到列表末尾。

        没有助记词时先创建助记词。全部密钥材料生成成功后才写入状态。
        """
        ensure_supported_chain(chain)

        bootstrap: Optional[Mnemonic] = None
        if self._mnemonic is None:
            bootstrap = self._phrase_factory(self.word_count)

        public_key, private_key = self._keypair_factory(chain)

        if bootstrap is not None:
            self._install_phrase(bootstrap)

        entry = WalletEntry(
            id=self._next_id(),
            chain=chain,
            public_key=public_key,
            private_key=private_key,
        )
        self._wallets.append(entry)
        logger.info("已添加 %s 钱包 %s，当前共 %d 个", chain, entry.id, len(self._wallets))
        return entry

    def _next_id(self) -> str:
        used = {w.id for w in self._wallets}
        while True:
            wallet_id = str(uuid.uuid4())
            if wallet_id not in used:
                return wallet_id

    def delete_wallet(self, wallet_id: str) -> bool:
        """删除指定钱包及其显示状态；id 不存在时不做任何修改。"""
        wallet = self.get_wallet(wallet_id)
        if wallet is None:
            logger.debug("删除忽略，未找到钱包 %s", wallet_id)
            return False
        self._wallets.remove(wallet)
        self._gate.forget(wallet_id)
        logger.info("已删除钱包 %s，剩余 %d 个", wallet_id, len(self._wallets))
        return True

    def clear_all(self) -> None:
        """清空内存中的全部敏感数据，并清除持久化存储中的固定键。不可撤销。"""
        self._mnemonic = None
        self._wallets = []
        self._gate.reset()
        logger.info("已清空助记词与全部钱包")
        self._purge_durable_copy()

    def _purge_durable_copy(self) -> None:
        if self.durable_store is None:
            return
        try:
            self.durable_store.remove(*DURABLE_SECRET_KEYS)
        except OSError:
            # 内存状态已清除，不回滚
            logger.exception("清除持久化数据失败: %s", self.durable_store.path)

    def toggle_mnemonic_visible(self) -> bool:
        """切换助记词显示；没有助记词时保持隐藏。"""
        if self._mnemonic is None:
            return False
        return self._gate.toggle_mnemonic()

    def toggle_private_key_visible(self, wallet_id: str) -> bool:
        """切换指定钱包私钥显示；id 不存在时不做任何修改。"""
        if self.get_wallet(wallet_id) is None:
            return False
        return self._gate.toggle_private_key(wallet_id)
