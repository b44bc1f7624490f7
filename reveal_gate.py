"""敏感信息显示开关：助记词与逐个钱包的私钥，默认全部隐藏。"""

from typing import Dict


class SecretRevealGate:
    """保存显示状态。未记录的钱包 id 一律视为隐藏。"""

    def __init__(self) -> None:
        self.mnemonic_visible = False
        self._private_keys: Dict[str, bool] = {}

    def toggle_mnemonic(self) -> bool:
        self.mnemonic_visible = not self.mnemonic_visible
        return self.mnemonic_visible

    def hide_mnemonic(self) -> None:
        self.mnemonic_visible = False

    def is_private_key_visible(self, wallet_id: str) -> bool:
        return self._private_keys.get(wallet_id, False)

    def toggle_private_key(self, wallet_id: str) -> bool:
        """翻转指定钱包的私钥显示状态，首次调用时写入记录。"""
        visible = not self.is_private_key_visible(wallet_id)
        self._private_keys[wallet_id] = visible
        return visible

    def forget(self, wallet_id: str) -> None:
        self._private_keys.pop(wallet_id, None)

    def reset(self) -> None:
        """清空全部记录并隐藏助记词。"""
        self._private_keys.clear()
        self.mnemonic_visible = False

    def private_key_flags(self) -> Dict[str, bool]:
        return dict(self._private_keys)
