"""钱包相关异常定义。"""


class WalletError(Exception):
    """所有钱包操作异常的基类。"""


class EntropyUnavailable(WalletError):
    """安全随机源不可读，禁止退化到弱随机源。"""


class ChainUnsupported(WalletError, ValueError):
    """链类型不在支持范围内。"""

    def __init__(self, chain: object) -> None:
        super().__init__(f"未支持的链类型: {chain!r}")
        self.chain = chain
