"""主窗口与界面逻辑，包含助记词、钱包列表、复制与主题切换。"""

import logging

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QIcon
from PyQt5.QtWidgets import (
    QApplication,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from config import MASKED_SECRET, ChainType
from errors import WalletError
from storage import save_dark_mode
from theme_manager import apply_theme
from wallet_store import WalletStore

logger = logging.getLogger(__name__)

MNEMONIC_COLUMNS = 3


class MainWindow(QMainWindow):
    """主窗口，只负责展示与转发用户操作，状态全部由 WalletStore 持有。"""

    def __init__(self, app: QApplication, store: WalletStore, dark_mode: bool) -> None:
        super().__init__()
        self.app = app
        self.store = store
        self.dark_mode = dark_mode

        self.setWindowTitle("Multi-Chain Wallet Generator")
        self.setMinimumSize(1000, 760)
        self.setWindowIcon(QIcon())  # 可在打包时替换为品牌图标

        self._setup_ui()
        self._refresh_all()
        self._set_status("密钥仅保存在内存中，准备就绪")

    # ------------------------- UI 构建 ------------------------- #
    def _setup_ui(self) -> None:
        """搭建界面布局。"""
        central = QWidget(self)
        self.setCentralWidget(central)

        main_layout = QVBoxLayout()
        central.setLayout(main_layout)

        header = QHBoxLayout()
        title = QLabel("Multi-Chain Wallet Generator")
        title.setObjectName("TitleLabel")
        header.addWidget(title)
        header.addStretch()
        self.theme_toggle_btn = QPushButton()
        self.theme_toggle_btn.clicked.connect(self._toggle_theme)
        header.addWidget(self.theme_toggle_btn)
        main_layout.addLayout(header)
        self._update_theme_toggle_text()

        phrase_box = QGroupBox("助记词 Secret Recovery Phrase")
        phrase_layout = QVBoxLayout()
        phrase_box.setLayout(phrase_layout)
        main_layout.addWidget(phrase_box)

        phrase_btns = QHBoxLayout()
        phrase_btns.addStretch()
        self.new_phrase_btn = QPushButton("新助记词")
        self.new_phrase_btn.clicked.connect(self._new_phrase)
        phrase_btns.addWidget(self.new_phrase_btn)
        self.clear_btn = QPushButton("全部清除")
        self.clear_btn.setProperty("role", "danger")
        self.clear_btn.clicked.connect(self._clear_all)
        phrase_btns.addWidget(self.clear_btn)
        phrase_layout.addLayout(phrase_btns)

        self.reveal_mnemonic_btn = QPushButton("点击显示助记词")
        self.reveal_mnemonic_btn.clicked.connect(self._toggle_mnemonic)
        phrase_layout.addWidget(self.reveal_mnemonic_btn)

        self.mnemonic_panel = QWidget()
        panel_layout = QVBoxLayout(self.mnemonic_panel)
        panel_layout.setContentsMargins(0, 0, 0, 0)
        self.mnemonic_grid = QGridLayout()
        self.mnemonic_grid.setSpacing(8)
        panel_layout.addLayout(self.mnemonic_grid)
        panel_btns = QHBoxLayout()
        panel_btns.addStretch()
        self.hide_mnemonic_btn = QPushButton("隐藏")
        self.hide_mnemonic_btn.clicked.connect(self._toggle_mnemonic)
        panel_btns.addWidget(self.hide_mnemonic_btn)
        self.copy_mnemonic_btn = QPushButton("复制助记词")
        self.copy_mnemonic_btn.setToolTip("复制助记词，请勿泄露")
        self.copy_mnemonic_btn.clicked.connect(self._copy_mnemonic)
        panel_btns.addWidget(self.copy_mnemonic_btn)
        panel_layout.addLayout(panel_btns)
        phrase_layout.addWidget(self.mnemonic_panel)

        add_layout = QHBoxLayout()
        self.add_eth_btn = QPushButton("添加 Ethereum 钱包")
        self.add_eth_btn.clicked.connect(lambda: self._add_wallet(ChainType.ETHEREUM))
        add_layout.addWidget(self.add_eth_btn)
        self.add_sol_btn = QPushButton("添加 Solana 钱包")
        self.add_sol_btn.setProperty("role", "solana")
        self.add_sol_btn.clicked.connect(lambda: self._add_wallet(ChainType.SOLANA))
        add_layout.addWidget(self.add_sol_btn)
        phrase_layout.addLayout(add_layout)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["链", "公钥", "私钥", "操作"])
        self.table.setSelectionBehavior(QTableWidget.SelectRows)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        main_layout.addWidget(self.table)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _build_action_buttons(self, wallet_id: str) -> QWidget:
        """为指定钱包创建显示/复制/删除按钮组。"""
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        visible = self.store.is_private_key_visible(wallet_id)
        btn_reveal = QPushButton("隐藏私钥" if visible else "显示私钥")
        btn_reveal.clicked.connect(lambda _, w=wallet_id: self._toggle_private_key(w))
        layout.addWidget(btn_reveal)

        btn_pub = QPushButton("复制公钥")
        btn_pub.setToolTip("复制公钥/地址到剪贴板")
        btn_pub.clicked.connect(lambda _, w=wallet_id: self._copy_wallet_field(w, "public_key"))
        layout.addWidget(btn_pub)

        btn_priv = QPushButton("复制私钥")
        btn_priv.setToolTip("复制私钥，注意保密")
        btn_priv.clicked.connect(lambda _, w=wallet_id: self._copy_wallet_field(w, "private_key"))
        layout.addWidget(btn_priv)

        btn_delete = QPushButton("删除")
        btn_delete.setProperty("role", "danger")
        btn_delete.clicked.connect(lambda _, w=wallet_id: self._delete_wallet(w))
        layout.addWidget(btn_delete)

        layout.addStretch()
        return container

    # ------------------------- 刷新 ------------------------- #
    def _refresh_all(self) -> None:
        self._refresh_mnemonic()
        self._refresh_table()

    def _refresh_mnemonic(self) -> None:
        """根据助记词是否存在及显示状态切换面板。"""
        while self.mnemonic_grid.count():
            widget = self.mnemonic_grid.takeAt(0).widget()
            if widget is not None:
                widget.deleteLater()

        mnemonic = self.store.mnemonic
        if mnemonic is None:
            self.reveal_mnemonic_btn.setVisible(False)
            self.mnemonic_panel.setVisible(False)
            return

        visible = self.store.mnemonic_visible
        self.reveal_mnemonic_btn.setVisible(not visible)
        self.mnemonic_panel.setVisible(visible)
        if not visible:
            return

        for index, word in enumerate(mnemonic.words()):
            cell = QLabel(f"{index + 1}. {word}")
            cell.setObjectName("MnemonicWord")
            cell.setAlignment(Qt.AlignCenter)
            cell.setTextInteractionFlags(Qt.TextSelectableByMouse)
            self.mnemonic_grid.addWidget(cell, index // MNEMONIC_COLUMNS, index % MNEMONIC_COLUMNS)

    def _refresh_table(self) -> None:
        """根据当前钱包列表刷新表格。"""
        wallets = self.store.wallets
        self.table.setRowCount(len(wallets))
        for row, w in enumerate(wallets):
            private_text = w.private_key if self.store.is_private_key_visible(w.id) else MASKED_SECRET
            items = [
                (0, QTableWidgetItem(f"{w.chain_label()} 钱包")),
                (1, QTableWidgetItem(w.public_key)),
                (2, QTableWidgetItem(private_text)),
            ]
            for col, item in items:
                item.setFlags(item.flags() & ~Qt.ItemIsEditable)
                self.table.setItem(row, col, item)
            self.table.setCellWidget(row, 3, self._build_action_buttons(w.id))

        self.table.resizeColumnsToContents()
        self.table.horizontalHeader().setStretchLastSection(True)

    # ------------------------- 事件与逻辑 ------------------------- #
    def _new_phrase(self) -> None:
        if len(self.store) and not self._confirm("生成新助记词", "当前所有钱包都会被清除，是否继续？"):
            return
        try:
            mnemonic = self.store.new_phrase()
        except WalletError as exc:
            self._report_failure("生成失败", exc)
            return
        self._refresh_all()
        self._set_status(f"已生成 {mnemonic.word_count} 词助记词")

    def _add_wallet(self, chain: str) -> None:
        """同步生成钱包，生成期间禁用按钮。"""
        self._set_generate_enabled(False)
        try:
            entry = self.store.add_wallet(chain)
        except WalletError as exc:
            self._report_failure("生成失败", exc)
            return
        finally:
            self._set_generate_enabled(True)
        self._refresh_all()
        self._set_status(f"已添加 {entry.chain_label()} 钱包")

    def _delete_wallet(self, wallet_id: str) -> None:
        if not self._confirm("删除钱包", "该操作不可撤销，钱包密钥将被永久删除。"):
            return
        if self.store.delete_wallet(wallet_id):
            self._set_status("钱包已删除")
        self._refresh_table()

    def _clear_all(self) -> None:
        if not self._confirm("全部清除", "助记词与全部钱包将被永久清除，该操作不可撤销。"):
            return
        self.store.clear_all()
        self._refresh_all()
        self._set_status("已清除全部钱包与助记词")

    def _toggle_mnemonic(self) -> None:
        self.store.toggle_mnemonic_visible()
        self._refresh_mnemonic()

    def _toggle_private_key(self, wallet_id: str) -> None:
        self.store.toggle_private_key_visible(wallet_id)
        self._refresh_table()

    def _copy_mnemonic(self) -> None:
        mnemonic = self.store.mnemonic
        if mnemonic is None:
            return
        self._copy_text(mnemonic.phrase, "助记词已复制，请注意保密")

    def _copy_wallet_field(self, wallet_id: str, field: str) -> None:
        """将指定钱包的字段复制到剪贴板。"""
        wallet = self.store.get_wallet(wallet_id)
        if wallet is None:
            return
        if field == "public_key":
            self._copy_text(wallet.public_key, "公钥已复制到剪贴板")
        else:
            self._copy_text(wallet.private_key, "私钥已复制，请勿泄露")

    def _copy_text(self, text: str, message: str) -> None:
        """复制失败只提示，不影响钱包状态。"""
        clipboard = QApplication.clipboard()
        if clipboard is None:
            logger.warning("剪贴板不可用")
            self._set_status("复制失败：剪贴板不可用")
            return
        clipboard.setText(text)
        self._set_status(message)

    def _set_generate_enabled(self, enabled: bool) -> None:
        for btn in (self.add_eth_btn, self.add_sol_btn, self.new_phrase_btn):
            btn.setEnabled(enabled)

    def _report_failure(self, title: str, exc: Exception) -> None:
        logger.error("%s: %s", title, exc)
        self._set_status(f"{title}: {exc}")
        box = QMessageBox(QMessageBox.Warning, title, str(exc), QMessageBox.Ok, self)
        box.setWindowModality(Qt.NonModal)
        box.setAttribute(Qt.WA_DeleteOnClose)
        box.show()

    def _confirm(self, title: str, text: str) -> bool:
        answer = QMessageBox.question(self, title, text, QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        return answer == QMessageBox.Yes

    def _set_status(self, text: str) -> None:
        """更新底部状态文本。"""
        self.status_bar.showMessage(text, 3000)

    # ------------------------- 主题 ------------------------- #
    def _toggle_theme(self) -> None:
        """切换主题并持久化。"""
        self.dark_mode = not self.dark_mode
        apply_theme(self.app, self.dark_mode)
        try:
            save_dark_mode(self.dark_mode)
        except OSError as exc:
            logger.warning("保存主题设置失败: %s", exc)
        self._update_theme_toggle_text()
        self._set_status("已切换为深色模式" if self.dark_mode else "已切换为浅色模式")

    def _update_theme_toggle_text(self) -> None:
        self.theme_toggle_btn.setText("切换到浅色模式" if self.dark_mode else "切换到深色模式")
