"""应用入口，负责启动 QApplication、加载主题并创建钱包状态。"""

import sys

from PyQt5.QtWidgets import QApplication

from config import SECRET_STORE_FILE
from logging_config import configure_logging
from storage import JsonFileStore, load_dark_mode
from theme_manager import apply_theme
from ui_main_window import MainWindow
from wallet_store import WalletStore


def run_app() -> None:
    """启动钱包生成器主窗口。"""
    configure_logging()
    app = QApplication(sys.argv)
    dark_mode = load_dark_mode()
    apply_theme(app, dark_mode)

    store = WalletStore(durable_store=JsonFileStore(SECRET_STORE_FILE))
    window = MainWindow(app=app, store=store, dark_mode=dark_mode)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run_app()
