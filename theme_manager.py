"""主题管理：提供浅色/深色 QSS 并应用到应用程序。"""

from PyQt5.QtWidgets import QApplication

# 基础字体、圆角与按钮角色
BASE_QSS = """
* {
    font-family: "Inter", "Microsoft YaHei", "PingFang SC", Arial;
    font-size: 14px;
}
#TitleLabel {
    font-size: 26px;
    font-weight: 700;
    padding: 8px 0;
}
#MnemonicWord {
    border-radius: 6px;
    padding: 8px;
}
QGroupBox {
    border-radius: 12px;
    margin-top: 16px;
    padding: 16px;
}
QGroupBox:title {
    subcontrol-origin: margin;
    left: 14px;
    padding: 0 6px;
    font-weight: 600;
}
QPushButton {
    border: none;
    padding: 9px 14px;
    border-radius: 8px;
    font-weight: 600;
}
QPushButton[role="danger"] { background-color: #dc2626; color: white; }
QPushButton[role="danger"]:hover { background-color: #b91c1c; }
QPushButton[role="solana"] { background-color: #9333ea; color: white; }
QPushButton[role="solana"]:hover { background-color: #7e22ce; }
QLineEdit {
    border-radius: 8px;
    padding: 8px 10px;
}
QHeaderView::section {
    padding: 8px 10px;
    font-weight: 700;
}
QStatusBar {
    padding-left: 8px;
}
"""

LIGHT_QSS = """
QWidget { background: #f9fafb; color: #111827; }
QGroupBox { border: 1px solid #e5e7eb; background: #ffffff; }
QGroupBox:title { color: #4b5563; }
#MnemonicWord { background: #e5e7eb; }
QPushButton { background-color: #3b82f6; color: white; }
QPushButton:hover { background-color: #2563eb; }
QLineEdit { border: 1px solid #d1d5db; background: #f3f4f6; }
QTableWidget { background: #ffffff; border: 1px solid #e5e7eb; gridline-color: #e5e7eb; }
QHeaderView::section { background: #f3f4f6; border: 1px solid #e5e7eb; }
QStatusBar { background: #f3f4f6; color: #111827; }
"""

DARK_QSS = """
QWidget { background: #111827; color: #f9fafb; }
QGroupBox { border: 1px solid #374151; background: #1f2937; }
QGroupBox:title { color: #d1d5db; }
#MnemonicWord { background: #4b5563; }
QPushButton { background-color: #2563eb; color: #f9fafb; }
QPushButton:hover { background-color: #1d4ed8; }
QLineEdit { border: 1px solid #4b5563; background: #374151; color: #f9fafb; }
QTableWidget { background: #1f2937; border: 1px solid #374151; gridline-color: #374151; }
QHeaderView::section { background: #374151; border: 1px solid #4b5563; color: #d1d5db; }
QTableWidget::item:selected { background: #1d4ed8; color: #ffffff; }
QStatusBar { background: #0b1220; color: #d1d5db; }
"""


def build_stylesheet(dark_mode: bool) -> str:
    """组合基础 QSS 与主题色系。"""
    return BASE_QSS + (DARK_QSS if dark_mode else LIGHT_QSS)


def apply_theme(app: QApplication, dark_mode: bool) -> None:
    app.setStyleSheet(build_stylesheet(dark_mode))
