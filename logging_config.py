"""日志配置：控制台输出，只配置一次。"""

import logging


def configure_logging(level: int = logging.INFO) -> None:
    """为根日志器添加控制台输出；已有 handler 时不重复配置。"""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    root_logger.setLevel(level)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    root_logger.addHandler(console_handler)
