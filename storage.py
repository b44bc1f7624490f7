"""本地 JSON 文件存储：主题偏好与敏感数据清除。"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from config import DARK_MODE_KEY, DEFAULT_DARK_MODE, USER_SETTINGS_FILE

logger = logging.getLogger(__name__)


class JsonFileStore:
    """以单个 JSON 对象保存的键值存储。"""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            # 文件损坏时按空存储处理
            logger.warning("读取 %s 失败，按空存储处理: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("%s 内容不是 JSON 对象，已忽略", self.path)
            return {}
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, *keys: str) -> None:
        """按键删除。无论键是否存在都会写回文件，重复调用结果相同。"""
        data = self._load()
        for key in keys:
            data.pop(key, None)
        self._save(data)

    def keys(self) -> List[str]:
        return list(self._load().keys())


def load_dark_mode(settings_path: Path = USER_SETTINGS_FILE) -> bool:
    """从本地配置读取深色模式开关；不存在或无效时返回默认值。"""
    value = JsonFileStore(settings_path).get(DARK_MODE_KEY, DEFAULT_DARK_MODE)
    if isinstance(value, bool):
        return value
    logger.warning("主题配置无效: %r，使用默认值", value)
    return DEFAULT_DARK_MODE


def save_dark_mode(dark_mode: bool, settings_path: Path = USER_SETTINGS_FILE) -> None:
    """写入深色模式开关，便于下次启动还原。"""
    JsonFileStore(settings_path).set(DARK_MODE_KEY, bool(dark_mode))
