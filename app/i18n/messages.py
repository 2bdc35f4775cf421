"""
本地化文案表

locales/ 下每个 {locale}.json 为一张扁平的 key -> 文案 映射, 启动时加载,
开发环境下每次请求重新加载以便修改文案后即时生效。
"""
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from app.core.config import settings

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent / "locales"

_lock = threading.Lock()
_messages: Dict[str, Dict[str, str]] = {}


def load(locales_dir: Path = LOCALES_DIR) -> None:
    """读取全部语言文件, 替换当前缓存"""
    loaded: Dict[str, Dict[str, str]] = {}
    for file in sorted(locales_dir.glob("*.json")):
        with file.open("r", encoding="utf-8") as f:
            loaded[file.stem] = json.load(f)
    global _messages
    with _lock:
        _messages = loaded
    logger.info(f"Loaded [{len(loaded)}] locales from {locales_dir}")


def get_locales() -> list:
    if not _messages:
        load()
    return sorted(_messages)


def get_messages(locale: Optional[str]) -> Dict[str, str]:
    """返回指定语言的文案, 未知语言回退到默认语言"""
    if not _messages:
        load()
    messages = _messages.get(locale or "")
    if messages is None:
        logger.warning(f"Locale [{locale}] not found, fallback to [{settings.DEFAULT_LOCALE}]")
        messages = _messages.get(settings.DEFAULT_LOCALE, {})
    return dict(messages)
