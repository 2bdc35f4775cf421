"""
设置 / 文案 / 统计 到模板数据的投影

模板里既可以写 Setting.blogTitle 也可以写 Setting.BlogTitle: 投影时对每个 key
按 title_key 规则生成一次首字母大写的别名, 两个 key 指向同一个值。
"""
import logging
from typing import Any, Dict, Iterable, Mapping, Tuple

from markupsafe import Markup

from app.models.statistic import Statistic
from app.schemas.setting import SettingItem, TRUSTED_HTML_SETTINGS

logger = logging.getLogger(__name__)


def title_key(key: str) -> str:
    """blogURL -> BlogURL"""
    return key[:1].upper() + key[1:]


def project_dual_case(pairs: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    projected: Dict[str, Any] = {}
    for key, value in pairs:
        projected[key] = value
        projected[title_key(key)] = value
    return projected


def project_i18n(messages: Mapping[str, str]) -> Dict[str, Any]:
    return project_dual_case(messages.items())


def project_settings(items: Iterable[SettingItem]) -> Dict[str, Any]:
    """可信 HTML 类设置包装为 Markup, 模板输出时不再转义"""
    return project_dual_case(
        (item.name, Markup(item.value or "") if item.name in TRUSTED_HTML_SETTINGS else item.value)
        for item in items
    )


def project_statistics(statistics: Iterable[Statistic]) -> Dict[str, int]:
    def parsed():
        for statistic in statistics:
            try:
                yield statistic.name, int(statistic.value)
            except (TypeError, ValueError):
                logger.error(f"statistic [{statistic.name}] should be a non-negative integer, actual is [{statistic.value}]")

    return project_dual_case(parsed())


def parse_size_setting(setting_map: Mapping[str, Any], name: str, default: int) -> int:
    """读取列表数量类设置, 缺失、非整数或为负数时记录告警并使用默认值"""
    value = setting_map.get(name)
    try:
        size = int(value)
        if size < 0:
            raise ValueError(f"negative size {size}")
        return size
    except (TypeError, ValueError):
        logger.warning(f"setting [{name}] should be a non-negative integer, actual is [{value}], use default [{default}]")
        return default
