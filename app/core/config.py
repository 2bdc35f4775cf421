from typing import Literal, Optional
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


# 项目根目录（settings 位于 app/core/）
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    # 应用基础配置
    APP_NAME: str = Field(default='Multiblog', description='应用名称')
    APP_VERSION: str = Field(default='1.0.0', description='应用版本')
    ENVIRONMENT: Literal['development', 'staging', 'production'] = Field(default='development', description='运行环境')
    DEBUG: bool = Field(default=False, description='调试模式')

    # 服务器配置
    HOST: str = Field(default='0.0.0.0', description='服务器主机')
    PORT: int = Field(default=5879, description='服务器端口')
    SERVER_URL: str = Field(default='http://localhost:5879', description='对外访问地址')
    STATIC_SERVER_URL: str = Field(default='http://localhost:5879', description='静态资源地址')

    # 数据库配置
    DATABASE_URL: str = Field(default=f"sqlite:///{BASE_DIR / 'multiblog.db'}", description='数据库连接URL')

    # 博客路由配置, 空字符串表示博客挂在根路径 /{username}
    BLOG_PATH_PREFIX: str = Field(default='', description='博客路径前缀')
    THEME_DIR: Path = Field(default=BASE_DIR / 'app' / 'themes', description='主题模板目录')
    DEFAULT_THEME: str = Field(default='default', description='默认主题')
    DEFAULT_LOCALE: str = Field(default='en_US', description='默认语言')
    USER_PAGE_SIZE: int = Field(default=20, description='博客用户分页大小')

    # Redis 配置（仅缓存原始设置列表）
    REDIS_ENABLED: bool = Field(default=False, description='是否启用 Redis 缓存')
    REDIS_HOST: str = Field(default='localhost', description='Redis 主机')
    REDIS_PORT: int = Field(default=6379, description='Redis 端口')
    REDIS_DB: int = Field(default=0, description='Redis 库')
    REDIS_PASSWORD: Optional[str] = Field(default=None, description='Redis 密码')
    SETTINGS_CACHE_EXPIRE: int = Field(default=60, description='设置缓存过期秒数')

    # 日志配置
    BASE_DIR: Path = BASE_DIR
    LOG_DIR: str = Field(default='logs', description='日志目录')
    LOG_LEVEL: str = Field(default='INFO', description='日志级别')
    LOG_JSON_FORMAT: bool = Field(default=False, description='是否输出 JSON 日志')
    LOG_MAX_BYTES: int = Field(default=10 * 1024 * 1024, description='单个日志文件大小')
    LOG_BACKUP_COUNT: int = Field(default=5, description='日志备份数量')

    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', case_sensitive=True, extra='ignore')

    @property
    def is_development(self) -> bool:
        """是否为开发环境"""
        return self.ENVIRONMENT == 'development'

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self.ENVIRONMENT == 'production'

    @property
    def public_conf(self) -> dict:
        """暴露给主题模板的配置, 不包含任何敏感字段"""
        return {
            "Server": self.SERVER_URL,
            "StaticServer": self.STATIC_SERVER_URL,
            "Version": self.APP_VERSION,
            "RuntimeMode": self.ENVIRONMENT,
        }


# 根据环境加载不同配置文件
@lru_cache
def get_settings() -> Settings:
    import os

    env = os.getenv('ENVIRONMENT', 'development')

    env_file_map = {
        'development': BASE_DIR / '.env.dev',
        'staging': BASE_DIR / '.env.staging',
        'production': BASE_DIR / '.env.prod',
    }
    env_file = env_file_map.get(env, BASE_DIR / '.env')

    return Settings(_env_file=env_file)


# 全局配置实例
settings = get_settings()
