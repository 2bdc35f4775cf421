import redis
from typing import Any
import json
from app.core.config import settings
import logging

logger = logging.getLogger(__name__)


class RedisClient:
    """Singleton Redis Client Wrapper

    Every operation degrades to a miss when Redis is disabled or unreachable.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(RedisClient, cls).__new__(cls)
            cls._instance.client = None
            if settings.REDIS_ENABLED:
                cls._instance.client = redis.Redis(
                    host=settings.REDIS_HOST,
                    port=settings.REDIS_PORT,
                    db=settings.REDIS_DB,
                    password=settings.REDIS_PASSWORD,
                    decode_responses=True
                )
        return cls._instance

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def get(self, key: str) -> Any:
        if not self.enabled:
            return None
        try:
            value = self.client.get(key)
            if value is None:
                return None
            return json.loads(value)
        except (redis.RedisError, ValueError) as e:
            logger.error(f"Redis get error [{key}]: {e}")
            return None

    def set(self, key: str, value: Any, expire: int = 3600) -> bool:
        if not self.enabled:
            return False
        try:
            payload = json.dumps(value, default=str, ensure_ascii=False)
            self.client.set(key, payload, ex=expire)
            return True
        except (redis.RedisError, TypeError) as e:
            logger.error(f"Redis set error [{key}]: {e}")
            return False

    def delete(self, key: str) -> bool:
        if not self.enabled:
            return False
        try:
            self.client.delete(key)
            return True
        except redis.RedisError as e:
            logger.error(f"Redis delete error [{key}]: {e}")
            return False


redis_client = RedisClient()
