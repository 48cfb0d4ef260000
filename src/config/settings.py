"""应用配置管理模块."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    gemini_api_key: str = Field(...)
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/"
    )
    gemini_model: str = Field(default="gemini-1.5-flash")
    # 未设置时不限制请求时长
    request_timeout: Optional[float] = Field(default=None, gt=0, le=600)
    max_file_size: int = Field(default=10485760, ge=1024, le=104857600)
    session_cookie: str = Field(default="localizer_session")
    max_sessions: int = Field(default=1000, ge=1)
    # 会话超过该秒数未访问即清除
    session_ttl: float = Field(default=3600, gt=0)
    log_level: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    """读取环境变量并返回配置，仅在启动时加载一次."""
    return Settings()
