"""基于AsyncOpenAI的生成式接口客户端."""

from typing import Optional

from openai import AsyncOpenAI

from config.logging_config import get_logger
from config.settings import Settings
from localizer.errors import GenerationError

logger = get_logger(__name__)


class GenerationClient:
    """将提示词发送到生成式接口并返回原始文本."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )
        self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.request_timeout,
        )

    async def submit(self, prompt: str) -> str:
        """为单个提示词生成内容，失败时抛出GenerationError."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"生成请求失败: {e}")
            raise GenerationError(str(e)) from e
        if not content:
            logger.error("生成式接口返回了空响应")
            raise GenerationError("empty response")
        return content
