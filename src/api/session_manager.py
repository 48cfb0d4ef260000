"""表单会话管理器，为每个浏览器会话保存两个互不相关的表单."""

import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from config.logging_config import get_logger
from localizer.forms import CodeToLocaleForm, LocaleToCodeForm

logger = get_logger(__name__)


@dataclass
class FormSession:
    """单个浏览器会话的表单状态."""

    code_to_locale: CodeToLocaleForm
    locale_to_code: LocaleToCodeForm
    last_access: float = field(default=0.0)


class FormSessionManager:
    """
    表单会话管理器类，状态只保存在内存中.

    会话按最近访问顺序保存：超过session_ttl秒未访问的会话被清除，
    数量超过max_sessions时淘汰最久未访问的会话。
    """

    def __init__(
        self,
        client,
        max_sessions: int = 1000,
        session_ttl: float = 3600,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.max_sessions = max_sessions
        self.session_ttl = session_ttl
        self.clock = clock
        self.sessions: "OrderedDict[str, FormSession]" = OrderedDict()

    def find_session(self, session_id: Optional[str]) -> Optional[FormSession]:
        """查找已有会话，不存在或已过期时返回None，不创建新会话."""
        self._expire()
        if not session_id or session_id not in self.sessions:
            return None
        session = self.sessions[session_id]
        session.last_access = self.clock()
        self.sessions.move_to_end(session_id)
        return session

    def get_session(self, session_id: Optional[str]) -> Tuple[str, FormSession]:
        """获取会话，不存在时创建新会话."""
        session = self.find_session(session_id)
        if session is not None:
            return session_id, session
        session_id = str(uuid.uuid4())
        session = FormSession(
            code_to_locale=CodeToLocaleForm(self.client),
            locale_to_code=LocaleToCodeForm(self.client),
            last_access=self.clock(),
        )
        self.sessions[session_id] = session
        while len(self.sessions) > self.max_sessions:
            evicted, _ = self.sessions.popitem(last=False)
            logger.info(f"会话数量超过上限，淘汰会话: {evicted}")
        return session_id, session

    def _expire(self) -> None:
        deadline = self.clock() - self.session_ttl
        # 按访问顺序排列，遇到未过期的会话即可停止
        while self.sessions:
            session_id, session = next(iter(self.sessions.items()))
            if session.last_access > deadline:
                break
            del self.sessions[session_id]
            logger.info(f"会话已过期: {session_id}")
