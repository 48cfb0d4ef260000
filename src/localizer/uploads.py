"""上传文件读取."""

from typing import Awaitable, Callable, Optional

from localizer.errors import FileReadError


async def read_upload_text(
    read: Callable[[], Awaitable[bytes]],
    max_size: Optional[int] = None,
    encoding: str = "utf-8",
) -> str:
    """
    一次性读取上传文件并解码为文本.

    Args:
        read: 返回文件全部字节的异步函数
        max_size: 允许的最大字节数
        encoding: 文本编码

    Returns:
        解码后的文本，失败时不返回任何部分内容
    """
    try:
        raw = await read()
    except OSError as e:
        raise FileReadError(str(e)) from e
    if max_size is not None and len(raw) > max_size:
        raise FileReadError(f"file exceeds {max_size} bytes")
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise FileReadError(str(e)) from e
