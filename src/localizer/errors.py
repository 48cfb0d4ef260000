"""本地化生成服务的异常定义."""


class LocalizerError(Exception):
    """所有本地化生成异常的基类."""


class ValidationError(LocalizerError):
    """翻译文件内容不符合所选格式."""


class FileReadError(LocalizerError):
    """上传文件读取或解码失败."""


class GenerationError(LocalizerError):
    """生成式接口调用失败，不区分具体原因."""


class ClipboardError(LocalizerError):
    """复制结果到剪贴板失败."""
