"""rya 环境变量配置管理。

环境变量:
    RYA_DEBUG: 调试模式
        - true/1/yes/on = 开启 (rya 日志器使用 DEBUG 级别)
        - false/0/no = 关闭 (默认)

    RYA_LOG_DEBUG: 日志调试模式
        - true/1/yes/on = 开启 (日志输出到临时文件，DEBUG 级别)
        - false/0/no = 关闭 (默认，日志输出到 stderr)

    RYA_ECHO: 是否把子进程的 stdout/stderr 回显到当前进程
        - true/1/yes/on = 回显 (默认)
        - false/0/no = 不回显

    RYA_MAX_ATTEMPTS: ``rya retry`` 的默认尝试次数
        - 默认 3，最小 1

    RYA_RETRY_DELAY: 两次失败尝试之间的等待秒数
        - 默认 0.0 (立即重试)，限制在 0-60 秒
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

__all__ = ["Config", "load_config", "get_config", "reload_config"]

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 0.0
MAX_RETRY_DELAY = 60.0


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """解析布尔值环境变量。"""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def _parse_max_attempts(value: str | None) -> int:
    if not value:
        return DEFAULT_MAX_ATTEMPTS
    try:
        return max(1, int(value))
    except ValueError:
        return DEFAULT_MAX_ATTEMPTS


def _parse_retry_delay(value: str | None) -> float:
    if not value:
        return DEFAULT_RETRY_DELAY
    try:
        return max(0.0, min(float(value), MAX_RETRY_DELAY))
    except ValueError:
        return DEFAULT_RETRY_DELAY


@dataclass
class Config:
    """rya 配置。

    Attributes:
        debug: rya 日志器是否使用 DEBUG 级别
        log_debug: 日志是否输出到文件而不是 stderr
        log_file: 日志文件路径 (log_debug 开启时自动生成)
        echo: 是否回显子进程输出
        max_attempts: ``rya retry`` 的默认尝试次数
        retry_delay: 失败尝试之间的等待秒数
    """

    debug: bool = False
    log_debug: bool = False
    log_file: str | None = None
    echo: bool = True
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_delay: float = DEFAULT_RETRY_DELAY

    def __repr__(self) -> str:
        return (
            f"Config(debug={self.debug}, "
            f"log_debug={self.log_debug}, "
            f"log_file={self.log_file}, "
            f"echo={self.echo}, "
            f"max_attempts={self.max_attempts}, "
            f"retry_delay={self.retry_delay})"
        )


def _generate_log_file_path() -> str:
    """在临时目录下生成带时间戳的日志文件路径。"""
    log_dir = Path(tempfile.gettempdir()) / "rya"
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"rya_debug_{timestamp}.log"

    return str(log_file.resolve())


def load_config() -> Config:
    """从环境变量加载配置。"""
    log_debug = _parse_bool(os.environ.get("RYA_LOG_DEBUG"), default=False)
    log_file = _generate_log_file_path() if log_debug else None

    return Config(
        debug=_parse_bool(os.environ.get("RYA_DEBUG"), default=False),
        log_debug=log_debug,
        log_file=log_file,
        echo=_parse_bool(os.environ.get("RYA_ECHO"), default=True),
        max_attempts=_parse_max_attempts(os.environ.get("RYA_MAX_ATTEMPTS")),
        retry_delay=_parse_retry_delay(os.environ.get("RYA_RETRY_DELAY")),
    )


# 全局配置实例（延迟加载）
_config: Config | None = None


def get_config() -> Config:
    """获取全局配置实例。"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """重新读取环境变量（用于测试）。"""
    global _config
    _config = load_config()
    return _config
