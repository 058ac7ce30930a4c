"""Pytest 配置和 fixtures。"""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

# 添加 src 目录到 Python 路径（开发时）
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def flaky_cli() -> Callable[..., list[str]]:
    """为 flaky CLI fixture 程序构造 argv。

    示例:
        argv = flaky_cli("--pass-chance", "0")
    """
    script = FIXTURES_DIR / "flaky_cli.py"

    def _argv(*args: str) -> list[str]:
        return [sys.executable, str(script), *args]

    return _argv


@pytest.fixture
def temp_workspace(tmp_path: Path) -> Path:
    """创建临时工作目录。"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace
