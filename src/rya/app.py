"""rya 命令行入口。

根据环境变量配置日志，执行一个子命令，并把 AbortError 转换为进程退出。
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import __version__
from .config import Config, get_config
from .errors import AbortError, AttemptsExhaustedError, SpawnError
from .runtime import DEFAULT_LOGGER, ProcessRunner, run_and_time, run_until_success
from .runtime.process_runner import Command
from .utils import command_path

__all__ = ["build_parser", "configure_logging", "dispatch", "main"]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# 命令无法找到或无法启动时的 shell 约定退出码
SPAWN_FAILURE_STATUS = 127


def configure_logging(config: Config) -> None:
    """为 ``rya`` 日志命名空间配置 handler。"""
    log_handlers: list[logging.Handler] = []

    if config.log_debug and config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log_handlers.append(file_handler)
        log_level = logging.DEBUG
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log_handlers.append(stderr_handler)
        log_level = logging.DEBUG if config.debug else logging.INFO

    # 第三方库保持 WARNING 级别
    logging.basicConfig(
        level=logging.WARNING,
        handlers=log_handlers,
    )
    logging.getLogger("rya").setLevel(log_level)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rya",
        description="Run commands with retry and timing.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="action", required=True)

    p_run = sub.add_parser("run", help="run a command once")
    p_run.add_argument("command", nargs=argparse.REMAINDER)

    p_retry = sub.add_parser("retry", help="run a command until it succeeds")
    p_retry.add_argument(
        "-n", "--max-attempts", type=_positive_int, default=config.max_attempts,
        help=f"attempt budget (default: {config.max_attempts})",
    )
    p_retry.add_argument(
        "--delay", type=float, default=config.retry_delay,
        help=f"seconds between failed attempts (default: {config.retry_delay})",
    )
    p_retry.add_argument("command", nargs=argparse.REMAINDER)

    p_time = sub.add_parser("time", help="run a command, abort on failure and log its duration")
    p_time.add_argument("-t", "--title", default="", help="label for the timing message")
    p_time.add_argument("--skip", action="store_true", help="do not run the command")
    p_time.add_argument("command", nargs=argparse.REMAINDER)

    p_which = sub.add_parser("which", help="print the executable a command name refers to")
    p_which.add_argument("name")

    return parser


def _command_from(parts: Sequence[str]) -> Command:
    """单个参数作为 shell 命令行，多个参数作为 argv。"""
    return parts[0] if len(parts) == 1 else list(parts)


def _exit_code_for(status: int) -> int:
    # 被信号 N 杀死时返回 -N，shell 约定为 128 + N
    return status if status >= 0 else 128 - status


def dispatch(args: argparse.Namespace, config: Config) -> int:
    """执行解析后的子命令，返回进程退出码。

    Raises:
        AbortError: 快速失败操作触发
        SpawnError: 命令无法启动
    """
    if args.action == "which":
        path = command_path(args.name)
        if path is None:
            logger.error(f"{args.name}: not found")
            return 1
        print(path)
        return 0

    if not args.command:
        logger.error(f"{args.action}: no command given")
        return 2

    command = _command_from(args.command)
    runner = ProcessRunner(echo=config.echo)

    if args.action == "run":
        return _exit_code_for(runner.run(command).exit_code)

    if args.action == "retry":
        try:
            outcome = run_until_success(
                args.max_attempts,
                lambda: runner.run(command),
                delay=args.delay,
            )
        except AttemptsExhaustedError as e:
            logger.error(f"{command!r} did not succeed: {e}")
            return 1
        logger.debug(f"{command!r} succeeded after {outcome.attempts_used} attempt(s)")
        print(outcome.attempts_used)
        return 0

    if args.action == "time":
        run_and_time(args.title, command, DEFAULT_LOGGER, run=not args.skip, runner=runner)
        return 0

    raise ValueError(f"Unknown action: {args.action}")


def main(argv: Sequence[str] | None = None) -> None:
    """主入口。"""
    config = get_config()
    configure_logging(config)

    parser = build_parser(config)
    args = parser.parse_args(argv)

    try:
        status = dispatch(args, config)
    except AbortError as e:
        logger.error(str(e))
        sys.exit(e.exit_status)
    except SpawnError as e:
        logger.error(str(e))
        sys.exit(SPAWN_FAILURE_STATUS)

    sys.exit(status)


if __name__ == "__main__":
    main()
