from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from lib_log_channels.domain.channels import Channel, OutputTarget
from lib_log_channels.runtime import LogEngine

_LOG_ENV_VARS = ("LOG_BASE_PATH", "LOG_STATUS", "LOG_VIEWER", "LOG_ESCALATE", "LOG_COLOR", "LOG_FORCE_COLOR", "LOG_USE_DOTENV")


class RecordingStream:
    def __init__(self, target: OutputTarget) -> None:
        self.target = target
        self.calls: list[tuple[Channel, bytes]] = []

    def emit(self, channel: Channel, data: bytes) -> None:
        self.calls.append((channel, data))

    @property
    def data(self) -> bytes:
        return b"".join(data for _, data in self.calls)


class RecordingLauncher:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.commands: list[str] = []

    def start_process(self, command_line: str) -> None:
        self.commands.append(command_line)
        if self.fail:
            raise OSError("viewer not found")


class FixedClock:
    def __init__(self, moment: datetime | None = None) -> None:
        self.moment = moment or datetime(2024, 3, 5, 7, 8, 9)

    def now(self) -> datetime:
        return self.moment


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_runtime():
    from lib_log_channels import runtime

    try:
        yield
    finally:
        try:
            runtime.shutdown()
        except RuntimeError:
            pass


@pytest.fixture
def streams() -> dict[OutputTarget, RecordingStream]:
    return {
        OutputTarget.STDERR: RecordingStream(OutputTarget.STDERR),
        OutputTarget.STDOUT: RecordingStream(OutputTarget.STDOUT),
    }


@pytest.fixture
def launcher() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def base_path(tmp_path: Path) -> Path:
    return tmp_path / "Log"


@pytest.fixture
def make_engine(
    base_path: Path,
    streams: dict[OutputTarget, RecordingStream],
    launcher: RecordingLauncher,
    clock: FixedClock,
) -> Callable[..., LogEngine]:
    def factory(**overrides: object) -> LogEngine:
        options: dict[str, object] = {
            "streams": streams,
            "launcher": launcher,
            "clock": clock,
            "viewer": "viewer",
        }
        options.update(overrides)
        target = options.pop("base_path", base_path)
        return LogEngine(target, **options)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def failing_launcher() -> RecordingLauncher:
    return RecordingLauncher(fail=True)
