"""Tests for psutil-backed process discovery."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, PropertyMock, patch

import psutil
import pytest

from sssd.process_helpers.process_discovery import (
    PsutilProcessSource,
    interpreter_script,
    is_interpreter,
    process_matches,
)
from sssd.process_helpers.process_models import PsutilProcessHandle


def _fake_proc(pid: int, name: str, cmdline: list[str] | None = None) -> MagicMock:
    proc = MagicMock()
    proc.info = {"pid": pid, "name": name, "cmdline": cmdline}
    return proc


class TestProcessMatches:
    """Tests for process_matches and its helpers."""

    def test_matches_process_name(self) -> None:
        """Matches a directly executed binary by name."""
        assert process_matches("app", "app", ["./app", "start"]) is True

    def test_matches_env_shebang_script(self) -> None:
        """Matches a script run through '#!/usr/bin/env python3'."""
        assert process_matches("app", "python3", ["python3", "/opt/bin/app", "start"]) is True

    def test_matches_python_app_py(self) -> None:
        """Matches 'python app.py' when the app is named app.py."""
        assert process_matches("app.py", "python", ["/usr/bin/python", "-u", "app.py"]) is True

    def test_skips_options_with_values(self) -> None:
        """Skips interpreter options and their arguments."""
        assert process_matches("app", "python3.12", ["python3.12", "-X", "dev", "-W", "ignore", "./app"]) is True

    def test_ignores_module_and_command_runs(self) -> None:
        """Does not treat -m or -c arguments as scripts."""
        assert process_matches("app", "python3", ["python3", "-m", "app"]) is False
        assert process_matches("app", "python3", ["python3", "-c", "app"]) is False

    def test_ignores_other_interpreter_scripts(self) -> None:
        """Does not match every Python process."""
        assert process_matches("app", "python3", ["python3", "/opt/bin/other", "app"]) is False
        assert process_matches("app", "python3", ["python3"]) is False

    def test_ignores_non_interpreters(self) -> None:
        """Only interpreters are matched by their script argument."""
        assert process_matches("app", "bash", ["bash", "./app"]) is False

    def test_interpreter_detection(self) -> None:
        """Recognizes interpreter names from the process name or argv[0]."""
        assert is_interpreter("python3.11", []) is True
        assert is_interpreter("pypy3", []) is True
        assert is_interpreter(None, ["/usr/local/bin/python3"]) is True
        assert is_interpreter("node", ["node"]) is False

    def test_interpreter_script_after_double_dash(self) -> None:
        """Returns the argument that follows '--'."""
        assert interpreter_script(["python3", "--", "-app"]) == "-app"


class TestPsutilProcessSource:
    """Tests for PsutilProcessSource.find_by_name."""

    def test_matches_exact_name_only(self) -> None:
        """Returns handles only for exact name matches."""
        procs = [_fake_proc(1, "app"), _fake_proc(2, "app2"), _fake_proc(3, "App"), _fake_proc(4, "app")]

        with patch("psutil.process_iter", return_value=procs) as process_iter:
            result = PsutilProcessSource().find_by_name("app")

        process_iter.assert_called_once_with(["pid", "name", "cmdline"])
        assert [(handle.pid, handle.name) for handle in result] == [(1, "app"), (4, "app")]
        assert all(isinstance(handle, PsutilProcessHandle) for handle in result)

    def test_skips_vanished_and_denied_processes(self) -> None:
        """Ignores processes that disappear or deny access mid-scan."""
        vanished = MagicMock()
        type(vanished).info = PropertyMock(side_effect=psutil.NoSuchProcess(9))
        denied = MagicMock()
        type(denied).info = PropertyMock(side_effect=psutil.AccessDenied(10))

        with patch("psutil.process_iter", return_value=[vanished, denied, _fake_proc(11, "app")]):
            result = PsutilProcessSource().find_by_name("app")

        assert [handle.pid for handle in result] == [11]

    def test_takes_fresh_snapshot_each_call(self) -> None:
        """Enumerates the process table on every lookup."""
        with patch("psutil.process_iter", side_effect=[[_fake_proc(1, "app")], []]) as process_iter:
            source = PsutilProcessSource()
            first = source.find_by_name("app")
            second = source.find_by_name("app")

        assert process_iter.call_count == 2
        assert len(first) == 1
        assert second == []

    def test_handle_terminate_delegates_to_psutil(self) -> None:
        """Forwards terminate() to the wrapped psutil process."""
        proc = _fake_proc(5, "app")
        with patch("psutil.process_iter", return_value=[proc]):
            (handle,) = PsutilProcessSource().find_by_name("app")

        handle.terminate()

        proc.terminate.assert_called_once_with()

    def test_finds_current_process_by_real_name(self) -> None:
        """Locates this interpreter in the live process table."""
        own_name = psutil.Process(os.getpid()).name()

        result = PsutilProcessSource().find_by_name(own_name)

        assert os.getpid() in [handle.pid for handle in result]

    def test_matches_interpreter_run_script(self) -> None:
        """Returns interpreter processes whose script has the app name."""
        procs = [
            _fake_proc(1, "python3", ["python3", "/srv/app", "start"]),
            _fake_proc(2, "python3", ["python3", "/srv/other"]),
            _fake_proc(3, "app", ["./app", "start"]),
        ]

        with patch("psutil.process_iter", return_value=procs):
            result = PsutilProcessSource().find_by_name("app")

        assert [(handle.pid, handle.name) for handle in result] == [(1, "app"), (3, "app")]


@pytest.mark.skipif(sys.platform == "win32", reason="shebang scripts are POSIX only")
class TestPsutilProcessSourceLiveProcesses:
    """Tests against real child processes."""

    def test_finds_env_shebang_script(self, tmp_path) -> None:
        """Finds a script launched through '#!/usr/bin/env <python>'."""
        interpreter = Path(sys.executable)
        script = tmp_path / "sssd-demo"
        script.write_text(
            f"#!/usr/bin/env {interpreter.name}\n"
            "import sys, time\n"
            "print('ready', flush=True)\n"
            "time.sleep(30)\n"
        )
        script.chmod(0o755)
        env = dict(os.environ, PATH=f"{interpreter.parent}{os.pathsep}{os.environ.get('PATH', '')}")

        child = subprocess.Popen([str(script), "start"], stdout=subprocess.PIPE, env=env)
        try:
            assert child.stdout.readline().strip() == b"ready"

            result = PsutilProcessSource().find_by_name("sssd-demo")

            assert child.pid in [handle.pid for handle in result]
        finally:
            child.kill()
            child.wait()
            child.stdout.close()
