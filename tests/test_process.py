import os
import sys
from pathlib import Path

import pytest

from zcore.process import Process, ProcessError, ProcessOptions

INHERIT = ProcessOptions.INHERIT_ENV


def run(code, **kwargs):
    return Process([sys.executable, "-c", code], **kwargs)


def test_reads_stdout():
    proc = run("print('hello')", options=INHERIT)
    out = proc.stdout.read()
    assert proc.join() == 0
    assert out.strip() == b"hello"


def test_join_returns_exit_code():
    proc = run("import sys; sys.exit(3)", options=INHERIT)
    code = proc.join()
    assert code == 3
    assert proc.returncode == 3


def test_stdin_is_piped():
    proc = run("import sys; sys.stdout.write(sys.stdin.read().upper())", options=INHERIT)
    proc.stdin.write(b"abc")
    proc.stdin.close()
    out = proc.stdout.read()
    assert proc.join() == 0
    assert out == b"ABC"


def test_separate_stderr():
    proc = run("import sys; sys.stderr.write('oops'); sys.stderr.flush()", options=INHERIT)
    err = proc.stderr.read()
    out = proc.stdout.read()
    proc.join()
    assert err == b"oops"
    assert out == b""


def test_combined_output():
    proc = run(
        "import sys; sys.stderr.write('oops'); sys.stderr.flush()",
        options=ProcessOptions.COMBINE_STD_OUTPUT | INHERIT,
    )
    assert proc.stderr is proc.stdout
    out = proc.stdout.read()
    proc.join()
    assert out == b"oops"


def test_inherited_environment(monkeypatch):
    monkeypatch.setenv("ZCORE_MARKER", "inherited")
    proc = run("import os; print(os.environ.get('ZCORE_MARKER'))", options=INHERIT)
    out = proc.stdout.read()
    proc.join()
    assert out.strip() == b"inherited"


def _base_env():
    return {k: v for k, v in os.environ.items() if k.upper() == "SYSTEMROOT"}


@pytest.mark.parametrize("as_list", [False, True])
def test_custom_environment(monkeypatch, as_list):
    monkeypatch.setenv("ZCORE_MARKER", "inherited")
    env = dict(_base_env(), ZCORE_VALUE="42")
    given = [f"{k}={v}" for k, v in env.items()] if as_list else env
    proc = run(
        "import os; print(os.environ.get('ZCORE_VALUE'), os.environ.get('ZCORE_MARKER'))",
        env=given,
        options=ProcessOptions.CUSTOM_ENV,
    )
    out = proc.stdout.read()
    proc.join()
    assert out.split() == [b"42", b"None"]


def test_custom_environment_requires_env():
    with pytest.raises(ProcessError):
        run("pass", options=ProcessOptions.CUSTOM_ENV)


def test_workdir(tmp_path):
    proc = run("import os; print(os.getcwd())", workdir=tmp_path, options=INHERIT)
    out = proc.stdout.read()
    proc.join()
    assert Path(out.decode().strip()).resolve() == tmp_path.resolve()


def test_missing_program(tmp_path):
    with pytest.raises(ProcessError):
        Process([str(tmp_path / "missing-program")], options=INHERIT)


def test_empty_command():
    with pytest.raises(ProcessError):
        Process([], options=INHERIT)


def test_terminate_sets_code_and_releases():
    proc = run("import time; time.sleep(30)", options=INHERIT)
    proc.terminate(7)
    assert proc.returncode == 7
    with pytest.raises(ProcessError):
        proc.join()


def test_context_manager_closes_streams():
    with run("print('hello')", options=INHERIT) as proc:
        stream = proc.stdout
        out = stream.read()
    assert out.strip() == b"hello"
    assert stream.closed is True


def test_join_after_destroy_fails():
    proc = run("pass", options=INHERIT)
    proc.destroy()
    with pytest.raises(ProcessError):
        proc.join()