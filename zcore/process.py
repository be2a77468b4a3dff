"""Child processes with piped standard streams."""

from __future__ import annotations

import os
import subprocess
from enum import IntFlag
from typing import IO, Dict, Iterable, Mapping, Optional, Sequence, Union

__all__ = ["ProcessOptions", "ProcessError", "Process"]

Environment = Union[Mapping[str, str], Iterable[str]]


class ProcessOptions(IntFlag):
    """How a child process is set up."""

    NONE = 0
    COMBINE_STD_OUTPUT = 1 << 1
    INHERIT_ENV = 1 << 2
    CUSTOM_ENV = 1 << 3


class ProcessError(RuntimeError):
    """Raised when a process cannot be started or is used after it ended."""


def _build_env(env: Optional[Environment], options: ProcessOptions) -> Optional[Dict[str, str]]:
    if options & ProcessOptions.CUSTOM_ENV:
        if env is None:
            raise ProcessError("a custom environment was requested but none was given")
        if isinstance(env, Mapping):
            return {str(name): str(value) for name, value in env.items()}
        result: Dict[str, str] = {}
        for entry in env:
            name, _, value = entry.partition("=")
            result[name] = value
        return result
    if not options & ProcessOptions.INHERIT_ENV:
        return {}
    return None


def _close(stream: Optional[IO[bytes]]) -> None:
    if stream is None:
        return
    try:
        stream.close()
    except OSError:
        pass


class Process:
    """A running child process whose stdin, stdout and stderr are pipes.

    Without INHERIT_ENV or CUSTOM_ENV the child starts with an empty
    environment. With COMBINE_STD_OUTPUT, ``stderr`` is the same stream as
    ``stdout``.
    """

    def __init__(
        self,
        args: Sequence[Union[str, "os.PathLike[str]"]],
        workdir: Optional[Union[str, "os.PathLike[str]"]] = None,
        env: Optional[Environment] = None,
        options: ProcessOptions = ProcessOptions.NONE,
    ) -> None:
        argv = [os.fspath(arg) for arg in args]
        if not argv:
            raise ProcessError("no command given")
        options = ProcessOptions(options)
        combine = bool(options & ProcessOptions.COMBINE_STD_OUTPUT)
        environment = _build_env(env, options)

        try:
            self._popen: Optional[subprocess.Popen] = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT if combine else subprocess.PIPE,
                cwd=workdir,
                env=environment,
            )
        except (OSError, ValueError) as exc:
            raise ProcessError(f"cannot start {argv[0]!r}: {exc}") from exc

        self.options = options
        self.stdin: Optional[IO[bytes]] = self._popen.stdin
        self.stdout: Optional[IO[bytes]] = self._popen.stdout
        self.stderr: Optional[IO[bytes]] = self.stdout if combine else self._popen.stderr
        self.returncode: Optional[int] = None

    @property
    def pid(self) -> Optional[int]:
        """Process id of the child while it is attached."""
        return self._popen.pid if self._popen is not None else None

    def _require(self) -> subprocess.Popen:
        if self._popen is None:
            raise ProcessError("process has already been released")
        return self._popen

    def join(self) -> int:
        """Close stdin, wait for the child to exit and return its exit code.

        The process is released afterwards, so read its output first.
        """
        popen = self._require()
        _close(self.stdin)
        code = popen.wait()
        self.returncode = code
        self.destroy()
        return code

    def terminate(self, err_code: int) -> None:
        """Stop the child at once and release it; ``returncode`` is set to ``err_code``."""
        popen = self._require()
        popen.kill()
        popen.wait()
        self.returncode = err_code
        self.destroy()

    def destroy(self) -> None:
        """Close every pipe and release the child without waiting for it."""
        if self._popen is None:
            return
        _close(self.stdin)
        _close(self.stdout)
        if self.stderr is not self.stdout:
            _close(self.stderr)
        self.stdin = self.stdout = self.stderr = None
        self._popen = None

    def __enter__(self) -> "Process":
        return self

    def __exit__(self, *args) -> None:
        self.destroy()