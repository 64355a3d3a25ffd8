from __future__ import annotations

import logging
import os
import subprocess
from typing import Sequence

from ..core import Config, Engine
from ..defaults import DEFAULT_ENGINE_EXECUTABLE, ENGINE_EXECUTABLE_ENV
from ..errors import EngineNotFoundError, FormatError

logger = logging.getLogger(__name__)


def default_command() -> list[str]:
    return [os.environ.get(ENGINE_EXECUTABLE_ENV) or DEFAULT_ENGINE_EXECUTABLE]


def config_flags(config: Config) -> list[str]:
    flags: list[str] = []
    for opt in config.ghc_opts:
        flags += ["--ghc-opt", opt]
    if config.unsafe:
        flags.append("--unsafe")
    if config.debug:
        flags.append("--debug")
    if config.tolerate_cpp:
        flags.append("--tolerate-cpp")
    if config.check_idempotency:
        flags.append("--check-idempotency")
    return flags


class OrmoluEngine(Engine):
    """
    Runs an external Ormolu executable as the formatting engine.

    The executable prints the formatted source to stdout. Any non-zero exit is
    turned into a FormatError carrying the executable's stderr and exit status.
    `command` may hold a launcher prefix, e.g. ``[sys.executable, "fake_ormolu.py"]``.
    """

    def __init__(self, command: Sequence[str] | None = None, *, env: dict[str, str] | None = None) -> None:
        self.command = list(command) if command else default_command()
        self.env = {**os.environ, **env} if env else None

    def format_text(self, config: Config, text: str) -> str:
        return self._run(config, [], stdin=text.encode("utf-8"), path=None)

    def format_file(self, config: Config, path: str) -> str:
        # A leading '-' would read as stdin or an option to the formatter.
        arg = os.path.join(".", path) if path.startswith("-") else path
        return self._run(config, [arg], stdin=None, path=path)

    def build_cmd(self, config: Config, args: list[str]) -> list[str]:
        return [*self.command, *config_flags(config), *args]

    def _run(self, config: Config, args: list[str], *, stdin: bytes | None, path: str | None) -> str:
        cmd = self.build_cmd(config, args)
        logger.debug("running %s", cmd)
        try:
            proc = subprocess.run(
                cmd,
                input=stdin,
                stdin=None if stdin is not None else subprocess.DEVNULL,
                capture_output=True,
                env=self.env,
                check=False,
            )
        except OSError as e:
            msg = f"cannot run formatter {self.command[0]!r}: {e.strerror or e}"
            raise EngineNotFoundError(msg, path=path) from e

        if proc.returncode != 0:
            message = proc.stderr.decode("utf-8", errors="replace").strip()
            if not message:
                message = f"formatter exited with status {proc.returncode}"
            raise FormatError(message, path=path, exit_code=proc.returncode)
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"cannot decode formatter output: {e}", path=path) from e
