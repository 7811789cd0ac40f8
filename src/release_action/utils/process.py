"""
External command execution.

Every git and package manager call the action makes goes through
run_command. git runs through GitPython's command layer; package managers
run as plain subprocesses so they keep the runner's environment untouched.
"""
import subprocess  # Ejecución de procesos externos (yarn, npm)
from pathlib import Path  # Manejo moderno de rutas de archivos
from typing import Tuple, Union  # Type hints para tuplas y uniones de tipos

from git.cmd import Git  # GitPython - ejecución de comandos git
from git.exc import GitCommandNotFound  # Excepción cuando el ejecutable no existe

from ..exceptions import CommandError, ExitError  # Excepciones personalizadas
from .logging import get_logger  # Logger estructurado

logger = get_logger(__name__)

GIT = "git"


def _run_git(cwd: Path, args: Tuple[str, ...]) -> Tuple[int, str]:
    """Run git through GitPython, returning (exit code, stderr)."""
    status, _stdout, stderr = Git(str(cwd)).execute(
        [GIT, *args],
        with_extended_output=True,
        with_exceptions=False,
    )
    return status, stderr or ""


def _run_process(cwd: Path, command: str, args: Tuple[str, ...]) -> Tuple[int, str]:
    """Run any other executable, returning (exit code, stderr)."""
    proc = subprocess.run(
        [command, *args],
        cwd=str(cwd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
    )
    return proc.returncode, proc.stderr.decode("utf-8", errors="replace")


def run_command(cwd: Union[str, Path], command: str, *args: str) -> None:
    """
    Run an external command and wait for it to finish.

    Standard input is closed, standard output is discarded and standard
    error is captured for error reporting. There is no timeout.

    Args:
        cwd: Working directory for the command; must be an existing directory
        command: Executable name
        *args: Command arguments

    Raises:
        CommandError: If the working directory is invalid or the command
            cannot be launched
        ExitError: If the command exits with a non-zero code
    """
    logger.info("executing_command", command=command, args=" ".join(args), cwd=str(cwd))

    workdir = Path(cwd)
    if not workdir.is_dir():
        raise CommandError(
            f"command failed: {command} (working directory not found: {workdir})",
            context={"command": command, "cwd": str(workdir)}
        )

    try:
        if command == GIT:
            status, stderr = _run_git(workdir, args)
        else:
            status, stderr = _run_process(workdir, command, args)
    except (GitCommandNotFound, OSError) as e:
        raise CommandError(
            f"command failed: {command}",
            context={"command": command, "cwd": str(workdir), "error": str(e)}
        ) from e

    if status != 0:
        stderr = stderr.strip()
        if stderr:
            logger.warning(
                "command_failed",
                command=command,
                code=status,
                stderr=stderr
            )
        raise ExitError(
            status,
            stderr,
            context={"command": command, "args": list(args), "cwd": str(workdir)}
        )
