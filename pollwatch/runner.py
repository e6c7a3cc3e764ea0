import subprocess

from .errors import CommandError


def run_cmd(name: str, *args: str) -> bytes:
    """Run ``name`` with ``args`` and return its combined stdout and stderr.

    Waits for the child with no timeout. On a spawn failure or a non-zero exit
    a CommandError is raised instead; anything the child printed is kept on
    the exception, never returned.
    """
    command = [name, *args]
    try:
        proc = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
    except OSError as e:
        raise CommandError(command, str(e)) from e

    if proc.returncode != 0:
        raise CommandError(
            command,
            f"exit status {proc.returncode}",
            returncode=proc.returncode,
            output=proc.stdout or b"",
        )
    return proc.stdout or b""
