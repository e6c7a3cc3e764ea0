from typing import Optional, Sequence


class WatchError(RuntimeError):
    """The watched root could not be walked."""


class CommandError(RuntimeError):
    """The configured command failed to start or exited non-zero.

    ``output`` holds whatever the child printed before failing; the dispatcher
    only relays it when asked to.
    """

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        returncode: Optional[int] = None,
        output: bytes = b"",
    ) -> None:
        super().__init__(reason)
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode
        self.output = output
