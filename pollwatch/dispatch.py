import shlex
import time
import logging
from typing import BinaryIO, Optional, Sequence

from .errors import CommandError
from .runner import run_cmd
from .store import SnapshotStore


class ChangeDispatcher:
    """Runs one fixed command for every changed path and relays its output."""

    def __init__(
        self,
        command: str,
        args: Sequence[str],
        out: BinaryIO,
        pass_path: bool = False,
        show_failed_output: bool = False,
    ) -> None:
        self.command = command
        self.args = list(args)
        self.out = out
        self.pass_path = pass_path
        self.show_failed_output = show_failed_output

    def _write(self, data: bytes) -> None:
        self.out.write(data)
        self.out.flush()

    def dispatch(self, path: str) -> bool:
        self._write(f"File changed: {path}\n".encode())

        args = self.args + [path] if self.pass_path else self.args
        try:
            output = run_cmd(self.command, *args)
        except CommandError as e:
            line = f"Error executing command ({shlex.join(e.command)}): {e}"
            logging.error(line)
            self._write(f"{line}\n".encode())
            if self.show_failed_output and e.output:
                self._write(e.output)
            return False

        self._write(output)
        return True

    def run_cycle(self, store: SnapshotStore) -> int:
        """Dispatch every change from one check pass, in order. Returns the count."""
        count = 0
        for path in store.check():
            self.dispatch(path)
            count += 1
        return count


def watch(
    store: SnapshotStore,
    dispatcher: ChangeDispatcher,
    interval: float = 0.0,
    max_cycles: Optional[int] = None,
) -> None:
    """Check ``store`` over and over, dispatching changes as they show up.

    With ``interval`` at 0 the next pass starts as soon as the previous one
    has been handled. Runs forever unless ``max_cycles`` is given.
    """
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        changed = dispatcher.run_cycle(store)
        if changed:
            logging.debug(f"Cycle {cycles}: {changed} change(s)")
        cycles += 1
        if interval > 0:
            time.sleep(interval)
