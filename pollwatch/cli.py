import sys
import shlex
import logging
from typing import List, Optional

import typer

from .dispatch import ChangeDispatcher, watch
from .errors import WatchError
from .store import SnapshotStore


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command(
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True}
)
def main(
    root: str = typer.Argument(..., help="Directory to watch"),
    command: str = typer.Argument(..., help="Command to run when a file changes"),
    args: Optional[List[str]] = typer.Argument(
        None, help="Arguments passed to the command on every run"
    ),
    interval: float = typer.Option(
        0.0,
        "--interval",
        min=0.0,
        help="Seconds to sleep between scans (0 rescans immediately)",
        envvar="POLLWATCH_INTERVAL",
    ),
    pass_path: bool = typer.Option(
        False,
        "--pass-path/--no-pass-path",
        help="Append the changed path as the command's last argument",
        envvar="POLLWATCH_PASS_PATH",
    ),
    show_failed_output: bool = typer.Option(
        False,
        "--show-failed-output/--hide-failed-output",
        help="Also print what a failing command wrote before it exited",
        envvar="POLLWATCH_SHOW_FAILED_OUTPUT",
    ),
    loglevel: str = typer.Option(
        "INFO",
        "--loglevel",
        help="Logging level: DEBUG, INFO, WARNING, ERROR",
        envvar="POLLWATCH_LOGLEVEL",
    ),
):
    """Poll ROOT for modified files and run COMMAND [ARGS]... for each change.

    - Only files present at startup are tracked.
    - The command's combined stdout/stderr is printed after each run.
    - Options go before ROOT; everything after COMMAND is passed to it.
    """
    logging.basicConfig(
        level=getattr(logging, loglevel.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        store = SnapshotStore.from_root(root)
    except WatchError as e:
        logging.error(str(e))
        raise typer.Exit(code=1)

    args = args or []
    logging.info(f"Watching: {root} ({len(store)} files)")
    logging.info(f"Command: {shlex.join([command, *args])}")
    if interval == 0:
        logging.info("Scan interval: none (continuous polling)")
    else:
        logging.info(f"Scan interval: {interval}s")

    dispatcher = ChangeDispatcher(
        command,
        args,
        typer.get_binary_stream("stdout"),
        pass_path=pass_path,
        show_failed_output=show_failed_output,
    )

    try:
        watch(store, dispatcher, interval=interval)
    except KeyboardInterrupt:
        logging.info("Stopping watcher...")


if __name__ == "__main__":
    app()
