#!/usr/bin/env python3

"""Script entrypoint.

Delegates to the pollwatch package CLI so the tool can be run from a checkout
without installing it.
"""

from pollwatch.cli import app


if __name__ == "__main__":
    app()
