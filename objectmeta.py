# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

"""Main entry point for the objectmeta CLI application.

Loads the configuration, applies the configured schema transformers and writes the transformed schema and resources.
"""

from gqlmeta.runtime import Runtime
from gqlmeta.util.logging import exception_handler


def main() -> None:
    # Log uncaught exceptions, including transformation errors
    exception_handler.install()

    runtime = Runtime()
    runtime.run()


if __name__ == "__main__":
    main()
