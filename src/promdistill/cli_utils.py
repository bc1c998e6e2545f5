# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@contextmanager
def exit_on_error(title: str = "Error", exit_code: int = 1) -> Iterator[None]:
    """Render any exception raised in the block as a rich panel, then exit.

    Args:
        title: Title of the error panel
        exit_code: Process exit code used after printing the error
    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except Exception as e:
        console = Console(stderr=True)
        console.print(
            Panel(
                Text(f"{type(e).__name__}: {e}"),
                title=title,
                title_align="left",
                border_style="red",
            )
        )
        sys.exit(exit_code)
