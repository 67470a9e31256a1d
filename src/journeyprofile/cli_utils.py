# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.panel import Panel

from journeyprofile.common.exceptions import JourneyProfileError, ProfileMultiError


def _error_lines(error: BaseException) -> list[str]:
    if isinstance(error, ProfileMultiError):
        return [f"- {e}" for e in error.exceptions]
    return [str(error)]


@contextmanager
def exit_on_error(
    title: str = "Error", console: Console | None = None, exit_code: int = 1
) -> Iterator[None]:
    """Render errors raised inside the block as a Rich panel and exit.

    Expected errors (JourneyProfileError) print only their message. Anything else
    also prints the traceback.
    """
    try:
        yield
    except KeyboardInterrupt:
        sys.exit(130)
    except JourneyProfileError as e:
        console = console or Console(stderr=True)
        console.print(
            Panel(
                "\n".join(_error_lines(e)),
                title=f"{title}: {type(e).__name__}",
                border_style="red",
                title_align="left",
            )
        )
        sys.exit(exit_code)
    except Exception as e:
        console = console or Console(stderr=True)
        console.print_exception(show_locals=False)
        console.print(
            Panel(str(e), title=title, border_style="red", title_align="left")
        )
        sys.exit(exit_code)
