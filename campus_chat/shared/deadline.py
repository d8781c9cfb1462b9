"""
Deadline race for blocking calls.

Runs a blocking callable on the default executor and races it against a
timer. Whichever settles first decides the outcome. On expiry the worker is
not interrupted: it keeps running in the background and its eventual result
(or exception) is drained and discarded.

Usage:
    try:
        response = await run_with_deadline(model.generate_content, prompt, timeout=15.0)
    except DeadlineExceeded:
        ...
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class DeadlineExceeded(Exception):
    """The operation did not settle before its deadline."""

    def __init__(self, name: str, timeout: float):
        self.name = name
        self.timeout = timeout
        super().__init__(f"{name} did not complete within {timeout:.3f}s")


def _discard_late_result(name: str, future: "asyncio.Future[Any]") -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.debug(f"Late failure from {name} discarded: {error}")
    else:
        logger.debug(f"Late result from {name} discarded")


async def run_with_deadline(
    func: Callable[..., Any],
    *args: Any,
    timeout: float,
    name: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """
    Run ``func(*args, **kwargs)`` in a worker thread, bounded by ``timeout`` seconds.

    Args:
        func: Blocking callable to run
        timeout: Deadline in seconds (must be positive)
        name: Label used in errors and logs (defaults to the callable's name)

    Returns:
        Whatever ``func`` returns

    Raises:
        DeadlineExceeded: If the deadline fires first
        Exception: Whatever ``func`` raised, if it settled first
    """
    if timeout <= 0:
        raise ValueError(f"timeout must be positive, got {timeout}")

    label = name or getattr(func, "__name__", "operation")
    loop = asyncio.get_running_loop()
    future = loop.run_in_executor(None, functools.partial(func, *args, **kwargs))

    # asyncio.wait never cancels what it waits on
    done, _ = await asyncio.wait({future}, timeout=timeout)
    if future in done:
        return future.result()

    future.add_done_callback(functools.partial(_discard_late_result, label))
    raise DeadlineExceeded(label, timeout)
