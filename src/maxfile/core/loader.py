# src/maxfile/core/loader.py
import asyncio
from typing import Awaitable, Callable, Iterable, List

from maxfile.config import DEFAULT_ENCODING
from maxfile.models import LoadedFile

Reader = Callable[[str], Awaitable[str]]


def _read_blocking(path: str) -> str:
    # newline="" keeps '\r' in the text instead of translating it
    with open(path, "r", encoding=DEFAULT_ENCODING, newline="") as f:
        return f.read()


async def read_text_file(path: str) -> str:
    """Reads the whole file as UTF-8 text without blocking the event loop."""
    return await asyncio.to_thread(_read_blocking, path)


def _discard_outcome(task: asyncio.Task) -> None:
    # Reads that finish after the join are dropped, errors included
    if not task.cancelled():
        task.exception()


async def load_files(paths: Iterable[str], reader: Reader = read_text_file) -> List[LoadedFile]:
    """
    Loads every path concurrently and returns the contents in input order.

    1. One read per path is started at once; each task owns the slot at its index.
    2. Returns when all reads have finished, or as soon as one has failed.
    3. The first failure observed is raised unchanged. Reads still in flight are
       left running and their outcomes are ignored.
    """
    paths = list(paths)
    if not paths:
        return []

    tasks = [asyncio.ensure_future(reader(path)) for path in paths]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)

    for task in pending:
        task.add_done_callback(_discard_outcome)

    # Several reads can fail within the same wake-up; the earliest path wins then.
    failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
    if failed:
        raise failed[0].exception()

    return [LoadedFile(path=path, content=task.result()) for path, task in zip(paths, tasks)]
