from __future__ import annotations

import asyncio
import pathlib
import sys
from types import FrameType
from typing import Dict, TypeVar

from syncstate.logging.models import Entry, Log

from .logger_context import LoggerContext

T = TypeVar('T', bound=Entry)


def _split_path(path: str | None) -> tuple[str | None, str | None]:
    filename: str | None = None
    directory: str | None = None

    if path:
        logfile_path = pathlib.Path(path)
        is_logfile = len(logfile_path.suffix) > 0

        filename = logfile_path.name if is_logfile else None
        directory = str(logfile_path.parent.absolute()) if is_logfile else str(logfile_path.absolute())

    return filename, directory


def _to_log(entry: T, frame: FrameType) -> Log[T]:
    return Log(
        entry=entry,
        filename=frame.f_code.co_filename,
        function_name=frame.f_code.co_name,
        line_number=frame.f_lineno,
    )


class Logger:
    """
    Hands entries to named logger contexts. Entries are wrapped in a
    ``Log`` carrying the calling function's location. ``log`` is awaited
    from coroutines, ``schedule`` is called from synchronous code and
    ``close`` waits for everything scheduled.
    """

    def __init__(self) -> None:
        self._contexts: Dict[str, LoggerContext] = {}

    def configure(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
    ):
        if name is None:
            name = 'default'

        filename, directory = _split_path(path)

        self._contexts[name] = LoggerContext(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
            nested=True,
        )

    def context(self, name: str | None = None) -> LoggerContext:
        if name is None:
            name = 'default'

        if self._contexts.get(name) is None:
            self._contexts[name] = LoggerContext(
                name=name,
                nested=True,
            )

        return self._contexts[name]

    async def log(
        self,
        entry: T,
        name: str | None = None,
    ):
        log = _to_log(entry, sys._getframe(1))

        async with self.context(name) as stream:
            await stream.log(log)

    def schedule(
        self,
        entry: T,
        name: str | None = None,
    ):
        log = _to_log(entry, sys._getframe(1))
        self.context(name).stream.schedule(log)

    async def close(self):

        if len(self._contexts) > 0:
            await asyncio.gather(*[
                context.stream.close() for context in self._contexts.values()
            ])
