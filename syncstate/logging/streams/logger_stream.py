import asyncio
import io
import os
import pathlib
import sys
from collections import defaultdict
from typing import Dict

import msgspec

from syncstate.logging.config.logging_config import LoggingConfig
from syncstate.logging.config.stream_type import StreamType
from syncstate.logging.models import Log

DEFAULT_TEMPLATE = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"


class LoggerStream:
    """
    Writes the logs of one named logger context.

    Without a log file, each log is rendered through the template and
    written to the configured stdout/stderr stream. With one, logs are
    appended to it as msgspec JSON lines. The stream's own directory
    takes precedence over the one set on ``LoggingConfig``.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        if filename and pathlib.Path(filename).suffix != ".json":
            raise ValueError("Err. - file must be JSON file for logs.")

        self._name = name
        self._template = template or DEFAULT_TEMPLATE
        self._filename = filename
        self._directory = directory

        self._encoder = msgspec.json.Encoder()
        self._files: Dict[str, io.BufferedRandom] = {}
        self._file_locks: Dict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

        self._config = LoggingConfig()
        self._pending: set[asyncio.Future] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def logfile_path(self) -> str | None:
        if self._filename is None:
            return None

        directory = self._directory or self._config.directory or os.getcwd()
        return os.path.join(directory, self._filename)

    async def open(self):
        if (logfile_path := self.logfile_path) is None:
            return

        async with self._file_locks[logfile_path]:
            await asyncio.to_thread(
                self._open_file,
                logfile_path,
            )

    def schedule(self, log: Log):
        try:
            asyncio.get_running_loop()

        except RuntimeError:
            self._log_now(log)
            return

        future = asyncio.ensure_future(self.log(log))

        self._pending.add(future)
        future.add_done_callback(self._pending.discard)

    async def log(self, log: Log):
        if self._config.enabled(log.entry.level) is False:
            return

        if (logfile_path := self.logfile_path) is None:
            self._write_to_stream(log)
            return

        async with self._file_locks[logfile_path]:
            await asyncio.to_thread(
                self._write_to_file,
                log,
                logfile_path,
            )

    async def close(self):

        while self._pending:
            await asyncio.gather(
                *list(self._pending),
                return_exceptions=True,
            )

        for logfile_path in list(self._files):
            async with self._file_locks[logfile_path]:
                await asyncio.to_thread(
                    self._close_file,
                    logfile_path,
                )

    def _log_now(self, log: Log):
        if self._config.enabled(log.entry.level) is False:
            return

        if (logfile_path := self.logfile_path) is None:
            self._write_to_stream(log)
            return

        self._write_to_file(log, logfile_path)

    def _write_to_stream(self, log: Log):
        stream = sys.stdout if self._config.output == StreamType.STDOUT else sys.stderr

        stream.write(
            log.entry.to_template(
                self._template,
                context={
                    "filename": log.filename,
                    "function_name": log.function_name,
                    "line_number": log.line_number,
                    "thread_id": log.thread_id,
                    "timestamp": log.timestamp,
                },
            )
            + "\n"
        )
        stream.flush()

    def _open_file(self, logfile_path: str):
        logfile_directory = pathlib.Path(logfile_path).absolute().parent
        logfile_directory.mkdir(parents=True, exist_ok=True)

        if (
            logfile := self._files.get(logfile_path)
        ) is None or logfile.closed:
            self._files[logfile_path] = open(logfile_path, "ab+")

        return self._files[logfile_path]

    def _write_to_file(self, log: Log, logfile_path: str):
        logfile = self._open_file(logfile_path)

        logfile.write(self._encoder.encode(log) + b"\n")
        logfile.flush()

    def _close_file(self, logfile_path: str):
        if (
            logfile := self._files.pop(logfile_path, None)
        ) and logfile.closed is False:
            logfile.close()
