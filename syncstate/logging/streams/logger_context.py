from .logger_stream import LoggerStream


class LoggerContext:
    """
    Named logging target. As an async context manager it opens the
    stream's log file on entry and, unless nested inside a ``Logger``
    that owns it, closes the stream on exit.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
        nested: bool = False,
    ) -> None:
        self.name = name
        self.stream = LoggerStream(
            name=name,
            template=template,
            filename=filename,
            directory=directory,
        )
        self.nested = nested

    async def __aenter__(self):
        await self.stream.open()
        return self.stream

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.nested is False:
            await self.stream.close()
