from typing import Protocol


class SourceWatcherPort(Protocol):
    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    async def wait(self) -> None: ...
