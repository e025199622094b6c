"""Injectable time source for the discovery window."""

import asyncio


class Clock:
    """Suspends the caller for a number of seconds."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
