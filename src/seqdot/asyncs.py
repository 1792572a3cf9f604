import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterable, Awaitable, Callable, Iterable

from seqdot._helpers import not_none, release

log = logging.getLogger(__name__)


async def _aiterate[T](source: Iterable[T] | AsyncIterable[T]) -> AsyncGenerator[T, None]:
    if isinstance(source, AsyncIterable):
        aiterator = aiter(source)
        try:
            async for item in aiterator:
                yield item
        finally:
            if isinstance(aiterator, AsyncGenerator):
                await aiterator.aclose()
    else:
        iterator = iter(source)
        try:
            for item in iterator:
                yield item
        finally:
            release(iterator)


@not_none("source", "action")
async def for_each_async[T](
    source: Iterable[T] | AsyncIterable[T],
    action: Callable[[T], Awaitable[object]],
    *,
    cancel: asyncio.Event | None = None,
) -> None:
    """Await action on each item of source, one item at a time.

    Args:
        source: a sync or async iterable.
        action: coroutine function applied to every item; each call is
            awaited before the next item is drawn.
        cancel (optional): checked before every call to action. Once set,
            asyncio.CancelledError is raised and no further item is drawn.

    Raises:
        NullInput: source or action is None.
        asyncio.CancelledError: cancel was set.
    """
    items = _aiterate(source)
    processed = 0
    try:
        async for item in items:
            if cancel is not None and cancel.is_set():
                log.debug("for_each_async cancelled after %d items", processed)
                raise asyncio.CancelledError
            _ = await action(item)
            processed += 1
    finally:
        await items.aclose()


@not_none("source")
async def collect_async[T](source: AsyncIterable[T]) -> tuple[T, ...]:
    """Materialize an async iterable."""
    return tuple([item async for item in source])
