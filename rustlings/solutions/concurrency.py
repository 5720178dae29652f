"""Worked solutions of the shared-data and channel exercises."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every ``workers``-th value per offset, each offset in its own thread.

    Element ``i`` of the result is the sum of the numbers ``n`` with
    ``n % workers == i``.
    """
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class JobQueue:
    """Values to be sent in two halves; ``interval`` is the pause after each send."""

    length: int = 10
    first_half: tuple[int, ...] = field(default=(1, 2, 3, 4, 5))
    second_half: tuple[int, ...] = field(default=(6, 7, 8, 9, 10))
    interval: float = 1.0


class _Sender(Protocol):
    def put(self, item: int) -> None: ...


def send_tx(job_queue: JobQueue, channel: _Sender) -> list[threading.Thread]:
    """Send both halves of the queue into the channel from two threads.

    Returns the started threads; once they are joined every value has been sent.
    """

    def send(values: tuple[int, ...]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(job_queue.interval)

    threads = [
        threading.Thread(target=send, args=(half,), daemon=True)
        for half in (job_queue.first_half, job_queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads