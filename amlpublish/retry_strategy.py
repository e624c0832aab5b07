import random
from typing import List


class RetryStrategy:
    statuses = {440, 503, 504, 509, 520, 524}

    @staticmethod
    def sleep_times(retries: int) -> List[float]:
        """Jittered waits between attempts; one fewer than the number of tries."""
        return [2 * random.random() * 3**attempt for attempt in range(retries - 1)]
