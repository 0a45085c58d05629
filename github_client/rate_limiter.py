"""
Rate limiter for GitHub API requests.

Throttles outgoing requests to a fixed number per minute and keeps track of
the rate limit GitHub reports in its response headers.
"""

import logging
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class RateLimitStatus:
    """Rate limit reported by GitHub."""
    remaining: int
    limit: int
    reset_at: int  # Unix timestamp


class RateLimiter:
    """
    Client-side request throttle.

    Keeps the timestamps of the requests sent during the last minute. Once
    `limit` requests are in the window, the next call to `wait_if_needed`
    sleeps until the oldest one expires.
    """

    WINDOW = 60.0

    def __init__(
        self,
        limit: Optional[int] = 60,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize rate limiter.

        Args:
            limit: Requests allowed per minute (None or 0 disables throttling)
            clock: Time source, in seconds
            sleep: Sleep function
        """
        self.limit = limit
        self.clock = clock
        self.sleep = sleep
        self.history: Deque[float] = deque()
        self.cached_status: Optional[RateLimitStatus] = None
        self._lock = threading.Lock()

    def wait_if_needed(self) -> float:
        """
        Block until a request may be sent, then record it.

        Returns:
            Seconds slept
        """
        if not self.limit:
            return 0.0

        with self._lock:
            now = self.clock()
            self._expire(now)

            waited = 0.0
            if len(self.history) >= self.limit:
                waited = self.history[0] + self.WINDOW - now
                if waited > 0:
                    logger.warning(
                        "API limit of %d requests per minute reached, waiting %.1f seconds",
                        self.limit,
                        waited,
                    )
                    self.sleep(waited)
                else:
                    waited = 0.0
                now = self.clock()
                self._expire(now)

            self.history.append(now)
            return waited

    def _expire(self, now: float) -> None:
        while self.history and self.history[0] <= now - self.WINDOW:
            self.history.popleft()

    def check_rate_limit(self, response: requests.Response) -> Optional[RateLimitStatus]:
        """
        Extract rate limit info from GitHub API response headers.

        Args:
            response: requests.Response from GitHub API

        Returns:
            RateLimitStatus, or None when the headers are absent
        """
        headers = response.headers
        if "X-RateLimit-Remaining" not in headers:
            return None

        try:
            status = RateLimitStatus(
                remaining=int(headers.get("X-RateLimit-Remaining", 0)),
                limit=int(headers.get("X-RateLimit-Limit", 5000)),
                reset_at=int(headers.get("X-RateLimit-Reset", 0)),
            )
        except ValueError:
            logger.warning(
                "Ignoring malformed rate limit headers: remaining=%r limit=%r reset=%r",
                headers.get("X-RateLimit-Remaining"),
                headers.get("X-RateLimit-Limit"),
                headers.get("X-RateLimit-Reset"),
            )
            return None

        self.cached_status = status
        return status

    def get_remaining_requests(self) -> Optional[int]:
        """Get remaining requests from cached status."""
        if self.cached_status:
            return self.cached_status.remaining
        return None

    def reset(self) -> None:
        with self._lock:
            self.history.clear()
            self.cached_status = None
