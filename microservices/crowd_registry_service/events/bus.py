"""
In-process Event Bus

Append-only event log with NATS-style subject subscriptions. Indexers
subscribe with a pattern such as ``registry.campaign.*`` or ``registry.>``.
"""

import fnmatch
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class InMemoryEventBus:
    """Event bus keeping every published event in memory"""

    def __init__(self):
        self.events: List[Dict[str, Any]] = []
        self._subscriptions: List[Tuple[str, Callable]] = []

    async def publish_event(self, event: Dict[str, Any]) -> bool:
        self.events.append(event)
        subject = event.get("event_type", "")
        for pattern, handler in list(self._subscriptions):
            if not self._matches_pattern(pattern, subject):
                continue
            try:
                await handler(event)
            except Exception as e:
                logger.error(f"Subscriber for {pattern} failed on {subject}: {e}")
        return True

    async def subscribe_to_events(
        self, pattern: str, handler: Callable, durable: Optional[str] = None
    ) -> None:
        """Subscribe an async handler; ``durable`` replays the existing log"""
        self._subscriptions.append((pattern, handler))
        if durable:
            for event in list(self.events):
                if self._matches_pattern(pattern, event.get("event_type", "")):
                    await handler(event)

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        if event_type:
            return [e for e in self.events if e.get("event_type") == event_type]
        return list(self.events)

    async def close(self) -> None:
        self._subscriptions.clear()

    @staticmethod
    def _matches_pattern(pattern: str, subject: str) -> bool:
        """Check if subject matches pattern (NATS-style wildcards)"""
        if pattern.endswith(">"):
            return subject.startswith(pattern[:-1])
        # '*' matches exactly one token
        pattern_tokens = pattern.split(".")
        subject_tokens = subject.split(".")
        if len(pattern_tokens) != len(subject_tokens):
            return False
        return all(fnmatch.fnmatchcase(s, p) for p, s in zip(pattern_tokens, subject_tokens))


__all__ = ["InMemoryEventBus"]
