################################################################################
# File Name: events.py
# Purpose/Description: Minimal observer stream for change notifications
# Author: Control Center Team
# Creation Date: 2026-10-17
# Copyright: (c) 2026 Control Center Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-17    | CC Team       | Initial implementation
# ================================================================================
################################################################################

"""
Observer stream for change notifications.

UI-layer collaborators subscribe a callback and receive every published value.
A failing subscriber is logged and does not stop delivery to the others.

Usage:
    from common.events import EventStream

    settingsChanged = EventStream('settings')
    unsubscribe = settingsChanged.subscribe(lambda s: print(s.stateMap))
    settingsChanged.publish(settings)
    unsubscribe()
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class EventStream(Generic[T]):
    """
    Named list of callbacks invoked synchronously on publish.

    Attributes:
        name: Stream name used in log messages
    """

    def __init__(self, name: str):
        self.name = name
        self._callbacks: list[Callable[[T], Any]] = []

    def subscribe(self, callback: Callable[[T], Any]) -> Callable[[], None]:
        """
        Register a callback.

        Args:
            callback: Called with each published value

        Returns:
            Function that removes the callback again
        """
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        """
        Deliver a value to every subscriber.

        Args:
            value: Value to deliver
        """
        for callback in list(self._callbacks):
            try:
                callback(value)
            except Exception as e:
                logger.error(f"Error in {self.name} subscriber: {e}")

    def subscriberCount(self) -> int:
        """Number of registered callbacks."""
        return len(self._callbacks)
