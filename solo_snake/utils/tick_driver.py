import logging
from typing import Callable, Optional

import pygame

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickDriver:
    """
    Periodic source of game ticks. At most one schedule is active at a time:
    scheduling again replaces the previous one.
    """

    def schedule(self, interval_ms: int, callback: Callable[[], None]):
        raise NotImplementedError(f"Child driver MUST implement {self.schedule.__name__}")

    def cancel(self):
        raise NotImplementedError(f"Child driver MUST implement {self.cancel.__name__}")


class ManualTickDriver(TickDriver):
    """Driver that only ticks when ``fire`` is called."""

    def __init__(self):
        self.interval_ms: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None
        self.schedule_count = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def schedule(self, interval_ms: int, callback: Callable[[], None]):
        self.cancel()
        self.interval_ms = interval_ms
        self._callback = callback
        self.schedule_count += 1

    def cancel(self):
        self.interval_ms = None
        self._callback = None

    def fire(self, times: int = 1):
        for _ in range(times):
            if self._callback is None:
                return
            self._callback()


class PygameTickDriver(TickDriver):
    """
    Driver backed by ``pygame.time.set_timer``. The host loop hands every
    event to ``dispatch``, which calls the scheduled callback on tick events.

    Each schedule stamps its events with a new ``generation``. Ticks from an
    older schedule may already sit in a batch the host fetched from the
    queue, those are consumed without calling the callback.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self._event_type = event_type
        self._callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None
        self.generation = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def schedule(self, interval_ms: int, callback: Callable[[], None]):
        self.cancel()
        self._callback = callback
        self.interval_ms = interval_ms
        pygame.time.set_timer(self.tick_event(), interval_ms)
        logger.debug(f"Tick timer set to {interval_ms} ms (generation {self.generation})")

    def cancel(self):
        pygame.time.set_timer(self._event_type, 0)
        # Drop ticks already queued by the old timer
        pygame.event.clear(self._event_type)
        self._callback = None
        self.interval_ms = None
        self.generation += 1

    def tick_event(self) -> pygame.event.Event:
        return pygame.event.Event(self._event_type, generation=self.generation)

    def dispatch(self, event: pygame.event.Event) -> bool:
        if event.type != self._event_type:
            return False
        if getattr(event, "generation", None) != self.generation:
            logger.debug("Dropping tick from a previous schedule")
            return True
        if self._callback is not None:
            self._callback()
        return True
