"""
Observer registry for pool events.

Subscribers are plain callables run synchronously, in subscription order,
inside the pool operation that triggered the event:

    team_completed(TeamView)
    match_scheduled(MatchView)
    stage_scheduled(list[MatchView])
    pool_ended(Pool)

Subscribers must not call back into the pool's mutating operations.
"""
import logging

logger = logging.getLogger(__name__)

TEAM_COMPLETED = 'team_completed'
MATCH_SCHEDULED = 'match_scheduled'
STAGE_SCHEDULED = 'stage_scheduled'
POOL_ENDED = 'pool_ended'

EVENTS = (TEAM_COMPLETED, MATCH_SCHEDULED, STAGE_SCHEDULED, POOL_ENDED)


class PoolEvents:
    def __init__(self):
        self._subscribers = {event: [] for event in EVENTS}

    def subscribe(self, event, callback):
        self._check_event(event)
        if not callable(callback):
            raise TypeError(f"Subscriber for '{event}' must be callable, got {callback!r}")
        self._subscribers[event].append(callback)
        return callback

    def unsubscribe(self, event, callback):
        self._check_event(event)
        try:
            self._subscribers[event].remove(callback)
        except ValueError:
            raise ValueError(f"{callback!r} is not subscribed to '{event}'") from None

    def subscribers(self, event):
        self._check_event(event)
        return list(self._subscribers[event])

    def emit(self, event, payload):
        self._check_event(event)
        subscribers = list(self._subscribers[event])
        logger.debug(f"Emitting {event} to {len(subscribers)} subscriber(s)")
        for callback in subscribers:
            callback(payload)

    # Decorator-friendly helpers
    def on_team_completed(self, callback):
        return self.subscribe(TEAM_COMPLETED, callback)

    def on_match_scheduled(self, callback):
        return self.subscribe(MATCH_SCHEDULED, callback)

    def on_stage_scheduled(self, callback):
        return self.subscribe(STAGE_SCHEDULED, callback)

    def on_pool_ended(self, callback):
        return self.subscribe(POOL_ENDED, callback)

    def _check_event(self, event):
        if event not in self._subscribers:
            raise ValueError(f"Unknown pool event: {event!r}. Valid events: {', '.join(EVENTS)}")
