# src/patternkit/behavioral.py
"""
Behavioral patterns: chain of responsibility, strategy and template method.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .enums import SupportTopic


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Chain of responsibility - support desk
# ---------------------------------------------------------------------------

class SupportHandler(ABC):
    """One link of a support chain."""

    @abstractmethod
    def can_handle(self, issue: str) -> bool:
        ...

    @abstractmethod
    def handle(self, issue: str) -> str:
        ...


class TechnicalSupport(SupportHandler):
    def can_handle(self, issue: str) -> bool:
        return issue == SupportTopic.TECHNICAL.value

    def handle(self, issue: str) -> str:
        return "Technical support: I'll fix your technical issue"


class BillingSupport(SupportHandler):
    def can_handle(self, issue: str) -> bool:
        return issue == SupportTopic.BILLING.value

    def handle(self, issue: str) -> str:
        return "Billing support: I'll help with your bill"


class GeneralSupport(SupportHandler):
    """Catch-all handler; accepts every issue."""

    def can_handle(self, issue: str) -> bool:
        return True

    def handle(self, issue: str) -> str:
        return f"General support: I'll help you with {issue}"


class SupportChain:
    """Ordered sequence of handlers; the first one that accepts an issue resolves it."""

    def __init__(self, handlers: Iterable[SupportHandler]):
        self.handlers: List[SupportHandler] = list(handlers)

    def handle_request(self, issue: str) -> Optional[str]:
        for handler in self.handlers:
            if handler.can_handle(issue):
                logger.debug(f"{type(handler).__name__} resolved {issue!r}")
                return handler.handle(issue)
        logger.info(f"No handler resolved {issue!r}")
        return None


def default_support_chain() -> SupportChain:
    """Technical, then billing, then general support."""
    return SupportChain([TechnicalSupport(), BillingSupport(), GeneralSupport()])


# ---------------------------------------------------------------------------
# Strategy - transportation
# ---------------------------------------------------------------------------

class TransportStrategy(ABC):
    @abstractmethod
    def travel(self, destination: str) -> str:
        ...


class CarStrategy(TransportStrategy):
    def travel(self, destination: str) -> str:
        return f"Driving to {destination} by car"


class TrainStrategy(TransportStrategy):
    def travel(self, destination: str) -> str:
        return f"Taking train to {destination}"


class BusStrategy(TransportStrategy):
    def travel(self, destination: str) -> str:
        return f"Taking bus to {destination}"


class Traveler:
    """Travels using whichever strategy is currently set."""

    def __init__(self, strategy: Optional[TransportStrategy] = None):
        self.strategy = strategy

    def set_transport_strategy(self, strategy: TransportStrategy) -> None:
        self.strategy = strategy

    def go_to(self, destination: str) -> str:
        if self.strategy is None:
            raise RuntimeError("No transport strategy set")
        return self.strategy.travel(destination)


# ---------------------------------------------------------------------------
# Template method - daily routine
# ---------------------------------------------------------------------------

class DailyRoutine(ABC):
    """Fixed four-step day; subclasses fill in eat() and work()."""

    def perform_daily_routine(self) -> List[str]:
        # Template method
        return [
            self._wake_up(),
            self.eat(),
            self.work(),
            self._sleep(),
        ]

    def _wake_up(self) -> str:
        return "Wake up at 7 AM"

    @abstractmethod
    def eat(self) -> str:
        ...

    @abstractmethod
    def work(self) -> str:
        ...

    def _sleep(self) -> str:
        return "Go to sleep at 10 PM"


class StudentRoutine(DailyRoutine):
    def eat(self) -> str:
        return "Eat breakfast quickly"

    def work(self) -> str:
        return "Attend classes and study"


class WorkerRoutine(DailyRoutine):
    def eat(self) -> str:
        return "Have a proper breakfast"

    def work(self) -> str:
        return "Go to office and work"
