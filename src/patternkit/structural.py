# src/patternkit/structural.py
"""
Structural patterns: adapter, composite, decorator, facade, flyweight and proxy.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Tuple


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Adapter - phone charger
# ---------------------------------------------------------------------------

class EuropeanSocket(ABC):
    """Socket interface the caller knows how to use."""

    @abstractmethod
    def plug_in(self) -> List[str]:
        ...


class AmericanCharger:
    """Charger with an incompatible plug."""

    def charge_with_american_plug(self) -> str:
        return "Charging with American plug"


class SocketAdapter(EuropeanSocket):
    """Lets an AmericanCharger be used through the EuropeanSocket interface."""

    def __init__(self, charger: AmericanCharger):
        self.charger = charger

    def plug_in(self) -> List[str]:
        return ["Using adapter...", self.charger.charge_with_american_plug()]


# ---------------------------------------------------------------------------
# Composite - university structure
# ---------------------------------------------------------------------------

class UniversityComponent(ABC):
    @abstractmethod
    def show_details(self) -> List[str]:
        ...


class Department(UniversityComponent):
    """Leaf of the university tree."""

    def __init__(self, name: str):
        self.name = name

    def show_details(self) -> List[str]:
        return [f"Department: {self.name}"]


class Faculty(UniversityComponent):
    """Composite node holding departments or nested faculties."""

    def __init__(self, name: str):
        self.name = name
        self.components: List[UniversityComponent] = []

    def add(self, component: UniversityComponent) -> None:
        if not isinstance(component, UniversityComponent):
            raise TypeError(f"Expected a UniversityComponent, got {type(component).__name__}")
        self.components.append(component)

    def show_details(self) -> List[str]:
        lines = [f"Faculty: {self.name}"]
        for component in self.components:
            lines.extend(component.show_details())
        return lines


# ---------------------------------------------------------------------------
# Decorator - pizza toppings
# ---------------------------------------------------------------------------

class Pizza(ABC):
    @abstractmethod
    def get_description(self) -> str:
        ...

    @abstractmethod
    def get_price(self) -> float:
        ...


class BasicPizza(Pizza):
    def __init__(self, price: float = 10.0):
        self.price = price

    def get_description(self) -> str:
        return "Basic pizza"

    def get_price(self) -> float:
        return self.price


class PizzaDecorator(Pizza):
    """
    Topping wrapped around another pizza.

    Subclasses only declare their label and surcharge; description and price
    are always recomputed from the wrapped pizza.
    """

    label = ""
    surcharge = 0.0

    def __init__(self, pizza: Pizza):
        self.pizza = pizza

    def get_description(self) -> str:
        return f"{self.pizza.get_description()} + {self.label}"

    def get_price(self) -> float:
        return self.pizza.get_price() + self.surcharge


class CheeseDecorator(PizzaDecorator):
    label = "cheese"
    surcharge = 2.0


class PepperoniDecorator(PizzaDecorator):
    label = "pepperoni"
    surcharge = 3.0


# ---------------------------------------------------------------------------
# Facade - home theater
# ---------------------------------------------------------------------------

class TV:
    def turn_on(self) -> str:
        return "TV is on"

    def turn_off(self) -> str:
        return "TV is off"


class SoundSystem:
    def turn_on(self) -> str:
        return "Sound system is on"

    def set_volume(self, level: int) -> str:
        return f"Volume set to {level}"


class DVDPlayer:
    def play(self) -> str:
        return "DVD is playing"


class HomeTheaterFacade:
    """One-call control over the TV, sound system and DVD player."""

    def __init__(self, volume: int = 5):
        self.volume = volume
        self.tv = TV()
        self.sound = SoundSystem()
        self.dvd = DVDPlayer()

    def watch_movie(self) -> List[str]:
        return [
            "Getting ready to watch movie...",
            self.tv.turn_on(),
            self.sound.turn_on(),
            self.sound.set_volume(self.volume),
            self.dvd.play(),
        ]

    def end_movie(self) -> List[str]:
        return [
            "Shutting movie theater down...",
            self.tv.turn_off(),
        ]


# ---------------------------------------------------------------------------
# Flyweight - characters
# ---------------------------------------------------------------------------

class Character(ABC):
    @abstractmethod
    def display(self, size: int) -> str:
        ...


class ConcreteCharacter(Character):
    """Shared glyph; the size is extrinsic state passed in on display."""

    def __init__(self, letter: str, font: str):
        self.letter = letter
        self.font = font

    def display(self, size: int) -> str:
        return f"Character '{self.letter}' in {self.font} font, size {size}"


class CharacterFactory:
    """Hands out one shared ConcreteCharacter per (letter, font) pair."""

    def __init__(self):
        self._characters: Dict[Tuple[str, str], Character] = {}
        self._lock = threading.Lock()

    def get_character(self, letter: str, font: str) -> Character:
        key = (letter, font)
        with self._lock:
            character = self._characters.get(key)
            if character is None:
                logger.debug(f"Flyweight miss for {key}, creating character")
                character = ConcreteCharacter(letter, font)
                self._characters[key] = character
            else:
                logger.debug(f"Flyweight hit for {key}")
            return character

    @property
    def created_characters(self) -> int:
        return len(self._characters)


# ---------------------------------------------------------------------------
# Proxy - internet access
# ---------------------------------------------------------------------------

class Internet(ABC):
    @abstractmethod
    def connect_to(self, website: str) -> str:
        ...


class RealInternet(Internet):
    def connect_to(self, website: str) -> str:
        return f"Connecting to {website}"


class ProxyInternet(Internet):
    """Forwards connections to the real internet unless the site is blocked."""

    def __init__(self, blocked_sites: Iterable[str] = ("facebook.com", "youtube.com")):
        self.real_internet = RealInternet()
        self.blocked_sites = frozenset(blocked_sites)

    def is_blocked(self, website: str) -> bool:
        return website in self.blocked_sites

    def connect_to(self, website: str) -> str:
        if self.is_blocked(website):
            logger.info(f"Proxy refused connection to {website}")
            return f"Access denied to {website}"
        return self.real_internet.connect_to(website)
