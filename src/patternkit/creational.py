# src/patternkit/creational.py
"""
Creational patterns: singleton, builder, factory, factory method and prototype.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Singleton - student registry
# ---------------------------------------------------------------------------

class StudentRegistry:
    """Registry of students for a single school."""

    def __init__(self, school_name: str = "University of Bucharest"):
        self.school_name = school_name

    def info(self) -> str:
        return f"Registry for: {self.school_name}"


class RegistryProvider:
    """
    Owns the one StudentRegistry handed out to its callers.

    The provider is created and passed around explicitly, so the single
    instance is scoped to whoever holds the provider instead of the module.
    """

    def __init__(self, school_name: str = "University of Bucharest"):
        self.school_name = school_name
        self._instance: Optional[StudentRegistry] = None
        self._lock = threading.Lock()

    def get_instance(self) -> StudentRegistry:
        """Return the registry, creating it on first access."""
        with self._lock:
            if self._instance is None:
                logger.info(f"Creating student registry for {self.school_name}")
                self._instance = StudentRegistry(self.school_name)
            return self._instance


# ---------------------------------------------------------------------------
# Builder - student
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Student:
    """A student as produced by StudentBuilder."""
    name: Optional[str]
    age: int
    faculty: Optional[str]
    year: int

    def __str__(self):
        return f"Student: {self.name}, {self.age} years, {self.faculty}, year {self.year}"


class StudentBuilder:
    """Fluent builder for Student."""

    def __init__(self):
        self.name = None
        self.age = 0
        self.faculty = None
        self.year = 0

    def set_name(self, name: str) -> "StudentBuilder":
        self.name = name
        return self

    def set_age(self, age: int) -> "StudentBuilder":
        self.age = age
        return self

    def set_faculty(self, faculty: str) -> "StudentBuilder":
        self.faculty = faculty
        return self

    def set_year(self, year: int) -> "StudentBuilder":
        self.year = year
        return self

    def build(self) -> Student:
        return Student(name=self.name, age=self.age, faculty=self.faculty, year=self.year)


# ---------------------------------------------------------------------------
# Factory - animals
# ---------------------------------------------------------------------------

class Animal(ABC):
    """Something that makes a sound."""

    @abstractmethod
    def make_sound(self) -> str:
        ...


class Dog(Animal):
    def make_sound(self) -> str:
        return "Woof woof!"


class Cat(Animal):
    def make_sound(self) -> str:
        return "Meow!"


class AnimalFactory:
    """Creates animals from a type tag."""

    _kinds = {
        "dog": Dog,
        "cat": Cat,
    }

    @classmethod
    def create_animal(cls, kind: str) -> Optional[Animal]:
        """Create the animal for ``kind``, or None if the tag is unknown."""
        animal_cls = cls._kinds.get(kind)
        if animal_cls is None:
            logger.debug(f"No animal registered for {kind!r}")
            return None
        return animal_cls()


# ---------------------------------------------------------------------------
# Factory method - games
# ---------------------------------------------------------------------------

class Game(ABC):
    @abstractmethod
    def play(self) -> str:
        ...


class Football(Game):
    def play(self) -> str:
        return "Playing football with 22 players"


class Basketball(Game):
    def play(self) -> str:
        return "Playing basketball with 10 players"


class GameCreator(ABC):
    """Starts games whose concrete type is chosen by subclasses."""

    @abstractmethod
    def create_game(self) -> Game:
        ...

    def start_game(self) -> str:
        game = self.create_game()
        return game.play()


class FootballCreator(GameCreator):
    def create_game(self) -> Game:
        return Football()


class BasketballCreator(GameCreator):
    def create_game(self) -> Game:
        return Basketball()


# ---------------------------------------------------------------------------
# Prototype - book
# ---------------------------------------------------------------------------

class Book:
    """A book that can produce independent copies of itself."""

    def __init__(self, title: str, author: str, pages: int):
        self.title = title
        self.author = author
        self.pages = pages

    def clone(self) -> Optional["Book"]:
        """Return a deep copy of this book, or None if copying fails."""
        try:
            return copy.deepcopy(self)
        except (copy.Error, TypeError) as e:
            logger.warning(f"Could not clone {self!r}: {e}")
            return None

    def set_title(self, title: str) -> None:
        self.title = title

    def __repr__(self):
        return f"Book(title={self.title!r}, author={self.author!r}, pages={self.pages})"

    def __str__(self):
        return f"Book: {self.title} by {self.author} ({self.pages} pages)"
