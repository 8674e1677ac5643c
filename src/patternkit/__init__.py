# src/patternkit/__init__.py
"""
patternkit: fourteen classic design patterns as small, runnable examples
Creational, structural and behavioral patterns, each demonstrated in isolation
"""

from .enums import PatternCategory, SupportTopic
from .config import DemoConfig
from .creational import (
    StudentRegistry,
    RegistryProvider,
    Student,
    StudentBuilder,
    Animal,
    Dog,
    Cat,
    AnimalFactory,
    Game,
    Football,
    Basketball,
    GameCreator,
    FootballCreator,
    BasketballCreator,
    Book,
)
from .structural import (
    EuropeanSocket,
    AmericanCharger,
    SocketAdapter,
    UniversityComponent,
    Department,
    Faculty,
    Pizza,
    BasicPizza,
    PizzaDecorator,
    CheeseDecorator,
    PepperoniDecorator,
    TV,
    SoundSystem,
    DVDPlayer,
    HomeTheaterFacade,
    Character,
    ConcreteCharacter,
    CharacterFactory,
    Internet,
    RealInternet,
    ProxyInternet,
)
from .behavioral import (
    SupportHandler,
    TechnicalSupport,
    BillingSupport,
    GeneralSupport,
    SupportChain,
    default_support_chain,
    TransportStrategy,
    CarStrategy,
    TrainStrategy,
    BusStrategy,
    Traveler,
    DailyRoutine,
    StudentRoutine,
    WorkerRoutine,
)
from .demo import DEMONSTRATIONS, Demonstration, find_demonstration, run_demo

__version__ = "0.1.0"
__all__ = [
    "PatternCategory",
    "SupportTopic",
    "DemoConfig",
    "StudentRegistry",
    "RegistryProvider",
    "Student",
    "StudentBuilder",
    "Animal",
    "Dog",
    "Cat",
    "AnimalFactory",
    "Game",
    "Football",
    "Basketball",
    "GameCreator",
    "FootballCreator",
    "BasketballCreator",
    "Book",
    "EuropeanSocket",
    "AmericanCharger",
    "SocketAdapter",
    "UniversityComponent",
    "Department",
    "Faculty",
    "Pizza",
    "BasicPizza",
    "PizzaDecorator",
    "CheeseDecorator",
    "PepperoniDecorator",
    "TV",
    "SoundSystem",
    "DVDPlayer",
    "HomeTheaterFacade",
    "Character",
    "ConcreteCharacter",
    "CharacterFactory",
    "Internet",
    "RealInternet",
    "ProxyInternet",
    "SupportHandler",
    "TechnicalSupport",
    "BillingSupport",
    "GeneralSupport",
    "SupportChain",
    "default_support_chain",
    "TransportStrategy",
    "CarStrategy",
    "TrainStrategy",
    "BusStrategy",
    "Traveler",
    "DailyRoutine",
    "StudentRoutine",
    "WorkerRoutine",
    "DEMONSTRATIONS",
    "Demonstration",
    "find_demonstration",
    "run_demo",
]
