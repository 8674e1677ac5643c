# src/patternkit/demo.py
"""
Demonstration driver: runs each pattern example once and prints its output.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union

from .behavioral import (
    CarStrategy,
    StudentRoutine,
    TrainStrategy,
    Traveler,
    WorkerRoutine,
    default_support_chain,
)
from .config import DemoConfig
from .creational import (
    AnimalFactory,
    BasketballCreator,
    Book,
    FootballCreator,
    RegistryProvider,
    StudentBuilder,
)
from .enums import PatternCategory
from .structural import (
    AmericanCharger,
    BasicPizza,
    CharacterFactory,
    CheeseDecorator,
    Department,
    Faculty,
    HomeTheaterFacade,
    PepperoniDecorator,
    ProxyInternet,
    SocketAdapter,
)


# Set up logging
logger = logging.getLogger(__name__)

BANNER = "=== Design Patterns Examples ==="


@dataclass(frozen=True)
class Demonstration:
    """A single pattern example and the function that produces its output."""
    number: int
    name: str
    category: PatternCategory
    run: Callable[[DemoConfig], List[str]]

    @property
    def header(self) -> str:
        return f"{self.number}. {self.name}:"


def demo_singleton(config: DemoConfig) -> List[str]:
    provider = RegistryProvider(config.school_name)
    registry1 = provider.get_instance()
    registry2 = provider.get_instance()
    return [
        f"Same registry? {registry1 is registry2}",
        registry1.info(),
    ]


def demo_builder(config: DemoConfig) -> List[str]:
    student = (
        StudentBuilder()
        .set_name("Ion Popescu")
        .set_age(20)
        .set_faculty("Computer Science")
        .set_year(2)
        .build()
    )
    return [str(student)]


def demo_factory(config: DemoConfig) -> List[str]:
    dog = AnimalFactory.create_animal("dog")
    cat = AnimalFactory.create_animal("cat")
    return [dog.make_sound(), cat.make_sound()]


def demo_factory_method(config: DemoConfig) -> List[str]:
    return [FootballCreator().start_game(), BasketballCreator().start_game()]


def demo_prototype(config: DemoConfig) -> List[str]:
    original_book = Book("Java Programming", "John Doe", 300)
    cloned_book = original_book.clone()
    lines = [f"Original: {original_book}"]
    if cloned_book is not None:
        cloned_book.set_title("Advanced Java")
        lines.append(f"Cloned: {cloned_book}")
    return lines


def demo_adapter(config: DemoConfig) -> List[str]:
    adapter = SocketAdapter(AmericanCharger())
    return adapter.plug_in()


def demo_composite(config: DemoConfig) -> List[str]:
    faculty = Faculty("Computer Science Faculty")
    faculty.add(Department("CS Department"))
    faculty.add(Department("Math Department"))
    return faculty.show_details()


def demo_decorator(config: DemoConfig) -> List[str]:
    pizza = BasicPizza(config.base_pizza_price)
    pizza = CheeseDecorator(pizza)
    pizza = PepperoniDecorator(pizza)
    return [f"{pizza.get_description()} - ${pizza.get_price()}"]


def demo_facade(config: DemoConfig) -> List[str]:
    home_theater = HomeTheaterFacade(volume=config.theater_volume)
    return home_theater.watch_movie()


def demo_flyweight(config: DemoConfig) -> List[str]:
    factory = CharacterFactory()
    a1 = factory.get_character("A", "Arial")
    a2 = factory.get_character("A", "Arial")
    return [
        a1.display(12),
        a2.display(14),
        f"Characters created: {factory.created_characters}",
    ]


def demo_proxy(config: DemoConfig) -> List[str]:
    internet = ProxyInternet(config.blocked_sites)
    return [internet.connect_to("google.com"), internet.connect_to("facebook.com")]


def demo_chain_of_responsibility(config: DemoConfig) -> List[str]:
    chain = default_support_chain()
    return [chain.handle_request(issue) for issue in ("technical", "billing", "other")]


def demo_strategy(config: DemoConfig) -> List[str]:
    traveler = Traveler()
    traveler.set_transport_strategy(CarStrategy())
    lines = [traveler.go_to("Cluj")]
    traveler.set_transport_strategy(TrainStrategy())
    lines.append(traveler.go_to("Brasov"))
    return lines


def demo_template_method(config: DemoConfig) -> List[str]:
    lines = ["Student's day:"]
    lines.extend(StudentRoutine().perform_daily_routine())
    lines.extend(["", "Worker's day:"])
    lines.extend(WorkerRoutine().perform_daily_routine())
    return lines


DEMONSTRATIONS = [
    Demonstration(1, "SINGLETON", PatternCategory.CREATIONAL, demo_singleton),
    Demonstration(2, "BUILDER", PatternCategory.CREATIONAL, demo_builder),
    Demonstration(3, "FACTORY", PatternCategory.CREATIONAL, demo_factory),
    Demonstration(4, "FACTORY METHOD", PatternCategory.CREATIONAL, demo_factory_method),
    Demonstration(5, "PROTOTYPE", PatternCategory.CREATIONAL, demo_prototype),
    Demonstration(6, "ADAPTER", PatternCategory.STRUCTURAL, demo_adapter),
    Demonstration(7, "COMPOSITE", PatternCategory.STRUCTURAL, demo_composite),
    Demonstration(8, "DECORATOR", PatternCategory.STRUCTURAL, demo_decorator),
    Demonstration(9, "FACADE", PatternCategory.STRUCTURAL, demo_facade),
    Demonstration(10, "FLYWEIGHT", PatternCategory.STRUCTURAL, demo_flyweight),
    Demonstration(11, "PROXY", PatternCategory.STRUCTURAL, demo_proxy),
    Demonstration(12, "CHAIN OF RESPONSIBILITY", PatternCategory.BEHAVIORAL, demo_chain_of_responsibility),
    Demonstration(13, "STRATEGY", PatternCategory.BEHAVIORAL, demo_strategy),
    Demonstration(14, "TEMPLATE METHOD", PatternCategory.BEHAVIORAL, demo_template_method),
]


def find_demonstration(key: Union[int, str]) -> Optional[Demonstration]:
    """Look up a demonstration by number or by name (case-insensitive)."""
    if isinstance(key, int) or str(key).strip().isdigit():
        number = int(key)
        for demo in DEMONSTRATIONS:
            if demo.number == number:
                return demo
        return None

    name = str(key).strip().upper().replace("_", " ").replace("-", " ")
    for demo in DEMONSTRATIONS:
        if demo.name == name:
            return demo
    return None


def configure_logging(config: DemoConfig) -> None:
    """Set the package log level from the config."""
    package_logger = logging.getLogger("patternkit")
    if config.verbose:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)


def render_demonstration(demo: Demonstration, config: DemoConfig) -> List[str]:
    return [demo.header] + demo.run(config)


def run_demo(config: Optional[DemoConfig] = None,
             selected: Optional[Iterable[Demonstration]] = None,
             out: Callable[[str], None] = print) -> int:
    """
    Print the banner and every selected demonstration.

    Args:
        config: Values fed into the demonstrations; defaults to DemoConfig().
        selected: Demonstrations to run, in order; defaults to all fourteen.
        out: Line sink, ``print`` unless the caller wants to collect output.

    Returns:
        Number of demonstrations run.
    """
    config = config or DemoConfig()
    configure_logging(config)
    demos = list(selected) if selected is not None else DEMONSTRATIONS

    out(BANNER)
    for demo in demos:
        logger.info(f"Running demonstration {demo.number}: {demo.name}")
        out("")
        for line in render_demonstration(demo, config):
            out(line)
    return len(demos)
