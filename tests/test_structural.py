# tests/test_structural.py
"""
Unit tests for the structural pattern examples.
"""

import pytest
from patternkit import (
    AmericanCharger,
    BasicPizza,
    CharacterFactory,
    CheeseDecorator,
    Department,
    EuropeanSocket,
    Faculty,
    HomeTheaterFacade,
    PepperoniDecorator,
    ProxyInternet,
    RealInternet,
    SocketAdapter,
)


@pytest.mark.unit
class TestSocketAdapter:
    """Test the charger adapter."""

    def test_plug_in(self):
        adapter = SocketAdapter(AmericanCharger())

        assert isinstance(adapter, EuropeanSocket)
        assert adapter.plug_in() == ["Using adapter...", "Charging with American plug"]


@pytest.mark.unit
class TestUniversityComposite:
    """Test the university composite tree."""

    def test_department(self):
        assert Department("CS Department").show_details() == ["Department: CS Department"]

    def test_faculty_lists_children_in_order(self):
        faculty = Faculty("Computer Science Faculty")
        faculty.add(Department("CS Department"))
        faculty.add(Department("Math Department"))

        assert faculty.show_details() == [
            "Faculty: Computer Science Faculty",
            "Department: CS Department",
            "Department: Math Department",
        ]

    def test_empty_faculty(self):
        assert Faculty("Empty").show_details() == ["Faculty: Empty"]

    def test_nested_faculties(self):
        """Test traversal is depth-first."""
        university = Faculty("Sciences")
        informatics = Faculty("Informatics")
        informatics.add(Department("AI"))
        university.add(informatics)
        university.add(Department("Physics"))

        assert university.show_details() == [
            "Faculty: Sciences",
            "Faculty: Informatics",
            "Department: AI",
            "Department: Physics",
        ]

    def test_add_rejects_non_components(self):
        with pytest.raises(TypeError):
            Faculty("Sciences").add("Physics")


@pytest.mark.unit
class TestPizzaDecorator:
    """Test pizza toppings."""

    def test_basic_pizza(self):
        pizza = BasicPizza()

        assert pizza.get_description() == "Basic pizza"
        assert pizza.get_price() == 10.0

    def test_two_toppings(self):
        pizza = PepperoniDecorator(CheeseDecorator(BasicPizza()))

        assert pizza.get_description() == "Basic pizza + cheese + pepperoni"
        assert pizza.get_price() == 15.0

    def test_wrapping_order(self):
        pizza = CheeseDecorator(PepperoniDecorator(BasicPizza()))

        assert pizza.get_description() == "Basic pizza + pepperoni + cheese"
        assert pizza.get_price() == 15.0

    def test_repeated_topping(self):
        pizza = CheeseDecorator(CheeseDecorator(BasicPizza()))

        assert pizza.get_description() == "Basic pizza + cheese + cheese"
        assert pizza.get_price() == 14.0

    def test_decorator_does_not_modify_inner(self):
        base = BasicPizza()
        CheeseDecorator(base)

        assert base.get_description() == "Basic pizza"
        assert base.get_price() == 10.0

    def test_custom_base_price(self):
        assert CheeseDecorator(BasicPizza(12.0)).get_price() == 14.0


@pytest.mark.unit
class TestHomeTheaterFacade:
    """Test the home theater facade."""

    def test_watch_movie(self):
        assert HomeTheaterFacade().watch_movie() == [
            "Getting ready to watch movie...",
            "TV is on",
            "Sound system is on",
            "Volume set to 5",
            "DVD is playing",
        ]

    def test_custom_volume(self):
        assert "Volume set to 8" in HomeTheaterFacade(volume=8).watch_movie()

    def test_end_movie(self):
        assert HomeTheaterFacade().end_movie() == [
            "Shutting movie theater down...",
            "TV is off",
        ]


@pytest.mark.unit
class TestCharacterFactory:
    """Test the flyweight character cache."""

    def test_same_key_reuses_instance(self):
        factory = CharacterFactory()

        a1 = factory.get_character("A", "Arial")
        assert factory.created_characters == 1

        a2 = factory.get_character("A", "Arial")
        assert a1 is a2
        assert factory.created_characters == 1

    def test_different_keys(self):
        factory = CharacterFactory()

        a_arial = factory.get_character("A", "Arial")
        a_times = factory.get_character("A", "Times")
        b_arial = factory.get_character("B", "Arial")

        assert len({id(a_arial), id(a_times), id(b_arial)}) == 3
        assert factory.created_characters == 3

    def test_display_uses_extrinsic_size(self):
        factory = CharacterFactory()
        character = factory.get_character("A", "Arial")

        assert character.display(12) == "Character 'A' in Arial font, size 12"
        assert character.display(14) == "Character 'A' in Arial font, size 14"

    def test_factories_do_not_share_cache(self):
        first = CharacterFactory()
        first.get_character("A", "Arial")

        assert CharacterFactory().created_characters == 0

    def test_key_is_not_concatenated(self):
        """Letter/font pairs that concatenate alike stay distinct."""
        factory = CharacterFactory()

        first = factory.get_character("A", "rial")
        second = factory.get_character("Ar", "ial")

        assert first is not second
        assert factory.created_characters == 2


@pytest.mark.unit
class TestProxyInternet:
    """Test the internet proxy."""

    def test_allowed_site(self):
        assert ProxyInternet().connect_to("google.com") == "Connecting to google.com"

    @pytest.mark.parametrize("site", ["facebook.com", "youtube.com"])
    def test_blocked_site(self, site):
        assert ProxyInternet().connect_to(site) == f"Access denied to {site}"

    def test_custom_blocklist(self):
        proxy = ProxyInternet(["example.org"])

        assert proxy.is_blocked("example.org")
        assert not proxy.is_blocked("facebook.com")
        assert proxy.connect_to("facebook.com") == "Connecting to facebook.com"

    def test_matches_real_internet_when_allowed(self):
        assert ProxyInternet().connect_to("wikipedia.org") == RealInternet().connect_to("wikipedia.org")
