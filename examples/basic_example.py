# examples/basic_example.py
"""
Basic example of using patternkit: run the demonstrations, then use a few patterns directly
"""

from patternkit import (
    CharacterFactory,
    CheeseDecorator,
    BasicPizza,
    DemoConfig,
    ProxyInternet,
    default_support_chain,
    find_demonstration,
    run_demo,
)


def run_everything():
    """Run all fourteen demonstrations with the default configuration."""
    run_demo()


def run_selected():
    """Run a couple of demonstrations with a custom configuration."""
    print("\n=== Selected Demonstrations ===")
    config = DemoConfig(blocked_sites=["reddit.com"], theater_volume=11)
    run_demo(config, selected=[find_demonstration("facade"), find_demonstration("proxy")])


def use_patterns_directly():
    """Use the pattern classes without the demonstration driver."""
    print("\n=== Direct Usage ===")

    pizza = CheeseDecorator(CheeseDecorator(BasicPizza()))
    print(f"{pizza.get_description()} - ${pizza.get_price()}")

    factory = CharacterFactory()
    for letter in "HELLO":
        factory.get_character(letter, "Courier")
    print(f"Distinct characters for 'HELLO': {factory.created_characters}")

    proxy = ProxyInternet()
    for site in ("python.org", "youtube.com"):
        print(proxy.connect_to(site))

    chain = default_support_chain()
    for issue in ("billing", "password reset"):
        print(chain.handle_request(issue))


if __name__ == "__main__":
    run_everything()
    run_selected()
    use_patterns_directly()
