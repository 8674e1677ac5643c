# examples/custom_patterns.py
"""
Extending the examples: a new topping, a new support handler and a new routine
"""

import logging

from patternkit import (
    BasicPizza,
    DailyRoutine,
    GeneralSupport,
    PepperoniDecorator,
    PizzaDecorator,
    SupportChain,
    SupportHandler,
    TechnicalSupport,
)


logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


class MushroomDecorator(PizzaDecorator):
    label = "mushrooms"
    surcharge = 1.5


class SalesSupport(SupportHandler):
    def can_handle(self, issue):
        return issue.startswith("upgrade")

    def handle(self, issue):
        return f"Sales: let's talk about your {issue}"


class WeekendRoutine(DailyRoutine):
    def eat(self):
        return "Long brunch"

    def work(self):
        return "No work, go hiking"


def main():
    pizza = MushroomDecorator(PepperoniDecorator(BasicPizza()))
    print(f"{pizza.get_description()} - ${pizza.get_price()}")

    chain = SupportChain([TechnicalSupport(), SalesSupport(), GeneralSupport()])
    for issue in ("technical", "upgrade plan", "lost luggage"):
        print(chain.handle_request(issue))

    for step in WeekendRoutine().perform_daily_routine():
        print(step)


if __name__ == "__main__":
    main()
