"""
polykit - Main Entry Point

Interactive calculator over the polynomial containers:
    1. Build polynomials P and Q from "coefficient exponent" pairs
    2. Combine them (P + Q, P - Q)
    3. Evaluate at a point under either evaluation semantics

Run with:
    python -m polykit.main
"""

import logging
from typing import Callable, List, Optional

from polykit.common.config import DisplayConfig
from polykit.common.evaluation import EvaluationMode
from polykit.common.term import Term
from polykit.polynomial.core import Polynomial

logger = logging.getLogger(__name__)


def print_banner():
    """Print the calculator banner."""
    print()
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + " " * 23 + "POLYKIT CALCULATOR" + " " * 27 + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")
    print()


def print_menu():
    """Print the main menu."""
    print("  [1] Enter P")
    print("  [2] Enter Q")
    print("  [3] Show P + Q")
    print("  [4] Show P - Q")
    print("  [5] Evaluate P at x")
    print("  [6] Toggle evaluation mode")
    print("  [q] Quit")
    print()


def parse_terms(line: str) -> List[Term]:
    """
    Parse whitespace separated "coefficient exponent" pairs.

    Example:
        >>> parse_terms("2 0  3 1")
        [Term(2.0, 0), Term(3.0, 1)]

    Raises:
        ValueError: On an odd number of fields or non-numeric input
    """
    fields = line.split()
    if len(fields) % 2:
        raise ValueError("expected pairs of 'coefficient exponent'")
    return [Term(float(fields[i]), int(fields[i + 1])) for i in range(0, len(fields), 2)]


class Calculator:
    """State for the interactive session."""

    def __init__(self, config: Optional[DisplayConfig] = None,
                 input_func: Callable[[str], str] = input):
        self.config = config or DisplayConfig()
        self.mode = EvaluationMode.POWER
        self.p = Polynomial()
        self.q = Polynomial()
        self._input = input_func

    def read_polynomial(self, name: str) -> Polynomial:
        line = self._input(f"{name} terms (coefficient exponent ...): ")
        poly = Polynomial.canonical(parse_terms(line))
        print(f"{name} =", end="")
        poly.print(config=self.config)
        return poly

    def show(self, label: str, poly: Polynomial) -> None:
        print(f"{label} =", end="")
        poly.print(config=self.config)

    def evaluate(self) -> float:
        x = float(self._input("x = "))
        value = self.p.evaluate_at(x, self.mode)
        print(f"P({x:g}) = {value:g}  [{self.mode.value}]")
        return value

    def toggle_mode(self) -> None:
        if self.mode is EvaluationMode.POWER:
            self.mode = EvaluationMode.REPEATED_SQUARING
        else:
            self.mode = EvaluationMode.POWER
        print(f"Evaluation mode: {self.mode.value}")

    def handle(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the session should end."""
        if choice == '1':
            self.p = self.read_polynomial("P")
        elif choice == '2':
            self.q = self.read_polynomial("Q")
        elif choice == '3':
            self.show("P + Q", self.p + self.q)
        elif choice == '4':
            self.show("P - Q", self.p - self.q)
        elif choice == '5':
            self.evaluate()
        elif choice == '6':
            self.toggle_mode()
        elif choice == 'q':
            print("\nGoodbye!")
            return False
        else:
            print("\nInvalid choice. Please try again.")
        return True


def main():
    """Main entry point."""
    print_banner()
    calc = Calculator()

    while True:
        print_menu()
        choice = input("Enter your choice: ").strip().lower()
        try:
            if not calc.handle(choice):
                break
        except ValueError as e:
            logger.debug("rejected input for choice %r", choice, exc_info=True)
            print(f"\nInvalid input: {e}")
        print()


if __name__ == "__main__":
    main()
