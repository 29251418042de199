"""
Polynomial Container Walkthrough

This script walks through the polynomial containers: construction,
insertion, merge-based addition and subtraction, evaluation semantics and
the fixed-capacity variant.

Run with:
    python -m polykit.polynomial.demo [--precision N] [--width N]
                                      [--mode power|repeated-squaring]
                                      [--verbose]
"""

import argparse
import logging
import traceback
from typing import Callable, List, Optional, Tuple

from polykit.common.config import DisplayConfig
from polykit.common.evaluation import EvaluationMode
from polykit.common.ordering import TermOrdering
from polykit.common.term import InvalidOperandError, Term
from polykit.polynomial.core import Polynomial
from polykit.polynomial.fixed import FixedPolynomial


def _header(title: str) -> None:
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_construction(config: DisplayConfig, mode: EvaluationMode) -> None:
    """Construction sorts but does not merge."""
    _header("DEMO 1: CONSTRUCTION")

    p = Polynomial([Term(4, 3), Term(1, 0), Term(2, 3), Term(0, 1)])
    print("\nPolynomial([4x^3, 1x^0, 2x^3, 0x^1]):")
    p.print(config=config)
    print(f"  Size: {p.size()}  Canonical: {p.is_canonical()}")

    c = p.canonicalize()
    print("\nCanonical form (like terms summed, zeros dropped):")
    c.print(config=config)
    print(f"  Size: {c.size()}  Degree: {c.degree}")

    c.sort(TermOrdering.DESCENDING)
    print("\nSorted with TermOrdering.DESCENDING:")
    c.print(config=config)


def demo_insertion(config: DisplayConfig, mode: EvaluationMode) -> None:
    """Insertion keeps the polynomial sorted and canonical."""
    _header("DEMO 2: INSERTION")

    p = Polynomial()
    steps = [Term(1, 1), Term(7, 4), Term(2, 0), Term(-1, 1), Term(3, 4)]
    for term in steps:
        p.insert(term)
        print(f"\n  insert {str(term):<8} ->", end="")
        print(" " + p.format(config=config) if not p.is_empty() else " (empty)")


def demo_arithmetic(config: DisplayConfig, mode: EvaluationMode) -> None:
    """Merge-based addition and subtraction."""
    _header("DEMO 3: ADDITION AND SUBTRACTION")

    p = Polynomial([Term(2, 0), Term(3, 1)])
    q = Polynomial([Term(-3, 1), Term(5, 2)])

    print("\nP =", end="")
    p.print(config=config)
    print("Q =", end="")
    q.print(config=config)
    print("P + Q =", end="")
    (p + q).print(config=config)
    print("P - Q =", end="")
    (p - q).print(config=config)
    print(f"P - P is empty: {(p - p).is_empty()}")

    print("\nTerms only combine with like terms:")
    try:
        Term(1, 2) + Term(1, 3)
    except InvalidOperandError as e:
        print(f"  Term(1, 2) + Term(1, 3) -> InvalidOperandError: {e}")


def demo_evaluation(config: DisplayConfig, mode: EvaluationMode) -> None:
    """Compare the two evaluation semantics."""
    _header("DEMO 4: EVALUATION")

    p = Polynomial([Term(3, 2), Term(1, 1), Term(-2, 0)])
    print("\nP =", end="")
    p.print(config=config)

    print(f"\n{'x':>6} {'power':>14} {'repeated-squaring':>20}")
    print("-" * 44)
    for x in [0.0, 0.5, 1.0, 2.0, 3.0]:
        exact = p.evaluate_at(x, EvaluationMode.POWER)
        squared = p.evaluate_at(x, EvaluationMode.REPEATED_SQUARING)
        print(f"{x:>6.2f} {exact:>14.4f} {squared:>20.4f}")

    xs = [-1.0, 0.0, 1.0, 2.0]
    print(f"\nVectorised ({mode.value}) at {xs}:")
    print(f"  {p.evaluate_many(xs, mode)}")


def demo_fixed(config: DisplayConfig, mode: EvaluationMode) -> None:
    """Fixed-capacity polynomials and exact result sizing."""
    _header("DEMO 5: FIXED-CAPACITY POLYNOMIALS")

    a = FixedPolynomial([Term(3, 1), Term(2, 0)])
    b = FixedPolynomial([Term(5, 2), Term(-3, 1)])
    total = a + b

    print(f"\nA (capacity {a.capacity}) =", end="")
    a.print(config=config)
    print(f"B (capacity {b.capacity}) =", end="")
    b.print(config=config)
    print(f"A + B (capacity {total.capacity}) =", end="")
    total.print(config=config)
    print(f"\nA + B at x = 2 ({mode.value}): {total.evaluate_at(2.0, mode):.4f}")

    a[0] = Term(10, 0)
    print("\nAfter A[0] = 10x^0:", end="")
    a.print(config=config)


DEMOS: List[Tuple[str, Callable[[DisplayConfig, EvaluationMode], None]]] = [
    ("Construction", demo_construction),
    ("Insertion", demo_insertion),
    ("Arithmetic", demo_arithmetic),
    ("Evaluation", demo_evaluation),
    ("Fixed-capacity", demo_fixed),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polykit-walkthrough",
        description="Walk through the polykit polynomial containers.",
    )
    parser.add_argument("--precision", type=int, default=2,
                        help="significant digits per coefficient (default: 2)")
    parser.add_argument("--width", type=int, default=6,
                        help="field width per coefficient (default: 6)")
    parser.add_argument("--mode", default=EvaluationMode.POWER.value,
                        choices=[m.value for m in EvaluationMode],
                        help="evaluation semantics (default: power)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log container operations at DEBUG level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run all demos."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    config = DisplayConfig(name="cli", precision=args.precision, width=args.width)
    mode = EvaluationMode.from_name(args.mode)

    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 20 + "POLYKIT CONTAINER WALKTHROUGH" + " " * 19 + "║")
    print("╚" + "═" * 68 + "╝")
    print(f"\n{config.summary()}")
    print(f"Evaluation mode: {mode.value}")

    failures = 0
    for name, demo_func in DEMOS:
        try:
            demo_func(config, mode)
        except Exception as e:
            failures += 1
            print(f"\nError in {name}: {e}")
            traceback.print_exc()

    print("\n" + "═" * 70)
    print("WALKTHROUGH COMPLETE" if not failures else f"{failures} DEMO(S) FAILED")
    print("═" * 70)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
