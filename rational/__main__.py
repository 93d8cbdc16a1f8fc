"""Evaluate a fixed set of rational arithmetic scenarios and report them."""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .rational import div_by, parse


@dataclass
class Scenario:
    description: str
    check: Callable[[], bool]


def build_scenarios() -> List[Scenario]:
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)

    return [
        Scenario("1/2 + 1/3 == 5/6", lambda: div_by(5, 6) == half + third),
        Scenario("1/2 - 1/3 == 1/6", lambda: div_by(1, 6) == half - third),
        Scenario("1/2 * 1/3 == 1/6", lambda: div_by(1, 6) == half * third),
        Scenario("(1/2) / (1/3) == 3/2", lambda: div_by(3, 2) == half / third),
        Scenario("-(1/2) == -1/2", lambda: div_by(-1, 2) == -half),
        Scenario('str(2/1) == "2"', lambda: str(div_by(2, 1)) == "2"),
        Scenario('str(-2/4) == "-1/2"', lambda: str(div_by(-2, 4)) == "-1/2"),
        Scenario(
            'str(parse("117/1098")) == "13/122"',
            lambda: str(parse("117/1098")) == "13/122",
        ),
        Scenario("1/2 < 2/3", lambda: half < two_thirds),
        Scenario("1/2 in 1/3..2/3", lambda: half in third.range_to(two_thirds)),
        Scenario(
            "2000000000/4000000000 == 1/2",
            lambda: div_by(2000000000, 4000000000) == half,
        ),
        Scenario(
            "40-digit ratio == 1/2",
            lambda: div_by(
                912016490186296920119201192141970416029,
                1824032980372593840238402384283940832058,
            )
            == half,
        ),
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m rational",
        description="Evaluate rational arithmetic scenarios and report whether each holds.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only report scenarios that do not hold",
    )
    args = parser.parse_args(argv)

    failures = 0
    for scenario in build_scenarios():
        outcome = scenario.check()
        if not outcome:
            failures += 1
            print(f"FAILED: {scenario.description}", file=sys.stderr)
        elif not args.quiet:
            print(f"{scenario.description}: {outcome}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
