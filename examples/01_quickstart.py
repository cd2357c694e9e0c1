from __future__ import annotations

from _infra import banner, run

from railway import Failure, Success, err, ok, run_independent_tasks


def parse_temperature(raw: str):
    try:
        value = float(raw)
    except ValueError:
        return err(f"{raw!r} is not a number")
    return ok(value) if 0.0 <= value <= 2.0 else err(f"{value} is out of range")


async def main() -> None:
    banner("01_quickstart: ok/err + and_then + run_independent_tasks")

    # Railway: the first failure short-circuits the rest of the chain.
    print(ok("0.4").and_then(parse_temperature).map(lambda t: t * 10))
    print(ok("abc").and_then(parse_temperature).map(lambda t: t * 10))

    # Independent steps: every failure is reported, not just the first.
    result = run_independent_tasks(
        [
            lambda: parse_temperature("0.4"),
            lambda: parse_temperature("abc"),
            lambda: parse_temperature("9"),
        ]
    )
    match result:
        case Success(values):
            print(f"all parsed: {values}")
        case Failure(errors):
            for e in errors:
                print(f"- {e}")


if __name__ == "__main__":
    run(main)
