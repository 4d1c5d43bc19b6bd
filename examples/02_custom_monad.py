from __future__ import annotations

from dataclasses import dataclass

from _infra import banner

from letanything import LetConfig, let_anything


@dataclass(frozen=True, slots=True)
class Validated[T]:
    """Home-grown success/failure wrapper: letanything never looks inside."""

    value: T | None
    problem: str | None = None


def _bind_validated(value: Validated, continuation):
    if value.problem is not None:
        return value
    return continuation(value.value)


let_validated = let_anything(LetConfig(let_=_bind_validated))


def parse_age(raw: str) -> Validated[int]:
    if not raw.isdigit():
        return Validated(None, problem=f"age {raw!r} is not a number")
    return Validated(int(raw))


def main() -> None:
    banner("02_custom_monad: bring your own bind")

    for raw_name, raw_age in (("ann", "31"), ("bob", "thirty")):

        def signup():
            name = yield Validated(raw_name.title())
            age = yield parse_age(raw_age)
            return Validated(f"{name} ({age})")

        print(let_validated(signup))


if __name__ == "__main__":
    main()
