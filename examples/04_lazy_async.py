from __future__ import annotations

from _infra import FakeDirectory, banner, run

from kungfu import Error, Ok
from letanything import let_lazy


async def main() -> None:
    banner("04_lazy_async: let_lazy over LazyCoroResult")

    directory = FakeDirectory(delay_seconds=0.01)

    @let_lazy.lifted
    def describe(user_id: int):
        user = yield directory.fetch_user(user_id)
        team = yield directory.fetch_team(user.team_id)
        return Ok(f"{user.name} works in {team.name}")

    # Nothing is fetched until awaited
    pending = describe(1)
    match await pending:
        case Ok(message):
            print(message)
        case Error(err):
            print(f"error: {err}")


if __name__ == "__main__":
    run(main)
