from __future__ import annotations

from _infra import FakeDirectory, banner

from kungfu import Error, Ok
from letanything import let_result


def main() -> None:
    banner("01_quickstart: let_result over kungfu.Result")

    directory = FakeDirectory()

    @let_result.lifted
    def describe(user_id: int):
        # Locality: each yield unwraps one Result, the first Error ends it.
        user = yield directory.find_user(user_id)
        team = yield directory.find_team(user.team_id)
        return Ok(f"{user.name} works in {team.name}")

    for user_id in (1, 2, 3):
        match describe(user_id):
            case Ok(message):
                print(message)
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    main()
