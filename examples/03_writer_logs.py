from __future__ import annotations

from _infra import FakeDirectory, banner

from kungfu import Error, Ok
from letanything import WriterResult, let_writer, tell


def main() -> None:
    banner("03_writer_logs: let_writer (value + log)")

    directory = FakeDirectory()

    @let_writer.lifted
    def describe(user_id: int):
        user = yield WriterResult(directory.find_user(user_id)).with_log(f"find_user({user_id})")
        yield tell(f"found {user.name}")
        team = yield WriterResult(directory.find_team(user.team_id)).with_log(f"find_team({user.team_id})")
        return WriterResult(Ok(f"{user.name} @ {team.name}")).with_log("described")

    for user_id in (1, 2):
        wr = describe(user_id)
        match wr.result:
            case Ok(message):
                print(f"ok: {message}")
            case Error(err):
                print(f"error: {err}")
        print(f"log: {list(wr.log)!r}")


if __name__ == "__main__":
    main()
