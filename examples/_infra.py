from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

from kungfu import Error, LazyCoroResult, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    team_id: int


@dataclass(frozen=True, slots=True)
class Team:
    id: int
    name: str


def _users() -> dict[int, User]:
    return {1: User(1, "ann", team_id=10), 2: User(2, "bob", team_id=99)}


def _teams() -> dict[int, Team]:
    return {10: Team(10, "core")}


@dataclass(slots=True)
class FakeDirectory:
    users: dict[int, User] = field(default_factory=_users)
    teams: dict[int, Team] = field(default_factory=_teams)
    delay_seconds: float = 0.0

    def find_user(self, user_id: int) -> Result[User, Failure]:
        user = self.users.get(user_id)
        if user is None:
            return Error(Failure(f"user {user_id}: not found"))
        return Ok(user)

    def find_team(self, team_id: int) -> Result[Team, Failure]:
        team = self.teams.get(team_id)
        if team is None:
            return Error(Failure(f"team {team_id}: not found"))
        return Ok(team)

    def fetch_user(self, user_id: int) -> LazyCoroResult[User, Failure]:
        async def run() -> Result[User, Failure]:
            await asyncio.sleep(self.delay_seconds)
            return self.find_user(user_id)

        return LazyCoroResult(run)

    def fetch_team(self, team_id: int) -> LazyCoroResult[Team, Failure]:
        async def run() -> Result[Team, Failure]:
            await asyncio.sleep(self.delay_seconds)
            return self.find_team(team_id)

        return LazyCoroResult(run)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
