"""User (passenger) domain entity."""

from dataclasses import dataclass

USER_ID_PREFIX = "u_"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    traveling: bool = False
    travel: str | None = None
