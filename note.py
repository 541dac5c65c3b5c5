from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence


TIMESTAMP_FORMAT = "%Y-%m-%d %a %H:%M"


@dataclass(frozen=True)
class Note:
    title: str
    body: str = ""

    @classmethod
    def from_args(cls, args: Sequence[str]) -> Optional["Note"]:
        """Build a note from ``[title]`` or ``[title, body]``; any other shape gives None."""
        if len(args) == 1:
            return cls(args[0])
        if len(args) == 2:
            return cls(args[0], args[1])
        return None

    def apply_to_text(self, fn: Callable[[str], str]) -> "Note":
        return Note(fn(self.title), fn(self.body))

    def to_org(self, now: Optional[datetime] = None) -> str:
        created = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
        return (
            f"INBOX {self.title}\n"
            ":PROPERTIES:\n"
            f":CREATED:  [{created}]\n"
            ":END:\n"
            f"{self.body}"
        )
