from dataclasses import dataclass, asdict
from typing import List
from fastapi import Request

SESSION_KEY = "_flashes"

@dataclass(frozen=True)
class FlashMessage:
    kind: str  # "danger" or "success"
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines()

def flash(request: Request, kind: str, text: str):
    """queue a message for the next rendered page"""
    pending = list(request.session.get(SESSION_KEY, []))
    pending.append(asdict(FlashMessage(kind=kind, text=text)))
    request.session[SESSION_KEY] = pending

def pop_flashed(request: Request, kind: str) -> List[FlashMessage]:
    """remove and return pending messages of one kind, other kinds stay queued"""
    pending = request.session.get(SESSION_KEY, [])
    matched = [FlashMessage(**m) for m in pending if m["kind"] == kind]
    remaining = [m for m in pending if m["kind"] != kind]

    if remaining:
        request.session[SESSION_KEY] = remaining
    else:
        request.session.pop(SESSION_KEY, None)

    return matched
