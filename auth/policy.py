"""
Access policy: which request paths need credentials.

Two states only. A path that exactly equals one of the public paths is
PUBLIC; every other path, including unknown ones, is PROTECTED.
"""

import enum
from typing import Iterable


class AccessState(enum.Enum):
    PUBLIC = "public"
    PROTECTED = "protected"


class AccessPolicy:
    def __init__(self, public_paths: Iterable[str] = ("/health",)):
        self.public_paths = frozenset(public_paths)

    def classify(self, path: str) -> AccessState:
        if path in self.public_paths:
            return AccessState.PUBLIC
        return AccessState.PROTECTED

    def requires_auth(self, path: str) -> bool:
        return self.classify(path) is AccessState.PROTECTED
