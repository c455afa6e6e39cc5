"""User value object: validated on construction, asked about behavior.

Callers ask ``user.is_adult()`` rather than reading ``age`` and deciding
for themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from solidctl.domain.errors import InvalidArgument
from solidctl.domain.guards import require_text

# local@domain.tld; no quoting or IP literals.
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

ADULT_AGE = 18
SENIOR_AGE = 65
MAX_AGE = 150


def normalize_email(email: object) -> str:
    """Strip and lowercase *email*, rejecting malformed addresses."""
    text = require_text(email, "email").lower()
    if not _EMAIL_PATTERN.match(text):
        raise InvalidArgument(f"Invalid email address: {text!r}", field="email", value=text)
    return text


@dataclass(frozen=True)
class User:
    """A registered user."""

    name: str
    age: int
    email: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, "name"))
        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidArgument("age must be an integer", field="age", value=self.age)
        if not 0 <= self.age <= MAX_AGE:
            raise InvalidArgument(
                f"age must be between 0 and {MAX_AGE}", field="age", value=self.age
            )
        object.__setattr__(self, "email", normalize_email(self.email))

    def is_adult(self) -> bool:
        return self.age >= ADULT_AGE

    def is_senior(self) -> bool:
        return self.age >= SENIOR_AGE

    def greeting(self) -> str:
        return f"Hello, {self.name}"

    def discounted(self, base_price: float) -> float:
        """Price after the age-based discount this user qualifies for."""
        if not self.is_adult():
            return base_price * 0.5
        if self.is_senior():
            return base_price * 0.8
        return base_price
