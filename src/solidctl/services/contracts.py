"""Typed payload contracts for the command boundary.

These models validate payload shapes before they become
``ServiceResult.data`` so key regressions fail fast in tests.
Money is carried as strings to keep ``Decimal`` exact in JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from solidctl.domain.account import BankAccount
    from solidctl.domain.orders import Receipt
    from solidctl.domain.principles import Principle
    from solidctl.domain.users import User

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class TransactionItem(BaseModel):
    kind: str
    amount: str
    balance_after: str


class AccountData(BaseModel):
    """Payload contract for ``account simulate``."""

    owner: str
    balance: str
    history: list[TransactionItem]


class ShapeItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    shape: str
    kind: str
    area: float
    capabilities: list[str]


class AreaData(BaseModel):
    """Payload contract for ``shapes area``."""

    count: int
    total_area: float
    items: list[ShapeItem]


class VolumeData(BaseModel):
    """Payload contract for ``shapes volume``."""

    count: int
    total_volume: float


class UserItem(BaseModel):
    name: str
    age: int
    email: str
    adult: bool


class UsersData(BaseModel):
    count: int
    items: list[UserItem]


class ReceiptData(BaseModel):
    """Payload contract for ``orders place``."""

    order_id: str
    customer: str
    amount: str
    currency: str
    processor: str
    reference: str


class PrincipleItem(BaseModel):
    key: str
    name: str
    family: Literal["oop", "solid"]
    summary: str
    violation: str | None = None
    remedy: str | None = None
    module: str


class PrincipleListData(BaseModel):
    count: int
    items: list[PrincipleItem] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def account_payload(account: BankAccount) -> dict[str, Any]:
    return dump_validated(
        AccountData,
        {
            "owner": account.owner,
            "balance": str(account.balance),
            "history": [
                {
                    "kind": str(t.kind),
                    "amount": str(t.amount),
                    "balance_after": str(t.balance_after),
                }
                for t in account.history
            ],
        },
    )


def user_item(user: User) -> dict[str, Any]:
    return {"name": user.name, "age": user.age, "email": user.email, "adult": user.is_adult()}


def receipt_payload(receipt: Receipt) -> dict[str, Any]:
    return dump_validated(
        ReceiptData,
        {
            "order_id": receipt.order_id,
            "customer": receipt.customer,
            "amount": str(receipt.amount),
            "currency": receipt.currency,
            "processor": receipt.processor,
            "reference": receipt.reference,
        },
    )


def principle_item(principle: Principle, *, full: bool = False) -> dict[str, Any]:
    item: dict[str, Any] = {
        "key": principle.key,
        "name": principle.name,
        "family": str(principle.family),
        "summary": principle.summary,
        "module": principle.module,
    }
    if full:
        item["violation"] = principle.violation
        item["remedy"] = principle.remedy
    return item
