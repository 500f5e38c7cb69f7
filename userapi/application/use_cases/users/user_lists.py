# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Favourites and history: per-user membership sets of opaque item ids."""

from __future__ import annotations

from userapi.domain.users.entities import ListKind
from userapi.domain.users.exceptions import UserNotFoundError
from userapi.domain.users.repositories import UserListRepository
from userapi.shared.errors import ValidationError
from userapi.shared.logging import logger


class UserListUseCase:
    """Get/add/remove for one list kind.

    ``add`` and ``remove`` are idempotent: adding a present item or removing
    an absent one leaves the set as it was and still succeeds.
    """

    def __init__(self, *, lists: UserListRepository, kind: ListKind) -> None:
        self._lists = lists
        self._kind = kind

    @property
    def kind(self) -> ListKind:
        return self._kind

    def get(self, user_id: int) -> list[str]:
        return self._require_user(user_id, self._lists.items(user_id, self._kind))

    def add(self, user_id: int, item_id: str) -> list[str]:
        _check_item_id(item_id)
        items = self._require_user(user_id, self._lists.add_item(user_id, self._kind, item_id))
        logger.debug(f"lists.add: user={user_id} kind={self._kind} size={len(items)}")
        return items

    def remove(self, user_id: int, item_id: str) -> list[str]:
        _check_item_id(item_id)
        items = self._require_user(
            user_id, self._lists.remove_item(user_id, self._kind, item_id)
        )
        logger.debug(f"lists.remove: user={user_id} kind={self._kind} size={len(items)}")
        return items

    def _require_user(self, user_id: int, items: list[str] | None) -> list[str]:
        if items is None:
            raise UserNotFoundError(context={"user_id": user_id})
        return items


def _check_item_id(item_id: str) -> None:
    if not item_id or not item_id.strip():
        raise ValidationError("Item id is required")
