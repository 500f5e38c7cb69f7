# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userapi.domain.users.entities import ListKind
from userapi.domain.users.entities import User as DomainUser
from userapi.domain.users.exceptions import UserAlreadyExistsError
from userapi.domain.users.repositories import UserListRepository, UserRepository
from userapi.infrastructure.db.models import User, UserListItem
from userapi.infrastructure.db.session import session_scope
from userapi.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def find_by_username(self, username: str) -> DomainUser | None:
        with session_scope() as session:
            row = session.scalar(select(User).where(User.username == username))
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with session_scope() as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                created_at=user.created_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # Lost a race with a concurrent registration of the same name.
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)


class SqlAlchemyUserListRepository(UserListRepository):
    def items(self, user_id: int, kind: ListKind) -> list[str] | None:
        with session_scope() as session:
            if session.get(User, user_id) is None:
                return None
            return self._items(session, user_id, kind)

    def add_item(self, user_id: int, kind: ListKind, item_id: str) -> list[str] | None:
        with session_scope() as session:
            if session.get(User, user_id) is None:
                return None
            if not self._has_item(session, user_id, kind, item_id):
                session.add(UserListItem(user_id=user_id, kind=kind.value, item_id=item_id))
                try:
                    session.flush()
                except IntegrityError:
                    # A concurrent add inserted the same item first.
                    logger.debug(f"lists.add: duplicate insert absorbed user={user_id} kind={kind}")
                    session.rollback()
            return self._items(session, user_id, kind)

    def remove_item(self, user_id: int, kind: ListKind, item_id: str) -> list[str] | None:
        with session_scope() as session:
            if session.get(User, user_id) is None:
                return None
            session.execute(
                delete(UserListItem).where(
                    UserListItem.user_id == user_id,
                    UserListItem.kind == kind.value,
                    UserListItem.item_id == item_id,
                )
            )
            return self._items(session, user_id, kind)

    @staticmethod
    def _has_item(session: Session, user_id: int, kind: ListKind, item_id: str) -> bool:
        present = session.scalar(
            select(UserListItem.id).where(
                UserListItem.user_id == user_id,
                UserListItem.kind == kind.value,
                UserListItem.item_id == item_id,
            )
        )
        return present is not None

    @staticmethod
    def _items(session: Session, user_id: int, kind: ListKind) -> list[str]:
        return list(
            session.scalars(
                select(UserListItem.item_id)
                .where(UserListItem.user_id == user_id, UserListItem.kind == kind.value)
                .order_by(UserListItem.id.asc())
            )
        )
