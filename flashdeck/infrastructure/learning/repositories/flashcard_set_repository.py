"""Repository for FlashcardSet aggregates."""

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.orm.exc import StaleDataError

from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet
from flashdeck.exceptions import ConflictError, StoreTimeoutError, StoreUnavailableError
from flashdeck.infrastructure.learning.mappers.flashcard_set_mapper import FlashcardSetMapper
from flashdeck.models import FlashcardSet as FlashcardSetORM

logger = structlog.get_logger(__name__)

# Substrings drivers put in errors raised for an exceeded time limit
_TIMEOUT_MARKERS = (
    "statement timeout",
    "canceling statement",
    "lock timeout",
    "timed out",
    "timeout expired",
    "interrupted",
)

# SQLite VM instructions between deadline checks
_SQLITE_PROGRESS_STEPS = 1000


def _is_timeout(error: OperationalError) -> bool:
    message = str(error.orig).lower()
    return any(marker in message for marker in _TIMEOUT_MARKERS)


def _no_restore() -> None:
    return None


class FlashcardSetRepository:
    """Repository for FlashcardSet aggregates."""

    def __init__(self, db: Session, default_timeout: float | None = None) -> None:
        self.db = db
        self.default_timeout = default_timeout
        self.mapper = FlashcardSetMapper()

    def find_by_id(
        self, set_id: FlashcardSetId, timeout: float | None = None
    ) -> FlashcardSet | None:
        """
        Load a set with all of its cards.

        Args:
            set_id: The set ID
            timeout: Seconds the store may take, defaults to default_timeout

        Returns:
            FlashcardSet aggregate if found, None otherwise
        """
        with self._store_call("find_by_id", set_id, timeout):
            stmt = (
                select(FlashcardSetORM)
                .where(FlashcardSetORM.id == set_id.value)
                .options(selectinload(FlashcardSetORM.cards))
                .execution_options(populate_existing=True)
            )
            orm_model = self.db.execute(stmt).scalar_one_or_none()
            return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, flashcard_set: FlashcardSet, timeout: float | None = None) -> FlashcardSet:
        """
        Save a set (create or update) in a single transaction.

        Args:
            flashcard_set: The aggregate to save
            timeout: Seconds the store may take, defaults to default_timeout

        Returns:
            Saved aggregate with database-generated values

        Raises:
            ConflictError: If the stored set was changed or deleted since it was loaded
            StoreTimeoutError: If the store did not answer in time
            StoreUnavailableError: If the store failed
        """
        with self._store_call("save", flashcard_set.id, timeout):
            if not flashcard_set.id.is_persisted:
                orm_model = self.mapper.to_orm(flashcard_set)
                self.db.add(orm_model)
            else:
                orm_model = self.db.get(FlashcardSetORM, flashcard_set.id.value)
                if orm_model is None:
                    raise ConflictError(
                        f"Flashcard set {flashcard_set.id} was deleted by another request"
                    )
                if orm_model.version != flashcard_set.version:
                    raise ConflictError(
                        f"Flashcard set {flashcard_set.id} was modified by another request"
                    )
                self.mapper.to_orm(flashcard_set, orm_model)

            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)

    def delete(self, set_id: FlashcardSetId, timeout: float | None = None) -> bool:
        """
        Delete a set and, by cascade, all of its cards.

        Returns:
            True if deleted, False if not found
        """
        with self._store_call("delete", set_id, timeout):
            orm_model = self.db.get(FlashcardSetORM, set_id.value)
            if not orm_model:
                return False

            self.db.delete(orm_model)
            self.db.commit()
            return True

    def find_by_owner(self, owner_id: UserId) -> list[FlashcardSet]:
        """
        Get all sets of one owner.

        Returns:
            List of aggregates ordered by updated_at DESC
        """
        with self._store_call("find_by_owner", None, None):
            stmt = (
                select(FlashcardSetORM)
                .where(FlashcardSetORM.owner_id == owner_id.value)
                .options(selectinload(FlashcardSetORM.cards))
                .order_by(FlashcardSetORM.updated_at.desc(), FlashcardSetORM.id.desc())
            )
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_public(self) -> list[FlashcardSet]:
        """
        Get every public set.

        Returns:
            List of aggregates ordered by created_at DESC
        """
        with self._store_call("find_public", None, None):
            stmt = (
                select(FlashcardSetORM)
                .where(FlashcardSetORM.is_public.is_(True))
                .options(selectinload(FlashcardSetORM.cards))
                .order_by(FlashcardSetORM.created_at.desc(), FlashcardSetORM.id.desc())
            )
            orm_models = self.db.execute(stmt).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def _apply_timeout(self, timeout: float | None) -> Callable[[], None]:
        """
        Limit the statements run until the returned callable is invoked.

        PostgreSQL gets a transaction-local statement_timeout. SQLite gets a
        progress handler that interrupts any statement past the deadline.
        """
        effective = timeout if timeout is not None else self.default_timeout
        if effective is None:
            return _no_restore
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            self.db.execute(
                text("SELECT set_config('statement_timeout', :ms, true)"),
                {"ms": str(int(effective * 1000))},
            )
            return _no_restore
        if dialect == "sqlite":
            raw = self.db.connection().connection.driver_connection
            deadline = time.monotonic() + effective

            def past_deadline() -> int:
                return int(time.monotonic() > deadline)

            raw.set_progress_handler(past_deadline, _SQLITE_PROGRESS_STEPS)
            return lambda: raw.set_progress_handler(None, 0)
        return _no_restore

    @contextmanager
    def _store_call(
        self, operation: str, set_id: FlashcardSetId | None, timeout: float | None
    ) -> Iterator[None]:
        """
        Run one store operation, translating driver failures.

        The session is rolled back on any failure so nothing is half-written.
        """
        set_ref = set_id.value if set_id is not None else None
        restore = _no_restore
        try:
            restore = self._apply_timeout(timeout)
            yield
        except StaleDataError as e:
            self.db.rollback()
            logger.warning("flashcard_set_write_conflict", operation=operation, set_id=set_ref)
            raise ConflictError(
                f"Flashcard set {set_ref} was modified by another request"
            ) from e
        except OperationalError as e:
            self.db.rollback()
            if _is_timeout(e):
                logger.warning("flashcard_set_store_timeout", operation=operation, set_id=set_ref)
                raise StoreTimeoutError(f"Store timed out during {operation}") from e
            logger.error(
                "flashcard_set_store_unavailable",
                operation=operation,
                set_id=set_ref,
                error=str(e.orig),
            )
            raise StoreUnavailableError(f"Store unavailable during {operation}") from e
        except InterfaceError as e:
            self.db.rollback()
            logger.error("flashcard_set_store_unavailable", operation=operation, set_id=set_ref)
            raise StoreUnavailableError(f"Store unavailable during {operation}") from e
        except Exception:
            self.db.rollback()
            raise
        finally:
            restore()
