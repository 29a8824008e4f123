"""
Program Runtime for BudgetBuddy

This module ties the components together:
1. init  - build storage from settings, load the initial model
2. dispatch - run one message through the reducer, keep the result,
   notify subscribers (the presenter)

DESIGN DECISION: The program processes strictly one message at a time.
Dispatching from inside a subscriber is refused rather than queued, so
every message is fully handled (including its save) before the next.

A corrupt stored blob does not crash startup: the blob is copied to a
backup key, the live key is reset to an empty list, a warning is
recorded, and the program starts empty.
"""

from datetime import datetime
from typing import Callable, Optional
from uuid import UUID, uuid4

from budget_buddy.audit import AuditLogger, configure_logging
from budget_buddy.config import BudgetSettings, get_settings
from budget_buddy.models.entry import ValidationIssue
from budget_buddy.models.messages import Msg
from budget_buddy.models.state import Model
from budget_buddy.queries import Summary, summarize
from budget_buddy.reducer import Reducer
from budget_buddy.services.storage import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    StorageError,
    TransactionStore,
)


Subscriber = Callable[[Model], None]


def create_kv_store(settings: BudgetSettings) -> KeyValueStore:
    """Build the key-value medium named by the settings."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(settings.storage_path)


class Program:
    """
    Owns the current Model and feeds messages to the Reducer.

    Use Program.init() to build one from settings; the constructor is for
    callers that assemble the parts themselves.
    """

    def __init__(
        self,
        reducer: Reducer,
        model: Model,
        audit_logger: Optional[AuditLogger] = None,
        warnings: Optional[list[str]] = None,
    ):
        self._reducer = reducer
        self._model = model
        self._audit_logger = audit_logger
        self._warnings = list(warnings or [])
        self._last_issues: list[ValidationIssue] = []
        self._subscribers: list[Subscriber] = []
        self._dispatching = False

    @classmethod
    def init(
        cls,
        settings: Optional[BudgetSettings] = None,
        kv_store: Optional[KeyValueStore] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Callable[[], UUID] = uuid4,
        audit_logger: Optional[AuditLogger] = None,
    ) -> "Program":
        """
        Build storage and reducer, then load the initial model.

        Raises:
            CorruptStoreError: If the blob is corrupt and recovery is disabled
            StorageError: If the medium cannot be read, or recovery cannot write to it
        """
        settings = settings or get_settings()
        configure_logging(settings.log_level)
        audit_logger = audit_logger or AuditLogger()
        kv_store = kv_store if kv_store is not None else create_kv_store(settings)

        store = TransactionStore(
            kv_store,
            key=settings.storage_key,
            strict_types=settings.strict_type_decoding,
            audit_logger=audit_logger,
        )
        reducer = Reducer(
            store,
            clock=clock,
            id_factory=id_factory,
            audit_logger=audit_logger,
        )

        warnings: list[str] = []
        try:
            transactions = store.load()
        except CorruptStoreError as e:
            if not settings.recover_corrupt_store:
                raise
            try:
                backup_key = store.backup_corrupt(e.raw)
                store.save(())
            except StorageError as write_error:
                audit_logger.log_error(
                    type(write_error).__name__,
                    str(write_error),
                    details={"key": store.key},
                )
                raise
            audit_logger.log_corrupt_store_recovered(
                key=store.key,
                backup_key=backup_key,
                error_message=str(e),
            )
            warnings.append(
                f"Saved transactions could not be read and were moved to '{backup_key}'. "
                "Starting with an empty list."
            )
            transactions = ()
        except StorageError as e:
            audit_logger.log_error(type(e).__name__, str(e), details={"key": store.key})
            raise

        return cls(
            reducer=reducer,
            model=Model(transactions=transactions),
            audit_logger=audit_logger,
            warnings=warnings,
        )

    @property
    def model(self) -> Model:
        return self._model

    @property
    def warnings(self) -> list[str]:
        """Recoverable problems found at startup."""
        return list(self._warnings)

    @property
    def last_issues(self) -> list[ValidationIssue]:
        """Validation issues from the most recent dispatch."""
        return list(self._last_issues)

    @property
    def summary(self) -> Summary:
        return summarize(self._model.transactions)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback run with each new model; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, msg: Msg) -> Model:
        """
        Process one message and return the new model.

        Raises:
            RuntimeError: If called while another message is being processed
            StorageError: If saving fails; the current model is kept
        """
        if self._dispatching:
            raise RuntimeError("dispatch() called while a message is already being processed")

        self._dispatching = True
        try:
            try:
                transition = self._reducer.update(msg, self._model)
            except StorageError as e:
                if self._audit_logger:
                    self._audit_logger.log_save_failed(
                        str(e),
                        count=len(self._model.transactions),
                    )
                raise

            self._model = transition.model
            self._last_issues = list(transition.issues)
            for callback in list(self._subscribers):
                callback(self._model)
        finally:
            self._dispatching = False

        return self._model
