"""View state and update cycle for one inventory list.

Each tab owns an InventoryController. The controller holds an immutable
InventoryViewState snapshot and replaces it on every action; listeners
(the tab widgets) re-render from the new snapshot.

    user action -> controller method -> repository call (mutations only)
                -> full refetch -> filter/sort -> pagination reset
                -> new snapshot -> listeners

Mutations never touch the cache directly. A failed repository call leaves
the snapshot as it was and produces an error notification; nothing is
retried automatically.

UI modes are mutually exclusive: the list is either closed (no form), showing the create
form, editing one item, or adjusting one item's quantity.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
import logging
from typing import Callable, List, Optional, Tuple

from stockroom.models.inventory_item import Collection, InventoryItem, find_item
from stockroom.services.collection_service import (
    CollectionCache,
    create_item,
    delete_item,
    empty_cache,
    fetch_collection,
    update_item,
)
from stockroom.services.exceptions import RepositoryError, ValidationError
from stockroom.services.filter_service import (
    SortKey,
    SortSpec,
    distinct_categories,
    distinct_sectors,
    filter_sort,
)
from stockroom.services.form_controller import FormController, SubmissionKind
from stockroom.services.logging_utils import get_service_logger, log_operation
from stockroom.services.pagination import PaginationWindow
from stockroom.services.quantity_service import AdjustmentDirection, adjust_quantity
from stockroom.services.repository import EntityRepository
from stockroom.utils.constants import PAGE_SIZE

logger = get_service_logger(__name__)


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Message for the user (dialog or status bar)."""

    level: NotificationLevel
    title: str
    message: str


class UiMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"
    ADJUSTING = "adjusting"


@dataclass(frozen=True)
class AdjustmentState:
    """Pending quantity adjustment for one item."""

    item_id: str
    delta: str = ""
    direction: AdjustmentDirection = AdjustmentDirection.ADD


@dataclass(frozen=True)
class InventoryViewState:
    """Snapshot of everything a list tab renders."""

    cache: CollectionCache
    query: str = ""
    category: Optional[str] = None
    sector: Optional[str] = None
    sort: Optional[SortSpec] = None
    window: PaginationWindow = field(default_factory=PaginationWindow)
    mode: UiMode = UiMode.CLOSED
    selected_id: Optional[str] = None
    adjustment: Optional[AdjustmentState] = None
    loading: bool = False

    @property
    def collection(self) -> Collection:
        return self.cache.collection

    @property
    def visible(self) -> Tuple[InventoryItem, ...]:
        return self.window.visible

    @property
    def has_more(self) -> bool:
        return self.window.has_more

    @property
    def categories(self) -> List[str]:
        return distinct_categories(self.cache.items)

    @property
    def sectors(self) -> List[str]:
        return distinct_sectors(self.cache.items)

    @property
    def selected_item(self) -> Optional[InventoryItem]:
        if self.selected_id is None:
            return None
        return find_item(self.cache.items, self.selected_id)

    @property
    def is_filtered(self) -> bool:
        return bool(self.query.strip() or self.category or self.sector)


def rebuild_view(state: InventoryViewState, page_size: int = PAGE_SIZE) -> InventoryViewState:
    """Recompute the view from cache, query, filters and sort; back to page one."""
    view = filter_sort(
        state.cache.items,
        query=state.query,
        category=state.category,
        sector=state.sector,
        sort=state.sort,
    )
    return replace(state, window=PaginationWindow.reset(view, page_size))


Listener = Callable[[InventoryViewState], None]
Notifier = Callable[[Notification], None]


def _log_notification(notification: Notification) -> None:
    level = logging.ERROR if notification.level is NotificationLevel.ERROR else logging.INFO
    logger.log(level, f"{notification.title}: {notification.message}")


class InventoryController:
    """
    Owns the view state of one collection and runs its operations.

    Args:
        repository: Datastore for list/insert/update/delete
        collection: Collection shown by this controller
        notify: Callback receiving user notifications (defaults to logging)
        page_size: Rows per "Load more" step
    """

    def __init__(
        self,
        repository: EntityRepository,
        collection: Collection,
        notify: Optional[Notifier] = None,
        page_size: int = PAGE_SIZE,
    ):
        self.repository = repository
        self.collection = collection
        self.page_size = page_size
        self._notify = notify or _log_notification
        self._listeners: List[Listener] = []
        self._state = InventoryViewState(
            cache=empty_cache(collection),
            window=PaginationWindow(page_size=page_size),
        )

    # ------------------------------------------------------------------
    # State plumbing
    # ------------------------------------------------------------------

    @property
    def state(self) -> InventoryViewState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: InventoryViewState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def _notify_user(self, level: NotificationLevel, title: str, message: str) -> None:
        self._notify(Notification(level=level, title=title, message=message))

    def _report_repository_error(self, error: RepositoryError) -> None:
        self._notify_user(NotificationLevel.ERROR, "Error", error.message)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """
        Refetch the whole collection and rebuild the view.

        Returns:
            True on success. On failure the previous cache is kept and an
            error notification is sent.
        """
        previous = self._state
        self._set_state(replace(previous, loading=True))
        try:
            cache = fetch_collection(self.repository, self.collection)
        except RepositoryError as e:
            self._set_state(replace(previous, loading=False))
            self._report_repository_error(e)
            return False

        state = replace(self._state, cache=cache, loading=False)

        # Drop references to items that disappeared remotely
        if state.selected_id is not None and find_item(cache.items, state.selected_id) is None:
            if state.mode is UiMode.EDIT:
                state = replace(state, mode=UiMode.CLOSED)
            state = replace(state, selected_id=None)
        if state.adjustment is not None and find_item(cache.items, state.adjustment.item_id) is None:
            state = replace(state, adjustment=None, mode=UiMode.CLOSED)

        # Filters must stay among the dropdown options
        if state.category and state.category not in state.categories:
            state = replace(state, category=None)
        if state.sector and state.sector not in state.sectors:
            state = replace(state, sector=None)

        self._set_state(rebuild_view(state, self.page_size))
        return True

    # ------------------------------------------------------------------
    # Search, filters, sort, pagination
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> None:
        self._set_state(rebuild_view(replace(self._state, query=query or ""), self.page_size))

    def set_category_filter(self, category: Optional[str]) -> None:
        self._set_state(rebuild_view(replace(self._state, category=category or None), self.page_size))

    def set_sector_filter(self, sector: Optional[str]) -> None:
        self._set_state(rebuild_view(replace(self._state, sector=sector or None), self.page_size))

    def clear_filters(self) -> None:
        state = replace(self._state, query="", category=None, sector=None)
        self._set_state(rebuild_view(state, self.page_size))

    def set_sort(self, sort: Optional[SortSpec]) -> None:
        self._set_state(rebuild_view(replace(self._state, sort=sort), self.page_size))

    def sort_by(self, key: SortKey) -> None:
        """Column header click: sort by key, or flip direction if already active."""
        current = self._state.sort
        sort = current.toggled(key) if current is not None else SortSpec(key=key)
        self.set_sort(sort)

    def load_more(self) -> None:
        self._set_state(replace(self._state, window=self._state.window.load_more()))

    def select(self, item_id: Optional[str]) -> None:
        self._set_state(replace(self._state, selected_id=item_id))

    # ------------------------------------------------------------------
    # Create / edit form
    # ------------------------------------------------------------------

    def open_create(self) -> FormController:
        """Enter create mode and return a blank form controller."""
        form = FormController(self.collection)
        form.seed(None)
        self._set_state(replace(self._state, mode=UiMode.CREATE, adjustment=None))
        return form

    def open_edit(self, item_id: str) -> FormController:
        """
        Enter edit mode for a cached item.

        Raises:
            ItemNotFound: If the id is not in the cache
        """
        item = self._state.cache.get(item_id)
        form = FormController(self.collection)
        form.seed(item)
        self._set_state(
            replace(self._state, mode=UiMode.EDIT, selected_id=item_id, adjustment=None)
        )
        return form

    def close_form(self) -> None:
        if self._state.mode in (UiMode.CREATE, UiMode.EDIT):
            self._set_state(replace(self._state, mode=UiMode.CLOSED))

    def submit_form(self, form: FormController) -> bool:
        """
        Persist the form's create or update request.

        The form is closed first, whatever the outcome. Repository errors are
        reported as notifications.

        Returns:
            True if the datastore accepted the change
        """
        submission = form.submit()
        self.close_form()

        try:
            if submission.kind is SubmissionKind.CREATE:
                create_item(self.repository, self.collection, submission.fields)
                name = submission.fields["name"]
                title, message = "Item added", f"{name} was added to the inventory."
            else:
                update_item(self.repository, self.collection, submission.item)
                name = submission.item.name
                title, message = "Item updated", f"{name} was updated successfully."
        except RepositoryError as e:
            log_operation(
                logger,
                operation=f"submit_{submission.kind.value}",
                outcome="error",
                level=logging.ERROR,
                collection=self.collection.value,
            )
            self._report_repository_error(e)
            return False

        log_operation(
            logger,
            operation=f"submit_{submission.kind.value}",
            outcome="success",
            collection=self.collection.value,
        )
        self._notify_user(NotificationLevel.SUCCESS, title, message)
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_item(self, item_id: str) -> bool:
        """
        Delete an item and refetch.

        Returns:
            True if the datastore accepted the deletion
        """
        item = find_item(self._state.cache.items, item_id)
        label = item.name if item is not None else item_id
        try:
            delete_item(self.repository, self.collection, item_id)
        except RepositoryError as e:
            self._report_repository_error(e)
            return False

        state = self._state
        if state.selected_id == item_id:
            state = replace(state, selected_id=None)
        if state.adjustment is not None and state.adjustment.item_id == item_id:
            state = replace(state, adjustment=None, mode=UiMode.CLOSED)
        self._set_state(state)

        self._notify_user(
            NotificationLevel.SUCCESS, "Item removed", f"{label} was removed from the inventory."
        )
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Quantity adjustment
    # ------------------------------------------------------------------

    def start_adjustment(self, item_id: str) -> AdjustmentState:
        """
        Enter adjusting mode for a cached item, with an empty delta and 'add'.

        Raises:
            ItemNotFound: If the id is not in the cache
        """
        self._state.cache.get(item_id)
        adjustment = AdjustmentState(item_id=item_id)
        self._set_state(
            replace(
                self._state,
                mode=UiMode.ADJUSTING,
                selected_id=item_id,
                adjustment=adjustment,
            )
        )
        return adjustment

    def update_adjustment(
        self,
        delta: Optional[str] = None,
        direction: Optional[AdjustmentDirection] = None,
    ) -> None:
        """Record the delta text and/or direction typed into the adjust panel."""
        adjustment = self._state.adjustment
        if adjustment is None:
            return
        if delta is not None:
            adjustment = replace(adjustment, delta=str(delta))
        if direction is not None:
            adjustment = replace(adjustment, direction=AdjustmentDirection(direction))
        self._set_state(replace(self._state, adjustment=adjustment))

    def cancel_adjustment(self) -> None:
        if self._state.adjustment is not None:
            self._set_state(replace(self._state, adjustment=None, mode=UiMode.CLOSED))

    def apply_adjustment(self) -> bool:
        """
        Validate and persist the pending adjustment.

        On success the adjustment is cleared and the collection refetched.
        On a validation or repository error the adjustment stays open so the
        user can correct it and retry.

        Returns:
            True if the new quantity was written
        """
        adjustment = self._state.adjustment
        if adjustment is None:
            return False

        item = self._state.cache.get(adjustment.item_id)
        try:
            new_quantity = adjust_quantity(
                self.repository,
                self.collection,
                item,
                adjustment.delta,
                adjustment.direction,
            )
        except ValidationError as e:
            self._notify_user(NotificationLevel.WARNING, "Invalid value", "; ".join(e.errors))
            return False
        except RepositoryError as e:
            self._report_repository_error(e)
            return False

        self._set_state(replace(self._state, adjustment=None, mode=UiMode.CLOSED))
        self._notify_user(
            NotificationLevel.SUCCESS, "Quantity updated", f"New value: {new_quantity}"
        )
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_pdf(self, path=None) -> bytes:
        """
        Export the full cached collection (unfiltered, unpaginated) to PDF.

        Args:
            path: Optional file path to write

        Returns:
            The PDF document bytes
        """
        from stockroom.services.export_service import export_inventory_pdf

        return export_inventory_pdf(self.collection, self._state.cache.items, path)
