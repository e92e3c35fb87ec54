"""Navigation and data flow of the document-creation and log branches."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, IntEnum
from typing import Any, Optional, Protocol

__all__ = [
    "EntityStore",
    "DocumentStep",
    "DocumentBranch",
    "LogStep",
    "DocAction",
    "LogBranch",
    "ENTRIES_TABLE",
]

ENTRIES_TABLE = "Entries"


class EntityStore(Protocol):
    """Storage the branches save to and delete from."""

    def replace_data(self, entity: Any) -> None: ...

    def remove_one_entity(self, entity: Any) -> None: ...

    def remove_entities_filtered(self, table: str, condition: str) -> None: ...


class DocumentStep(Enum):
    """Screens of the document-creation branch."""

    CLIENT_SELECTION = "client_selection"
    DOCUMENT_CREATION = "document_creation"
    GROUP_SELECTION = "group_selection"
    PRODUCT_SELECTION = "product_selection"
    ENTRY_CREATION = "entry_creation"


_DOCUMENT_BACK = {
    DocumentStep.DOCUMENT_CREATION: DocumentStep.CLIENT_SELECTION,
    DocumentStep.GROUP_SELECTION: DocumentStep.CLIENT_SELECTION,
    DocumentStep.PRODUCT_SELECTION: DocumentStep.GROUP_SELECTION,
    DocumentStep.ENTRY_CREATION: DocumentStep.PRODUCT_SELECTION,
}


class DocumentBranch:
    """Leads from client choice through document to entries, saving as it goes.

    A document is saved only once its first entry is created. Documents
    saved per client and quantities entered per product are counted.
    """

    def __init__(
        self,
        store: EntityStore,
        on_back: Optional[Callable[[], None]] = None,
    ) -> None:
        self.store = store
        self.on_back = on_back
        self.step = DocumentStep.CLIENT_SELECTION
        self.current_client: Any = None
        self.current_group: Any = None
        self.current_product: Any = None
        self.current_document: Any = None
        self.is_document_saved = False
        self.document_counts: dict[Any, int] = {}
        self.product_quantities: dict[Any, float] = {}

    def client_confirmed(self, client: Any) -> None:
        """Take the chosen client and open document creation."""
        self.current_client = client
        self.step = DocumentStep.DOCUMENT_CREATION

    def document_created(self, document: Any) -> None:
        """Take the new, not yet saved document and open group selection."""
        self.current_document = document
        self.is_document_saved = False
        self.step = DocumentStep.GROUP_SELECTION

    def group_selected(self, group: Any) -> None:
        """Take the chosen group and open product selection."""
        self.current_group = group
        self.step = DocumentStep.PRODUCT_SELECTION

    def product_selected(self, product: Any) -> None:
        """Take the chosen product and open entry creation."""
        self.current_product = product
        self.step = DocumentStep.ENTRY_CREATION

    def entry_created(self, entry: Any) -> None:
        """Save the entry, and its document on the first entry, then go back."""
        if not self.is_document_saved:
            self.store.replace_data(self.current_document)
            self.is_document_saved = True
            client_id = self.current_document.client_id
            self.document_counts[client_id] = self.document_counts.get(client_id, 0) + 1
        self.store.replace_data(entry)
        self.product_quantities[entry.product_id] = entry.quantity
        self.back()

    def back(self) -> None:
        """Return to the previous screen, or leave the branch from the first one."""
        if self.step is DocumentStep.CLIENT_SELECTION:
            if self.on_back is not None:
                self.on_back()
            return
        self.step = _DOCUMENT_BACK[self.step]


class LogStep(Enum):
    """Screens of the log branch."""

    DOCUMENT_SELECTION = "document_selection"
    ENTRY_EDITING = "entry_editing"


class DocAction(IntEnum):
    """Actions that can be taken on a selected document."""

    DELETE = 0
    EDIT = 1


class LogBranch:
    """Deletes documents or hands them to entry editing and saves the changes."""

    def __init__(
        self,
        store: EntityStore,
        on_back: Optional[Callable[[], None]] = None,
    ) -> None:
        self.store = store
        self.on_back = on_back
        self.step = LogStep.DOCUMENT_SELECTION
        self.editing_document: Any = None
        self.replaced_documents: list[Any] = []

    def on_doc_interaction(self, document: Any, action: int) -> None:
        """Delete the document with its entries, or start editing it.

        Unknown actions are ignored.
        """
        try:
            known = DocAction(action)
        except ValueError:
            return
        if known is DocAction.DELETE:
            self.store.remove_one_entity(document)
            self.store.remove_entities_filtered(
                ENTRIES_TABLE, f"parentDocId = {document.document_id}"
            )
        else:
            self.editing_document = document
            self.step = LogStep.ENTRY_EDITING

    def on_doc_change(self, document: Any) -> None:
        """Save the edited document and return to document selection."""
        self.store.replace_data(document)
        self.replaced_documents.append(document)
        self.editing_document = None
        self.step = LogStep.DOCUMENT_SELECTION

    def back(self) -> None:
        """Leave entry editing, or the branch when selecting documents."""
        if self.step is LogStep.DOCUMENT_SELECTION:
            if self.on_back is not None:
                self.on_back()
        else:
            self.step = LogStep.DOCUMENT_SELECTION