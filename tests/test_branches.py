from dataclasses import dataclass

import pytest

from mmoffline.branches import (
    ENTRIES_TABLE,
    DocAction,
    DocumentBranch,
    DocumentStep,
    LogBranch,
    LogStep,
)


@dataclass
class Document:
    document_id: int
    client_id: int


@dataclass
class Entry:
    product_id: int
    quantity: float


class FakeStore:
    def __init__(self):
        self.replaced = []
        self.removed = []
        self.filtered = []

    def replace_data(self, entity):
        self.replaced.append(entity)

    def remove_one_entity(self, entity):
        self.removed.append(entity)

    def remove_entities_filtered(self, table, condition):
        self.filtered.append((table, condition))


def _to_entry_creation(branch, document):
    branch.client_confirmed("client")
    branch.document_created(document)
    branch.group_selected("group")
    branch.product_selected("product")


def test_document_branch_walks_forward():
    branch = DocumentBranch(FakeStore())
    assert branch.step is DocumentStep.CLIENT_SELECTION
    branch.client_confirmed("client")
    assert branch.step is DocumentStep.DOCUMENT_CREATION
    assert branch.current_client == "client"
    branch.document_created(Document(7, 3))
    assert branch.step is DocumentStep.GROUP_SELECTION
    assert branch.is_document_saved is False
    branch.group_selected("group")
    assert branch.step is DocumentStep.PRODUCT_SELECTION
    assert branch.current_group == "group"
    branch.product_selected("product")
    assert branch.step is DocumentStep.ENTRY_CREATION


def test_first_entry_saves_document_once():
    store = FakeStore()
    branch = DocumentBranch(store)
    document = Document(7, 3)
    _to_entry_creation(branch, document)
    first = Entry(11, 2.5)
    branch.entry_created(first)
    assert store.replaced == [document, first]
    assert branch.is_document_saved is True
    assert branch.document_counts == {3: 1}
    assert branch.product_quantities == {11: 2.5}
    assert branch.step is DocumentStep.PRODUCT_SELECTION

    branch.product_selected("product")
    second = Entry(12, 4)
    branch.entry_created(second)
    assert store.replaced == [document, first, second]
    assert branch.document_counts == {3: 1}
    assert branch.product_quantities == {11: 2.5, 12: 4}


def test_new_document_is_saved_again_and_counted():
    store = FakeStore()
    branch = DocumentBranch(store)
    _to_entry_creation(branch, Document(1, 3))
    branch.entry_created(Entry(5, 1))
    branch.document_created(Document(2, 3))
    assert branch.is_document_saved is False
    branch.group_selected("group")
    branch.product_selected("product")
    branch.entry_created(Entry(5, 1))
    assert branch.document_counts[3] == 2


@pytest.mark.parametrize(
    "start, expected",
    [
        (DocumentStep.DOCUMENT_CREATION, DocumentStep.CLIENT_SELECTION),
        (DocumentStep.GROUP_SELECTION, DocumentStep.CLIENT_SELECTION),
        (DocumentStep.PRODUCT_SELECTION, DocumentStep.GROUP_SELECTION),
        (DocumentStep.ENTRY_CREATION, DocumentStep.PRODUCT_SELECTION),
    ],
)
def test_document_back_steps(start, expected):
    calls = []
    branch = DocumentBranch(FakeStore(), lambda: calls.append(True))
    branch.step = start
    branch.back()
    assert branch.step is expected
    assert calls == []


def test_document_back_from_first_screen_leaves_branch():
    calls = []
    branch = DocumentBranch(FakeStore(), lambda: calls.append(True))
    branch.back()
    assert calls == [True]
    assert branch.step is DocumentStep.CLIENT_SELECTION


def test_log_delete_removes_document_and_entries():
    store = FakeStore()
    branch = LogBranch(store)
    document = Document(42, 3)
    branch.on_doc_interaction(document, DocAction.DELETE)
    assert store.removed == [document]
    assert store.filtered == [(ENTRIES_TABLE, "parentDocId = 42")]
    assert branch.step is LogStep.DOCUMENT_SELECTION


def test_log_edit_opens_entry_editing():
    branch = LogBranch(FakeStore())
    document = Document(42, 3)
    branch.on_doc_interaction(document, DocAction.EDIT)
    assert branch.step is LogStep.ENTRY_EDITING
    assert branch.editing_document is document


def test_log_unknown_action_is_ignored():
    store = FakeStore()
    branch = LogBranch(store)
    branch.on_doc_interaction(Document(1, 1), 99)
    assert store.removed == []
    assert store.filtered == []
    assert branch.step is LogStep.DOCUMENT_SELECTION


def test_log_doc_change_saves_and_returns():
    store = FakeStore()
    branch = LogBranch(store)
    document = Document(5, 2)
    branch.on_doc_interaction(document, DocAction.EDIT)
    branch.on_doc_change(document)
    assert store.replaced == [document]
    assert branch.replaced_documents == [document]
    assert branch.step is LogStep.DOCUMENT_SELECTION
    assert branch.editing_document is None


def test_log_back_behaviour():
    calls = []
    branch = LogBranch(FakeStore(), lambda: calls.append(True))
    branch.on_doc_interaction(Document(5, 2), DocAction.EDIT)
    branch.back()
    assert branch.step is LogStep.DOCUMENT_SELECTION
    assert calls == []
    branch.back()
    assert calls == [True]