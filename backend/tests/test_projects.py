import pytest

from errors import OwnerNotFound
from models import Project
from services.credentials import CredentialStore
from services.projects import ProjectStore, code_changes


@pytest.fixture
def store(app):
    return ProjectStore()


@pytest.fixture
def owners(app):
    credentials = CredentialStore()
    ana = credentials.create("ana", "Ana", "ana@mail.com", "hash")
    bob = credentials.create("bob", "Bob", "bob@mail.com", "hash")
    return ana, bob


def test_create_starts_with_empty_code(store, owners):
    ana, _ = owners
    project = store.create("demo", ana.id)
    assert project.created_by == ana.id
    assert (project.html_code, project.css_code, project.js_code) == ("", "", "")


def test_create_requires_existing_owner(store, app):
    with pytest.raises(OwnerNotFound):
        store.create("demo", "f" * 32)
    assert Project.query.count() == 0


def test_list_by_owner_only_returns_owned(store, owners):
    ana, bob = owners
    first = store.create("one", ana.id)
    second = store.create("two", ana.id)
    store.create("theirs", bob.id)

    listed = store.list_by_owner(ana.id)
    assert {p.id for p in listed} == {first.id, second.id}
    assert all(p.created_by == ana.id for p in listed)


def test_list_by_unknown_owner(store, app):
    with pytest.raises(OwnerNotFound):
        store.list_by_owner("f" * 32)


def test_update_replaces_only_supplied_fields(store, owners):
    ana, _ = owners
    project = store.create("demo", ana.id)
    store.update(project.id, {"cssCode": "h1 { color: red; }"})

    updated = store.update(project.id, {"htmlCode": "<h1>hi</h1>", "jsCode": None})
    assert updated.html_code == "<h1>hi</h1>"
    assert updated.css_code == "h1 { color: red; }"
    assert updated.js_code == ""


def test_update_missing_project(store, app):
    assert store.update("0" * 32, {"htmlCode": "x"}) is None


def test_update_with_wrong_owner_is_a_no_op(store, owners):
    ana, bob = owners
    project = store.create("demo", ana.id)

    assert store.update(project.id, {"htmlCode": "pwned"}, owner_id=bob.id) is None
    assert store.get_by_id(project.id).html_code == ""


def test_delete_returns_removed_record(store, owners):
    ana, _ = owners
    project = store.create("demo", ana.id)
    project_id = project.id

    removed = store.delete_by_id(project_id, owner_id=ana.id)
    assert removed.id == project_id
    assert removed.to_dict()["title"] == "demo"
    assert store.get_by_id(project_id) is None


def test_delete_missing_leaves_store_unchanged(store, owners):
    ana, _ = owners
    store.create("demo", ana.id)

    assert store.delete_by_id("0" * 32) is None
    assert Project.query.count() == 1


def test_double_delete_succeeds_once(store, owners):
    ana, _ = owners
    project_id = store.create("demo", ana.id).id

    assert store.delete_by_id(project_id, owner_id=ana.id) is not None
    assert store.delete_by_id(project_id, owner_id=ana.id) is None


def test_delete_with_wrong_owner_keeps_row(store, owners):
    ana, bob = owners
    project_id = store.create("demo", ana.id).id

    assert store.delete_by_id(project_id, owner_id=bob.id) is None
    assert store.get_by_id(project_id) is not None


def test_code_changes_ignores_unknown_keys():
    assert code_changes({"htmlCode": "a", "title": "x", "createdBy": "y"}) == {"html_code": "a"}
