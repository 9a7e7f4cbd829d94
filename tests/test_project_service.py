import pytest
from sqlalchemy.orm import Session

from teamcollab.errors import NotFoundError, ValidationError
from teamcollab.models import Comment, Task
from teamcollab.schemas import ProjectCreate, TaskCreate
from teamcollab.services import ProjectService, TaskService


def _member_names(project):
    return [member.username for member in project.members]


def test_creator_is_added_to_members(db_session: Session, make_user):
    alice = make_user("alice")

    project = ProjectService(db_session).create(ProjectCreate(name="Launch", color="#ff0000"), alice.id)

    assert project.created_by.id == alice.id
    assert _member_names(project) == ["alice"]
    assert project.color == "#ff0000"


def test_create_with_unknown_creator(db_session: Session):
    with pytest.raises(NotFoundError):
        ProjectService(db_session).create(ProjectCreate(name="Orphan"), 99)


def test_update_overwrites_name_and_color_only(db_session: Session, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    projects = ProjectService(db_session)
    project = projects.create(ProjectCreate(name="Launch", description="v1", color="red"), alice.id)
    projects.add_member(project.id, bob.id)

    updated = projects.update(project.id, {"name": "Relaunch", "color": "blue"})

    assert updated.name == "Relaunch"
    assert updated.color == "blue"
    assert updated.description == "v1"
    assert updated.created_by_id == alice.id
    assert _member_names(updated) == ["alice", "bob"]


def test_update_unknown_project(db_session: Session):
    with pytest.raises(NotFoundError):
        ProjectService(db_session).update(5, {"name": "x"})


def test_add_member_is_idempotent(db_session: Session, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    projects = ProjectService(db_session)
    project = projects.create(ProjectCreate(name="Launch"), alice.id)

    once = _member_names(projects.add_member(project.id, bob.id))
    twice = _member_names(projects.add_member(project.id, bob.id))

    assert once == twice == ["alice", "bob"]


def test_remove_member_that_is_absent_is_a_noop(db_session: Session, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    projects = ProjectService(db_session)
    project = projects.create(ProjectCreate(name="Launch"), alice.id)

    assert _member_names(projects.remove_member(project.id, bob.id)) == ["alice"]

    projects.add_member(project.id, bob.id)
    assert _member_names(projects.remove_member(project.id, bob.id)) == ["alice"]


def test_creator_cannot_be_removed(db_session: Session, make_user):
    alice = make_user("alice")
    projects = ProjectService(db_session)
    project = projects.create(ProjectCreate(name="Launch"), alice.id)

    with pytest.raises(ValidationError):
        projects.remove_member(project.id, alice.id)


def test_membership_changes_with_unknown_ids(db_session: Session, make_user):
    alice = make_user("alice")
    projects = ProjectService(db_session)
    project = projects.create(ProjectCreate(name="Launch"), alice.id)

    with pytest.raises(NotFoundError):
        projects.add_member(project.id, 404)
    with pytest.raises(NotFoundError):
        projects.add_member(404, alice.id)
    with pytest.raises(NotFoundError):
        projects.remove_member(project.id, 404)


def test_member_and_creator_queries(db_session: Session, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    projects = ProjectService(db_session)
    launch = projects.create(ProjectCreate(name="Launch"), alice.id)
    docs = projects.create(ProjectCreate(name="Docs"), bob.id)
    projects.add_member(docs.id, alice.id)

    assert [p.name for p in projects.get_by_member(alice.id)] == ["Launch", "Docs"]
    assert [p.name for p in projects.get_by_member(bob.id)] == ["Docs"]
    assert [p.name for p in projects.get_by_creator(alice.id)] == ["Launch"]
    assert projects.get_by_id(launch.id).name == "Launch"
    assert projects.get_by_id(999) is None
    assert len(projects.get_all()) == 2


def test_search_is_case_insensitive_substring(db_session: Session, make_user):
    alice = make_user("alice")
    projects = ProjectService(db_session)
    for name in ("Product Launch", "launch party", "Docs", "100% done", "1000 done"):
        projects.create(ProjectCreate(name=name), alice.id)

    assert [p.name for p in projects.search_by_name("LAUNCH")] == ["Product Launch", "launch party"]
    assert [p.name for p in projects.search_by_name("0%")] == ["100% done"]
    assert projects.search_by_name("missing") == []


def test_delete_removes_tasks_and_their_comments(db_session: Session, make_user):
    alice = make_user("alice")
    projects = ProjectService(db_session)
    tasks = TaskService(db_session)
    project = projects.create(ProjectCreate(name="Launch"), alice.id)
    task = tasks.create(TaskCreate(title="Ship", project_id=project.id), alice.id, project.id)
    tasks.add_comment(task.id, alice.id, "on it")

    projects.delete(project.id)

    assert projects.get_by_id(project.id) is None
    assert db_session.query(Task).count() == 0
    assert db_session.query(Comment).count() == 0


def test_delete_unknown_project(db_session: Session):
    with pytest.raises(NotFoundError):
        ProjectService(db_session).delete(1)
