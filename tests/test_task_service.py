from datetime import date

import pytest
from sqlalchemy.orm import Session

from teamcollab.errors import NotFoundError, ValidationError
from teamcollab.models import Attachment, Comment, TaskPriority, TaskStatus
from teamcollab.schemas import AttachmentCreate, ProjectCreate, TaskCreate
from teamcollab.services import ProjectService, TaskService


@pytest.fixture
def alice(make_user):
    return make_user("alice")


@pytest.fixture
def project(db_session: Session, alice):
    return ProjectService(db_session).create(ProjectCreate(name="Launch"), alice.id)


def _create(db_session, creator, project, title, **fields):
    task_in = TaskCreate(title=title, project_id=project.id, **fields)
    return TaskService(db_session).create(task_in, creator.id, project.id)


def test_create_defaults_status_and_priority(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Write outline")

    assert task.status == TaskStatus.TODO
    assert task.priority == TaskPriority.MEDIUM
    assert task.project_id == project.id
    assert task.created_by.id == alice.id
    assert task.assignees == []


def test_create_keeps_explicit_status_and_priority(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Fix bug", status=TaskStatus.IN_PROGRESS, priority=TaskPriority.HIGH)

    assert task.status == TaskStatus.IN_PROGRESS
    assert task.priority == TaskPriority.HIGH


def test_create_requires_existing_creator_and_project(db_session: Session, alice, project):
    tasks = TaskService(db_session)
    with pytest.raises(NotFoundError):
        tasks.create(TaskCreate(title="x", project_id=999), alice.id, 999)
    with pytest.raises(NotFoundError):
        tasks.create(TaskCreate(title="x", project_id=project.id), 999, project.id)


def test_update_overwrites_fields_but_not_relationships(db_session: Session, alice, make_user, project):
    bob = make_user("bob")
    task = _create(db_session, alice, project, "Draft")
    tasks = TaskService(db_session)
    tasks.add_assignee(task.id, bob.id)

    updated = tasks.update(
        task.id,
        {
            "title": "Final",
            "description": "ready",
            "status": TaskStatus.HOLD,
            "priority": TaskPriority.LOW,
            "start_date": date(2026, 1, 1),
            "due_date": date(2026, 1, 31),
        },
    )

    assert updated.title == "Final"
    assert updated.description == "ready"
    assert updated.status == TaskStatus.HOLD
    assert updated.priority == TaskPriority.LOW
    assert updated.start_date == date(2026, 1, 1)
    assert updated.due_date == date(2026, 1, 31)
    assert updated.project_id == project.id
    assert updated.created_by_id == alice.id
    assert [u.username for u in updated.assignees] == ["bob"]


def test_update_rejects_null_status(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Draft")
    with pytest.raises(ValidationError):
        TaskService(db_session).update(task.id, {"status": None})


def test_update_status_allows_any_transition(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Draft")
    tasks = TaskService(db_session)

    for status in (TaskStatus.COMPLETED, TaskStatus.TODO, TaskStatus.HOLD, TaskStatus.IN_PROGRESS):
        assert tasks.update_status(task.id, status).status == status

    with pytest.raises(NotFoundError):
        tasks.update_status(999, TaskStatus.TODO)


def test_assignees_are_idempotent(db_session: Session, alice, make_user, project):
    bob = make_user("bob")
    task = _create(db_session, alice, project, "Pair")
    tasks = TaskService(db_session)

    tasks.add_assignee(task.id, bob.id)
    twice = tasks.add_assignee(task.id, bob.id)
    assert [u.username for u in twice.assignees] == ["bob"]

    removed = tasks.remove_assignee(task.id, alice.id)
    assert [u.username for u in removed.assignees] == ["bob"]

    assert tasks.remove_assignee(task.id, bob.id).assignees == []

    with pytest.raises(NotFoundError):
        tasks.add_assignee(task.id, 999)
    with pytest.raises(NotFoundError):
        tasks.remove_assignee(999, bob.id)


def test_filtered_queries(db_session: Session, alice, make_user, project):
    bob = make_user("bob")
    other = ProjectService(db_session).create(ProjectCreate(name="Other"), alice.id)
    a = _create(db_session, alice, project, "A", status=TaskStatus.COMPLETED, priority=TaskPriority.HIGH)
    b = _create(db_session, alice, project, "B")
    c = _create(db_session, alice, other, "C", status=TaskStatus.COMPLETED)
    tasks = TaskService(db_session)
    tasks.add_assignee(b.id, bob.id)
    tasks.add_assignee(c.id, bob.id)

    assert [t.title for t in tasks.get_all()] == ["A", "B", "C"]
    assert [t.title for t in tasks.get_by_project(project.id)] == ["A", "B"]
    assert [t.title for t in tasks.get_by_assignee(bob.id)] == ["B", "C"]
    assert [t.title for t in tasks.get_by_project_and_status(project.id, TaskStatus.COMPLETED)] == ["A"]
    assert [t.title for t in tasks.get_by_project_and_priority(project.id, TaskPriority.MEDIUM)] == ["B"]
    assert tasks.get_by_id(a.id).title == "A"
    assert tasks.get_by_id(999) is None


def test_due_by_includes_the_boundary_day(db_session: Session, alice, project):
    _create(db_session, alice, project, "early", due_date=date(2026, 3, 1))
    _create(db_session, alice, project, "on the day", due_date=date(2026, 3, 15))
    _create(db_session, alice, project, "late", due_date=date(2026, 3, 16))
    _create(db_session, alice, project, "undated")

    due = TaskService(db_session).get_due_by(date(2026, 3, 15))

    assert [t.title for t in due] == ["early", "on the day"]


def test_comments(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Discuss")
    tasks = TaskService(db_session)

    first = tasks.add_comment(task.id, alice.id, "  first  ")
    tasks.add_comment(task.id, alice.id, "second")

    assert first.content == "first"
    assert first.author.id == alice.id
    assert [c.content for c in tasks.get_comments(task.id)] == ["first", "second"]

    with pytest.raises(ValidationError):
        tasks.add_comment(task.id, alice.id, "   ")

    tasks.delete_comment(task.id, first.id)
    assert [c.content for c in tasks.get_comments(task.id)] == ["second"]

    with pytest.raises(NotFoundError):
        tasks.delete_comment(task.id, first.id)
    with pytest.raises(NotFoundError):
        tasks.get_comments(999)


def test_attachments(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Design")
    tasks = TaskService(db_session)

    attachment = tasks.add_attachment(
        task.id,
        alice.id,
        AttachmentCreate(file_name="mock.png", file_url="https://files.example.com/mock.png", content_type="image/png", file_size=2048),
    )

    assert attachment.task_id == task.id
    assert attachment.uploaded_by.id == alice.id
    assert [a.file_name for a in tasks.get_attachments(task.id)] == ["mock.png"]

    tasks.delete_attachment(task.id, attachment.id)
    assert tasks.get_attachments(task.id) == []
    with pytest.raises(NotFoundError):
        tasks.delete_attachment(task.id, attachment.id)


def test_delete_cascades_to_comments_and_attachments(db_session: Session, alice, project):
    task = _create(db_session, alice, project, "Doomed")
    tasks = TaskService(db_session)
    tasks.add_comment(task.id, alice.id, "bye")
    tasks.add_attachment(task.id, alice.id, AttachmentCreate(file_name="notes.txt"))

    tasks.delete(task.id)

    assert tasks.get_by_id(task.id) is None
    assert db_session.query(Comment).count() == 0
    assert db_session.query(Attachment).count() == 0
    with pytest.raises(NotFoundError):
        tasks.delete(task.id)
