from datetime import datetime

from sqlmodel import Session

from app import crud
from app.models import AgentSpecificationCreate, AgentSpecificationUpdate

STALE_TIMESTAMP = datetime(2000, 1, 1)


def _create(db: Session, name: str = "Test Agent", **overrides):
    data = {
        "name": name,
        "description": "A test agent specification",
        "goal": "Test goal",
        "instructions": "Test instructions",
    }
    data.update(overrides)
    return crud.create_agent_specification(
        session=db, specification_in=AgentSpecificationCreate(**data)
    )


def test_create_agent_specification(db: Session) -> None:
    specification = _create(db, tools=["tool1", "tool2"])

    assert specification.id is not None
    assert specification.name == "Test Agent"
    assert specification.tools == ["tool1", "tool2"]
    assert specification.created_at is not None
    assert specification.updated_at is not None


def test_create_agent_specification_defaults_tools(db: Session) -> None:
    specification = _create(db)

    assert specification.tools == []


def test_get_agent_specification(db: Session) -> None:
    specification = _create(db)

    fetched = crud.get_agent_specification(session=db, specification_id=specification.id)

    assert fetched is not None
    assert fetched.id == specification.id
    assert crud.get_agent_specification(session=db, specification_id=999_999) is None


def test_get_agent_specifications_in_creation_order(db: Session) -> None:
    first = _create(db, name="First")
    second = _create(db, name="Second")
    third = _create(db, name="Third")

    specifications, count = crud.get_agent_specifications(session=db)

    assert count == 3
    assert [s.id for s in specifications] == [first.id, second.id, third.id]

    page, count = crud.get_agent_specifications(session=db, skip=1, limit=1)
    assert count == 3
    assert [s.name for s in page] == ["Second"]


def test_update_agent_specification_changes_only_given_fields(db: Session) -> None:
    specification = _create(db, tools=["tool1"])
    specification.updated_at = STALE_TIMESTAMP
    db.add(specification)
    db.commit()
    db.refresh(specification)
    created_at = specification.created_at

    updated = crud.update_agent_specification(
        session=db,
        specification_id=specification.id,
        specification_in=AgentSpecificationUpdate(name="Only Name Updated", tools=["new-tool"]),
    )

    assert updated is not None
    assert updated.name == "Only Name Updated"
    assert updated.tools == ["new-tool"]
    assert updated.description == "A test agent specification"
    assert updated.goal == "Test goal"
    assert updated.instructions == "Test instructions"
    assert updated.created_at == created_at
    assert updated.updated_at.replace(tzinfo=None) > STALE_TIMESTAMP


def test_update_agent_specification_without_fields_is_noop(db: Session) -> None:
    specification = _create(db)
    updated_at = specification.updated_at

    updated = crud.update_agent_specification(
        session=db,
        specification_id=specification.id,
        specification_in=AgentSpecificationUpdate(),
    )

    assert updated is not None
    assert updated.updated_at == updated_at


def test_update_missing_agent_specification(db: Session) -> None:
    updated = crud.update_agent_specification(
        session=db,
        specification_id=999_999,
        specification_in=AgentSpecificationUpdate(name="Ghost"),
    )

    assert updated is None


def test_delete_agent_specification(db: Session) -> None:
    specification = _create(db)

    assert crud.delete_agent_specification(session=db, specification_id=specification.id)
    assert crud.get_agent_specification(session=db, specification_id=specification.id) is None
    assert not crud.delete_agent_specification(session=db, specification_id=specification.id)
