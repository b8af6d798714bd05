from sqlmodel import Session, col, func, select

from app.models import (
    AgentSpecification,
    AgentSpecificationCreate,
    AgentSpecificationUpdate,
    get_datetime_utc,
)


def create_agent_specification(
    *, session: Session, specification_in: AgentSpecificationCreate
) -> AgentSpecification:
    db_specification = AgentSpecification.model_validate(specification_in)
    session.add(db_specification)
    session.commit()
    session.refresh(db_specification)
    return db_specification


def get_agent_specification(
    *, session: Session, specification_id: int
) -> AgentSpecification | None:
    return session.get(AgentSpecification, specification_id)


def get_agent_specifications(
    *, session: Session, skip: int = 0, limit: int = 100
) -> tuple[list[AgentSpecification], int]:
    count_statement = select(func.count()).select_from(AgentSpecification)
    count = session.exec(count_statement).one()
    statement = (
        select(AgentSpecification)
        .order_by(col(AgentSpecification.created_at), col(AgentSpecification.id))
        .offset(skip)
        .limit(limit)
    )
    return list(session.exec(statement).all()), count


def update_agent_specification(
    *,
    session: Session,
    specification_id: int,
    specification_in: AgentSpecificationUpdate,
) -> AgentSpecification | None:
    db_specification = session.get(AgentSpecification, specification_id)
    if not db_specification:
        return None
    # Columns are non-nullable, so an explicit null leaves the field unchanged
    specification_data = specification_in.model_dump(exclude_unset=True, exclude_none=True)
    if not specification_data:
        return db_specification
    db_specification.sqlmodel_update(
        specification_data, update={"updated_at": get_datetime_utc()}
    )
    session.add(db_specification)
    session.commit()
    session.refresh(db_specification)
    return db_specification


def delete_agent_specification(*, session: Session, specification_id: int) -> bool:
    db_specification = session.get(AgentSpecification, specification_id)
    if not db_specification:
        return False
    session.delete(db_specification)
    session.commit()
    return True
