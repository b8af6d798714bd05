import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from app import crud
from app.agent.artifacts import ExtractionInput
from app.agent.specification_agent import SpecificationAgent
from app.api.deps import SessionDep
from app.models import (
    AgentSpecificationCreate,
    AgentSpecificationPublic,
    AgentSpecificationsPublic,
    AgentSpecificationSuggestion,
    AgentSpecificationUpdate,
    Message,
    NaturalLanguageRequest,
)

router = APIRouter(prefix="/agent-specifications", tags=["agent-specifications"])
logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Agent specification not found"


@router.post("/process-natural-language", response_model=AgentSpecificationSuggestion)
def process_natural_language(request_in: NaturalLanguageRequest) -> Any:
    """
    Suggest a structured agent specification from a free-text description.
    Nothing is persisted.
    """
    result = SpecificationAgent().run(ExtractionInput(description=request_in.description))
    return result.to_suggestion()


@router.post("/", response_model=AgentSpecificationPublic)
def create_agent_specification(
    *, session: SessionDep, specification_in: AgentSpecificationCreate
) -> Any:
    specification = crud.create_agent_specification(
        session=session, specification_in=specification_in
    )
    logger.info("Created agent specification %s (%s)", specification.id, specification.name)
    return specification


@router.get("/", response_model=AgentSpecificationsPublic)
def read_agent_specifications(session: SessionDep, skip: int = 0, limit: int = 100) -> Any:
    """
    Retrieve agent specifications, oldest first.
    """
    specifications, count = crud.get_agent_specifications(
        session=session, skip=skip, limit=limit
    )
    return AgentSpecificationsPublic(data=specifications, count=count)


@router.get("/{id}", response_model=AgentSpecificationPublic)
def read_agent_specification(session: SessionDep, id: int) -> Any:
    specification = crud.get_agent_specification(session=session, specification_id=id)
    if not specification:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    return specification


@router.patch("/{id}", response_model=AgentSpecificationPublic)
def update_agent_specification(
    *, session: SessionDep, id: int, specification_in: AgentSpecificationUpdate
) -> Any:
    specification = crud.update_agent_specification(
        session=session, specification_id=id, specification_in=specification_in
    )
    if not specification:
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    logger.info("Updated agent specification %s", id)
    return specification


@router.delete("/{id}")
def delete_agent_specification(session: SessionDep, id: int) -> Message:
    if not crud.delete_agent_specification(session=session, specification_id=id):
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)
    logger.info("Deleted agent specification %s", id)
    return Message(message="Agent specification deleted successfully")
