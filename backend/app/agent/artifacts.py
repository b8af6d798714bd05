from pydantic import BaseModel, ConfigDict, Field

from app.models import AgentSpecificationSuggestion


class ExtractionInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = Field(min_length=1, description="Free-text description of the desired agent")


class ExtractionResult(BaseModel):
    """Artifact produced by the Specification Agent."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Short label for the agent")
    description: str = Field(description="Input description, trimmed of surrounding whitespace")
    goal: str = Field(description="One-sentence objective, always starting with 'To '")
    tools: tuple[str, ...] = Field(default=(), description="Unique tool identifiers in catalog order")
    instructions: str = Field(description="Behavioral instruction paragraph")

    def to_suggestion(self) -> AgentSpecificationSuggestion:
        return AgentSpecificationSuggestion(
            name=self.name,
            description=self.description,
            goal=self.goal,
            instructions=self.instructions,
            tools=list(self.tools),
        )
