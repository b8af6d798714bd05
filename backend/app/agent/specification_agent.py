import logging

from app.agent.artifacts import ExtractionInput, ExtractionResult
from app.agent.base import BaseAgent
from app.agent.goal_extractor import extract_goal
from app.agent.instruction_composer import compose_instructions
from app.agent.name_extractor import extract_name
from app.agent.tool_suggester import suggest_tools

logger = logging.getLogger(__name__)


class SpecificationAgent(BaseAgent[ExtractionInput, ExtractionResult]):
    """
    Agent responsible for turning a free-text description of a desired agent
    into a suggested agent specification.

    Extraction is rule based and deterministic: the same description always
    produces the same result, and no state is kept between calls.
    """

    def run(self, input_data: ExtractionInput) -> ExtractionResult:
        description = input_data.description.strip()

        tools = suggest_tools(description)
        result = ExtractionResult(
            name=extract_name(description),
            description=description,
            goal=extract_goal(description),
            tools=tools,
            instructions=compose_instructions(description, tools),
        )
        logger.debug("Extracted specification %r with tools %s", result.name, ", ".join(tools) or "-")
        return result


def process(input_data: ExtractionInput) -> ExtractionResult:
    return SpecificationAgent().run(input_data)
