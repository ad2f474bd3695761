from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict


class ToolDefinition(BaseModel):
    """
    Represents one operation offered at the protocol boundary.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        parameters: The JSON schema of the tool's input, as sent to clients.
        args_model: Pydantic model used to extract the tool's arguments.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Dict[str, Any]
    args_model: Type[BaseModel]
