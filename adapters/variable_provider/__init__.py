from .http_provider import HttpVariableProvider
from .mapping_provider import MappingVariableProvider
from .prompt_provider import PromptVariableProvider
from .recording_provider import RecordingVariableProvider

__all__ = [
    "HttpVariableProvider",
    "MappingVariableProvider",
    "PromptVariableProvider",
    "RecordingVariableProvider",
]
