from tlvideo.resources.engines import EngineResource
from tlvideo.resources.generate import GenerateResource
from tlvideo.resources.indexes import IndexResource
from tlvideo.resources.search import SearchResource
from tlvideo.resources.tasks import TaskResource

__all__ = [
    "EngineResource",
    "GenerateResource",
    "IndexResource",
    "SearchResource",
    "TaskResource",
]
