import pytest
from pydantic import ValidationError

from tlvideo.models.schemas import PageInfo, SearchQuery, Task


def test_video_id_dropped_until_ready():
    task = Task.model_validate({"_id": "t1", "status": "indexing", "video_id": "vid1"})
    assert task.video_id is None
    assert not task.is_done


def test_ready_task_requires_video_id():
    with pytest.raises(ValidationError):
        Task.model_validate({"_id": "t1", "status": "ready"})


def test_unrecognized_status_is_kept_verbatim():
    task = Task.model_validate({"_id": "t1", "status": "transcoding"})
    assert task.status == "transcoding"
    assert not task.is_done


def test_page_info_token():
    assert PageInfo.model_validate({"next_page_token": ""}).next_page_token is None
    assert PageInfo.model_validate({}).next_page_token is None
    assert PageInfo.model_validate({"next_page_token": "abc"}).next_page_token == "abc"


def test_search_query_is_immutable_and_serializes_by_wire_name():
    query = SearchQuery(index_id="idx1", query="cat", options=["logo"], threshold="low")

    assert query.to_body() == {
        "index_id": "idx1",
        "query": "cat",
        "search_options": ["logo"],
        "threshold": "low",
    }
    with pytest.raises(ValidationError):
        query.page_limit = 5


def test_search_query_requires_index():
    with pytest.raises(ValidationError):
        SearchQuery(index_id="", query="cat")
