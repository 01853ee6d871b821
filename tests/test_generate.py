import json

import pytest

from tlvideo.errors import NotFoundError


@pytest.mark.asyncio
async def test_text(client, api):
    api.add("POST", "/generate", (200, {"id": "gen1", "data": "A cat chases a laser pointer."}))

    result = await client.generate.text("vid1", "What happens?")

    assert result.data == "A cat chases a laser pointer."
    assert json.loads(api.requests[0].content) == {"video_id": "vid1", "prompt": "What happens?"}


@pytest.mark.asyncio
async def test_gist(client, api):
    api.add(
        "POST",
        "/gist",
        (200, {"id": "gist1", "title": "Cat vs laser", "topics": ["pets"], "hashtags": ["#cat", "#laser"]}),
    )

    result = await client.generate.gist("vid1", ["title", "topic", "hashtag"])

    assert result.title == "Cat vs laser"
    assert result.topics == ["pets"]
    assert result.hashtags == ["#cat", "#laser"]
    assert json.loads(api.requests[0].content)["types"] == ["title", "topic", "hashtag"]


@pytest.mark.asyncio
async def test_summarize_chapters(client, api):
    api.add(
        "POST",
        "/summarize",
        (
            200,
            {
                "id": "sum1",
                "chapters": [
                    {"chapter_number": 0, "start": 0, "end": 12.5, "chapter_title": "Setup"},
                    {"chapter_number": 1, "start": 12.5, "end": 30, "chapter_title": "Chase"},
                ],
            },
        ),
    )

    result = await client.generate.summarize("vid1", "chapter")

    assert [c.chapter_title for c in result.chapters] == ["Setup", "Chase"]
    assert result.summary is None
    assert json.loads(api.requests[0].content) == {"video_id": "vid1", "type": "chapter"}


@pytest.mark.asyncio
async def test_summarize_with_prompt(client, api):
    api.add("POST", "/summarize", (200, {"id": "sum2", "summary": "A short clip."}))

    result = await client.generate.summarize("vid1", "summary", prompt="One sentence.")

    assert result.summary == "A short clip."
    assert json.loads(api.requests[0].content)["prompt"] == "One sentence."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda g: g.text("", "prompt"),
        lambda g: g.text("vid1", ""),
        lambda g: g.gist("vid1", []),
        lambda g: g.gist("vid1", ["emoji"]),
        lambda g: g.summarize("vid1", "poem"),
    ],
)
async def test_invalid_arguments_fail_before_sending(client, api, call):
    with pytest.raises(ValueError):
        await call(client.generate)
    assert api.requests == []


@pytest.mark.asyncio
async def test_unknown_video(client, api):
    api.add("POST", "/generate", (404, {"code": "video_not_found", "message": "no such video"}))

    with pytest.raises(NotFoundError):
        await client.generate.text("nope", "What happens?")
