import pytest

from models.events import Action, Button, ButtonPress, Command, Keyboard, Reply, TextReply
from models.session import Mode, Session
from utils import texts


@pytest.mark.asyncio
async def test_save_flow_returns_to_idle(dispatcher, sessions, repo):
    replies = await dispatcher.dispatch(1, Command(Action.SAVE))
    assert replies == [Reply(texts.PROMPT_SAVE)]
    assert sessions.get(1).mode is Mode.AWAITING_SAVE_INPUT

    replies = await dispatcher.dispatch(1, TextReply("mylink https://example.com"))
    assert replies == [Reply(texts.SAVE_OK.format(id=1))]
    assert sessions.get(1).is_idle
    assert len(repo.links) == 1


@pytest.mark.asyncio
async def test_failed_save_still_returns_to_idle(dispatcher, sessions, repo, store_error):
    repo.fail_with = store_error
    await dispatcher.dispatch(1, ButtonPress(Button.SAVE))
    replies = await dispatcher.dispatch(1, TextReply("mylink https://example.com"))

    assert replies == [Reply(texts.SAVE_FAILED)]
    assert sessions.get(1).is_idle


@pytest.mark.asyncio
async def test_invalid_save_returns_to_idle(dispatcher, sessions):
    await dispatcher.dispatch(1, Command(Action.SAVE))
    replies = await dispatcher.dispatch(1, TextReply("onlyoneword"))

    assert replies == [Reply(texts.PROMPT_SAVE)]
    assert sessions.get(1).is_idle


@pytest.mark.asyncio
async def test_delete_and_get_flows(dispatcher, sessions, repo):
    await dispatcher.dispatch(2, Command(Action.SAVE))
    await dispatcher.dispatch(2, TextReply("theirs https://example.com"))

    await dispatcher.dispatch(1, Command(Action.DELETE))
    replies = await dispatcher.dispatch(1, TextReply("1"))
    assert replies == [Reply(texts.DELETE_FORBIDDEN)]
    assert sessions.get(1).is_idle
    assert 1 in repo.links

    await dispatcher.dispatch(1, Command(Action.GET))
    replies = await dispatcher.dispatch(1, TextReply("1"))
    assert replies == [Reply(texts.GET_OK.format(url="https://example.com"))]
    assert sessions.get(1).is_idle

    await dispatcher.dispatch(1, ButtonPress(Button.GET))
    replies = await dispatcher.dispatch(1, TextReply("999"))
    assert replies == [Reply(texts.NOT_FOUND)]


@pytest.mark.asyncio
async def test_list_browsing_keeps_page(dispatcher, sessions, service):
    for i in range(7):
        await service.save(1, f"l{i} https://example.com/{i}")

    replies = await dispatcher.dispatch(1, Command(Action.LIST))
    assert replies[0].keyboard is Keyboard.PAGING
    assert sessions.get(1) == Session.browsing(1)

    replies = await dispatcher.dispatch(1, ButtonPress(Button.NEXT))
    assert "ID: 6\n" in replies[0].text
    assert sessions.get(1) == Session.browsing(2)

    replies = await dispatcher.dispatch(1, ButtonPress(Button.NEXT))
    assert replies == [Reply(texts.LIST_EMPTY)]
    assert sessions.get(1) == Session.browsing(3)

    await dispatcher.dispatch(1, ButtonPress(Button.PREV))
    await dispatcher.dispatch(1, ButtonPress(Button.PREV))
    await dispatcher.dispatch(1, ButtonPress(Button.PREV))
    assert sessions.get(1) == Session.browsing(1)


@pytest.mark.asyncio
async def test_new_command_overrides_pending_prompt(dispatcher, sessions, repo):
    await dispatcher.dispatch(1, Command(Action.DELETE))
    await dispatcher.dispatch(1, Command(Action.SAVE))
    replies = await dispatcher.dispatch(1, TextReply("n https://example.com"))

    assert replies == [Reply(texts.SAVE_OK.format(id=1))]
    assert "delete_by_id" not in repo.calls


@pytest.mark.asyncio
async def test_idle_text_is_unknown(dispatcher, sessions, repo):
    replies = await dispatcher.dispatch(1, TextReply("hello"))
    assert replies == [Reply(texts.UNKNOWN_COMMAND)]
    assert sessions.get(1).is_idle
    assert repo.calls == []


@pytest.mark.asyncio
async def test_paging_without_list_is_silent(dispatcher, repo):
    assert await dispatcher.dispatch(1, ButtonPress(Button.NEXT)) == []
    assert repo.calls == []


@pytest.mark.asyncio
async def test_sessions_do_not_leak_between_users(dispatcher, sessions):
    await dispatcher.dispatch(1, Command(Action.SAVE))
    replies = await dispatcher.dispatch(2, TextReply("mylink https://example.com"))

    assert replies == [Reply(texts.UNKNOWN_COMMAND)]
    assert sessions.get(1).mode is Mode.AWAITING_SAVE_INPUT
