import pytest

from clover.actions import ActionKind, ActionOrchestrator, DialogState
from clover.clients import Outcome
from clover.interfaces.cli import ClassActionCLI
from clover.storage import ActionJournal

from fakes import FakeClassClient, RecordingNotifier


class ScriptedSession:
    """Stands in for a PromptSession, answering prompts from a list."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def make_cli(answers, client=None, user_id="u1", journal=None):
    client = client or FakeClassClient()
    notifier = RecordingNotifier()
    orchestrator = ActionOrchestrator(client=client, notifier=notifier)
    session = ScriptedSession(answers)
    cli = ClassActionCLI(orchestrator, journal=journal, user_id=user_id, session=session)
    return cli, client, notifier, session


@pytest.mark.asyncio
async def test_join_confirmed(tmp_path):
    journal = ActionJournal(base_path=tmp_path)
    cli, client, notifier, session = make_cli(["y"], journal=journal)

    should_exit = await cli._handle_command("/join c1 Intro to Python")

    assert should_exit is False
    assert client.calls == [("register", "u1", "c1")]
    assert notifier.successes == ["Successfully joined class!"]
    assert session.prompts == ["Yes, join? [y/n]: "]
    assert cli.orchestrator.state == DialogState.IDLE

    entries = await journal.get_recent()
    assert entries[0]["class_title"] == "Intro to Python"


@pytest.mark.asyncio
async def test_declined_action_makes_no_call():
    cli, client, notifier, _ = make_cli(["n"])

    await cli._handle_command("/leave c1")

    assert client.calls == []
    assert notifier.total == 0
    assert cli.orchestrator.state == DialogState.IDLE


@pytest.mark.asyncio
async def test_failure_offers_retry():
    client = FakeClassClient(outcome=Outcome.failed("Server busy"))
    cli, _, notifier, session = make_cli(["y", "n"], client=client)

    await cli._handle_command("/cancel c1")

    assert len(client.calls) == 1
    assert notifier.failures == ["Server busy"]
    assert session.prompts[1] == "Retry? [y/n]: "
    assert cli.orchestrator.state == DialogState.IDLE


@pytest.mark.asyncio
async def test_instructor_commands_target_student():
    cli, client, _, _ = make_cli(["y", "y"])

    await cli._handle_command("/accept c1 s9")
    await cli._handle_command("/remove c1 s9")

    assert client.calls[0][:3] == ("enrollment", "c1", "s9")
    assert client.calls[1] == ("unregister", "s9", "c1")
    assert cli.orchestrator.get_history()[1].request.is_instructor is True


@pytest.mark.asyncio
async def test_self_action_requires_user():
    cli, client, _, session = make_cli([], user_id=None)

    await cli._handle_command("/join c1")

    assert client.calls == []
    assert session.prompts == []

    await cli._handle_command("/user u7")
    assert cli.user_id == "u7"


@pytest.mark.asyncio
async def test_usage_errors_and_quit():
    cli, client, _, _ = make_cli([])

    await cli._handle_command("/accept c1")
    await cli._handle_command("/delete")
    await cli._handle_command("/unknown")

    assert client.calls == []
    assert await cli._handle_command("/quit") is True


@pytest.mark.asyncio
async def test_history_without_journal_uses_orchestrator():
    cli, _, _, _ = make_cli(["y"])

    await cli._handle_command("/delete c1 Old class")
    await cli._handle_command("/history")

    history = cli.orchestrator.get_history()
    assert history[0].request.kind is ActionKind.DELETE


@pytest.mark.asyncio
async def test_history_shows_journal_stats(tmp_path, monkeypatch):
    from rich.console import Console

    import clover.interfaces.cli as cli_module

    recorder = Console(record=True, width=120)
    monkeypatch.setattr(cli_module, "console", recorder)

    journal = ActionJournal(base_path=tmp_path)
    client = FakeClassClient(outcome=Outcome.failed("Nope"))
    cli, _, _, _ = make_cli(["y", "n", "y"], client=client, journal=journal)

    await cli._handle_command("/join c1")
    client.outcome = Outcome.ok()
    await cli._handle_command("/join c2")
    await cli._handle_command("/history")

    output = recorder.export_text()
    assert "Recent Actions" in output
    assert "Last 7 days: 2 actions, 50% succeeded" in output


def test_every_status_has_a_style():
    from clover.actions import ActionStatus
    from clover.interfaces.cli import STATUS_STYLES

    assert set(STATUS_STYLES) == {s.value for s in ActionStatus}
    assert STATUS_STYLES["timed_out"] == "red"
