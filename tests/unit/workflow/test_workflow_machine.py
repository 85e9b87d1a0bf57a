"""Tests for the workflow state machine.

Drives full sessions against temporary directories with a recording
executor, covering routing per action, quitting, and failure handling.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from lazyfileops.errors import ListingError
from lazyfileops.file_listing import DirectoryEntry, absolute_path, list_directory
from lazyfileops.workflow import (
    ActionKind,
    EventKind,
    ExecutionOutcome,
    NO_SELECTION_MESSAGE,
    QuitSession,
    RunExecution,
    ScheduleQuit,
    Screen,
    WorkflowContext,
    WorkflowMachine,
    initial_context,
    selected_paths,
)


class _RecordingExecutor:
    def __init__(self, outcome: ExecutionOutcome | None = None) -> None:
        self.calls: list[tuple[ActionKind, tuple[Path, ...], Path | None]] = []
        self.outcome = outcome or ExecutionOutcome(succeeded=True, message="", output="")

    def run(self, action, sources, destination) -> ExecutionOutcome:
        self.calls.append((action, tuple(sources), destination))
        return self.outcome


def _drive(machine: WorkflowMachine, context: WorkflowContext, *events: EventKind) -> WorkflowContext:
    for event in events:
        transition = machine.handle(context, event)
        context = transition.context
        if any(isinstance(effect, RunExecution) for effect in transition.effects):
            context = machine.execute(context).context
    return context


def _choose(action: ActionKind) -> tuple[EventKind, ...]:
    return (EventKind.DOWN,) * [ActionKind.COPY, ActionKind.MOVE, ActionKind.REMOVE].index(action) + (
        EventKind.CONFIRM,
    )


class WorkflowMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = absolute_path(self._tmp.name)
        (self.root / "dest").mkdir()
        (self.root / "src").mkdir()
        (self.root / "src" / "a.txt").write_text("a", encoding="utf-8")
        (self.root / "src" / "b.txt").write_text("b", encoding="utf-8")
        self.executor = _RecordingExecutor()
        self.machine = WorkflowMachine(list_directory, self.executor, result_delay_seconds=2.0)
        self.context = initial_context(self.root)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_initial_context_starts_on_action_screen(self) -> None:
        self.assertIs(self.context.screen, Screen.CHOOSE_ACTION)
        self.assertIsNone(self.context.action)
        self.assertIsNone(self.context.destination_path)

    def test_choosing_action_lists_start_directory(self) -> None:
        context = _drive(self.machine, self.context, *_choose(ActionKind.MOVE))

        self.assertIs(context.screen, Screen.CHOOSE_SOURCES)
        self.assertIs(context.action, ActionKind.MOVE)
        self.assertEqual(context.source_nav.current_path, self.root)
        self.assertEqual([entry.name for entry in context.source_nav.entries], ["dest", "src"])

    def test_action_cursor_is_clamped_to_three_choices(self) -> None:
        context = _drive(self.machine, self.context, EventKind.UP, EventKind.DOWN, EventKind.DOWN, EventKind.DOWN)

        self.assertEqual(context.action_cursor, 2)

    def test_handle_does_not_mutate_input_context(self) -> None:
        before = self.context
        transition = self.machine.handle(before, EventKind.CONFIRM)

        self.assertIs(before.screen, Screen.CHOOSE_ACTION)
        self.assertIsNot(transition.context, before)

    def test_copy_end_to_end_runs_executor_once_with_selected_file(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.COPY),
            EventKind.DOWN,
            EventKind.OPEN,
            EventKind.TOGGLE,
            EventKind.ADVANCE,
        )
        self.assertIs(context.screen, Screen.CHOOSE_DESTINATION)
        self.assertIsNone(context.destination_path)

        context = _drive(self.machine, context, EventKind.OPEN, EventKind.ADVANCE)

        self.assertEqual(
            self.executor.calls,
            [(ActionKind.COPY, (self.root / "src" / "a.txt",), self.root / "dest")],
        )
        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertEqual(context.destination_path, self.root / "dest")
        self.assertTrue(context.outcome.succeeded)

    def test_destination_navigation_restarts_at_start_directory(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.MOVE),
            EventKind.DOWN,
            EventKind.OPEN,
            EventKind.TOGGLE,
            EventKind.ADVANCE,
        )

        self.assertEqual(context.source_nav.current_path, self.root / "src")
        self.assertEqual(context.dest_nav.current_path, self.root)
        self.assertEqual(context.dest_nav.cursor, 0)

    def test_selection_survives_descend_and_ascend(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.COPY),
            EventKind.DOWN,
            EventKind.TOGGLE,
            EventKind.UP,
            EventKind.OPEN,
            EventKind.BACK,
        )

        self.assertEqual(context.source_nav.current_path, self.root)
        self.assertEqual(selected_paths(context.selection), (self.root / "src",))

    def test_toggle_is_ignored_on_destination_screen(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.COPY),
            EventKind.TOGGLE,
            EventKind.ADVANCE,
            EventKind.DOWN,
            EventKind.TOGGLE,
        )

        self.assertIs(context.screen, Screen.CHOOSE_DESTINATION)
        self.assertEqual(selected_paths(context.selection), (self.root / "dest",))

    def test_open_on_file_entry_is_noop(self) -> None:
        context = _drive(self.machine, self.context, *_choose(ActionKind.COPY), EventKind.DOWN, EventKind.OPEN)
        self.assertEqual(context.source_nav.current_path, self.root / "src")
        self.assertEqual(context.source_nav.entries[0].name, "a.txt")

        self.assertIs(_drive(self.machine, context, EventKind.OPEN), context)

    def test_remove_always_routes_through_confirmation(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.REMOVE),
            EventKind.DOWN,
            EventKind.OPEN,
            EventKind.TOGGLE,
        )

        transition = self.machine.handle(context, EventKind.ADVANCE)

        self.assertIs(transition.context.screen, Screen.CONFIRM_REMOVAL)
        self.assertEqual(transition.effects, ())
        self.assertEqual(self.executor.calls, [])

    def test_remove_confirmed_runs_executor_without_destination(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.REMOVE),
            EventKind.DOWN,
            EventKind.OPEN,
            EventKind.DOWN,
            EventKind.TOGGLE,
            EventKind.ADVANCE,
            EventKind.CONFIRM,
        )

        self.assertEqual(self.executor.calls, [(ActionKind.REMOVE, (self.root / "src" / "b.txt",), None)])
        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertIsNone(context.destination_path)

    def test_quit_on_confirm_removal_skips_executor(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.REMOVE),
            EventKind.DOWN,
            EventKind.OPEN,
            EventKind.TOGGLE,
            EventKind.ADVANCE,
        )

        transition = self.machine.handle(context, EventKind.QUIT)

        self.assertTrue(transition.context.finished)
        self.assertEqual(transition.effects, (QuitSession(),))
        self.assertEqual(self.executor.calls, [])

    def test_quit_from_every_interactive_screen_never_executes(self) -> None:
        paths = {
            Screen.CHOOSE_ACTION: (),
            Screen.CHOOSE_SOURCES: _choose(ActionKind.COPY),
            Screen.CHOOSE_DESTINATION: (*_choose(ActionKind.COPY), EventKind.TOGGLE, EventKind.ADVANCE),
            Screen.CONFIRM_REMOVAL: (*_choose(ActionKind.REMOVE), EventKind.TOGGLE, EventKind.ADVANCE),
        }
        for screen, events in paths.items():
            with self.subTest(screen=screen):
                context = _drive(self.machine, self.context, *events)
                self.assertIs(context.screen, screen)

                context = _drive(self.machine, context, EventKind.QUIT)

                self.assertTrue(context.finished)
                self.assertIs(context.screen, screen)
        self.assertEqual(self.executor.calls, [])

    def test_copy_without_selection_goes_straight_to_result(self) -> None:
        context = _drive(self.machine, self.context, *_choose(ActionKind.COPY))

        transition = self.machine.handle(context, EventKind.ADVANCE)
        context = transition.context

        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertIsNone(context.dest_nav)
        self.assertEqual(transition.effects, (ScheduleQuit(2.0),))
        self.assertEqual(context.outcome.message, NO_SELECTION_MESSAGE)
        self.assertFalse(context.outcome.succeeded)
        self.assertEqual(self.executor.calls, [])

    def test_remove_without_selection_confirms_then_reports_nothing_selected(self) -> None:
        context = _drive(
            self.machine,
            self.context,
            *_choose(ActionKind.REMOVE),
            EventKind.ADVANCE,
        )
        self.assertIs(context.screen, Screen.CONFIRM_REMOVAL)

        context = _drive(self.machine, context, EventKind.CONFIRM)

        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertEqual(context.outcome.message, NO_SELECTION_MESSAGE)
        self.assertEqual(self.executor.calls, [])

    def test_entering_execution_emits_run_effect_then_scheduled_quit(self) -> None:
        context = _drive(self.machine, self.context, *_choose(ActionKind.COPY), EventKind.TOGGLE, EventKind.ADVANCE)

        entering = self.machine.handle(context, EventKind.ADVANCE)
        self.assertIs(entering.context.screen, Screen.EXECUTING)
        self.assertEqual(entering.effects, (RunExecution(),))

        finished = self.machine.execute(entering.context)
        self.assertIs(finished.context.screen, Screen.SHOW_RESULT)
        self.assertEqual(finished.effects, (ScheduleQuit(2.0),))

    def test_execute_outside_executing_screen_is_noop(self) -> None:
        transition = self.machine.execute(self.context)

        self.assertIs(transition.context, self.context)
        self.assertEqual(self.executor.calls, [])

    def test_failed_execution_outcome_is_kept_verbatim(self) -> None:
        failure = ExecutionOutcome(succeeded=False, message="exit status 1", output="cp: cannot stat 'x'\n")
        machine = WorkflowMachine(list_directory, _RecordingExecutor(failure))

        context = _drive(
            machine,
            self.context,
            *_choose(ActionKind.COPY),
            EventKind.TOGGLE,
            EventKind.ADVANCE,
            EventKind.ADVANCE,
        )

        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertEqual(context.outcome, failure)

    def test_any_input_or_timeout_on_result_screen_finishes_session(self) -> None:
        context = _drive(self.machine, self.context, *_choose(ActionKind.COPY), EventKind.ADVANCE)
        self.assertIs(context.screen, Screen.SHOW_RESULT)

        for event in (EventKind.TIMEOUT, EventKind.UP, EventKind.TOGGLE, EventKind.QUIT):
            with self.subTest(event=event):
                transition = self.machine.handle(context, event)
                self.assertTrue(transition.context.finished)
                self.assertEqual(transition.effects, (QuitSession(),))

    def test_finished_context_ignores_further_events(self) -> None:
        context = _drive(self.machine, self.context, EventKind.QUIT)

        transition = self.machine.handle(context, EventKind.CONFIRM)

        self.assertIs(transition.context, context)
        self.assertEqual(transition.effects, ())


class _FailingLister:
    def __init__(self, readable: dict[Path, tuple[DirectoryEntry, ...]]) -> None:
        self.readable = readable

    def __call__(self, path: Path) -> tuple[DirectoryEntry, ...]:
        if path not in self.readable:
            raise ListingError(path, "Permission denied")
        return self.readable[path]


class WorkflowListingFailureTests(unittest.TestCase):
    def test_unreadable_start_directory_ends_on_result_screen(self) -> None:
        executor = _RecordingExecutor()
        machine = WorkflowMachine(_FailingLister({}), executor, result_delay_seconds=1.5)

        transition = machine.handle(initial_context(Path("/locked")), EventKind.CONFIRM)

        self.assertIs(transition.context.screen, Screen.SHOW_RESULT)
        self.assertFalse(transition.context.outcome.succeeded)
        self.assertIn("Permission denied", transition.context.outcome.message)
        self.assertEqual(transition.effects, (ScheduleQuit(1.5),))
        self.assertEqual(executor.calls, [])

    def test_unreadable_subdirectory_is_session_fatal(self) -> None:
        lister = _FailingLister({Path("/data"): (DirectoryEntry("private", True),)})
        machine = WorkflowMachine(lister, _RecordingExecutor())
        context = _drive(machine, initial_context(Path("/data")), EventKind.CONFIRM)

        context = _drive(machine, context, EventKind.OPEN)

        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertIn("/data/private", context.outcome.message)

    def test_destination_listing_failure_routes_to_result(self) -> None:
        lister = _FailingLister({Path("/data"): (DirectoryEntry("a.txt", False, 1),)})
        machine = WorkflowMachine(lister, _RecordingExecutor())
        context = _drive(machine, initial_context(Path("/data")), EventKind.CONFIRM, EventKind.TOGGLE)
        lister.readable.clear()

        context = _drive(machine, context, EventKind.ADVANCE)

        self.assertIs(context.screen, Screen.SHOW_RESULT)
        self.assertIsNone(context.destination_path)
        self.assertFalse(context.outcome.succeeded)


if __name__ == "__main__":
    unittest.main()
