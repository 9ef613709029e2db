"""Tests for the host driver: platform ordering across both screens."""

import pytest

from controllers.navigation_dispatcher import NavigationDispatcher
from models.errors import UnresolvedMessageError
from models.navigation import TargetedMessage
from models.screen_state import ScreenState


def open_second(host, text="Olá da MainActivity!"):
    host.submit(TargetedMessage("Second", {"message": text}))


class TestLaunch:
    def test_launch_runs_create_start_resume(self, host, diagnostics):
        main = host.launch("Main")

        assert main.state is ScreenState.RESUMED
        assert main.text == "Estado: Retomado"
        assert diagnostics == [
            "MainActivity: onCreate chamado",
            "MainActivity: onStart chamado",
            "MainActivity: onResume chamado",
        ]

    def test_launch_twice_is_an_error(self, host):
        host.launch("Main")

        with pytest.raises(RuntimeError):
            host.launch("Main")

    def test_unknown_screen(self, host):
        with pytest.raises(UnresolvedMessageError):
            host.launch("Nowhere")

    def test_screen_shown_signal(self, host):
        shown = []
        host.screen_shown.connect(shown.append)

        main = host.launch("Main")

        assert shown == [main]


class TestExplicitNavigation:
    def test_platform_order(self, host, diagnostics):
        host.launch("Main")
        diagnostics.clear()

        open_second(host)

        assert diagnostics == [
            "MainActivity: onPause chamado",
            "SecondActivity: onCreate chamado",
            "SecondActivity: onStart chamado",
            "SecondActivity: onResume chamado",
            "MainActivity: onStop chamado",
        ]
        main, second = host.screens
        assert main.state is ScreenState.STOPPED
        assert main.text == "Estado: Parado"
        assert second.text == "Olá da MainActivity!"

    def test_unknown_destination_leaves_main_running(self, host):
        main = host.launch("Main")

        with pytest.raises(UnresolvedMessageError):
            host.submit(TargetedMessage("Nowhere", {}))

        assert main.state is ScreenState.RESUMED
        assert host.screens == (main,)

    def test_stack_is_limited_to_two_screens(self, host):
        host.launch("Main")
        open_second(host)

        with pytest.raises(RuntimeError):
            open_second(host)

    def test_targeting_the_screen_below_goes_back(self, host):
        main = host.launch("Main")
        open_second(host)

        host.submit(TargetedMessage("Main", {}))

        assert host.screens == (main,)
        assert main.state is ScreenState.RESUMED


class TestBack:
    def test_back_restarts_main_and_destroys_second(self, host, diagnostics):
        main = host.launch("Main")
        open_second(host)
        second = host.top
        diagnostics.clear()

        assert host.back() is True

        assert diagnostics == [
            "SecondActivity: onPause chamado",
            "MainActivity: onStart chamado",
            "MainActivity: onResume chamado",
            "SecondActivity: onStop chamado",
            "SecondActivity: onDestroy chamado",
        ]
        assert host.top is main
        assert main.text == "Estado: Retomado"
        assert second.state is ScreenState.DESTROYED

    def test_back_on_single_screen_is_noop(self, host):
        main = host.launch("Main")

        assert host.back() is False
        assert main.state is ScreenState.RESUMED


class TestRecreate:
    def test_main_screen_recreation(self, host, created_screens, diagnostics):
        old = host.launch("Main")
        texts = []
        host.screen_recreated.connect(lambda o, n: texts.append((o, n)))
        diagnostics.clear()

        new = host.recreate()

        assert new is not old
        assert texts == [(old, new)]
        assert old.state is ScreenState.DESTROYED
        assert new.history == (ScreenState.CREATED, ScreenState.STARTED, ScreenState.RESUMED)
        assert diagnostics == [
            "MainActivity: onPause chamado",
            "MainActivity: onStop chamado",
            "MainActivity: onSaveInstanceState chamado",
            "MainActivity: onDestroy chamado",
            "MainActivity: onCreate chamado",
            "MainActivity: onStart chamado",
            "MainActivity: onRestoreInstanceState chamado",
            "MainActivity: onResume chamado",
        ]

    def test_restored_text_reaches_sink_before_resume(self, host, created_screens):
        host.launch("Main")
        emitted = []
        factory = host._factories["Main"]

        def recording_factory(message):
            c = factory(message)
            c.text_changed.connect(emitted.append)
            return c

        host.register("Main", recording_factory)
        host.recreate()

        assert emitted == ["Estado: Parado", "Estado: Iniciado", "Estado: Parado", "Estado: Retomado"]

    def test_second_screen_gets_its_message_again(self, host):
        host.launch("Main")
        open_second(host, "mensagem")

        new = host.recreate()

        assert new.text == "mensagem"
        assert new.state is ScreenState.RESUMED

    def test_recreate_with_nothing_running(self, host):
        assert host.recreate() is None


class TestBackgroundAndFinish:
    def test_background_and_foreground(self, host):
        main = host.launch("Main")

        host.move_to_background()
        assert main.state is ScreenState.STOPPED
        assert not host.in_foreground

        host.move_to_foreground()
        assert main.state is ScreenState.RESUMED
        assert main.history[-2:] == (ScreenState.STARTED, ScreenState.RESUMED)

    def test_action_pauses_and_resumes_current(self, host):
        host.resolver.register("dial", lambda m: None)
        main = host.launch("Main")

        NavigationDispatcher(host, log_callback=lambda _: None).dial("tel:1")

        assert main.history[-2:] == (ScreenState.PAUSED, ScreenState.RESUMED)

    def test_finish_all_tears_down_top_first(self, host, diagnostics):
        main = host.launch("Main")
        open_second(host)
        second = host.top
        diagnostics.clear()

        host.finish_all()

        assert host.screens == ()
        assert second.state is ScreenState.DESTROYED
        assert main.state is ScreenState.DESTROYED
        assert diagnostics == [
            "SecondActivity: onPause chamado",
            "SecondActivity: onStop chamado",
            "SecondActivity: onDestroy chamado",
            "MainActivity: onDestroy chamado",
        ]

    def test_finish_all_reports_each_finished_screen(self, host):
        main = host.launch("Main")
        open_second(host)
        second = host.top
        finished = []
        host.screen_finished.connect(finished.append)

        host.finish_all()

        assert finished == [second, main]

    def test_back_while_in_background_keeps_main_stopped(self, host):
        main = host.launch("Main")
        open_second(host, "oi")
        second = host.top
        host.move_to_background()

        assert host.back() is True

        assert main.state is ScreenState.STOPPED
        assert second.state is ScreenState.DESTROYED
        assert host.top is main
        assert not host.in_foreground

        host.move_to_foreground()

        assert main.state is ScreenState.RESUMED
        assert main.history[-2:] == (ScreenState.STARTED, ScreenState.RESUMED)


class TestSignals:
    def test_screen_created_fires_before_create(self, host):
        seen = []
        host.screen_created.connect(lambda c: seen.append((c.name, c.state)))

        host.launch("Main")
        open_second(host)

        assert seen == [("Main", None), ("Second", None)]

    def test_back_and_recreate_report_finished_screens(self, host):
        finished = []
        host.screen_finished.connect(finished.append)
        host.launch("Main")
        open_second(host)
        second = host.top

        host.back()
        old_main = host.top
        host.recreate()

        assert finished == [second, old_main]
