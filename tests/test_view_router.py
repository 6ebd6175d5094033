# tests/test_view_router.py

import pytest
from PySide6.QtWidgets import QStackedWidget, QWidget

from mockmaster.core.models import Difficulty, ViewState
from mockmaster.core.services.session_controller import QuizSessionController
from mockmaster.ui.view_router import ViewRouter


@pytest.fixture
def controller(qt_app, fake_generator, run_now):
    return QuizSessionController(generator=fake_generator, launcher=run_now)


@pytest.fixture
def routed(controller):
    stack = QStackedWidget()
    pages = {view: QWidget() for view in ViewState}
    router = ViewRouter(controller, stack, pages)
    yield router, stack, pages
    stack.deleteLater()


class TestViewRouter:
    """Screen selection follows the controller"""

    def test_starts_on_setup(self, routed):
        router, stack, pages = routed
        assert router.current_view() == ViewState.SETUP
        assert stack.currentWidget() is pages[ViewState.SETUP]

    def test_follows_full_session_cycle(self, controller, routed):
        router, stack, pages = routed

        controller.start_quiz("Photosynthesis", Difficulty.MEDIUM, 5)
        assert stack.currentWidget() is pages[ViewState.ACTIVE]

        controller.finish()
        assert stack.currentWidget() is pages[ViewState.RESULT]

        controller.retry()
        assert stack.currentWidget() is pages[ViewState.ACTIVE]

        controller.reset()
        assert stack.currentWidget() is pages[ViewState.SETUP]

    def test_failed_generation_stays_on_setup(self, qt_app, failing_generator, run_now):
        controller = QuizSessionController(generator=failing_generator, launcher=run_now)
        stack = QStackedWidget()
        pages = {view: QWidget() for view in ViewState}
        router = ViewRouter(controller, stack, pages)

        controller.start_quiz("Photosynthesis", Difficulty.MEDIUM, 5)

        assert router.current_view() == ViewState.SETUP

    def test_every_view_needs_a_page(self, controller):
        with pytest.raises(ValueError):
            ViewRouter(controller, QStackedWidget(), {ViewState.SETUP: QWidget()})
