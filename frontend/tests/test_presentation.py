from az204_quiz_ui.presentation import CORRECT_LABEL, INCORRECT_LABEL, build_question_view
from az204_quiz_ui.state import QuizSession


def _session(question, scripted_fetcher, selected=None, submit=False):
    session = QuizSession()
    session.load_question(scripted_fetcher(question))
    if selected:
        session.select(selected)
    if submit:
        session.submit()
    return session


def test_no_question_no_view():
    assert build_question_view(QuizSession()) is None


def test_before_selection(elastic_question, scripted_fetcher):
    view = build_question_view(_session(elastic_question, scripted_fetcher))

    assert view.topic == "App Service"
    assert view.skill_area == "Develop Azure compute solutions"
    assert [o.text for o in view.options] == elastic_question.options
    assert all(o.status == "neutral" and not o.disabled for o in view.options)
    assert view.submit_enabled is False
    assert view.show_result is False
    assert view.show_next is False


def test_single_selection(elastic_question, scripted_fetcher):
    view = build_question_view(_session(elastic_question, scripted_fetcher, selected="Shared"))

    assert [o.text for o in view.options if o.selected] == ["Shared"]
    assert [o.status for o in view.options] == ["neutral", "selected", "neutral", "neutral"]
    assert view.submit_enabled is True


def test_correct_submission(elastic_question, scripted_fetcher):
    session = _session(elastic_question, scripted_fetcher, selected="Elastic Premium", submit=True)
    view = build_question_view(session)

    assert all(o.disabled for o in view.options)
    assert [o.status for o in view.options] == ["neutral", "neutral", "neutral", "correct"]
    assert view.is_correct is True
    assert view.result_label == CORRECT_LABEL
    assert view.explanation == elastic_question.explanation
    assert view.correct_answer_text is None
    assert view.show_next is True
    assert view.submit_enabled is False
    assert (session.stats.correct, session.stats.total) == (1, 1)


def test_incorrect_submission(elastic_question, scripted_fetcher):
    session = _session(elastic_question, scripted_fetcher, selected="Free", submit=True)
    view = build_question_view(session)

    assert [o.status for o in view.options] == ["incorrect", "neutral", "neutral", "correct"]
    assert view.is_correct is False
    assert view.result_label == INCORRECT_LABEL
    assert view.correct_answer_text == "Correct Answer: Elastic Premium"
    assert view.explanation == elastic_question.explanation
    assert (session.stats.correct, session.stats.total) == (0, 1)
