"""
Tests for the per-question pipeline.
"""
import pytest

from pubg_qna.qna import QuestionProcessor, InteractionMode, QnAEventBus, SessionMetrics
from pubg_qna.qna.testing import (
    MockAnsweringService, MockSentimentService, MockSpeechService, ClearScreenRecorder
)


class RecordingAnsweringService(MockAnsweringService):
    def __init__(self, calls, answers):
        super().__init__(answers)
        self.calls = calls

    def get_answers(self, question):
        self.calls.append("answers")
        return super().get_answers(question)


class RecordingSentimentService(MockSentimentService):
    def __init__(self, calls, label="Neutral"):
        super().__init__(label)
        self.calls = calls

    def get_sentiment(self, text):
        self.calls.append("sentiment")
        return super().get_sentiment(text)


def make_processor(answers, speech=None, label="Neutral", event_bus=None):
    answering = MockAnsweringService(answers)
    sentiment = MockSentimentService(label)
    clear = ClearScreenRecorder()
    processor = QuestionProcessor(answering, sentiment, speech, event_bus=event_bus, clear_screen=clear)
    return processor, answering, sentiment, clear


def test_answers_requested_once_before_sentiment():
    calls = []
    processor = QuestionProcessor(
        RecordingAnsweringService(calls, ["a"]),
        RecordingSentimentService(calls),
        None,
        clear_screen=ClearScreenRecorder()
    )
    processor.process("How do I revive?", InteractionMode.TEXT)
    assert calls == ["answers", "sentiment"]


def test_renders_sentiment_then_each_answer_in_order(capsys):
    processor, _, _, clear = make_processor(["first", "second", "third"], label="Positive")
    result = processor.process("Best weapon?", InteractionMode.TEXT)

    lines = capsys.readouterr().out.splitlines()
    assert clear.count == 1
    assert lines == [
        ClearScreenRecorder.MARKER,
        "",
        "Sentiment: Positive",
        "Q:Best weapon?", "A:first",
        "Q:Best weapon?", "A:second",
        "Q:Best weapon?", "A:third",
    ]
    assert result.answers == ["first", "second", "third"]
    assert result.sentiment == "Positive"


def test_text_mode_never_speaks():
    speech = MockSpeechService()
    processor, _, _, _ = make_processor(["plain answer", "<speak>ssml</speak>"], speech=speech)
    processor.process("q", InteractionMode.TEXT)
    assert speech.spoken_messages == []


def test_speech_mode_speaks_plain_answer_once(capsys):
    speech = MockSpeechService()
    processor, _, _, _ = make_processor(["100 players per match"], speech=speech)
    result = processor.process("How many players?", InteractionMode.SPEECH)

    assert speech.spoken_messages == ["100 players per match"]
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["Q:How many players?", "Speaking Answer...", "A:100 players per match"]
    assert [s.completed for s in result.synthesis] == [True]


@pytest.mark.parametrize("ssml", [
    "<speak>Hello</speak>",
    '  <speak version="1.0">Hello</speak>',
    "<SPEAK>Hello</SPEAK>",
])
def test_speech_mode_skips_synthesis_for_ssml(capsys, ssml):
    speech = MockSpeechService()
    processor, _, _, _ = make_processor([ssml], speech=speech)
    processor.process("q", InteractionMode.SPEECH)

    assert speech.spoken_messages == []
    out = capsys.readouterr().out
    assert f"A:{ssml}" in out
    assert "Speaking Answer..." not in out


def test_speech_mode_mixed_answers_only_plain_spoken():
    speech = MockSpeechService()
    processor, _, _, _ = make_processor(["a", "<speak>b</speak>", "c"], speech=speech)
    processor.process("q", InteractionMode.SPEECH)
    assert speech.spoken_messages == ["a", "c"]


def test_synthesis_failure_reported_and_text_still_shown(capsys):
    speech = MockSpeechService(synthesis_ok=False)
    bus = QnAEventBus()
    metrics = SessionMetrics()
    bus.subscribe_all(metrics.handle_event)
    processor, _, _, _ = make_processor(["Use bandages"], speech=speech, event_bus=bus)

    processor.process("How do I heal?", InteractionMode.SPEECH)

    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Speech synthesis error: Canceled", "A:Use bandages"]
    assert metrics.get_metrics()["synthesis_failures"] == 1


def test_empty_answer_set(capsys):
    processor, _, sentiment, _ = make_processor([])
    result = processor.process("Unknown?", InteractionMode.TEXT)

    out = capsys.readouterr().out
    assert "Sentiment: Neutral" in out
    assert "Q:" not in out
    assert "No answers were found for your question." in out
    assert result.answers == []
    assert sentiment.texts == ["Unknown?"]


def test_question_processed_event_emitted():
    bus = QnAEventBus()
    metrics = SessionMetrics()
    bus.subscribe_all(metrics.handle_event)
    processor, _, _, _ = make_processor(["a", "b"], event_bus=bus)

    processor.process("q", InteractionMode.TEXT)

    assert metrics.get_metrics()["questions_processed"] == 1
    assert metrics.get_metrics()["answers_shown"] == 2
