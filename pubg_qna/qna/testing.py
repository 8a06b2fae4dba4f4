"""
Testing infrastructure with mock services for the QnA session.
"""
from typing import Dict, Any, Iterable, List, Optional, Sequence

from .services import AnsweringService, SentimentService, SpeechService
from .session import QnASession
from ..infrastructure.language import KnowledgeBaseAnswer
from ..infrastructure.speech import RecognitionResult, SynthesisResult


class MockAnsweringService(AnsweringService):
    """Mock answering service returning canned answers for every question."""

    def __init__(self, answers: Optional[Sequence[str]] = None,
                 answers_by_question: Optional[Dict[str, Sequence[str]]] = None,
                 error: Optional[Exception] = None):
        # Don't call super().__init__ to avoid creating a real client
        self.answers = list(answers or [])
        self.answers_by_question = dict(answers_by_question or {})
        self.error = error
        self.questions: List[str] = []

    def get_answers(self, question: str) -> List[KnowledgeBaseAnswer]:
        self.questions.append(question)
        if self.error is not None:
            raise self.error
        texts = self.answers_by_question.get(question, self.answers)
        return [
            KnowledgeBaseAnswer(answer=text, confidence=1.0 - idx * 0.1, id=idx)
            for idx, text in enumerate(texts)
        ]


class MockSentimentService(SentimentService):
    """Mock sentiment service returning a fixed label."""

    def __init__(self, label: str = "Neutral", error: Optional[Exception] = None):
        self.label = label
        self.error = error
        self.texts: List[str] = []

    def get_sentiment(self, text: str) -> str:
        self.texts.append(text)
        if self.error is not None:
            raise self.error
        return self.label


class MockSpeechService(SpeechService):
    """Mock speech service replaying scripted transcripts."""

    def __init__(self, transcripts: Iterable[Any] = (), synthesis_ok: bool = True):
        # Items are transcripts, or RecognitionResult for failures
        self.transcripts = list(transcripts)
        self.synthesis_ok = synthesis_ok
        self.spoken_messages: List[str] = []
        self.listen_calls = 0

    def listen(self) -> RecognitionResult:
        self.listen_calls += 1
        if not self.transcripts:
            # Script exhausted: leave the speech sub-loop
            return RecognitionResult(text="go back", reason="RecognizedSpeech")
        item = self.transcripts.pop(0)
        if isinstance(item, RecognitionResult):
            return item
        return RecognitionResult(text=item, reason="RecognizedSpeech")

    def speak(self, text: str) -> SynthesisResult:
        self.spoken_messages.append(text)
        if self.synthesis_ok:
            return SynthesisResult(completed=True, reason="SynthesizingAudioCompleted")
        return SynthesisResult(completed=False, reason="Canceled", detail="Error mock failure")


class ScriptedInput:
    """Callable replacement for ``input`` that replays lines, then raises EOFError."""

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.calls = 0

    def __call__(self, prompt: str = "") -> str:
        self.calls += 1
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class ClearScreenRecorder:
    """Counts screen clears and marks them in stdout."""

    MARKER = "<clear>"

    def __init__(self):
        self.count = 0

    def __call__(self) -> None:
        self.count += 1
        print(self.MARKER)


def create_mock_session_setup(lines: Iterable[str] = (),
                              answers: Optional[Sequence[str]] = None,
                              sentiment: str = "Neutral",
                              transcripts: Iterable[Any] = (),
                              synthesis_ok: bool = True) -> Dict[str, Any]:
    """Create a complete mock session for testing."""
    answering = MockAnsweringService(answers if answers is not None else ["100 players per match"])
    sentiment_service = MockSentimentService(sentiment)
    speech = MockSpeechService(transcripts, synthesis_ok=synthesis_ok)
    scripted_input = ScriptedInput(lines)
    clear_screen = ClearScreenRecorder()

    session = QnASession(
        answering,
        sentiment_service,
        speech,
        input_func=scripted_input,
        clear_screen=clear_screen
    )

    return {
        "session": session,
        "answering_service": answering,
        "sentiment_service": sentiment_service,
        "speech_service": speech,
        "input": scripted_input,
        "clear_screen": clear_screen
    }
