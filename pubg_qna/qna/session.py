"""
Menu-driven QnA session: the main loop and its text and speech sub-loops.
"""
import time
import logging
from typing import Callable, Optional

from .models import InteractionMode
from .processor import QuestionProcessor
from .services import AnsweringService, SentimentService, SpeechService
from .events import (
    QnAEventBus, EventLogger, SessionMetrics,
    SessionStartedEvent, ModeEnteredEvent, RecognitionFailedEvent,
    ErrorOccurredEvent, SessionEndedEvent
)
from ..config import Config, WELCOME_MESSAGE, BACK_COMMAND, ESCAPE_PHRASES, PROJECT_NAME
from ..errors import ServiceRequestError
from ..utils import clear_screen as default_clear_screen

logger = logging.getLogger("qna_session")

MENU_TEXT_CHOICE = "1"
MENU_SPEECH_CHOICE = "2"
MENU_QUIT_CHOICE = "3"


def is_back_command(text: str) -> bool:
    """True if typed input asks to leave the text sub-loop."""
    return text.strip().lower() == BACK_COMMAND


def is_go_back_phrase(phrase: str) -> bool:
    """True if a transcript contains one of the spoken escape phrases."""
    lowered = phrase.lower()
    return any(escape in lowered for escape in ESCAPE_PHRASES)


class QnASession:
    """
    Interactive question and answer session.

    States are the main menu, the text sub-loop and the speech sub-loop.
    Both sub-loops only ever return to the main menu, and quitting from the
    menu ends the session.
    """

    def __init__(self,
                 answering_service: AnsweringService,
                 sentiment_service: SentimentService,
                 speech_service: Optional[SpeechService] = None,
                 project_name: str = PROJECT_NAME,
                 input_func: Callable[[], str] = input,
                 clear_screen: Callable[[], None] = default_clear_screen):
        self.session_id = f"session_{int(time.time())}"
        self.project_name = project_name
        self.speech_service = speech_service
        self.input_func = input_func
        self.clear_screen = clear_screen

        self.event_bus = QnAEventBus()
        self.event_logger = EventLogger()
        self.metrics = SessionMetrics()
        self.event_bus.subscribe_all(self.event_logger.handle_event)
        self.event_bus.subscribe_all(self.metrics.handle_event)

        self.processor = QuestionProcessor(
            answering_service,
            sentiment_service,
            speech_service,
            event_bus=self.event_bus,
            session_id=self.session_id,
            clear_screen=clear_screen
        )

    @classmethod
    def from_config(cls, config: Config) -> "QnASession":
        """Build a session wired to the hosted services described by ``config``."""
        from ..infrastructure.language import QuestionAnsweringClient, KnowledgeBaseProject, TextAnalyticsClient
        from ..infrastructure.speech import create_speech_config

        qa_client = QuestionAnsweringClient(
            config.language_endpoint, config.language_key, timeout=config.http_timeout
        )
        project = KnowledgeBaseProject(config.project_name, config.deployment_name)
        text_client = TextAnalyticsClient(
            config.text_analytics_endpoint,
            config.text_analytics_key,
            language=config.text_analytics_language,
            timeout=config.http_timeout
        )

        speech_config = create_speech_config(config.speech_key, config.speech_location, config.tts_voice)
        print(f"Ready to use speech service in {config.speech_location}")

        return cls(
            AnsweringService(qa_client, project),
            SentimentService(text_client),
            SpeechService(speech_config),
            project_name=config.project_name
        )

    def run(self) -> None:
        """Show the main menu until the user quits."""
        self.event_bus.emit(SessionStartedEvent(self.session_id, time.time(), self.project_name))
        logger.info(f"Session {self.session_id} started")

        try:
            while True:
                self.clear_screen()
                print(WELCOME_MESSAGE)
                print()
                print("Choose an option: ")
                print("1. Ask a question using text.")
                print("2. Ask a question using speech.")
                print("3. Quit")

                choice = self._read_line()
                if choice is None:
                    choice = MENU_QUIT_CHOICE
                choice = choice.strip()

                if choice == MENU_TEXT_CHOICE:
                    self.ask_using_text()
                elif choice == MENU_SPEECH_CHOICE:
                    self.ask_using_speech()
                elif choice == MENU_QUIT_CHOICE:
                    print("Exiting the QnA application...")
                    return
                else:
                    logger.debug(f"Invalid menu choice: {choice!r}")
                    print("Invalid choice. Please select a valid option.")
        finally:
            metrics = self.metrics.get_metrics()
            self.event_bus.emit(SessionEndedEvent(
                self.session_id, time.time(), metrics["questions_processed"]
            ))
            logger.info(f"Session metrics: {metrics}")

    def ask_using_text(self) -> None:
        """Text sub-loop. Returns to the menu on ``back``."""
        self._enter_mode(InteractionMode.TEXT)
        while True:
            print()
            print("Enter your question (type 'back' to go back to menu): ")
            question = self._read_line()

            if question is None or is_back_command(question):
                return
            if not question.strip():
                continue

            self._handle_question(question, InteractionMode.TEXT)

    def ask_using_speech(self) -> None:
        """Speech sub-loop. Returns to the menu when an escape phrase is heard."""
        if self.speech_service is None:
            print("Speech is not available in this session.")
            return

        self._enter_mode(InteractionMode.SPEECH)
        while True:
            print("Speak your question (or say 'go back' to return to the menu).")
            recognition = self.speech_service.listen()

            if not recognition.succeeded:
                print(f"Speech recognition error: {recognition.reason}")
                self.event_bus.emit(RecognitionFailedEvent(
                    self.session_id, time.time(), recognition.reason, recognition.detail
                ))
                continue

            question = recognition.text
            if is_go_back_phrase(question):
                print("Going back to the menu...")
                return
            if not question.strip():
                logger.info("Recognized speech was empty, asking again")
                continue

            self._handle_question(question, InteractionMode.SPEECH)

    def get_metrics(self):
        """Get current session metrics."""
        return self.metrics.get_metrics()

    def _handle_question(self, question: str, mode: InteractionMode) -> None:
        try:
            self.processor.process(question, mode)
        except ServiceRequestError as e:
            logger.error("Question processing failed: %s", e)
            self.event_bus.emit(ErrorOccurredEvent(
                self.session_id, time.time(), type(e).__name__, str(e), "question_processing"
            ))
            print(f"Service error: {e}")

    def _enter_mode(self, mode: InteractionMode) -> None:
        logger.info(f"Entering {mode.value} mode")
        self.event_bus.emit(ModeEnteredEvent(self.session_id, time.time(), mode.value))

    def _read_line(self) -> Optional[str]:
        """Read one line of input, or None at end of input."""
        try:
            return self.input_func()
        except EOFError:
            return None
