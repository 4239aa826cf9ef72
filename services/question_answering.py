# DEPENDENCIES
import sys
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from utils.logger import LegalLensLogger
from services.data_models import ChatAnswer
from utils.text_processor import TextProcessor


@dataclass(frozen = True)
class TopicHandler:
    """
    One question topic: trigger phrases looked up in the question, keywords looked up in the document
    """
    name     : str
    triggers : Tuple[str, ...]
    keywords : Tuple[str, ...]
    limit    : int
    lead_in  : str
    trailer  : str = ""

    def is_triggered(self, question: str) -> bool:
        return TextProcessor.contains_any(question, self.triggers)


    def find_sentences(self, sentences: List[str]) -> List[str]:
        matched = [sentence for sentence in sentences if TextProcessor.contains_any(sentence.lower(), self.keywords)]

        return matched[:self.limit]


    def render(self, sentences: List[str]) -> str:
        return f"{self.lead_in}\n\n{'. '.join(sentences)}.{self.trailer}"


TOPIC_HANDLERS = (TopicHandler(name     = "definition",
                               triggers = ('what are', 'what is', 'define', 'explain'),
                               keywords = ('means', 'defined as', 'refers to', 'shall mean'),
                               limit    = 3,
                               lead_in  = "Based on the document, here are the relevant definitions:",
                              ),
                  TopicHandler(name     = "parties",
                               triggers = ('who is', 'who are', 'which party', 'parties'),
                               keywords = ('party', 'client', 'contractor', 'company', 'agreement between'),
                               limit    = 2,
                               lead_in  = "The parties involved in this agreement are:",
                              ),
                  TopicHandler(name     = "timing",
                               triggers = ('when', 'what date', 'how long', 'duration'),
                               keywords = ('days', 'months', 'years', 'date', 'within', 'duration', 'term'),
                               limit    = 3,
                               lead_in  = "Here are the timing-related terms from the document:",
                              ),
                  TopicHandler(name     = "financial",
                               triggers = ('how much', 'cost', 'price', 'fee', 'payment'),
                               keywords = ('$', 'payment', 'fee', 'cost', 'price', 'compensation', 'salary', 'rate'),
                               limit    = 3,
                               lead_in  = "Here are the financial terms mentioned in the document:",
                              ),
                  TopicHandler(name     = "risk",
                               triggers = ('risk', 'danger', 'liability', 'penalty'),
                               keywords = ('liability', 'risk', 'penalty', 'damages', 'indemnif', 'waive', 'disclaim'),
                               limit    = 3,
                               lead_in  = "Here are the risk-related clauses I found:",
                               trailer  = " \n\nPlease review these carefully as they may affect your liability and obligations.",
                              ),
                  TopicHandler(name     = "termination",
                               triggers = ('terminate', 'end', 'cancel', 'exit'),
                               keywords = ('terminat', 'end', 'cancel', 'expire', 'breach'),
                               limit    = 3,
                               lead_in  = "Here's what the document says about termination:",
                              ),
                  TopicHandler(name     = "obligations",
                               triggers = ('obligation', 'responsibility', 'duty', 'must'),
                               keywords = ('shall', 'must', 'required', 'obligation', 'responsible', 'duty'),
                               limit    = 3,
                               lead_in  = "Here are the key obligations mentioned in the document:",
                              ),
                  TopicHandler(name     = "warranties",
                               triggers = ('warranty', 'guarantee', 'protection'),
                               keywords = ('warrant', 'guarantee', 'represent', 'assure', 'promise'),
                               limit    = 3,
                               lead_in  = "Here's what the document says about warranties and guarantees:",
                              ),
                 )


SUGGESTED_QUESTIONS = ('What are the key risks in this document?',
                       'Who are the parties involved in this agreement?',
                       'What are the payment terms?',
                       'How can this agreement be terminated?',
                       'What are my obligations under this contract?',
                       'Are there any liability limitations?',
                       'What happens if there is a breach?',
                       'What are the warranty terms?',
                       'How are disputes resolved?',
                       'What is the governing law?',
                      )


class QuestionAnswerer:
    """
    Rule-based question answering over one document

    The question is routed to the first topic whose trigger phrases it contains;
    when that topic finds nothing in the document, or no topic is triggered, the
    document sentences sharing the most question words are returned instead
    """
    KEYWORD_MATCH_TOPIC = "keyword_match"
    KEYWORD_LEAD_IN     = "Based on your question, here are the most relevant parts of the document:"
    NOT_FOUND_ANSWER    = ("I couldn't find information directly related to your question in the document. "
                           "Could you try rephrasing your question or asking about specific terms mentioned in the document?")
    STOP_WORDS          = frozenset({'what', 'when', 'where', 'how', 'why', 'does', 'will', 'can', 'the', 'and', 'or'})
    TOKEN_PUNCTUATION   = '?!.,;:"\'()[]'
    MIN_TOKEN_LENGTH    = 3    # tokens must be strictly longer than this
    MAX_KEYWORD_MATCHES = 3


    def __init__(self, handlers: Tuple[TopicHandler, ...] = TOPIC_HANDLERS, min_sentence_length: Optional[int] = None):
        """
        Initialize the question answerer

        Arguments:
        ----------
            handlers            { tuple } : Topic handlers in priority order

            min_sentence_length { int }   : Sentence threshold of the keyword-overlap fallback (defaults to settings.MIN_SENTENCE_LENGTH)
        """
        self.handlers            = tuple(handlers)
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length


    def match_topic(self, question: str) -> Optional[TopicHandler]:
        """
        First handler triggered by the question, if any
        """
        lowered = question.lower()

        return next((handler for handler in self.handlers if handler.is_triggered(lowered)), None)


    @LegalLensLogger.log_execution_time("answer_question")
    def answer(self, question: str, context: str) -> ChatAnswer:
        """
        Answer one question from the document text

        Arguments:
        ----------
            question { str } : Free-text question

            context  { str } : Document text

        Returns:
        --------
            { ChatAnswer }   : Answer text, topic label (None when nothing was found) and the quoted sentences
        """
        handler = self.match_topic(question)

        if handler is not None:
            # Topic handlers scan every non-empty sentence, not only the long ones
            matched = handler.find_sentences(TextProcessor.extract_sentences(context, min_length = 0))

            if matched:
                log_info("Question answered by topic", topic = handler.name, sentences = len(matched))

                return ChatAnswer(question          = question,
                                  topic             = handler.name,
                                  answer            = handler.render(matched),
                                  matched_sentences = matched,
                                 )

        matched = self.rank_by_keywords(question, context)

        if matched:
            log_info("Question answered by keyword overlap", sentences = len(matched))

            return ChatAnswer(question          = question,
                              topic             = self.KEYWORD_MATCH_TOPIC,
                              answer            = f"{self.KEYWORD_LEAD_IN}\n\n{'. '.join(matched)}.",
                              matched_sentences = matched,
                             )

        log_info("No answer found for question")

        return ChatAnswer(question = question,
                          topic    = None,
                          answer   = self.NOT_FOUND_ANSWER,
                         )


    def tokenize_question(self, question: str) -> List[str]:
        """
        Lowercased question words without stop words and short tokens
        """
        tokens = [token.strip(self.TOKEN_PUNCTUATION) for token in question.lower().split()]

        return [token for token in tokens if (len(token) > self.MIN_TOKEN_LENGTH) and (token not in self.STOP_WORDS)]


    def rank_by_keywords(self, question: str, context: str) -> List[str]:
        """
        Up to three sentences sharing the most question words, best first
        """
        words = self.tokenize_question(question)

        if not words:
            return []

        scored = list()

        for sentence in TextProcessor.extract_sentences(context, min_length = self.min_sentence_length):
            lowered = sentence.lower()
            score   = sum(1 for word in words if word in lowered)

            if (score > 0):
                scored.append((score, sentence))

        ranked = sorted(scored, key = lambda item: item[0], reverse = True)

        return [sentence for _, sentence in ranked[:self.MAX_KEYWORD_MATCHES]]
