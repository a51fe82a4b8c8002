"""Linguistic analysis used by the profile extractor.

Two interchangeable analyzers:
1. RuleBasedTextAnalyzer: regex tokenizer + lexicon/suffix tagger (no data files)
2. NltkTextAnalyzer: NLTK averaged-perceptron tagger, RegexpParser NP chunker
   and ne_chunk named-entity classifier

Both tag tokens with the same coarse tag set so callers never see
analyzer-specific labels.
"""

import logging
import re
import threading
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Coarse part-of-speech tags shared by all analyzers
NUM = "NUM"
DET = "DET"
PRON = "PRON"
PREP = "PREP"
CONJ = "CONJ"
VERB = "VERB"
ADJ = "ADJ"
ADV = "ADV"
PROPN = "PROPN"
NOUN = "NOUN"
PUNCT = "PUNCT"
OTHER = "X"

# Proper-noun classes
PERSON = "person"
PLACE = "place"
ORGANIZATION = "organization"
OTHER_NOUN = "other"

# Keeps tech spellings intact: "c++", "c#", "ci/cd", "node.js", "10+"
_TOKEN_PATTERN = re.compile(r"\w[\w+#/.'-]*[\w+#]|\w[+#]*|[^\w\s]")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+|\s*\n+\s*")
# Digit-led tokens: "5", "3.5", "10+", ranges "5-7" and spans "2015-2020"
_NUMBER_PATTERN = re.compile(r"^\d[\d.,+/\-–]*$")


class TextAnalyzer(ABC):
    """Part-of-speech, noun-phrase and proper-noun analysis over plain text."""

    name: str = ""

    def load(self) -> None:
        """Load tagger data. Nothing to load by default."""

    def tokenize(self, text: str) -> list[str]:
        return _TOKEN_PATTERN.findall(text)

    def split_sentences(self, text: str) -> list[str]:
        """Split on sentence punctuation followed by whitespace, and on line breaks."""
        if not text or not text.strip():
            return []
        return [s.strip() for s in _SENTENCE_BOUNDARY.split(text) if s and s.strip()]

    @abstractmethod
    def tag_parts_of_speech(self, text: str) -> list[tuple[str, str]]:
        """Return (token, coarse tag) pairs for one sentence."""

    @abstractmethod
    def find_noun_phrases(self, text: str) -> list[str]:
        """Return noun phrase texts for one sentence, in order."""

    @abstractmethod
    def classify_proper_noun(self, term: str, sentence: str) -> str:
        """Classify a proper noun in its sentence as person, place, organization or other."""


# ---------------------------------------------------------------------------
# Rule-based analyzer
# ---------------------------------------------------------------------------

_DETERMINERS = frozenset({
    "a", "an", "the", "this", "that", "these", "those", "each", "every",
    "some", "any", "no", "all", "both", "several", "many", "few",
})
_PRONOUNS = frozenset({
    "i", "me", "my", "mine", "we", "us", "our", "ours", "you", "your",
    "he", "him", "his", "she", "her", "it", "its", "they", "them", "their",
    "who", "whom", "whose", "which", "what", "myself", "ourselves",
})
_PREPOSITIONS = frozenset({
    "in", "on", "at", "of", "for", "with", "by", "from", "to", "into",
    "over", "under", "about", "as", "via", "across", "through", "during",
    "within", "without", "per", "between", "among", "since", "until",
    "after", "before", "including",
})
_CONJUNCTIONS = frozenset({"and", "or", "but", "nor", "so", "yet", "&", "while", "whereas"})
_VERBS = frozenset({
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "do", "does", "did", "will", "would", "can",
    "could", "should", "may", "might", "must", "shall",
    "built", "led", "made", "ran", "wrote", "drove", "grew", "won",
    "build", "lead", "design", "develop", "manage", "maintain", "deliver",
    "create", "implement", "own", "work", "works", "use", "uses",
})
_ADJECTIVES = frozenset({
    "senior", "junior", "lead", "principal", "strong", "excellent", "good",
    "proficient", "fluent", "modern", "scalable", "distributed", "relational",
    "full", "new", "large", "small", "high", "low", "real", "open",
    "agile", "responsive", "secure", "reliable", "technical", "professional",
    "academic", "various", "multiple", "native", "mobile", "cross",
})
_NUMBER_WORDS = frozenset({
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "fifteen", "twenty", "thirty",
})
_ADJ_SUFFIXES = ("ous", "ive", "able", "ible", "ful", "less")

_HONORIFICS = frozenset({"mr", "mrs", "ms", "miss", "dr", "prof", "sir"})
_PLACES = frozenset({
    "london", "paris", "berlin", "tokyo", "toronto", "sydney", "dublin",
    "bangalore", "bengaluru", "mumbai", "delhi", "hyderabad", "singapore",
    "seattle", "boston", "chicago", "austin", "denver", "york", "francisco",
    "california", "texas", "washington", "ontario", "bavaria",
    "usa", "uk", "india", "canada", "germany", "france", "japan", "china",
    "australia", "ireland", "spain", "italy", "brazil", "mexico", "europe",
    "asia", "africa", "america",
})
_ORG_MARKERS = frozenset({
    "inc", "corp", "corporation", "llc", "ltd", "gmbh", "co", "company",
    "university", "college", "institute", "school", "academy", "labs",
    "technologies", "systems", "group", "bank", "foundation",
})


class RuleBasedTextAnalyzer(TextAnalyzer):
    """Lexicon and suffix heuristics; deterministic and free of data files."""

    name = "rule"

    def tag_parts_of_speech(self, text: str) -> list[tuple[str, str]]:
        tokens = self.tokenize(text)
        return [(tok, _rule_tag(tok, i == 0)) for i, tok in enumerate(tokens)]

    def find_noun_phrases(self, text: str) -> list[str]:
        """Maximal runs of adjective/noun tokens that contain at least one noun."""
        phrases: list[str] = []
        run: list[tuple[str, str]] = []
        for token, tag in self.tag_parts_of_speech(text) + [("", PUNCT)]:
            if tag in (ADJ, NOUN, PROPN):
                run.append((token, tag))
                continue
            # Drop trailing adjectives, a phrase ends on its head noun
            while run and run[-1][1] == ADJ:
                run.pop()
            if any(t in (NOUN, PROPN) for _, t in run):
                phrases.append(" ".join(tok for tok, _ in run))
            run = []
        return phrases

    def classify_proper_noun(self, term: str, sentence: str) -> str:
        tokens = self.tokenize(sentence)
        lowered = [t.lower() for t in tokens]
        key = term.lower()
        if key in _PLACES:
            return PLACE
        if key in _ORG_MARKERS:
            return ORGANIZATION
        if key not in lowered:
            return OTHER_NOUN

        idx = lowered.index(key)
        prev = lowered[idx - 1] if idx > 0 else ""
        if prev == "." and idx > 1:
            prev = lowered[idx - 2]
        if prev in _HONORIFICS:
            return PERSON

        # "Acme Corp", "Stanford University", "University of Toronto"
        following = lowered[idx + 1:idx + 3]
        if any(w in _ORG_MARKERS for w in following) and tokens[idx + 1][:1].isupper():
            return ORGANIZATION
        if idx > 1 and lowered[idx - 1] == "of" and lowered[idx - 2] in _ORG_MARKERS:
            return ORGANIZATION
        return OTHER_NOUN


def _rule_tag(token: str, sentence_initial: bool) -> str:
    lower = token.lower()
    if not any(c.isalnum() for c in token):
        return PUNCT
    if _NUMBER_PATTERN.match(token) or lower in _NUMBER_WORDS:
        return NUM
    if lower in _DETERMINERS:
        return DET
    if lower in _PRONOUNS:
        return PRON
    if lower in _PREPOSITIONS:
        return PREP
    if lower in _CONJUNCTIONS:
        return CONJ
    if lower in _VERBS:
        return VERB
    # Acronyms anywhere, capitalised words away from the sentence start
    if len(token) > 1 and token.isupper() and token.isalpha():
        return PROPN
    if token[0].isupper() and not sentence_initial:
        return PROPN
    if lower in _ADJECTIVES or lower.endswith(_ADJ_SUFFIXES):
        return ADJ
    if lower.endswith("ly") and len(lower) > 4:
        return ADV
    if (lower.endswith("ed") and len(lower) > 4) or (lower.endswith("ing") and len(lower) > 5):
        return VERB
    return NOUN


# ---------------------------------------------------------------------------
# NLTK analyzer
# ---------------------------------------------------------------------------

_NLTK_RESOURCES: tuple[tuple[str, str], ...] = (
    ("averaged_perceptron_tagger_eng", "taggers/averaged_perceptron_tagger_eng"),
    ("maxent_ne_chunker_tab", "chunkers/maxent_ne_chunker_tab"),
    ("words", "corpora/words"),
)

_PENN_TAGS: dict[str, str] = {
    "CD": NUM,
    "DT": DET, "PDT": DET, "WDT": DET,
    "PRP": PRON, "PRP$": PRON, "WP": PRON, "WP$": PRON, "EX": PRON,
    "IN": PREP, "TO": PREP,
    "CC": CONJ,
    "MD": VERB,
    "NNP": PROPN, "NNPS": PROPN,
    "NN": NOUN, "NNS": NOUN,
}

_NE_LABELS: dict[str, str] = {
    "PERSON": PERSON,
    "GPE": PLACE,
    "LOCATION": PLACE,
    "FACILITY": PLACE,
    "GSP": PLACE,
    "ORGANIZATION": ORGANIZATION,
}

_NP_GRAMMAR = "NP: {<JJ.*>*<NN.*>+}"


class NltkTextAnalyzer(TextAnalyzer):
    """NLTK-backed tagging, chunking and named-entity classification.

    Tagger and chunker data are loaded on first use. If they cannot be loaded
    a warning is logged and every operation falls back to the rule-based
    analyzer.
    """

    name = "nltk"

    def __init__(self, auto_download: bool = True) -> None:
        self._auto_download = auto_download
        self._nltk = None
        self._chunker = None
        self._loaded = False
        self._lock = threading.Lock()
        self._fallback = RuleBasedTextAnalyzer()

    def load(self) -> None:
        with self._lock:
            if self._loaded:
                return
            try:
                import nltk

                if self._auto_download:
                    for package, path in _NLTK_RESOURCES:
                        try:
                            nltk.data.find(path)
                        except LookupError:
                            logger.info("Downloading NLTK resource: %s", package)
                            nltk.download(package, quiet=True)

                # Touch the tagger and NE chunker so missing data surfaces here
                nltk.ne_chunk(nltk.pos_tag(["Python"]))
                self._chunker = nltk.RegexpParser(_NP_GRAMMAR)
                self._nltk = nltk
                logger.info("NLTK text analyzer loaded successfully")
            except Exception as e:
                logger.warning(
                    "Failed to load NLTK tagger data, using rule-based analysis: %s", e
                )
            finally:
                self._loaded = True

    @property
    def available(self) -> bool:
        self.load()
        return self._nltk is not None

    def _pos_tag(self, text: str) -> list[tuple[str, str]]:
        tokens = self.tokenize(text)
        if not tokens:
            return []
        return self._nltk.pos_tag(tokens)

    def tag_parts_of_speech(self, text: str) -> list[tuple[str, str]]:
        if not self.available:
            return self._fallback.tag_parts_of_speech(text)
        return [(tok, _penn_to_coarse(tok, tag)) for tok, tag in self._pos_tag(text)]

    def find_noun_phrases(self, text: str) -> list[str]:
        if not self.available:
            return self._fallback.find_noun_phrases(text)
        tagged = self._pos_tag(text)
        if not tagged:
            return []
        tree = self._chunker.parse(tagged)
        return [
            " ".join(tok for tok, _ in subtree.leaves())
            for subtree in tree.subtrees(filter=lambda t: t.label() == "NP")
        ]

    def classify_proper_noun(self, term: str, sentence: str) -> str:
        if not self.available:
            return self._fallback.classify_proper_noun(term, sentence)
        tagged = self._pos_tag(sentence)
        if not tagged:
            return OTHER_NOUN
        key = term.lower()
        for node in self._nltk.ne_chunk(tagged):
            if hasattr(node, "label"):
                if any(tok.lower() == key for tok, _ in node.leaves()):
                    return _NE_LABELS.get(node.label(), OTHER_NOUN)
        return OTHER_NOUN


def _penn_to_coarse(token: str, tag: str) -> str:
    if tag in _PENN_TAGS:
        return _PENN_TAGS[tag]
    if tag.startswith("VB"):
        return VERB
    if tag.startswith("JJ"):
        return ADJ
    if tag.startswith("RB"):
        return ADV
    if not any(c.isalnum() for c in token):
        return PUNCT
    return OTHER


# ---------------------------------------------------------------------------
# Shared instances
# ---------------------------------------------------------------------------

_analyzers: dict[str, TextAnalyzer] = {}


def get_text_analyzer(name: str = "rule") -> TextAnalyzer:
    """Return the process-wide analyzer registered under name."""
    if name not in _analyzers:
        if name == "rule":
            _analyzers[name] = RuleBasedTextAnalyzer()
        elif name == "nltk":
            _analyzers[name] = NltkTextAnalyzer()
        else:
            raise ValueError(f"Unknown text analyzer: {name}")
    return _analyzers[name]
