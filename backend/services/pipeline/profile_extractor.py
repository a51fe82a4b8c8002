"""Profile extraction: skills, experience and education mentions from resume text.

Skills come from three independent heuristics merged into one set:
1. Dictionary match over whitespace/comma/period separated tokens
2. Noun phrases containing a domain cue word ("cloud platform", "rest api")
3. Proper nouns that are not people, places or organisations, checked
   against the dictionary (recovers "AWS", "GraphQL" in odd casing/punctuation)

Experience and education mentions are whole sentences kept in document order.
"""

import logging
import re
from typing import Any

from models.schemas.profile import Profile
from services.pipeline.base import BaseModelService
from services.text_analyzer import (
    NUM,
    OTHER_NOUN,
    PROPN,
    TextAnalyzer,
    get_text_analyzer,
)

logger = logging.getLogger(__name__)

# Single-token technology terms; the dictionary tokenizer splits on "." so
# multi-part names are listed by their parts ("node" for node.js)
TECH_TERMS: frozenset[str] = frozenset({
    # Languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php",
    "swift", "kotlin", "scala", "rust", "golang", "perl", "sql", "bash",
    # Frontend
    "react", "angular", "vue", "svelte", "html", "css", "sass", "less",
    "webpack", "babel", "jquery", "tailwind",
    # Backend
    "node", "express", "django", "flask", "fastapi", "spring", "rails",
    "rest", "graphql", "grpc",
    # Data stores
    "mongodb", "postgresql", "mysql", "redis", "elasticsearch", "kafka",
    "sqlite", "cassandra", "dynamodb",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "nginx", "git", "ci/cd",
    # Data & ML
    "pandas", "numpy", "tensorflow", "pytorch", "spark", "hadoop",
    # Platforms
    "linux", "windows", "macos", "ios", "android",
    # Practices
    "agile", "scrum", "kanban", "tdd", "microservices",
})

# Cue words marking a noun phrase as a technology ("cloud platform", "web framework")
DOMAIN_CUE_WORDS: frozenset[str] = frozenset({
    "cloud", "stack", "framework", "language", "database",
    "platform", "system", "api", "service",
})

EDUCATION_TERMS: frozenset[str] = frozenset({
    "degree", "bachelor", "master", "phd", "diploma",
})

_DICTIONARY_SPLIT = re.compile(r"[\s,.]+")
_EXPERIENCE_WORD = re.compile(r"\bexperience\b", re.IGNORECASE)


def _education_pattern(terms: frozenset[str]) -> re.Pattern:
    # Allows "degrees", "bachelor's", "masters" but not "mastered"
    alternation = "|".join(re.escape(t) for t in sorted(terms))
    return re.compile(rf"\b(?:{alternation})(?:s|'s|’s)?\b", re.IGNORECASE)


class ProfileExtractor:
    """Turns raw resume text into a Profile.

    Vocabulary is injected so tests can substitute small fixtures; the
    instance never mutates it.
    """

    def __init__(
        self,
        analyzer: TextAnalyzer | None = None,
        tech_terms: frozenset[str] = TECH_TERMS,
        cue_words: frozenset[str] = DOMAIN_CUE_WORDS,
        education_terms: frozenset[str] = EDUCATION_TERMS,
    ) -> None:
        self.analyzer = analyzer or get_text_analyzer("rule")
        self.tech_terms = frozenset(t.lower() for t in tech_terms)
        self.cue_words = frozenset(w.lower() for w in cue_words)
        self.education_terms = frozenset(t.lower() for t in education_terms)
        self._education_re = _education_pattern(self.education_terms)

    def extract(self, content: str) -> Profile:
        if not content or not content.strip():
            return Profile()

        sentences = self.analyzer.split_sentences(content)
        skills = self.extract_skills(content, sentences)
        experience = [s for s in sentences if self._is_experience_mention(s)]
        education = [s for s in sentences if self._education_re.search(s)]

        logger.debug(
            "Extracted %d skills, %d experience and %d education mentions",
            len(skills), len(experience), len(education),
        )
        return Profile(
            skills=frozenset(skills),
            experience_mentions=tuple(experience),
            education_mentions=tuple(education),
        )

    def extract_skills(self, content: str, sentences: list[str] | None = None) -> set[str]:
        if sentences is None:
            sentences = self.analyzer.split_sentences(content)

        skills = self._dictionary_skills(content)
        for sentence in sentences:
            skills.update(self._cue_phrase_skills(sentence))
            skills.update(self._proper_noun_skills(sentence))
        return skills

    def _dictionary_skills(self, content: str) -> set[str]:
        tokens = _DICTIONARY_SPLIT.split(content.lower())
        return {tok for tok in tokens if tok in self.tech_terms}

    def _is_cue(self, word: str) -> bool:
        word = word.lower()
        return word in self.cue_words or (word.endswith("s") and word[:-1] in self.cue_words)

    def _cue_phrase_skills(self, sentence: str) -> set[str]:
        found: set[str] = set()
        for phrase in self.analyzer.find_noun_phrases(sentence):
            if any(self._is_cue(word) for word in phrase.split()):
                found.add(phrase.lower())
        return found

    def _proper_noun_skills(self, sentence: str) -> set[str]:
        found: set[str] = set()
        for token, tag in self.analyzer.tag_parts_of_speech(sentence):
            if tag != PROPN:
                continue
            term = token.lower()
            if term not in self.tech_terms or term in found:
                continue
            if self.analyzer.classify_proper_noun(token, sentence) == OTHER_NOUN:
                found.add(term)
        return found

    def _is_experience_mention(self, sentence: str) -> bool:
        if not _EXPERIENCE_WORD.search(sentence):
            return False
        return any(tag == NUM for _, tag in self.analyzer.tag_parts_of_speech(sentence))


class ProfileExtractorService(BaseModelService):
    model_name = "profile_extractor"

    def __init__(
        self,
        analyzer_name: str = "rule",
        extra_tech_terms: frozenset[str] = frozenset(),
    ) -> None:
        self._analyzer_name = analyzer_name
        self._extra_tech_terms = extra_tech_terms
        self._extractor: ProfileExtractor | None = None

    def load(self) -> None:
        analyzer = get_text_analyzer(self._analyzer_name)
        analyzer.load()
        self._extractor = ProfileExtractor(
            analyzer=analyzer,
            tech_terms=TECH_TERMS | self._extra_tech_terms,
        )
        logger.info("Profile extractor ready (analyzer: %s)", analyzer.name)

    def predict(self, **kwargs: Any) -> Profile:
        self.ensure_loaded()
        return self._extractor.extract(kwargs["content"])
