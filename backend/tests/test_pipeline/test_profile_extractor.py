"""Tests for the profile extractor (skills, experience, education)."""

from models.schemas.profile import Profile
from services.pipeline.profile_extractor import (
    DOMAIN_CUE_WORDS,
    TECH_TERMS,
    ProfileExtractor,
    ProfileExtractorService,
)
from services.text_analyzer import NltkTextAnalyzer


class TestProfileExtractor:
    def setup_method(self):
        self.extractor = ProfileExtractor()

    def test_empty_content_gives_empty_profile(self):
        profile = self.extractor.extract("")
        assert profile == Profile()
        assert profile.skills == frozenset()
        assert profile.experience_mentions == ()
        assert profile.education_mentions == ()

    def test_whitespace_only_content(self):
        assert self.extractor.extract("  \n\t ") == Profile()

    def test_scenario_profile(self, scenario_resume):
        profile = self.extractor.extract(scenario_resume)
        assert profile.skills == {"javascript", "react"}
        assert profile.experience_mentions == ("5 years experience in javascript.",)
        assert profile.education_mentions == ()

    def test_dictionary_match_splits_on_commas_and_periods(self):
        profile = self.extractor.extract("Skills: Python,Docker.Kubernetes, C++ and CI/CD")
        assert {"python", "docker", "kubernetes", "c++", "ci/cd"} <= profile.skills

    def test_dictionary_match_is_exact_token(self):
        profile = self.extractor.extract("Wrote JavaScript daily")
        assert "java" not in profile.skills

    def test_cue_word_noun_phrases(self):
        profile = self.extractor.extract("Designed a cloud platform and a REST api for payments.")
        assert {"cloud platform", "rest api", "rest"} <= profile.skills

    def test_cue_phrase_adds_whole_phrase_not_bare_cue_word(self):
        skills = self.extractor.extract("Maintained the payments service.").skills
        assert "payments service" in skills
        assert "service" not in skills

    def test_cue_words_are_injectable(self):
        extractor = ProfileExtractor(tech_terms=TECH_TERMS, cue_words=frozenset({"pipeline"}))
        assert "data pipeline" in extractor.extract("Built a data pipeline.").skills
        assert "data pipeline" not in self.extractor.extract("Built a data pipeline.").skills

    def test_proper_noun_recovers_term_missed_by_tokenizer(self):
        # "aws;" is not a dictionary token, the tagged proper noun "AWS" is
        extractor = ProfileExtractor(tech_terms=frozenset({"aws"}), cue_words=DOMAIN_CUE_WORDS)
        profile = extractor.extract("Deployed to AWS; monitored uptime.")
        assert profile.skills == {"aws"}

    def test_proper_noun_person_is_not_a_skill(self):
        extractor = ProfileExtractor(tech_terms=frozenset({"jordan"}), cue_words=DOMAIN_CUE_WORDS)
        profile = extractor.extract("Reviewed by Mr Jordan; approved.")
        assert profile.skills == frozenset()

    def test_experience_needs_number_and_word(self):
        text = (
            "I have 3 years of experience with Python. "
            "Experience with Docker. "
            "Worked 4 years at a bank. "
            "Experienced in 2 languages."
        )
        profile = self.extractor.extract(text)
        assert profile.experience_mentions == ("I have 3 years of experience with Python.",)

    def test_experience_with_number_word(self):
        profile = self.extractor.extract("Over five years of experience with Python.")
        assert profile.experience_mentions == ("Over five years of experience with Python.",)

    def test_experience_with_number_range(self):
        text = "I bring 5-7 years of experience in Python."
        assert self.extractor.extract(text).experience_mentions == (text,)

    def test_experience_with_year_span(self):
        text = "Worked on billing systems. Experience at Acme from 2015-2020."
        profile = self.extractor.extract(text)
        assert profile.experience_mentions == ("Experience at Acme from 2015-2020.",)

    def test_unavailable_nltk_still_finds_experience(self, scenario_resume):
        analyzer = NltkTextAnalyzer(auto_download=False)
        # Simulates an offline host: load already attempted, no tagger data
        analyzer._loaded = True
        profile = ProfileExtractor(analyzer=analyzer).extract(scenario_resume)
        assert profile.experience_mentions == ("5 years experience in javascript.",)
        assert profile.skills == {"javascript", "react"}

    def test_education_mentions_in_document_order(self):
        text = (
            "Master of Science in Data Engineering.\n"
            "Mastered Kubernetes in production.\n"
            "Bachelor's degree in Computer Science.\n"
            "PhD candidate."
        )
        profile = self.extractor.extract(text)
        assert profile.education_mentions == (
            "Master of Science in Data Engineering.",
            "Bachelor's degree in Computer Science.",
            "PhD candidate.",
        )

    def test_sentence_can_be_both_experience_and_education(self):
        text = "5 years experience after my master degree."
        profile = self.extractor.extract(text)
        assert profile.experience_mentions == (text,)
        assert profile.education_mentions == (text,)

    def test_extraction_is_deterministic(self, scenario_resume):
        assert self.extractor.extract(scenario_resume) == self.extractor.extract(scenario_resume)

    def test_profile_serializes_sorted_skills(self):
        profile = self.extractor.extract("react, docker, aws")
        assert profile.model_dump()["skills"] == ["aws", "docker", "react"]


class TestProfileExtractorService:
    def test_predict_merges_extra_terms(self):
        svc = ProfileExtractorService(extra_tech_terms=frozenset({"cobol"}))
        profile = svc.predict(content="Maintained cobol batch jobs")
        assert "cobol" in profile.skills
        assert svc.is_loaded
