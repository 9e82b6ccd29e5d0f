"""Domain service for CV-to-job matching business logic.

A match is the weighted sum of seven component scores (role relevance,
skills, career progression, experience, industry, education and location),
discounted for incomplete CVs and capped when the candidate's history is
unrelated to the role.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from app.domain.entities.cv import CV, ExperienceEntry
from app.domain.entities.job_spec import JobSpec, LocationType
from app.domain.services.matching_reference_data import (
    DEFAULT_SENIORITY_LEVEL,
    EDUCATION_LEVELS,
    INDUSTRY_RELATIONSHIPS,
    INDUSTRY_TITLE_PATTERNS,
    ROLE_ADJACENCY,
    ROLE_KEYWORDS,
    ROLE_SYNONYMS,
    SENIORITY_LEVELS,
    SENIORITY_PREFIXES,
    SKILL_CATEGORIES,
    TITLE_NOISE_WORDS,
)
from app.domain.services.normalization import (
    DEFAULT_MATCH_THRESHOLD,
    extract_country,
    locations_match,
    normalize_skills,
    skills_match,
)


COMPONENT_WEIGHTS: Dict[str, float] = {
    "title": 0.25,
    "skills": 0.25,
    "career": 0.15,
    "experience": 0.15,
    "industry": 0.10,
    "education": 0.05,
    "location": 0.05,
}

COMPLETENESS_PENALTIES: Tuple[Tuple[str, float], ...] = (
    ("skills", 0.85),
    ("experience", 0.80),
    ("education", 0.90),
    ("location", 0.92),
)

QUALITY_BANDS: Tuple[Tuple[int, str], ...] = (
    (85, "Excellent"),
    (70, "Very Good"),
    (60, "Good"),
    (45, "Fair"),
)

UNBOUNDED_MAX_EXPERIENCE = 999
MAX_LISTED_ITEMS = 5

_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
_SENIORITY_PREFIX_PATTERNS = [re.compile(rf"^{re.escape(prefix)}\s+", re.IGNORECASE) for prefix in SENIORITY_PREFIXES]
_EDUCATION_PATTERNS = [
    (re.compile(rf"\b{re.escape(key)}\b" if len(key) <= 4 else rf"\b{re.escape(key)}"), level)
    for key, level in EDUCATION_LEVELS
]
_PROFICIENCY_MULTIPLIERS = {"expert": 1.0, "intermediate": 0.9, "beginner": 0.7}


def _round(value: float) -> int:
    """Round half up to an integer."""
    return int(math.floor(value + 0.5))


def _unique(items: List[str]) -> List[str]:
    return list(dict.fromkeys(item for item in items if item is not None))


@dataclass
class TitleMatch:
    score: int
    reason: str
    matched_roles: List[str] = field(default_factory=list)
    direct_matches: int = 0
    related_matches: int = 0
    adjacency_scores: Dict[str, int] = field(default_factory=dict)
    max_adjacency_score: int = 0


@dataclass
class SkillProficiency:
    years: int
    proficiency: str


@dataclass
class SkillsMatch:
    score: int
    matched_required: int
    total_required: int
    matched_preferred: int
    total_preferred: int
    top_matches: List[str] = field(default_factory=list)
    missing_required: List[str] = field(default_factory=list)
    related_skills: List[str] = field(default_factory=list)
    has_recent_experience: bool = False
    skill_proficiencies: Dict[str, SkillProficiency] = field(default_factory=dict)


@dataclass
class CareerProgression:
    score: int
    reason: str
    is_promotion: bool = False
    overqualified: bool = False
    current_level: Optional[int] = None
    target_level: Optional[int] = None


@dataclass
class ExperienceMatch:
    score: int
    reason: str
    total_years: int
    required_range: str
    over_qualified: bool = False


@dataclass
class IndustryAlignment:
    score: int
    reason: str
    matched_industries: List[str] = field(default_factory=list)
    direct_matches: int = 0
    related_matches: int = 0


@dataclass
class ComponentScore:
    score: int
    reason: str


@dataclass
class MatchBreakdown:
    title: TitleMatch
    skills: SkillsMatch
    career: CareerProgression
    experience: ExperienceMatch
    industry: IndustryAlignment
    location: ComponentScore
    education: ComponentScore

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MatchResult:
    """Result of matching one CV against one job specification."""

    cv_id: Any
    job_spec_id: Any
    score: int
    quality: str
    breakdown: MatchBreakdown
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    insights: List[str] = field(default_factory=list)
    recommendation: str = ""
    raw_score: int = 0
    completeness: float = 1.0

    @property
    def is_good_match(self) -> bool:
        return self.score >= 70

    @property
    def is_excellent_match(self) -> bool:
        return self.score >= 85


class IMatchingService(ABC):
    """Domain service interface for CV-job matching."""

    @abstractmethod
    def calculate_match(self, cv: CV, job_spec: JobSpec) -> MatchResult:
        """Calculate how well a CV matches a job specification."""
        pass

    @abstractmethod
    def rank_cvs(self, cvs: List[CV], job_spec: JobSpec) -> List[MatchResult]:
        """Rank multiple CVs against a job specification."""
        pass


def get_role_adjacency_score(candidate_title: Optional[str], target_title: Optional[str]) -> int:
    """Score 0-100 how transferable experience as ``candidate_title`` is to ``target_title``."""
    if not candidate_title or not target_title:
        return 0

    candidate = candidate_title.lower().strip()
    target = target_title.lower().strip()
    if candidate == target:
        return 100

    candidate_core = candidate
    target_core = target
    for pattern in _SENIORITY_PREFIX_PATTERNS:
        candidate_core = pattern.sub("", candidate_core).strip()
        target_core = pattern.sub("", target_core).strip()

    if candidate_core == target_core and candidate_core != candidate:
        return 95

    def lookup(base_side: Tuple[str, str], adjacent_side: Tuple[str, str]) -> Optional[int]:
        full_base, core_base = base_side
        full_adjacent, core_adjacent = adjacent_side
        for base_title, adjacencies in ROLE_ADJACENCY.items():
            base = base_title.lower()
            if full_base and (base in full_base or full_base in base):
                for adjacent_title, score in adjacencies.items():
                    adjacent = adjacent_title.lower()
                    if adjacent in full_adjacent or full_adjacent in adjacent:
                        return score
            if core_base and (base in core_base or core_base in base):
                for adjacent_title, score in adjacencies.items():
                    adjacent = adjacent_title.lower()
                    if core_adjacent and (adjacent in core_adjacent or core_adjacent in adjacent):
                        return max(score - 5, 85)
        return None

    forward = lookup((target, target_core), (candidate, candidate_core))
    if forward is not None:
        return forward

    reverse = lookup((candidate, candidate_core), (target, target_core))
    if reverse is not None:
        return reverse

    return 10


def extract_role_keywords(job_title: str) -> List[str]:
    """Title words (minus noise words) plus synonyms of recognised role words."""
    words = [word for word in job_title.split() if word not in TITLE_NOISE_WORDS]
    keywords = list(words)
    for word in words:
        keywords.extend(ROLE_SYNONYMS.get(word, []))
    return _unique(keywords)


def infer_industry_from_title(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    for industry, pattern in INDUSTRY_TITLE_PATTERNS:
        if pattern.search(title):
            return industry
    return None


def is_relevant_experience(job_title: Optional[str], target_title: Optional[str]) -> bool:
    """Whether a past role counts towards experience for ``target_title``."""
    if not job_title or not target_title:
        return False

    job = job_title.lower().strip()
    target = target_title.lower().strip()

    primary_role = next((keyword for keyword in ROLE_KEYWORDS if keyword in target), "")
    if primary_role and primary_role in job:
        return True

    target_words = [word for word in target.split() if len(word) > 3]
    job_words = [word for word in job.split() if len(word) > 3]
    return any(
        job_word in target_word or target_word in job_word
        for target_word in target_words
        for job_word in job_words
    )


def education_level(text: Optional[str]) -> int:
    """Highest education level (1 high school .. 5 doctorate) named in ``text``; 0 if none."""
    lowered = (text or "").lower()
    level = 0
    for pattern, value in _EDUCATION_PATTERNS:
        if pattern.search(lowered):
            level = max(level, value)
    return level


class AdvancedMatchingService(IMatchingService):
    """Concrete implementation of the weighted CV-job matching algorithm."""

    def __init__(
        self,
        skill_threshold: int = DEFAULT_MATCH_THRESHOLD,
        location_threshold: int = DEFAULT_MATCH_THRESHOLD,
        current_year: Optional[int] = None,
    ):
        self._skill_threshold = skill_threshold
        self._location_threshold = location_threshold
        self._current_year = current_year

    @property
    def current_year(self) -> int:
        return self._current_year or datetime.utcnow().year

    def calculate_match(self, cv: CV, job_spec: JobSpec) -> MatchResult:
        """Calculate comprehensive match score between a CV and a job specification."""
        metadata = cv.metadata
        experience = list(metadata.experience or [])
        strengths: List[str] = []
        gaps: List[str] = []
        insights: List[str] = []

        title = self.calculate_title_match(experience, job_spec.title or "", job_spec.target_industry)
        if title.score > 70:
            strengths.append(f"Relevant role experience: {title.reason}")
        elif title.score < 30:
            gaps.append(f'No relevant experience for "{job_spec.title}" role')

        skills = self.calculate_skills_match(
            metadata.skills, experience, job_spec.required_skills, job_spec.preferred_skills
        )
        if skills.score > 80:
            strengths.append(f"Excellent skills match: {', '.join(skills.top_matches[:3])}")
        elif skills.score > 60:
            strengths.append(f"Good skills match with {skills.matched_required} required skills")
        elif skills.missing_required:
            gaps.append(
                f"Missing {len(skills.missing_required)} required skills: "
                f"{', '.join(skills.missing_required[:3])}"
            )
        if skills.has_recent_experience:
            insights.append("Recent hands-on experience with key technologies")
        if skills.related_skills:
            insights.append(f"Has {len(skills.related_skills)} related skills that could transfer well")

        career = self.analyze_career_progression(experience, job_spec.title)
        if career.score > 80:
            strengths.append(career.reason)
        elif career.score < 50:
            gaps.append(career.reason)
        if career.is_promotion:
            insights.append("This role represents a natural career progression")
        if career.overqualified:
            insights.append("Candidate may be overqualified - assess retention risk")

        experience_match = self.calculate_experience_match(
            experience, job_spec.title, job_spec.min_experience, job_spec.max_experience
        )
        if experience_match.score == 100:
            strengths.append(f"Perfect experience match: {experience_match.total_years} years")
        elif experience_match.score < 50:
            gaps.append(experience_match.reason)

        industry = self.calculate_industry_alignment(experience, job_spec.target_industry)
        if industry.score > 70:
            strengths.append(f"Strong industry alignment: {', '.join(industry.matched_industries)}")
        elif industry.score < 40:
            gaps.append("Limited experience in target industry")

        location = self.calculate_location_match(metadata.location, job_spec.location, job_spec.location_type)
        education = self.calculate_education_match(metadata.highest_education_text, job_spec.education)

        breakdown = MatchBreakdown(
            title=title,
            skills=skills,
            career=career,
            experience=experience_match,
            industry=industry,
            location=location,
            education=education,
        )
        raw_score = _round(sum(getattr(breakdown, name).score * weight for name, weight in COMPONENT_WEIGHTS.items()))

        missing_fields = {
            "skills": not metadata.skills,
            "experience": not experience,
            "education": not metadata.education,
            "location": not (metadata.location or "").strip(),
        }
        completeness = 1.0
        missing: List[str] = []
        for name, multiplier in COMPLETENESS_PENALTIES:
            if missing_fields[name]:
                missing.append(name)
                completeness *= multiplier

        score = _round(raw_score * completeness)
        if missing:
            gaps.append(f"Incomplete CV: missing {', '.join(missing)}")
            insights.append(f"CV completeness: {_round(completeness * 100)}%")

        if title.score < 20 and score > 40:
            score = 40
            insights.append("Score capped due to irrelevant work experience")
        if title.score < 30 and skills.score < 30 and score > 35:
            score = 35
            insights.append("Score capped - candidate lacks both relevant experience and skills")
        if title.score < 25 and industry.score < 35 and score > 40:
            score = 40
            insights.append("Score capped - no relevant industry experience")

        return MatchResult(
            cv_id=cv.id,
            job_spec_id=job_spec.id,
            score=score,
            quality=self.match_quality(score),
            breakdown=breakdown,
            strengths=strengths[:MAX_LISTED_ITEMS],
            gaps=gaps[:MAX_LISTED_ITEMS],
            insights=insights[:MAX_LISTED_ITEMS],
            recommendation=self.generate_recommendation(score, skills, career),
            raw_score=raw_score,
            completeness=completeness,
        )

    def rank_cvs(self, cvs: List[CV], job_spec: JobSpec) -> List[MatchResult]:
        """Rank CVs by match score in descending order."""
        matches = [self.calculate_match(cv, job_spec) for cv in cvs]
        return sorted(matches, key=lambda match: match.score, reverse=True)

    @staticmethod
    def match_quality(score: int) -> str:
        for threshold, label in QUALITY_BANDS:
            if score >= threshold:
                return label
        return "Poor"

    # ------------------------------------------------------------------
    # Component scorers
    # ------------------------------------------------------------------

    def calculate_title_match(
        self,
        experience: List[ExperienceEntry],
        job_title: str,
        job_department: str = "",
    ) -> TitleMatch:
        if not job_title or not experience:
            return TitleMatch(score=50, reason="Insufficient information to assess role relevance")

        job_title_lower = job_title.lower()
        department_lower = (job_department or "").lower()
        role_keywords = extract_role_keywords(job_title_lower)
        keyword_quota = math.ceil(len(role_keywords) * 0.6)

        matched_roles: List[str] = []
        adjacency_scores: Dict[str, int] = {}
        direct = related = department = 0
        max_adjacency = 0

        for entry in experience:
            entry_title = (entry.title or "").lower()
            combined = f"{entry_title} {(entry.description or '').lower()}"

            adjacency = get_role_adjacency_score(entry.title, job_title)
            if adjacency > 0:
                adjacency_scores[entry.title or "Unknown"] = adjacency
                max_adjacency = max(max_adjacency, adjacency)

            title_overlap = bool(entry_title) and (job_title_lower in entry_title or entry_title in job_title_lower)
            if adjacency == 100 or title_overlap or adjacency >= 80:
                direct += 1
                matched_roles.append(entry.title)
                continue

            if adjacency >= 50:
                related += 1
                matched_roles.append(entry.title)
                continue

            keyword_hits = sum(1 for keyword in role_keywords if keyword in combined)
            if keyword_hits >= keyword_quota:
                related += 1
                matched_roles.append(entry.title)

            if department_lower and department_lower in combined:
                department += 1

        if direct:
            score: float = min(100, 80 + direct * 10)
            if max_adjacency == 100:
                reason = f"Exact role match: {direct} similar position(s)"
            elif max_adjacency >= 80:
                reason = f"Highly relevant experience: {matched_roles[0]}"
            else:
                reason = f"Direct match: {direct} similar role(s)"
        elif related:
            score = min(70, 45 + related * 15)
            if max_adjacency >= 50:
                reason = f"Related experience ({max_adjacency}% similarity): {matched_roles[0]}"
            else:
                reason = f"Related experience in {related} role(s)"
        elif max_adjacency >= 30:
            score = max(25, max_adjacency * 0.5)
            adjacent_role = next(
                (role for role, value in adjacency_scores.items() if value == max_adjacency),
                "previous role",
            )
            reason = f"Some transferable skills from {adjacent_role}"
        elif department:
            score = min(40, 20 + department * 10)
            reason = f"Some experience in {job_department} field"
        else:
            score = max(5, max_adjacency * 0.5)
            if max_adjacency > 0:
                reason = f"Distant field ({max_adjacency}% similarity) - limited transferability"
            else:
                reason = f"No relevant experience for {job_title} position"

        return TitleMatch(
            score=_round(score),
            reason=reason,
            matched_roles=_unique(matched_roles)[:3],
            direct_matches=direct,
            related_matches=related,
            adjacency_scores=adjacency_scores,
            max_adjacency_score=max_adjacency,
        )

    def calculate_skill_proficiency(self, skill: str, experience: List[ExperienceEntry]) -> SkillProficiency:
        """Estimate years of use of ``skill`` from roles that mention it."""
        skill_lower = skill.lower()
        total_years = 0

        for entry in experience:
            haystacks = ((entry.title or "").lower(), (entry.description or "").lower(), (entry.company or "").lower())
            if not any(skill_lower in text for text in haystacks):
                continue

            period = entry.duration or f"{entry.start_date or ''} - {entry.end_date or ''}"
            years = [int(match) for match in _YEAR_PATTERN.findall(period)]
            if not years:
                continue

            start = years[0]
            lowered = period.lower()
            if "present" in lowered or "current" in lowered:
                end = self.current_year
            else:
                end = years[-1] if len(years) >= 2 else start
            total_years += max(0, end - start)

        if total_years >= 5:
            proficiency = "expert"
        elif total_years >= 2:
            proficiency = "intermediate"
        else:
            proficiency = "beginner"
        return SkillProficiency(years=total_years, proficiency=proficiency)

    def calculate_skills_match(
        self,
        cv_skills: List[str],
        experience: List[ExperienceEntry],
        required_skills: List[str],
        preferred_skills: List[str],
    ) -> SkillsMatch:
        normalized_cv = normalize_skills(cv_skills)
        required = normalize_skills(required_skills)
        preferred = normalize_skills(preferred_skills)

        if not normalized_cv:
            return SkillsMatch(
                score=10,
                matched_required=0,
                total_required=len(required),
                matched_preferred=0,
                total_preferred=len(preferred),
                missing_required=required[:MAX_LISTED_ITEMS],
            )

        proficiencies: Dict[str, SkillProficiency] = {}
        matched_required: List[str] = []
        missing_required: List[str] = []
        top_matches: List[str] = []
        related: List[str] = []

        for required_skill in required:
            found = self._find_matching_skill(normalized_cv, required_skill)
            if found is not None:
                proficiencies[required_skill] = self.calculate_skill_proficiency(required_skill, experience)
                matched_required.append(required_skill)
                top_matches.append(found)
            else:
                missing_required.append(required_skill)
                related.extend(self.find_related_skills(required_skill, normalized_cv))

        matched_preferred: List[str] = []
        for preferred_skill in preferred:
            if self._find_matching_skill(normalized_cv, preferred_skill) is not None:
                proficiencies[preferred_skill] = self.calculate_skill_proficiency(preferred_skill, experience)
                matched_preferred.append(preferred_skill)

        def weighted(skills: List[str]) -> float:
            return sum(_PROFICIENCY_MULTIPLIERS[proficiencies[skill].proficiency] for skill in skills)

        if required:
            score = weighted(matched_required) / len(required) * 80
        else:
            score = 50 if len(normalized_cv) >= 3 else 30

        if preferred:
            score += weighted(matched_preferred) / len(preferred) * 20
        else:
            score += 10 if len(normalized_cv) >= 5 else 5

        return SkillsMatch(
            score=_round(min(100, score)),
            matched_required=len(matched_required),
            total_required=len(required),
            matched_preferred=len(matched_preferred),
            total_preferred=len(preferred),
            top_matches=top_matches[:MAX_LISTED_ITEMS],
            missing_required=missing_required[:MAX_LISTED_ITEMS],
            related_skills=_unique(related)[:3],
            has_recent_experience=bool(self.extract_recent_skills(experience)),
            skill_proficiencies=proficiencies,
        )

    def _find_matching_skill(self, cv_skills: List[str], wanted: str) -> Optional[str]:
        for cv_skill in cv_skills:
            if skills_match(cv_skill, wanted, self._skill_threshold):
                return cv_skill
        return None

    @staticmethod
    def extract_recent_skills(experience: List[ExperienceEntry]) -> List[str]:
        """Known skills mentioned in the descriptions of the two latest ongoing roles."""
        recent: List[str] = []
        for entry in experience[:2]:
            duration = entry.duration or ""
            if "Present" not in duration and "Current" not in duration:
                continue
            description = (entry.description or "").lower()
            for category in sorted(SKILL_CATEGORIES):
                recent.extend(skill for skill in SKILL_CATEGORIES[category] if skill.lower() in description)
        return _unique(recent)

    @staticmethod
    def find_related_skills(target_skill: str, cv_skills: List[str]) -> List[str]:
        """CV skills from the same category as a missing ``target_skill``."""
        target = target_skill.lower()
        for category in sorted(SKILL_CATEGORIES):
            category_skills = {skill.lower() for skill in SKILL_CATEGORIES[category]}
            if target in category_skills:
                return [
                    skill for skill in cv_skills
                    if skill.lower() in category_skills and skill.lower() != target
                ]
        return []

    @staticmethod
    def _seniority_level(title: str) -> int:
        for keyword, level in SENIORITY_LEVELS:
            if keyword in title:
                return level
        return DEFAULT_SENIORITY_LEVEL

    def analyze_career_progression(self, experience: List[ExperienceEntry], target_title: Optional[str]) -> CareerProgression:
        if not experience:
            return CareerProgression(score=50, reason="No work experience provided")

        current = self._seniority_level((experience[0].title or "").lower())
        target = self._seniority_level((target_title or "").lower())

        result = CareerProgression(
            score=70, reason="Standard career fit", current_level=current, target_level=target
        )
        if current == target:
            result.score, result.reason = 90, "Lateral move - matching seniority level"
        elif target == current + 1:
            result.score, result.reason, result.is_promotion = 95, "Natural promotion opportunity", True
        elif target == current + 2:
            result.score, result.reason, result.is_promotion = 75, "Stretch role - significant step up", True
        elif current > target + 1:
            result.score, result.reason = 60, "Overqualified - may have retention concerns"
            result.overqualified = True
        elif current < target - 2:
            result.score, result.reason = 40, "Under-experienced for target seniority"
        return result

    def calculate_relevant_years(self, experience: List[ExperienceEntry], target_title: Optional[str]) -> int:
        """Span in years from the earliest to the latest relevant role."""
        if not experience:
            return 0

        relevant = experience
        if target_title:
            relevant = [entry for entry in experience if is_relevant_experience(entry.title, target_title)]
        if not relevant:
            return 0

        earliest: Optional[int] = None
        latest: Optional[int] = None
        for entry in relevant:
            period = entry.period_text()
            if not period:
                continue
            years = [int(match) for match in _YEAR_PATTERN.findall(period)]
            if not years:
                continue
            lowered = period.lower()
            ongoing = "present" in lowered or "current" in lowered or "now" in lowered
            start = min(years)
            end = self.current_year if ongoing else max(years)
            earliest = start if earliest is None else min(earliest, start)
            latest = end if latest is None else max(latest, end)

        if earliest is not None and latest is not None:
            return max(0, latest - earliest)
        return len(relevant) * 2

    def calculate_experience_match(
        self,
        experience: List[ExperienceEntry],
        target_title: Optional[str],
        min_experience: Optional[int],
        max_experience: Optional[int],
    ) -> ExperienceMatch:
        total = self.calculate_relevant_years(experience, target_title)
        minimum = min_experience or 0
        maximum = max_experience or UNBOUNDED_MAX_EXPERIENCE

        if minimum <= total <= maximum:
            score, reason = 100, "Experience within desired range"
        elif total < minimum:
            diff = minimum - total
            if diff <= 1:
                score, reason = 85, "Slightly below minimum experience"
            else:
                score, reason = max(0, 100 - diff * 15), f"{diff} year(s) below minimum"
        else:
            diff = total - maximum
            if diff <= 1:
                score, reason = 95, "Slightly more experienced than required"
            elif diff <= 3:
                score, reason = 85, "Moderately over-experienced"
            elif diff <= 5:
                score, reason = 70, "Significantly over-experienced - retention risk"
            else:
                score, reason = max(50, 70 - (diff - 5) * 5), "Highly over-qualified - high retention risk"

        return ExperienceMatch(
            score=score,
            reason=reason,
            total_years=total,
            required_range=f"{minimum}-{maximum}",
            over_qualified=total > maximum + 2,
        )

    def calculate_industry_alignment(self, experience: List[ExperienceEntry], target_industry: Optional[str]) -> IndustryAlignment:
        if not experience:
            return IndustryAlignment(score=30, reason="No work experience provided")

        if not target_industry:
            target_industry = infer_industry_from_title(experience[0].title)
            if not target_industry:
                return IndustryAlignment(score=60, reason="Industry could not be determined")

        target = target_industry.lower()
        related_industries = INDUSTRY_RELATIONSHIPS.get(target_industry, [])
        matched: List[str] = []
        direct = related = 0

        for entry in experience:
            title_and_description = f"{(entry.title or '').lower()} {(entry.description or '').lower()}"
            if target in title_and_description:
                direct += 1
                matched.append(entry.company)
            elif target in (entry.company or "").lower():
                related += 1
                matched.append(entry.company)
            elif any(industry.lower() in title_and_description for industry in related_industries):
                related += 1
                matched.append(entry.company)

        if direct:
            score = min(100, 70 + direct * 15)
            reason = f"{direct} role(s) in target industry"
        elif related:
            score = min(60, 35 + related * 10)
            reason = f"{related} role(s) in related industries"
        else:
            score = 10
            reason = "No experience in target or related industries"

        return IndustryAlignment(
            score=score,
            reason=reason,
            matched_industries=_unique(matched)[:3],
            direct_matches=direct,
            related_matches=related,
        )

    def calculate_location_match(
        self,
        cv_location: Optional[str],
        job_location: Optional[str],
        location_type: Optional[LocationType],
    ) -> ComponentScore:
        kind = getattr(location_type, "value", location_type) or LocationType.ONSITE.value
        kind = str(kind).lower()

        if kind == LocationType.REMOTE.value:
            return ComponentScore(100, "Remote work - location irrelevant")

        if kind == LocationType.HYBRID.value:
            if cv_location and job_location:
                cv_lower = cv_location.lower()
                job_lower = job_location.lower()
                if cv_lower in job_lower or job_lower in cv_lower:
                    return ComponentScore(100, "Hybrid + location match - ideal")
            return ComponentScore(80, "Hybrid work - location flexible")

        if not job_location:
            return ComponentScore(70, "No location requirement specified")
        if not cv_location or not cv_location.strip():
            return ComponentScore(30, "No location information in CV (onsite role)")
        if locations_match(cv_location, job_location, self._location_threshold):
            return ComponentScore(100, "Location match (onsite role)")

        cv_country = extract_country(cv_location)
        if cv_country and cv_country == extract_country(job_location):
            return ComponentScore(50, "Same country, different city (onsite role)")
        return ComponentScore(20, "Location mismatch for onsite role")

    @staticmethod
    def calculate_education_match(cv_education: Optional[str], required_education: Optional[str]) -> ComponentScore:
        if not required_education:
            return ComponentScore(70, "No education requirement specified")

        required_level = education_level(required_education)
        if required_level == 0:
            return ComponentScore(60, "Could not determine education requirement")

        cv_level = education_level(cv_education)
        if cv_level == 0:
            return ComponentScore(15, "No education information provided")
        if cv_level >= required_level:
            return ComponentScore(100, "Meets or exceeds education requirement")
        if cv_level == required_level - 1:
            return ComponentScore(65, "One level below required education")
        if cv_level == required_level - 2:
            return ComponentScore(35, "Two levels below required education")
        return ComponentScore(15, "Does not meet education requirement")

    @staticmethod
    def generate_recommendation(score: int, skills: SkillsMatch, career: CareerProgression) -> str:
        if score >= 85:
            return "Highly Recommended - Strong match across all criteria. Prioritize for interview."
        if score >= 70:
            return "Recommended - Good match with minor gaps. Worth interviewing."
        if score >= 60:
            if skills.score >= 75:
                return "Consider - Strong skills but gaps elsewhere. May succeed with support."
            return "Consider - Fair match. Assess carefully during interview."
        if score >= 45:
            if career.is_promotion:
                return "Potential - Below threshold but shows growth potential. Consider for development role."
            return "Below Threshold - Significant gaps. Not recommended unless exceptional circumstances."
        return "Not Recommended - Poor match. Unlikely to succeed in this role."


__all__ = [
    "COMPONENT_WEIGHTS",
    "IMatchingService",
    "AdvancedMatchingService",
    "MatchResult",
    "MatchBreakdown",
    "TitleMatch",
    "SkillsMatch",
    "SkillProficiency",
    "CareerProgression",
    "ExperienceMatch",
    "IndustryAlignment",
    "ComponentScore",
    "get_role_adjacency_score",
    "extract_role_keywords",
    "infer_industry_from_title",
    "is_relevant_experience",
    "education_level",
]
