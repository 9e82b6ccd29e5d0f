"""Normalisation of skills, locations, phone numbers, titles and education.

Parsed CVs and job specifications describe the same things in many ways
("js", "JavaScript", "ECMAScript"; "Joburg", "JHB"). These helpers map
variants to a canonical form and provide the fuzzy comparisons used by
filtering and matching.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from rapidfuzz.distance import Levenshtein

from app.domain.entities.cv import CVMetadata


DEFAULT_MATCH_THRESHOLD = 85

SKILL_SYNONYMS: Dict[str, List[str]] = {
    # Microsoft Office
    "Microsoft Excel": ["excel", "ms excel", "microsoft excel", "excel spreadsheet", "spreadsheet"],
    "Microsoft Word": ["word", "ms word", "microsoft word", "word processing"],
    "Microsoft PowerPoint": ["powerpoint", "ms powerpoint", "microsoft powerpoint", "ppt", "presentation software"],
    "Microsoft Office": ["office", "ms office", "microsoft office", "office suite"],
    "Microsoft Outlook": ["outlook", "ms outlook", "microsoft outlook", "email client"],
    "Microsoft Access": ["access", "ms access", "microsoft access"],
    # Languages
    "JavaScript": ["javascript", "js", "ecmascript", "es6", "es2015"],
    "TypeScript": ["typescript", "ts"],
    "Python": ["python", "python3", "python 3", "py"],
    "Java": ["java", "java se", "java ee"],
    "C#": ["c#", "csharp", "c sharp", "c-sharp"],
    "C++": ["c++", "cpp", "c plus plus"],
    "PHP": ["php", "php7", "php8"],
    "Ruby": ["ruby"],
    "Go": ["go", "golang"],
    "Swift": ["swift", "swift 5"],
    "Kotlin": ["kotlin", "kotlin jvm"],
    "Rust": ["rust", "rust lang"],
    "R": ["r", "r language", "r programming"],
    # Frontend
    "React": ["react", "reactjs", "react.js", "react js"],
    "Vue": ["vue", "vuejs", "vue.js", "vue js"],
    "Angular": ["angular", "angularjs", "angular 2+"],
    "Next.js": ["nextjs", "next.js", "next js"],
    "Svelte": ["svelte", "sveltejs"],
    # Backend
    "Node.js": ["nodejs", "node.js", "node js", "node"],
    "Express": ["express", "expressjs", "express.js"],
    "Django": ["django", "django framework"],
    "Flask": ["flask", "flask framework"],
    "Spring": ["spring", "spring boot", "spring framework"],
    "Laravel": ["laravel", "laravel framework"],
    "Ruby on Rails": ["rails", "ruby on rails", "ror"],
    # Databases
    "SQL Server": ["sql server", "ms sql", "microsoft sql server", "mssql", "sql srv"],
    "MySQL": ["mysql", "my sql"],
    "PostgreSQL": ["postgresql", "postgres", "psql"],
    "MongoDB": ["mongodb", "mongo"],
    "Oracle": ["oracle", "oracle db", "oracle database"],
    "Redis": ["redis", "redis cache"],
    # Cloud
    "AWS": ["aws", "amazon web services", "amazon aws"],
    "Google Cloud": ["gcp", "google cloud platform", "google cloud", "gc"],
    "Azure": ["azure", "microsoft azure", "ms azure"],
    "Heroku": ["heroku", "heroku platform"],
    # DevOps
    "Docker": ["docker", "docker container", "containerization"],
    "Kubernetes": ["kubernetes", "k8s", "k8"],
    "Jenkins": ["jenkins", "jenkins ci"],
    "Git": ["git", "version control", "git scm"],
    "GitHub": ["github", "git hub"],
    "GitLab": ["gitlab", "git lab"],
    "CI/CD": ["ci/cd", "cicd", "continuous integration", "continuous deployment"],
    # Delivery
    "Agile": ["agile", "agile methodology", "agile development"],
    "Scrum": ["scrum", "scrum methodology"],
    "Jira": ["jira", "atlassian jira"],
    "Trello": ["trello", "trello board"],
    # Design
    "Figma": ["figma", "figma design"],
    "Adobe Photoshop": ["photoshop", "adobe photoshop", "ps"],
    "Adobe Illustrator": ["illustrator", "adobe illustrator", "ai"],
    "Sketch": ["sketch", "sketch app"],
    # Data
    "Power BI": ["power bi", "powerbi", "microsoft power bi"],
    "Tableau": ["tableau", "tableau desktop"],
    "SQL": ["sql", "structured query language"],
    # Testing
    "Jest": ["jest", "jest testing"],
    "Selenium": ["selenium", "selenium webdriver"],
    "Cypress": ["cypress", "cypress.io"],
    "JUnit": ["junit", "junit testing"],
}

LOCATION_SYNONYMS: Dict[str, List[str]] = {
    # Countries
    "South Africa": [
        "south africa", "sa", "rsa", "republic of south africa", "s.a.",
        "south african", "suid-afrika", "suid afrika",
    ],
    "United States": [
        "united states", "usa", "us", "u.s.a", "u.s.", "united states of america", "america", "states",
    ],
    "United Kingdom": ["united kingdom", "uk", "u.k.", "great britain", "britain", "england", "gb", "gbr"],
    "United Arab Emirates": ["united arab emirates", "uae", "u.a.e.", "emirates"],
    "Australia": ["australia", "aus", "au", "aussie"],
    "Canada": ["canada", "can", "ca"],
    "Germany": ["germany", "de", "deutschland", "ger"],
    "France": ["france", "fr", "fra"],
    "Netherlands": ["netherlands", "nl", "holland", "nld"],
    "India": ["india", "in", "ind", "bharat"],
    "China": ["china", "cn", "chn", "prc"],
    "Japan": ["japan", "jp", "jpn"],
    "Brazil": ["brazil", "br", "bra", "brasil"],
    "Nigeria": ["nigeria", "ng", "nga"],
    "Kenya": ["kenya", "ke", "ken"],
    "Egypt": ["egypt", "eg", "egy"],
    # South African cities
    "Cape Town": ["cape town", "cpt", "kaapstad", "mother city", "ct", "capetown"],
    "Johannesburg": ["johannesburg", "jburg", "jhb", "joburg", "jo'burg", "jozi", "egoli"],
    "Pretoria": ["pretoria", "pta", "tshwane", "jacaranda city"],
    "Durban": ["durban", "dbn", "ethekwini"],
    "Port Elizabeth": ["port elizabeth", "pe", "gqeberha", "the bay", "nelson mandela bay"],
    "Bloemfontein": ["bloemfontein", "bloem", "mangaung"],
    "East London": ["east london", "el", "buffalo city"],
    "Polokwane": ["polokwane", "pietersburg"],
    "Nelspruit": ["nelspruit", "mbombela"],
    "Kimberley": ["kimberley", "sol plaatje"],
    # South African provinces
    "Western Cape": ["western cape", "wc", "wes-kaap"],
    "Gauteng": ["gauteng", "gp", "gauteng province"],
    "KwaZulu-Natal": ["kwazulu-natal", "kzn", "kwazulu natal"],
    "Eastern Cape": ["eastern cape", "ec", "oos-kaap"],
    "Mpumalanga": ["mpumalanga", "mp"],
    "Limpopo": ["limpopo", "lp"],
    "North West": ["north west", "nw", "noordwes"],
    "Free State": ["free state", "fs", "vrystaat"],
    "Northern Cape": ["northern cape", "nc", "noord-kaap"],
    # US cities
    "New York": ["new york", "ny", "nyc", "new york city", "manhattan"],
    "Los Angeles": ["los angeles", "la", "l.a.", "los angeles ca"],
    "San Francisco": ["san francisco", "sf", "san fran", "bay area"],
    "Chicago": ["chicago", "chi", "chicago il"],
    "Houston": ["houston", "hou", "houston tx"],
    "Boston": ["boston", "bos", "boston ma"],
    "Seattle": ["seattle", "sea", "seattle wa"],
    "Miami": ["miami", "mia", "miami fl"],
    # UK cities
    "London": ["london", "ldn", "greater london"],
    "Manchester": ["manchester", "man", "manc"],
    "Birmingham": ["birmingham", "bham"],
    "Edinburgh": ["edinburgh", "edi"],
    "Glasgow": ["glasgow", "gla"],
    # Australian cities
    "Sydney": ["sydney", "syd"],
    "Melbourne": ["melbourne", "mel"],
    "Brisbane": ["brisbane", "bne"],
    "Perth": ["perth", "per"],
}

JOB_TITLE_SYNONYMS: Dict[str, List[str]] = {
    "Software Engineer": [
        "software engineer", "software developer", "developer", "software dev",
        "engineer", "swe", "programmer", "coder",
    ],
    "Senior Software Engineer": [
        "senior software engineer", "senior developer", "senior engineer",
        "sr software engineer", "sr engineer", "senior dev",
    ],
    "Lead Software Engineer": [
        "lead software engineer", "lead developer", "lead engineer",
        "engineering lead", "tech lead", "technical lead",
    ],
    "Frontend Developer": [
        "frontend developer", "front-end developer", "front end developer",
        "fe developer", "ui developer", "web developer",
    ],
    "Backend Developer": [
        "backend developer", "back-end developer", "back end developer", "be developer", "server developer",
    ],
    "Full Stack Developer": [
        "full stack developer", "fullstack developer", "full-stack developer",
        "full stack engineer", "fullstack engineer",
    ],
    "DevOps Engineer": [
        "devops engineer", "dev ops engineer", "site reliability engineer",
        "sre", "platform engineer", "infrastructure engineer",
    ],
    "Data Scientist": ["data scientist", "ds", "machine learning engineer", "ml engineer"],
    "Data Analyst": ["data analyst", "business analyst", "ba", "analytics specialist"],
    "Data Engineer": ["data engineer", "big data engineer", "etl developer"],
    "UI/UX Designer": [
        "ui/ux designer", "ux designer", "ui designer", "product designer",
        "user experience designer", "interaction designer",
    ],
    "Graphic Designer": ["graphic designer", "visual designer", "graphics designer"],
    "Project Manager": ["project manager", "pm", "program manager", "delivery manager"],
    "Product Manager": ["product manager", "product owner", "po", "product lead"],
    "Engineering Manager": ["engineering manager", "em", "development manager", "dev manager"],
    "Chief Technology Officer": ["chief technology officer", "cto", "head of technology", "vp of engineering"],
    "Digital Marketing Manager": [
        "digital marketing manager", "online marketing manager", "digital marketer", "marketing manager",
    ],
    "Sales Manager": ["sales manager", "account manager", "business development manager", "bdm", "sales lead"],
    "Accountant": ["accountant", "certified accountant", "ca", "chartered accountant"],
    "Financial Analyst": ["financial analyst", "finance analyst", "investment analyst"],
    "HR Manager": ["hr manager", "human resources manager", "people manager", "talent manager"],
    "Recruiter": ["recruiter", "talent acquisition specialist", "ta specialist", "hiring manager"],
}

EDUCATION_SYNONYMS: Dict[str, List[str]] = {
    "High School": [
        "high school", "secondary school", "matric", "matriculation",
        "grade 12", "high school diploma", "hs diploma",
    ],
    "Associate Degree": ["associate degree", "associate's degree", "aa", "as", "2-year degree"],
    "Bachelor's Degree": [
        "bachelor's degree", "bachelor", "bachelors", "ba", "bs", "bsc", "bcom",
        "beng", "undergraduate degree", "4-year degree", "honours degree",
        "b.sc", "b.com", "b.eng", "b.a.",
    ],
    "Master's Degree": [
        "master's degree", "master", "masters", "ma", "ms", "msc", "mba", "mcom",
        "meng", "graduate degree", "postgraduate degree", "m.sc", "m.com", "m.eng", "m.a.",
    ],
    "Doctorate": [
        "doctorate", "doctoral degree", "phd", "ph.d", "ph.d.", "doctor",
        "doctoral", "dphil", "edd", "doctorate degree",
    ],
    "Diploma": ["diploma", "national diploma", "nd", "higher certificate"],
    "Certificate": ["certificate", "certification", "professional certificate"],
}

# Calling codes recognised as an existing international prefix.
COUNTRY_CALLING_CODES = {
    "27": "ZA",
    "1": "US",
    "44": "UK",
    "61": "AU",
    "91": "IN",
    "86": "CN",
    "81": "JP",
    "49": "DE",
    "33": "FR",
    "971": "AE",
}

_COUNTRY_CODES = {
    "south africa": "ZA",
    "germany": "DE",
    "united kingdom": "GB",
    "uk": "GB",
    "united states": "US",
    "usa": "US",
    "canada": "CA",
    "australia": "AU",
    "france": "FR",
    "spain": "ES",
    "italy": "IT",
    "netherlands": "NL",
    "belgium": "BE",
    "switzerland": "CH",
    "austria": "AT",
    "poland": "PL",
    "ireland": "IE",
    "india": "IN",
    "china": "CN",
    "japan": "JP",
}
# Longest names first so "united kingdom" wins over "uk".
_COUNTRIES_BY_SPECIFICITY = sorted(_COUNTRY_CODES.items(), key=lambda item: (-len(item[0]), item[0]))


def _build_lookup(synonyms: Dict[str, List[str]]) -> Dict[str, str]:
    """Variant -> canonical map; the first canonical entry listing a variant wins."""
    lookup: Dict[str, str] = {}
    for canonical, variants in synonyms.items():
        for variant in [*variants, canonical.lower()]:
            lookup.setdefault(variant, canonical)
    return lookup


_SKILL_LOOKUP = _build_lookup(SKILL_SYNONYMS)
_LOCATION_LOOKUP = _build_lookup(LOCATION_SYNONYMS)
_JOB_TITLE_LOOKUP = _build_lookup(JOB_TITLE_SYNONYMS)
_EDUCATION_LOOKUP = _build_lookup(EDUCATION_SYNONYMS)


def _canonical(value: Any, lookup: Dict[str, str]) -> Any:
    if not value or not isinstance(value, str):
        return value
    return lookup.get(value.lower().strip(), value.strip())


def calculate_similarity(first: Optional[str], second: Optional[str]) -> int:
    """Score two strings 0-100: exact 100, containment 90, else edit-distance ratio."""
    if not first or not second:
        return 0

    a = first.lower().strip()
    b = second.lower().strip()
    if a == b:
        return 100
    if a in b or b in a:
        return 90

    longest = max(len(a), len(b))
    distance = Levenshtein.distance(a, b)
    return int(((longest - distance) / longest) * 100 + 0.5)


def normalize_skill(skill: Any) -> Any:
    return _canonical(skill, _SKILL_LOOKUP)


def normalize_skills(skills: Optional[Iterable[Any]]) -> List[str]:
    """Canonicalise skills, dropping blanks and duplicates while preserving order."""
    if not skills or isinstance(skills, str):
        return []

    seen: Dict[str, None] = {}
    for skill in skills:
        normalized = normalize_skill(skill)
        if isinstance(normalized, str) and normalized:
            seen.setdefault(normalized, None)
    return list(seen)


def parse_skill_list(skills: Any) -> List[str]:
    """Accept a list or a comma-separated string of skills."""
    if not skills:
        return []
    if isinstance(skills, str):
        return [part.strip() for part in skills.split(",") if part.strip()]
    return [str(skill) for skill in skills if skill]


def skills_match(cv_skill: str, job_skill: str, threshold: int = DEFAULT_MATCH_THRESHOLD) -> bool:
    normalized_cv = normalize_skill(cv_skill)
    normalized_job = normalize_skill(job_skill)
    if normalized_cv == normalized_job:
        return True
    return calculate_similarity(normalized_cv, normalized_job) >= threshold


def match_skills(
    cv_skills: List[str],
    job_skills: List[str],
    threshold: int = DEFAULT_MATCH_THRESHOLD,
) -> Dict[str, Any]:
    """Pair each job skill with its closest CV skill.

    Returns ``matches`` and ``missing`` lists (each entry carrying the
    required skill, the closest CV skill and its similarity) plus the
    percentage of job skills matched.
    """
    matches: List[Dict[str, Any]] = []
    missing: List[Dict[str, Any]] = []

    for job_skill in job_skills:
        best_match: Optional[str] = None
        best_similarity = 0
        for cv_skill in cv_skills:
            similarity = calculate_similarity(normalize_skill(cv_skill), normalize_skill(job_skill))
            if similarity > best_similarity:
                best_similarity = similarity
                best_match = cv_skill
            if similarity >= threshold:
                break

        if best_similarity >= threshold:
            matches.append({"required": job_skill, "found": best_match, "similarity": best_similarity})
        else:
            missing.append({"required": job_skill, "closest_match": best_match, "similarity": best_similarity})

    percentage = int(len(matches) / len(job_skills) * 100 + 0.5) if job_skills else 0
    return {"matches": matches, "missing": missing, "match_percentage": percentage}


def normalize_location(location: Any) -> Any:
    return _canonical(location, _LOCATION_LOOKUP)


def locations_match(first: Optional[str], second: Optional[str], threshold: int = DEFAULT_MATCH_THRESHOLD) -> bool:
    if not first or not second:
        return False

    normalized_first = normalize_location(first)
    normalized_second = normalize_location(second)
    if normalized_first == normalized_second:
        return True

    lower_first = normalized_first.lower()
    lower_second = normalized_second.lower()
    if lower_first in lower_second or lower_second in lower_first:
        return True

    return calculate_similarity(normalized_first, normalized_second) >= threshold


def extract_country(location: Optional[str]) -> Optional[str]:
    """Return the ISO country code mentioned in ``location``, if any."""
    if not location:
        return None
    lowered = location.lower()
    for name, code in _COUNTRIES_BY_SPECIFICITY:
        if name in lowered:
            return code
    return None


def normalize_phone_number(phone: Any, default_country_code: str = "27") -> Any:
    """Format a phone number as ``+<country><number>``.

    A leading trunk ``0`` is replaced by ``default_country_code``; numbers
    without a recognised calling code get it prefixed.
    """
    if not phone or not isinstance(phone, str):
        return phone

    cleaned = re.sub(r"\D", "", phone)
    if cleaned.startswith("0"):
        cleaned = default_country_code + cleaned[1:]

    if not phone.strip().startswith("+"):
        if not any(cleaned.startswith(code) for code in COUNTRY_CALLING_CODES):
            cleaned = default_country_code + cleaned

    return f"+{cleaned}"


def phone_numbers_match(first: Optional[str], second: Optional[str], default_country_code: str = "27") -> bool:
    """Numbers match when their last nine digits agree."""
    if not first or not second:
        return False
    digits_first = re.sub(r"\D", "", normalize_phone_number(first, default_country_code))
    digits_second = re.sub(r"\D", "", normalize_phone_number(second, default_country_code))
    return digits_first[-9:] == digits_second[-9:]


def normalize_job_title(title: Any) -> Any:
    return _canonical(title, _JOB_TITLE_LOOKUP)


def normalize_education(education: Any) -> Any:
    return _canonical(education, _EDUCATION_LOOKUP)


def normalize_cv_metadata(metadata: CVMetadata) -> CVMetadata:
    """Return a copy of parsed CV data with skills, titles, degrees and contact details canonicalised."""
    return replace(
        metadata,
        location=normalize_location(metadata.location),
        phone=normalize_phone_number(metadata.phone),
        skills=normalize_skills(metadata.skills),
        experience=[
            replace(entry, title=normalize_job_title(entry.title)) for entry in metadata.experience
        ],
        education=[
            replace(entry, degree=normalize_education(entry.degree)) for entry in metadata.education
        ],
    )


__all__ = [
    "DEFAULT_MATCH_THRESHOLD",
    "SKILL_SYNONYMS",
    "LOCATION_SYNONYMS",
    "JOB_TITLE_SYNONYMS",
    "EDUCATION_SYNONYMS",
    "calculate_similarity",
    "normalize_skill",
    "normalize_skills",
    "parse_skill_list",
    "skills_match",
    "match_skills",
    "normalize_location",
    "locations_match",
    "extract_country",
    "normalize_phone_number",
    "phone_numbers_match",
    "normalize_job_title",
    "normalize_education",
    "normalize_cv_metadata",
]
