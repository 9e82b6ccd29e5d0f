"""Reference tables for CV-to-job matching.

Scores in ``ROLE_ADJACENCY`` run 0-100 and express how transferable
experience in one role is to another: 80+ highly adjacent, 50-79
moderately adjacent, 30-49 weakly adjacent, below 30 distant.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple


INDUSTRY_RELATIONSHIPS: Dict[str, List[str]] = {
    "Software Engineering": [
        "Web Development", "Mobile Development", "Cloud Computing", "DevOps",
        "SaaS", "Technology", "Fintech", "E-commerce",
    ],
    "Data Science": [
        "Machine Learning", "AI", "Analytics", "Business Intelligence",
        "Research", "Statistics", "Big Data",
    ],
    "Finance": [
        "Banking", "Investment", "Accounting", "Insurance", "Fintech",
        "Wealth Management", "Financial Services", "Tax", "Audit", "Bookkeeping",
    ],
    "Marketing": [
        "Digital Marketing", "Advertising", "Brand Management", "PR",
        "Social Media", "Content Marketing", "Growth Marketing",
    ],
    "Healthcare": [
        "Medicine", "Nursing", "Pharmaceuticals", "Medical Research",
        "Healthcare IT", "Biotech", "Health Insurance",
    ],
    "Entertainment": [
        "Performing Arts", "Theatre", "Dance", "Music", "Film", "Television",
        "Media Production", "Broadcasting", "Events", "Arts",
    ],
    "Hospitality": [
        "Hotels", "Restaurants", "Tourism", "Food Service", "Catering",
        "Event Management", "Travel",
    ],
    "Education": [
        "Teaching", "Training", "Academic Research", "EdTech", "Tutoring",
        "Curriculum Development", "University", "Schools",
    ],
    "Construction": [
        "Building", "Engineering", "Architecture", "Civil Engineering",
        "Project Management", "Real Estate Development",
    ],
    "Retail": [
        "Sales", "E-commerce", "Customer Service", "Store Management",
        "Supply Chain", "Merchandising",
    ],
    "Manufacturing": [
        "Production", "Operations", "Quality Control", "Supply Chain",
        "Industrial Engineering", "Logistics",
    ],
}


# Lookup order matters: the first base title that matches wins.
ROLE_ADJACENCY: Dict[str, Dict[str, int]] = {
    "Data Analyst": {
        "Business Analyst": 95, "Data Scientist": 90, "Business Intelligence Analyst": 95,
        "Financial Analyst": 85, "Market Research Analyst": 80,
        "Software Developer": 70, "Product Analyst": 75, "Operations Analyst": 70,
        "Quantitative Analyst": 75, "Research Analyst": 65,
        "Project Manager": 45, "Accountant": 40, "Marketing Analyst": 50,
        "Sales Manager": 20, "HR Manager": 15,
        "Chef": 5, "Dancer": 5, "Journalist": 10,
    },
    "Software Developer": {
        "Software Engineer": 100, "Full Stack Developer": 95, "Backend Developer": 90,
        "Frontend Developer": 90, "Mobile Developer": 85, "DevOps Engineer": 80,
        "Senior Software Engineer": 90, "Junior Software Developer": 95,
        "Data Scientist": 70, "Data Engineer": 75, "System Administrator": 65,
        "QA Engineer": 60, "Product Manager": 55, "Technical Lead": 80,
        "Business Analyst": 40, "IT Support": 35, "Project Manager": 45,
        "Data Analyst": 45, "Graphic Designer": 25, "Marketing Manager": 20,
        "Chef": 5, "Teacher": 10, "Journalist": 10,
    },
    "Software Engineer": {
        "Software Developer": 100, "Senior Software Engineer": 95, "Junior Software Engineer": 95,
        "Full Stack Engineer": 95, "Backend Engineer": 90, "Frontend Engineer": 90,
        "Mobile Engineer": 85, "DevOps Engineer": 80, "Staff Engineer": 90,
        "Data Engineer": 75, "Data Scientist": 70, "System Administrator": 65,
        "QA Engineer": 60, "Technical Lead": 80, "Engineering Manager": 70,
        "Product Manager": 50, "Business Analyst": 40, "Project Manager": 45,
        "IT Support": 35, "Data Analyst": 45, "Graphic Designer": 25,
        "Marketing Manager": 20, "Chef": 5, "Teacher": 10, "Journalist": 10,
    },
    "Financial Analyst": {
        "Investment Analyst": 95, "Equity Research Analyst": 95, "Credit Analyst": 90,
        "Risk Analyst": 85, "Portfolio Manager": 80, "Data Analyst": 75,
        "Business Analyst": 70, "Accountant": 65, "Auditor": 60,
        "Management Consultant": 55, "Operations Analyst": 50, "Product Manager": 40,
        "Sales Analyst": 45, "Software Developer": 25, "Marketing Analyst": 35,
        "Chef": 5, "Journalist": 10, "Teacher": 10,
    },
    "Business Analyst": {
        "Product Manager": 85, "Project Manager": 80, "Management Consultant": 85,
        "Operations Analyst": 90, "Strategy Analyst": 85, "Data Analyst": 80,
        "Financial Analyst": 70, "Business Intelligence Analyst": 75,
        "Process Improvement Analyst": 70, "Software Developer": 50,
        "Marketing Manager": 45, "Sales Operations": 50, "HR Manager": 30,
        "Accountant": 35, "Chef": 5, "Teacher": 10,
    },
    "Systems Analyst": {
        "Lead Systems Analyst": 95, "Senior Systems Analyst": 95, "IT Systems Analyst": 95,
        "Business Systems Analyst": 90, "Applications Analyst": 85, "Systems Administrator": 80,
        "IT Analyst": 85, "Business Analyst": 80, "Data Analyst": 75,
        "Technical Analyst": 80, "Solutions Architect": 70, "IT Consultant": 70,
        "Infrastructure Analyst": 75, "Network Analyst": 65, "Software Developer": 55,
        "Database Administrator": 50, "Project Manager": 50, "QA Engineer": 50,
        "DevOps Engineer": 45, "Product Manager": 35, "Technical Support Engineer": 40,
        "IT Support": 35, "Marketing Manager": 15, "Accountant": 15, "Chef": 5,
    },
    "Marketing Manager": {
        "Digital Marketing Manager": 95, "Brand Manager": 90, "Product Marketing Manager": 85,
        "Content Marketing Manager": 85, "Growth Marketing Manager": 90,
        "Social Media Manager": 75, "Communications Manager": 70, "PR Manager": 70,
        "Sales Manager": 60, "Business Development Manager": 65, "Product Manager": 50,
        "Marketing Analyst": 55, "Graphic Designer": 40, "Data Analyst": 30,
        "Software Developer": 20, "Financial Analyst": 25, "Chef": 5, "Accountant": 10,
    },
    "Project Manager": {
        "Program Manager": 95, "Product Manager": 85, "Scrum Master": 80,
        "Agile Coach": 75, "Delivery Manager": 90, "Business Analyst": 70,
        "Operations Manager": 65, "Technical Lead": 60, "Account Manager": 55,
        "Software Developer": 45, "Data Analyst": 40, "Marketing Manager": 50,
        "HR Manager": 35, "Financial Analyst": 30, "Chef": 5, "Dancer": 5,
    },
    "Chef": {
        "Executive Chef": 100, "Sous Chef": 95, "Line Cook": 85, "Pastry Chef": 80,
        "Kitchen Manager": 90, "Restaurant Manager": 70, "Food Service Manager": 75,
        "Catering Manager": 70, "Culinary Instructor": 60, "Nutritionist": 40,
        "Hotel Manager": 35, "Event Coordinator": 30, "Waiter": 25, "Bartender": 20,
        "Software Developer": 5, "Data Analyst": 5, "Accountant": 5, "Teacher": 10,
    },
    "Teacher": {
        "Educator": 100, "Instructor": 95, "Professor": 90, "Tutor": 85,
        "Curriculum Developer": 80, "Training Specialist": 75, "Education Consultant": 70,
        "Learning & Development Manager": 65, "Academic Advisor": 60,
        "HR Training Coordinator": 50, "Technical Writer": 40, "Content Creator": 45,
        "Project Manager": 30, "Social Worker": 35, "Software Developer": 10,
        "Data Analyst": 10, "Chef": 5,
    },
    "Journalist": {
        "Reporter": 100, "Writer": 90, "Content Writer": 85, "Editor": 80,
        "Copywriter": 75, "Communications Specialist": 70, "PR Specialist": 70,
        "Content Strategist": 65, "Social Media Manager": 60, "Marketing Writer": 65,
        "Technical Writer": 50, "Blogger": 55, "Marketing Manager": 40,
        "Graphic Designer": 30, "Teacher": 25, "Software Developer": 10,
        "Data Analyst": 10, "Chef": 5, "Accountant": 5,
    },
    "Accountant": {
        "Senior Accountant": 100, "Staff Accountant": 95, "Tax Accountant": 90,
        "Cost Accountant": 85, "Management Accountant": 90, "Auditor": 80,
        "Financial Analyst": 70, "Bookkeeper": 65, "Payroll Specialist": 60,
        "Finance Manager": 75, "Business Analyst": 45, "Compliance Officer": 50,
        "Budget Analyst": 55, "Data Analyst": 35, "Operations Manager": 30,
        "Software Developer": 10, "Chef": 5, "Teacher": 10,
    },
    "Nurse": {
        "Registered Nurse": 100, "Clinical Nurse": 95, "ICU Nurse": 90,
        "Emergency Room Nurse": 90, "Pediatric Nurse": 85, "Surgical Nurse": 85,
        "Nurse Practitioner": 75, "Healthcare Administrator": 60, "Medical Assistant": 55,
        "Patient Care Coordinator": 65, "Clinical Coordinator": 70, "Pharmacist": 40,
        "Physical Therapist": 35, "Medical Technician": 45, "Doctor": 30,
        "Social Worker": 25, "Health Insurance Specialist": 20,
        "Software Developer": 5, "Accountant": 5, "Chef": 5,
    },
    "Doctor": {
        "Physician": 100, "Medical Doctor": 100, "Specialist": 90, "Surgeon": 85,
        "General Practitioner": 95, "Medical Researcher": 70, "Clinical Director": 75,
        "Healthcare Administrator": 55, "Medical Consultant": 80, "Pharmacist": 45,
        "Nurse Practitioner": 40, "Medical Professor": 50, "Nurse": 30, "Therapist": 25,
        "Healthcare IT Specialist": 15, "Software Developer": 10, "Teacher": 15,
        "Accountant": 5,
    },
    "Sales Manager": {
        "Sales Director": 95, "Business Development Manager": 90, "Account Manager": 85,
        "Regional Sales Manager": 95, "Sales Team Lead": 90, "Account Executive": 80,
        "Customer Success Manager": 70, "Territory Manager": 75, "Inside Sales Manager": 80,
        "Sales Operations Manager": 70, "Marketing Manager": 50, "Product Manager": 45,
        "Retail Manager": 40, "Business Analyst": 35, "Customer Service Manager": 30,
        "HR Manager": 20, "Operations Manager": 25, "Software Developer": 10,
        "Chef": 5, "Accountant": 10,
    },
    "Graphic Designer": {
        "Visual Designer": 95, "Brand Designer": 90, "Creative Designer": 90,
        "Digital Designer": 85, "Art Director": 80, "UI Designer": 75, "UX Designer": 70,
        "Web Designer": 75, "Illustrator": 70, "Motion Graphics Designer": 65,
        "Marketing Coordinator": 40, "Content Creator": 45, "Photographer": 50,
        "Video Editor": 45, "Frontend Developer": 30, "Product Designer": 35,
        "Marketing Manager": 25, "Software Developer": 15, "Accountant": 5, "Chef": 5,
    },
    "UX Designer": {
        "UI/UX Designer": 100, "Product Designer": 95, "User Experience Researcher": 90,
        "Interaction Designer": 90, "UI Designer": 85, "UX Researcher": 80,
        "Product Manager": 70, "Frontend Developer": 65, "Graphic Designer": 60,
        "Web Designer": 70, "Business Analyst": 45, "Marketing Manager": 40,
        "Software Developer": 50, "Data Analyst": 30, "Project Manager": 35,
        "Content Strategist": 30, "Accountant": 5, "Chef": 5, "Nurse": 5,
    },
    "HR Manager": {
        "Human Resources Manager": 100, "People Operations Manager": 95, "HR Director": 95,
        "Talent Manager": 85, "Employee Relations Manager": 90, "Recruiter": 75,
        "HR Business Partner": 80, "Compensation & Benefits Manager": 70,
        "Training & Development Manager": 65, "Organizational Development Specialist": 70,
        "Office Manager": 50, "Operations Manager": 45, "Project Manager": 40,
        "Learning & Development Specialist": 55, "Business Analyst": 30,
        "Marketing Manager": 25, "Sales Manager": 20, "Software Developer": 10,
        "Chef": 5, "Accountant": 10,
    },
    "Recruiter": {
        "Technical Recruiter": 95, "Talent Acquisition Specialist": 95,
        "Recruitment Consultant": 90, "Headhunter": 85, "Sourcing Specialist": 80,
        "HR Manager": 70, "HR Coordinator": 65, "Talent Manager": 75,
        "Account Manager": 55, "Business Development Representative": 50,
        "Sales Representative": 45, "Customer Success Manager": 40, "Office Manager": 35,
        "Marketing Coordinator": 25, "Project Coordinator": 30,
        "Operations Coordinator": 25, "Software Developer": 15, "Accountant": 10, "Chef": 5,
    },
    "Customer Service Manager": {
        "Customer Support Manager": 100, "Customer Experience Manager": 95,
        "Client Services Manager": 90, "Contact Center Manager": 90,
        "Service Desk Manager": 85, "Customer Success Manager": 80,
        "Operations Manager": 65, "Account Manager": 70, "Team Lead": 75,
        "Quality Assurance Manager": 60, "Sales Manager": 50, "Office Manager": 45,
        "HR Manager": 35, "Retail Manager": 50, "Project Manager": 30,
        "Marketing Manager": 25, "Business Analyst": 30, "Software Developer": 15,
        "Accountant": 10, "Chef": 10,
    },
    "Operations Manager": {
        "Operations Director": 95, "General Manager": 85, "Process Manager": 90,
        "Logistics Manager": 80, "Supply Chain Manager": 75, "Project Manager": 70,
        "Plant Manager": 75, "Production Manager": 70, "Warehouse Manager": 65,
        "Business Analyst": 60, "Account Manager": 50, "Sales Manager": 45,
        "Customer Service Manager": 50, "Quality Manager": 55, "HR Manager": 35,
        "Marketing Manager": 30, "Financial Analyst": 35, "Software Developer": 20,
        "Graphic Designer": 10, "Chef": 10,
    },
    "Civil Engineer": {
        "Structural Engineer": 90, "Construction Engineer": 85, "Project Engineer": 80,
        "Site Engineer": 85, "Design Engineer": 75, "Project Manager": 65,
        "Construction Manager": 70, "Architect": 60, "Surveyor": 55,
        "Engineering Manager": 75, "Mechanical Engineer": 45, "Electrical Engineer": 40,
        "Urban Planner": 50, "Operations Manager": 30, "Business Analyst": 25,
        "Technical Writer": 20, "Software Developer": 15, "Marketing Manager": 10, "Chef": 5,
    },
    "Lawyer": {
        "Attorney": 100, "Legal Counsel": 95, "Corporate Lawyer": 90, "Legal Advisor": 95,
        "Partner": 85, "Paralegal": 70, "Legal Consultant": 80, "Compliance Officer": 65,
        "Contract Manager": 70, "Legal Analyst": 75, "Risk Manager": 50,
        "Business Analyst": 40, "Policy Analyst": 45, "HR Manager": 30,
        "Project Manager": 25, "Accountant": 30, "Software Developer": 10,
        "Graphic Designer": 5, "Chef": 5,
    },
    "Real Estate Agent": {
        "Real Estate Broker": 95, "Property Agent": 95, "Real Estate Consultant": 90,
        "Leasing Agent": 85, "Real Estate Advisor": 90, "Property Manager": 75,
        "Sales Agent": 70, "Account Manager": 65, "Business Development Manager": 60,
        "Mortgage Broker": 55, "Sales Manager": 50, "Customer Success Manager": 45,
        "Marketing Coordinator": 40, "Project Manager": 30, "Operations Manager": 25,
        "HR Manager": 20, "Software Developer": 10, "Accountant": 15, "Chef": 5,
    },
    "Retail Manager": {
        "Store Manager": 100, "Assistant Store Manager": 90, "Retail Operations Manager": 95,
        "District Manager": 85, "Shop Manager": 95, "Sales Manager": 75,
        "Customer Service Manager": 70, "Operations Manager": 65, "Merchandise Manager": 70,
        "Inventory Manager": 60, "Account Manager": 50, "Business Development Manager": 45,
        "Marketing Manager": 40, "Project Manager": 35, "HR Manager": 30,
        "Restaurant Manager": 35, "Software Developer": 10, "Accountant": 15,
        "Graphic Designer": 10,
    },
    "QA Engineer": {
        "Quality Assurance Engineer": 100, "Test Engineer": 95, "QA Analyst": 90,
        "Automation Engineer": 85, "Software Tester": 90, "Software Developer": 70,
        "DevOps Engineer": 65, "Business Analyst": 60, "Technical Support Engineer": 55,
        "Product Manager": 50, "Data Analyst": 45, "Project Manager": 45,
        "Systems Analyst": 50, "IT Support": 35, "Database Administrator": 30,
        "Network Engineer": 30, "Marketing Manager": 10, "HR Manager": 10, "Chef": 5,
    },
    "Data Scientist": {
        "Machine Learning Engineer": 90, "Data Engineer": 85, "Research Scientist": 80,
        "AI Engineer": 85, "Quantitative Analyst": 75, "Data Analyst": 80,
        "Business Intelligence Analyst": 75, "Software Developer": 70, "Statistician": 75,
        "Analytics Manager": 70, "Product Manager": 50, "Business Analyst": 55,
        "Research Analyst": 60, "Financial Analyst": 40, "Project Manager": 35,
        "Operations Analyst": 40, "Marketing Manager": 20, "HR Manager": 15, "Chef": 5,
    },
    "Product Manager": {
        "Senior Product Manager": 100, "Product Owner": 90, "Technical Product Manager": 85,
        "Product Lead": 95, "Associate Product Manager": 90, "Project Manager": 80,
        "Business Analyst": 75, "Product Designer": 70, "Program Manager": 80,
        "Product Marketing Manager": 75, "Software Developer": 55, "UX Designer": 60,
        "Marketing Manager": 50, "Operations Manager": 50, "Data Analyst": 45,
        "Sales Manager": 40, "Customer Success Manager": 45, "Graphic Designer": 25,
        "Accountant": 20, "Chef": 5,
    },
    "Social Worker": {
        "Case Manager": 90, "Clinical Social Worker": 95, "Counselor": 80, "Therapist": 75,
        "Family Support Worker": 85, "Community Outreach Coordinator": 70,
        "Mental Health Specialist": 75, "Program Coordinator": 65,
        "Nonprofit Program Manager": 60, "Healthcare Advocate": 65, "HR Coordinator": 40,
        "Teacher": 35, "Nurse": 40, "Project Manager": 30, "Office Manager": 25,
        "Customer Service Representative": 25, "Software Developer": 10,
        "Accountant": 10, "Chef": 5,
    },
}

# Stripped one after another from the start of a title.
SENIORITY_PREFIXES: Tuple[str, ...] = (
    "senior", "sr", "lead", "principal", "staff", "junior", "jr",
    "associate", "entry level", "mid-level", "chief", "head of", "vp", "vice president",
)

# Highest level first so that "senior manager" resolves to the manager level.
SENIORITY_LEVELS: Tuple[Tuple[str, int], ...] = (
    ("ceo", 10),
    ("chief", 9),
    ("cto", 9),
    ("vp", 8),
    ("director", 7),
    ("head", 7),
    ("principal", 6),
    ("staff", 6),
    ("lead", 5),
    ("manager", 5),
    ("senior", 4),
    ("mid-level", 3),
    ("associate", 2),
    ("junior", 1),
)
DEFAULT_SENIORITY_LEVEL = 3

ROLE_SYNONYMS: Dict[str, List[str]] = {
    "developer": ["engineer", "programmer", "coder", "development"],
    "engineer": ["developer", "engineering"],
    "manager": ["management", "lead", "supervisor", "director"],
    "designer": ["design", "creative", "ux", "ui"],
    "analyst": ["analysis", "analytics", "data"],
    "accountant": ["accounting", "finance", "bookkeeping", "tax"],
    "dancer": ["dance", "performer", "choreographer", "dancing", "performance"],
    "teacher": ["teaching", "instructor", "educator", "tutor"],
    "nurse": ["nursing", "healthcare", "medical"],
    "chef": ["cook", "culinary", "kitchen", "food"],
    "sales": ["salesperson", "account executive", "business development"],
    "marketing": ["marketer", "brand", "campaign"],
}

TITLE_NOISE_WORDS = frozenset({"the", "a", "an", "and", "or", "of", "to", "in", "for", "with"})

# Checked in order; the first keyword found in the target title is its primary role.
ROLE_KEYWORDS: Tuple[str, ...] = (
    "developer", "engineer", "designer", "manager", "analyst", "consultant",
    "architect", "lead", "director", "coordinator", "specialist", "administrator",
    "technician", "sales", "marketing", "accountant", "clerk", "assistant",
    "chef", "waiter", "driver", "receptionist", "officer", "supervisor",
    "representative", "agent", "associate", "executive", "programmer",
)

SKILL_CATEGORIES: Dict[str, List[str]] = {
    "programming": [
        "JavaScript", "Python", "Java", "C#", "Go", "Rust", "PHP", "Ruby",
        "TypeScript", "Swift", "Kotlin", "C++",
    ],
    "frontend": [
        "React", "Vue", "Angular", "HTML", "CSS", "JavaScript", "TypeScript",
        "Next.js", "Svelte", "UI/UX",
    ],
    "backend": [
        "Node.js", "Django", "Flask", "Express", "Spring", "Laravel",
        "Ruby on Rails", ".NET", "API Development",
    ],
    "database": [
        "SQL Server", "MySQL", "PostgreSQL", "MongoDB", "Redis", "Oracle",
        "Cassandra", "DynamoDB",
    ],
    "cloud": [
        "AWS", "Google Cloud", "Azure", "Docker", "Kubernetes", "Terraform",
        "Cloud Architecture",
    ],
    "data": [
        "Python", "R", "SQL", "Pandas", "NumPy", "Tableau", "Power BI",
        "Machine Learning", "Data Analysis",
    ],
    "design": [
        "Figma", "Adobe Photoshop", "Adobe Illustrator", "Sketch", "UI/UX",
        "Prototyping", "Design Systems",
    ],
    "management": [
        "Project Management", "Agile", "Scrum", "Leadership", "Team Management",
        "Stakeholder Management",
    ],
}

# Longest key first, then alphabetical.
EDUCATION_LEVELS: Tuple[Tuple[str, int], ...] = tuple(
    sorted(
        {
            "high school": 1,
            "associate degree": 2,
            "bachelor's degree": 3,
            "bachelor": 3,
            "bcom": 3,
            "bsc": 3,
            "ba": 3,
            "master's degree": 4,
            "master": 4,
            "mba": 4,
            "msc": 4,
            "ma": 4,
            "doctorate": 5,
            "phd": 5,
        }.items(),
        key=lambda item: (-len(item[0]), item[0]),
    )
)

_I = re.IGNORECASE

INDUSTRY_TITLE_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = (
    ("Technology", re.compile(
        r"developer|engineer|programmer|software|devops|architect|frontend|backend|full.?stack"
        r"|tech|\bit\b|data.?scientist|analyst.*data", _I)),
    ("Finance", re.compile(
        r"financial.*analyst|accountant|auditor|banker|finance|investment|trading"
        r"|wealth.*management|cfa|cpa", _I)),
    ("Healthcare", re.compile(
        r"doctor|nurse|physician|surgeon|therapist|medical|healthcare|hospital|clinic|pharmacist", _I)),
    ("Hospitality", re.compile(
        r"chef|cook|waiter|waitress|bartender|sommelier|restaurant|hotel|hospitality|catering", _I)),
    ("Sales & Marketing", re.compile(
        r"sales|marketing|business.*development|account.*executive|sdr|bdr|brand.*manager", _I)),
    ("Education", re.compile(
        r"teacher|professor|instructor|lecturer|tutor|educator|principal|academic", _I)),
    ("Construction", re.compile(
        r"civil.*engineer|mechanical|construction|architect(?!.*software)|builder|contractor|surveyor", _I)),
    ("Legal", re.compile(r"lawyer|attorney|legal|counsel|paralegal|judge", _I)),
    ("Human Resources", re.compile(
        r"hr|human.*resources|recruiter|talent.*acquisition|people.*operations", _I)),
    ("Design", re.compile(
        r"designer(?!.*software)|ui.*ux|graphic|creative|art.*director|illustrator", _I)),
    ("Manufacturing", re.compile(
        r"manufacturing|production|operations.*manager|supply.*chain|logistics|warehouse", _I)),
    ("Customer Service", re.compile(
        r"customer.*service|support|helpdesk|service.*desk|client.*success", _I)),
)


__all__ = [
    "INDUSTRY_RELATIONSHIPS",
    "ROLE_ADJACENCY",
    "SENIORITY_PREFIXES",
    "SENIORITY_LEVELS",
    "DEFAULT_SENIORITY_LEVEL",
    "ROLE_SYNONYMS",
    "TITLE_NOISE_WORDS",
    "ROLE_KEYWORDS",
    "SKILL_CATEGORIES",
    "EDUCATION_LEVELS",
    "INDUSTRY_TITLE_PATTERNS",
]
