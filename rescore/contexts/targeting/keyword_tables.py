"""
Static keyword tables for ATS scoring and keyword optimization.

These are embedded constants, not configuration: the scorers and the
optimizer read them but never modify them.
"""

from typing import Dict, List

# Generic resume terms every ATS scan rewards; appended to each job's keywords
COMMON_ATS_KEYWORDS: List[str] = [
    "experience",
    "skills",
    "education",
    "certification",
    "project",
    "leadership",
    "management",
    "development",
    "analysis",
    "design",
    "implementation",
    "collaboration",
    "communication",
    "problem-solving",
]

# Keyword categories of an industry keyword set, in lookup order
KEYWORD_SET_CATEGORIES = ("technical", "soft", "industry", "roles", "certifications")

INDUSTRY_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "technology": {
        "technical": [
            "JavaScript", "Python", "Java", "React", "Node.js", "AWS", "Docker",
            "Kubernetes", "Git", "SQL", "NoSQL", "API", "REST", "GraphQL",
            "Microservices", "CI/CD", "DevOps", "Agile", "Scrum", "TDD",
            "Machine Learning", "AI", "Data Science", "Cloud Computing",
            "Cybersecurity", "Blockchain", "IoT", "Mobile Development",
        ],
        "soft": [
            "Problem Solving", "Critical Thinking", "Communication", "Leadership",
            "Team Collaboration", "Project Management", "Analytical Skills",
            "Innovation", "Adaptability", "Time Management",
        ],
        "industry": [
            "Software Development", "Web Development", "Mobile Apps", "SaaS",
            "Fintech", "E-commerce", "Healthcare Tech", "EdTech", "Gaming",
            "Enterprise Software", "Startup", "Digital Transformation",
        ],
        "roles": [
            "Software Engineer", "Full Stack Developer", "Frontend Developer",
            "Backend Developer", "DevOps Engineer", "Data Scientist",
            "Product Manager", "Technical Lead", "Architect", "CTO",
        ],
        "certifications": [
            "AWS Certified", "Google Cloud", "Azure", "Kubernetes Certified",
            "Scrum Master", "PMP", "CISSP", "CompTIA", "Oracle Certified",
        ],
    },
    "marketing": {
        "technical": [
            "Google Analytics", "SEO", "SEM", "Social Media Marketing",
            "Content Marketing", "Email Marketing", "Marketing Automation",
            "CRM", "Salesforce", "HubSpot", "Adobe Creative Suite",
            "Google Ads", "Facebook Ads", "LinkedIn Ads", "A/B Testing",
        ],
        "soft": [
            "Creativity", "Strategic Thinking", "Communication", "Brand Management",
            "Customer Focus", "Data Analysis", "Project Management",
            "Storytelling", "Negotiation", "Relationship Building",
        ],
        "industry": [
            "Digital Marketing", "Brand Marketing", "Performance Marketing",
            "Content Strategy", "Growth Marketing", "Influencer Marketing",
            "Event Marketing", "Product Marketing", "B2B Marketing", "B2C Marketing",
        ],
        "roles": [
            "Marketing Manager", "Digital Marketing Specialist", "Content Manager",
            "SEO Specialist", "Social Media Manager", "Brand Manager",
            "Growth Hacker", "Marketing Director", "CMO",
        ],
        "certifications": [
            "Google Ads Certified", "Google Analytics", "HubSpot Certified",
            "Facebook Blueprint", "Salesforce Certified", "Adobe Certified",
        ],
    },
    "finance": {
        "technical": [
            "Financial Modeling", "Excel", "SQL", "Python", "R", "Tableau",
            "Bloomberg Terminal", "SAP", "QuickBooks", "Financial Analysis",
            "Risk Management", "Portfolio Management", "Trading", "Derivatives",
        ],
        "soft": [
            "Analytical Skills", "Attention to Detail", "Problem Solving",
            "Communication", "Ethics", "Decision Making", "Time Management",
            "Leadership", "Negotiation", "Client Relations",
        ],
        "industry": [
            "Investment Banking", "Private Equity", "Hedge Funds", "Asset Management",
            "Corporate Finance", "Financial Planning", "Insurance", "Banking",
            "Fintech", "Cryptocurrency", "Real Estate Finance",
        ],
        "roles": [
            "Financial Analyst", "Investment Banker", "Portfolio Manager",
            "Risk Analyst", "Financial Advisor", "Controller", "CFO",
            "Quantitative Analyst", "Credit Analyst",
        ],
        "certifications": [
            "CFA", "CPA", "FRM", "PMP", "Series 7", "Series 66",
            "CAIA", "CFP", "CIA", "CISA",
        ],
    },
}

EMERGING_TECH_KEYWORDS: List[str] = [
    "Artificial Intelligence", "Machine Learning", "Deep Learning",
    "Natural Language Processing", "Computer Vision", "Blockchain",
    "Cryptocurrency", "NFT", "Web3", "Metaverse", "AR/VR",
    "Quantum Computing", "Edge Computing", "Serverless",
    "Microservices", "Container Orchestration", "GitOps",
]

ACTION_VERBS: List[str] = [
    "Developed", "Implemented", "Designed", "Created", "Built", "Led",
    "Managed", "Optimized", "Improved", "Increased", "Reduced",
    "Streamlined", "Automated", "Collaborated", "Delivered",
    "Achieved", "Exceeded", "Transformed", "Innovated", "Scaled",
]

PROJECT_VERBS: List[str] = ["developed", "built", "created", "designed", "implemented"]

ROLE_KEYWORDS: Dict[str, List[str]] = {
    "software engineer": ["software", "engineer", "development", "programming", "coding"],
    "data scientist": ["data", "science", "analytics", "machine learning", "statistics"],
    "product manager": ["product", "management", "strategy", "roadmap", "stakeholder"],
    "marketing manager": ["marketing", "campaign", "brand", "digital", "growth"],
}

SOFT_SKILLS: List[str] = [
    "leadership", "communication", "teamwork", "problem solving",
    "critical thinking", "creativity", "adaptability", "time management",
    "project management", "analytical", "collaboration",
]


def get_industry_keywords(industry: str) -> List[str]:
    """
    Flatten one industry's keyword set into a single list.

    Args:
        industry: Industry name (case-insensitive, e.g. "Technology")

    Returns:
        technical + soft + industry + roles + certifications keywords,
        or an empty list for unknown industries
    """
    keyword_set = INDUSTRY_KEYWORDS.get(industry.lower())
    if not keyword_set:
        return []
    return [keyword for category in KEYWORD_SET_CATEGORIES for keyword in keyword_set[category]]
