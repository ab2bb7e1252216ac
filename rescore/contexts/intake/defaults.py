"""
Built-in resume data.

The resume the command-line tools score when no resume file is given
(neither --resume nor RESUME_PATH). Stored in the camelCase resume JSON shape
accepted by ResumeRecord.from_dict().
"""

from typing import Any, Dict

DEFAULT_RESUME: Dict[str, Any] = {
    "personal": {
        "name": "Jordan Avery",
        "role": "Senior Full Stack Engineer",
        "location": "Austin, TX",
        "email": "jordan.avery@example.com",
        "phone": "+1 (512) 555-0142",
        "linkedin": "linkedin.com/in/jordan-avery",
        "github": "github.com/javery",
        "portfolio": "javery.dev",
    },
    "techStack": [
        "TypeScript",
        "JavaScript",
        "React",
        "Node.js",
        "Python",
        "PostgreSQL",
        "Docker",
        "AWS",
        "GraphQL",
        "Git",
    ],
    "profile": (
        "Full stack engineer with experience in building web platforms end to end. "
        "Focused on developer experience, reliable delivery and clear communication "
        "across product and design teams."
    ),
    "experience": [
        {
            "company": "Brightlane Health",
            "title": "Senior Software Engineer",
            "dates": "2021 — 2024",
            "bullets": [
                "Led development of a patient scheduling platform using React and Node.js",
                "Designed a GraphQL API layer that reduced client round trips by 40%",
                "Implemented CI/CD pipelines with Docker and GitHub Actions",
                "Mentored four engineers through code review and pairing",
            ],
        },
        {
            "company": "Northwind Logistics",
            "title": "Software Engineer",
            "dates": "2018 — 2021",
            "bullets": [
                "Built shipment tracking dashboards with TypeScript and PostgreSQL",
                "Automated nightly data imports, cutting manual work by 10 hours a week",
                "Collaborated with operations analysts on reporting requirements",
            ],
        },
        {
            "company": "Pixelforge Studio",
            "title": "Junior Web Developer",
            "dates": "2016 — 2018",
            "bullets": [
                "Developed marketing sites and landing pages for agency clients",
                "Improved page load times through asset bundling and caching",
            ],
        },
    ],
    "projects": [
        {
            "name": "Ledgerlite",
            "desc": "Open source budgeting app with offline sync and encrypted backups",
            "tech": "React Native, SQLite, Node.js",
        },
        {
            "name": "Shipcheck",
            "desc": "CLI that validates deployment manifests before release",
            "tech": "Python, Docker",
        },
    ],
    "leadership": [
        "Organizer, Austin JavaScript meetup (2019 — present)",
        "Engineering interview panel lead at Brightlane Health",
    ],
    "openSource": [
        "Maintainer of a React form-validation library",
        "Contributor to a Node.js logging toolkit",
    ],
    "education": [
        {
            "degree": "B.S. Computer Science",
            "school": "University of Texas at Austin",
            "dates": "2012 — 2016",
            "details": ["Minor in Mathematics", "Capstone: real-time transit map"],
        }
    ],
}
