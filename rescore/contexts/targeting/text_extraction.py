"""
Flatten resume and job description records into searchable text.

Missing sections contribute empty strings; nothing here raises on
incomplete records.
"""

from rescore.contexts.intake import JobDescription, ResumeRecord


def extract_resume_text(resume: ResumeRecord, lowercase: bool = True) -> str:
    """
    Concatenate the scorable parts of a resume into one string.

    Order: name, role, profile, tech stack, then for each experience entry
    "<title> <company> <bullets>", each project "<name> <desc> <tech>", and
    each education entry "<degree> <school> <details>". Leadership, open source
    and contact details other than the name are not included.

    Args:
        resume: Resume record
        lowercase: Lowercase the result (default: True). The keyword optimizer
            keeps original case so capitalized phrases can still be detected.

    Returns:
        Space-joined resume text
    """
    sections = [
        resume.personal.name,
        resume.personal.role,
        resume.profile,
        " ".join(resume.tech_stack),
        " ".join(f"{e.title} {e.company} {' '.join(e.bullets)}" for e in resume.experience),
        " ".join(f"{p.name} {p.desc} {p.tech}" for p in resume.projects),
        " ".join(f"{e.degree} {e.school} {' '.join(e.details)}" for e in resume.education),
    ]
    text = " ".join(sections)
    return text.lower() if lowercase else text


def extract_job_text(job: JobDescription) -> str:
    """
    Concatenate title, description, requirements and preferred skills (lowercased).

    Explicit job keywords and the company name are not included.
    """
    return (
        f"{job.title} {job.description} "
        f"{' '.join(job.requirements)} {' '.join(job.preferred_skills)}"
    ).lower()
