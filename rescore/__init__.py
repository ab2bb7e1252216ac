"""
RESCORE - Resume Scoring Engine

Estimates how well a resume would fare against an Applicant Tracking System (ATS)
for one or more job descriptions, and suggests keyword and content improvements.

Architecture:
- Intake Context: Resume and job description records (loading, normalization)
- Targeting Context: Keyword extraction, ATS scoring, keyword optimization, reports
"""

__version__ = "0.1.0"
