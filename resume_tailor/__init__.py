"""Resume Tailor: turn a resume and a job posting into a tailored resume and cover letter."""

__version__ = "1.0.0"
