"""User profile schema extracted from a pasted or uploaded resume."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ContactInfo(BaseModel):
    """How to reach the candidate."""

    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number")
    location: Optional[str] = Field(default=None, description="City, region or 'Remote'")
    website: Optional[str] = Field(default=None, description="Personal website or portfolio URL")
    linkedin: Optional[str] = Field(default=None, description="LinkedIn profile URL")
    github: Optional[str] = Field(default=None, description="GitHub profile URL")


class Skill(BaseModel):
    name: str = Field(..., description="Skill name (e.g. Python, Stakeholder management)")
    category: Optional[str] = Field(default=None, description="Grouping such as Languages, Cloud, Soft skills")
    level: Optional[str] = Field(default=None, description="Proficiency if stated")


class Experience(BaseModel):
    """One position held by the candidate."""

    title: Optional[str] = Field(default=None, description="Job title")
    company: Optional[str] = Field(default=None, description="Employer name")
    location: Optional[str] = Field(default=None, description="Work location")
    employment_type: Optional[str] = Field(default=None, description="Full-time, Contract, Internship, etc.")
    start_date: Optional[str] = Field(default=None, description="Start date as written (string)")
    end_date: Optional[str] = Field(default=None, description="End date as written (string)")
    is_current: bool = Field(default=False, description="True if this is the current position")
    bullets: List[str] = Field(default_factory=list, description="Achievement / responsibility bullets")
    technologies: List[str] = Field(default_factory=list, description="Technologies used in the role")
    keywords: List[str] = Field(default_factory=list, description="Notable keywords for the role")


class Project(BaseModel):
    name: Optional[str] = Field(default=None, description="Project name")
    role: Optional[str] = Field(default=None, description="Candidate's role on the project")
    description: Optional[str] = Field(default=None, description="Short description")
    bullets: List[str] = Field(default_factory=list, description="Highlights")
    technologies: List[str] = Field(default_factory=list, description="Technologies used")
    links: List[str] = Field(default_factory=list, description="Repository or demo URLs")


class Education(BaseModel):
    institution: Optional[str] = Field(default=None, description="School or university")
    degree: Optional[str] = Field(default=None, description="Degree or diploma")
    field_of_study: Optional[str] = Field(default=None, description="Major or field")
    location: Optional[str] = Field(default=None, description="Institution location")
    start_date: Optional[str] = Field(default=None, description="Start date as written (string)")
    end_date: Optional[str] = Field(default=None, description="End date as written (string)")
    notes: Optional[str] = Field(default=None, description="Honours, thesis, GPA, etc.")


class Certification(BaseModel):
    name: Optional[str] = Field(default=None, description="Certification name")
    issuer: Optional[str] = Field(default=None, description="Issuing organisation")
    date: Optional[str] = Field(default=None, description="Date obtained as written (string)")
    url: Optional[str] = Field(default=None, description="Verification URL")


class UserProfile(BaseModel):
    """Structured career data extracted and validated by the Extractor Agent."""

    full_name: str = Field(..., min_length=1, description="Candidate's full name")
    headline: Optional[str] = Field(default=None, description="Professional headline (e.g. 'Senior Backend Engineer')")
    contact_info: Optional[ContactInfo] = Field(default=None, description="Contact details")
    summary: Optional[str] = Field(default=None, description="Professional summary")
    skills: List[Skill] = Field(default_factory=list, description="Skills in the order they appear")
    experience: List[Experience] = Field(default_factory=list, description="Work history, most recent first")
    projects: List[Project] = Field(default_factory=list, description="Notable projects")
    education: List[Education] = Field(default_factory=list, description="Education history")
    certifications: List[Certification] = Field(default_factory=list, description="Certifications")
    interests: List[str] = Field(default_factory=list, description="Interests and hobbies")

    @field_validator("full_name")
    @classmethod
    def _full_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("full_name must not be blank")
        return value
