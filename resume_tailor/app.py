"""
Resume Tailor – Streamlit frontend.
No business logic in layout; orchestration lives in pipeline.session.
"""

import asyncio
from typing import Any, Coroutine, Optional

import streamlit as st

from resume_tailor.config import AVAILABLE_SECTIONS, MODEL_NAME
from resume_tailor.exceptions import ConfigurationError, GenerationNotReady
from resume_tailor.intake.text_extractor import SUPPORTED_EXTENSIONS, extract_text_from_file
from resume_tailor.pipeline.session import Action, TailoringSession
from resume_tailor.schemas import ExtractedRecord, JobDescription, TargetLength, Tone, UserProfile
from resume_tailor.services.exports import Artifact, build_cover_letter_artifact, build_resume_artifact
from resume_tailor.services.model_client import get_model_client
from resume_tailor.utils.logger import quiet_noisy_loggers

TARGET_LENGTH_LABELS = {
    TargetLength.ONE_PAGE: "1 Page",
    TargetLength.TWO_PAGE: "2 Pages",
    TargetLength.UNRESTRICTED: "Unrestricted",
}
TONE_LABELS = {
    Tone.NEUTRAL: "Neutral (Standard)",
    Tone.CONCISE: "Concise & Direct",
    Tone.TECHNICAL: "Technical & Detailed",
    Tone.STORYTELLING: "Storytelling",
}


def _run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run a session action from Streamlit's synchronous script; let leftover tasks finish before closing."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        pending = asyncio.all_tasks(loop)
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
        loop.close()


def _get_session() -> Optional[TailoringSession]:
    """One TailoringSession per browser session; None when the API key is missing."""
    if "session" not in st.session_state:
        try:
            st.session_state["session"] = TailoringSession(get_model_client())
        except ConfigurationError as e:
            st.error(str(e))
            return None
    return st.session_state["session"]


def _render_record_preview(record: Optional[ExtractedRecord], label: str) -> None:
    """Compact preview of an extracted record."""
    if record is None:
        return
    with st.expander(label, expanded=False):
        if isinstance(record, UserProfile):
            st.markdown(f"**{record.full_name}**" + (f" · {record.headline}" if record.headline else ""))
            st.caption(
                f"{len(record.experience)} experience · {len(record.projects)} projects · "
                f"{len(record.skills)} skills · {len(record.education)} education"
            )
        elif isinstance(record, JobDescription):
            st.markdown(f"**{record.title}** at **{record.company}**")
            if record.keywords:
                st.markdown(" ".join(f"`{k}`" for k in record.keywords[:12]))
        st.json(record.model_dump(mode="json", exclude={"pasted_text"}, exclude_none=True))


def _download(artifact: Artifact, label: str, key: str) -> None:
    st.download_button(label, data=artifact.data, file_name=artifact.file_name, mime=artifact.mime, key=key)


def _render_profile_step(session: TailoringSession) -> None:
    st.subheader("1. Your Profile")
    st.caption("Paste your existing resume or CV text, or upload a file, to extract your career data.")
    uploaded = st.file_uploader(
        "Upload resume",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
        key="resume_file",
    )
    if uploaded is not None and st.session_state.get("resume_file_name") != uploaded.name:
        text = extract_text_from_file(uploaded.getvalue(), uploaded.name)
        st.session_state["resume_file_name"] = uploaded.name
        if text:
            st.session_state["profile_text"] = text
        else:
            st.warning("Could not read text from that file. Paste your resume instead.")

    profile_text = st.text_area(
        "Resume text",
        key="profile_text",
        height=200,
        placeholder="Paste your full resume here (work history, skills, education)...",
    )
    if st.button("Parse Profile", key="parse_profile_btn", disabled=not profile_text.strip()):
        with st.spinner("Extracting..."):
            _run_async(session.parse_profile(profile_text))
    _render_record_preview(session.profile, "Extracted Profile")


def _render_job_step(session: TailoringSession) -> None:
    st.subheader("2. Target Job")
    st.caption("Paste the job description you are applying for, or import it from a public URL.")
    job_text = st.text_area(
        "Job posting",
        key="job_text",
        height=200,
        placeholder="Paste the job posting here...",
    )
    col1, col2 = st.columns([3, 1])
    with col1:
        job_url = st.text_input("Job posting URL", key="job_url", placeholder="https://...")
    with col2:
        import_clicked = st.button("Import URL", key="import_job_btn", disabled=not job_url.strip())
    if st.button("Analyze Job", key="parse_job_btn", disabled=not job_text.strip()):
        with st.spinner("Analyzing..."):
            _run_async(session.parse_job(job_text))
    elif import_clicked:
        with st.spinner("Fetching and analyzing..."):
            _run_async(session.import_job_from_url(job_url))
    _render_record_preview(session.job, "Extracted Job Details")


def _render_settings_step(session: TailoringSession) -> None:
    settings = session.settings
    with st.expander("3. Tailoring Settings", expanded=False):
        col1, col2 = st.columns(2)
        with col1:
            target_length = st.selectbox(
                "Target Length",
                options=list(TargetLength),
                index=list(TargetLength).index(settings.target_length),
                format_func=TARGET_LENGTH_LABELS.get,
            )
            skills_max = st.number_input("Max Skills", min_value=0, max_value=50, value=settings.skills_max_count)
            projects_max = st.number_input(
                "Max Projects", min_value=0, max_value=10, value=settings.projects_max_items
            )
        with col2:
            tone = st.selectbox(
                "Tone",
                options=list(TONE_LABELS),
                index=list(TONE_LABELS).index(settings.tone),
                format_func=TONE_LABELS.get,
            )
            experience_max = st.number_input(
                "Max Experience Entries", min_value=0, max_value=20, value=settings.experience_max_items
            )
        sections = st.multiselect("Included Sections", options=AVAILABLE_SECTIONS, default=list(settings.include_sections))
        comments = st.checkbox("Show keyword match comments", value=settings.show_keyword_match_comments)
        cover_letter = st.checkbox("Generate cover letter", value=settings.generate_cover_letter)

    session.update_settings(
        target_length=target_length,
        tone=tone,
        skills_max_count=int(skills_max),
        experience_max_items=int(experience_max),
        projects_max_items=int(projects_max),
        include_sections=sections,
        show_keyword_match_comments=comments,
        generate_cover_letter=cover_letter,
    )


def _render_results(session: TailoringSession) -> None:
    resume, letter = session.resume, session.cover_letter
    if resume is None:
        return
    st.divider()
    side, main = st.columns([1, 3])
    with side:
        summary = resume.match_summary
        st.metric("Analysis", f"{summary.overall_score} / 100")
        if summary.is_placeholder:
            st.caption("Estimated score; not computed from your documents.")
        if summary.top_matched_keywords:
            st.markdown("**Keyword Boosts**")
            st.markdown(" ".join(f"`{k}`" for k in summary.top_matched_keywords))
    with main:
        tab_names = ["Resume"] + (["Cover Letter"] if letter else [])
        tabs = st.tabs(tab_names)
        with tabs[0]:
            _download(build_resume_artifact(resume, session.job), "Download .md", "download_resume")
            st.code(resume.markdown, language="markdown")
        if letter:
            with tabs[1]:
                _download(build_cover_letter_artifact(letter, session.job), "Download .md", "download_cover_letter")
                st.markdown(letter.content)


def render_layout() -> None:
    """Streamlit page layout; extraction and generation go through the session."""
    quiet_noisy_loggers()
    st.set_page_config(page_title="Resume Tailor", layout="wide")
    st.title("Resume Tailor")
    st.markdown(f"*AI career assistant · {MODEL_NAME}*")
    st.divider()

    session = _get_session()
    if session is None:
        return

    _render_profile_step(session)
    _render_job_step(session)
    _render_settings_step(session)

    if st.button(
        "Tailor My Application",
        type="primary",
        key="generate_btn",
        disabled=not session.can_generate or session.is_busy(Action.GENERATE),
    ):
        with st.spinner("Crafting your application..."):
            try:
                _run_async(session.generate())
            except GenerationNotReady as e:
                st.warning(str(e))

    for message in session.failures().values():
        st.error(message)

    _render_results(session)


if __name__ == "__main__":
    render_layout()
