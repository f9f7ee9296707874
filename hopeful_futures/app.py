"""
Hopeful Futures – Streamlit frontend.
Form view encodes the profile into the ?data= query parameter; the results view
decodes it and renders listings as the aggregator fills them in.
No business logic in layout; orchestration lives in services.
"""

import asyncio
from typing import Any, Dict, List, Optional

import streamlit as st

from hopeful_futures import config
from hopeful_futures.catalogs import CATALOGS
from hopeful_futures.schemas.job_listing import JobListing
from hopeful_futures.schemas.profile import Profile
from hopeful_futures.schemas.simplified_job import SimplifiedJob
from hopeful_futures.schemas.training_plan import TrainingPlan
from hopeful_futures.services.api_client import HopefulFuturesClient
from hopeful_futures.services.location_search import search_locations
from hopeful_futures.services.profile_codec import decode_profile, encode_profile
from hopeful_futures.services.results_aggregator import ResultsAggregator

TOKEN_PARAM = "data"
RESULTS_CACHE_KEY = "results_by_token"

GENDER_LABELS = dict(CATALOGS.genders)
HOMELESS_LABELS = dict(CATALOGS.homeless)
RACE_LABELS = dict(CATALOGS.races)

DECODE_FAILED_MESSAGE = (
    "We couldn't read your application details from this link. "
    "Please go back to the form and submit it again."
)


def _run_async(coro: Any) -> Any:
    """Run a coroutine to completion from Streamlit's synchronous script."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@st.cache_data(ttl=600, show_spinner=False)
def _location_suggestions(query: str) -> List[str]:
    return _run_async(search_locations(query))


def validate_form(
    name: str,
    gender: Optional[str],
    homeless: Optional[str],
    races: List[str],
    location: str,
) -> Dict[str, str]:
    """Field -> message for every missing required answer."""
    errors: Dict[str, str] = {}
    if not name or not name.strip():
        errors["name"] = "Name is required"
    if not gender:
        errors["gender"] = "Please select a gender"
    if not homeless:
        errors["homeless"] = "Please select an option"
    if not races:
        errors["race"] = "Please select at least one race"
    if not location or not location.strip():
        errors["location"] = "Location is required"
    return errors


def _field_error(errors: Dict[str, str], field: str) -> None:
    if field in errors:
        st.caption(f":red[{errors[field]}]")


def _location_input(errors: Dict[str, str]) -> str:
    """Free-text city search with Nominatim suggestions; returns the chosen location."""
    query = st.text_input(
        "Location *",
        placeholder="Search for your city (e.g. Austin)",
        key="location_query",
        help="Type at least two letters and press Enter to see matching cities.",
    )
    suggestions = _location_suggestions(query) if query else []
    location = query
    if suggestions:
        location = st.selectbox(
            "Matching cities",
            options=suggestions,
            key="location_choice",
        )
    _field_error(errors, "location")
    return (location or "").strip()


def render_form() -> None:
    st.title("Hopeful Futures")
    st.markdown("**AI-Powered Job Matching Platform**")
    st.markdown(
        "We curate job descriptions tailored to your needs, including disabilities, injuries, "
        "and circumstances, and suggest training resources to help you prepare."
    )
    st.divider()

    st.subheader("Application Form")
    st.caption('Select all options that apply to you, then click "Submit Application".')

    errors: Dict[str, str] = st.session_state.get("form_errors") or {}

    name = st.text_input("Name *", key="name")
    _field_error(errors, "name")

    gender = st.radio(
        "Gender *",
        options=list(GENDER_LABELS),
        format_func=GENDER_LABELS.get,
        index=None,
        key="gender",
        horizontal=True,
    )
    _field_error(errors, "gender")

    homeless = st.radio(
        "Are you currently experiencing homelessness? *",
        options=list(HOMELESS_LABELS),
        format_func=HOMELESS_LABELS.get,
        index=None,
        key="homeless",
        horizontal=True,
    )
    _field_error(errors, "homeless")

    races = st.multiselect(
        "Race (select all that apply) *",
        options=list(RACE_LABELS),
        format_func=RACE_LABELS.get,
        key="race",
    )
    _field_error(errors, "race")

    interests = st.multiselect("Interests", options=list(CATALOGS.interests), key="interests")
    disabilities = st.multiselect(
        "Disabilities or injuries", options=list(CATALOGS.disabilities), key="disabilities"
    )
    medical_conditions = st.multiselect(
        "Medical conditions", options=list(CATALOGS.medical_conditions), key="medical_conditions"
    )

    location = _location_input(errors)

    if st.button("Submit Application", type="primary", key="submit_btn"):
        errors = validate_form(name, gender, homeless, races, location)
        st.session_state["form_errors"] = errors
        if errors:
            # redraw so each field shows its message
            st.rerun()
        profile = Profile(
            name=name,
            gender=gender,
            homeless=homeless,
            race=races,
            interests=interests,
            disabilities=disabilities,
            medical_conditions=medical_conditions,
            location=location,
        )
        st.query_params[TOKEN_PARAM] = encode_profile(profile)
        st.rerun()


def _back_to_form() -> None:
    st.query_params.clear()
    st.session_state.pop("form_errors", None)


def _render_simplified(simplified: SimplifiedJob) -> None:
    st.markdown("#### Simplified Description")
    st.markdown(simplified.simplified_description or "_No summary available._")
    if simplified.key_qualifications:
        st.markdown("**What you'll need**")
        st.markdown("\n".join(f"- {q}" for q in simplified.key_qualifications))
    st.markdown("#### Accessibility Accommodations")
    if simplified.accommodations:
        st.markdown("\n".join(f"- {a}" for a in simplified.accommodations))
    else:
        st.caption("Ask the employer about accommodations that work for you.")
    if simplified.training_suggestions:
        st.markdown("**Quick ways to prepare**")
        st.markdown("\n".join(f"- {t}" for t in simplified.training_suggestions))


def _render_training_plan(plan: TrainingPlan) -> None:
    st.markdown("#### Personalized Training Plan")
    st.markdown(plan.summary)
    for phase in plan.phases:
        with st.expander(f"{phase.title} · {phase.duration}"):
            if phase.focus:
                st.markdown(f"*{phase.focus}*")
            if phase.steps:
                st.markdown("\n".join(f"1. {s}" for s in phase.steps))
            for resource in phase.resources:
                cost = f" ({resource.cost})" if resource.cost else ""
                st.markdown(f"- [{resource.title}]({resource.url}){cost}")
    if plan.success_metrics:
        st.markdown("**You'll know you're ready when**")
        st.markdown("\n".join(f"- {m}" for m in plan.success_metrics))
    if plan.encouragement:
        st.success(plan.encouragement)


def _render_job(
    job: JobListing,
    simplified: Optional[SimplifiedJob],
    plan: Optional[TrainingPlan],
) -> None:
    st.markdown("---")
    st.markdown(f"### {job.title}")
    st.caption(f"**Employer:** {job.employer} · **Location:** {job.location} · **Pay:** {job.pay}")
    st.markdown(job.description)
    if simplified is not None:
        _render_simplified(simplified)
    else:
        st.caption("Writing a simplified description…")
    if plan is not None:
        _render_training_plan(plan)
    else:
        st.caption("Building your training plan…")


def _render_results_body(state: Dict[str, Any]) -> None:
    if state["error"]:
        st.info(state["error"])
    if state["loading"]:
        done = sum(1 for j in state["jobs"] if j.id in state["simplified"] and j.id in state["plans"])
        st.caption(f"Preparing your matches… {done}/{len(state['jobs'])} ready")
    for job in state["jobs"]:
        _render_job(job, state["simplified"].get(job.id), state["plans"].get(job.id))


def _snapshot(aggregator: ResultsAggregator) -> Dict[str, Any]:
    return {
        "jobs": list(aggregator.jobs),
        "simplified": dict(aggregator.simplified),
        "plans": dict(aggregator.training_plans),
        "error": aggregator.error,
        "loading": aggregator.loading,
    }


async def _aggregate(profile: Profile, placeholder: Any) -> ResultsAggregator:
    def redraw(agg: ResultsAggregator) -> None:
        with placeholder.container():
            _render_results_body(_snapshot(agg))

    async with HopefulFuturesClient(base_url=config.API_BASE_URL) as client:
        aggregator = ResultsAggregator(profile, client, on_update=redraw)
        try:
            await aggregator.run()
        finally:
            aggregator.close()
    return aggregator


def render_results(token: str) -> None:
    st.title("Your Job Matches")
    st.button("← Back to the form", on_click=_back_to_form, key="back_btn")

    profile = decode_profile(token)
    if profile is None:
        st.error(DECODE_FAILED_MESSAGE)
        return

    greeting = f"Hi {profile.name}! " if profile.name else ""
    st.markdown(
        f"{greeting}Based on your profile, we selected job opportunities near "
        f"**{profile.location or 'you'}** and wrote plain-language summaries."
    )

    cache: Dict[str, Dict[str, Any]] = st.session_state.setdefault(RESULTS_CACHE_KEY, {})
    placeholder = st.empty()
    if token in cache:
        with placeholder.container():
            _render_results_body(cache[token])
        return

    aggregator = _run_async(_aggregate(profile, placeholder))
    cache[token] = _snapshot(aggregator)
    with placeholder.container():
        _render_results_body(cache[token])


def render_layout() -> None:
    st.set_page_config(page_title="Hopeful Futures", layout="centered")
    token = st.query_params.get(TOKEN_PARAM)
    if token is not None:
        render_results(token)
    else:
        render_form()


if __name__ == "__main__":
    render_layout()
