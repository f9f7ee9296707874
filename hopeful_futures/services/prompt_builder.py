"""Instruction strings for the three Gemini tasks.

Each builder emits one line per present attribute (absent or empty ones are
omitted) and ends with the JSON schema the model must return.
"""

from typing import List, Optional, Sequence

from hopeful_futures.schemas.simplified_job import SimplifyJobRequest
from hopeful_futures.schemas.training_plan import TrainingPlanRequest

JOB_SEARCH_SCHEMA = """[
  {
    "id": "unique-id-1",
    "title": "Job Title",
    "employer": "Company or Organization Name",
    "description": "2-3 sentence description of what the job involves, focusing on accessibility and suitability",
    "pay": "Salary or hourly rate (e.g., '$18/hr · 20 hrs/week' or '$35k - $45k/year')",
    "location": "City, State"
  },
  ...
]"""

SIMPLIFY_SCHEMA = """{
  "jobTitle": "string",
  "simplifiedDescription": "string (3-4 short paragraphs max)",
  "keyQualifications": ["string"],
  "accommodations": ["string"],
  "trainingSuggestions": ["string"],
  "tone": "encouraging|neutral|direct"
}"""

TRAINING_PLAN_SCHEMA = """{
  "summary": "string (2-3 sentences)",
  "phases": [
    {
      "title": "string",
      "duration": "string",
      "focus": "string",
      "steps": ["string"],
      "resources": [
        {"title": "string", "url": "https://...", "cost": "optional string"}
      ]
    }
  ],
  "successMetrics": ["string"],
  "encouragement": "string (1-2 sentences)"
}"""


def _line(label: str, value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return f"{label}: {value}" if value else None


def _list_line(label: str, values: Optional[Sequence[str]]) -> Optional[str]:
    values = [v for v in (values or []) if v]
    return f"{label}: {', '.join(values)}" if values else None


def _join(lines: List[Optional[str]]) -> str:
    return "\n".join(line for line in lines if line)


def build_job_search_prompt(
    location: str,
    interests: Optional[Sequence[str]] = None,
    disabilities: Optional[Sequence[str]] = None,
    medical_conditions: Optional[Sequence[str]] = None,
    nearby_cities: Optional[Sequence[str]] = None,
) -> str:
    """Prompt asking for five accessible job listings as a JSON array."""
    sections = _join([
        _line("Location", location),
        _list_line("Nearby cities", nearby_cities),
        _list_line("Interests", interests),
        _list_line("Disabilities or injuries", disabilities),
        _list_line("Medical considerations", medical_conditions),
    ])
    return f"""You are a job matching assistant helping people find employment opportunities. Generate 5 realistic job listings that would be suitable for someone with the following profile:

{sections}

Generate job listings that:
- Are entry-level or accessible positions
- Accommodate the person's disabilities, injuries, or medical conditions
- Match their interests when possible
- Are realistic and actually exist in the job market
- Include appropriate pay ranges for the location
- Have clear, encouraging descriptions

Return ONLY a valid JSON array with this exact structure and no other text:
{JOB_SEARCH_SCHEMA}

Make each job unique and realistic. Focus on jobs like: customer service, receptionist, data entry, warehouse work, retail, security, janitorial, maintenance, cleaning, delivery driver, remote work, part-time positions, or other accessible roles. Ensure the jobs are appropriate for someone with the specified needs."""


def build_simplify_prompt(request: SimplifyJobRequest) -> str:
    """Prompt asking for a plain-language rewrite of one job posting as a JSON object."""
    audience = request.audience_profile
    profile_lines = ""
    if audience is not None:
        profile_lines = _join([
            _line("Location preference", audience.location),
            _line("Preferred schedule", audience.preferred_hours),
            _list_line("Interests", audience.interests),
            _list_line("Disabilities", audience.disabilities),
            _list_line("Medical considerations", audience.medical_conditions),
        ])
    return f"""You are an employment counselor who converts complex job postings into plain-language summaries for people experiencing homelessness, disabilities, or medical conditions.

Job Title: {request.job_title or "Unknown"}
Original Description:
{request.job_description}

Audience Profile:
{profile_lines or "Not provided"}

Respond ONLY with valid JSON in the following structure and no other text:
{SIMPLIFY_SCHEMA}

Avoid duplicate bullet points, keep the reading level friendly, and highlight flexibility, accessibility, and realistic expectations."""


def build_training_plan_prompt(request: TrainingPlanRequest) -> str:
    """Prompt asking for a phased training plan as a JSON object."""
    sections = _join([
        _line("Job target", request.job_title),
        _list_line("Current skills", request.current_skills),
        _list_line("Interests", request.interests),
        _list_line("Disabilities or injuries", request.disabilities),
        _list_line("Medical considerations", request.medical_conditions),
        _line("Learning preferences", request.learning_preferences),
        _line("Time available per week", request.time_available_per_week),
        _line("Location", request.location),
    ])
    return f"""You are a workforce coach. Create a short, encouraging skills plan for someone preparing for employment with potential disabilities or medical needs.

Candidate context:
{sections or "Not provided"}

Return ONLY valid JSON with this schema and no other text:
{TRAINING_PLAN_SCHEMA}

Keep each step realistic for someone balancing housing or health challenges. Recommend mostly free US-based resources. Avoid markdown."""
