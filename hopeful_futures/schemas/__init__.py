"""Schema exports."""

from .job_listing import JobListing, JobSearchRequest, JobSearchResponse
from .profile import Gender, HomelessStatus, Profile, Race
from .simplified_job import AudienceProfile, Provider, SimplifiedJob, SimplifyJobRequest, Tone
from .training_plan import TrainingPhase, TrainingPlan, TrainingPlanRequest, TrainingResource

__all__ = [
    "Profile",
    "Gender",
    "HomelessStatus",
    "Race",
    "JobListing",
    "JobSearchRequest",
    "JobSearchResponse",
    "AudienceProfile",
    "SimplifyJobRequest",
    "SimplifiedJob",
    "Tone",
    "Provider",
    "TrainingResource",
    "TrainingPhase",
    "TrainingPlan",
    "TrainingPlanRequest",
]
